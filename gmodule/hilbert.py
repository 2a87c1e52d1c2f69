"""Hilbert series of graded modules presented by monomial ideals.

Each row of a module contributes the Hilbert series numerator of the
quotient of the ring by the monomial ideal of leading terms in that row,
shifted by the degree of the row.  The combined numerator is then divided
by ``1 - t`` until its value at ``t = 1`` is non-zero.  That value is the
degree, and the number of divisions is the codimension.
"""

from __future__ import annotations

from math import comb
from typing import Sequence

from gmodule.monideal import MonomialIdeal

GENFUN_SIZE = 100


class DegreeBoundError(ValueError):
    """Raised when a series needs more coefficients than it can hold."""


class HilbertFunction:
    """Numerator of a Hilbert series, with its codimension and degree."""

    def __init__(self, deg0: int = 0, size: int = GENFUN_SIZE):
        if size < 1:
            raise ValueError("series size must be positive")
        self.size = size
        self.codim = 0
        self.deg0 = deg0
        self.degree = 0
        self.genfun = [0] * size

    def __repr__(self) -> str:
        return (
            f"HilbertFunction(deg0={self.deg0}, codim={self.codim}, "
            f"degree={self.degree})"
        )

    def add(self, gf: Sequence[int], deg0: int) -> None:
        """Add the series ``gf`` whose constant term sits in degree ``deg0``.

        ``deg0`` may not be below the starting degree of this series, and
        nothing may be added once the series has been divided.
        """
        if deg0 < self.deg0:
            raise ValueError("series starts below the degree of this function")
        if self.codim != 0:
            raise ValueError("cannot add to a series that has been divided")
        gf = list(gf) + [0] * max(self.size - len(gf), 0)
        diff = deg0 - self.deg0
        keep = max(self.size - diff, 0)
        for i, value in enumerate(gf[:keep]):
            self.genfun[diff + i] += value
            self.degree += value
        if any(value != 0 for value in gf[keep:]):
            raise DegreeBoundError("degree bound exceeded")

    def divide(self) -> None:
        """Divide the numerator by ``1 - t`` once."""
        g = self.genfun
        lo = self.codim
        g[-1] = -g[-1]
        self.degree += g[-1]
        for j in range(self.size - 2, lo - 1, -1):
            g[j] = g[j + 1] - g[j]
            self.degree += g[j]
        self.codim += 1

    def divide_all(self) -> None:
        """Divide by ``1 - t`` until the numerator no longer vanishes at 1."""
        while self.degree == 0 and self.codim < self.size:
            self.divide()

    def genus(self) -> int:
        """The genus computed from the divided numerator."""
        lo = self.codim
        return 1 + sum(
            (i - lo - 1) * n for i, n in enumerate(self.genfun) if i >= lo and n != 0
        )

    def format(self) -> str:
        """Write the non-zero terms, then codimension and degree when known."""
        out = ["\n"]
        for i in range(self.codim, self.size):
            n = self.genfun[i]
            if n != 0:
                out.append(f"{n:7d} t {i + self.deg0 - self.codim:2d}\n")
        if self.degree != 0:
            out.append("\n")
            out.append(f"codimension = {self.codim}\n")
            out.append(f"degree      = {self.degree}\n")
        return "".join(out)


def numerator_series(ideal: MonomialIdeal, size: int = GENFUN_SIZE) -> list[int]:
    """Coefficients of the Hilbert series numerator of the ring modulo ``ideal``.

    Raises DegreeBoundError when a term has degree ``size`` or more.
    """
    genfun = [0] * size
    genfun[0] = 1
    for exps, plus in ideal.inclusion_exclusion():
        deg = sum(exps)
        if deg >= size:
            raise DegreeBoundError("degree bound exceeded")
        genfun[deg] += 1 if plus else -1
    return genfun


def hilbert_function(
    row_ideals: Sequence[MonomialIdeal],
    row_degrees: Sequence[int],
    size: int = GENFUN_SIZE,
) -> HilbertFunction:
    """Combine the numerators of every row, shifted by the row degrees."""
    if len(row_ideals) != len(row_degrees):
        raise ValueError("one monomial ideal is needed for each row")
    hf = HilbertFunction(min(row_degrees, default=0), size)
    for ideal, deg in reversed(list(zip(row_ideals, row_degrees))):
        hf.add(numerator_series(ideal, size), deg)
    return hf


def describe(
    row_ideals: Sequence[MonomialIdeal],
    row_degrees: Sequence[int],
    size: int = GENFUN_SIZE,
) -> str:
    """Report the numerator, the divided numerator, codimension, degree and genus."""
    hf = hilbert_function(row_ideals, row_degrees, size)
    text = hf.format()
    hf.divide_all()
    text += hf.format()
    return text + f"genus       = {hf.genus()}\n"


def tull_vector(ideal: MonomialIdeal, nvars: int, d: int) -> list[int]:
    """Sum, over the signed terms of the numerator up to degree ``d``, of weighted exponents.

    A term of degree ``d - e`` adds ``comb(nvars-1+e, e) * a + comb(nvars-1+e, e-1)``
    to each exponent entry ``a``, with the sign opposite to the term's.
    """
    if ideal.nvars != nvars:
        raise ValueError("ideal has the wrong number of variables")
    result = [0] * nvars
    for exps, plus in ideal.inclusion_exclusion():
        dd = sum(exps)
        if dd > d:
            continue
        e = d - dd
        c1 = comb(nvars - 1 + e, e)
        c2 = 0 if e == 0 else comb(nvars - 1 + e, e - 1)
        s = -1 if plus else 1
        for j, a in enumerate(exps):
            result[j] += s * (c1 * a + c2)
    return result