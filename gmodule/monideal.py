"""Monomial ideals given by their minimal generators, and S-pair bookkeeping.

A :class:`MonomialIdeal` keeps a minimal set of exponent vectors, each of
which may carry an arbitrary payload (a "bag"), for instance the basis
element whose leading monomial it is.  A :class:`PairTable` keeps one such
ideal for every component of a free module, together with the pending
pairs of basis elements sorted by the degree of their least common multiple.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterable, Iterator, Sequence

Exps = tuple[int, ...]


def _divides(a: Exps, b: Exps) -> bool:
    return all(x <= y for x, y in zip(a, b))


def _lcm(a: Exps, b: Exps) -> Exps:
    return tuple(max(x, y) for x, y in zip(a, b))


class MonomialIdeal:
    """A monomial ideal in ``nvars`` variables, kept by minimal generators.

    Generators are held in ascending order of their exponent vectors.
    """

    def __init__(self, nvars: int, generators: Iterable[Sequence[int]] = ()):
        if nvars < 0:
            raise ValueError("number of variables must be non-negative")
        self.nvars = nvars
        self._gens: list[tuple[Exps, Any]] = []
        for exps in generators:
            self.adjoin(exps)

    def _check(self, exps: Iterable[int]) -> Exps:
        exps = tuple(exps)
        if len(exps) != self.nvars:
            raise ValueError(f"expected {self.nvars} exponents, got {len(exps)}")
        if any(e < 0 for e in exps):
            raise ValueError("exponents must be non-negative")
        return exps

    def __len__(self) -> int:
        return len(self._gens)

    def __iter__(self) -> Iterator[Exps]:
        return (exps for exps, _ in self._gens)

    def __repr__(self) -> str:
        return f"MonomialIdeal({self.nvars}, {list(self)})"

    def generators(self) -> list[tuple[Exps, Any]]:
        """``(exps, bag)`` for every minimal generator, in ascending order."""
        return list(self._gens)

    def _insert(self, exps: Exps, bag: Any) -> None:
        self._gens.append((exps, bag))
        self._gens.sort(key=lambda item: item[0])

    def divides(self, exps: Sequence[int]) -> bool:
        """True when the monomial ``exps`` lies in the ideal."""
        exps = self._check(exps)
        return any(_divides(g, exps) for g, _ in self._gens)

    def adjoin(self, exps: Sequence[int], bag: Any = None) -> bool:
        """Add the monomial ``exps`` to the ideal.

        Returns True, and changes nothing, when it already lies in the ideal.
        Otherwise it becomes a generator carrying ``bag``, the generators it
        divides are dropped, and False is returned.
        """
        exps = self._check(exps)
        if any(_divides(g, exps) for g, _ in self._gens):
            return True
        self._gens = [(g, b) for g, b in self._gens if not _divides(exps, g)]
        self._insert(exps, bag)
        return False

    def find_divisor(self, exps: Sequence[int]) -> tuple[Any, Exps] | None:
        """``(bag, quotient)`` for the first generator dividing ``exps``, else None."""
        exps = self._check(exps)
        for g, bag in self._gens:
            if _divides(g, exps):
                return bag, tuple(a - b for a, b in zip(exps, g))
        return None

    def _lcm_into(self, target: MonomialIdeal, exps: Exps, exclude: Exps | None) -> None:
        for g, bag in self._gens:
            if exclude is not None and g == exclude:
                continue
            target.adjoin(_lcm(exps, g), bag)

    def lcm_ideal(
        self, exps: Sequence[int], exclude: Sequence[int] | None = None
    ) -> MonomialIdeal:
        """The ideal generated by ``lcm(exps, g)`` for the generators ``g``.

        Each new generator carries the bag of the generator it came from.
        The generator equal to ``exclude``, if given, is skipped.
        """
        exps = self._check(exps)
        skip = self._check(exclude) if exclude is not None else None
        result = MonomialIdeal(self.nvars)
        self._lcm_into(result, exps, skip)
        return result

    def inclusion_exclusion(self) -> Iterator[tuple[Exps, bool]]:
        """Signed monomials whose sum, plus 1, is the numerator of the Hilbert series.

        Each item is ``(exps, plus)``; the numerator of the multigraded series
        of the quotient ring is ``1 + sum(+x^exps if plus else -x^exps)``.
        """
        return _expand(self.nvars, [g for g, _ in self._gens])


def _expand(nvars: int, gens: Sequence[Exps]) -> Iterator[tuple[Exps, bool]]:
    for k, m in enumerate(gens):
        yield m, False
        if k == 0:
            continue
        colon = MonomialIdeal(nvars)
        for g in gens[:k]:
            colon.adjoin(_lcm(m, g))
        for exps, plus in _expand(nvars, list(colon)):
            yield exps, not plus


@dataclass
class PairTable:
    """Monomial ideals per component, plus pending pairs sorted by degree."""

    nvars: int
    weights: tuple[int, ...] | None = None
    tables: dict[int, MonomialIdeal] = field(default_factory=dict)
    lodeg: int | None = None
    _pairs: dict[int, list[tuple[Any, Any]]] = field(default_factory=dict, repr=False)

    def _degree(self, exps: Exps) -> int:
        if self.weights is None:
            return sum(exps)
        return sum(w * e for w, e in zip(self.weights, exps))

    def _table(self, comp: int, row_degrees: Sequence[int]) -> MonomialIdeal:
        if comp < 1:
            raise ValueError("components are numbered from 1")
        if self.lodeg is None:
            self.lodeg = min(row_degrees, default=0)
        table = self.tables.get(comp)
        if table is None:
            table = self.tables[comp] = MonomialIdeal(self.nvars)
        return table

    def insert(
        self,
        comp: int,
        exps: Sequence[int],
        bag: Any,
        row_degrees: Sequence[int],
        ring_ideal: MonomialIdeal | None = None,
    ) -> None:
        """Record a new leading monomial and queue its pairs with the earlier ones.

        Pairs are formed with the minimal lcms against the monomials already
        in component ``comp`` and against the generators of ``ring_ideal``.
        """
        table = self._table(comp, row_degrees)
        exps = table._check(exps)
        lcms = MonomialIdeal(self.nvars)
        table._lcm_into(lcms, exps, None)
        if ring_ideal is not None:
            ring_ideal._lcm_into(lcms, exps, None)
        base = row_degrees[comp - 1]
        for lcm_exps, other in lcms.generators():
            deg = base + self._degree(lcm_exps)
            self._pairs.setdefault(deg, []).append((bag, other))
        table._insert(exps, bag)

    def insert_only(
        self, comp: int, exps: Sequence[int], bag: Any, row_degrees: Sequence[int]
    ) -> None:
        """Record a new leading monomial without forming any pairs."""
        table = self._table(comp, row_degrees)
        table._insert(table._check(exps), bag)

    def find_divisor(
        self,
        comp: int,
        exps: Sequence[int],
        ring_ideal: MonomialIdeal | None = None,
    ) -> tuple[Any, Exps, int] | None:
        """Find a recorded monomial dividing ``exps`` in component ``comp``.

        Returns ``(bag, quotient, component)``.  A divisor from ``ring_ideal``
        is preferred and keeps component ``comp``; one from the table gives
        component 0, since the quotient is then a ring element.
        """
        if ring_ideal is not None:
            found = ring_ideal.find_divisor(exps)
            if found is not None:
                return found[0], found[1], comp
        table = self.tables.get(comp)
        if table is None:
            return None
        found = table.find_divisor(exps)
        if found is None:
            return None
        return found[0], found[1], 0

    def next_pair(self, deg: int) -> tuple[Any, Any] | None:
        """Remove and return the most recent pending pair of degree ``deg``."""
        if self.lodeg is None or deg - self.lodeg <= 0:
            return None
        pending = self._pairs.get(deg)
        if not pending:
            return None
        pair = pending.pop()
        if not pending:
            del self._pairs[deg]
        return pair

    def is_complete(self) -> bool:
        """True when no pairs are pending."""
        return not any(self._pairs.values())

    def pairs_by_degree(self) -> dict[int, list[tuple[Any, Any]]]:
        """Pending pairs for each degree, in the order they would be returned."""
        return {
            deg: list(reversed(pending))
            for deg, pending in sorted(self._pairs.items())
            if pending
        }