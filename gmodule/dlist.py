"""Degree lists: integer lists attached to the rows and columns of a module.

Besides plain list helpers, this module reads the compact textual form that
is used to enter such lists, e.g. ``1..4 7:3 M`` (a range, a repetition and
the row degrees of a named matrix), and writes lists back in that form.
"""

from __future__ import annotations

import enum
import re
from dataclasses import dataclass
from itertools import groupby, islice
from typing import Callable, Iterable, Iterator, Mapping, Sequence

Lookup = Callable[[str], "Sequence[int] | None"]
Continuation = Callable[[], Iterable[str]]

_IDENT = re.compile(r"[A-Za-z_][A-Za-z0-9_]*")
_INT = re.compile(r"[+-]?\d+")


class DegreeListError(ValueError):
    """Raised when a degree list holds a value outside its allowed bounds."""


class ElementKind(enum.Enum):
    """What one token of a degree-list line stands for."""

    CONT = 0
    RANGE = 1
    REPL = 2
    LIST = 3
    NONE = 4


@dataclass(frozen=True)
class ListElement:
    """One parsed token: a range, a repetition, a whole list, or nothing."""

    kind: ElementKind
    first: int = 0
    second: int = 0
    items: tuple[int, ...] = ()

    def values(self) -> Iterator[int]:
        """Yield the integers this element contributes, in order."""
        if self.kind is ElementKind.RANGE:
            yield from range(self.first, self.second + 1)
        elif self.kind is ElementKind.REPL:
            for _ in range(self.second):
                yield self.first
        elif self.kind is ElementKind.LIST:
            yield from self.items


def filled(value: int, size: int) -> list[int]:
    """A list of ``size`` copies of ``value``."""
    return [value] * max(size, 0)


def zeros(size: int) -> list[int]:
    """A list of ``size`` zeros."""
    return filled(0, size)


def negated(a: Iterable[int]) -> list[int]:
    """Every entry negated (the degrees of a transposed matrix)."""
    return [-x for x in a]


def concat(a: Iterable[int], b: Iterable[int]) -> list[int]:
    """The entries of ``a`` followed by those of ``b``."""
    return [*a, *b]


def composite(a: Iterable[int], b: Sequence[int]) -> list[int]:
    """``b`` indexed by the 1-based positions listed in ``a``."""
    return [b[i - 1] for i in a]


def shifted(n: int, a: Iterable[int]) -> list[int]:
    """Every entry of ``a`` increased by ``n``."""
    return [n + x for x in a]


def max_degree(dl: Sequence[int]) -> int:
    """Largest entry, or 0 for an empty list."""
    return max(dl, default=0)


def min_degree(dl: Sequence[int]) -> int:
    """Smallest entry, or 0 for an empty list."""
    return min(dl, default=0)


def _parse_int(text: str) -> tuple[int, str]:
    match = _INT.match(text)
    if match is None:
        return 0, text
    return int(match.group()), text[match.end():]


def parse_element(
    token: str,
    special: Mapping[str, int] | None = None,
    lookup: Lookup | None = None,
) -> ListElement:
    """Parse one token of a degree-list line.

    ``special`` maps reserved words to single values.  ``lookup`` returns the
    row degrees of a named matrix, or None when no such matrix exists.
    """
    if token.startswith("\\"):
        return ListElement(ElementKind.CONT)
    if special and token in special:
        value = special[token]
        return ListElement(ElementKind.RANGE, value, value)

    ident = _IDENT.match(token)
    if ident is not None:
        items = lookup(ident.group()) if lookup is not None else None
        if items is None:
            return ListElement(ElementKind.NONE)
        return ListElement(ElementKind.LIST, items=tuple(items))

    first, rest = _parse_int(token)
    if rest.startswith(":"):
        second, _ = _parse_int(rest[1:])
        return ListElement(ElementKind.REPL, first, second)
    if rest.startswith("."):
        rest = rest[1:]
        if not rest.startswith("."):
            return ListElement(ElementKind.RANGE, first, first - 1)
        second, _ = _parse_int(rest[1:])
        return ListElement(ElementKind.RANGE, first, second)
    return ListElement(ElementKind.RANGE, first, first)


def _elements(
    tokens: Iterable[str],
    special: Mapping[str, int] | None,
    lookup: Lookup | None,
    continuation: Continuation | None,
) -> Iterator[ListElement]:
    pending = list(tokens)
    while pending:
        token, pending = pending[0], pending[1:]
        elem = parse_element(token, special, lookup)
        if elem.kind is ElementKind.CONT:
            if continuation is None:
                return
            pending = list(continuation())
            continue
        yield elem


def _values(tokens, special, lookup, continuation) -> Iterator[int]:
    for elem in _elements(tokens, special, lookup, continuation):
        yield from elem.values()


def consume(
    tokens: Iterable[str],
    length: int,
    default: int = 0,
    special: Mapping[str, int] | None = None,
    lookup: Lookup | None = None,
    continuation: Continuation | None = None,
) -> list[int]:
    """Read a list of exactly ``length`` integers.

    Extra values are dropped; a short list is padded with its last value,
    or with ``default`` when nothing was given.  A token starting with a
    backslash continues on the tokens returned by ``continuation``.
    """
    length = max(length, 0)
    result = list(islice(_values(tokens, special, lookup, continuation), length))
    pad = result[-1] if result else default
    result.extend(filled(pad, length - len(result)))
    return result


def consume_all(
    tokens: Iterable[str],
    special: Mapping[str, int] | None = None,
    lookup: Lookup | None = None,
    continuation: Continuation | None = None,
) -> list[int]:
    """Read every integer described by ``tokens``, with no length limit."""
    return list(_values(tokens, special, lookup, continuation))


def select(
    tokens: Sequence[str],
    lo: int,
    hi: int,
    special: Mapping[str, int] | None = None,
    lookup: Lookup | None = None,
    continuation: Continuation | None = None,
) -> list[int]:
    """Read a list of indices in ``lo..hi``; no tokens means all of them.

    Raises DegreeListError when an index lies outside the bounds.
    """
    tokens = list(tokens)
    if tokens:
        result = consume_all(tokens, special, lookup, continuation)
    else:
        result = list(range(lo, hi + 1))
    if any(d < lo or d > hi for d in result):
        raise DegreeListError("integer out of bounds")
    return result


def format_part(elem: int, repl: int) -> str:
    """Write ``repl`` copies of ``elem`` in compact form."""
    if repl == 1:
        return str(elem)
    if repl == 2:
        return f"{elem} {elem}"
    return f"{elem}:{repl}"


def format_list(dl: Sequence[int], rowsize: int, comment: bool = False) -> str:
    """Write a degree list as runs, breaking long lines with a backslash."""
    if comment:
        rowsize -= 2
    if not dl:
        return ""
    runs = [(value, len(list(group))) for value, group in groupby(dl)]
    out: list[str] = []
    size = 0
    for elem, count in runs[:-1]:
        if size >= rowsize - 5:
            out.append("\\\n")
            size = -1
        part = format_part(elem, count)
        out.append(part + " ")
        size += 1 + len(part)
    out.append(format_part(*runs[-1]) + "\n")
    return "".join(out)