"""Pattern-to-triple unification over immutable binding contexts."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Iterator, Optional

from factquery.errors import QueryValidationError
from factquery.ir.query import TRIPLE_ARITY, Pattern
from factquery.ir.terms import Const, Var, to_term


class Bindings(Mapping):
    """Immutable mapping from variable name to a ground value.

    ``extend`` returns a new context; the receiver is never modified. An empty
    Bindings is falsy like any empty mapping, so failure (``None``) must be
    tested with ``is None``.
    """

    __slots__ = ("_data",)

    def __init__(self, data: Optional[Mapping[str, Any]] = None) -> None:
        self._data: dict[str, Any] = dict(data) if data else {}

    def __getitem__(self, name: str) -> Any:
        return self._data[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        return f"Bindings({self._data!r})"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Bindings):
            return self._data == other._data
        if isinstance(other, Mapping):
            return self._data == dict(other)
        return NotImplemented

    def __hash__(self) -> int:
        return hash(frozenset(self._data.items()))

    def extend(self, name: str, value: Any) -> "Bindings":
        if name in self._data:
            raise KeyError(f"variable already bound: {name}")
        updated = Bindings()
        updated._data = {**self._data, name: value}
        return updated

    def to_dict(self) -> dict[str, Any]:
        return dict(self._data)


EMPTY = Bindings()


def as_bindings(context: Optional[Mapping[str, Any]]) -> Optional[Bindings]:
    """Wrap a plain mapping as Bindings; None (failure) passes through."""

    if context is None or isinstance(context, Bindings):
        return context
    return Bindings(context)


def same_value(left: Any, right: Any) -> bool:
    """Equality that keeps booleans apart from numbers (``True`` is not ``1``)."""

    if isinstance(left, bool) != isinstance(right, bool):
        return False
    return left == right


def match_part(
    pattern_part: Any, triple_part: Any, context: Optional[Mapping[str, Any]]
) -> Optional[Bindings]:
    """Unify one pattern part with one triple field. Returns None on failure."""

    context = as_bindings(context)
    if context is None:
        return None
    term = to_term(pattern_part)
    if isinstance(term, Var):
        if term.name in context:
            return match_part(Const(context[term.name]), triple_part, context)
        return context.extend(term.name, triple_part)
    return context if same_value(term.value, triple_part) else None


def match_pattern(
    pattern: Pattern | Any, triple: Any, context: Optional[Mapping[str, Any]]
) -> Optional[Bindings]:
    """Unify a whole pattern with a triple, field by field."""

    terms = pattern.terms if isinstance(pattern, Pattern) else tuple(pattern)
    fields = tuple(triple)
    if len(terms) != TRIPLE_ARITY or len(fields) != TRIPLE_ARITY:
        raise QueryValidationError(
            f"Pattern and triple must both have {TRIPLE_ARITY} parts: {terms!r} vs {fields!r}"
        )
    context = as_bindings(context)
    for term, field in zip(terms, fields):
        context = match_part(term, field, context)
        if context is None:
            return None
    return context
