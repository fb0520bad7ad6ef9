"""Patterns and queries."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Iterator, Mapping

from factquery.errors import QueryValidationError
from factquery.ir.terms import Const, Term, Var, to_term


TRIPLE_ARITY = 3


@dataclass(frozen=True)
class Pattern:
    """Triple-shaped template of terms.

    Attributes:
        entity: Term matched against the entity field.
        attribute: Term matched against the attribute field.
        value: Term matched against the value field.
    """

    entity: Term
    attribute: Term
    value: Term

    @staticmethod
    def of(parts: Any) -> "Pattern":
        """Build a Pattern from shorthand parts such as ``["?id", "movie/title", "?t"]``."""

        if isinstance(parts, Pattern):
            return parts
        if isinstance(parts, (str, bytes)) or not isinstance(parts, Iterable):
            raise QueryValidationError(f"Pattern must be a sequence of {TRIPLE_ARITY} parts: {parts!r}")
        items = list(parts)
        if len(items) != TRIPLE_ARITY:
            raise QueryValidationError(
                f"Pattern arity mismatch: expected {TRIPLE_ARITY}, got {len(items)}: {items!r}"
            )
        entity, attribute, value = (to_term(item) for item in items)
        return Pattern(entity=entity, attribute=attribute, value=value)

    @property
    def terms(self) -> tuple[Term, Term, Term]:
        return (self.entity, self.attribute, self.value)

    def __iter__(self) -> Iterator[Term]:
        return iter(self.terms)

    def variables(self) -> list[str]:
        found: list[str] = []
        for term in self.terms:
            if isinstance(term, Var) and term.name not in found:
                found.append(term.name)
        return found

    def to_parts(self) -> list[Any]:
        return [term.to_part() for term in self.terms]


@dataclass(frozen=True)
class Query:
    """Conjunctive query: a find projection over a where join."""

    find: tuple[Term, ...]
    where: tuple[Pattern, ...]

    def __post_init__(self) -> None:
        for term in self.find:
            if not isinstance(term, (Var, Const)):
                raise QueryValidationError(f"find parts must be terms: {term!r}")
        for pattern in self.where:
            if not isinstance(pattern, Pattern):
                raise QueryValidationError(f"where entries must be Pattern: {pattern!r}")

    @staticmethod
    def of(data: "Query | Mapping[str, Any]") -> "Query":
        """Build a Query from ``{"find": [...], "where": [[...], ...]}`` shorthand."""

        if isinstance(data, Query):
            return data
        if not isinstance(data, Mapping):
            raise QueryValidationError("Query must be a mapping with 'find' and 'where'.")
        find = data.get("find")
        where = data.get("where")
        if not isinstance(find, (list, tuple)):
            raise QueryValidationError("Query 'find' must be a list.")
        if not isinstance(where, (list, tuple)):
            raise QueryValidationError("Query 'where' must be a list.")
        return Query(
            find=tuple(to_term(part) for part in find),
            where=tuple(Pattern.of(pattern) for pattern in where),
        )

    def bound_variables(self) -> set[str]:
        return {name for pattern in self.where for name in pattern.variables()}

    def unbound_find_variables(self) -> list[str]:
        bound = self.bound_variables()
        return [
            term.name for term in self.find if isinstance(term, Var) and term.name not in bound
        ]

    def to_dict(self) -> dict[str, Any]:
        return {
            "find": [term.to_part() for term in self.find],
            "where": [pattern.to_parts() for pattern in self.where],
        }
