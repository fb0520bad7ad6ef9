"""Pattern terms: variables and constants."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Union

from factquery.errors import QueryValidationError


VAR_PREFIX = "?"


@dataclass(frozen=True)
class Var:
    """Logic variable, identified by its name (including the ``?`` prefix)."""

    name: str

    def __post_init__(self) -> None:
        if not isinstance(self.name, str) or not self.name.startswith(VAR_PREFIX):
            raise QueryValidationError(f"Var name must start with '{VAR_PREFIX}': {self.name!r}")
        if len(self.name) == len(VAR_PREFIX):
            raise QueryValidationError("Var name must be non-empty.")

    def to_part(self) -> str:
        return self.name


@dataclass(frozen=True)
class Const:
    """Constant term, matched by equality."""

    value: Any

    def to_part(self) -> Any:
        return self.value


Term = Union[Var, Const]


def is_variable(value: Any) -> bool:
    """Return True if ``value`` denotes a variable in shorthand notation."""

    if isinstance(value, Var):
        return True
    return isinstance(value, str) and value.startswith(VAR_PREFIX)


def to_term(part: Any) -> Term:
    """Convert a shorthand pattern part into a Var or Const."""

    if isinstance(part, (Var, Const)):
        return part
    if is_variable(part):
        return Var(name=part)
    return Const(value=part)
