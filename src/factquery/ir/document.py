"""Pydantic models for decoding query documents."""

from __future__ import annotations

import json
from typing import Any, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from factquery.errors import QueryValidationError
from factquery.ir.query import TRIPLE_ARITY, Query
from factquery.ir.terms import VAR_PREFIX


Part = Union[bool, int, float, str, None]


class QueryDocument(BaseModel):
    """Wire shape of a ``{find, where}`` query."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    find: list[Part] = Field(description="Projection: variables or literals.")
    where: list[list[Part]] = Field(description="Triple patterns, joined left to right.")

    @field_validator("where")
    @classmethod
    def _check_arity(cls, value: list[list[Part]]) -> list[list[Part]]:
        for idx, pattern in enumerate(value):
            if len(pattern) != TRIPLE_ARITY:
                raise ValueError(
                    f"where[{idx}] must have {TRIPLE_ARITY} parts, got {len(pattern)}"
                )
        return value

    @field_validator("find", "where")
    @classmethod
    def _check_variable_names(cls, value: list[Any]) -> list[Any]:
        parts = [part for item in value for part in (item if isinstance(item, list) else [item])]
        for part in parts:
            if part == VAR_PREFIX:
                raise ValueError(f"variable name must follow '{VAR_PREFIX}'")
        return value

    def to_query(self) -> Query:
        return Query.of({"find": self.find, "where": self.where})


def parse_query(payload: str | bytes | dict[str, Any]) -> Query:
    """Validate a query document given as JSON text or a decoded mapping."""

    try:
        if isinstance(payload, (str, bytes)):
            doc = QueryDocument.model_validate_json(payload)
        else:
            doc = QueryDocument.model_validate(payload)
    except ValidationError as exc:
        raise QueryValidationError(f"Invalid query document: {exc}") from exc
    return doc.to_query()


def dump_query(query: Query) -> str:
    return json.dumps(query.to_dict(), ensure_ascii=False)


def query_json_schema() -> dict[str, Any]:
    return QueryDocument.model_json_schema()
