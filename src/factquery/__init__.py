"""In-memory Datalog-style queries over (entity, attribute, value) triples."""

from factquery.config import EngineConfig
from factquery.engine import (
    Bindings,
    QueryEngine,
    actualize,
    match_part,
    match_pattern,
    query,
    query_single,
    query_where,
    relevant_triples,
)
from factquery.errors import (
    ConfigError,
    FactQueryError,
    FactStoreError,
    QueryValidationError,
    UnboundVariableError,
)
from factquery.fact_store import Database, create_db
from factquery.ir import Const, Pattern, Query, Var, is_variable, parse_query

__all__ = [
    "EngineConfig",
    "Bindings",
    "QueryEngine",
    "actualize",
    "match_part",
    "match_pattern",
    "query",
    "query_single",
    "query_where",
    "relevant_triples",
    "ConfigError",
    "FactQueryError",
    "FactStoreError",
    "QueryValidationError",
    "UnboundVariableError",
    "Database",
    "create_db",
    "Const",
    "Pattern",
    "Query",
    "Var",
    "is_variable",
    "parse_query",
]
