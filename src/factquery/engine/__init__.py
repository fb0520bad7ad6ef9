"""Unification, candidate selection, join and projection."""

from factquery.engine.unify import Bindings, match_part, match_pattern
from factquery.engine.select import relevant_triples
from factquery.engine.join import query_single, query_where
from factquery.engine.project import actualize, query
from factquery.engine.session import QueryEngine

__all__ = [
    "Bindings",
    "match_part",
    "match_pattern",
    "relevant_triples",
    "query_single",
    "query_where",
    "actualize",
    "query",
    "QueryEngine",
]
