"""Query terms, patterns and documents."""

from factquery.ir.terms import Const, Term, Var, is_variable, to_term
from factquery.ir.query import Pattern, Query
from factquery.ir.document import QueryDocument, parse_query

__all__ = [
    "Const",
    "Term",
    "Var",
    "is_variable",
    "to_term",
    "Pattern",
    "Query",
    "QueryDocument",
    "parse_query",
]
