"""Custom exceptions for the triple query engine."""

from __future__ import annotations


class FactQueryError(Exception):
    """Base exception for query engine failures."""


class FactStoreError(FactQueryError):
    """Raised when a triple collection cannot be indexed."""


class QueryValidationError(FactQueryError):
    """Raised when a query, pattern or query document is malformed."""


class UnboundVariableError(QueryValidationError):
    """Raised when a projected variable is never bound by the where clause."""


class ConfigError(FactQueryError):
    """Raised when engine configuration is invalid."""
