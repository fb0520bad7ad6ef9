"""In-memory triple store."""

from factquery.fact_store.database import (
    ATTRIBUTE,
    ENTITY,
    VALUE,
    Database,
    Triple,
    create_db,
)

__all__ = [
    "ATTRIBUTE",
    "ENTITY",
    "VALUE",
    "Database",
    "Triple",
    "create_db",
]
