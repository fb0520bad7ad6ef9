from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterable, Mapping, Optional

from factquery.config import EngineConfig
from factquery.engine.join import query_single, query_where
from factquery.engine.project import query as run_query
from factquery.engine.unify import Bindings
from factquery.fact_store.database import Database, create_db
from factquery.ir.document import parse_query
from factquery.ir.query import Pattern, Query


@dataclass(frozen=True)
class QueryEngine:
    """Convenience layer binding a store to one engine configuration."""

    db: Database
    config: EngineConfig = field(default_factory=EngineConfig)

    def __post_init__(self) -> None:
        if not isinstance(self.db, Database):
            raise TypeError("db must be Database")
        if not isinstance(self.config, EngineConfig):
            raise TypeError("config must be EngineConfig")

    @staticmethod
    def from_triples(
        triples: Iterable[Iterable[Any]], config: Optional[EngineConfig] = None
    ) -> "QueryEngine":
        return QueryEngine(db=create_db(triples), config=config or EngineConfig())

    def query(self, q: Query | Mapping[str, Any]) -> list[tuple[Any, ...]]:
        return run_query(q, self.db, config=self.config)

    def query_document(self, payload: str | bytes | dict[str, Any]) -> list[tuple[Any, ...]]:
        return self.query(parse_query(payload))

    def where(self, patterns: Iterable[Pattern | Any]) -> list[Bindings]:
        return query_where(patterns, self.db, policy=self.config.index_policy)

    def match(self, pattern: Pattern | Any) -> list[Bindings]:
        return query_single(pattern, self.db, policy=self.config.index_policy)
