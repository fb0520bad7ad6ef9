from __future__ import annotations

import logging
from typing import Any, Iterable, Mapping

from factquery.config import IndexPolicy
from factquery.engine.select import relevant_triples
from factquery.engine.unify import EMPTY, Bindings, as_bindings, match_pattern
from factquery.fact_store.database import Database
from factquery.ir.query import Pattern

logger = logging.getLogger(__name__)


def query_single(
    pattern: Pattern | Any,
    db: Database,
    context: Mapping[str, Any] = EMPTY,
    *,
    policy: IndexPolicy = "fixed",
) -> list[Bindings]:
    pattern = Pattern.of(pattern)
    context = as_bindings(context)
    out: list[Bindings] = []
    for triple in relevant_triples(pattern, db, policy=policy):
        next_context = match_pattern(pattern, triple, context)
        if next_context is not None:
            out.append(next_context)
    return out


def query_where(
    patterns: Iterable[Pattern | Any],
    db: Database,
    *,
    policy: IndexPolicy = "fixed",
) -> list[Bindings]:
    body = [Pattern.of(pattern) for pattern in patterns]

    contexts: list[Bindings] = [EMPTY]
    for step, pattern in enumerate(body):
        next_contexts: list[Bindings] = []
        for context in contexts:
            next_contexts.extend(query_single(pattern, db, context, policy=policy))
        contexts = next_contexts
        logger.debug(
            "Join step %d %s: %d contexts", step, pattern.to_parts(), len(contexts)
        )
        if not contexts:
            return []
    return contexts
