"""Projection of binding contexts into result rows."""

from __future__ import annotations

import logging
import warnings
from typing import Any, Iterable, Mapping, Optional

from factquery.config import DEFAULT_CONFIG, UNBOUND_POLICIES, EngineConfig, UnboundPolicy
from factquery.engine.join import query_where
from factquery.engine.unify import Bindings
from factquery.errors import ConfigError, UnboundVariableError
from factquery.fact_store.database import Database
from factquery.ir.query import Query
from factquery.ir.terms import Var, to_term

logger = logging.getLogger(__name__)


def actualize(
    context: Mapping[str, Any],
    find: Iterable[Any],
    *,
    unbound: UnboundPolicy = "absent",
) -> tuple[Any, ...]:
    """Replace the variables of ``find`` with their values from ``context``.

    Literals are emitted unchanged. A variable missing from ``context`` yields
    None, warns, or raises UnboundVariableError depending on ``unbound``.
    """

    if unbound not in UNBOUND_POLICIES:
        raise ConfigError(f"Unknown unbound policy: {unbound}")
    row: list[Any] = []
    for part in find:
        term = to_term(part)
        if not isinstance(term, Var):
            row.append(term.value)
            continue
        if term.name in context:
            row.append(context[term.name])
            continue
        row.append(_resolve_unbound(term.name, unbound))
    return tuple(row)


def query(
    query: Query | Mapping[str, Any],
    db: Database,
    *,
    config: Optional[EngineConfig] = None,
) -> list[tuple[Any, ...]]:
    """Run a ``{find, where}`` query and return one row per successful join."""

    config = config or DEFAULT_CONFIG
    query = Query.of(query)

    missing = query.unbound_find_variables()
    if missing and config.unbound == "error":
        raise UnboundVariableError(
            "find references variables not bound by where: " + ", ".join(missing)
        )

    contexts: list[Bindings] = query_where(query.where, db, policy=config.index_policy)
    rows = [actualize(context, query.find, unbound=config.unbound) for context in contexts]
    logger.debug("Query returned %d rows", len(rows))
    return rows


def _resolve_unbound(name: str, policy: UnboundPolicy) -> None:
    if policy == "error":
        raise UnboundVariableError(f"Unbound variable in projection: {name}")
    if policy == "warn":
        warnings.warn(f"Unbound variable in projection: {name}; using None")
    return None
