"""Candidate triple selection for a single pattern."""

from __future__ import annotations

import logging
from typing import Any, Sequence

from factquery.config import INDEX_POLICIES, IndexPolicy
from factquery.errors import ConfigError
from factquery.fact_store.database import FIELD_NAMES, FIELDS, Database, Triple
from factquery.ir.query import Pattern
from factquery.ir.terms import Const

logger = logging.getLogger(__name__)


def relevant_triples(
    pattern: Pattern | Any,
    db: Database,
    *,
    policy: IndexPolicy = "fixed",
) -> Sequence[Triple]:
    """Return the triples worth matching against ``pattern``.

    With the "fixed" policy the first literal field, checked in entity,
    attribute, value order, selects its index bucket. With "selective" the
    smallest bucket among the literal fields wins. Buckets are never
    intersected. A pattern without literals scans every triple.
    """

    if policy not in INDEX_POLICIES:
        raise ConfigError(f"Unknown index policy: {policy}")
    pattern = Pattern.of(pattern)
    literal_fields = [
        (field, term.value)
        for field, term in zip(FIELDS, pattern.terms)
        if isinstance(term, Const)
    ]
    if not literal_fields:
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("Full scan for %s", pattern.to_parts())
        return db.triples

    if policy == "fixed":
        field, key = literal_fields[0]
    else:
        field, key = min(literal_fields, key=lambda item: db.bucket_size(item[0], item[1]))
    bucket = db.lookup(field, key)
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug(
            "Index %s=%r -> %d candidates for %s",
            FIELD_NAMES[field],
            key,
            len(bucket),
            pattern.to_parts(),
        )
    return bucket
