"""Immutable triple store with single-field indexes."""

from __future__ import annotations

import logging
from typing import Any, Hashable, Iterable, Iterator

from factquery.errors import FactStoreError

logger = logging.getLogger(__name__)


Triple = tuple[Any, Any, Any]

ENTITY = 0
ATTRIBUTE = 1
VALUE = 2
FIELDS = (ENTITY, ATTRIBUTE, VALUE)
FIELD_NAMES = ("entity", "attribute", "value")


class Database:
    """Write-once triple set plus entity, attribute and value indexes.

    Triples are kept verbatim in input order (duplicates included). Each index
    maps one field's value to the tuple of triples carrying it, in input order.
    """

    def __init__(self, triples: Iterable[Iterable[Any]]) -> None:
        self._triples: tuple[Triple, ...] = tuple(
            _normalize_triple(raw, row) for row, raw in enumerate(triples)
        )
        self._indexes: tuple[dict[Hashable, tuple[Triple, ...]], ...] = tuple(
            _index_by(self._triples, field) for field in FIELDS
        )
        logger.debug(
            "Built store: %d triples, %d entities, %d attributes, %d values",
            len(self._triples),
            *(len(index) for index in self._indexes),
        )

    def __len__(self) -> int:
        return len(self._triples)

    def __iter__(self) -> Iterator[Triple]:
        return iter(self._triples)

    def __repr__(self) -> str:
        return f"Database(triples={len(self._triples)})"

    @property
    def triples(self) -> tuple[Triple, ...]:
        return self._triples

    @property
    def entity_index(self) -> dict[Hashable, tuple[Triple, ...]]:
        return dict(self._indexes[ENTITY])

    @property
    def attribute_index(self) -> dict[Hashable, tuple[Triple, ...]]:
        return dict(self._indexes[ATTRIBUTE])

    @property
    def value_index(self) -> dict[Hashable, tuple[Triple, ...]]:
        return dict(self._indexes[VALUE])

    def lookup(self, field: int, key: Any) -> tuple[Triple, ...]:
        """Return the index bucket for ``key`` in ``field``, empty when absent."""

        if field not in FIELDS:
            raise FactStoreError(f"Unknown triple field: {field}")
        try:
            return self._indexes[field].get(key, ())
        except TypeError:
            # unhashable keys cannot occur in the store
            return ()

    def by_entity(self, entity: Any) -> tuple[Triple, ...]:
        return self.lookup(ENTITY, entity)

    def by_attribute(self, attribute: Any) -> tuple[Triple, ...]:
        return self.lookup(ATTRIBUTE, attribute)

    def by_value(self, value: Any) -> tuple[Triple, ...]:
        return self.lookup(VALUE, value)

    def bucket_size(self, field: int, key: Any) -> int:
        return len(self.lookup(field, key))


def create_db(triples: Iterable[Iterable[Any]]) -> Database:
    """Build a Database from a finite collection of triples."""

    return Database(triples)


def _normalize_triple(raw: Iterable[Any], row: int) -> Triple:
    if isinstance(raw, (str, bytes)):
        raise FactStoreError(f"Triple at row {row} must be a sequence, got string: {raw!r}")
    try:
        items = tuple(raw)
    except TypeError as exc:
        raise FactStoreError(f"Triple at row {row} is not iterable: {raw!r}") from exc
    if len(items) != len(FIELDS):
        raise FactStoreError(
            f"Triple at row {row} must have {len(FIELDS)} fields, got {len(items)}: {items!r}"
        )
    for name, item in zip(FIELD_NAMES, items):
        try:
            hash(item)
        except TypeError as exc:
            raise FactStoreError(
                f"Triple at row {row} has unhashable {name}: {item!r}"
            ) from exc
    return items


def _index_by(triples: tuple[Triple, ...], field: int) -> dict[Hashable, tuple[Triple, ...]]:
    groups: dict[Hashable, list[Triple]] = {}
    for triple in triples:
        groups.setdefault(triple[field], []).append(triple)
    return {key: tuple(bucket) for key, bucket in groups.items()}
