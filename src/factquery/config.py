"""Engine configuration."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

from factquery.errors import ConfigError


IndexPolicy = Literal["fixed", "selective"]
UnboundPolicy = Literal["absent", "warn", "error"]

INDEX_POLICIES = ("fixed", "selective")
UNBOUND_POLICIES = ("absent", "warn", "error")


@dataclass(frozen=True)
class EngineConfig:
    """Tuning knobs shared by every query run against a store.

    Attributes:
        index_policy: "fixed" picks the first literal field in
            entity/attribute/value order; "selective" picks the smallest bucket
            among the literal fields.
        unbound: what projection does with a find variable that no where
            pattern binds: "absent" yields None, "warn" yields None and warns,
            "error" rejects the query.
    """

    index_policy: IndexPolicy = "fixed"
    unbound: UnboundPolicy = "absent"

    def __post_init__(self) -> None:
        if self.index_policy not in INDEX_POLICIES:
            raise ConfigError("index_policy must be one of: fixed, selective.")
        if self.unbound not in UNBOUND_POLICIES:
            raise ConfigError("unbound must be one of: absent, warn, error.")


DEFAULT_CONFIG = EngineConfig()
