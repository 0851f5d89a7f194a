"""Utilities for creating deterministic instance identifiers."""
from __future__ import annotations

from ddc.core.rng import RNG


def make_instance_id(prefix: str, rng: RNG) -> str:
    """Generate an id such as ``enemy_482913`` from the session RNG so replays match."""
    return f"{prefix}_{rng.randint(100000, 999999)}"
