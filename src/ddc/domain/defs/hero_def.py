"""Hero definition structures."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True)
class HeroDef:
    """A roster entry loaded from heroes.json."""

    id: str
    name: str
    max_hp: int
    attack: int
    defense: int
    order: int
