"""Enemy definition structures."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple


@dataclass(slots=True)
class EnemyDef:
    """Regular foes roll hp and attack inside their ranges; the boss uses fixed values."""

    id: str
    name: str
    hp_range: Tuple[int, int]
    attack_range: Tuple[int, int]
    is_boss: bool = False
