"""Enemy runtime models."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True)
class Enemy:
    """A spawned foe. The boss is an Enemy with ``is_boss`` set."""

    id: str
    enemy_id: str
    name: str
    max_hp: int
    hp: int
    attack: int
    is_boss: bool = False

    @property
    def is_alive(self) -> bool:
        return self.hp > 0

    def receive_damage(self, amount: int) -> int:
        amount = max(0, amount)
        self.hp = max(0, self.hp - amount)
        return amount
