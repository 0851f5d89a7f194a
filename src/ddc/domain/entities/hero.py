"""Hero runtime model."""
from __future__ import annotations

from dataclasses import dataclass

STRESS_MIN = 0
STRESS_MAX = 200


def _clamp(value: int, low: int, high: int) -> int:
    return max(low, min(high, value))


@dataclass(slots=True)
class Hero:
    """A party member; death is derived from hp, heroes are never removed."""

    id: str
    name: str
    max_hp: int
    hp: int
    attack: int
    defense: int
    stress: int = 0

    @property
    def is_alive(self) -> bool:
        return self.hp > 0

    def receive_damage(self, raw: int) -> int:
        """Apply ``raw`` damage reduced by defense and return what actually landed."""
        damage = max(0, raw - self.defense)
        self.hp = max(0, self.hp - damage)
        return damage

    def lose_hp(self, amount: int) -> int:
        """Unmitigated hp loss (panic, traps that ignore armour)."""
        amount = max(0, amount)
        self.hp = max(0, self.hp - amount)
        return amount

    def heal(self, amount: int) -> None:
        self.hp = _clamp(self.hp + amount, 0, self.max_hp)

    def add_stress(self, delta: int) -> None:
        self.stress = _clamp(self.stress + delta, STRESS_MIN, STRESS_MAX)

    def calm(self, delta: int) -> None:
        self.stress = _clamp(self.stress - delta, STRESS_MIN, STRESS_MAX)
