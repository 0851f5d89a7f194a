"""Runtime entity exports."""

from .enemy import Enemy
from .hero import STRESS_MAX, STRESS_MIN, Hero

__all__ = [
    "Enemy",
    "Hero",
    "STRESS_MAX",
    "STRESS_MIN",
]
