from .breeding import attempt_breeding
from .creature import Category, Creature, LevelUpEvent, LevelUpResult, Sex
from .ranch import Ranch

__all__ = [
    "attempt_breeding",
    "Category",
    "Creature",
    "LevelUpEvent",
    "LevelUpResult",
    "Ranch",
    "Sex",
]
