from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional

from ..constants import MIN_BREEDING_LEVEL, XP_PER_LEVEL
from ..core.notify import Notifier, default_notifier

logger = logging.getLogger(__name__)


class Category(Enum):
    """Elemental affinity of a creature."""

    FIRE = "Fire"
    WATER = "Water"
    PLANT = "Plant"
    ELECTRIC = "Electric"


class Sex(Enum):
    MALE = "Male"
    FEMALE = "Female"


@dataclass(frozen=True)
class LevelUpEvent:
    from_level: int
    to_level: int


@dataclass
class LevelUpResult:
    levels_gained: int
    events: List[LevelUpEvent]


class Creature:
    """A single creature record.

    ``category`` and ``sex`` are read-only; only ``level`` and ``experience``
    move, and only through :meth:`grant_experience`.
    """

    def __init__(self, name: str, category: Category, sex: Sex, level: int = 1, experience: int = 0) -> None:
        if level < 1:
            raise ValueError(f"level must be >= 1, got {level}")
        if not (0 <= experience < XP_PER_LEVEL):
            raise ValueError(f"experience must be in [0, {XP_PER_LEVEL}), got {experience}")
        self.name = name
        self._category = category
        self._sex = sex
        self.level = level
        self.experience = experience

    def __repr__(self) -> str:
        return (
            f"Creature(name={self.name!r}, category={self._category}, sex={self._sex}, "
            f"level={self.level}, experience={self.experience})"
        )

    @property
    def category(self) -> Category:
        return self._category

    @property
    def sex(self) -> Sex:
        return self._sex

    def grant_experience(self, amount: int, notifier: Optional[Notifier] = None) -> LevelUpResult:
        """Add ``amount`` experience, converting every 100 points into a level.

        Emits one ``level_up`` notification per level gained. Afterwards
        ``experience`` is always below 100.
        """
        if amount < 0:
            raise ValueError("XP amount cannot be negative")
        out = notifier or default_notifier()
        start_level = self.level
        self.experience += amount
        events: List[LevelUpEvent] = []

        while self.experience >= XP_PER_LEVEL:
            self.experience -= XP_PER_LEVEL
            from_level = self.level
            self.level += 1
            events.append(LevelUpEvent(from_level=from_level, to_level=self.level))
            out.emit("level_up", f"{self.name} reached level {self.level}!", name=self.name, level=self.level)

        if events:
            logger.debug("Level up: %s from L%d to L%d", self.name, start_level, self.level)
        return LevelUpResult(levels_gained=self.level - start_level, events=events)

    def display(self, notifier: Optional[Notifier] = None) -> None:
        out = notifier or default_notifier()
        for line in self.describe():
            out.emit("display", line)

    def describe(self) -> List[str]:
        return [
            f"Name   : {self.name}",
            f"Level  : {self.level}",
            f"XP     : {self.experience}",
            f"Type   : {self.category.value}",
            f"Sex    : {self.sex.value}",
        ]

    def can_breed_with(self, other: "Creature") -> bool:
        """Same category, both at MIN_BREEDING_LEVEL or above, opposite sexes."""
        if self.category != other.category:
            return False
        if self.level < MIN_BREEDING_LEVEL or other.level < MIN_BREEDING_LEVEL:
            return False
        if self.sex == other.sex:
            return False
        return True
