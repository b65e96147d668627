from __future__ import annotations

import logging
from typing import Iterable, Iterator, List, Optional, Sequence

from ..constants import DIVIDER
from ..core.notify import Notifier, default_notifier
from ..core.rng import RNG
from .breeding import attempt_breeding
from .creature import Creature

logger = logging.getLogger(__name__)


class Ranch:
    """Ordered collection of creatures.

    Insertion order is kept until :meth:`sort_by_level` reorders it. Creatures
    are never removed, so an index stays valid for the life of the ranch
    unless a sort moves its element.
    """

    def __init__(
        self,
        notifier: Optional[Notifier] = None,
        rng: Optional[RNG] = None,
        creatures: Optional[Iterable[Creature]] = None,
    ) -> None:
        self.notifier = notifier or default_notifier()
        self.rng = rng or RNG()
        self._creatures: List[Creature] = list(creatures) if creatures else []

    def __len__(self) -> int:
        return len(self._creatures)

    def __iter__(self) -> Iterator[Creature]:
        return iter(self._creatures)

    def __getitem__(self, index: int) -> Creature:
        return self._creatures[index]

    @property
    def creatures(self) -> Sequence[Creature]:
        """Return a snapshot of the current order."""
        return tuple(self._creatures)

    def add(self, creature: Creature) -> None:
        self._creatures.append(creature)
        logger.debug("Added '%s' at index %d", creature.name, len(self._creatures) - 1)

    def display_all(self) -> None:
        if not self._creatures:
            self.notifier.emit("ranch_empty", "The ranch is empty.")
            return
        for i, creature in enumerate(self._creatures):
            self.notifier.emit("display", DIVIDER)
            self.notifier.emit("display", f"Index: {i}")
            creature.display(self.notifier)
        self.notifier.emit("display", DIVIDER)

    def train_all(self, amount: int) -> None:
        for creature in self._creatures:
            creature.grant_experience(amount, self.notifier)

    def attempt_breeding_by_index(self, i: int, j: int) -> Optional[Creature]:
        """Breed the creatures at positions ``i`` and ``j``.

        Out-of-range indices are reported and leave the ranch untouched. A
        successful offspring is appended to the end.
        """
        size = len(self._creatures)
        if not (0 <= i < size and 0 <= j < size):
            self.notifier.emit("invalid_indices", "Invalid indices for breeding.", indices=(i, j))
            return None
        offspring = attempt_breeding(self._creatures[i], self._creatures[j], self.rng, self.notifier)
        if offspring is not None:
            self.add(offspring)
        return offspring

    def sort_by_level(self) -> None:
        # list.sort is stable: equal levels keep their relative order.
        self._creatures.sort(key=lambda c: c.level)
        self.notifier.emit("ranch_sorted", "The ranch has been sorted by level.")
