from __future__ import annotations

import logging
from typing import Optional

from ..constants import OFFSPRING_NAME
from ..core.notify import Notifier, default_notifier
from ..core.rng import RNG
from .creature import Creature, Sex

logger = logging.getLogger(__name__)


def attempt_breeding(
    p1: Creature,
    p2: Creature,
    rng: Optional[RNG] = None,
    notifier: Optional[Notifier] = None,
) -> Optional[Creature]:
    """Try to breed ``p1`` with ``p2``.

    Returns a level 1 ``Mystere`` of ``p1``'s category whose sex comes from a
    single coin flip, or None when the pair is not eligible.
    """
    out = notifier or default_notifier()
    if not p1.can_breed_with(p2):
        out.emit("breeding_failed", f"{p1.name} and {p2.name} cannot breed.", parents=(p1.name, p2.name))
        logger.debug("Breeding rejected: %s x %s", p1.name, p2.name)
        return None

    rng = rng or RNG()
    sex = Sex.MALE if rng.coin_flip() else Sex.FEMALE
    offspring = Creature(name=OFFSPRING_NAME, category=p1.category, sex=sex)
    out.emit(
        "breeding_succeeded",
        f"Breeding succeeded between {p1.name} and {p2.name}!",
        parents=(p1.name, p2.name),
    )
    logger.debug("Bred %s x %s -> %s (%s)", p1.name, p2.name, offspring.category.value, sex.value)
    return offspring
