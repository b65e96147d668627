from __future__ import annotations

# Every XP_PER_LEVEL experience points convert into one level.
XP_PER_LEVEL = 100

# Both parents must have reached this level to breed.
MIN_BREEDING_LEVEL = 5

OFFSPRING_NAME = "Mystere"

DIVIDER = "-------------------------"

# Largest amount or index the menu accepts (unsigned 32-bit).
MAX_UNSIGNED = 2**32 - 1
