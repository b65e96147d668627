"""
Creature ranch package.

Headless domain logic for a small in-memory ranch of creatures:
- Creature records with experience-driven leveling
- Breeding of eligible pairs into new creatures
- The Ranch collection with training, breeding by index and sorting

The interactive menu (``ranch.ui``) and the command line (``ranch.cli``)
compose these services.
"""
from .errors import InvalidInputError, RanchError, SettingsError
from .models import Category, Creature, Ranch, Sex, attempt_breeding

__version__ = "0.1.0"

__all__ = [
    "attempt_breeding",
    "Category",
    "Creature",
    "InvalidInputError",
    "Ranch",
    "RanchError",
    "SettingsError",
    "Sex",
    "__version__",
]
