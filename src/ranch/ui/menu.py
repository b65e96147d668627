from __future__ import annotations

import logging
from enum import Enum
from typing import Callable, Dict, List, Optional, Tuple

from ..constants import MAX_UNSIGNED
from ..core.notify import Notifier
from ..errors import InvalidInputError
from ..models.creature import Category, Creature, Sex
from ..models.ranch import Ranch

logger = logging.getLogger(__name__)

InputFn = Callable[[str], str]


class MenuCommand(Enum):
    """Top-level menu entries, keyed by the digit the user types."""

    SHOW = "1"
    TRAIN = "2"
    BREED = "3"
    ADD = "4"
    SORT = "5"
    QUIT = "6"


MENU_LABELS: Dict[MenuCommand, str] = {
    MenuCommand.SHOW: "Show all creatures",
    MenuCommand.TRAIN: "Train all creatures",
    MenuCommand.BREED: "Attempt breeding",
    MenuCommand.ADD: "Add a new creature",
    MenuCommand.SORT: "Sort by level",
    MenuCommand.QUIT: "Quit",
}

# Selector digit -> enum member, in the order shown to the user.
TYPE_CHOICES: List[Tuple[str, Category]] = [
    ("1", Category.FIRE),
    ("2", Category.WATER),
    ("3", Category.PLANT),
    ("4", Category.ELECTRIC),
]
SEX_CHOICES: List[Tuple[str, Sex]] = [
    ("1", Sex.MALE),
    ("2", Sex.FEMALE),
]

INVALID_VALUE = "Please enter a valid value."


def parse_unsigned(text: str) -> int:
    """Parse a non-negative decimal integer up to MAX_UNSIGNED, raising InvalidInputError otherwise."""
    stripped = text.strip()
    if not stripped.isdecimal():
        raise InvalidInputError(f"Not an unsigned integer: {text!r}")
    value = int(stripped)
    if value > MAX_UNSIGNED:
        raise InvalidInputError(f"Value out of range: {text!r}")
    return value


class RanchMenu:
    """Interactive numeric command loop driving a :class:`Ranch`.

    Input comes from ``input_fn`` and all output goes through the ranch's
    notifier, which keeps the controller testable without a terminal.
    """

    def __init__(self, ranch: Ranch, input_fn: Optional[InputFn] = None) -> None:
        self.ranch = ranch
        self._input_fn: InputFn = input_fn or input
        self._handlers: Dict[MenuCommand, Callable[[], None]] = {
            MenuCommand.SHOW: self.show_all,
            MenuCommand.TRAIN: self.train,
            MenuCommand.BREED: self.breed,
            MenuCommand.ADD: self.add_creature,
            MenuCommand.SORT: self.sort,
        }

    @property
    def notifier(self) -> Notifier:
        return self.ranch.notifier

    def _say(self, message: str, kind: str = "menu") -> None:
        self.notifier.emit(kind, message)

    def _read(self, prompt: str = "") -> str:
        return self._input_fn(prompt).strip()

    def render_menu(self) -> None:
        self._say("\n------ MENU ------")
        for cmd in MenuCommand:
            self._say(f"{cmd.value}. {MENU_LABELS[cmd]}")

    def run(self) -> int:
        """Loop until the user quits or input ends. Returns the exit status."""
        while True:
            self.render_menu()
            try:
                choice = self._read("Your choice: ")
                if choice == MenuCommand.QUIT.value:
                    break
                if not self.handle(choice):
                    self._say("Unrecognized choice, please try again.")
            except EOFError:
                logger.debug("Input closed; leaving menu")
                break
        self._say("Goodbye!")
        return 0

    def handle(self, choice: str) -> bool:
        """Run the command for ``choice``. Returns False if nothing was dispatched.

        Quit is never dispatched here: :meth:`run` checks for it before calling
        this, so ``handle("6")`` returns False and has no effect.
        """
        try:
            cmd = MenuCommand(choice)
        except ValueError:
            logger.debug("Ignored unknown menu choice %r", choice)
            return False
        handler = self._handlers.get(cmd)
        if handler is None:
            return False
        try:
            handler()
        except InvalidInputError as exc:
            logger.debug("Aborted command %s: %s", cmd.name, exc)
            self._say(INVALID_VALUE, kind="invalid_input")
        return True

    # --- Commands ---

    def show_all(self) -> None:
        self._say("\nAll creatures in the ranch:")
        self.ranch.display_all()

    def train(self) -> None:
        amount = parse_unsigned(self._read("Enter the amount of XP to give each creature: "))
        self.ranch.train_all(amount)
        self._say("The creatures have been trained.")

    def breed(self) -> None:
        first = self._read("Enter the index of the first creature: ")
        second = self._read("Enter the index of the second creature: ")
        self.ranch.attempt_breeding_by_index(parse_unsigned(first), parse_unsigned(second))

    def add_creature(self) -> None:
        name = self._read("Enter the creature's name: ")

        self._say("Choose the creature's type:")
        for key, category in TYPE_CHOICES:
            self._say(f"{key}. {category.value}")
        category = self._select(TYPE_CHOICES, self._read("Your choice: "), "type")

        self._say("Choose the creature's sex:")
        for key, sex in SEX_CHOICES:
            self._say(f"{key}. {sex.value}")
        sex = self._select(SEX_CHOICES, self._read("Your choice: "), "sex")

        self.ranch.add(Creature(name=name, category=category, sex=sex))
        logger.info("Added creature '%s' (%s, %s)", name, category.value, sex.value)
        self._say("The creature has been added to the ranch.")

    def sort(self) -> None:
        self.ranch.sort_by_level()

    def _select(self, choices, raw: str, what: str):
        for key, value in choices:
            if raw == key:
                return value
        default = choices[0][1]
        self._say(f"Unrecognized {what}, defaulting to {default.value}.", kind="default_used")
        return default
