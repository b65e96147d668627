from __future__ import annotations

import logging
import sys
from collections import deque
from dataclasses import dataclass
from typing import Any, Deque, Dict, List, Optional, TextIO

logger = logging.getLogger(__name__)

DEFAULT_HISTORY = 1000


@dataclass(frozen=True)
class Notification:
    """A user-visible message emitted by a ranch operation.

    Common kinds: "level_up", "breeding_succeeded", "breeding_failed",
    "invalid_indices", "ranch_empty", "ranch_sorted", "display", "menu".
    """

    kind: str
    message: str
    data: Optional[Dict[str, Any]] = None


class Notifier:
    """Output sink for notifications.

    Every notification is written as one line to ``stream`` (standard output
    when omitted). The most recent ``history`` notifications are kept in
    memory so callers and tests can inspect what was emitted; ``history=0``
    keeps none.
    """

    def __init__(self, stream: Optional[TextIO] = None, history: int = DEFAULT_HISTORY) -> None:
        self._stream = stream
        self._events: Deque[Notification] = deque(maxlen=history)

    @property
    def stream(self) -> TextIO:
        # Resolved lazily so pytest's capsys sees writes to the swapped sys.stdout.
        return self._stream if self._stream is not None else sys.stdout

    def emit(self, kind: str, message: str, **data: Any) -> Notification:
        ev = Notification(kind=kind, message=message, data=data or None)
        self._events.append(ev)
        self.stream.write(message + "\n")
        self.stream.flush()
        logger.debug("[%s] %s", kind, message)
        return ev

    def events(self, kind: Optional[str] = None) -> List[Notification]:
        if kind is None:
            return list(self._events)
        return [e for e in self._events if e.kind == kind]

    def messages(self) -> List[str]:
        return [e.message for e in self._events]

    def clear(self) -> None:
        self._events.clear()


_default: Optional[Notifier] = None


def default_notifier() -> Notifier:
    """Return the fallback notifier: writes to standard output, keeps no history."""
    global _default
    if _default is None:
        _default = Notifier(history=0)
    return _default
