import itertools
import logging
from collections import deque
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import List, Literal

logger = logging.getLogger(__name__)

Variant = Literal["default", "destructive"]


@dataclass
class Notification:
    id: int
    title: str
    description: str = ""
    variant: Variant = "default"
    created_at: str = field(default_factory=lambda: datetime.now(timezone.utc).isoformat())


class NotificationCenter:
    """Transient, toast-style messages for the user. Oldest entries fall off first."""

    def __init__(self, max_items: int = 100):
        self._items: deque[Notification] = deque(maxlen=max_items)
        self._ids = itertools.count(1)

    def notify(self, title: str, description: str = "", variant: Variant = "default") -> Notification:
        item = Notification(id=next(self._ids), title=title, description=description, variant=variant)
        self._items.append(item)
        log = logger.warning if variant == "destructive" else logger.info
        log("notification_center: %s - %s", title, description)
        return item

    def error(self, title: str, description: str = "") -> Notification:
        return self.notify(title, description, variant="destructive")

    def list(self) -> List[Notification]:
        return list(self._items)

    def clear(self) -> None:
        self._items.clear()
