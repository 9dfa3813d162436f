"""
View Navigation

Per-feature view state: list, detail, create and edit, with a history stack
so "back" returns to the previous view. Listeners mirror transitions into a
platform history (browser back button, window manager, ...).
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Dict, List, Optional

logger = logging.getLogger(__name__)


class ViewName(str, Enum):
    """Views a feature area can show"""
    LIST = "list"
    DETAIL = "detail"
    CREATE = "create"
    EDIT = "edit"


@dataclass(frozen=True)
class HistoryEntry:
    view: ViewName
    record: Optional[Dict[str, Any]] = None


Listener = Callable[[str, HistoryEntry], None]


class ViewNavigator:
    """History-backed view state for one feature area

    The bottom of the stack is always the list view and is never popped.
    """

    def __init__(self):
        self._history: List[HistoryEntry] = [HistoryEntry(ViewName.LIST)]
        self._listeners: List[Listener] = []
        self.selected_record: Optional[Dict[str, Any]] = None

    @property
    def current_view(self) -> ViewName:
        return self._history[-1].view

    @property
    def depth(self) -> int:
        return len(self._history)

    def add_listener(self, listener: Listener) -> None:
        self._listeners.append(listener)

    def _notify(self, action: str, entry: HistoryEntry) -> None:
        for listener in self._listeners:
            listener(action, entry)

    def push(self, view: ViewName, record: Optional[Dict[str, Any]] = None) -> None:
        """Go to ``view``; ``record`` becomes the selected record when given"""
        entry = HistoryEntry(ViewName(view), record)
        self._history.append(entry)
        if record is not None:
            self.selected_record = record
        logger.debug(f"Navigated to {entry.view.value}")
        self._notify("push", entry)

    def pop(self) -> bool:
        """Return to the previous view. No-op at the list view."""
        entry = self._pop()
        if entry is None:
            return False
        self._notify("pop", entry)
        return True

    def sync_from_history(self) -> bool:
        """Apply a back navigation that the platform already performed"""
        return self._pop() is not None

    def reset(self) -> None:
        """Drop all history and return to the list view"""
        self._history = [HistoryEntry(ViewName.LIST)]
        self.selected_record = None

    def _pop(self) -> Optional[HistoryEntry]:
        if len(self._history) <= 1:
            return None
        entry = self._history.pop()
        if self.current_view == ViewName.LIST:
            self.selected_record = None
        return entry
