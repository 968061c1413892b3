'''
Copyright 2025 Aaron Vose (avose@aaronvose.net)
Licensed under the LGPL v2.1; see the file 'LICENSE' for details.
'''
from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional, Sequence, Tuple, Union

from scenebrowser.core.list_builder import ListCreateData
from scenebrowser.core.log import Log

__all__ = ["ActionData", "DisplayItem", "ListControllerBase", "OpenViewFn"]


@dataclass(frozen=True)
class ActionData:
    """One button offered for a row."""
    label: str
    invoke: Callable[[], None]


class DisplayItem:
    """
    What the host paints for one row: its text plus the actions it offers.
    `text` may be a callable so it is re-read at paint time.
    """

    __slots__ = ("_text", "actions", "is_left")

    def __init__(self, text: Union[str, Callable[[], str]],
                 actions: Sequence[ActionData] = (), is_left: bool = False):
        self._text = text
        self.actions: Tuple[ActionData, ...] = tuple(actions)
        self.is_left = is_left

    @property
    def text(self) -> str:
        return self._text() if callable(self._text) else self._text

    def action(self, label: str) -> Optional[ActionData]:
        for act in self.actions:
            if act.label == label:
                return act
        return None


OpenViewFn = Callable[[str, "ListControllerBase"], None]


class ListControllerBase:
    """
    Host-facing list: create() with filter/ordering, count(), item_at(),
    and refresh() which rebuilds with the same ListCreateData.
    """

    def __init__(self, open_view: Optional[OpenViewFn] = None):
        self._data = ListCreateData()
        self._open_view = open_view

    @property
    def data(self) -> ListCreateData:
        return self._data

    def create(self, data: Optional[ListCreateData] = None) -> None:
        self._data = data if data is not None else ListCreateData()
        self._do_create(self._data)

    def refresh(self) -> None:
        self._do_create(self._data)

    def count(self) -> int:
        raise NotImplementedError

    def item_at(self, index: int) -> Optional[DisplayItem]:
        """The item at index, or None when index is outside [0, count())."""
        if not (0 <= index < self.count()):
            return None
        return self._do_get(index)

    def open_text_view(self, title: str, controller: "ListControllerBase") -> None:
        """Ask the host to open a nested list view."""
        if self._open_view is None:
            Log.debug(f"No host view to open '{title}'", 1)
            return
        self._open_view(title, controller)

    # ------------------------------------------------------------------ #
    # Subclass hooks
    # ------------------------------------------------------------------ #

    def _do_create(self, data: ListCreateData) -> None:
        raise NotImplementedError

    def _do_get(self, index: int) -> DisplayItem:
        raise NotImplementedError
