'''
Copyright 2025 Aaron Vose (avose@aaronvose.net)
Licensed under the LGPL v2.1; see the file 'LICENSE' for details.
'''
from __future__ import annotations

from typing import List

from scenebrowser.core.list_base import DisplayItem, ListControllerBase
from scenebrowser.core.list_builder import ListCreateData

__all__ = ["TextInfoController"]


class TextInfoController(ListControllerBase):
    """Read-only list of the lines of a block of text, e.g. a node's serialized components."""

    def __init__(self, text: str):
        super().__init__()
        self.source_text = text
        self._items: List[DisplayItem] = []

    def _do_create(self, data: ListCreateData) -> None:
        # Empty text has no lines, not one empty line.
        lines = self.source_text.split("\n") if self.source_text else []
        lines = [line for line in lines if data.is_match(line)]
        if data.reverse:
            lines.reverse()
        self._items = [DisplayItem(line, is_left=True) for line in lines]

    def _do_get(self, index: int) -> DisplayItem:
        return self._items[index]

    def count(self) -> int:
        return len(self._items)
