# ui/object_list.py
'''
Copyright 2025 Aaron Vose (avose@aaronvose.net)
Licensed under the LGPL v2.1; see the file 'LICENSE' for details.
'''
from __future__ import annotations

from typing import Callable, Optional, Sequence

import wx

from scenebrowser.core.constants import LABEL_DESTROY, LABEL_INSPECT, LABEL_TOGGLE_ACTIVE
from scenebrowser.core.list_base import ListControllerBase
from scenebrowser.core.list_builder import ListCreateData
from scenebrowser.core.log import Log
from scenebrowser.ui.constants import (
    DEFAULT_BG_COLOR,
    DEFAULT_FG_COLOR,
    LIST_FONT_SIZE,
    STATE_COLOURS,
)
from scenebrowser.ui.markup import parse_color_markup

__all__ = ["ControllerListCtrl", "ControllerListPanel", "ObjectBrowserPanel"]


class ControllerListCtrl(wx.ListCtrl):
    """Virtual single-column list that pulls rows from a list controller on paint."""

    def __init__(self, parent, controller: ListControllerBase):
        style = wx.LC_REPORT | wx.LC_VIRTUAL | wx.LC_SINGLE_SEL | wx.LC_NO_HEADER
        super().__init__(parent, style=style)
        self.controller = controller
        self.SetBackgroundColour(DEFAULT_BG_COLOR)
        self.SetFont(wx.Font(wx.FontInfo(LIST_FONT_SIZE).Family(wx.FONTFAMILY_TELETYPE)))
        self.InsertColumn(0, "", width=2000)
        self._attrs = {}
        for name, colour in STATE_COLOURS.items():
            attr = wx.ItemAttr()
            attr.SetTextColour(colour)
            self._attrs[name] = attr
        self._default_attr = wx.ItemAttr()
        self._default_attr.SetTextColour(DEFAULT_FG_COLOR)
        self.sync()

    def sync(self):
        """Re-read the item count after the controller rebuilt its list."""
        self.SetItemCount(self.controller.count())
        self.Refresh()

    def OnGetItemText(self, item, column):
        row = self.controller.item_at(item)
        if row is None:
            return ""
        _, plain = parse_color_markup(row.text)
        return plain

    def OnGetItemAttr(self, item):
        row = self.controller.item_at(item)
        if row is None:
            return self._default_attr
        colour_name, _ = parse_color_markup(row.text)
        return self._attrs.get(colour_name, self._default_attr)


class ControllerListPanel(wx.Panel):
    """
    A filter box, a reverse toggle, the virtual list and one button per
    row action. Buttons act on the selected row.
    """

    def __init__(self, parent, controller: ListControllerBase,
                 action_labels: Sequence[str] = (), data: Optional[ListCreateData] = None,
                 on_changed: Optional[Callable[[], None]] = None):
        super().__init__(parent)
        self.controller = controller
        self.action_labels = list(action_labels)
        self.on_changed = on_changed

        data = data or ListCreateData()
        self._create_controls(data)
        self._setup_layout()
        self._bind_events()
        self.controller.create(data)
        self.list_ctrl.sync()

    def _create_controls(self, data: ListCreateData):
        self.search_ctrl = wx.SearchCtrl(self, style=wx.TE_PROCESS_ENTER)
        self.search_ctrl.ShowCancelButton(True)
        self.search_ctrl.SetValue(data.filter_text)
        self.search_ctrl.SetToolTip("Show only rows containing this text")

        self.reverse_check = wx.CheckBox(self, label="Reverse")
        self.reverse_check.SetValue(data.reverse)

        self.list_ctrl = ControllerListCtrl(self, self.controller)

        self.action_buttons = []
        for label in self.action_labels:
            button = wx.Button(self, label=label.replace("\n", " "))
            button.action_label = label
            self.action_buttons.append(button)
        self.refresh_button = wx.Button(self, wx.ID_REFRESH, label="Refresh")

    def _setup_layout(self):
        main_sizer = wx.BoxSizer(wx.VERTICAL)

        filter_sizer = wx.BoxSizer(wx.HORIZONTAL)
        filter_sizer.Add(wx.StaticText(self, label="Filter:"), 0,
                         wx.ALIGN_CENTER_VERTICAL | wx.RIGHT, 5)
        filter_sizer.Add(self.search_ctrl, 1, wx.EXPAND)
        filter_sizer.Add(self.reverse_check, 0, wx.ALIGN_CENTER_VERTICAL | wx.LEFT, 8)
        main_sizer.Add(filter_sizer, 0, wx.EXPAND | wx.ALL, 6)

        main_sizer.Add(self.list_ctrl, 1, wx.EXPAND | wx.LEFT | wx.RIGHT, 6)

        button_sizer = wx.BoxSizer(wx.HORIZONTAL)
        for button in self.action_buttons:
            button_sizer.Add(button, 0, wx.RIGHT, 5)
        button_sizer.AddStretchSpacer()
        button_sizer.Add(self.refresh_button, 0)
        main_sizer.Add(button_sizer, 0, wx.EXPAND | wx.ALL, 6)

        self.SetSizer(main_sizer)

    def _bind_events(self):
        self.search_ctrl.Bind(wx.EVT_TEXT, self._on_filter_changed)
        self.search_ctrl.Bind(wx.EVT_SEARCHCTRL_CANCEL_BTN, self._on_filter_cleared)
        self.reverse_check.Bind(wx.EVT_CHECKBOX, self._on_filter_changed)
        self.refresh_button.Bind(wx.EVT_BUTTON, self.on_refresh)
        for button in self.action_buttons:
            button.Bind(wx.EVT_BUTTON, self._on_action_button)

    def current_data(self) -> ListCreateData:
        return ListCreateData(
            filter_text=self.search_ctrl.GetValue(),
            reverse=self.reverse_check.GetValue(),
        )

    def _synced(self):
        self.list_ctrl.sync()
        if self.on_changed is not None:
            self.on_changed()

    def _on_filter_changed(self, event):
        self.controller.create(self.current_data())
        self._synced()

    def _on_filter_cleared(self, event):
        self.search_ctrl.SetValue("")
        self._on_filter_changed(event)

    def on_refresh(self, event=None):
        self.controller.refresh()
        self._synced()

    def _on_action_button(self, event):
        label = event.GetEventObject().action_label
        selected = self.list_ctrl.GetFirstSelected()
        item = self.controller.item_at(selected)
        if item is None:
            return
        action = item.action(label)
        if action is None:
            return
        Log.debug(f"Invoke '{label}' on row {selected}", 2)
        action.invoke()
        # Destroy / toggle rebuilt the list; the row count may have changed.
        self._synced()
        if selected >= self.controller.count():
            selected = self.controller.count() - 1
        if selected >= 0:
            self.list_ctrl.Select(selected)


class ObjectBrowserPanel(ControllerListPanel):
    """The scene object list with Details / Delete / Toggle Active."""

    def __init__(self, parent, controller: ListControllerBase, data: Optional[ListCreateData] = None,
                 on_changed: Optional[Callable[[], None]] = None):
        super().__init__(
            parent,
            controller,
            action_labels=(LABEL_INSPECT, LABEL_DESTROY, LABEL_TOGGLE_ACTIVE),
            data=data,
            on_changed=on_changed,
        )
        self.list_ctrl.Bind(wx.EVT_LIST_ITEM_ACTIVATED, self._on_row_activated)

    def _on_row_activated(self, event):
        item = self.controller.item_at(event.GetIndex())
        if item is None:
            return
        action = item.action(LABEL_INSPECT)
        if action is not None:
            action.invoke()
