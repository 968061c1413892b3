'''
Copyright 2025 Aaron Vose (avose@aaronvose.net)
Licensed under the LGPL v2.1; see the file 'LICENSE' for details.
'''
from __future__ import annotations

from typing import Optional

import wx

from scenebrowser.core.list_base import ListControllerBase
from scenebrowser.core.list_builder import ListCreateData
from scenebrowser.core.list_controller import ObjectListController
from scenebrowser.core.log import Log
from scenebrowser.core.scene import SceneGraph
from scenebrowser.core.scene_io import load_scene, save_scene
from scenebrowser.ui.constants import BROWSER_SIZE
from scenebrowser.ui.info_frame import TextInfoFrame
from scenebrowser.ui.object_list import ObjectBrowserPanel
from scenebrowser.ui.statusbar import StatusBar

SCENE_WILDCARD = "Scene files (*.json)|*.json|All files (*.*)|*.*"


class MainFrame(wx.Frame):
    """Object browser window for one live scene."""

    def __init__(self, graph: Optional[SceneGraph] = None, data: Optional[ListCreateData] = None,
                 scene_path: str | None = None, verbosity: int = 0):
        super().__init__(None, title="SceneBrowser", size=BROWSER_SIZE)
        self.SetMinSize((420, 360))
        Log.set_verbosity(verbosity)

        self.graph = graph if graph is not None else SceneGraph()
        self.scene_path = scene_path
        self.info_frames = []

        self._build_menu()
        self.SetStatusBar(StatusBar(self))
        self._build_body(data)
        self._update_status()
        self.Bind(wx.EVT_CLOSE, self.OnClose)

    # ---------------- Layout ----------------

    def _build_menu(self):
        menubar = wx.MenuBar()

        file_menu = wx.Menu()
        item_open = file_menu.Append(wx.ID_OPEN, "&Open Scene...\tCtrl+O")
        item_save = file_menu.Append(wx.ID_SAVE, "&Save Scene As...\tCtrl+S")
        file_menu.AppendSeparator()
        item_quit = file_menu.Append(wx.ID_EXIT, "&Quit\tCtrl+Q")
        menubar.Append(file_menu, "&File")

        view_menu = wx.Menu()
        item_refresh = view_menu.Append(wx.ID_REFRESH, "&Refresh\tF5")
        item_log = view_menu.Append(wx.ID_ANY, "Show &Log")
        menubar.Append(view_menu, "&View")

        self.SetMenuBar(menubar)
        self.Bind(wx.EVT_MENU, self.on_open_scene, item_open)
        self.Bind(wx.EVT_MENU, self.on_save_scene, item_save)
        self.Bind(wx.EVT_MENU, self.OnClose, item_quit)
        self.Bind(wx.EVT_MENU, self.on_refresh, item_refresh)
        self.Bind(wx.EVT_MENU, lambda evt: self.GetStatusBar().OnShowLog(), item_log)

    def _build_body(self, data: Optional[ListCreateData]):
        self.controller = ObjectListController(self.graph, open_view=self.open_info_view)
        self.browser = ObjectBrowserPanel(self, self.controller, data=data,
                                          on_changed=self._update_status)
        sizer = wx.BoxSizer(wx.VERTICAL)
        sizer.Add(self.browser, 1, wx.EXPAND)
        self.SetSizer(sizer)
        self.Layout()

    def _update_status(self):
        source = self.scene_path or "(unsaved scene)"
        self.SetStatusText(
            f"{source}: {self.graph.node_count()} nodes, {self.controller.count()} shown"
        )

    # ---------------- Host callbacks ----------------

    def open_info_view(self, title: str, controller: ListControllerBase):
        self.info_frames.append(TextInfoFrame(self, title, controller))

    def set_scene(self, graph: SceneGraph, path: str | None = None):
        """Swap in a new scene and rebuild the browser with the current filter."""
        for frame in list(self.info_frames):
            frame.OnClose()
        data = self.browser.current_data()
        self.graph = graph
        self.scene_path = path
        self.browser.Destroy()
        self._build_body(data)
        self._update_status()

    # ---------------- Menu actions ----------------

    def on_open_scene(self, event=None):
        with wx.FileDialog(self, "Open scene", wildcard=SCENE_WILDCARD,
                           style=wx.FD_OPEN | wx.FD_FILE_MUST_EXIST) as dialog:
            if dialog.ShowModal() == wx.ID_CANCEL:
                return
            path = dialog.GetPath()
        try:
            graph = load_scene(path)
        except (OSError, ValueError) as e:
            Log.debug(f"Failed to open scene {path}: {e}", 0)
            wx.MessageBox(f"Could not open scene:\n{e}", "Open Scene", wx.OK | wx.ICON_ERROR)
            return
        self.set_scene(graph, path)

    def on_save_scene(self, event=None):
        with wx.FileDialog(self, "Save scene", wildcard=SCENE_WILDCARD,
                           style=wx.FD_SAVE | wx.FD_OVERWRITE_PROMPT) as dialog:
            if dialog.ShowModal() == wx.ID_CANCEL:
                return
            path = dialog.GetPath()
        try:
            save_scene(path, self.graph)
        except OSError as e:
            Log.debug(f"Failed to save scene {path}: {e}", 0)
            wx.MessageBox(f"Could not save scene:\n{e}", "Save Scene", wx.OK | wx.ICON_ERROR)
            return
        self.scene_path = path
        self._update_status()

    def on_refresh(self, event=None):
        self.browser.on_refresh()
        self._update_status()

    def OnClose(self, event=None):
        for frame in list(self.info_frames):
            frame.OnClose()
        self.Destroy()
