################################################################################################
'''
Copyright 2025 Aaron Vose (avose@aaronvose.net)
Licensed under the LGPL v2.1; see the file 'LICENSE' for details.

This file holds the window opened by the Details action: the serialized components of a node.
'''
################################################################################################

import wx

from scenebrowser.core.list_base import ListControllerBase
from scenebrowser.ui.constants import INFO_SIZE
from scenebrowser.ui.object_list import ControllerListPanel

################################################################################################
class TextInfoFrame(wx.Frame):
    def __init__(self, parent, title: str, controller: ListControllerBase):
        super().__init__(parent, title=f"Details: {title}", size=INFO_SIZE)
        self.panel = ControllerListPanel(self, controller)

        self.btn_ok = wx.Button(self, wx.ID_OK, "Close")
        sizer = wx.BoxSizer(wx.VERTICAL)
        sizer.Add(self.panel, 1, wx.EXPAND)
        button_sizer = wx.BoxSizer(wx.HORIZONTAL)
        button_sizer.AddStretchSpacer()
        button_sizer.Add(self.btn_ok, 0, wx.ALL, 4)
        sizer.Add(button_sizer, 0, wx.EXPAND)
        self.SetSizer(sizer)

        self.Bind(wx.EVT_CLOSE, self.OnClose)
        self.btn_ok.Bind(wx.EVT_BUTTON, self.OnClose)

        self.CenterOnParent()
        self.Show(True)

    def OnClose(self, event=None):
        if self in self.Parent.info_frames:
            self.Parent.info_frames.remove(self)
        self.Destroy()

################################################################################################
