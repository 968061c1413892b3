################################################################################################
'''
Copyright 2025 Aaron Vose (avose@aaronvose.net)
Licensed under the LGPL v2.1; see the file 'LICENSE' for details.

This file holds the browser window's status bar and the log viewer it pops up.
'''
################################################################################################

import wx

from scenebrowser.core.log import Log, LogManager

################################################################################################
class LogList(wx.VListBox):
    LINE_NUM_W = 7
    DATE_W     = 20

    def __init__(self, parent, log: LogManager, size):
        self.log = log
        super().__init__(parent, style=wx.SIMPLE_BORDER, size=size)
        self.font = wx.Font(wx.FontInfo(9).Family(wx.FONTFAMILY_TELETYPE))
        dc = wx.MemoryDC()
        dc.SetFont(self.font)
        self.char_w, self.char_h = dc.GetTextExtent("X")
        self.SetBackgroundColour((0, 0, 0))
        self.SetItemCount(self.log.count())
        self.ScrollToRow(max(0, self.log.count() - 1))

    def OnMeasureItem(self, index):
        _, text = self.log.get(index)
        return max(1, text.count("\n") + 1) * self.char_h

    def OnDrawItem(self, dc, rect, index):
        timestamp, text = self.log.get(index)
        dc.SetFont(self.font)
        dc.SetTextForeground((255, 255, 0))
        dc.DrawText("%d" % index, rect.x, rect.y)
        dc.SetTextForeground((255, 0, 255))
        dc.DrawText(timestamp, rect.x + self.LINE_NUM_W * self.char_w, rect.y)
        dc.SetTextForeground((128, 192, 128))
        dc.DrawText(text, rect.x + (self.LINE_NUM_W + self.DATE_W) * self.char_w, rect.y)

    def OnDrawBackground(self, dc, rect, index):
        colour = (64, 0, 64) if self.IsSelected(index) else (0, 0, 0)
        dc.SetBrush(wx.Brush(colour))
        dc.SetPen(wx.Pen((0, 0, 100)))
        dc.DrawRectangle(rect)

################################################################################################
class LogPopup(wx.PopupTransientWindow):
    WIN_HEIGHT = 300

    def __init__(self, parent, log: LogManager):
        super().__init__(parent, wx.SIMPLE_BORDER)
        self.log_list = LogList(self, log, (parent.Size[0], self.WIN_HEIGHT))
        sizer = wx.BoxSizer(wx.VERTICAL)
        sizer.Add(self.log_list, 1, wx.EXPAND)
        self.SetSizerAndFit(sizer)

    def OnDismiss(self):
        self.Parent.popup = None

################################################################################################
class StatusBar(wx.StatusBar):
    def __init__(self, parent):
        super().__init__(parent)
        self.popup = None
        self.Bind(wx.EVT_RIGHT_DOWN, self.OnRightDown)
        Log.add("Create StatusBar")

    def OnRightDown(self, event):
        """Context menu with the log options."""
        menu = wx.Menu()
        item_show_log = menu.Append(wx.ID_ANY, "Show Log")
        menu.AppendSeparator()
        item_save = menu.Append(wx.ID_SAVE, "Save Log to File...")
        item_copy = menu.Append(wx.ID_COPY, "Copy Log to Clipboard")
        menu.AppendSeparator()
        item_clear = menu.Append(wx.ID_CLEAR, "Clear Log")

        self.Bind(wx.EVT_MENU, self.OnShowLog, item_show_log)
        self.Bind(wx.EVT_MENU, self.OnSaveLogToFile, item_save)
        self.Bind(wx.EVT_MENU, self.OnCopyLogToClipboard, item_copy)
        self.Bind(wx.EVT_MENU, self.OnClearLog, item_clear)

        self.PopupMenu(menu)
        menu.Destroy()

    def OnShowLog(self, event=None):
        if self.popup is not None:
            self.popup.Dismiss()
            self.popup = None

        self.popup = LogPopup(self, Log)
        pos = self.ClientToScreen((0, 0))
        self.popup.Position((pos[0], pos[1] - LogPopup.WIN_HEIGHT), (0, 0))
        self.popup.Popup()

    def OnSaveLogToFile(self, event):
        with wx.FileDialog(
            self,
            "Save Log to file",
            wildcard="Log files (*.log)|*.log|Text files (*.txt)|*.txt|All files (*.*)|*.*",
            style=wx.FD_SAVE | wx.FD_OVERWRITE_PROMPT
        ) as dialog:
            if dialog.ShowModal() == wx.ID_CANCEL:
                return
            path = dialog.GetPath()
            if Log.write_to_file(path):
                self.SetStatusText(f"Log saved to: {path}")
            else:
                self.SetStatusText(f"Could not save log to: {path}")

    def OnCopyLogToClipboard(self, event):
        if not wx.TheClipboard.Open():
            self.SetStatusText("Error: Could not access clipboard")
            return
        try:
            wx.TheClipboard.SetData(wx.TextDataObject(Log.format()))
        finally:
            wx.TheClipboard.Close()
        self.SetStatusText(f"Copied {Log.count()} log entries to clipboard")

    def OnClearLog(self, event):
        result = wx.MessageBox(
            "Are you sure you want to clear the entire log?",
            "Clear Log",
            wx.YES_NO | wx.ICON_QUESTION
        )
        if result == wx.YES:
            Log.clear()
            self.SetStatusText("Log cleared")

################################################################################################
