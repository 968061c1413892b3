'''
Copyright 2025 Aaron Vose (avose@aaronvose.net)
Licensed under the LGPL v2.1; see the file 'LICENSE' for details.
'''
import wx

from scenebrowser.core.constants import COLOR_ACTIVE, COLOR_DESTROYED, COLOR_INACTIVE

# Shared UI constants
DEFAULT_BG_COLOR = wx.Colour(32, 32, 40)
DEFAULT_FG_COLOR = wx.Colour(230, 230, 230)
LIST_FONT_SIZE = 10
BROWSER_SIZE = (640, 720)
INFO_SIZE = (520, 480)

# Markup color name -> row foreground
STATE_COLOURS = {
    COLOR_DESTROYED: wx.Colour(220, 60, 60),
    COLOR_ACTIVE: wx.Colour(255, 255, 255),
    COLOR_INACTIVE: wx.Colour(150, 150, 150),
}
