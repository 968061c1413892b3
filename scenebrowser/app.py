# app.py
'''
Copyright 2025 Aaron Vose (avose@aaronvose.net)
Licensed under the LGPL v2.1; see the file 'LICENSE' for details.
'''
import sys
import traceback
import wx

from scenebrowser.core.list_builder import ListCreateData
from scenebrowser.core.log import Log
from scenebrowser.core.scene_io import load_scene

def on_exception(exc_type, exc_value, exc_traceback):
    """Route unhandled exceptions to the log and status bar instead of a silent failure."""
    if issubclass(exc_type, KeyboardInterrupt):
        sys.__excepthook__(exc_type, exc_value, exc_traceback)
        return

    tb_text = ''.join(traceback.format_exception(exc_type, exc_value, exc_traceback))
    error_message = f"!ERROR! Unhandled Exception:\n{tb_text}"
    Log.debug(error_message, 0)

    main_frame = wx.GetApp().GetTopWindow() if wx.GetApp() else None
    if main_frame is not None and hasattr(main_frame, 'SetStatusText'):
        main_frame.SetStatusText(error_message.splitlines()[-1])
    else:
        print(error_message, file=sys.stderr)

if tuple(getattr(wx, 'VERSION', (0,0,0))[:3]) < (4, 2, 0):
    raise RuntimeError(f"SceneBrowser requires wxPython ≥ 4.2.0; found {wx.__version__}")

from scenebrowser.ui.main_frame import MainFrame

def main(verbosity: int = 0, stdexp: bool = False, scene_path: str = None,
         filter_text: str = "", reverse: bool = False):
    if not stdexp:
        sys.excepthook = on_exception

    Log.set_verbosity(verbosity)
    graph = load_scene(scene_path) if scene_path else None

    app = wx.App(False)

    frame = MainFrame(
        graph=graph,
        data=ListCreateData(filter_text=filter_text, reverse=reverse),
        scene_path=scene_path,
        verbosity=verbosity,
    )
    frame.Show()

    return app.MainLoop()
