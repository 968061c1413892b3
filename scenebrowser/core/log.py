################################################################################################

'''

Copyright 2025 Aaron Vose (avose@aaronvose.net)

Licensed under the LGPL v2.1; see the file 'LICENSE' for details.

This file holds the in-process debug log shared by the object browser and its host.

'''

################################################################################################

import inspect
from datetime import datetime
from typing import List, Optional, Tuple

from scenebrowser.utils.fs_atomic import atomic_write_bytes

################################################################################################

TIME_FORMAT = "%m/%d/%Y %H:%M:%S"

LogLine = Tuple[str, str]

def _now() -> str:
    return datetime.now().strftime(TIME_FORMAT)

class LogManager():
    __log: Optional[List[LogLine]] = None

    def __init__(self, verbosity: int = 0):
        if LogManager.__log is None:
            LogManager.__log = [(_now(), "Begin SceneBrowser Log")]
        self.verbosity = verbosity

    def add(self, text: str):
        LogManager.__log.append((_now(), text))

    def debug(self, text: str, level: int = 0):
        """Record text when the current verbosity is at least level, tagged with the caller's file."""
        if self.verbosity < level:
            return
        frame = inspect.currentframe()
        caller = frame.f_back if frame is not None else None
        if caller is not None:
            filename = caller.f_code.co_filename.replace('\\', '/').split('/')[-1]
        else:
            filename = "unknown"
        self.add(f"[{filename}] {text}")

    def get(self, index: int = None):
        if index is not None:
            return LogManager.__log[index]
        return LogManager.__log.copy()

    def tail(self, count: int) -> List[LogLine]:
        if count <= 0:
            return []
        return LogManager.__log[-count:]

    def count(self):
        return len(LogManager.__log)

    def set_verbosity(self, verbosity: int = 0):
        self.verbosity = verbosity

    def clear(self):
        """Clear all log entries."""
        LogManager.__log.clear()
        LogManager.__log.append((_now(), "Log cleared"))

    def format(self) -> str:
        return "".join(f"[{timestamp}] {message}\n" for timestamp, message in LogManager.__log)

    def write_to_file(self, filepath: str) -> bool:
        """Write all log entries to a file; failures are recorded in the log itself."""
        try:
            atomic_write_bytes(filepath, self.format().encode("utf-8"))
        except OSError as e:
            self.add(f"Failed to write log to file '{filepath}': {e}")
            return False
        self.add(f"Log written to file: {filepath}")
        return True

################################################################################################

Log = LogManager()

################################################################################################
