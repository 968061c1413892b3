'''
Copyright 2025 Aaron Vose (avose@aaronvose.net)
Licensed under the LGPL v2.1; see the file 'LICENSE' for details.
'''
from __future__ import annotations

import re
from typing import Optional, Tuple

__all__ = ["parse_color_markup"]

_COLOR_RE = re.compile(r"^<color=([^>]*)>(.*)</color>$", re.DOTALL)


def parse_color_markup(text: str) -> Tuple[Optional[str], str]:
    """
    Split '<color=NAME>body</color>' into (NAME, body).
    Text without the wrapper comes back as (None, text).
    """
    match = _COLOR_RE.match(text)
    if match is None:
        return (None, text)
    return (match.group(1), match.group(2))
