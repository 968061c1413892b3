'''
Copyright 2025 Aaron Vose (avose@aaronvose.net)
Licensed under the LGPL v2.1; see the file 'LICENSE' for details.
'''
from __future__ import annotations

import json
import os
import uuid
from pathlib import Path
from typing import Any, Union

Pathish = Union[str, Path]

__all__ = ["fsync_dir", "atomic_write_bytes", "atomic_write_json"]


def fsync_dir(dir_path: Pathish) -> None:
    """
    Fsync a directory so a rename inside it survives a crash.
    No-op if the directory doesn't exist.
    """
    d = Path(dir_path)
    if not d.exists():
        return
    fd = os.open(str(d), os.O_RDONLY)
    try:
        os.fsync(fd)
    finally:
        os.close(fd)


def atomic_write_bytes(dst: Pathish, data: bytes) -> None:
    """
    Write bytes to dst through a same-directory temp file:
      - write + fsync temp
      - os.replace -> dst
      - fsync directory
    The temp file is removed if anything fails.
    """
    dst_path = Path(dst)
    dst_dir = dst_path.parent
    dst_dir.mkdir(parents=True, exist_ok=True)
    tmp_path = dst_dir / f".{dst_path.name}.tmp-{os.getpid()}-{uuid.uuid4().hex[:8]}"

    try:
        with open(tmp_path, "wb") as f:
            f.write(data)
            f.flush()
            os.fsync(f.fileno())
        os.replace(tmp_path, dst_path)
        fsync_dir(dst_dir)
    except Exception:
        try:
            if tmp_path.exists():
                tmp_path.unlink()
        except OSError:
            pass
        raise


def atomic_write_json(dst: Pathish, obj: Any) -> None:
    atomic_write_bytes(dst, json.dumps(obj, indent=2).encode("utf-8"))
