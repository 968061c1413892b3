'''
Copyright 2025 Aaron Vose (avose@aaronvose.net)
Licensed under the LGPL v2.1; see the file 'LICENSE' for details.
'''
from functools import wraps

from scenebrowser.core.log import Log

def requires_alive(method):
    """Decorator to silently skip an action whose item's node is already destroyed."""
    @wraps(method)
    def wrapper(self, ctx, *args, **kwargs):
        if ctx.snapshot.is_destroyed:
            Log.debug(f"{method.__name__}: '{ctx.snapshot.name}' is destroyed, skipping", 2)
            return
        return method(self, ctx, *args, **kwargs)
    return wrapper
