'''
Copyright 2025 Aaron Vose (avose@aaronvose.net)
Licensed under the LGPL v2.1; see the file 'LICENSE' for details.
'''

# Object list row format
LINE_FORMAT = "{:04d}"
INDENT_UNIT = "  "
LINE_GAP = "  "

# Row state -> color markup name
COLOR_DESTROYED = "red"
COLOR_ACTIVE = "white"
COLOR_INACTIVE = "silver"

# Action labels, in the order they are offered for each row
LABEL_INSPECT = "Details"
LABEL_DESTROY = "Delete"
LABEL_TOGGLE_ACTIVE = "Toggle\nActive"
