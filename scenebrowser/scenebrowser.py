#!/usr/bin/env python3
'''
Copyright 2025 Aaron Vose (avose@aaronvose.net)
Licensed under the LGPL v2.1; see the file 'LICENSE' for details.
'''

import sys
import argparse

def cli():
    parser = argparse.ArgumentParser(description="SceneBrowser live scene object browser")
    parser.add_argument(
        "--verbosity",
        type=int, default=0,
        help="Set verbosity level (0=quiet, 1=normal, 2=verbose, 3+=debug)"
    )
    parser.add_argument(
        "--stdexp",
        action="store_true",
        help="Use standard exception handling to stdout / stderr."
    )
    parser.add_argument(
        "--scene",
        default=None,
        help="Scene JSON file to open at startup."
    )
    parser.add_argument(
        "--filter",
        default="",
        help="Initial filter text for the object list."
    )
    parser.add_argument(
        "--reverse",
        action="store_true",
        help="List objects in reverse order."
    )
    args = parser.parse_args()

    from scenebrowser.app import main
    return main(
        verbosity=args.verbosity,
        stdexp=args.stdexp,
        scene_path=args.scene,
        filter_text=args.filter,
        reverse=args.reverse,
    )

if __name__ == "__main__":
    sys.exit(cli())
