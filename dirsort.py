import argparse
import os
import sys
from pathlib import Path

from sorter import FatalSortError, scan_and_sort


def build_parser():
    parser = argparse.ArgumentParser(
        prog="dirsort",
        description="Move the files of a folder into subfolders by extension",
    )
    parser.add_argument(
        "folder", nargs="?", default=None,
        help="Folder to sort (default: $HOME/Documents)",
    )
    return parser


def resolve_directory(folder, environ=None):
    if folder is not None:
        return Path(folder)

    environ = os.environ if environ is None else environ
    home = environ.get("HOME")
    if home is None:
        raise FatalSortError("HOME environment variable not set")
    return Path(home) / "Documents"


def main(argv=None):
    args = build_parser().parse_args(argv)
    try:
        directory = resolve_directory(args.folder)
        scan_and_sort(directory)
    except FatalSortError as e:
        sys.exit(str(e))
    return 0


if __name__ == "__main__":
    sys.exit(main())
