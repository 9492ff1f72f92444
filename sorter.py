import os
import shutil
from collections import namedtuple
from pathlib import Path
from types import MappingProxyType

EXTENSION_FOLDERS = MappingProxyType({
    ".jpg": "Images",
    ".jpeg": "Images",
    ".png": "Images",
    ".gif": "Images",
    ".mp4": "Videos",
    ".mov": "Videos",
    ".avi": "Videos",
    ".doc": "Documents",
    ".pdf": "Documents",
    ".txt": "Documents",
    ".mp3": "Music",
    ".wav": "Music",
})

MOVED = "moved"
SKIPPED = "skipped"

# status is MOVED or SKIPPED; folder is set only for MOVED
SortResult = namedtuple("SortResult", ["status", "name", "folder", "message"])


class FatalSortError(RuntimeError):
    """Raised when the run has to stop: a folder or a move could not be made."""


def file_extension(file_path):
    ext = Path(file_path).suffix
    if not ext:
        return None
    try:
        # names with undecodable bytes carry surrogate escapes
        ext.encode("utf-8")
    except UnicodeEncodeError:
        return None
    return ext.lower()


def classify(extension):
    if not extension:
        return None
    return EXTENSION_FOLDERS.get(extension)


def list_entries(folder):
    folder = Path(folder)
    if not folder.is_dir():
        return []

    entries = []
    try:
        for item in folder.iterdir():
            entries.append(item)
    except OSError:
        # keep whatever was read before the listing broke
        pass
    return entries


def move_file(file_path, target_dir):
    try:
        target_dir.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise FatalSortError(f"Failed to create directory {target_dir}: {e}") from e

    target_path = target_dir / file_path.name
    if target_path.exists() or target_path.is_symlink():
        raise FatalSortError(f"Failed to move file {file_path}: {target_path} already exists")

    try:
        shutil.move(str(file_path), str(target_path))
    except OSError as e:
        raise FatalSortError(f"Failed to move file {file_path}: {e}") from e
    return target_path


def display_name(name):
    # undecodable bytes come back as \xNN instead of lone surrogates
    return os.fsencode(name).decode("utf-8", "backslashreplace")


def _skip(name, message):
    return SortResult(SKIPPED, name, None, message)


def sort_entry(entry, folder):
    name = display_name(entry.name)
    try:
        if entry.is_dir():
            return _skip(name, f"Skipping {name} as it is a directory")
        if not entry.is_file():
            return _skip(name, f"Skipping {name} as it is not a regular file")
    except OSError:
        return _skip(name, f"Skipping {name} as it could not be read")

    folder_name = classify(file_extension(entry))
    if folder_name is None:
        return _skip(name, f"Skipping {name}")

    move_file(entry, Path(folder) / folder_name)
    return SortResult(MOVED, name, folder_name, f"Moved {name} to {folder_name} folder")


def scan_and_sort(folder_path, report=print):
    folder = Path(folder_path)
    summary = {}

    for entry in list_entries(folder):
        result = sort_entry(entry, folder)
        report(result.message)
        if result.status == MOVED:
            summary[result.folder] = summary.get(result.folder, 0) + 1

    report("Done")
    return summary
