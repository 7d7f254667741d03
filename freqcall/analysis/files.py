"""
File system helpers for locating wave files.
"""

import os
from typing import List


def make_path(name: str) -> str:
    """Returns the directory name ended by a path separator"""
    if name.endswith(("/", os.sep)):
        return name
    return name + os.sep


def is_dir_exist(name: str) -> bool:
    return os.path.isdir(name)


def find_wave_files(directory: str, ext: str = "csv") -> List[str]:
    """
    Paths of the regular files in ``directory`` with the given extension
    (case-insensitive), sorted by name. Subdirectories are not searched.
    """
    suffix = "." + ext.lower().lstrip(".")
    base = make_path(directory)
    found = []
    for entry in sorted(os.listdir(directory)):
        path = base + entry
        if entry.lower().endswith(suffix) and os.path.isfile(path):
            found.append(path)
    return found
