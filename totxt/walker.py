"""
Walk a directory tree and write every non-ignored file as a framed record:

    ----
    relative/path/to/file
    <raw file bytes>

Entries are visited depth-first, sorted by name within each directory, with
files and subdirectories interleaved. Any read error aborts the walk.
"""

import logging
import os
import stat
from dataclasses import dataclass
from pathlib import Path

from .match import matches

logger = logging.getLogger(__name__)

HEADER_TOKEN = b"----"
ROOT_REL_PATH = "."


@dataclass(frozen=True)
class Record:
    path: str
    content: bytes


def _child_rel_path(rel_path, name):
    if rel_path == ROOT_REL_PATH:
        return name
    return f"{rel_path}/{name}"


def _sorted_entries(dir_path):
    with os.scandir(dir_path) as it:
        return sorted(it, key=lambda e: os.fsencode(e.name))


def iter_records(root, patterns, prune_ignored_dirs=False):
    """Yield a Record for every included file under root, in walk order."""
    # stat before wrapping in Path, which would turn "" into "."
    # A symlinked root is followed; entries below it are not
    info = os.stat(root)
    stack = [(Path(root), ROOT_REL_PATH, stat.S_ISDIR(info.st_mode))]

    while stack:
        path, rel_path, is_dir = stack.pop()
        if matches(rel_path, patterns):
            logger.debug("Ignoring %s", rel_path)
            # Without pruning, an ignored directory's children are still checked one by one
            if not is_dir or prune_ignored_dirs:
                continue
        elif not is_dir:
            yield Record(rel_path, path.read_bytes())
            continue

        children = [
            (Path(entry.path), _child_rel_path(rel_path, entry.name), entry.is_dir(follow_symlinks=False))
            for entry in _sorted_entries(path)
        ]
        # Reversed so the smallest name is popped first
        stack.extend(reversed(children))


def write_record(sink, record):
    sink.write(HEADER_TOKEN + b"\n")
    sink.write(os.fsencode(record.path) + b"\n")
    sink.write(record.content)
    sink.write(b"\n")


def walk(root, patterns, sink, prune_ignored_dirs=False):
    """Write every included file under root to the binary sink. Returns the record count."""
    count = 0
    # The sink may be a file inside root; flush so reading it sees everything written so far
    sink.flush()
    for record in iter_records(root, patterns, prune_ignored_dirs):
        write_record(sink, record)
        sink.flush()
        logger.debug("Wrote %s (%d bytes)", record.path, len(record.content))
        count += 1
    return count
