"""
Load the .totxtignore file into a list of glob patterns.
"""

import logging
from pathlib import Path

from .errors import IgnoreFileError

logger = logging.getLogger(__name__)

IGNORE_FILENAME = ".totxtignore"


def ignore_file_for(root):
    return Path(root) / IGNORE_FILENAME


def read_patterns(ignore_path):
    """Read one stripped pattern per line. Blank lines are kept."""
    with open(ignore_path, 'r', encoding='utf-8', errors='surrogateescape') as f:
        return tuple(line.strip() for line in f)


def load_ignore_list(ignore_path):
    """
    Return the patterns in ignore_path, or an empty tuple if it doesn't exist.

    Any other failure to read the file raises IgnoreFileError.
    """
    try:
        patterns = read_patterns(ignore_path)
    except FileNotFoundError:
        logger.debug("No ignore file at %s, nothing excluded", ignore_path)
        return ()
    except OSError as e:
        raise IgnoreFileError() from e

    logger.debug("Loaded %d ignore patterns from %s", len(patterns), ignore_path)
    return patterns
