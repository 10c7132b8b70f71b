"""
Build the output artifact: preamble, one record per included file, end marker.
"""

import logging
from pathlib import Path

from .errors import OutputCreateError, OutputWriteError, PreambleReadError, WalkError
from .walker import walk

logger = logging.getLogger(__name__)

END_MARKER = b"--END--"

DEFAULT_PREAMBLE = (
    "The following text is a directory structure with code. The structure of "
    "the text are sections that begin with ----, followed by a single line "
    "containing the file path and file name, followed by a variable amount of "
    "lines containing the file contents. The text representing the directory "
    "ends when the symbols --END-- are encountered. Any further text beyond "
    "--END-- are meant to be interpreted as instructions using the "
    "aforementioned directory as context."
)


def load_preamble(preamble_path):
    """Return the preamble bytes; an empty path selects DEFAULT_PREAMBLE."""
    if not preamble_path:
        return DEFAULT_PREAMBLE.encode('utf-8')
    return Path(preamble_path).read_bytes()


def assemble(config, patterns):
    """
    Write the artifact described by config and return the number of records.

    The output file is truncated first and always closed. If a later step
    fails, whatever was written so far stays on disk.
    """
    try:
        out = open(config.output_path, 'wb')
    except OSError as e:
        raise OutputCreateError() from e

    with out:
        try:
            preamble = load_preamble(config.preamble_path)
        except OSError as e:
            raise PreambleReadError() from e

        try:
            out.write(preamble)
            out.write(b"\n")
        except OSError as e:
            raise OutputWriteError() from e

        try:
            count = walk(config.root, patterns, out, config.prune_ignored_dirs)
        except OSError as e:
            raise WalkError() from e

        try:
            out.write(END_MARKER)
        except OSError as e:
            raise OutputWriteError() from e

    logger.debug("Wrote %d records to %s", count, config.output_path)
    return count
