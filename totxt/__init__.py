"""
Serialize a directory tree into a single text file for use as context.
"""

from .assemble import DEFAULT_PREAMBLE, END_MARKER, assemble, load_preamble
from .config import Config
from .errors import TotxtError
from .ignore import IGNORE_FILENAME, load_ignore_list
from .match import BadPatternError, matches
from .walker import HEADER_TOKEN, Record, iter_records, walk
