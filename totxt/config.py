"""
Run configuration, built once from the command line.
"""

from dataclasses import dataclass

DEFAULT_PREAMBLE_PATH = "preamble.txt"
DEFAULT_OUTPUT_PATH = "output.txt"


@dataclass(frozen=True)
class Config:
    root: str
    # Empty string selects the built-in preamble
    preamble_path: str = DEFAULT_PREAMBLE_PATH
    output_path: str = DEFAULT_OUTPUT_PATH
    prune_ignored_dirs: bool = False
