"""
Fatal error types raised while building the artifact.

Each one wraps the OSError that caused it (available as __cause__).
"""


class TotxtError(Exception):
    """Base class for errors that abort a run."""

    label = "Error"

    def __str__(self):
        cause = self.__cause__
        if cause is not None:
            return f"{self.label}: {cause}"
        return super().__str__() or self.label


class IgnoreFileError(TotxtError):
    label = "Error reading .totxtignore file"


class OutputCreateError(TotxtError):
    label = "Error creating output file"


class PreambleReadError(TotxtError):
    label = "Error reading preamble file"


class WalkError(TotxtError):
    label = "Error processing directory"


class OutputWriteError(TotxtError):
    label = "Error writing output file"
