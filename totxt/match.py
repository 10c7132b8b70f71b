"""
Shell-style glob matching of relative paths against the ignore list.

Works like fnmatch, except that wildcards stop at path separators:

    *       any run of characters other than '/'
    ?       a single character other than '/'
    [abc]   one character from the set; ranges (a-z) and negation ([^a]) allowed
    \\x      the literal character x

A pattern must match the entire path, and matching is case-sensitive.
"""

import functools
import logging
import re

logger = logging.getLogger(__name__)

SEPARATOR = '/'


class BadPatternError(ValueError):
    """Raised for a syntactically malformed glob pattern."""

    def __init__(self, pattern, reason):
        super().__init__(f"bad pattern {pattern!r}: {reason}")
        self.pattern = pattern
        self.reason = reason


def _class_char(pattern, i):
    """Read one (possibly escaped) character of a [...] class starting at i."""
    n = len(pattern)
    if i >= n:
        raise BadPatternError(pattern, "unterminated character class")
    c = pattern[i]
    if c in '-]':
        raise BadPatternError(pattern, f"unexpected {c!r} in character class")
    if c == '\\':
        i += 1
        if i >= n:
            raise BadPatternError(pattern, "trailing backslash")
        c = pattern[i]
    i += 1
    # A class item is always followed by something, at least the closing ']'
    if i >= n:
        raise BadPatternError(pattern, "unterminated character class")
    return c, i


def _translate_class(pattern, i):
    """Translate the class whose body starts at i (just past '['). Returns (regex, i)."""
    negated = i < len(pattern) and pattern[i] == '^'
    if negated:
        i += 1

    ranges = []
    while True:
        if ranges and pattern[i] == ']':
            i += 1
            break
        lo, i = _class_char(pattern, i)
        hi = lo
        if pattern[i] == '-':
            hi, i = _class_char(pattern, i + 1)
        ranges.append((lo, hi))

    # An inverted range like [z-a] is legal but matches nothing
    body = ''.join(
        re.escape(lo) if lo == hi else f"{re.escape(lo)}-{re.escape(hi)}"
        for lo, hi in ranges
        if lo <= hi
    )
    if not body:
        return ('.' if negated else '(?!)'), i
    return f"[{'^' if negated else ''}{body}]", i


def translate(pattern):
    """Translate a glob pattern to an anchored regular expression string."""
    parts = []
    i, n = 0, len(pattern)
    while i < n:
        c = pattern[i]
        i += 1
        if c == '*':
            while i < n and pattern[i] == '*':
                i += 1
            parts.append(f"[^{SEPARATOR}]*")
        elif c == '?':
            parts.append(f"[^{SEPARATOR}]")
        elif c == '[':
            regex, i = _translate_class(pattern, i)
            parts.append(regex)
        elif c == '\\':
            if i >= n:
                raise BadPatternError(pattern, "trailing backslash")
            parts.append(re.escape(pattern[i]))
            i += 1
        else:
            parts.append(re.escape(c))
    return f"(?s:{''.join(parts)})\\Z"


@functools.lru_cache(maxsize=256)
def compile_pattern(pattern):
    return re.compile(translate(pattern))


def match(pattern, path):
    """Return True if path matches pattern. Raises BadPatternError if pattern is malformed."""
    return compile_pattern(pattern).match(path) is not None


@functools.lru_cache(maxsize=256)
def _compile_or_none(pattern):
    try:
        return compile_pattern(pattern)
    except BadPatternError as e:
        logger.warning("Ignoring malformed pattern: %s", e)
        return None


def matches(path, patterns):
    """Check if a relative path matches any of the patterns. Malformed patterns never match."""
    for pat in patterns:
        regex = _compile_or_none(pat)
        if regex is not None and regex.match(path):
            return True
    return False
