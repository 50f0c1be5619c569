"""Header rule compilation.

Rules are regular expression strings. Plain Python patterns are used
as-is. Patterns written with delimiters, as found in configuration
shared with other stacks (``#^text/(?<fmt>\\w+)$#i``), are unwrapped and
their trailing flags translated.
"""

import functools
import logging
import re

logger = logging.getLogger("apiver.listeners")

DELIMITERS = frozenset("#~/!@%|")

_FLAGS = {
    "i": re.IGNORECASE,
    "m": re.MULTILINE,
    "s": re.DOTALL,
    "x": re.VERBOSE,
    "u": re.UNICODE,
}

# (?<name>...) but not the (?<= / (?<! lookbehinds
_BARE_NAMED_GROUP = re.compile(r"\(\?<(?=[A-Za-z_])")


def _unwrap(pattern: str) -> tuple[str, int]:
    """Split a delimited pattern into its body and ``re`` flags."""
    if len(pattern) < 2 or pattern[0] not in DELIMITERS:
        return pattern, 0
    delimiter = pattern[0]
    end = pattern.rfind(delimiter)
    if end == 0:
        return pattern, 0
    modifiers = pattern[end + 1 :]
    unsupported = [m for m in modifiers if m not in _FLAGS]
    if unsupported:
        # Trailing letters after a delimiter are modifiers we cannot honour
        if modifiers.isalpha():
            msg = f"unsupported modifier(s) {''.join(unsupported)!r}"
            raise ValueError(msg)
        return pattern, 0
    flags = 0
    for modifier in modifiers:
        flags |= _FLAGS[modifier]
    return pattern[1:end], flags


@functools.lru_cache(maxsize=256)
def compile_rule(pattern: str) -> re.Pattern[str] | None:
    """Compile a rule, or return ``None`` (with a warning) if it is invalid."""
    try:
        body, flags = _unwrap(pattern)
    except ValueError as exc:
        logger.warning("Ignoring version rule %r: %s", pattern, exc)
        return None
    body = _BARE_NAMED_GROUP.sub("(?P<", body)
    try:
        return re.compile(body, flags)
    except re.error as exc:
        logger.warning("Ignoring invalid version rule %r: %s", pattern, exc)
        return None


def match_rules(rules: list[str], value: str) -> dict[str, str] | None:
    """Full-match *value* against *rules*, most recently added first.

    Returns the named groups of the first match, or ``None``.
    """
    for pattern in reversed(rules):
        regex = compile_rule(pattern)
        if regex is None:
            continue
        match = regex.fullmatch(value)
        if match is not None:
            return match.groupdict()
    return None
