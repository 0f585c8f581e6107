"""Parsing helpers for flat KEY=VALUE stores and typed values."""

import math
from collections.abc import Iterable

from confchain.domain.exceptions import ParsingError

DELIMITER = "="

STRING_TYPE_NAME = "string"
FLOAT_TYPE_NAME = "float64"
BOOL_TYPE_NAME = "bool"

TRUE_LITERALS = frozenset({"1", "t", "true"})
FALSE_LITERALS = frozenset({"0", "f", "false"})


def parse_line(line: str) -> tuple[str, str]:
    """Split a single KEY=VALUE record.

    Args:
        line: One record without its line terminator.

    Returns:
        Tuple of (key, value). Neither part is trimmed.

    Raises:
        ParsingError: If the line does not contain exactly one '='.
    """
    tokens = line.split(DELIMITER)
    if len(tokens) != 2:
        raise ParsingError(line)
    return tokens[0], tokens[1]


def parse_lines(lines: Iterable[str], source: str | None = None) -> dict[str, str]:
    """Parse an iterable of lines into a key/value mapping.

    Line terminators are stripped and empty lines skipped. Later duplicates
    overwrite earlier ones. The first malformed line aborts parsing.

    Args:
        lines: Lines as produced by iterating a text file.
        source: Optional source name used in error locations.

    Returns:
        Mapping of keys to raw string values.

    Raises:
        ParsingError: On the first malformed line.
    """
    store: dict[str, str] = {}
    for line_number, raw in enumerate(lines, start=1):
        line = _strip_terminator(raw)
        if not line:
            continue
        try:
            key, value = parse_line(line)
        except ParsingError:
            raise ParsingError(line, path=source, line_number=line_number) from None
        store[key] = value
    return store


def _strip_terminator(raw: str) -> str:
    # One "\n", then at most one "\r"; a lone "\r" is not a separator
    if raw.endswith("\n"):
        raw = raw[:-1]
    if raw.endswith("\r"):
        raw = raw[:-1]
    return raw


def parse_float(value: str) -> float:
    """Parse a float the way a strict 64-bit float parser would.

    Accepts decimal and exponent forms, inf/infinity/nan in any case, and
    hexadecimal literals with a binary exponent (e.g., "0x1p4").

    Raises:
        ValueError: If the value has surrounding whitespace, digit
            separators, is not a float literal, or is out of range.
    """
    if value != value.strip() or "_" in value:
        raise ValueError(f"invalid float literal: {value!r}")

    unsigned = value.lstrip("+-").lower()
    if unsigned.startswith("0x"):
        if "p" not in unsigned:
            raise ValueError(f"hex float literal requires a p exponent: {value!r}")
        try:
            return float.fromhex(value)
        except OverflowError:
            raise ValueError(f"float literal out of range: {value!r}") from None

    result = float(value)
    if math.isinf(result) and unsigned not in ("inf", "infinity"):
        raise ValueError(f"float literal out of range: {value!r}")
    return result


def parse_bool(value: str) -> bool:
    """Parse a boolean literal (1/t/true or 0/f/false, any case).

    Raises:
        ValueError: If the value is not a recognised boolean literal.
    """
    lowered = value.lower()
    if lowered in TRUE_LITERALS:
        return True
    if lowered in FALSE_LITERALS:
        return False
    raise ValueError(f"invalid bool literal: {value!r}")
