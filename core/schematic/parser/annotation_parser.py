"""Parse ``@<prefix>.<kind>(<args>)`` annotations from model documentation.

An annotation is a single call-like expression embedded in the free-text
documentation of a data model::

    /// @schematic.index(fields: ["email"], where: "active = true")

The arguments are ``key: value`` pairs separated by commas.  Values use JSON
literal syntax (strings, numbers, booleans, ``null``, arrays, objects); any
token that is not a valid JSON literal is kept verbatim as a string so that
raw SQL fragments pass through untouched.

Typical usage::

    raw = parse_annotation('@schematic.index(fields: ["email"])')
    # {"kind": "index", "fields": ["email"]}
"""

from __future__ import annotations

import json
import logging
import re
from typing import Any

logger = logging.getLogger(__name__)

DEFAULT_ANNOTATION_PREFIX = "schematic"

# ---------------------------------------------------------------------------
# Call-form pattern
# ---------------------------------------------------------------------------
# Matched against the text that follows ``@<prefix>.``:
#   (\w+)     – the annotation kind (capture group 1)
#   \(        – opening parenthesis
#   (.*)      – the raw argument text, newlines included (capture group 2)
#   \)        – closing parenthesis, which must end the text
_CALL_PATTERN = re.compile(r"(\w+)\((.*)\)", re.DOTALL)

_QUOTE_CHARS = frozenset({'"', "'"})
_OPEN_BRACKETS = frozenset({"[", "{"})
_CLOSE_BRACKETS = frozenset({"]", "}"})


# ---------------------------------------------------------------------------
# Exceptions
# ---------------------------------------------------------------------------


class FormatError(Exception):
    """Raised when an annotation line does not follow the ``@<prefix>.<kind>(<args>)`` form."""


# ---------------------------------------------------------------------------
# Value parsing
# ---------------------------------------------------------------------------


class _NotALiteral:
    """Marker returned by :func:`_decode_literal` for non-JSON text."""


_NOT_A_LITERAL = _NotALiteral()


def _reject_constant(name: str) -> Any:
    # ``json`` accepts NaN and Infinity; JSON literal syntax does not.
    raise ValueError(f"Non-standard JSON constant: {name}")


def _decode_literal(text: str) -> Any:
    """Decode *text* as a strict JSON literal, or return ``_NOT_A_LITERAL``."""
    try:
        return json.loads(text, parse_constant=_reject_constant)
    except ValueError:
        return _NOT_A_LITERAL


def parse_value(text: str) -> Any:
    """Convert the literal text of one argument value into a Python value.

    The text is trimmed and then read as a JSON literal.  Text that is not a
    JSON literal (unquoted words, SQL expressions) is returned as the trimmed
    string itself.  This function never raises.
    """
    trimmed = text.strip()
    literal = _decode_literal(trimmed)
    if isinstance(literal, _NotALiteral):
        return trimmed
    return literal


# ---------------------------------------------------------------------------
# Argument splitting
# ---------------------------------------------------------------------------


def split_arguments(text: str) -> list[str]:
    """Split an argument list into ``key: value`` segments.

    A single left-to-right scan tracks the active quote character and the
    ``[]``/``{}`` nesting depth.  A comma only separates segments when it is
    outside any quoted string and at depth zero, so commas inside string
    values and nested array/object literals are preserved.

    A quote opens a string only when no string is open; the string closes on
    the same quote character.  A trailing whitespace-only segment (e.g. from
    a trailing comma) is dropped.

    Parameters
    ----------
    text:
        The raw text between the annotation's parentheses.

    Returns
    -------
    list[str]
        The segments, untrimmed and not yet split on the colon.
    """
    segments: list[str] = []
    current: list[str] = []
    quote_char = ""
    depth = 0

    for ch in text:
        if ch in _QUOTE_CHARS and quote_char == "":
            quote_char = ch
        elif ch == quote_char:
            quote_char = ""

        if quote_char == "":
            if ch in _OPEN_BRACKETS:
                depth += 1
            elif ch in _CLOSE_BRACKETS:
                depth -= 1

        if ch == "," and quote_char == "" and depth == 0:
            segments.append("".join(current))
            current = []
        else:
            current.append(ch)

    trailing = "".join(current)
    if trailing.strip():
        segments.append(trailing)

    return segments


def _parse_arguments(text: str) -> dict[str, Any]:
    """Parse ``key: value, key2: value2`` into a dict.

    Each segment is split on its first colon only.  Segments without a colon
    are dropped.  A repeated key keeps its last value.
    """
    if not text.strip():
        return {}

    args: dict[str, Any] = {}
    for segment in split_arguments(text):
        key, sep, value = segment.partition(":")
        if not sep:
            continue
        args[key.strip()] = parse_value(value)

    return args


# ---------------------------------------------------------------------------
# Annotation parsing
# ---------------------------------------------------------------------------


def parse_annotation(line: str, prefix: str = DEFAULT_ANNOTATION_PREFIX) -> dict[str, Any]:
    """Parse one annotation into an unvalidated, kind-tagged record.

    Parameters
    ----------
    line:
        The annotation text, e.g. ``'@schematic.index(fields: ["id"])'``.
        The parenthesized span may contain newlines.
    prefix:
        The configured annotation prefix (``"schematic"`` by default).

    Returns
    -------
    dict[str, Any]
        ``{"kind": <kind>, **args}``.  The kind is kept exactly as written.

    Raises
    ------
    FormatError
        If the line does not start with ``@<prefix>.`` or the remainder is
        not exactly one ``<kind>(<args>)`` call.
    """
    cleaned = line.strip()
    leader = f"@{prefix}."

    if not cleaned.startswith(leader):
        raise FormatError(f"Invalid annotation '{cleaned}': must start with {leader}")

    match = _CALL_PATTERN.fullmatch(cleaned[len(leader) :])
    if match is None:
        raise FormatError(
            f"Invalid annotation format, expected {leader}<kind>(<args>): '{cleaned}'"
        )

    kind, arg_text = match.groups()
    args = _parse_arguments(arg_text)

    logger.debug("Parsed annotation '%s' with %d argument(s).", kind, len(args))
    return {"kind": kind, **args}


def paren_balance(text: str) -> int:
    """Return the net ``(`` minus ``)`` count of *text*, ignoring quoted strings.

    Used to decide whether an annotation continues on following lines.
    """
    balance = 0
    quote_char = ""

    for ch in text:
        if ch in _QUOTE_CHARS and quote_char == "":
            quote_char = ch
        elif ch == quote_char:
            quote_char = ""
        elif quote_char == "":
            if ch == "(":
                balance += 1
            elif ch == ")":
                balance -= 1

    return balance
