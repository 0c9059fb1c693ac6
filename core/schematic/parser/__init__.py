"""Annotation parsing: value literals, argument splitting and call-form matching."""

from schematic.parser.annotation_parser import (
    DEFAULT_ANNOTATION_PREFIX,
    FormatError,
    paren_balance,
    parse_annotation,
    parse_value,
    split_arguments,
)

__all__ = [
    "DEFAULT_ANNOTATION_PREFIX",
    "FormatError",
    "paren_balance",
    "parse_annotation",
    "parse_value",
    "split_arguments",
]
