"""Extract validated annotations from a model document.

Walks every model in ``datamodel.models``, picks the annotation lines out of
its documentation text, parses and validates each one, and partitions the
results by kind.  Any malformed, unknown or invalid annotation fails the
whole extraction.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict

from schematic.models.annotation import AnnotationRecord
from schematic.models.state import ExtractionResult
from schematic.parser.annotation_parser import (
    DEFAULT_ANNOTATION_PREFIX,
    paren_balance,
    parse_annotation,
)
from schematic.schemas.registry import DEFAULT_REGISTRY, AnnotationRegistry

logger = logging.getLogger(__name__)


class DocumentedModel(BaseModel):
    """The two facts the extractor reads from each model entry."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    name: str
    documentation: str | None = None


def iter_models(document: Mapping[str, Any]) -> list[DocumentedModel]:
    """Return the models of *document* in declaration order."""
    datamodel = document.get("datamodel") or {}
    return [DocumentedModel.model_validate(entry) for entry in datamodel.get("models") or []]


def find_annotation_blocks(documentation: str, prefix: str = DEFAULT_ANNOTATION_PREFIX) -> list[str]:
    """Return the annotation texts found in *documentation*.

    A line belongs to an annotation when its trimmed form starts with
    ``@<prefix>``.  If the annotation's parentheses are still open at the
    end of that line, the following lines are appended until they close, the
    next annotation line begins, or the documentation ends, so an argument
    list may span several lines.
    """
    marker = f"@{prefix}"
    lines = documentation.split("\n")
    blocks: list[str] = []
    i = 0

    while i < len(lines):
        line = lines[i]
        i += 1
        if not line.strip().startswith(marker):
            continue

        block = [line]
        while (
            i < len(lines)
            and not lines[i].strip().startswith(marker)
            and paren_balance("\n".join(block)) > 0
        ):
            block.append(lines[i])
            i += 1
        blocks.append("\n".join(block))

    return blocks


def collect_annotations(
    document: Mapping[str, Any],
    annotation_prefix: str = DEFAULT_ANNOTATION_PREFIX,
    registry: AnnotationRegistry = DEFAULT_REGISTRY,
) -> list[AnnotationRecord]:
    """Parse and validate every annotation in *document*, in document order.

    Raises
    ------
    FormatError
        If an annotation is malformed.
    UnknownKindError
        If an annotation names a kind missing from *registry*.
    AnnotationValidationError
        If an annotation violates its kind's contract.
    """
    records: list[AnnotationRecord] = []

    for model in iter_models(document):
        if not model.documentation:
            continue

        blocks = find_annotation_blocks(model.documentation, annotation_prefix)
        for block in blocks:
            raw = parse_annotation(block, annotation_prefix)
            records.append(registry.validate({**raw, "model": model.name}))

        if blocks:
            logger.debug("Model '%s': %d annotation(s).", model.name, len(blocks))

    return records


def extract_annotations(
    document: Mapping[str, Any],
    annotation_prefix: str = DEFAULT_ANNOTATION_PREFIX,
    registry: AnnotationRegistry = DEFAULT_REGISTRY,
) -> ExtractionResult:
    """Extract all annotations from *document*, partitioned by kind.

    Only the ``index`` partition exists today; records of any other kind
    validate but are left out of the result.
    """
    records = collect_annotations(document, annotation_prefix, registry)
    return ExtractionResult(indexes=[record for record in records if record.kind == "index"])
