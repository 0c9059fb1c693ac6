"""Build the state snapshot for one generation run."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from schematic.config import SchematicConfig
from schematic.models.state import StateSnapshot, utc_timestamp
from schematic.parser.annotation_parser import DEFAULT_ANNOTATION_PREFIX
from schematic.state.extractor import extract_annotations
from schematic.state.hashing import compute_hash

logger = logging.getLogger(__name__)


def build_state(document: Mapping[str, Any], config: SchematicConfig | None = None) -> StateSnapshot:
    """Combine extracted annotations with a digest of the whole *document*.

    Deterministic in everything but ``generated_at``: building twice from
    the same document yields the same ``schema_hash`` and ``indexes``.

    Parameters
    ----------
    document:
        The model document emitted by the host schema compiler.
    config:
        Generator configuration.  Only ``annotation_prefix`` is read; the
        default prefix is used when no config is given.
    """
    prefix = config.annotation_prefix if config is not None else DEFAULT_ANNOTATION_PREFIX
    extraction = extract_annotations(document, prefix)

    snapshot = StateSnapshot(
        generated_at=utc_timestamp(),
        schema_hash=compute_hash(document),
        indexes=extraction.indexes,
    )
    logger.debug(
        "Built state %s with %d index annotation(s).",
        snapshot.schema_hash[:12],
        len(snapshot.indexes),
    )
    return snapshot
