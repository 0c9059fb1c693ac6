"""Run one generation pass for the host schema compiler.

A run resolves the configuration, loads the snapshot left by the previous
run, builds the snapshot for the current model document and makes sure the
output directory exists.  Comparing the two snapshots is left to the
caller.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict

from schematic.config import SchematicConfig, Settings, extract_config
from schematic.models.generator import GeneratorOptions
from schematic.models.state import StateSnapshot
from schematic.state.builder import build_state
from schematic.state.loader import load_state

logger = logging.getLogger(__name__)


class GenerationResult(BaseModel):
    """Outcome of a generation run."""

    model_config = ConfigDict(frozen=True)

    config: SchematicConfig
    previous_state: Any
    incoming_state: StateSnapshot


def generate(
    options: GeneratorOptions | Mapping[str, Any],
    settings: Settings | None = None,
) -> GenerationResult:
    """Execute a generation run.

    Parameters
    ----------
    options:
        The host's generator options, as a model or as the raw mapping the
        host sent.
    settings:
        Environment defaults; loaded from the environment when omitted.

    Raises
    ------
    ConfigError
        If the datasource provider is missing.
    LoadError
        If the previous state file cannot be loaded or is empty.
    FormatError, UnknownKindError, AnnotationValidationError
        If any annotation in the model document is rejected.
    """
    if not isinstance(options, GeneratorOptions):
        options = GeneratorOptions.model_validate(options)

    logger.info("New state generation started")

    config = extract_config(options, settings)
    previous_state = load_state(config.state_file_path, options.schema_path)
    incoming_state = build_state(options.dmmf, config)

    logger.info("Comparing previous state to new state")

    Path(config.output_path).mkdir(parents=True, exist_ok=True)

    return GenerationResult(
        config=config,
        previous_state=previous_state,
        incoming_state=incoming_state,
    )
