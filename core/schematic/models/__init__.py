"""Domain models for the schematic annotation pipeline."""

from schematic.models.annotation import (
    AnnotationRecord,
    IndexAnnotation,
    IndexType,
    RawAnnotation,
)
from schematic.models.generator import (
    DataSource,
    EnvValue,
    GeneratorBlock,
    GeneratorOptions,
)
from schematic.models.state import ExtractionResult, StateSnapshot, utc_timestamp

__all__ = [
    "AnnotationRecord",
    "DataSource",
    "EnvValue",
    "ExtractionResult",
    "GeneratorBlock",
    "GeneratorOptions",
    "IndexAnnotation",
    "IndexType",
    "RawAnnotation",
    "StateSnapshot",
    "utc_timestamp",
]
