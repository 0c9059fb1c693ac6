"""Generation run orchestration."""

from schematic.generator.generate import GenerationResult, generate

__all__ = ["GenerationResult", "generate"]
