"""Options handed to the generator by the host schema compiler.

Only the parts the generator reads are modelled; everything else the host
sends is ignored.  Keys use the host's camelCase spelling on input.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class EnvValue(BaseModel):
    """A value that may have been read from an environment variable."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    value: str | None = None
    from_env_var: str | None = Field(default=None, alias="fromEnvVar")


class DataSource(BaseModel):
    """A ``datasource`` block from the schema."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    name: str
    provider: str | None = None
    active_provider: str | None = Field(default=None, alias="activeProvider")


class GeneratorBlock(BaseModel):
    """The ``generator`` block that selected this generator."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    name: str = "schematic"
    config: dict[str, Any] = Field(default_factory=dict)
    output: EnvValue | None = None


class GeneratorOptions(BaseModel):
    """Everything one generation run receives from the host.

    ``dmmf`` is the model document exactly as the host emitted it.  It is
    kept as a plain mapping so the schema digest covers the host's own
    serialization rather than a re-shaped copy.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    schema_path: str = Field(..., alias="schemaPath")
    dmmf: dict[str, Any]
    datasources: list[DataSource] = Field(default_factory=list)
    generator: GeneratorBlock = Field(default_factory=GeneratorBlock)
