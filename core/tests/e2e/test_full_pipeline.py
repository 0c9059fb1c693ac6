"""Full pipeline end-to-end test for the schematic annotation pipeline.

Exercises the complete flow across two generation runs:
  documentation -> parser -> registry -> extractor -> builder -> serializer
  -> state file -> loader -> deserializer

Uses tmp_path for all file operations.
"""

from __future__ import annotations

import textwrap
from pathlib import Path
from typing import Any

import pytest

from schematic.config import Settings
from schematic.generator.generate import generate
from schematic.state.builder import build_state
from schematic.state.serializer import deserialize_state, serialize_state

USER_DOCS = textwrap.dedent("""\
    Application user.
    @schematic.index(fields: ["email"], type: "unique")
    @schematic.index(
      name: "user_active_created",
      fields: ["createdAt", "id"],
      where: "status IN ('active', 'pending')"
    )""")

POST_DOCS = '@schematic.index(fields: ["authorId"])'


def _dmmf() -> dict[str, Any]:
    return {
        "datamodel": {
            "enums": [{"name": "Role", "values": [{"name": "USER", "dbName": None}], "dbName": None}],
            "models": [
                {"name": "User", "dbName": None, "fields": [], "documentation": USER_DOCS},
                {"name": "Post", "dbName": None, "fields": [], "documentation": POST_DOCS},
                {"name": "Comment", "dbName": None, "fields": []},
            ],
            "types": [],
        },
        "mappings": {"modelOperations": [], "otherOperations": {"read": [], "write": []}},
    }


def _options(project: Path) -> dict[str, Any]:
    return {
        "schemaPath": str(project / "prisma" / "schema.prisma"),
        "dmmf": _dmmf(),
        "datasources": [{"name": "db", "provider": "postgresql"}],
        "generator": {
            "name": "schematic",
            "config": {"stateFilePath": "./.schematic-state.json"},
            "output": {"value": str(project / "generated"), "fromEnvVar": None},
        },
    }


@pytest.fixture()
def project(tmp_path: Path) -> Path:
    (tmp_path / "prisma").mkdir()
    return tmp_path


class TestFullPipeline:
    def test_snapshot_contents(self):
        state = build_state(_dmmf())
        records = [r.model_dump(exclude_none=True) for r in state.indexes]
        assert records == [
            {"kind": "index", "model": "User", "fields": ["email"], "type": "unique"},
            {
                "kind": "index",
                "model": "User",
                "name": "user_active_created",
                "fields": ["createdAt", "id"],
                "where": "status IN ('active', 'pending')",
            },
            {"kind": "index", "model": "Post", "fields": ["authorId"]},
        ]

    def test_two_runs_share_identity(self, project: Path):
        settings = Settings(_env_file=None)  # type: ignore[call-arg]
        state_path = project / "prisma" / ".schematic-state.json"

        # The first run's snapshot is written by the host; seed it here.
        first = build_state(_dmmf())
        state_path.write_text(serialize_state(first), encoding="utf-8")

        result = generate(_options(project), settings)
        previous = deserialize_state(result.previous_state)

        assert previous == first
        assert result.incoming_state.schema_hash == previous.schema_hash
        assert result.incoming_state.indexes == previous.indexes
        assert (project / "generated").is_dir()

    def test_document_change_changes_hash_only(self):
        changed = _dmmf()
        changed["datamodel"]["models"][2]["dbName"] = "comments"
        before = build_state(_dmmf())
        after = build_state(changed)
        assert before.schema_hash != after.schema_hash
        assert before.indexes == after.indexes
