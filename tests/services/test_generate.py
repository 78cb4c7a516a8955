"""Tests for generate_output and GenerateService."""

from __future__ import annotations

from pathlib import Path

import pytest

from borshgen.config.models import GeneratorConfig
from borshgen.config.settings import BorshgenSettings
from borshgen.domain.container import SchemaContainer
from borshgen.domain.layout import build_layouts
from borshgen.services.generate import GenerateService, generate_output


class TestGenerateOutput:
    def test_writes_schema_ts(self, tmp_path: Path, point_container: SchemaContainer) -> None:
        path = generate_output(build_layouts(point_container), tmp_path / "out" / "nested")
        assert path == tmp_path / "out" / "nested" / "schema.ts"
        text = path.read_text(encoding="utf-8")
        assert "export class Point extends Struct {" in text
        assert "    this.x = properties.x;\n    this.y = properties.y;\n" in text
        assert "      kind: 'struct',\n      fields: [\n        ['x', 'u32'],\n        ['y', 'u32'],\n" in text

    def test_idempotent_overwrite(self, tmp_path: Path, game_container: SchemaContainer) -> None:
        layouts = build_layouts(game_container)
        first = generate_output(layouts, tmp_path).read_bytes()
        second = generate_output(layouts, tmp_path).read_bytes()
        assert first == second
        assert second.count(b"export class Game extends Struct") == 1

    def test_custom_filename(self, tmp_path: Path, point_container: SchemaContainer) -> None:
        config = GeneratorConfig(output_filename="borsh.ts")
        path = generate_output(build_layouts(point_container), tmp_path, config=config)
        assert path.name == "borsh.ts"

    def test_io_error_propagates(self, tmp_path: Path, point_container: SchemaContainer) -> None:
        blocker = tmp_path / "out"
        blocker.write_text("", encoding="utf-8")
        with pytest.raises(OSError):
            generate_output(build_layouts(point_container), blocker)


class TestGenerateService:
    def test_generate_from_file(self, settings: BorshgenSettings, project_root: Path) -> None:
        result = GenerateService(settings).generate(project_root / "schema.toml")
        assert result.ok, result.error
        assert result.op == "generate"
        assert result.data["layouts"] == ["Point"]
        assert result.data["layout_count"] == 1
        assert result.data["output_path"] == str(project_root / "generated" / "schema.ts")
        assert (project_root / "generated" / "schema.ts").is_file()

    def test_relative_container_resolves_against_project(
        self, settings: BorshgenSettings, project_root: Path
    ) -> None:
        result = GenerateService(settings).generate(Path("schema.toml"), output_dir="ts")
        assert result.ok, result.error
        assert (project_root / "ts" / "schema.ts").is_file()

    def test_generate_from_container(
        self, settings: BorshgenSettings, game_container: SchemaContainer, tmp_path: Path
    ) -> None:
        result = GenerateService(settings).generate(
            game_container, roots=["Player"], output_dir=tmp_path / "player"
        )
        assert result.ok, result.error
        assert result.data["layouts"] == ["Player", "Point"]
        assert len(result.warnings) == 1
        assert "Game" in result.warnings[0]

    def test_unresolved_reference(self, settings: BorshgenSettings, tmp_path: Path) -> None:
        container = SchemaContainer().declare_struct("A", {"b": "B"})
        result = GenerateService(settings).generate(container, output_dir=tmp_path / "out")
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "UNRESOLVED_REFERENCE"
        assert result.error.detail == {"name": "B", "referenced_by": "A"}
        assert not (tmp_path / "out").exists()

    def test_malformed_union(self, settings: BorshgenSettings) -> None:
        result = GenerateService(settings).generate(SchemaContainer().declare_enum("E"))
        assert result.error is not None
        assert result.error.code == "MALFORMED_UNION"

    def test_unsupported_primitive(self, settings: BorshgenSettings) -> None:
        container = SchemaContainer().declare_struct("A", {"v": "f64"})
        result = GenerateService(settings).generate(container)
        assert result.error is not None
        assert result.error.code == "UNSUPPORTED_PRIMITIVE"

    def test_invalid_name(self, settings: BorshgenSettings, tmp_path: Path) -> None:
        container = SchemaContainer().declare_struct("My Type", [("it's", "u32")])
        result = GenerateService(settings).generate(container, output_dir=tmp_path / "out")
        assert result.error is not None
        assert result.error.code == "INVALID_NAME"
        assert result.error.detail["name"] == "My Type"
        assert not (tmp_path / "out").exists()

    def test_invalid_container_file(self, settings: BorshgenSettings, project_root: Path) -> None:
        bad = project_root / "bad.json"
        bad.write_text("{", encoding="utf-8")
        result = GenerateService(settings).generate(bad)
        assert result.error is not None
        assert result.error.code == "INVALID_CONTAINER"

    def test_io_error(
        self, settings: BorshgenSettings, point_container: SchemaContainer, tmp_path: Path
    ) -> None:
        blocker = tmp_path / "blocked"
        blocker.write_text("", encoding="utf-8")
        result = GenerateService(settings).generate(point_container, output_dir=blocker)
        assert result.error is not None
        assert result.error.code == "IO_ERROR"
        assert result.error.detail["output_dir"] == str(blocker)

    def test_template_error(self, project_root: Path, point_container: SchemaContainer) -> None:
        override = project_root / ".borshgen" / "templates"
        override.mkdir(parents=True)
        (override / "class.ts.j2").write_text("{{ missing_variable }}\n", encoding="utf-8")
        settings = BorshgenSettings.from_cli(project_root=project_root)
        result = GenerateService(settings).generate(point_container)
        assert result.error is not None
        assert result.error.code == "TEMPLATE_ERROR"


class TestInspect:
    def test_layouts_payload(self, settings: BorshgenSettings, project_root: Path) -> None:
        result = GenerateService(settings).inspect(project_root / "schema.toml")
        assert result.ok
        assert result.op == "layouts"
        (point,) = result.data["layouts"]
        assert point["name"] == "Point"
        assert point["kind"] == "struct"
        assert [field["name"] for field in point["fields"]] == ["x", "y"]
        assert point["fields"][0]["type"] == {"kind": "primitive", "name": "u32"}

    def test_does_not_write(self, settings: BorshgenSettings, project_root: Path) -> None:
        GenerateService(settings).inspect(project_root / "schema.toml")
        assert not (project_root / "generated").exists()
