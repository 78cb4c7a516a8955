"""Shared pytest fixtures for borshgen tests."""

from __future__ import annotations

from pathlib import Path

import pytest
from click.testing import CliRunner

from borshgen.config.settings import BorshgenSettings
from borshgen.domain.container import SchemaContainer

POINT_TOML = """\
[types.Point]
kind = "struct"
fields = [["x", "u32"], ["y", "u32"]]
"""


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep developer BORSHGEN_* variables out of every test."""
    for name in ("BORSHGEN_CONFIG", "BORSHGEN_VERBOSE", "BORSHGEN_JSON_OUTPUT"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def project_root(tmp_path: Path) -> Path:
    """Temporary project directory with a Point container file."""
    (tmp_path / "schema.toml").write_text(POINT_TOML, encoding="utf-8")
    return tmp_path


@pytest.fixture
def settings(project_root: Path) -> BorshgenSettings:
    return BorshgenSettings.from_cli(project_root=project_root)


@pytest.fixture
def _isolated_project(project_root: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run the CLI from inside the temporary project."""
    monkeypatch.chdir(project_root)


@pytest.fixture
def point_container() -> SchemaContainer:
    return SchemaContainer().declare_struct("Point", [("x", "u32"), ("y", "u32")])


@pytest.fixture
def game_container() -> SchemaContainer:
    """Nested types: every composite descriptor plus a tagged union."""
    return (
        SchemaContainer()
        .declare_struct(
            "Game",
            [
                ("owner", "Pubkey"),
                ("seed", "[u8; 32]"),
                ("players", "Vec<Player>"),
                ("winner", "Option<Player>"),
                ("scores", "HashMap<string, u64>"),
                ("state", "GameState"),
            ],
        )
        .declare_struct("Player", [("name", "string"), ("position", "Point")])
        .declare_struct("Point", [("x", "u32"), ("y", "u32")])
        .declare_enum("GameState", [("Pending", "Empty"), ("Finished", "Point")])
        .declare_struct("Empty")
    )
