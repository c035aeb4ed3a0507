"""Test configuration and fixtures."""

from pathlib import Path

import pytest


@pytest.fixture(autouse=True)
def isolated_settings_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Keep host `TOOLBOX_*` variables and `.env` files out of the tests."""
    for name in (
        "TOOLBOX_LOG_LEVEL",
        "TOOLBOX_HASH_ALGORITHM",
        "TOOLBOX_DEFAULT_MIME_TYPE",
        "TOOLBOX_ENTITY_FORMAT",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def sample_tree(tmp_path: Path) -> Path:
    """Provide a small directory tree with text and binary files."""
    root = tmp_path / "tree"
    (root / "docs").mkdir(parents=True)
    (root / "data").mkdir()

    (root / "readme.md").write_text("# readme\n", encoding="utf-8")
    (root / "docs" / "guide.md").write_text("guide\n", encoding="utf-8")
    (root / "docs" / "notes.txt").write_text("notes\n", encoding="utf-8")
    (root / "data" / "blob.bin").write_bytes(bytes(range(256)))
    return root
