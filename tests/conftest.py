"""Shared test fixtures."""

from contextlib import contextmanager
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from vaultcal.api.dependencies import get_settings
from vaultcal.main import app


@pytest.fixture
def client():
    return TestClient(app)


@pytest.fixture
def vault(tmp_path: Path) -> Path:
    """A small vault with dated entries spread over two folders."""
    (tmp_path / "work").mkdir()
    (tmp_path / "home").mkdir()
    (tmp_path / ".obsidian").mkdir()
    (tmp_path / "work" / "a.md").write_text(
        "---\nproject: apollo\n---\n"
        "# Work\n"
        "- [ ] Ship release @{2024-03-01}\n"
        "- [x] Write notes\n"
        "- [ ] Review PR\n"
        "  @{2024-03-05}\n",
        encoding="utf-8",
    )
    (tmp_path / "home" / "b.md").write_text(
        "Dentist @{2024-03-02}\n- [ ] Buy milk @{2024-04-01}\n",
        encoding="utf-8",
    )
    (tmp_path / ".obsidian" / "cache.md").write_text("Hidden @{2024-03-03}\n", encoding="utf-8")
    return tmp_path


@contextmanager
def override_vault_path(path):
    """Temporarily override the cached settings vault_path, restoring it on exit."""
    settings = get_settings()
    original = settings.vault_path
    settings.vault_path = path
    try:
        yield settings
    finally:
        settings.vault_path = original
