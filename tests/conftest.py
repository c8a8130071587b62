import pytest


@pytest.fixture(autouse=True)
def isolated_persistence_dir(tmp_path, monkeypatch):
    """Keep settings reads and writes inside a per-test directory."""
    persistence_dir = tmp_path / "queue_picker"
    monkeypatch.setenv("QUEUE_PICKER_PERSISTENCE_DIR", str(persistence_dir))
    return persistence_dir
