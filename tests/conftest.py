import pytest


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Point the settings file at a temp dir so tests never touch the real one."""
    monkeypatch.setenv("APPDATA", str(tmp_path))
    return tmp_path / "PassMeter" / "config.json"
