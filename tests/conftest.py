import pytest
from unsdg.config import config

CONFIG_ENV_VARS = [
    "UNSDG_CONFIG", "UNSDG_GOAL", "UNSDG_WIDTH", "UNSDG_COLOR_ONLY",
    "UNSDG_ASSET_BASE", "UNSDG_LOG_LEVEL", "UNSDG_HOST", "UNSDG_PORT"
]

@pytest.fixture(autouse=True)
def clean_config(monkeypatch, tmp_path):
    """Every test starts from the built-in defaults."""
    for var in CONFIG_ENV_VARS:
        monkeypatch.delenv(var, raising=False)
    monkeypatch.setenv("HOME", str(tmp_path / "home"))
    config.reload()
    return config
