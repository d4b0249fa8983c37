import os

import yaml
from pathlib import Path

CONFIG_PATH = Path(__file__).resolve().parents[2] / "config" / "scifi_classes.yml"
CONFIG_ENV_VAR = "SCIFI_CLASSES_CONFIG"

class SCConfig:
    def __init__(self, data):
        self.paths = data.get("paths", {})
        self.quotes = data.get("quotes", {})
        self.person = data.get("person", {})
        self.logging = data.get("logging", {})
        self.debug = data.get("debug", False)

    @property
    def delimiter(self) -> str:
        return self.quotes.get("delimiter") or "|"

    @property
    def selection(self) -> str:
        return str(self.quotes.get("selection", "random")).lower()

    @property
    def default_name(self) -> str:
        return self.person.get("default_name") or "Anonymous"

def config_path() -> Path:
    """``$SCIFI_CLASSES_CONFIG`` if set, else ``config/scifi_classes.yml``."""
    override = os.environ.get(CONFIG_ENV_VAR)
    return Path(override) if override else CONFIG_PATH

def load_config() -> 'SCConfig':
    path = config_path()

    # Installed without a source checkout: run on built-in defaults.
    if not path.exists():
        return SCConfig({})

    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}

    return SCConfig(data)

_config_cache = None

def get_config() -> 'SCConfig':
    global _config_cache
    if _config_cache is None:
        _config_cache = load_config()
    return _config_cache
