import yaml
from pathlib import Path

DEFAULT_CONFIG = Path(__file__).resolve().parent.parent / "configs" / "default.yaml"

def load_config(path=None):
    with open(Path(path or DEFAULT_CONFIG), "r") as f:
        return yaml.safe_load(f) or {}
