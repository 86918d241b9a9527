# src/quizsnap/config_loader.py
import os
import yaml
from pathlib import Path


def load_config(config_path: str = None) -> dict:
    """Load the application configuration from a YAML file."""
    if config_path is None:
        config_path = os.getenv("QUIZSNAP_CONFIG")
    if config_path is None:
        # config.yaml lives next to this module (src/quizsnap)
        config_path = Path(__file__).parent / "config.yaml"
    else:
        config_path = Path(config_path)

    if not config_path.is_file():
        raise FileNotFoundError(f"Configuration file not found: {config_path}")

    with open(config_path, "r", encoding="utf-8") as f:
        return yaml.safe_load(f) or {}
