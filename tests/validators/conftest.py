"""Shared test fixtures for validator tests."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Callable

import pytest
import yaml

# Add scripts directory to path
SCRIPTS_DIR = str(Path(__file__).resolve().parent.parent.parent / "scripts")
if SCRIPTS_DIR not in sys.path:
    sys.path.insert(0, SCRIPTS_DIR)


@pytest.fixture
def temp_config_file(tmp_path) -> Callable:
    """Factory fixture for writing a format config as YAML.

    Example:
        >>> config_path = temp_config_file({"location_separator": ":"})
    """
    def _create_config(config, filename: str = "formats.yaml") -> Path:
        config_path = tmp_path / filename
        with open(config_path, "w") as f:
            yaml.safe_dump(config, f)
        return config_path

    return _create_config
