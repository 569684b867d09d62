"""Configuration for format parsing.

Parsers take a ``FormatConfig`` argument rather than consulting any global
state. A config can be built from a YAML file, e.g.::

    saf_header_tokens: [GeneID, Peak]
    saf_has_header: true
    location_separator: "_"
    motif_file_prefix: motif
    motif_file_suffix: .motif
    delimiter: "\\t"

Every key is optional; omitted keys keep their defaults.
"""

from __future__ import annotations

from dataclasses import dataclass, field, fields, replace
from pathlib import Path

import yaml

from .base import ValidationError, validate_file_exists

# First-column tokens accepted in a SAF header line
DEFAULT_SAF_HEADER_TOKENS = frozenset(
    {"GeneID", "Gene", "gene", "Peak", "peak", "PeakID"}
)

SAF_HEADER_FIELDS = ("GeneID", "Chr", "Start", "End", "Strand")


@dataclass(frozen=True)
class FormatConfig:
    """Settings shared by the interval and motif parsers."""

    saf_header_tokens: frozenset[str] = field(
        default_factory=lambda: DEFAULT_SAF_HEADER_TOKENS
    )
    saf_has_header: bool = True
    location_separator: str = "_"
    motif_file_prefix: str = "motif"
    motif_file_suffix: str = ".motif"
    delimiter: str = "\t"


DEFAULT_CONFIG = FormatConfig()


def _require_string(config: dict, key: str) -> None:
    value = config[key]
    if not isinstance(value, str) or not value:
        raise ValidationError(
            f"Config field '{key}' must be a non-empty string, got: {value!r}"
        )


def validate_format_config(config: dict) -> None:
    """Validate a format configuration mapping.

    Args:
        config: Mapping loaded from YAML

    Raises:
        ValidationError: If a key is unknown or a value has the wrong type

    Example:
        >>> validate_format_config({"location_separator": ":"})  # Pass
        >>> validate_format_config({"colour": "red"})  # Fail - unknown key
    """
    known = {f.name for f in fields(FormatConfig)}
    unknown = set(config) - known
    if unknown:
        raise ValidationError(
            f"Config has unknown field(s): {sorted(unknown)}. "
            f"Valid fields are: {sorted(known)}"
        )

    for key in ("location_separator", "motif_file_prefix", "motif_file_suffix", "delimiter"):
        if key in config:
            _require_string(config, key)

    if "motif_file_suffix" in config and not config["motif_file_suffix"].startswith("."):
        raise ValidationError(
            f"Config field 'motif_file_suffix' must start with '.', "
            f"got: {config['motif_file_suffix']!r}"
        )

    if "saf_has_header" in config and not isinstance(config["saf_has_header"], bool):
        raise ValidationError(
            f"Config field 'saf_has_header' must be a boolean, "
            f"got: {type(config['saf_has_header']).__name__}"
        )

    if "saf_header_tokens" in config:
        tokens = config["saf_header_tokens"]
        if not isinstance(tokens, list) or not tokens:
            raise ValidationError(
                "Config field 'saf_header_tokens' must be a non-empty list"
            )
        bad = [t for t in tokens if not isinstance(t, str) or not t]
        if bad:
            raise ValidationError(
                f"Config field 'saf_header_tokens' has invalid entries: {bad}"
            )


def config_from_dict(config: dict) -> FormatConfig:
    """Validate a mapping and overlay it on the defaults."""
    validate_format_config(config)
    overrides = dict(config)
    if "saf_header_tokens" in overrides:
        overrides["saf_header_tokens"] = frozenset(overrides["saf_header_tokens"])
    return replace(DEFAULT_CONFIG, **overrides)


def load_config(config_path: str | Path) -> FormatConfig:
    """Load format configuration from a YAML file.

    Raises:
        ValidationError: If the file is missing, is not valid YAML, or
            does not hold a valid mapping
    """
    path = validate_file_exists(config_path, "Config file")
    try:
        with open(path) as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ValidationError(f"Invalid YAML in {path.name}: {e}") from e

    if data is None:
        return DEFAULT_CONFIG
    if not isinstance(data, dict):
        raise ValidationError(
            f"Config file {path.name} must contain a mapping, "
            f"got: {type(data).__name__}"
        )
    return config_from_dict(data)
