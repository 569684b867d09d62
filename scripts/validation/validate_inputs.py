"""Pre-flight validation for interval and motif inputs.

This script validates all inputs before downstream analysis to catch errors
early. It uses a collect-all-errors strategy to report all issues at once.

Usage:
    python validate_inputs.py [--config formats.yaml] [--saf peaks.saf ...]
        [--motif known.motif ...] [--denovo homerResults ...]
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import Any

# Add scripts directory to path
SCRIPTS_DIR = Path(__file__).resolve().parent.parent
if str(SCRIPTS_DIR) not in sys.path:
    sys.path.insert(0, str(SCRIPTS_DIR))

from parsers.parse_homer_motifs import collect_denovo, read_motif_file  # noqa: E402
from parsers.parse_saf import read_saf  # noqa: E402
from validators import (  # noqa: E402
    DEFAULT_CONFIG,
    FormatConfig,
    ValidationError,
    load_config,
    summarize_failures,
)

log = logging.getLogger(__name__)


class ValidationContext:
    """Context for collecting validation errors without failing fast."""

    def __init__(self):
        self.errors: list[ValidationError] = []
        self.warnings: list[str] = []

    def validate(self, func, *args, **kwargs) -> Any:
        """Run validation function, collecting errors instead of raising.

        Returns:
            Result of validation function, or None if error occurred
        """
        try:
            return func(*args, **kwargs)
        except ValidationError as e:
            self.errors.append(e)
            return None

    def warn(self, message: str):
        """Add a warning message."""
        self.warnings.append(message)

    def raise_if_errors(self):
        """Raise combined error if any validations failed."""
        if self.errors:
            error_list = "\n".join(f"  {i+1}. {e}" for i, e in enumerate(self.errors))
            raise ValidationError(
                f"Validation failed with {len(self.errors)} error(s):\n{error_list}"
            )

    def has_errors(self) -> bool:
        """Check if any errors were collected."""
        return len(self.errors) > 0


def validate_saf_file(saf_path: str | Path, config: FormatConfig = DEFAULT_CONFIG) -> int:
    """Check every line of a SAF file.

    Returns:
        Number of valid records

    Raises:
        ValidationError: If the file is missing or any line is invalid
    """
    failures, records = read_saf(saf_path, config)
    if failures:
        raise ValidationError(summarize_failures(failures, Path(saf_path).name))
    if not records:
        raise ValidationError(f"SAF file has no records: {saf_path}")
    return len(records)


def validate_motif_file(motif_path: str | Path, config: FormatConfig = DEFAULT_CONFIG) -> int:
    """Check every motif header in a motif file.

    Returns:
        Number of valid motif records

    Raises:
        ValidationError: If the file is missing, holds no motifs, or any
            header is invalid
    """
    failures, records = read_motif_file(motif_path, config.delimiter)
    if failures:
        raise ValidationError(summarize_failures(failures, Path(motif_path).name))
    if not records:
        raise ValidationError(f"No motif headers found in: {motif_path}")
    return len(records)


def validate_denovo_folder(directory: str | Path, config: FormatConfig = DEFAULT_CONFIG) -> int:
    """Check every de novo motif file in a HOMER results folder.

    Returns:
        Number of motifs collected

    Raises:
        ValidationError: If the folder is missing, has no motif files, or
            any motif file fails to parse
    """
    collection = collect_denovo(directory, config)
    if not collection.ok:
        details = "\n".join(f"  {failure}" for failure in collection.failures)
        raise ValidationError(
            f"{len(collection.failures)} motif file(s) failed in {directory}:\n{details}"
        )
    return len(collection.records)


def validate_inputs(
    config_path: str | Path | None = None,
    saf_files: list[str] | None = None,
    motif_files: list[str] | None = None,
    denovo_dirs: list[str] | None = None,
) -> ValidationContext:
    """Validate all inputs using collect-all-errors strategy.

    Args:
        config_path: Optional YAML parser configuration
        saf_files: SAF files to check
        motif_files: Motif files to check
        denovo_dirs: HOMER de novo results folders to check

    Returns:
        ValidationContext with collected errors and warnings
    """
    ctx = ValidationContext()

    config = DEFAULT_CONFIG
    if config_path:
        log.info("Loading configuration from: %s", config_path)
        try:
            config = load_config(config_path)
        except ValidationError as e:
            ctx.errors.append(e)
            return ctx  # Can't proceed without config

    saf_files = saf_files or []
    motif_files = motif_files or []
    denovo_dirs = denovo_dirs or []
    if not (saf_files or motif_files or denovo_dirs):
        ctx.warn("No input files given")

    for saf_path in saf_files:
        log.info("Validating SAF file: %s", saf_path)
        count = ctx.validate(validate_saf_file, saf_path, config)
        if count is not None:
            log.info("  %d records", count)

    for motif_path in motif_files:
        log.info("Validating motif file: %s", motif_path)
        count = ctx.validate(validate_motif_file, motif_path, config)
        if count is not None:
            log.info("  %d motifs", count)

    for directory in denovo_dirs:
        log.info("Validating de novo motif folder: %s", directory)
        count = ctx.validate(validate_denovo_folder, directory, config)
        if count is not None:
            log.info("  %d motifs", count)

    # Report warnings
    if ctx.warnings:
        log.warning("Validation completed with %d warning(s):", len(ctx.warnings))
        for i, warning in enumerate(ctx.warnings, 1):
            log.warning("  %d. %s", i, warning)

    # Report summary
    if ctx.has_errors():
        log.error("Validation failed with %d error(s)", len(ctx.errors))
    else:
        log.info("All input validations passed")

    return ctx


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Validate SAF and HOMER motif inputs.")
    parser.add_argument("--config", help="YAML parser configuration")
    parser.add_argument("--saf", nargs="*", default=[], help="SAF files")
    parser.add_argument("--motif", nargs="*", default=[], help="HOMER motif files")
    parser.add_argument("--denovo", nargs="*", default=[], help="HOMER de novo results folders")
    parser.add_argument("--log-file", help="Also write the log to this file")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point for validation script.

    Returns:
        Exit status: 0 when every input is valid, 1 otherwise
    """
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        filename=args.log_file,
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(message)s",
    )

    log.info("=" * 60)
    log.info("Input Pre-Flight Validation")
    log.info("=" * 60)

    try:
        ctx = validate_inputs(args.config, args.saf, args.motif, args.denovo)
        ctx.raise_if_errors()
        log.info("Validation completed successfully")
        return 0

    except ValidationError as e:
        log.error("=" * 60)
        log.error("VALIDATION FAILED")
        log.error("=" * 60)
        log.error(str(e))
        log.error("Please fix the errors above and re-run")
        return 1


if __name__ == "__main__":
    sys.exit(main())
