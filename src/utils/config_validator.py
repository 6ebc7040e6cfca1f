"""
Configuration Validator

Validates configuration values at startup to prevent runtime errors.
Auto-fixes invalid configurations with warnings.
"""

import logging
import sys
from typing import List, Tuple

from common.constants import DEFAULT_ENCODING_NAME
from services.usdx.encoding import create_registry

logger = logging.getLogger(__name__)

VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class ConfigValidationError:
    """Represents a configuration validation issue."""

    def __init__(self, key: str, current_value, recommended_value, reason: str, severity: str = "warning"):
        self.key = key
        self.current_value = current_value
        self.recommended_value = recommended_value
        self.reason = reason
        self.severity = severity  # "warning", "error", "info"

    def __str__(self):
        return (
            f"[{self.severity.upper()}] {self.key}={self.current_value} "
            f"(recommended: {self.recommended_value}) - {self.reason}"
        )


def validate_reader_config(config) -> List[ConfigValidationError]:
    """
    Validate reader and logging configuration.

    Checks for:
    - Default encoding not known to the reader
    - Unknown log level names

    Args:
        config: Config object to validate

    Returns:
        List of ConfigValidationError objects (empty if all valid)
    """
    errors = []

    known_encodings = create_registry().names()
    if config.default_encoding not in known_encodings:
        errors.append(
            ConfigValidationError(
                key="Reader.default_encoding",
                current_value=config.default_encoding,
                recommended_value=DEFAULT_ENCODING_NAME,
                reason=f"Unknown encoding; expected one of {', '.join(known_encodings)}",
                severity="error",
            )
        )

    if config.log_level_str not in VALID_LOG_LEVELS:
        errors.append(
            ConfigValidationError(
                key="General.log_level",
                current_value=config.log_level_str,
                recommended_value="INFO",
                reason="Unknown log level, INFO is used instead",
                severity="warning",
            )
        )

    return errors


def validate_config(config, auto_fix: bool = True) -> Tuple[bool, List[ConfigValidationError]]:
    """
    Validate configuration and optionally auto-fix errors.

    Args:
        config: Config object to validate
        auto_fix: If True, automatically fix critical errors

    Returns:
        Tuple of (is_valid, list_of_errors)
        is_valid is False only if there are unfixed errors
    """
    all_errors = validate_reader_config(config)

    if auto_fix:
        fixed_any = False
        for error in all_errors:
            if error.severity == "error":
                logger.warning(f"Auto-fixing config: {error}")
                if error.key == "Reader.default_encoding":
                    config.set("Reader", "default_encoding", DEFAULT_ENCODING_NAME)
                    fixed_any = True

        if fixed_any:
            try:
                config.save()
                logger.info("Auto-fixes saved to config file")
            except OSError as e:
                logger.error(f"Failed to save auto-fixes: {e}")
            # Re-validate to get fresh error list after fixes
            all_errors = validate_reader_config(config)

    remaining_errors = [e for e in all_errors if e.severity == "error"]
    is_valid = len(remaining_errors) == 0

    warnings = [e for e in all_errors if e.severity == "warning"]
    if warnings:
        logger.info(f"Configuration has {len(warnings)} warning(s):")
        for warning in warnings:
            logger.warning(f"  {warning}")

    return is_valid, all_errors


def print_validation_report(errors: List[ConfigValidationError], stream=None):
    """
    Print a validation report grouped by severity.

    Args:
        errors: List of validation errors
        stream: Output stream, defaults to stderr
    """
    if not errors:
        return

    stream = stream or sys.stderr
    errors_by_severity = {"error": [], "warning": [], "info": []}
    for error in errors:
        errors_by_severity.setdefault(error.severity, []).append(
            f"{error.key}={error.current_value} (recommended: {error.recommended_value}) - {error.reason}"
        )

    print("=" * 70, file=stream)
    print("CONFIGURATION VALIDATION REPORT", file=stream)
    print("=" * 70, file=stream)
    for severity, messages in errors_by_severity.items():
        if messages:
            print(f"\n{severity.upper()}S ({len(messages)}):", file=stream)
            for message in messages:
                print(f"  - {message}", file=stream)
    print("=" * 70, file=stream)
