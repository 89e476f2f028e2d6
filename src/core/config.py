"""Runtime configuration model for the ledger.

This module owns all environment variable and config file parsing.
Other modules consume a typed config object instead of raw env reads.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
import os
from pathlib import Path
from typing import Mapping

import yaml

from core.constants import (
    DEFAULT_ADMIN_IDENTITY,
    DEFAULT_DATA_ROOT,
    DEFAULT_MAX_DATASETS,
    DEFAULT_REGISTRATION_FEE,
)
from core.errors import LedgerConfigError

SUPPORTED_CONFIG_KEYS = ("data_root", "admin", "registration_fee", "max_datasets")


@dataclass(frozen=True)
class LedgerConfig:
    """Validated runtime configuration.

    Attributes:
        data_root: Local root directory for the persisted ledger state.
        admin: Initial admin identity receiving registration fees.
        registration_fee: Initial fee charged per registration.
        max_datasets: Upper bound on successful registrations.
    """

    data_root: Path
    admin: str
    registration_fee: int
    max_datasets: int

    @classmethod
    def from_env(cls) -> "LedgerConfig":
        """Build config from process environment variables.

        Returns:
            A validated config object.

        Raises:
            LedgerConfigError: If environment values are invalid.
        """
        data_root_value = os.getenv("LEDGER_DATA_ROOT", str(DEFAULT_DATA_ROOT))
        admin = os.getenv("LEDGER_ADMIN", DEFAULT_ADMIN_IDENTITY)
        fee_value = os.getenv("LEDGER_REGISTRATION_FEE", str(DEFAULT_REGISTRATION_FEE))
        max_value = os.getenv("LEDGER_MAX_DATASETS", str(DEFAULT_MAX_DATASETS))
        return cls(
            data_root=Path(data_root_value).expanduser().resolve(),
            admin=_parse_identity(admin, "LEDGER_ADMIN"),
            registration_fee=_parse_non_negative_int(fee_value, "LEDGER_REGISTRATION_FEE"),
            max_datasets=_parse_non_negative_int(max_value, "LEDGER_MAX_DATASETS"),
        )

    @classmethod
    def from_yaml(cls, config_path: str) -> "LedgerConfig":
        """Build config from a YAML file layered over environment values.

        Args:
            config_path: Path to a YAML mapping with ledger settings.

        Returns:
            A validated config object.

        Raises:
            LedgerConfigError: If the file is missing, malformed, or invalid.
        """
        payload = _load_yaml_mapping(config_path)
        config = cls.from_env()
        if "data_root" in payload:
            data_root = Path(str(payload["data_root"])).expanduser().resolve()
            config = replace(config, data_root=data_root)
        if "admin" in payload:
            config = replace(config, admin=_parse_identity(payload["admin"], "admin"))
        if "registration_fee" in payload:
            fee = _parse_non_negative_int(payload["registration_fee"], "registration_fee")
            config = replace(config, registration_fee=fee)
        if "max_datasets" in payload:
            max_datasets = _parse_non_negative_int(payload["max_datasets"], "max_datasets")
            config = replace(config, max_datasets=max_datasets)
        return config


def _load_yaml_mapping(config_path: str) -> Mapping[str, object]:
    config_file = Path(config_path).expanduser().resolve()
    if not config_file.exists():
        raise LedgerConfigError(
            f"Ledger config file does not exist at {config_file}. Provide a valid YAML path."
        )
    try:
        payload = yaml.safe_load(config_file.read_text(encoding="utf-8"))
    except OSError as error:
        raise LedgerConfigError(
            f"Failed to read ledger config at {config_file}: {error}. "
            "Check file permissions and retry."
        ) from error
    except yaml.YAMLError as error:
        raise LedgerConfigError(
            f"Failed to parse YAML ledger config at {config_file}: {error}. "
            "Fix YAML syntax and retry."
        ) from error
    if payload is None:
        return {}
    if not isinstance(payload, dict):
        raise LedgerConfigError(
            f"Invalid ledger config at {config_file}: expected a mapping at top level."
        )
    unknown_keys = sorted(str(key) for key in payload if key not in SUPPORTED_CONFIG_KEYS)
    if unknown_keys:
        raise LedgerConfigError(
            f"Invalid ledger config at {config_file}: unsupported keys {', '.join(unknown_keys)}. "
            f"Supported keys: {', '.join(SUPPORTED_CONFIG_KEYS)}."
        )
    return payload


def _parse_identity(raw_value: object, field_name: str) -> str:
    """Parse a non-empty identity string.

    Args:
        raw_value: Raw value from environment or config file.
        field_name: Setting name used in error messages.

    Returns:
        Stripped identity string.

    Raises:
        LedgerConfigError: If value is not a non-empty string.
    """
    if not isinstance(raw_value, str) or not raw_value.strip():
        raise LedgerConfigError(
            f"Invalid {field_name} value: expected a non-empty identity string, "
            f"got {raw_value!r}."
        )
    return raw_value.strip()


def _parse_non_negative_int(raw_value: object, field_name: str) -> int:
    """Parse a non-negative integer setting.

    Args:
        raw_value: Raw string or YAML scalar.
        field_name: Setting name used in error messages.

    Returns:
        Parsed integer value.

    Raises:
        LedgerConfigError: If value is not a non-negative integer.
    """
    if isinstance(raw_value, bool):
        raise LedgerConfigError(
            f"Invalid {field_name} value: expected non-negative integer, got {raw_value!r}."
        )
    try:
        parsed = int(str(raw_value))
    except ValueError as error:
        raise LedgerConfigError(
            f"Invalid {field_name} value: expected non-negative integer, got '{raw_value}'. "
            f"Set {field_name} to a numeric value."
        ) from error
    if parsed < 0:
        raise LedgerConfigError(
            f"Invalid {field_name} value: expected non-negative integer, got {parsed}."
        )
    return parsed
