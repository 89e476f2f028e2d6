"""Core constants used across ledger modules.

This module centralizes field limits and configuration defaults.
Keeping values here avoids magic literals in validation and registry logic.
"""

from __future__ import annotations

from pathlib import Path

DEFAULT_DATA_ROOT = Path(".dataledger")
LEDGER_DIR_NAME = "ledger"
STATE_FILE_NAME = "state.json"
STATE_FORMAT_VERSION = 1
DEFAULT_ADMIN_IDENTITY = "deployer"
DEFAULT_REGISTRATION_FEE = 500
DEFAULT_MAX_DATASETS = 10000
CONTENT_HASH_LENGTH = 32
MIN_TITLE_LENGTH = 1
MAX_TITLE_LENGTH = 100
MAX_DESCRIPTION_LENGTH = 500
MAX_CO_AUTHORS = 10
MIN_CATEGORY_LENGTH = 1
MAX_CATEGORY_LENGTH = 50
MIN_TAG_LENGTH = 1
MAX_TAG_LENGTH = 30
MAX_METADATA_BYTES = 1024
SUPPORTED_LICENSES = frozenset({"CC-BY", "MIT", "GPL", "Public Domain"})
