"""Ledger exception hierarchy and operation error codes.

Exceptions are reserved for infrastructure failures such as invalid
configuration or unreadable state files. Rejected ledger operations are
reported through ``LedgerErrorCode`` values inside a ``LedgerResult``.
"""

from __future__ import annotations

from enum import IntEnum


class LedgerErrorCode(IntEnum):
    """Reason codes returned by rejected ledger operations."""

    HASH_EXISTS = 100
    INVALID_HASH = 101
    NOT_AUTHORIZED = 102
    INVALID_TITLE = 103
    INVALID_DESCRIPTION = 104
    TOO_MANY_CO_AUTHORS = 105
    DATASET_NOT_FOUND = 107
    NO_PERMISSION = 110
    INVALID_METADATA = 111
    MAX_DATASETS_EXCEEDED = 112
    INVALID_CATEGORY = 113
    INVALID_TAGS = 114
    INVALID_LICENSE = 115
    INSUFFICIENT_FEE = 117


class LedgerError(Exception):
    """Base exception for all ledger failures."""


class LedgerConfigError(LedgerError):
    """Raised for invalid runtime configuration."""


class LedgerStoreError(LedgerError):
    """Raised for ledger state persistence failures."""


class FeeTransferError(LedgerError):
    """Raised by a value-transfer collaborator that refuses a transfer."""
