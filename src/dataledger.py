"""Public SDK surface for the dataset ledger.

This module provides a stable import path for ledger users.
It re-exports the client, the registry components, and typed models.
"""

from __future__ import annotations

from core.config import LedgerConfig
from core.errors import (
    FeeTransferError,
    LedgerConfigError,
    LedgerError,
    LedgerErrorCode,
    LedgerStoreError,
)
from core.types import Dataset, DatasetUpdate, LedgerResult, TransferRecord
from registry.admin_config import AdminConfig
from registry.collaborators import BlockCounter, RecordingTransfer, SequenceSource, ValueTransfer
from registry.dataset_registry import DatasetRegistry
from registry.ledger_state import LedgerState
from store.ledger_sdk import LedgerClient

__all__ = [
    "AdminConfig",
    "BlockCounter",
    "Dataset",
    "DatasetRegistry",
    "DatasetUpdate",
    "FeeTransferError",
    "LedgerClient",
    "LedgerConfig",
    "LedgerConfigError",
    "LedgerError",
    "LedgerErrorCode",
    "LedgerResult",
    "LedgerState",
    "LedgerStoreError",
    "RecordingTransfer",
    "SequenceSource",
    "TransferRecord",
    "ValueTransfer",
]
