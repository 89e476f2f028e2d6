"""Shared typed models.

This module defines the immutable records stored by the ledger and
the result value returned by every mutating ledger operation.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

from core.errors import LedgerErrorCode

ResultValue = TypeVar("ResultValue")


@dataclass(frozen=True)
class Dataset:
    """Registered dataset keyed by its content hash.

    Attributes:
        id: Sequential identifier assigned at registration.
        content_hash: 32-byte content hash, unique across the ledger.
        title: Dataset title.
        description: Free-form description.
        owner: Identity that registered the dataset.
        co_authors: Ordered co-author identities.
        timestamp: Block height at creation or last update.
        category: Dataset category.
        tags: Ordered tag strings.
        license: License name from the supported set.
        status: True while active, False once deactivated.
        metadata: Optional opaque metadata blob.
    """

    id: int
    content_hash: bytes
    title: str
    description: str
    owner: str
    co_authors: tuple[str, ...]
    timestamp: int
    category: str
    tags: tuple[str, ...]
    license: str
    status: bool
    metadata: bytes | None = None


@dataclass(frozen=True)
class DatasetUpdate:
    """Latest title/description change recorded for a dataset id.

    Attributes:
        updated_title: Title written by the update.
        updated_description: Description written by the update.
        updated_timestamp: Block height of the update.
        updater: Identity that performed the update.
    """

    updated_title: str
    updated_description: str
    updated_timestamp: int
    updater: str


@dataclass(frozen=True)
class RegistrationRequest:
    """Caller-supplied fields for a dataset registration."""

    content_hash: bytes
    title: str
    description: str
    co_authors: tuple[str, ...]
    category: str
    tags: tuple[str, ...]
    license: str
    metadata: bytes | None = None


@dataclass(frozen=True)
class TransferRecord:
    """One completed value transfer."""

    amount: int
    sender: str
    recipient: str


@dataclass(frozen=True)
class LedgerResult(Generic[ResultValue]):
    """Outcome of a ledger operation.

    Attributes:
        ok: Whether the operation was applied.
        value: Operation value on success.
        error: Rejection reason on failure.
    """

    ok: bool
    value: ResultValue | None = None
    error: LedgerErrorCode | None = None

    @classmethod
    def success(cls, value: ResultValue) -> "LedgerResult[ResultValue]":
        """Build a successful result."""
        return cls(ok=True, value=value)

    @classmethod
    def failure(cls, error: LedgerErrorCode) -> "LedgerResult[ResultValue]":
        """Build a rejected result."""
        return cls(ok=False, error=error)
