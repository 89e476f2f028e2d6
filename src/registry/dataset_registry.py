"""Dataset registration, update, and deactivation.

This module orchestrates validation, the registration fee transfer, and
index mutation against a shared ``LedgerState``. Rejections are returned
as ``LedgerResult`` failures and leave the state untouched.
"""

from __future__ import annotations

from dataclasses import replace
from typing import Sequence

from core.errors import FeeTransferError, LedgerErrorCode
from core.logging_config import get_logger
from core.types import Dataset, DatasetUpdate, LedgerResult, RegistrationRequest
from core.validation import validate_registration, validate_update
from registry.collaborators import SequenceSource, ValueTransfer
from registry.ledger_state import LedgerState

_LOGGER = get_logger(__name__)
_NOT_FOUND = LedgerErrorCode.DATASET_NOT_FOUND
_NO_PERMISSION = LedgerErrorCode.NO_PERMISSION


class DatasetRegistry:
    """Content-addressed dataset registry.

    Every mutating operation holds the state lock from its first check to
    its last write, so concurrent callers see whole operations only.
    """

    def __init__(
        self,
        state: LedgerState,
        sequence: SequenceSource,
        transfer: ValueTransfer,
    ) -> None:
        """Bind the registry to a state aggregate and its collaborators.

        Args:
            state: Shared ledger state.
            sequence: Block height source for timestamps.
            transfer: Value-transfer primitive for registration fees.
        """
        self._state = state
        self._sequence = sequence
        self._transfer = transfer

    def register(
        self,
        caller: str,
        content_hash: bytes,
        title: str,
        description: str,
        co_authors: Sequence[str],
        category: str,
        tags: Sequence[str],
        license: str,
        metadata: bytes | None = None,
    ) -> LedgerResult[int]:
        """Register a new dataset and charge the current registration fee.

        Args:
            caller: Registering identity; becomes the dataset owner.
            content_hash: 32-byte content hash.
            title: Dataset title.
            description: Dataset description.
            co_authors: Co-author identities.
            category: Dataset category.
            tags: Dataset tags.
            license: License name.
            metadata: Optional metadata blob.

        Returns:
            Result holding the new dataset id, or the rejection reason.
        """
        request = RegistrationRequest(
            content_hash=bytes(content_hash),
            title=title,
            description=description,
            co_authors=tuple(co_authors),
            category=category,
            tags=tuple(tags),
            license=license,
            metadata=bytes(metadata) if metadata is not None else None,
        )
        with self._state.lock:
            error = validate_registration(request)
            if error is None and self._state.dataset_count() >= self._state.max_datasets:
                error = LedgerErrorCode.MAX_DATASETS_EXCEEDED
            if error is None and request.content_hash in self._state.datasets_by_hash:
                error = LedgerErrorCode.HASH_EXISTS
            if error is None:
                error = self._charge_fee(caller)
            if error is not None:
                return _reject("registration_rejected", caller, request.content_hash, error)
            dataset = Dataset(
                id=self._state.next_id,
                content_hash=request.content_hash,
                title=request.title,
                description=request.description,
                owner=caller,
                co_authors=request.co_authors,
                timestamp=self._sequence.current_height(),
                category=request.category,
                tags=request.tags,
                license=request.license,
                status=True,
                metadata=request.metadata,
            )
            self._state.insert_dataset(dataset)
        _LOGGER.info(
            "dataset_registered",
            dataset_id=dataset.id,
            content_hash=dataset.content_hash.hex(),
            owner=caller,
            timestamp=dataset.timestamp,
        )
        return LedgerResult.success(dataset.id)

    def update(
        self,
        caller: str,
        content_hash: bytes,
        new_title: str,
        new_description: str,
    ) -> LedgerResult[bool]:
        """Replace title and description of an owned dataset.

        Args:
            caller: Identity requesting the update.
            content_hash: Hash of the dataset to update.
            new_title: Replacement title.
            new_description: Replacement description.

        Returns:
            Result holding True, or the rejection reason.
        """
        with self._state.lock:
            dataset = self._state.datasets_by_hash.get(bytes(content_hash))
            if dataset is None:
                return _reject("update_rejected", caller, content_hash, _NOT_FOUND)
            if dataset.owner != caller:
                return _reject("update_rejected", caller, content_hash, _NO_PERMISSION)
            error = validate_update(new_title, new_description)
            if error is not None:
                return _reject("update_rejected", caller, content_hash, error)
            height = self._sequence.current_height()
            updated = replace(
                dataset,
                title=new_title,
                description=new_description,
                timestamp=height,
            )
            self._state.replace_dataset(updated)
            self._state.updates_by_id[dataset.id] = DatasetUpdate(
                updated_title=new_title,
                updated_description=new_description,
                updated_timestamp=height,
                updater=caller,
            )
        _LOGGER.info("dataset_updated", dataset_id=dataset.id, updater=caller, timestamp=height)
        return LedgerResult.success(True)

    def deactivate(self, caller: str, content_hash: bytes) -> LedgerResult[bool]:
        """Permanently mark an owned dataset inactive.

        Deactivating an already inactive dataset succeeds and changes nothing.
        """
        with self._state.lock:
            dataset = self._state.datasets_by_hash.get(bytes(content_hash))
            if dataset is None:
                return _reject("deactivation_rejected", caller, content_hash, _NOT_FOUND)
            if dataset.owner != caller:
                return _reject("deactivation_rejected", caller, content_hash, _NO_PERMISSION)
            self._state.replace_dataset(replace(dataset, status=False))
        _LOGGER.info("dataset_deactivated", dataset_id=dataset.id, owner=caller)
        return LedgerResult.success(True)

    def get_by_hash(self, content_hash: bytes) -> Dataset | None:
        with self._state.lock:
            return self._state.datasets_by_hash.get(bytes(content_hash))

    def get_by_id(self, dataset_id: int) -> Dataset | None:
        """Look up a dataset through the id index."""
        with self._state.lock:
            content_hash = self._state.hash_by_id.get(dataset_id)
            if content_hash is None:
                return None
            return self._state.datasets_by_hash.get(content_hash)

    def get_update(self, dataset_id: int) -> DatasetUpdate | None:
        """Return the latest update recorded for a dataset id."""
        with self._state.lock:
            return self._state.updates_by_id.get(dataset_id)

    def count(self) -> int:
        with self._state.lock:
            return self._state.dataset_count()

    def _charge_fee(self, caller: str) -> LedgerErrorCode | None:
        """Transfer the current fee from caller to the current admin."""
        try:
            self._transfer.transfer(self._state.registration_fee, caller, self._state.admin)
        except FeeTransferError as error:
            _LOGGER.warning(
                "fee_transfer_failed",
                caller=caller,
                amount=self._state.registration_fee,
                error=str(error),
            )
            return LedgerErrorCode.INSUFFICIENT_FEE
        return None


def _reject(
    event: str,
    caller: str,
    content_hash: bytes,
    error: LedgerErrorCode,
) -> LedgerResult:
    _LOGGER.info(event, caller=caller, content_hash=bytes(content_hash).hex(), reason=error.name)
    return LedgerResult.failure(error)
