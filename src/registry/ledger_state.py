"""Ledger state aggregate.

All mutable ledger data lives in one ``LedgerState`` instance: the id
counter, fee and admin configuration, and the three indices. Components
that mutate it hold ``state.lock`` for the whole operation.
"""

from __future__ import annotations

from dataclasses import dataclass, field
import threading

from core.config import LedgerConfig
from core.types import Dataset, DatasetUpdate


@dataclass
class LedgerState:
    """Mutable ledger data shared by registry and admin components.

    Attributes:
        admin: Identity allowed to change fee and admin settings.
        registration_fee: Fee charged on the next registration.
        max_datasets: Upper bound on successful registrations.
        next_id: Id assigned to the next registration.
        datasets_by_hash: Primary index, content hash to dataset.
        hash_by_id: Secondary index, dataset id to content hash.
        updates_by_id: Latest update record per dataset id.
    """

    admin: str
    registration_fee: int
    max_datasets: int
    next_id: int = 0
    datasets_by_hash: dict[bytes, Dataset] = field(default_factory=dict)
    hash_by_id: dict[int, bytes] = field(default_factory=dict)
    updates_by_id: dict[int, DatasetUpdate] = field(default_factory=dict)
    lock: threading.RLock = field(
        default_factory=threading.RLock, repr=False, compare=False
    )

    @classmethod
    def from_config(cls, config: LedgerConfig) -> "LedgerState":
        """Create an empty ledger using configured fee, admin, and limit."""
        return cls(
            admin=config.admin,
            registration_fee=config.registration_fee,
            max_datasets=config.max_datasets,
        )

    def dataset_count(self) -> int:
        return self.next_id

    def insert_dataset(self, dataset: Dataset) -> None:
        """Add a newly registered dataset to both indices and bump the counter.

        Callers must have checked that ``dataset.id == next_id`` and that the
        hash is not yet indexed.
        """
        self.datasets_by_hash[dataset.content_hash] = dataset
        self.hash_by_id[dataset.id] = dataset.content_hash
        self.next_id = dataset.id + 1

    def replace_dataset(self, dataset: Dataset) -> None:
        """Overwrite an existing primary index entry in place."""
        self.datasets_by_hash[dataset.content_hash] = dataset

    def snapshot(self) -> "LedgerState":
        """Copy counter, settings, and indices for a later ``restore``.

        Datasets and update records are frozen, so shallow index copies
        are enough.
        """
        return LedgerState(
            admin=self.admin,
            registration_fee=self.registration_fee,
            max_datasets=self.max_datasets,
            next_id=self.next_id,
            datasets_by_hash=dict(self.datasets_by_hash),
            hash_by_id=dict(self.hash_by_id),
            updates_by_id=dict(self.updates_by_id),
        )

    def restore(self, snapshot: "LedgerState") -> None:
        """Reset every field except the lock to the values in ``snapshot``."""
        self.admin = snapshot.admin
        self.registration_fee = snapshot.registration_fee
        self.max_datasets = snapshot.max_datasets
        self.next_id = snapshot.next_id
        self.datasets_by_hash = dict(snapshot.datasets_by_hash)
        self.hash_by_id = dict(snapshot.hash_by_id)
        self.updates_by_id = dict(snapshot.updates_by_id)
