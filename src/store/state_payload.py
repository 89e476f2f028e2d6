"""JSON serialization for ledger state.

Hashes and metadata blobs are hex-encoded. Index keys are rebuilt from
the serialized datasets so both indices stay consistent on load.
"""

from __future__ import annotations

from typing import Any

from core.constants import STATE_FORMAT_VERSION
from core.types import Dataset, DatasetUpdate, RegistrationRequest
from core.validation import validate_registration
from registry.ledger_state import LedgerState


def dataset_to_payload(dataset: Dataset) -> dict[str, object]:
    """Serialize a dataset into a JSON-safe payload.

    Args:
        dataset: Dataset instance.

    Returns:
        Dictionary payload for JSON encoding.
    """
    return {
        "id": dataset.id,
        "content_hash": dataset.content_hash.hex(),
        "title": dataset.title,
        "description": dataset.description,
        "owner": dataset.owner,
        "co_authors": list(dataset.co_authors),
        "timestamp": dataset.timestamp,
        "category": dataset.category,
        "tags": list(dataset.tags),
        "license": dataset.license,
        "status": dataset.status,
        "metadata": dataset.metadata.hex() if dataset.metadata is not None else None,
    }


def dataset_from_payload(payload: dict[str, Any]) -> Dataset:
    """Deserialize a dataset payload.

    Args:
        payload: Serialized dataset payload.

    Returns:
        Parsed dataset.

    Raises:
        KeyError: If a required field is missing.
        ValueError: If the payload is not an object, a hex field cannot be
            decoded, or ``status`` is not a boolean.
    """
    _require_mapping(payload, "dataset entry")
    status = payload["status"]
    if not isinstance(status, bool):
        raise ValueError(f"dataset status must be a boolean, got {status!r}")
    metadata = payload.get("metadata")
    return Dataset(
        id=int(payload["id"]),
        content_hash=bytes.fromhex(str(payload["content_hash"])),
        title=str(payload["title"]),
        description=str(payload["description"]),
        owner=str(payload["owner"]),
        co_authors=tuple(str(item) for item in payload["co_authors"]),
        timestamp=int(payload["timestamp"]),
        category=str(payload["category"]),
        tags=tuple(str(item) for item in payload["tags"]),
        license=str(payload["license"]),
        status=status,
        metadata=bytes.fromhex(str(metadata)) if metadata is not None else None,
    )


def update_to_payload(update: DatasetUpdate) -> dict[str, object]:
    return {
        "updated_title": update.updated_title,
        "updated_description": update.updated_description,
        "updated_timestamp": update.updated_timestamp,
        "updater": update.updater,
    }


def update_from_payload(payload: dict[str, Any]) -> DatasetUpdate:
    _require_mapping(payload, "update entry")
    return DatasetUpdate(
        updated_title=str(payload["updated_title"]),
        updated_description=str(payload["updated_description"]),
        updated_timestamp=int(payload["updated_timestamp"]),
        updater=str(payload["updater"]),
    )


def state_to_payload(state: LedgerState) -> dict[str, object]:
    """Serialize the full ledger state.

    Datasets are written in id order. Caller should hold ``state.lock``.
    """
    datasets = [
        dataset_to_payload(state.datasets_by_hash[state.hash_by_id[dataset_id]])
        for dataset_id in sorted(state.hash_by_id)
    ]
    updates = {
        str(dataset_id): update_to_payload(update)
        for dataset_id, update in sorted(state.updates_by_id.items())
    }
    return {
        "format_version": STATE_FORMAT_VERSION,
        "admin": state.admin,
        "registration_fee": state.registration_fee,
        "max_datasets": state.max_datasets,
        "next_id": state.next_id,
        "datasets": datasets,
        "updates": updates,
    }


def state_from_payload(payload: dict[str, Any]) -> LedgerState:
    """Deserialize a full ledger state payload.

    Args:
        payload: Serialized state payload.

    Returns:
        Ledger state with rebuilt indices.

    Raises:
        KeyError: If a required field is missing.
        ValueError: If the payload violates ledger invariants or a stored
            dataset breaks a field constraint.
    """
    state = LedgerState(
        admin=str(payload["admin"]),
        registration_fee=int(payload["registration_fee"]),
        max_datasets=int(payload["max_datasets"]),
    )
    datasets = payload["datasets"]
    if not isinstance(datasets, list):
        raise ValueError("datasets must be a list")
    for item in datasets:
        dataset = dataset_from_payload(item)
        if dataset.id != state.next_id:
            raise ValueError(
                f"dataset ids must be contiguous: expected {state.next_id}, got {dataset.id}"
            )
        if dataset.content_hash in state.datasets_by_hash:
            raise ValueError(f"duplicate content hash {dataset.content_hash.hex()}")
        error = validate_registration(_as_request(dataset))
        if error is not None:
            raise ValueError(f"dataset {dataset.id} violates field constraints: {error.name}")
        state.insert_dataset(dataset)
    if int(payload["next_id"]) != state.next_id:
        raise ValueError(
            f"next_id {payload['next_id']} does not match dataset count {state.next_id}"
        )
    updates = payload.get("updates", {})
    _require_mapping(updates, "updates")
    for raw_id, update_payload in updates.items():
        dataset_id = int(raw_id)
        if dataset_id not in state.hash_by_id:
            raise ValueError(f"update refers to unknown dataset id {dataset_id}")
        state.updates_by_id[dataset_id] = update_from_payload(update_payload)
    return state


def _as_request(dataset: Dataset) -> RegistrationRequest:
    return RegistrationRequest(
        content_hash=dataset.content_hash,
        title=dataset.title,
        description=dataset.description,
        co_authors=dataset.co_authors,
        category=dataset.category,
        tags=dataset.tags,
        license=dataset.license,
        metadata=dataset.metadata,
    )


def _require_mapping(value: object, label: str) -> None:
    if not isinstance(value, dict):
        raise ValueError(f"{label} must be a JSON object, got {type(value).__name__}")
