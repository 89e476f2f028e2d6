"""Integration tests for the persisted ledger client."""

from __future__ import annotations

from dataclasses import replace

import pytest

from core.config import LedgerConfig
from core.errors import LedgerErrorCode, LedgerStoreError
from registry.collaborators import BlockCounter, RecordingTransfer
from store.ledger_sdk import LedgerClient


def _config(tmp_path) -> LedgerConfig:
    return replace(
        LedgerConfig.from_env(),
        data_root=tmp_path,
        admin="ST1TEST",
        registration_fee=500,
        max_datasets=10000,
    )


def test_ledger_state_survives_client_restart(tmp_path) -> None:
    """A new client over the same data root should see earlier operations."""
    config = _config(tmp_path)
    counter = BlockCounter()
    client = LedgerClient(counter, RecordingTransfer(), config)
    content_hash = bytes([1]) * 32
    client.register("ST1OWNER", content_hash, "Title", "Desc", [], "Cat", ["t"], "GPL")
    counter.advance(3)
    client.update("ST1OWNER", content_hash, "Renamed", "Desc")
    client.set_fee("ST1TEST", 900)

    restarted = LedgerClient(counter, RecordingTransfer(), config)

    assert restarted.count() == 1 and restarted.registration_fee == 900
    assert restarted.get_by_id(0).title == "Renamed"
    assert restarted.get_update(0).updated_timestamp == 3


def test_fee_change_applies_to_next_registration(tmp_path) -> None:
    """Registration after set_fee should transfer the new fee to the admin."""
    journal = RecordingTransfer()
    client = LedgerClient(BlockCounter(), journal, _config(tmp_path))
    client.set_fee("ST1TEST", 1000)

    client.register("ST1TEST", bytes(32), "Title", "Desc", [], "Cat", [], "CC-BY")

    assert [(item.amount, item.sender, item.recipient) for item in journal.transfers] == [
        (1000, "ST1TEST", "ST1TEST")
    ]


def test_fees_follow_admin_handover(tmp_path) -> None:
    """After set_admin, registration fees should go to the new admin."""
    journal = RecordingTransfer()
    client = LedgerClient(BlockCounter(), journal, _config(tmp_path))
    client.set_admin("ST1TEST", "ST2NEWADMIN")

    client.register("ST1OWNER", bytes(32), "Title", "Desc", [], "Cat", [], "MIT")

    assert client.admin == "ST2NEWADMIN" and journal.transfers[0].recipient == "ST2NEWADMIN"


def test_rejected_operation_does_not_write_state(tmp_path) -> None:
    """Failed operations should leave the state file absent."""
    config = _config(tmp_path)
    client = LedgerClient(BlockCounter(), RecordingTransfer(), config)

    result = client.register("ST1OWNER", bytes(31), "Title", "Desc", [], "Cat", [], "MIT")

    assert result.error == LedgerErrorCode.INVALID_HASH
    assert not (tmp_path / "ledger" / "state.json").exists()


def test_deactivated_dataset_stays_inactive_after_restart(tmp_path) -> None:
    """Deactivation should persist and cannot be undone by re-registering."""
    config = _config(tmp_path)
    client = LedgerClient(BlockCounter(), RecordingTransfer(), config)
    content_hash = bytes([5]) * 32
    client.register("ST1OWNER", content_hash, "Title", "Desc", [], "Cat", [], "MIT")
    client.deactivate("ST1OWNER", content_hash)

    restarted = LedgerClient(BlockCounter(), RecordingTransfer(), config)
    repeat = restarted.register("ST1OWNER", content_hash, "Title", "Desc", [], "Cat", [], "MIT")

    assert repeat.error == LedgerErrorCode.HASH_EXISTS
    assert restarted.get_by_hash(content_hash).status is False


def test_failed_write_rolls_back_registration(tmp_path) -> None:
    """An unwritable state file should undo the in-memory registration."""
    journal = RecordingTransfer()
    client = LedgerClient(BlockCounter(), journal, _config(tmp_path))
    (tmp_path / "ledger" / "state.json").mkdir()
    content_hash = bytes([3]) * 32

    with pytest.raises(LedgerStoreError):
        client.register("ST1OWNER", content_hash, "Title", "Desc", [], "Cat", [], "MIT")

    assert client.count() == 0 and client.get_by_hash(content_hash) is None
    assert client.get_by_id(0) is None
    assert [(item.amount, item.sender) for item in journal.transfers] == [(500, "ST1OWNER")]


def test_failed_write_rolls_back_update_and_fee(tmp_path) -> None:
    """Update history and settings should revert when the write fails."""
    config = _config(tmp_path)
    counter = BlockCounter()
    client = LedgerClient(counter, RecordingTransfer(), config)
    content_hash = bytes([4]) * 32
    client.register("ST1OWNER", content_hash, "Title", "Desc", [], "Cat", [], "MIT")
    state_path = tmp_path / "ledger" / "state.json"
    state_path.unlink()
    state_path.mkdir()
    counter.advance(2)

    with pytest.raises(LedgerStoreError):
        client.update("ST1OWNER", content_hash, "Renamed", "Desc")
    with pytest.raises(LedgerStoreError):
        client.set_fee("ST1TEST", 900)

    dataset = client.get_by_hash(content_hash)
    assert (dataset.title, dataset.timestamp) == ("Title", 0)
    assert client.get_update(0) is None and client.registration_fee == 500
