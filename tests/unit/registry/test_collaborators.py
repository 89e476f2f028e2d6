"""Unit tests for reference collaborator implementations."""

from __future__ import annotations

import pytest

from core.errors import FeeTransferError, LedgerError
from core.types import TransferRecord
from registry.collaborators import BlockCounter, RecordingTransfer


def test_block_counter_advances_monotonically() -> None:
    """Counter should only move forward."""
    counter = BlockCounter(height=3)

    counter.advance()
    counter.advance(4)

    assert counter.current_height() == 8


def test_block_counter_rejects_backwards_move() -> None:
    """Negative advances should raise."""
    counter = BlockCounter()

    with pytest.raises(LedgerError):
        counter.advance(-1)

    assert counter.current_height() == 0


def test_recording_transfer_without_balances_records_everything() -> None:
    """Journal without balances should accept and record transfers."""
    journal = RecordingTransfer()

    journal.transfer(500, "ST1A", "ST1B")

    assert journal.transfers == (TransferRecord(amount=500, sender="ST1A", recipient="ST1B"),)
    assert journal.balance_of("ST1A") is None


def test_recording_transfer_moves_balances() -> None:
    """Tracked balances should be debited and credited."""
    journal = RecordingTransfer(balances={"ST1A": 700})

    journal.transfer(500, "ST1A", "ST1B")

    assert (journal.balance_of("ST1A"), journal.balance_of("ST1B")) == (200, 500)


def test_recording_transfer_refuses_overdraft() -> None:
    """Transfers beyond the sender balance should raise FeeTransferError."""
    journal = RecordingTransfer(balances={"ST1A": 10})

    with pytest.raises(FeeTransferError):
        journal.transfer(500, "ST1A", "ST1B")

    assert journal.transfers == () and journal.balance_of("ST1A") == 10
