"""External collaborator interfaces and reference implementations.

The registry depends only on the ``SequenceSource`` and ``ValueTransfer``
protocols. ``BlockCounter`` and ``RecordingTransfer`` are in-memory
implementations for embedding the ledger without a chain backend.
"""

from __future__ import annotations

from typing import Mapping, Protocol

from core.errors import FeeTransferError, LedgerError
from core.types import TransferRecord


class SequenceSource(Protocol):
    """Monotonic block height source used for timestamps."""

    def current_height(self) -> int: ...


class ValueTransfer(Protocol):
    """Synchronous value-transfer primitive.

    Implementations raise ``FeeTransferError`` when a transfer is refused.
    """

    def transfer(self, amount: int, sender: str, recipient: str) -> None: ...


class BlockCounter:
    """Manually advanced block height counter."""

    def __init__(self, height: int = 0) -> None:
        if height < 0:
            raise LedgerError(f"Block height must be non-negative, got {height}.")
        self._height = height

    def current_height(self) -> int:
        return self._height

    def advance(self, blocks: int = 1) -> int:
        """Move the height forward and return the new value.

        Raises:
            LedgerError: If ``blocks`` is negative.
        """
        if blocks < 0:
            raise LedgerError(f"Block height cannot move backwards (blocks={blocks}).")
        self._height += blocks
        return self._height


class RecordingTransfer:
    """In-memory transfer journal with optional balance enforcement.

    Without balances every transfer succeeds and is recorded. With balances,
    a sender missing from the mapping or holding less than ``amount`` is
    refused with ``FeeTransferError``.
    """

    def __init__(self, balances: Mapping[str, int] | None = None) -> None:
        self._balances = dict(balances) if balances is not None else None
        self._transfers: list[TransferRecord] = []

    @property
    def transfers(self) -> tuple[TransferRecord, ...]:
        """Completed transfers in execution order."""
        return tuple(self._transfers)

    def balance_of(self, identity: str) -> int | None:
        """Return tracked balance, or None when balances are not enforced."""
        if self._balances is None:
            return None
        return self._balances.get(identity, 0)

    def transfer(self, amount: int, sender: str, recipient: str) -> None:
        if amount < 0:
            raise FeeTransferError(f"Transfer amount must be non-negative, got {amount}.")
        if self._balances is not None:
            available = self._balances.get(sender, 0)
            if available < amount:
                raise FeeTransferError(
                    f"Insufficient balance for {sender}: has {available}, needs {amount}."
                )
            self._balances[sender] = available - amount
            self._balances[recipient] = self._balances.get(recipient, 0) + amount
        self._transfers.append(TransferRecord(amount=amount, sender=sender, recipient=recipient))
