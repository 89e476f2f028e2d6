"""Admin-gated ledger configuration.

Only the current admin identity may replace the admin or change the
registration fee. Both settings live on the shared ``LedgerState``.
"""

from __future__ import annotations

from core.errors import LedgerConfigError, LedgerErrorCode
from core.logging_config import get_logger
from core.types import LedgerResult
from registry.ledger_state import LedgerState

_LOGGER = get_logger(__name__)


class AdminConfig:
    """Admin and fee settings guarded by the current admin identity."""

    def __init__(self, state: LedgerState) -> None:
        self._state = state

    @property
    def admin(self) -> str:
        with self._state.lock:
            return self._state.admin

    @property
    def registration_fee(self) -> int:
        with self._state.lock:
            return self._state.registration_fee

    def set_admin(self, caller: str, new_admin: str) -> LedgerResult[bool]:
        """Hand admin rights to ``new_admin``.

        Args:
            caller: Identity requesting the change.
            new_admin: Identity that becomes admin.

        Returns:
            Result holding True, or ``NOT_AUTHORIZED``.
        """
        with self._state.lock:
            previous_admin = self._state.admin
            if caller != previous_admin:
                _LOGGER.info("admin_change_rejected", caller=caller, setting="admin")
                return LedgerResult.failure(LedgerErrorCode.NOT_AUTHORIZED)
            self._state.admin = new_admin
        _LOGGER.info("admin_changed", previous_admin=previous_admin, new_admin=new_admin)
        return LedgerResult.success(True)

    def set_fee(self, caller: str, new_fee: int) -> LedgerResult[bool]:
        """Set the fee charged by subsequent registrations.

        Args:
            caller: Identity requesting the change.
            new_fee: Non-negative fee amount.

        Returns:
            Result holding True, or ``NOT_AUTHORIZED``.

        Raises:
            LedgerConfigError: If the admin passes a fee that is not a
                non-negative integer.
        """
        with self._state.lock:
            if caller != self._state.admin:
                _LOGGER.info("admin_change_rejected", caller=caller, setting="registration_fee")
                return LedgerResult.failure(LedgerErrorCode.NOT_AUTHORIZED)
            if isinstance(new_fee, bool) or not isinstance(new_fee, int) or new_fee < 0:
                raise LedgerConfigError(
                    f"Invalid registration fee {new_fee!r}: expected a non-negative integer."
                )
            previous_fee = self._state.registration_fee
            self._state.registration_fee = new_fee
        _LOGGER.info("fee_changed", previous_fee=previous_fee, new_fee=new_fee)
        return LedgerResult.success(True)
