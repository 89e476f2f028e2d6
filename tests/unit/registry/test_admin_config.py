"""Unit tests for admin-gated ledger settings."""

from __future__ import annotations

import pytest

from core.errors import LedgerConfigError, LedgerErrorCode
from registry.admin_config import AdminConfig
from registry.ledger_state import LedgerState


def _admin_config() -> tuple[AdminConfig, LedgerState]:
    state = LedgerState(admin="ST1TEST", registration_fee=500, max_datasets=10000)
    return AdminConfig(state), state


def test_set_admin_by_admin_transfers_rights() -> None:
    """Current admin should be able to hand over admin rights."""
    admin_config, state = _admin_config()

    result = admin_config.set_admin("ST1TEST", "ST2NEWADMIN")

    assert result.ok and result.value is True and state.admin == "ST2NEWADMIN"


def test_set_admin_by_non_admin_is_rejected() -> None:
    """Non-admin caller should get NOT_AUTHORIZED and change nothing."""
    admin_config, state = _admin_config()

    result = admin_config.set_admin("ST2FAKE", "ST3NEW")

    assert result.error == LedgerErrorCode.NOT_AUTHORIZED and state.admin == "ST1TEST"


def test_previous_admin_loses_rights_after_handover() -> None:
    """Old admin should no longer be able to change the fee."""
    admin_config, _ = _admin_config()
    admin_config.set_admin("ST1TEST", "ST2NEWADMIN")

    result = admin_config.set_fee("ST1TEST", 1)

    assert result.error == LedgerErrorCode.NOT_AUTHORIZED and admin_config.registration_fee == 500


def test_set_fee_by_admin_updates_fee() -> None:
    """Admin should be able to change the registration fee."""
    admin_config, state = _admin_config()

    result = admin_config.set_fee("ST1TEST", 1000)

    assert result.ok and state.registration_fee == 1000


def test_set_fee_accepts_zero() -> None:
    """A zero fee is a valid non-negative amount."""
    admin_config, _ = _admin_config()

    result = admin_config.set_fee("ST1TEST", 0)

    assert result.ok and admin_config.registration_fee == 0


def test_set_fee_by_non_admin_is_rejected() -> None:
    """Non-admin fee change should fail and keep the fee."""
    admin_config, state = _admin_config()

    result = admin_config.set_fee("ST2FAKE", 1000)

    assert result.error == LedgerErrorCode.NOT_AUTHORIZED and state.registration_fee == 500


def test_set_fee_rejects_negative_amount() -> None:
    """Negative fees are not representable amounts."""
    admin_config, state = _admin_config()

    with pytest.raises(LedgerConfigError):
        admin_config.set_fee("ST1TEST", -1)

    assert state.registration_fee == 500


def test_set_fee_by_non_admin_with_negative_fee_is_rejected() -> None:
    """Authorization should be decided before the fee amount is inspected."""
    admin_config, state = _admin_config()

    result = admin_config.set_fee("ST2FAKE", -1)

    assert result.error == LedgerErrorCode.NOT_AUTHORIZED and state.registration_fee == 500
