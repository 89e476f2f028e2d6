"""Field constraint checks for dataset registration and updates.

Checks are pure and run in a fixed order; the first failing check
determines the reported error code.
"""

from __future__ import annotations

from typing import Sequence

from core.constants import (
    CONTENT_HASH_LENGTH,
    MAX_CATEGORY_LENGTH,
    MAX_CO_AUTHORS,
    MAX_DESCRIPTION_LENGTH,
    MAX_METADATA_BYTES,
    MAX_TAG_LENGTH,
    MAX_TITLE_LENGTH,
    MIN_CATEGORY_LENGTH,
    MIN_TAG_LENGTH,
    MIN_TITLE_LENGTH,
    SUPPORTED_LICENSES,
)
from core.errors import LedgerErrorCode
from core.types import RegistrationRequest


def validate_registration(request: RegistrationRequest) -> LedgerErrorCode | None:
    """Run every registration field check in order.

    Args:
        request: Registration fields supplied by the caller.

    Returns:
        Code of the first failing check, or None when all pass.
    """
    if not is_valid_hash(request.content_hash):
        return LedgerErrorCode.INVALID_HASH
    if not is_valid_title(request.title):
        return LedgerErrorCode.INVALID_TITLE
    if not is_valid_description(request.description):
        return LedgerErrorCode.INVALID_DESCRIPTION
    if len(request.co_authors) > MAX_CO_AUTHORS:
        return LedgerErrorCode.TOO_MANY_CO_AUTHORS
    if not MIN_CATEGORY_LENGTH <= len(request.category) <= MAX_CATEGORY_LENGTH:
        return LedgerErrorCode.INVALID_CATEGORY
    if not are_valid_tags(request.tags):
        return LedgerErrorCode.INVALID_TAGS
    if request.license not in SUPPORTED_LICENSES:
        return LedgerErrorCode.INVALID_LICENSE
    if request.metadata is not None and len(request.metadata) > MAX_METADATA_BYTES:
        return LedgerErrorCode.INVALID_METADATA
    return None


def validate_update(title: str, description: str) -> LedgerErrorCode | None:
    """Check replacement title and description for an update."""
    if not is_valid_title(title):
        return LedgerErrorCode.INVALID_TITLE
    if not is_valid_description(description):
        return LedgerErrorCode.INVALID_DESCRIPTION
    return None


def is_valid_hash(content_hash: bytes) -> bool:
    return len(content_hash) == CONTENT_HASH_LENGTH


def is_valid_title(title: str) -> bool:
    return MIN_TITLE_LENGTH <= len(title) <= MAX_TITLE_LENGTH


def is_valid_description(description: str) -> bool:
    return len(description) <= MAX_DESCRIPTION_LENGTH


def are_valid_tags(tags: Sequence[str]) -> bool:
    # An empty tag list is valid.
    return all(MIN_TAG_LENGTH <= len(tag) <= MAX_TAG_LENGTH for tag in tags)
