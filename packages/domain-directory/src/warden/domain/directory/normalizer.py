"""Lookup key normalization.

Normalized user names, emails and role names are the actual lookup keys of
the directory. The record model never normalizes on its own; callers pick
a normalizer and apply it when registering records or issuing lookups.
"""

from __future__ import annotations

import unicodedata
from typing import Protocol, runtime_checkable


@runtime_checkable
class LookupNormalizer(Protocol):
    """Turns a human-entered value into its canonical lookup form."""

    def __call__(self, value: str | None) -> str | None: ...


class UpperInvariantNormalizer:
    """Default normalizer: Unicode NFC composition, then upper-case.

    ``None`` passes through unchanged so optional fields stay optional.

    Example:
        >>> UpperInvariantNormalizer()("alice@example.com")
        'ALICE@EXAMPLE.COM'
    """

    def __call__(self, value: str | None) -> str | None:
        if value is None:
            return None
        return unicodedata.normalize("NFC", value).upper()
