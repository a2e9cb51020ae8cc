"""Decoding guard shared by the JSON repositories."""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager

from stockmanager.domain.exceptions import DomainException, StorageError


@contextmanager
def decoding(section: str, raw: dict) -> Iterator[None]:
    """Report a record that cannot be turned back into a domain object.

    A stored record that fails validation (a missing field, a zero
    quantity, an unparsable price) is corrupt data, not a business
    refusal, so it surfaces as StorageError.
    """
    try:
        yield
    except (KeyError, TypeError, ValueError, ArithmeticError, DomainException) as exc:
        raise StorageError(
            f"Malformed {section} record {raw.get('id')!r}: {exc}"
        ) from exc
