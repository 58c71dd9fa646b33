"""Owner-only authorization check."""

from __future__ import annotations

from .errors import Unauthorized
from .records import Principal, Record


def authorize(caller: Principal, record: Record) -> None:
    """Raise :class:`Unauthorized` unless ``caller`` is the record owner.

    Comparison is exact; principals are never normalized here.

    Example:
        >>> record = Record(greeting="hi", owner=Principal("creator"))
        >>> authorize(Principal("creator"), record)
        >>> authorize(Principal("Creator"), record)  # doctest: +IGNORE_EXCEPTION_DETAIL
        Traceback (most recent call last):
        ...
        owned_greeting.domain.errors.Unauthorized: Unauthorized
    """
    if caller != record.owner:
        raise Unauthorized()


__all__ = ["authorize"]
