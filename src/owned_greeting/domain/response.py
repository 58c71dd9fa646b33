"""Response returned by mutating entry points, carrying audit attributes."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Attribute:
    """Key/value audit tag observable by external indexers."""

    key: str
    value: str


@dataclass(frozen=True, slots=True)
class Response:
    """Immutable response built up with :meth:`add_attribute`.

    Example:
        >>> response = Response().add_attribute("method", "reset")
        >>> response.attributes
        (Attribute(key='method', value='reset'),)
        >>> response.attribute("method")
        'reset'
    """

    attributes: tuple[Attribute, ...] = ()

    def add_attribute(self, key: str, value: str) -> Response:
        """Return a new response with ``key=value`` appended."""
        return Response(attributes=(*self.attributes, Attribute(key=key, value=str(value))))

    def attribute(self, key: str) -> str | None:
        """Return the first value recorded under ``key``, if any."""
        for attr in self.attributes:
            if attr.key == key:
                return attr.value
        return None


__all__ = ["Attribute", "Response"]
