"""
Identified reference objects.

Every ellipsoid, datum, coordinate system, reference system and coordinate
operation carries an authority identifier (for example ``EPSG::7030``) and a
human-readable name. Two objects with the same identifier describe the same
definition.
"""

from typing import Optional, Sequence, Tuple


class IdentifiedObject:
    """Base class of objects identified by an authority code.

    Parameters
    ----------
    identifier : str
        Authority-qualified identifier, ``AUTHORITY::CODE``.
    name : str
        Human-readable name.
    remarks : str, optional
        Free text remarks.
    aliases : sequence of str, optional
        Alternative names, searched by catalog name lookups.
    """

    def __init__(
        self,
        identifier: str,
        name: str,
        remarks: Optional[str] = None,
        aliases: Sequence[str] = ()
    ):
        if not identifier:
            raise ValueError("The identifier is not specified.")
        self._identifier = identifier.strip()
        self._name = name or ""
        self._remarks = remarks
        self._aliases = tuple(aliases or ())

    @property
    def identifier(self) -> str:
        """Authority-qualified identifier."""
        return self._identifier

    @property
    def name(self) -> str:
        """Human-readable name."""
        return self._name

    @property
    def remarks(self) -> Optional[str]:
        """Free text remarks."""
        return self._remarks

    @property
    def aliases(self) -> Tuple[str, ...]:
        """Alternative names."""
        return self._aliases

    @property
    def authority(self) -> Optional[str]:
        """Authority part of the identifier, e.g. ``EPSG``."""
        if "::" not in self._identifier:
            return None
        return self._identifier.split("::", 1)[0]

    @property
    def code(self) -> Optional[int]:
        """Numeric code part of the identifier, if any."""
        tail = self._identifier.split("::", 1)[-1]
        return int(tail) if tail.isdigit() else None

    def __eq__(self, other):
        if not isinstance(other, IdentifiedObject):
            return NotImplemented
        return type(self) is type(other) and self._identifier == other._identifier

    def __hash__(self):
        return hash((type(self).__name__, self._identifier))

    def __repr__(self):
        return f"{type(self).__name__}('{self._identifier}', '{self._name}')"

    def __str__(self):
        return f"[{self._identifier}] {self._name}"
