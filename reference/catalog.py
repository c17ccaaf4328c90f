"""
Static catalogs of identified reference objects.

A catalog owns a builder that produces its entries. The entries are built once,
on first access, under a lock, and are read-only afterwards. Lookups by
identifier or name use a case-insensitive substring match and return every
matching entry.
"""

import re
from typing import Callable, Dict, Generic, Iterable, Iterator, List, Tuple, TypeVar

from common.caching import locked_cached_property
from common.logging_config import get_logger
from reference.base import IdentifiedObject

logger = get_logger(__name__)

T = TypeVar("T", bound=IdentifiedObject)


class Catalog(Generic[T]):
    """A read-only collection of identified objects.

    Parameters
    ----------
    name : str
        Name of the catalog, used in log and error messages.
    builder : callable
        Zero-argument callable returning the entries.

    Examples
    --------
    >>> from reference.ellipsoids import ELLIPSOIDS
    >>> [e.name for e in ELLIPSOIDS.from_name("bessel")]
    ['Bessel 1841', 'Bessel Modified', 'Bessel Namibia']
    """

    def __init__(self, name: str, builder: Callable[[], Iterable[T]]):
        self._name = name
        self._builder = builder

    @property
    def name(self) -> str:
        return self._name

    @locked_cached_property
    def all(self) -> Tuple[T, ...]:
        """Every entry of the catalog, ordered by name."""
        entries = sorted(self._builder(), key=lambda entry: entry.name)
        logger.debug(f"Populated catalog '{self._name}' with {len(entries)} entries")
        return tuple(entries)

    @locked_cached_property
    def _by_identifier(self) -> Dict[str, T]:
        return {entry.identifier: entry for entry in self.all}

    def from_identifier(self, identifier: str) -> List[T]:
        """Return all entries whose identifier contains the pattern.

        Parameters
        ----------
        identifier : str
            Case-insensitive pattern, matched literally.

        Returns
        -------
        list
            Matching entries, possibly empty.
        """
        if identifier is None:
            return []
        pattern = re.compile(re.escape(identifier), re.IGNORECASE)
        return [entry for entry in self.all if pattern.search(entry.identifier)]

    def from_name(self, name: str) -> List[T]:
        """Return all entries whose name or one of its aliases contains the pattern."""
        if name is None:
            return []
        pattern = re.compile(re.escape(name), re.IGNORECASE)
        return [
            entry for entry in self.all
            if pattern.search(entry.name) or any(pattern.search(alias) for alias in entry.aliases)
        ]

    def __getitem__(self, identifier: str) -> T:
        try:
            return self._by_identifier[identifier]
        except KeyError:
            raise KeyError(f"No entry with identifier '{identifier}' in catalog '{self._name}'") from None

    def __contains__(self, item) -> bool:
        if isinstance(item, str):
            return item in self._by_identifier
        return item in self.all

    def __iter__(self) -> Iterator[T]:
        return iter(self.all)

    def __len__(self) -> int:
        return len(self.all)

    def __repr__(self):
        return f"Catalog('{self._name}')"
