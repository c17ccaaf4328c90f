"""
Thread-safe lazy attributes.

Coordinate operations derive constants from their parameters (the meridian arc
at the natural origin, cone constants, rotation matrices). These are computed on
first use and then reused for the lifetime of the object. Operation objects are
shared between threads, so the first computation must be published exactly once.
"""

import threading
from typing import Any, Callable, Generic, Optional, Type, TypeVar

T = TypeVar("T")

_MISSING = object()


class locked_cached_property(Generic[T]):
    """A cached property whose first evaluation is guarded by a lock.

    The value is stored in the instance ``__dict__`` under the attribute name,
    so later reads bypass the descriptor entirely. Concurrent first readers
    block on the lock and the second one finds the stored value (double-checked
    locking, as in `common.logging_config.AuditLogger`).

    Examples
    --------
    >>> class Projection:
    ...     @locked_cached_property
    ...     def m0(self):
    ...         return expensive_series()
    """

    def __init__(self, func: Callable[[Any], T]):
        self.func = func
        self.attrname: Optional[str] = None
        self.__doc__ = func.__doc__
        self._lock = threading.RLock()

    def __set_name__(self, owner: Type, name: str) -> None:
        if self.attrname is None:
            self.attrname = name
        elif name != self.attrname:
            raise TypeError(
                f"Cannot assign the same locked_cached_property to two different names "
                f"({self.attrname!r} and {name!r})."
            )

    def __get__(self, instance: Any, owner: Optional[Type] = None) -> T:
        if instance is None:
            return self  # type: ignore[return-value]
        if self.attrname is None:
            raise TypeError("Cannot use locked_cached_property without calling __set_name__")
        cache = instance.__dict__
        value = cache.get(self.attrname, _MISSING)
        if value is _MISSING:
            with self._lock:
                value = cache.get(self.attrname, _MISSING)
                if value is _MISSING:
                    value = self.func(instance)
                    cache[self.attrname] = value
        return value
