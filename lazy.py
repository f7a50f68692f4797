from functools import wraps
from typing import Callable


_PENDING = object()


class Memoized(object):
    """
    Defers a computation until the first get(), then hands back the same
    result forever after.

    Example:
    >>> from lazy import memoize
    >>>
    >>> m = memoize(lambda: expensive())
    >>> m.get()  # calls expensive()
    >>> m.get()  # returns the stored result
    """
    def __init__(self, producer: Callable):
        if not callable(producer):
            raise TypeError("Producer must be callable, got: %s"
                            % type(producer).__name__)
        self._producer = producer
        self._value = _PENDING

    @property
    def resolved(self) -> bool:
        return self._value is not _PENDING

    def get(self, *args):
        """
        Returns the memoized value, computing it on the first call.

        Inputs are forwarded to the producer only on that first call. Any
        inputs given afterwards are ignored, since there is one slot.
        """
        if self._value is _PENDING:
            value = self._producer(*args)
            self._value = value
            self._producer = None
        return self._value


def memoize(producer: Callable) -> Memoized:
    return Memoized(producer)


def lazy(f: Callable):
    """
    Turns a method into a property computed once per instance.
    Deleting the property clears the cache so the next access recomputes.
    """
    name = f.__name__

    @wraps(f)
    def cache_get(self):
        if name not in self.__dict__:
            self.__dict__[name] = Memoized(lambda: f(self))
        return self.__dict__[name].get()

    @wraps(f)
    def cache_del(self):
        if name in self.__dict__:
            del self.__dict__[name]

    return property(fget=cache_get, fdel=cache_del)
