from datetime import timedelta
from functools import wraps
from typing import Callable, Union

import time


Duration = Union[timedelta, int, float]


def _to_timedelta(duration: Duration) -> timedelta:
    if isinstance(duration, timedelta):
        delta = duration
    elif isinstance(duration, (int, float)) and not isinstance(duration, bool):
        delta = timedelta(seconds=duration)
    else:
        raise TypeError("Duration must be a timedelta or a number of "
                        "seconds, got: %s" % type(duration).__name__)
    if delta < timedelta(0):
        raise ValueError("Duration must not be negative: %s" % delta)
    return delta


class MemoizedWithExpiration(object):
    """
    Memoizes a computation for a limited time. Once more than `duration`
    has passed since the last computation, the next get() recomputes.

    A zero duration recomputes on every get().

    Values handed out are never mutated: a recomputation replaces the
    stored reference, so callers can keep an older result around.

    Note: there is a single slot. Inputs passed to get() reach the producer
    only when the value is stale. While it is fresh they are discarded, and
    the cached result still reflects whatever input caused the last
    computation.
    """
    def __init__(self, producer: Callable, duration: Duration,
                 clock: Callable[[], float] = time.monotonic):
        if not callable(producer):
            raise TypeError("Producer must be callable, got: %s"
                            % type(producer).__name__)
        if not callable(clock):
            raise TypeError("Clock must be callable, got: %s"
                            % type(clock).__name__)
        self._producer = producer
        self._duration = _to_timedelta(duration)
        self._seconds = self._duration.total_seconds()
        self._clock = clock
        self._last_computed_at = None
        self._value = None
        self._has_value = False

    @property
    def duration(self) -> timedelta:
        return self._duration

    @property
    def last_computed_at(self):
        return self._last_computed_at

    def _stale_at(self, now: float) -> bool:
        if not self._has_value or self._seconds == 0:
            return True
        return now - self._last_computed_at > self._seconds

    def is_stale(self) -> bool:
        return self._stale_at(self._clock())

    def get(self, *args):
        now = self._clock()
        if self._stale_at(now):
            value = self._producer(*args)
            # commit both together, only after the producer succeeded
            self._value, self._last_computed_at = value, now
            self._has_value = True
        return self._value


def memoize_with_expiration(producer: Callable, duration: Duration,
                            clock: Callable[[], float] = time.monotonic
                            ) -> MemoizedWithExpiration:
    return MemoizedWithExpiration(producer, duration, clock=clock)


def expiring(duration: Duration, clock: Callable[[], float] = time.monotonic):
    """
    Like lazy.lazy, but the cached property is recomputed once `duration`
    has elapsed since it was last computed.

    Example:
    >>> class Server(object):
    >>>     @expiring(timedelta(minutes=10))
    >>>     def accounts(self):
    >>>         return fetch_accounts()
    """
    delta = _to_timedelta(duration)

    def decorator(f: Callable):
        name = f.__name__

        @wraps(f)
        def cache_get(self):
            if name not in self.__dict__:
                self.__dict__[name] = MemoizedWithExpiration(
                    lambda: f(self), delta, clock=clock)
            return self.__dict__[name].get()

        @wraps(f)
        def cache_del(self):
            if name in self.__dict__:
                del self.__dict__[name]

        return property(fget=cache_get, fdel=cache_del)
    return decorator
