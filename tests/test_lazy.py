import pytest

from lazy import Memoized, lazy, memoize


def counter():
    calls = {"n": 0}

    def produce():
        calls["n"] += 1
        return calls["n"]
    return produce, calls


def test_memoize_computes_once() -> None:
    produce, calls = counter()
    m = memoize(produce)
    assert calls["n"] == 0
    assert not m.resolved
    assert m.get() == 1
    assert m.get() == 1
    assert calls["n"] == 1
    assert m.resolved


def test_repeated_gets_return_same_object() -> None:
    m = memoize(lambda: [1, 2, 3])
    first = m.get()
    for _ in range(100):
        assert m.get() is first


def test_none_result_is_cached() -> None:
    calls = []
    m = Memoized(lambda: calls.append(1))
    assert m.get() is None
    assert m.get() is None
    assert calls == [1]
    assert m.resolved


def test_input_used_only_on_first_get() -> None:
    m = memoize(lambda x: x + 1)
    assert m.get(0) == 1
    assert m.get(10) == 1


def test_failed_producer_stays_pending() -> None:
    attempts = []

    def produce():
        attempts.append(1)
        if len(attempts) == 1:
            raise RuntimeError("boom")
        return "ok"

    m = memoize(produce)
    with pytest.raises(RuntimeError, match="boom"):
        m.get()
    assert not m.resolved
    assert m.get() == "ok"
    assert m.get() == "ok"
    assert len(attempts) == 2


def test_rejects_non_callable() -> None:
    with pytest.raises(TypeError):
        Memoized(42)


class Account(object):
    def __init__(self) -> None:
        self.loads = 0

    @lazy
    def balance(self):
        self.loads += 1
        return self.loads * 100


def test_lazy_property_per_instance() -> None:
    a, b = Account(), Account()
    assert a.balance == 100
    assert a.balance == 100
    assert a.loads == 1
    assert b.loads == 0
    assert b.balance == 100


def test_lazy_property_delete_recomputes() -> None:
    a = Account()
    assert a.balance == 100
    del a.balance
    assert a.balance == 200
    assert a.loads == 2


def test_lazy_property_keeps_name() -> None:
    assert Account.balance.fget.__name__ == "balance"
