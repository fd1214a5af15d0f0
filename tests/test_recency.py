import pytest

from forgetting_map.recency import HEAD, TAIL, RecencyList


def test_empty_list_has_linked_sentinels() -> None:
    recency: RecencyList[str, int] = RecencyList()

    assert len(recency) == 0
    assert list(recency) == []
    assert recency._next[HEAD] == TAIL
    assert recency._prev[TAIL] == HEAD


def test_back_and_pop_back_on_empty_raise() -> None:
    recency: RecencyList[str, int] = RecencyList()

    with pytest.raises(IndexError):
        recency.back()
    with pytest.raises(IndexError):
        recency.pop_back()


def test_push_front_orders_newest_first() -> None:
    recency: RecencyList[str, int] = RecencyList()
    slots = [recency.push_front(key, n) for n, key in enumerate("abc")]

    assert list(recency) == ["c", "b", "a"]
    assert len(recency) == 3
    assert recency.key_at(recency.back()) == "a"
    assert [recency.value_at(slot) for slot in slots] == [0, 1, 2]


def test_move_to_front_from_middle_and_back() -> None:
    recency: RecencyList[str, int] = RecencyList()
    a = recency.push_front("a", 1)
    b = recency.push_front("b", 2)
    recency.push_front("c", 3)

    recency.move_to_front(b)
    assert list(recency) == ["b", "c", "a"]

    recency.move_to_front(a)
    assert list(recency) == ["a", "b", "c"]

    recency.move_to_front(a)
    assert list(recency) == ["a", "b", "c"]
    assert len(recency) == 3


def test_pop_back_removes_least_recent_and_frees_slot() -> None:
    recency: RecencyList[str, int] = RecencyList()
    a = recency.push_front("a", 1)
    recency.push_front("b", 2)

    assert recency.pop_back() == "a"
    assert list(recency) == ["b"]
    assert recency._free == [a]

    reused = recency.push_front("c", 3)
    assert reused == a
    assert recency._free == []
    assert list(recency) == ["c", "b"]
    assert recency.value_at(reused) == 3


def test_set_value_replaces_payload_in_place() -> None:
    recency: RecencyList[str, str] = RecencyList()
    slot = recency.push_front("k", "old")
    recency.set_value(slot, "new")

    assert recency.value_at(slot) == "new"
    assert list(recency) == ["k"]


def test_draining_returns_sentinels_to_empty_state() -> None:
    recency: RecencyList[int, int] = RecencyList()
    for key in range(5):
        recency.push_front(key, key)

    assert [recency.pop_back() for _ in range(5)] == [0, 1, 2, 3, 4]
    assert len(recency) == 0
    assert recency._next[HEAD] == TAIL
    assert recency._prev[TAIL] == HEAD
