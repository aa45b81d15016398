import pytest

from infixcalc.linkedlist import LinkedList, Node, delete_node


def test_construct_keeps_order():
    assert list(LinkedList([1, 2, 3])) == [1, 2, 3]


def test_empty_list():
    lst = LinkedList()
    assert len(lst) == 0
    assert lst.last() is None
    assert list(lst) == []


def test_add_front_prepends():
    lst = LinkedList(["b", "c"])
    node = lst.add_front("a")
    assert list(lst) == ["a", "b", "c"]
    assert lst.head is node


def test_add_back_appends():
    lst = LinkedList()
    lst.add_back("x")
    lst.add_back("y")
    assert list(lst) == ["x", "y"]
    assert lst.last().content == "y"


def test_len_counts_nodes():
    lst = LinkedList(range(5))
    lst.add_front(-1)
    assert len(lst) == 6


def test_last_is_final_node():
    lst = LinkedList([10, 20, 30])
    tail = lst.last()
    assert isinstance(tail, Node)
    assert tail.content == 30
    assert tail.next is None


def test_clear_deletes_back_to_front():
    seen = []
    lst = LinkedList(["a", "b", "c"])
    lst.clear(seen.append)
    assert seen == ["c", "b", "a"]
    assert len(lst) == 0
    assert lst.head is None


def test_clear_without_deleter():
    lst = LinkedList([1, 2])
    lst.clear()
    assert list(lst) == []


def test_for_each_visits_in_order():
    seen = []
    LinkedList([3, 1, 2]).for_each(seen.append)
    assert seen == [3, 1, 2]


def test_map_builds_new_list():
    original = LinkedList([1, 2, 3])
    mapped = original.map(lambda v: v * 10)
    assert list(mapped) == [10, 20, 30]
    assert list(original) == [1, 2, 3]
    assert mapped.head is not original.head


def test_map_failure_releases_produced_contents():
    released = []

    def func(value):
        if value == 3:
            raise ValueError("bad")
        return str(value)

    with pytest.raises(ValueError):
        LinkedList([1, 2, 3, 4]).map(func, released.append)
    assert sorted(released) == ["1", "2"]


def test_delete_node_hands_content_and_unlinks():
    seen = []
    second = Node("second")
    first = Node("first", second)
    delete_node(first, seen.append)
    assert seen == ["first"]
    assert first.next is None