import pytest

from ftkit.linked import LinkedList, Node, delete_node


def test_empty_list():
    lst = LinkedList()
    assert len(lst) == 0
    assert list(lst) == []
    assert lst.last() is None
    assert lst.head is None


def test_build_from_items_keeps_order():
    assert list(LinkedList([1, 2, 3])) == [1, 2, 3]


def test_push_front():
    lst = LinkedList([1, 2])
    node = lst.push_front(0)
    assert lst.head is node
    assert list(lst) == [0, 1, 2]


def test_push_back():
    lst = LinkedList(["a"])
    node = lst.push_back("b")
    assert lst.last() is node
    assert node.next is None
    assert list(lst) == ["a", "b"]


def test_push_back_on_empty_sets_head():
    lst = LinkedList()
    node = lst.push_back("x")
    assert lst.head is node
    assert lst.last() is node


def test_last_content():
    lst = LinkedList(["p", "q", "r"])
    assert lst.last().content == "r"


def test_len_counts_nodes():
    lst = LinkedList(range(5))
    lst.push_front(-1)
    lst.push_back(5)
    assert len(lst) == 7


def test_for_each_visits_in_order():
    seen = []
    LinkedList(["x", "y", "z"]).for_each(seen.append)
    assert seen == ["x", "y", "z"]


def test_clear_calls_delete_for_each():
    deleted = []
    lst = LinkedList([1, 2, 3])
    lst.clear(deleted.append)
    assert deleted == [1, 2, 3]
    assert len(lst) == 0
    assert lst.head is None


def test_clear_without_delete_empties():
    lst = LinkedList([1, 2])
    lst.clear()
    assert list(lst) == []


def test_map_builds_new_list():
    source = LinkedList([1, 2, 3])
    mapped = source.map(lambda x: x * 10)
    assert list(mapped) == [x * 10 for x in [1, 2, 3]]
    assert list(source) == [1, 2, 3]
    assert mapped.head is not source.head


def test_map_failure_deletes_partial_and_raises():
    deleted = []
    source = LinkedList(["a", "b", "c"])

    def upper_until_c(s):
        return None if s == "c" else s.upper()

    with pytest.raises(ValueError):
        source.map(upper_until_c, deleted.append)
    assert deleted == ["A", "B"]
    assert list(source) == ["a", "b", "c"]


def test_delete_node_hands_content_over():
    deleted = []
    node = Node("payload", Node("next"))
    delete_node(node, deleted.append)
    assert deleted == ["payload"]
    assert node.next is None
    assert node.content is None


def test_delete_node_without_deleter_leaves_node():
    node = Node("keep")
    delete_node(node, None)
    assert node.content == "keep"


def test_node_links():
    tail = Node(2)
    head = Node(1, tail)
    assert head.next is tail
    assert tail.next is None