import pytest
from hypothesis import given
from hypothesis import strategies as st

from algonotes.linked import (
    DoublyLinkedList,
    ListNode,
    has_cycle,
    linked_list_from,
    reverse_list,
    to_list,
)


def _cyclic_list():
    one, two, three, four, five = (ListNode(v) for v in (1, 2, 3, 4, 5))
    one.next = two
    two.next = three
    three.next = four
    four.next = five
    five.next = two
    return one


def test_cycle_detected_in_source_example():
    assert has_cycle(_cyclic_list()) is True


def test_no_cycle_in_straight_list():
    assert has_cycle(linked_list_from([10, 20, 30])) is False


def test_empty_and_single_have_no_cycle():
    assert has_cycle(None) is False
    assert has_cycle(ListNode(1)) is False


def test_self_loop_is_a_cycle():
    node = ListNode(7)
    node.next = node
    assert has_cycle(node) is True


def test_to_list_rejects_cycle():
    with pytest.raises(ValueError):
        to_list(_cyclic_list())


def test_empty_input_builds_no_list():
    assert linked_list_from([]) is None
    assert to_list(None) == []
    assert reverse_list(None) is None


@given(st.lists(st.integers()))
def test_build_round_trip(values):
    assert to_list(linked_list_from(values)) == values


@given(st.lists(st.integers()))
def test_reverse_reverses(values):
    assert to_list(reverse_list(linked_list_from(values))) == values[::-1]


@given(st.lists(st.integers(), min_size=1))
def test_reverse_twice_restores(values):
    head = linked_list_from(values)
    assert to_list(reverse_list(reverse_list(head))) == values


def test_reverse_old_head_becomes_tail():
    head = linked_list_from([1, 2, 3])
    new_head = reverse_list(head)
    assert new_head.value == 3
    assert head.next is None


def test_doubly_push_front_and_back():
    items = DoublyLinkedList()
    items.push_back(2)
    items.push_front(1)
    items.push_back(3)
    assert list(items) == [1, 2, 3]
    assert len(items) == 3


@given(st.lists(st.integers()))
def test_doubly_backward_links_match_forward(values):
    items = DoublyLinkedList(values)
    assert list(reversed(items)) == values[::-1]
    assert len(items) == len(values)


@given(st.lists(st.integers()))
def test_doubly_push_front_reverses_order(values):
    items = DoublyLinkedList()
    for value in values:
        items.push_front(value)
    assert list(items) == values[::-1]
    assert list(reversed(items)) == values