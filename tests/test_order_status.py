"""Tests for the order status transition table."""

import pytest

from storefront.domain.order_status import (
    OrderStatus,
    STATUS_TRANSITIONS,
    allowed_transitions,
    can_transition,
    is_terminal,
)


def test_every_status_has_an_entry():
    assert set(STATUS_TRANSITIONS) == set(OrderStatus)


def test_forward_edges():
    assert allowed_transitions(OrderStatus.PENDING) == {OrderStatus.CONFIRMED, OrderStatus.CANCELLED}
    assert allowed_transitions(OrderStatus.CONFIRMED) == {OrderStatus.SHIPPED, OrderStatus.CANCELLED}
    assert allowed_transitions(OrderStatus.SHIPPED) == {OrderStatus.DELIVERED}


@pytest.mark.parametrize("status", [OrderStatus.DELIVERED, OrderStatus.CANCELLED])
def test_terminal_statuses(status):
    assert is_terminal(status)
    assert allowed_transitions(status) == frozenset()


@pytest.mark.parametrize("status", list(OrderStatus))
def test_no_self_transition(status):
    assert not can_transition(status, status)


def test_no_skipping_or_going_back():
    assert not can_transition(OrderStatus.PENDING, OrderStatus.SHIPPED)
    assert not can_transition(OrderStatus.PENDING, OrderStatus.DELIVERED)
    assert not can_transition(OrderStatus.SHIPPED, OrderStatus.CANCELLED)
    assert not can_transition(OrderStatus.SHIPPED, OrderStatus.CONFIRMED)


def test_accepts_plain_strings():
    assert can_transition("PENDING", "CONFIRMED")
    assert not can_transition("CANCELLED", "PENDING")


def test_unknown_status_is_an_error():
    with pytest.raises(ValueError):
        can_transition("PENDING", "LOST")
