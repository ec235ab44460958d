"""Unit tests for the order lifecycle state machine.

Covers:
- Transition table (valid, invalid, terminal states).
- accept succeeds exactly once per order.
- A rejected transition leaves the stored order untouched.
- A concurrent transition that wins first makes the loser fail.
- OrderStatusChanged is published on success.
"""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from unittest.mock import MagicMock

import pytest

from modules.orders.constants import (
    INITIAL_STATUS,
    TERMINAL_STATES,
    VALID_TRANSITIONS,
    OrderStatus,
)
from modules.orders.dtos import CreateOrderLineDTO
from modules.orders.events import OrderStatusChanged
from modules.orders.exceptions import InvalidTransition, OrderNotFound
from modules.orders.lifecycle import OrderLifecycle

pytestmark = pytest.mark.unit


@pytest.fixture()
def lifecycle(seeded_context):
    return seeded_context.lifecycle


@pytest.fixture()
def created_order(seeded_context):
    return seeded_context.assembler.create(
        customer_id=7,
        seller_id=1,
        source_address="Jl. Sudirman 1",
        delivery_address="Jl. Merdeka 7",
        lines=[CreateOrderLineDTO(menu_id=10, quantity=1)],
    )


# ===========================================================================
# Transition table
# ===========================================================================


class TestCanTransition:
    def test_initial_status_is_created(self):
        assert OrderLifecycle.initial_status == OrderStatus.CREATED == INITIAL_STATUS

    @pytest.mark.parametrize(
        "target", [OrderStatus.ACCEPTED, OrderStatus.REJECTED, OrderStatus.CANCELLED]
    )
    def test_from_created(self, target):
        assert OrderLifecycle.can_transition(OrderStatus.CREATED, target)

    def test_created_cannot_skip_to_completed(self):
        assert not OrderLifecycle.can_transition(OrderStatus.CREATED, OrderStatus.COMPLETED)

    @pytest.mark.parametrize("target", [OrderStatus.COMPLETED, OrderStatus.CANCELLED])
    def test_from_accepted(self, target):
        assert OrderLifecycle.can_transition(OrderStatus.ACCEPTED, target)

    def test_accepted_cannot_be_accepted_again(self):
        assert not OrderLifecycle.can_transition(OrderStatus.ACCEPTED, OrderStatus.ACCEPTED)

    @pytest.mark.parametrize("terminal", sorted(TERMINAL_STATES))
    def test_terminal_states_have_no_exit(self, terminal):
        assert VALID_TRANSITIONS[terminal] == set()
        for target in OrderStatus:
            assert not OrderLifecycle.can_transition(terminal, target)

    def test_every_status_is_in_the_table(self):
        assert set(VALID_TRANSITIONS) == set(OrderStatus)


# ===========================================================================
# accept
# ===========================================================================


class TestAccept:
    def test_accept_created_order(self, lifecycle, created_order, seeded_context):
        accepted = lifecycle.accept(created_order)

        assert accepted.status == OrderStatus.ACCEPTED
        stored = seeded_context.orders.get_by_id(created_order.order_id)
        assert stored.status == OrderStatus.ACCEPTED

    def test_only_status_changes(self, lifecycle, created_order):
        accepted = lifecycle.accept(created_order)
        assert accepted.model_dump(exclude={"status"}) == created_order.model_dump(
            exclude={"status"}
        )

    def test_second_accept_fails(self, lifecycle, created_order, seeded_context):
        accepted = lifecycle.accept(created_order)

        with pytest.raises(InvalidTransition) as exc_info:
            lifecycle.accept(accepted)

        assert exc_info.value.from_status == OrderStatus.ACCEPTED
        assert exc_info.value.to_status == OrderStatus.ACCEPTED
        assert exc_info.value.order_id == created_order.order_id

    def test_stale_copy_cannot_accept_twice(self, lifecycle, created_order):
        lifecycle.accept(created_order)

        with pytest.raises(InvalidTransition) as exc_info:
            lifecycle.accept(created_order)
        assert exc_info.value.from_status == OrderStatus.ACCEPTED

    def test_rejected_transition_leaves_order_untouched(self, created_order):
        orders = MagicMock()
        lifecycle = OrderLifecycle(orders)
        cancelled = created_order.model_copy(update={"status": OrderStatus.CANCELLED})

        with pytest.raises(InvalidTransition):
            lifecycle.accept(cancelled)

        orders.apply.assert_not_called()

    def test_concurrent_accepts_succeed_once(self, lifecycle, created_order):
        def try_accept(_):
            try:
                lifecycle.accept(created_order)
                return "accepted"
            except InvalidTransition:
                return "rejected"

        with ThreadPoolExecutor(max_workers=8) as pool:
            results = list(pool.map(try_accept, range(8)))

        assert results.count("accepted") == 1
        assert results.count("rejected") == 7

    def test_vanished_order(self, created_order):
        orders = MagicMock()
        orders.apply.return_value = None
        orders.get_by_id.return_value = None

        with pytest.raises(OrderNotFound):
            OrderLifecycle(orders).accept(created_order)

    def test_publishes_status_changed(self, seeded_context, created_order):
        handler = MagicMock()
        seeded_context.event_bus.subscribe(OrderStatusChanged, handler)

        seeded_context.lifecycle.accept(created_order)

        event = handler.handle.call_args.args[0]
        assert event.aggregate_id == created_order.order_id
        assert (event.old_status, event.new_status) == ("CREATED", "ACCEPTED")


# ===========================================================================
# Other transitions
# ===========================================================================


class TestOtherTransitions:
    def test_full_lifecycle(self, lifecycle, created_order):
        accepted = lifecycle.accept(created_order)
        completed = lifecycle.complete(accepted)
        assert completed.status == OrderStatus.COMPLETED

        with pytest.raises(InvalidTransition):
            lifecycle.cancel(completed)

    def test_reject_created(self, lifecycle, created_order):
        rejected = lifecycle.reject(created_order)
        assert rejected.status == OrderStatus.REJECTED

        with pytest.raises(InvalidTransition):
            lifecycle.accept(rejected)

    def test_cancel_accepted(self, lifecycle, created_order):
        cancelled = lifecycle.cancel(lifecycle.accept(created_order))
        assert cancelled.status == OrderStatus.CANCELLED

    def test_complete_requires_acceptance(self, lifecycle, created_order):
        with pytest.raises(InvalidTransition):
            lifecycle.complete(created_order)
