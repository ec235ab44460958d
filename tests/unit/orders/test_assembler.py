"""Unit tests for OrderAssembler.

Covers:
- The 12.50 x 3 scenario: one line, exact total, CREATED, fresh id.
- Totals are the exact sum of line totals, lines keep input order.
- Failed resolution or an empty order consumes no order id and stores
  nothing.
- Storage errors surface unmodified.
- OrderCreated is published on success.
"""

from __future__ import annotations

from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from modules.menus.dtos import MenuDTO
from modules.menus.exceptions import MenuNotFound, MenuSellerMismatch
from modules.orders.assembler import OrderAssembler
from modules.orders.constants import MAX_LINE_QUANTITY, MAX_TOTAL_PRICE, OrderStatus
from modules.orders.dtos import CreateOrderLineDTO
from modules.orders.events import OrderCreated
from modules.orders.exceptions import EmptyOrder, InvalidQuantity, OrderTotalOutOfRange
from modules.sequences.constants import ORDER_SEQUENCE

pytestmark = pytest.mark.unit


def _line(menu_id: int, quantity: int) -> CreateOrderLineDTO:
    return CreateOrderLineDTO(menu_id=menu_id, quantity=quantity)


def _create(context, lines, seller_id=1):
    return context.assembler.create(
        customer_id=7,
        seller_id=seller_id,
        source_address="Jl. Sudirman 1",
        delivery_address="Jl. Merdeka 7",
        lines=lines,
    )


class TestCreate:
    def test_single_line_scenario(self, seeded_context):
        previous = seeded_context.allocator.current(ORDER_SEQUENCE)

        order = _create(seeded_context, [_line(10, 3)])

        assert len(order.order_details) == 1
        line = order.order_details[0]
        assert (line.menu_id, line.quantity, line.line_total) == (10, 3, Decimal("37.50"))
        assert order.total_price == Decimal("37.50")
        assert order.status == OrderStatus.CREATED
        assert previous is None
        assert order.order_id == seeded_context.allocator.current(ORDER_SEQUENCE)

    def test_order_is_stored(self, seeded_context):
        order = _create(seeded_context, [_line(10, 1)])
        assert seeded_context.orders.get_by_id(order.order_id) == order

    def test_copies_parties_and_addresses(self, seeded_context):
        order = _create(seeded_context, [_line(10, 1)])

        assert order.customer_id == 7
        assert order.seller_id == 1
        assert order.source_address == "Jl. Sudirman 1"
        assert order.delivery_address == "Jl. Merdeka 7"

    def test_total_is_exact_sum_in_input_order(self, seeded_context):
        order = _create(seeded_context, [_line(11, 3), _line(10, 2), _line(11, 1)])

        assert [line.menu_id for line in order.order_details] == [11, 10, 11]
        assert order.total_price == sum(
            (line.line_total for line in order.order_details), Decimal("0")
        )
        assert order.total_price == Decimal("42.00")

    def test_no_float_drift(self, seeded_context):
        seeded_context.menus.insert(
            MenuDTO(menu_id=12, seller_id=1, name="Kerupuk", price=Decimal("0.10"))
        )
        order = _create(seeded_context, [_line(12, 1)] * 3)
        assert order.total_price == Decimal("0.30")

    def test_each_order_gets_a_fresh_id(self, seeded_context):
        first = _create(seeded_context, [_line(10, 1)])
        second = _create(seeded_context, [_line(11, 1)])
        assert second.order_id > first.order_id

    def test_publishes_order_created(self, seeded_context):
        handler = MagicMock()
        seeded_context.event_bus.subscribe(OrderCreated, handler)

        order = _create(seeded_context, [_line(10, 1)])

        handler.handle.assert_called_once()
        event = handler.handle.call_args.args[0]
        assert event.aggregate_id == order.order_id


class TestCreateFailures:
    def test_empty_order_allocates_nothing(self, seeded_context):
        with pytest.raises(EmptyOrder):
            _create(seeded_context, [])

        assert seeded_context.sequences.increments == []
        assert seeded_context.orders.list() == []

    def test_seller_mismatch_scenario(self, seeded_context):
        with pytest.raises(MenuSellerMismatch) as exc_info:
            _create(seeded_context, [_line(20, 3)], seller_id=1)

        assert (exc_info.value.menu_id, exc_info.value.seller_id) == (20, 1)
        assert seeded_context.allocator.current(ORDER_SEQUENCE) is None
        assert seeded_context.orders.list() == []

    @pytest.mark.parametrize(
        "lines, error",
        [
            ([(10, 1), (404, 1)], MenuNotFound),
            ([(10, 1), (11, 0)], InvalidQuantity),
            ([(10, 1), (11, 10**12)], InvalidQuantity),
        ],
    )
    def test_resolution_errors_consume_no_id(self, seeded_context, lines, error):
        with pytest.raises(error):
            _create(seeded_context, [_line(m, q) for m, q in lines])

        assert seeded_context.sequences.increments == []
        assert seeded_context.orders.list() == []

    def test_total_beyond_storable_range_consumes_no_id(self, seeded_context):
        seeded_context.menus.insert(
            MenuDTO(menu_id=13, seller_id=1, name="Tumpeng", price=Decimal("99999999.99"))
        )

        with pytest.raises(OrderTotalOutOfRange) as exc_info:
            _create(seeded_context, [_line(13, MAX_LINE_QUANTITY), _line(13, 1)])

        assert exc_info.value.max_total == MAX_TOTAL_PRICE
        assert exc_info.value.total_price > MAX_TOTAL_PRICE
        assert seeded_context.sequences.increments == []
        assert seeded_context.orders.list() == []

    def test_largest_storable_total_is_accepted(self, seeded_context):
        seeded_context.menus.insert(
            MenuDTO(menu_id=13, seller_id=1, name="Tumpeng", price=MAX_TOTAL_PRICE)
        )
        order = _create(seeded_context, [_line(13, 1)])
        assert order.total_price == MAX_TOTAL_PRICE

    def test_failed_order_does_not_shift_later_ids(self, seeded_context):
        first = _create(seeded_context, [_line(10, 1)])
        with pytest.raises(MenuSellerMismatch):
            _create(seeded_context, [_line(20, 1)])
        second = _create(seeded_context, [_line(10, 1)])

        assert second.order_id == first.order_id + 1

    def test_storage_error_surfaces_unmodified(self, seeded_context):
        failure = RuntimeError("write refused")
        orders = MagicMock()
        orders.insert.side_effect = failure

        assembler = OrderAssembler(
            resolver=seeded_context.resolver,
            allocator=seeded_context.allocator,
            order_repository=orders,
        )
        with pytest.raises(RuntimeError) as exc_info:
            assembler.create(7, 1, "a", "b", [_line(10, 1)])

        assert exc_info.value is failure
