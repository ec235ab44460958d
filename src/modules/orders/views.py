"""Order API views.

Exposes the ``OrderService`` via HTTP using a DRF ViewSet.
Domain exceptions are caught and translated into appropriate
HTTP status codes; the view never swallows generic exceptions.
"""

from __future__ import annotations

from rest_framework import status
from rest_framework.decorators import action
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.viewsets import ViewSet

from modules.core.context import build_context
from modules.core.views import error_response
from modules.customers.exceptions import CustomerNotFound
from modules.menus.exceptions import (
    CatalogPersistenceError,
    MenuNotFound,
    MenuSellerMismatch,
)
from modules.orders.dtos import CreateOrderDTO, CreateOrderLineDTO
from modules.orders.exceptions import (
    EmptyOrder,
    InvalidQuantity,
    InvalidTransition,
    OrderNotFound,
    OrderTotalOutOfRange,
)
from modules.orders.serializers import CreateOrderSerializer, OrderListQuerySerializer
from modules.sellers.exceptions import SellerNotFound
from modules.sequences.exceptions import SequencePersistenceError


class OrderViewSet(ViewSet):
    """ViewSet for Order operations.

    All storage access goes through the service/repository layer.
    """

    lookup_value_regex = r"\d+"

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._service = build_context().order_service

    # ------------------------------------------------------------------
    # Create
    # ------------------------------------------------------------------

    def create(self, request: Request) -> Response:
        """POST /api/v1/orders/"""
        create_serializer = CreateOrderSerializer(data=request.data)
        create_serializer.is_valid(raise_exception=True)

        data = create_serializer.validated_data
        dto = CreateOrderDTO(
            customer_id=data["customer_id"],
            seller_id=data["seller_id"],
            lines=[
                CreateOrderLineDTO(menu_id=line["menu_id"], quantity=line["quantity"])
                for line in data["menus"]
            ],
            delivery_address=data.get("delivery_address") or None,
        )

        try:
            order = self._service.place_order(dto)
        except (CustomerNotFound, SellerNotFound, MenuNotFound) as exc:
            return error_response(exc, status.HTTP_404_NOT_FOUND)
        except (
            EmptyOrder,
            InvalidQuantity,
            MenuSellerMismatch,
            OrderTotalOutOfRange,
        ) as exc:
            return error_response(exc, status.HTTP_400_BAD_REQUEST)
        except (CatalogPersistenceError, SequencePersistenceError) as exc:
            return error_response(exc, status.HTTP_503_SERVICE_UNAVAILABLE)

        return Response(order.model_dump(mode="json"), status=status.HTTP_201_CREATED)

    # ------------------------------------------------------------------
    # List / Retrieve
    # ------------------------------------------------------------------

    def list(self, request: Request) -> Response:
        """GET /api/v1/orders/?seller_id=&customer_id=&status="""
        query = OrderListQuerySerializer(data=request.query_params)
        query.is_valid(raise_exception=True)
        orders = self._service.list_orders(**query.validated_data)
        return Response([o.model_dump(mode="json") for o in orders])

    def retrieve(self, request: Request, pk: str | None = None) -> Response:
        """GET /api/v1/orders/{pk}/"""
        try:
            order = self._service.get_order(int(pk))
        except OrderNotFound as exc:
            return error_response(exc, status.HTTP_404_NOT_FOUND)
        return Response(order.model_dump(mode="json"))

    # ------------------------------------------------------------------
    # Lifecycle transitions
    # ------------------------------------------------------------------

    @action(detail=True, methods=["post"])
    def accept(self, request: Request, pk: str | None = None) -> Response:
        """POST /api/v1/orders/{pk}/accept/"""
        return self._transition(self._service.accept_order, pk)

    @action(detail=True, methods=["post"])
    def reject(self, request: Request, pk: str | None = None) -> Response:
        """POST /api/v1/orders/{pk}/reject/"""
        return self._transition(self._service.reject_order, pk)

    @action(detail=True, methods=["post"])
    def cancel(self, request: Request, pk: str | None = None) -> Response:
        """POST /api/v1/orders/{pk}/cancel/"""
        return self._transition(self._service.cancel_order, pk)

    @action(detail=True, methods=["post"])
    def complete(self, request: Request, pk: str | None = None) -> Response:
        """POST /api/v1/orders/{pk}/complete/"""
        return self._transition(self._service.complete_order, pk)

    def _transition(self, command, pk: str | None) -> Response:
        try:
            order = command(int(pk))
        except OrderNotFound as exc:
            return error_response(exc, status.HTTP_404_NOT_FOUND)
        except InvalidTransition as exc:
            return error_response(exc, status.HTTP_409_CONFLICT)
        return Response(order.model_dump(mode="json"))
