"""Customer API views."""

from __future__ import annotations

from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.viewsets import ViewSet

from modules.core.context import build_context
from modules.core.views import error_response
from modules.customers.dtos import CreateCustomerDTO
from modules.customers.exceptions import CustomerNotFound
from modules.customers.serializers import CreateCustomerSerializer
from modules.sequences.exceptions import SequencePersistenceError


class CustomerViewSet(ViewSet):
    lookup_value_regex = r"\d+"

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._service = build_context().customer_service

    def create(self, request: Request) -> Response:
        """POST /api/v1/customers/"""
        serializer = CreateCustomerSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            customer = self._service.create_customer(
                CreateCustomerDTO(**serializer.validated_data)
            )
        except SequencePersistenceError as exc:
            return error_response(exc, status.HTTP_503_SERVICE_UNAVAILABLE)
        return Response(customer.model_dump(mode="json"), status=status.HTTP_201_CREATED)

    def retrieve(self, request: Request, pk: str | None = None) -> Response:
        """GET /api/v1/customers/{pk}/"""
        try:
            customer = self._service.get_customer(int(pk))
        except CustomerNotFound as exc:
            return error_response(exc, status.HTTP_404_NOT_FOUND)
        return Response(customer.model_dump(mode="json"))
