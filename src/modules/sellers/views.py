"""Seller API views."""

from __future__ import annotations

from rest_framework import status
from rest_framework.decorators import action
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.viewsets import ViewSet

from modules.core.context import build_context
from modules.core.views import error_response
from modules.sellers.dtos import CreateSellerDTO
from modules.sellers.exceptions import SellerNotFound
from modules.sellers.serializers import CreateSellerSerializer, UpdateAddressSerializer
from modules.sequences.exceptions import SequencePersistenceError


class SellerViewSet(ViewSet):
    lookup_value_regex = r"\d+"

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._service = build_context().seller_service

    def create(self, request: Request) -> Response:
        """POST /api/v1/sellers/"""
        serializer = CreateSellerSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            seller = self._service.create_seller(
                CreateSellerDTO(**serializer.validated_data)
            )
        except SequencePersistenceError as exc:
            return error_response(exc, status.HTTP_503_SERVICE_UNAVAILABLE)
        return Response(seller.model_dump(mode="json"), status=status.HTTP_201_CREATED)

    def list(self, request: Request) -> Response:
        """GET /api/v1/sellers/"""
        return Response([s.model_dump(mode="json") for s in self._service.list_sellers()])

    def retrieve(self, request: Request, pk: str | None = None) -> Response:
        """GET /api/v1/sellers/{pk}/"""
        try:
            seller = self._service.get_seller(int(pk))
        except SellerNotFound as exc:
            return error_response(exc, status.HTTP_404_NOT_FOUND)
        return Response(seller.model_dump(mode="json"))

    @action(detail=True, methods=["patch"])
    def address(self, request: Request, pk: str | None = None) -> Response:
        """PATCH /api/v1/sellers/{pk}/address/"""
        serializer = UpdateAddressSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            seller = self._service.update_address(
                int(pk), serializer.validated_data["address"]
            )
        except SellerNotFound as exc:
            return error_response(exc, status.HTTP_404_NOT_FOUND)
        return Response(seller.model_dump(mode="json"))
