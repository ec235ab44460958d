"""Menu API views."""

from __future__ import annotations

from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.viewsets import ViewSet

from modules.core.context import build_context
from modules.core.views import error_response
from modules.menus.dtos import CreateMenuDTO
from modules.menus.exceptions import CatalogPersistenceError, MenuNotFound
from modules.menus.serializers import CreateMenuSerializer, MenuListQuerySerializer
from modules.sellers.exceptions import SellerNotFound
from modules.sequences.exceptions import SequencePersistenceError


class MenuViewSet(ViewSet):
    lookup_value_regex = r"\d+"

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._service = build_context().menu_service

    def create(self, request: Request) -> Response:
        """POST /api/v1/menus/"""
        serializer = CreateMenuSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            menu = self._service.create_menu(CreateMenuDTO(**serializer.validated_data))
        except SellerNotFound as exc:
            return error_response(exc, status.HTTP_404_NOT_FOUND)
        except SequencePersistenceError as exc:
            return error_response(exc, status.HTTP_503_SERVICE_UNAVAILABLE)
        return Response(menu.model_dump(mode="json"), status=status.HTTP_201_CREATED)

    def list(self, request: Request) -> Response:
        """GET /api/v1/menus/?seller_id="""
        query = MenuListQuerySerializer(data=request.query_params)
        query.is_valid(raise_exception=True)

        seller_id = query.validated_data.get("seller_id")
        try:
            if seller_id is None:
                menus = self._service.list_menus()
            else:
                menus = self._service.list_by_seller(seller_id)
        except CatalogPersistenceError as exc:
            return error_response(exc, status.HTTP_503_SERVICE_UNAVAILABLE)
        return Response([m.model_dump(mode="json") for m in menus])

    def retrieve(self, request: Request, pk: str | None = None) -> Response:
        """GET /api/v1/menus/{pk}/"""
        try:
            menu = self._service.get_menu(int(pk))
        except MenuNotFound as exc:
            return error_response(exc, status.HTTP_404_NOT_FOUND)
        except CatalogPersistenceError as exc:
            return error_response(exc, status.HTTP_503_SERVICE_UNAVAILABLE)
        return Response(menu.model_dump(mode="json"))
