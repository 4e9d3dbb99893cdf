"""Sweet API views.

Exposes ``SweetService`` via a DRF ViewSet.  Domain exceptions are
caught and translated into HTTP status codes; the view never swallows
generic exceptions.
"""

from __future__ import annotations

from django_filters.rest_framework import DjangoFilterBackend
from pydantic import ValidationError as PydanticValidationError
from rest_framework import status
from rest_framework.decorators import action
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.viewsets import GenericViewSet

from modules.accounts.permissions import IsAdminRole
from modules.core.parsing import body_fields
from modules.core.responses import (
    error_response,
    success_response,
    validation_error_response,
)
from modules.sweets.dtos import CreateSweetDTO, StockChangeDTO, UpdateSweetDTO
from modules.sweets.exceptions import (
    InsufficientStock,
    StockLimitExceeded,
    SweetAlreadyExists,
    SweetNotFound,
)
from modules.sweets.filters import SweetFilter
from modules.sweets.repositories.django_repository import SweetDjangoRepository
from modules.sweets.serializers import SweetSerializer
from modules.sweets.services import SweetService

SWEET_FIELDS = ("name", "category", "price", "quantity", "description", "image")
PUBLIC_ACTIONS = {"list", "retrieve", "search"}
INVENTORY_ACTIONS = {"purchase", "restock"}
NOT_FOUND_MESSAGE = "Sweet not found"


class SweetViewSet(GenericViewSet):
    """ViewSet for the sweets catalogue and its inventory actions.

    Browsing is public, purchasing needs a signed-in user and every other
    write needs the ``admin`` role.  Does **not** extend ``ModelViewSet``:
    all ORM access goes through the service/repository layer.
    """

    filterset_class = SweetFilter
    filter_backends = [DjangoFilterBackend]
    serializer_class = SweetSerializer

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._service = SweetService(repository=SweetDjangoRepository())

    def get_queryset(self):
        return self._service.list_sweets()

    def get_permissions(self):
        if self.action in PUBLIC_ACTIONS:
            return [AllowAny()]
        if self.action == "purchase":
            return [IsAuthenticated()]
        return [IsAdminRole()]

    @property
    def throttle_scope(self) -> str | None:
        return "inventory" if self.action in INVENTORY_ACTIONS else None

    # ------------------------------------------------------------------
    # List / Search / Retrieve
    # ------------------------------------------------------------------

    def list(self, request: Request) -> Response:
        """GET /api/v1/sweets/"""
        return self._listing()

    @action(detail=False, methods=["get"], url_path="search")
    def search(self, request: Request) -> Response:
        """GET /api/v1/sweets/search/?name=&category=&minPrice=&maxPrice="""
        return self._listing()

    def retrieve(self, request: Request, pk: str | None = None) -> Response:
        """GET /api/v1/sweets/{pk}/"""
        try:
            sweet = self._service.get_sweet(pk)
        except SweetNotFound:
            return error_response(NOT_FOUND_MESSAGE, status=status.HTTP_404_NOT_FOUND)
        return success_response(data=SweetSerializer(sweet).data)

    # ------------------------------------------------------------------
    # Create / Update / Destroy
    # ------------------------------------------------------------------

    def create(self, request: Request) -> Response:
        """POST /api/v1/sweets/"""
        try:
            dto = CreateSweetDTO(
                **body_fields(request, SWEET_FIELDS),
                created_by_id=request.user.pk,
            )
        except PydanticValidationError as exc:
            return validation_error_response(exc)

        try:
            sweet = self._service.create_sweet(dto)
        except SweetAlreadyExists as exc:
            return error_response(str(exc), status=status.HTTP_400_BAD_REQUEST)

        return success_response(
            status=status.HTTP_201_CREATED,
            data=SweetSerializer(sweet).data,
        )

    def update(self, request: Request, pk: str | None = None) -> Response:
        """PUT/PATCH /api/v1/sweets/{pk}/ (always partial)"""
        try:
            dto = UpdateSweetDTO(**body_fields(request, SWEET_FIELDS))
        except PydanticValidationError as exc:
            return validation_error_response(exc)

        try:
            sweet = self._service.update_sweet(pk, dto)
        except SweetNotFound:
            return error_response(NOT_FOUND_MESSAGE, status=status.HTTP_404_NOT_FOUND)
        except SweetAlreadyExists as exc:
            return error_response(str(exc), status=status.HTTP_400_BAD_REQUEST)

        return success_response(data=SweetSerializer(sweet).data)

    def partial_update(self, request: Request, pk: str | None = None) -> Response:
        """PATCH /api/v1/sweets/{pk}/"""
        return self.update(request, pk)

    def destroy(self, request: Request, pk: str | None = None) -> Response:
        """DELETE /api/v1/sweets/{pk}/"""
        try:
            self._service.delete_sweet(pk)
        except SweetNotFound:
            return error_response(NOT_FOUND_MESSAGE, status=status.HTTP_404_NOT_FOUND)
        return success_response(message="Sweet deleted successfully")

    # ------------------------------------------------------------------
    # Inventory
    # ------------------------------------------------------------------

    @action(detail=True, methods=["post"], url_path="purchase")
    def purchase(self, request: Request, pk: str | None = None) -> Response:
        """POST /api/v1/sweets/{pk}/purchase/  body: ``{"quantity": N}``"""
        try:
            dto = StockChangeDTO(**body_fields(request, ("quantity",)))
        except PydanticValidationError as exc:
            return validation_error_response(exc)

        try:
            sweet = self._service.purchase(pk, dto)
        except SweetNotFound:
            return error_response(NOT_FOUND_MESSAGE, status=status.HTTP_404_NOT_FOUND)
        except InsufficientStock as exc:
            return error_response(str(exc), status=status.HTTP_400_BAD_REQUEST)

        return success_response(
            message=f"Successfully purchased {dto.quantity} {sweet.name}(s)",
            data=SweetSerializer(sweet).data,
        )

    @action(detail=True, methods=["post"], url_path="restock")
    def restock(self, request: Request, pk: str | None = None) -> Response:
        """POST /api/v1/sweets/{pk}/restock/  body: ``{"quantity": N}``"""
        try:
            dto = StockChangeDTO(**body_fields(request, ("quantity",)))
        except PydanticValidationError as exc:
            return validation_error_response(exc)

        try:
            sweet = self._service.restock(pk, dto)
        except SweetNotFound:
            return error_response(NOT_FOUND_MESSAGE, status=status.HTTP_404_NOT_FOUND)
        except StockLimitExceeded as exc:
            return error_response(str(exc), status=status.HTTP_400_BAD_REQUEST)

        return success_response(
            message=f"Successfully restocked {dto.quantity} {sweet.name}(s)",
            data=SweetSerializer(sweet).data,
        )

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _listing(self) -> Response:
        queryset = self.filter_queryset(self.get_queryset())
        page = self.paginate_queryset(queryset)
        if page is not None:
            return self.get_paginated_response(SweetSerializer(page, many=True).data)
        data = SweetSerializer(queryset, many=True).data
        return success_response(count=len(data), data=data)
