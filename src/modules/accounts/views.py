"""Account API views.

Exposes ``AuthService`` over HTTP.  Domain exceptions are caught and
translated into status codes; the views never swallow generic exceptions.
"""

from __future__ import annotations

from pydantic import ValidationError as PydanticValidationError
from rest_framework import status
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from modules.accounts.dtos import LoginDTO, RegisterUserDTO
from modules.accounts.exceptions import (
    AdminRegistrationDisabled,
    InvalidCredentials,
    UserAlreadyExists,
    UserNotFound,
)
from modules.accounts.repositories.django_repository import UserDjangoRepository
from modules.accounts.serializers import UserSerializer
from modules.accounts.services import AuthService
from modules.core.parsing import body_fields
from modules.core.responses import (
    error_response,
    success_response,
    validation_error_response,
)


class _AuthView(APIView):
    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._service = AuthService(repository=UserDjangoRepository())


class RegisterView(_AuthView):
    """POST /api/v1/auth/register/"""

    permission_classes = [AllowAny]
    authentication_classes: list = []
    throttle_scope = "auth"

    def post(self, request: Request) -> Response:
        try:
            dto = RegisterUserDTO(**body_fields(request, ("name", "email", "password", "role")))
        except PydanticValidationError as exc:
            return validation_error_response(exc)

        try:
            user, token = self._service.register(dto)
        except AdminRegistrationDisabled as exc:
            return error_response(str(exc), status=status.HTTP_403_FORBIDDEN)
        except UserAlreadyExists as exc:
            return error_response(str(exc), status=status.HTTP_400_BAD_REQUEST)

        return success_response(
            status=status.HTTP_201_CREATED,
            token=token,
            user=UserSerializer(user).data,
        )


class LoginView(_AuthView):
    """POST /api/v1/auth/login/"""

    permission_classes = [AllowAny]
    authentication_classes: list = []
    throttle_scope = "auth"

    def post(self, request: Request) -> Response:
        try:
            dto = LoginDTO(**body_fields(request, ("email", "password")))
        except PydanticValidationError as exc:
            return validation_error_response(exc)

        try:
            user, token = self._service.login(dto)
        except InvalidCredentials as exc:
            return error_response(str(exc), status=status.HTTP_401_UNAUTHORIZED)

        return success_response(token=token, user=UserSerializer(user).data)


class MeView(_AuthView):
    """GET /api/v1/auth/me/"""

    permission_classes = [IsAuthenticated]

    def get(self, request: Request) -> Response:
        try:
            user = self._service.get_profile(str(request.user.pk))
        except UserNotFound:
            return error_response("User not found.", status=status.HTTP_404_NOT_FOUND)
        return success_response(user=UserSerializer(user).data)
