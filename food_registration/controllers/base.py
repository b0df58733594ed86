"""Shared plumbing for server-rendered controllers.

A controller is built per request. Its actions return Starlette responses:
a rendered template, a redirect, or a bare status. Expected failures (missing
records, rejected forms, ownership) never raise out of an action.
"""

from collections.abc import Mapping
from typing import Any, TypeVar

from fastapi import status
from fastapi.responses import PlainTextResponse, RedirectResponse, Response
from pydantic import BaseModel, ValidationError
from starlette.requests import Request

from food_registration.core.security import CurrentUser
from food_registration.core.temp_data import flash, pop_messages
from food_registration.core.templating import templates

FormType = TypeVar("FormType", bound=BaseModel)


class ModelState:
    """Field-level validation errors collected while binding a form."""

    def __init__(self) -> None:
        self.errors: dict[str, list[str]] = {}

    @property
    def is_valid(self) -> bool:
        return not self.errors

    def add_error(self, field: str, message: str) -> None:
        self.errors.setdefault(field, []).append(message)

    def add_validation_error(self, exc: ValidationError) -> None:
        for error in exc.errors():
            field = ".".join(str(part) for part in error["loc"]) or "__all__"
            message = error["msg"]
            # pydantic prefixes messages raised from validators
            if message.startswith("Value error, "):
                message = message[len("Value error, ") :]
            self.add_error(field, message)


class Controller:
    """Base class holding the request, the caller and response helpers."""

    def __init__(self, request: Request, current_user: CurrentUser | None = None):
        self.request = request
        self.current_user = current_user
        self.model_state = ModelState()

    @property
    def user_id(self) -> str | None:
        return self.current_user.email if self.current_user else None

    def bind(self, form_type: type[FormType], data: Mapping[str, Any]) -> FormType | None:
        """Validate submitted form data, recording failures in model_state."""
        try:
            form = form_type.model_validate(dict(data))
        except ValidationError as exc:
            self.model_state.add_validation_error(exc)
            return None
        return form if self.model_state.is_valid else None

    def view(
        self,
        template: str,
        context: dict[str, Any] | None = None,
        status_code: int = status.HTTP_200_OK,
    ) -> Response:
        ctx = {
            "current_user": self.current_user,
            "errors": self.model_state.errors,
            "messages": pop_messages(self.request),
            **(context or {}),
        }
        return templates.TemplateResponse(self.request, template, ctx, status_code=status_code)

    def flash(self, text: str, category: str = "success") -> None:
        flash(self.request, text, category)

    @staticmethod
    def redirect(url: str) -> RedirectResponse:
        # 303 so the browser follows a form POST with a GET
        return RedirectResponse(url, status_code=status.HTTP_303_SEE_OTHER)

    @staticmethod
    def not_found() -> Response:
        return Response(status_code=status.HTTP_404_NOT_FOUND)

    @staticmethod
    def forbidden() -> Response:
        return Response(status_code=status.HTTP_403_FORBIDDEN)

    @staticmethod
    def bad_request(message: str) -> PlainTextResponse:
        return PlainTextResponse(message, status_code=status.HTTP_400_BAD_REQUEST)
