"""
lists_backend.errors

Application error taxonomy shared by the auth, repository and service layers.

Responsibilities:
- Define the error kinds callers can rely on (bad request, unauthorized,
  forbidden, not found, unexpected).
- Carry the lower-level cause for logging without exposing it to clients.
"""

from __future__ import annotations


class AppError(Exception):
    """
    Base class for errors that the API layer knows how to render.

    `msg` is safe to show to a client; `cause` is for logs only.
    """

    status_code: int = 500

    def __init__(self, msg: str, cause: BaseException | None = None) -> None:
        super().__init__(msg)
        self.msg = msg
        self.cause = cause

    def __str__(self) -> str:
        return self.msg


class BadRequestError(AppError):
    status_code = 400


class UnauthorizedError(AppError):
    status_code = 401


class ForbiddenError(AppError):
    status_code = 403


class NotFoundError(AppError):
    status_code = 404

    def __init__(self, id: str, model: str) -> None:
        super().__init__(f'{model} with id "{id}" not found')
        self.id = id
        self.model = model


class UnexpectedError(AppError):
    status_code = 500

    def __init__(self, msg: str, cause: BaseException | None) -> None:
        super().__init__(msg, cause)


def invalid_id_error(id: str) -> BadRequestError:
    return BadRequestError(f'"{id}" is not a valid id')


# --- Module Notes -----------------------------------------------------------
# Status codes are attached to the classes so the single exception handler in
# `api.errors` stays a lookup, not a chain of isinstance checks.
