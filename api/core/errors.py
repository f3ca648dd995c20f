"""
Domain errors mapped to HTTP responses.

Every error carries the status code and the user-facing `msg` that ends up in
the `{"msg": ...}` response body. Subclasses set both.
"""

from __future__ import annotations


class ApiError(RuntimeError):
    status_code: int
    default_msg: str

    def __init__(self, msg: str | None = None) -> None:
        self.msg = msg or self.default_msg
        super().__init__(self.msg)

    def to_response(self) -> dict[str, str]:
        return {"msg": self.msg}


class InvalidIdentifier(ApiError):
    status_code = 400
    default_msg = "bad request: invalid id!"


class MissingField(ApiError):
    status_code = 400
    default_msg = "unable to update: information missing!"


class InvalidType(ApiError):
    status_code = 400
    default_msg = "unable to update: incorrect data type!"


class NotFound(ApiError):
    status_code = 404
    default_msg = "article not found!"
