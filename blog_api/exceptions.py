from typing import Any

from fastapi import HTTPException, status
from fastapi.encoders import jsonable_encoder
from fastapi.responses import UJSONResponse

from blog_api.models.response import ErrorResponse

INTERNAL_SERVER_ERROR = "internal server error"
NOT_FOUND = "Not Found"


def error_response(status_code: int, message: str) -> UJSONResponse:
    return UJSONResponse(
        content=jsonable_encoder(ErrorResponse(message=message)),
        status_code=status_code,
    )


class IdMismatchException(HTTPException):
    def __init__(self, detail: Any = None) -> None:
        super().__init__(status.HTTP_400_BAD_REQUEST, detail=detail)


class MalformedBodyException(HTTPException):
    def __init__(self, detail: Any = None) -> None:
        super().__init__(status.HTTP_400_BAD_REQUEST, detail=detail)


class MissingFieldException(HTTPException):
    def __init__(self, field: str) -> None:
        self.field = field
        super().__init__(
            status.HTTP_400_BAD_REQUEST,
            detail=f"Missing `{field}` in request body",
        )


class PostNotFoundException(HTTPException):
    def __init__(self, detail: Any = None) -> None:
        super().__init__(status.HTTP_404_NOT_FOUND, detail=detail)
