from typing import Any

from pydantic import ConfigDict, Field, constr, field_validator

from blog_api.exceptions import IdMismatchException, MissingFieldException
from blog_api.models.camel_model import CamelModel
from blog_api.models.post import Author

REQUIRED_FIELDS = ("title", "content", "author")
UPDATABLE_FIELDS = ("title", "content", "author")


class CreatePost(CamelModel):
    title: constr(min_length=1)
    content: str | None
    author: Author = Field(default_factory=Author)

    model_config = ConfigDict(extra="ignore")


class UpdatePost(CamelModel):
    title: constr(min_length=1) | None = None
    content: str | None = None
    author: Author | None = None

    model_config = ConfigDict(extra="ignore")

    @field_validator("title", "author")
    @classmethod
    def not_null(cls, value: Any) -> Any:
        if value is None:
            raise ValueError("must not be null")
        return value


def require_fields(body: dict[str, Any], fields: tuple[str, ...] = REQUIRED_FIELDS):
    # order matters, the first missing key is the one reported
    for field in fields:
        if field not in body:
            raise MissingFieldException(field)


def check_matching_ids(path_id: str | None, body: dict[str, Any]):
    body_id = body.get("id")
    if not (path_id and body_id and path_id == body_id):
        raise IdMismatchException(
            f"Request path id ({path_id}) and request body id ({body_id}) must match"
        )


def pick_fields(
    body: dict[str, Any], fields: tuple[str, ...] = UPDATABLE_FIELDS
) -> dict[str, Any]:
    return {field: body[field] for field in fields if field in body}
