import pendulum
from pydantic import Field, constr

from blog_api.models.camel_model import CamelModel
from blog_api.models.response import PublicBlogPost


def utc_now() -> str:
    return pendulum.now("UTC").to_iso8601_string()


class Author(CamelModel):
    first_name: str | None = None
    last_name: str | None = None


class BlogPost(CamelModel):
    id: str
    title: constr(min_length=1)
    content: str | None = None
    author: Author = Field(default_factory=Author)
    created: str = Field(default_factory=utc_now)

    @property
    def author_name(self) -> str:
        """Display name of the embedded author, never stored."""
        first_name = self.author.first_name or ""
        last_name = self.author.last_name or ""
        return f"{first_name} {last_name}".strip()

    def serialize(self) -> PublicBlogPost:
        """Public projection of the post, with the author flattened to a name."""
        return PublicBlogPost(
            id=self.id,
            title=self.title,
            content=self.content,
            author=self.author_name,
            created=self.created,
        )
