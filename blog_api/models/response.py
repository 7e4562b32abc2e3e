from blog_api.models.camel_model import CamelModel


class ErrorResponse(CamelModel):
    message: str


class PublicBlogPost(CamelModel):
    id: str
    title: str
    content: str | None = None
    author: str
    created: str
