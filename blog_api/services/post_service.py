from typing import Any

from aws_lambda_powertools import Logger
from boto3.dynamodb.conditions import Attr
from botocore.exceptions import ClientError

from blog_api.exceptions import PostNotFoundException
from blog_api.models.post import BlogPost
from blog_api.models.response import PublicBlogPost
from blog_api.repositories.post_repository import PostRepository
from blog_api.schemas.post import CreatePost, UpdatePost

CONDITIONAL_CHECK_FAILED = "ConditionalCheckFailedException"


class FilterExpressions:
    EXISTS = Attr("id").exists()


class PostService:
    ERROR_POST_NOT_FOUND = "The requested post was not found"

    def __init__(self, repository: PostRepository):
        self._logger = Logger(utc=True)
        self._repo = repository

    def get_posts(self) -> list[PublicBlogPost]:
        return [BlogPost(**item).serialize() for item in self._repo.get_all_posts()]

    def get_post(self, post_uuid: str) -> PublicBlogPost:
        item = self._repo.get_post_by_uuid(post_uuid)
        if item is None:
            self._logger.warning(f"Post not found: {post_uuid=}")
            raise PostNotFoundException(self.ERROR_POST_NOT_FOUND)
        return BlogPost(**item).serialize()

    def create_post(self, create_post: CreatePost) -> PublicBlogPost:
        item = self._repo.create_post(create_post.model_dump(by_alias=True))
        post = BlogPost(**item)
        self._logger.info(f"Post created: {post.id=}")
        return post.serialize()

    def update_post(self, post_uuid: str, update_post: UpdatePost):
        data: dict[str, Any] = update_post.model_dump(exclude_unset=True, by_alias=True)
        if not data:
            # nothing to set, only confirm the post exists
            if self._repo.get_post_by_uuid(post_uuid) is None:
                self._logger.warning(f"Post not found: {post_uuid=}")
                raise PostNotFoundException(self.ERROR_POST_NOT_FOUND)
            return
        try:
            self._repo.update_post(post_uuid, data, FilterExpressions.EXISTS)
        except ClientError as exc:
            if exc.response["Error"]["Code"] != CONDITIONAL_CHECK_FAILED:
                raise
            self._logger.warning(f"Post not found: {post_uuid=}")
            raise PostNotFoundException(self.ERROR_POST_NOT_FOUND) from exc
        self._logger.info(f"Post updated: {post_uuid=} fields={list(data)}")

    def delete_post(self, post_uuid: str):
        self._repo.delete_post(post_uuid)
        self._logger.info(f"Post deleted: {post_uuid=}")
