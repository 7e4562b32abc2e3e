from typing import Any

from fastapi import APIRouter, Depends, status

from blog_api.deps import json_body, post_service
from blog_api.models.response import PublicBlogPost
from blog_api.schemas.post import (
    CreatePost,
    UpdatePost,
    check_matching_ids,
    pick_fields,
    require_fields,
)
from blog_api.services.post_service import PostService

router = APIRouter()


@router.get("", status_code=status.HTTP_200_OK)
def get_posts(service: PostService = Depends(post_service)) -> list[PublicBlogPost]:
    return service.get_posts()


@router.get("/{post_id}", status_code=status.HTTP_200_OK)
def get_post(
    post_id: str, service: PostService = Depends(post_service)
) -> PublicBlogPost:
    return service.get_post(post_id)


@router.post("", status_code=status.HTTP_201_CREATED)
def create_post(
    body: dict[str, Any] = Depends(json_body),
    service: PostService = Depends(post_service),
) -> PublicBlogPost:
    require_fields(body)
    return service.create_post(CreatePost.model_validate(body))


@router.put("/{post_id}", status_code=status.HTTP_204_NO_CONTENT)
def update_post(
    post_id: str,
    body: dict[str, Any] = Depends(json_body),
    service: PostService = Depends(post_service),
):
    check_matching_ids(post_id, body)
    service.update_post(post_id, UpdatePost.model_validate(pick_fields(body)))


@router.delete("/{post_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_post(post_id: str, service: PostService = Depends(post_service)):
    service.delete_post(post_id)
