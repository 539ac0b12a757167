"""Post API routes."""

from typing import Annotated

from fastapi import Depends, File, Form, UploadFile, status

from sharehub.core.auth.dependencies import CurrentActor
from sharehub.core.constants import MAX_CAPTION_LENGTH
from sharehub.core.utils.parsing import to_boolean
from sharehub.modules.resources.models import Post
from sharehub.modules.resources.routes import build_resource_router, render
from sharehub.modules.resources.schemas import PostResponse, ResourceResponse
from sharehub.modules.resources.services import ResourceService, service_provider


provide_posts = service_provider(Post, "post")

PostSvc = Annotated[ResourceService[Post], Depends(provide_posts)]

router = build_resource_router(
    prefix="posts",
    label="post",
    provider=provide_posts,
    response_model=PostResponse,
)


@router.post(
    "",
    response_model=PostResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Upload a post",
)
async def create_post(
    actor: CurrentActor,
    service: PostSvc,
    file: Annotated[UploadFile, File()],
    category_id: Annotated[str, Form()],
    caption: Annotated[str | None, Form(max_length=MAX_CAPTION_LENGTH)] = None,
    is_public: Annotated[str | None, Form()] = None,
) -> ResourceResponse:
    post = Post(caption=caption, is_public=to_boolean(is_public))
    post = await service.create(actor, post, file, category_id)
    return await render(service, PostResponse, post)
