"""Training API routes."""

from typing import Annotated

from fastapi import Depends, File, Form, UploadFile, status

from sharehub.core.auth.dependencies import CurrentActor
from sharehub.core.constants import MAX_NAME_LENGTH, MAX_URL_LENGTH
from sharehub.core.errors import ValidationError
from sharehub.core.utils.parsing import to_boolean
from sharehub.modules.resources.models import Training, TrainingLink
from sharehub.modules.resources.routes import build_resource_router, render
from sharehub.modules.resources.schemas import ResourceResponse, TrainingResponse
from sharehub.modules.resources.services import ResourceService, service_provider


provide_trainings = service_provider(Training, "training")

TrainingSvc = Annotated[ResourceService[Training], Depends(provide_trainings)]

router = build_resource_router(
    prefix="trainings",
    label="training",
    provider=provide_trainings,
    response_model=TrainingResponse,
)


def _clean_links(links: list[str] | None) -> list[str]:
    """Drop blank entries; reject over-long URLs."""
    cleaned = [link.strip() for link in links or [] if link.strip()]
    too_long = [link for link in cleaned if len(link) > MAX_URL_LENGTH]
    if too_long:
        raise ValidationError(
            "Link is too long",
            errors=[
                {"field": "links", "message": f"URLs are limited to {MAX_URL_LENGTH} characters"}
            ],
        )
    return cleaned


@router.post(
    "",
    response_model=TrainingResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Upload a training",
    description="Title, description and category are required; ``links`` may repeat.",
)
async def create_training(
    actor: CurrentActor,
    service: TrainingSvc,
    file: Annotated[UploadFile, File()],
    title: Annotated[str, Form(min_length=1, max_length=MAX_NAME_LENGTH)],
    description: Annotated[str, Form(min_length=1)],
    category_id: Annotated[str, Form()],
    links: Annotated[list[str] | None, Form()] = None,
    is_public: Annotated[str | None, Form()] = None,
) -> ResourceResponse:
    training = Training(
        title=title,
        description=description,
        is_public=to_boolean(is_public),
        links=[TrainingLink(url=url) for url in _clean_links(links)],
    )
    training = await service.create(actor, training, file, category_id)
    return await render(service, TrainingResponse, training)
