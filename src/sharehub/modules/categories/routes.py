"""Category API routes."""

from fastapi import APIRouter, status

from sharehub.core.auth.dependencies import CurrentAdmin
from sharehub.modules.categories.schemas import CategoryCreate, CategoryResponse
from sharehub.modules.categories.services import CategorySvc


router = APIRouter(prefix="/categories", tags=["categories"])


@router.get("", response_model=list[CategoryResponse], summary="List categories")
async def list_categories(service: CategorySvc) -> list[CategoryResponse]:
    categories = await service.list_categories()
    return [CategoryResponse.model_validate(category) for category in categories]


@router.post(
    "",
    response_model=CategoryResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a category",
)
async def create_category(
    data: CategoryCreate,
    _admin: CurrentAdmin,
    service: CategorySvc,
) -> CategoryResponse:
    category = await service.create_category(data.name)
    return CategoryResponse.model_validate(category)


@router.delete(
    "/{category_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete an unused category",
)
async def delete_category(
    category_id: str,
    _admin: CurrentAdmin,
    service: CategorySvc,
) -> None:
    await service.delete_category(category_id)
