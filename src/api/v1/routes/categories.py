"""Category API routes."""

from uuid import UUID

from fastapi import APIRouter, Depends, Request, status

from api.dependencies.auth import CurrentUser
from api.v1.dependencies import get_category_service
from api.v1.schemas.category import (
    CategoryCreate,
    CategoryDetailResponse,
    CategoryListResponse,
    CategoryResponse,
    CategoryUpdate,
)
from core.rate_limit import READ_LIMIT, WRITE_LIMIT, limiter
from domain.services.category_service import CategoryService

router = APIRouter(prefix="/categories", tags=["categories"])


@router.get(
    "",
    response_model=CategoryListResponse,
    summary="List categories",
)
@limiter.limit(READ_LIMIT)  # type: ignore[untyped-decorator]
async def list_categories(
    request: Request,
    user: CurrentUser,
    service: CategoryService = Depends(get_category_service),
) -> CategoryListResponse:
    """Get the user's categories in the order they were created."""
    categories = await service.get_all_for_user(user.id)
    return CategoryListResponse(
        data=[CategoryResponse.model_validate(category) for category in categories]
    )


@router.post(
    "",
    response_model=CategoryDetailResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a category",
    responses={
        201: {"description": "Category created successfully"},
        422: {"description": "Unknown icon or color"},
    },
)
@limiter.limit(WRITE_LIMIT)  # type: ignore[untyped-decorator]
async def create_category(
    request: Request,
    body: CategoryCreate,
    user: CurrentUser,
    service: CategoryService = Depends(get_category_service),
) -> CategoryDetailResponse:
    """Create a category from the fixed icon library and color palette."""
    category = await service.create(
        user_id=user.id,
        name=body.name,
        icon=body.icon,
        color=body.color,
    )
    return CategoryDetailResponse(data=CategoryResponse.model_validate(category))


@router.post(
    "/defaults",
    response_model=CategoryListResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Seed default categories",
    responses={
        201: {"description": "Default categories created"},
        409: {"description": "The user already has categories"},
    },
)
@limiter.limit(WRITE_LIMIT)  # type: ignore[untyped-decorator]
async def seed_default_categories(
    request: Request,
    user: CurrentUser,
    service: CategoryService = Depends(get_category_service),
) -> CategoryListResponse:
    """Create the starter set (Work, Family, Health, Ideas, Personal, Mood)."""
    categories = await service.seed_defaults(user.id)
    return CategoryListResponse(
        data=[CategoryResponse.model_validate(category) for category in categories]
    )


@router.patch(
    "/{category_id}",
    response_model=CategoryDetailResponse,
    summary="Update a category",
    responses={
        200: {"description": "Category updated successfully"},
        404: {"description": "Category not found"},
    },
)
@limiter.limit(WRITE_LIMIT)  # type: ignore[untyped-decorator]
async def update_category(
    request: Request,
    category_id: UUID,
    body: CategoryUpdate,
    user: CurrentUser,
    service: CategoryService = Depends(get_category_service),
) -> CategoryDetailResponse:
    """Rename a category or change its icon or color."""
    category = await service.update(
        category_id=category_id,
        user_id=user.id,
        name=body.name,
        icon=body.icon,
        color=body.color,
    )
    return CategoryDetailResponse(data=CategoryResponse.model_validate(category))


@router.delete(
    "/{category_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete a category",
    responses={
        204: {"description": "Category and its entries deleted"},
        404: {"description": "Category not found"},
    },
)
@limiter.limit(WRITE_LIMIT)  # type: ignore[untyped-decorator]
async def delete_category(
    request: Request,
    category_id: UUID,
    user: CurrentUser,
    service: CategoryService = Depends(get_category_service),
) -> None:
    """Delete a category. Every entry filed under it is deleted as well."""
    await service.delete(category_id, user.id)
    return None
