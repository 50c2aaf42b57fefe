"""
Category API router.

Thin router that delegates to CategoryController.
"""
from fastapi import APIRouter, Depends, Path
from fastapi.responses import JSONResponse
from typing import Annotated

from category_api.core.dependencies import get_category_controller
from category_api.controllers import CategoryController
from category_api.schemas import CategoryCreateRequest, CategoryUpdateRequest

router = APIRouter(prefix="/api/categories", tags=["Categories"])

# Ids must fit the signed 64-bit INTEGER column
CategoryId = Annotated[int, Path(ge=-(2**63), le=2**63 - 1)]


@router.post("")
async def create_category(
    request: CategoryCreateRequest,
    controller: CategoryController = Depends(get_category_controller)
) -> JSONResponse:
    """Create a new category."""
    return await controller.create(request)


@router.get("")
async def list_categories(
    controller: CategoryController = Depends(get_category_controller)
) -> JSONResponse:
    """List all categories."""
    return await controller.find_all()


@router.get("/{category_id}")
async def get_category(
    category_id: CategoryId,
    controller: CategoryController = Depends(get_category_controller)
) -> JSONResponse:
    """Get a specific category."""
    return await controller.find_by_id(category_id)


@router.put("/{category_id}")
async def update_category(
    category_id: CategoryId,
    request: CategoryUpdateRequest,
    controller: CategoryController = Depends(get_category_controller)
) -> JSONResponse:
    """Rename a category."""
    return await controller.update(category_id, request)


@router.delete("/{category_id}")
async def delete_category(
    category_id: CategoryId,
    controller: CategoryController = Depends(get_category_controller)
) -> JSONResponse:
    """Delete a category."""
    return await controller.delete(category_id)
