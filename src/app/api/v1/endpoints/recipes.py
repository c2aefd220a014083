"""Recipe endpoints.

CRUD operations on recipes plus the criteria search.
"""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Path, Query, Response, status

from app.api.dependencies import AppSettings, cap_page_size, get_recipe_service
from app.auth.dependencies import CurrentUser, RequirePermissions
from app.auth.permissions import Permission
from app.observability.logging import get_logger
from app.schemas import (
    CreateEntityResponse,
    CreateRecipeRequest,
    RecipeResponse,
    RecipeSearchRequest,
    UpdateRecipeRequest,
)
from app.search.exceptions import CriteriaNotFoundError, SearchExecutionError
from app.services.ingredient import IngredientNotFoundError
from app.services.recipe import RecipeNotFoundError, RecipeService


logger = get_logger(__name__)

router = APIRouter(prefix="/recipe", tags=["recipes"])

RecipeServiceDep = Annotated[RecipeService, Depends(get_recipe_service)]


@router.get(
    "/page/{page}/size/{size}",
    response_model=list[RecipeResponse],
    summary="List recipes",
)
def list_recipes(
    page: Annotated[int, Path(ge=0, description="Zero-based page index")],
    size: Annotated[int, Path(gt=0, description="Page size")],
    service: RecipeServiceDep,
    settings: AppSettings,
    _user: Annotated[CurrentUser, Depends(RequirePermissions(Permission.RECIPE_READ))],
) -> list[RecipeResponse]:
    return service.list_recipes(page, cap_page_size(size, settings))


@router.get(
    "/{recipe_id}",
    response_model=RecipeResponse,
    summary="Get a recipe",
    responses={404: {"description": "Recipe not found"}},
)
def get_recipe(
    recipe_id: Annotated[int, Path(gt=0)],
    service: RecipeServiceDep,
    _user: Annotated[CurrentUser, Depends(RequirePermissions(Permission.RECIPE_READ))],
) -> RecipeResponse:
    try:
        return service.get_recipe(recipe_id)
    except RecipeNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from None


@router.post(
    "",
    response_model=CreateEntityResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a recipe",
    responses={404: {"description": "Ingredient not found"}},
)
def create_recipe(
    request: CreateRecipeRequest,
    service: RecipeServiceDep,
    _user: Annotated[
        CurrentUser, Depends(RequirePermissions(Permission.RECIPE_CREATE))
    ],
) -> CreateEntityResponse:
    try:
        recipe_id = service.create_recipe(request)
    except IngredientNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from None
    return CreateEntityResponse(id=recipe_id)


@router.patch(
    "",
    status_code=status.HTTP_200_OK,
    response_class=Response,
    summary="Update a recipe",
    responses={404: {"description": "Recipe or ingredient not found"}},
)
def update_recipe(
    request: UpdateRecipeRequest,
    service: RecipeServiceDep,
    _user: Annotated[
        CurrentUser, Depends(RequirePermissions(Permission.RECIPE_UPDATE))
    ],
) -> Response:
    try:
        service.update_recipe(request)
    except (RecipeNotFoundError, IngredientNotFoundError) as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from None
    return Response(status_code=status.HTTP_200_OK)


@router.delete(
    "",
    status_code=status.HTTP_200_OK,
    response_class=Response,
    summary="Delete a recipe",
    responses={404: {"description": "Recipe not found"}},
)
def delete_recipe(
    recipe_id: Annotated[int, Query(alias="id", gt=0)],
    service: RecipeServiceDep,
    _user: Annotated[
        CurrentUser, Depends(RequirePermissions(Permission.RECIPE_DELETE))
    ],
) -> Response:
    try:
        service.delete_recipe(recipe_id)
    except RecipeNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from None
    return Response(status_code=status.HTTP_200_OK)


@router.post(
    "/search",
    response_model=list[RecipeResponse],
    summary="Search recipes",
    description=(
        "Filter recipes by criteria combined with `dataOption` "
        "(`all` = AND, `any` = OR). Results are sorted by name."
    ),
    responses={404: {"description": "No usable criteria"}},
)
def search_recipes(
    request: RecipeSearchRequest,
    service: RecipeServiceDep,
    settings: AppSettings,
    _user: Annotated[CurrentUser, Depends(RequirePermissions(Permission.RECIPE_READ))],
    page: Annotated[int, Query(ge=0)] = 0,
    size: Annotated[int, Query(gt=0)] = 10,
) -> list[RecipeResponse]:
    try:
        return service.search_recipes(request, page, cap_page_size(size, settings))
    except CriteriaNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from None
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from None
    except SearchExecutionError:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to search recipes",
        ) from None
