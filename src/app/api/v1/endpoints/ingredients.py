"""Ingredient endpoints."""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Path, Query, Response, status

from app.api.dependencies import AppSettings, cap_page_size, get_ingredient_service
from app.auth.dependencies import CurrentUser, RequirePermissions
from app.auth.permissions import Permission
from app.schemas import CreateEntityResponse, CreateIngredientRequest, IngredientResponse
from app.services.ingredient import (
    IngredientAlreadyExistsError,
    IngredientInUseError,
    IngredientNotFoundError,
    IngredientService,
)


router = APIRouter(prefix="/ingredient", tags=["ingredients"])

IngredientServiceDep = Annotated[IngredientService, Depends(get_ingredient_service)]


@router.get(
    "/page/{page}/size/{size}",
    response_model=list[IngredientResponse],
    summary="List ingredients",
)
def list_ingredients(
    page: Annotated[int, Path(ge=0)],
    size: Annotated[int, Path(gt=0)],
    service: IngredientServiceDep,
    settings: AppSettings,
    _user: Annotated[
        CurrentUser, Depends(RequirePermissions(Permission.INGREDIENT_READ))
    ],
) -> list[IngredientResponse]:
    return service.list_ingredients(page, cap_page_size(size, settings))


@router.get(
    "/{ingredient_id}",
    response_model=IngredientResponse,
    summary="Get an ingredient",
    responses={404: {"description": "Ingredient not found"}},
)
def get_ingredient(
    ingredient_id: Annotated[int, Path(gt=0)],
    service: IngredientServiceDep,
    _user: Annotated[
        CurrentUser, Depends(RequirePermissions(Permission.INGREDIENT_READ))
    ],
) -> IngredientResponse:
    try:
        return service.get_ingredient(ingredient_id)
    except IngredientNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from None


@router.post(
    "",
    response_model=CreateEntityResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create an ingredient",
    responses={409: {"description": "Ingredient name already exists"}},
)
def create_ingredient(
    request: CreateIngredientRequest,
    service: IngredientServiceDep,
    _user: Annotated[
        CurrentUser, Depends(RequirePermissions(Permission.INGREDIENT_CREATE))
    ],
) -> CreateEntityResponse:
    try:
        ingredient_id = service.create_ingredient(request)
    except IngredientAlreadyExistsError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e)) from None
    return CreateEntityResponse(id=ingredient_id)


@router.delete(
    "",
    status_code=status.HTTP_200_OK,
    response_class=Response,
    summary="Delete an ingredient",
    responses={
        400: {"description": "Ingredient is used by a recipe"},
        404: {"description": "Ingredient not found"},
    },
)
def delete_ingredient(
    ingredient_id: Annotated[int, Query(alias="id", gt=0)],
    service: IngredientServiceDep,
    _user: Annotated[
        CurrentUser, Depends(RequirePermissions(Permission.INGREDIENT_DELETE))
    ],
) -> Response:
    try:
        service.delete_ingredient(ingredient_id)
    except IngredientNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from None
    except IngredientInUseError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from None
    return Response(status_code=status.HTTP_200_OK)
