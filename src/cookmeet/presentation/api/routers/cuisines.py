"""Cuisine router for the current user's recipe bookmarks."""

import logging
from typing import Annotated, Optional

from fastapi import APIRouter, File, Form, Response, UploadFile, status

from cookmeet.application.commands import (
    AddCuisineCommand,
    DeleteCuisineCommand,
    SetCuisineCommand,
)
from cookmeet.application.queries import GetCuisineQuery, ListCuisinesQuery
from cookmeet.presentation.api.dependencies import RepoFactory, SettingsDep, StorageDep
from cookmeet.presentation.api.routers._forms import (
    blank_to_none,
    parse_cuisine_id,
    read_icon,
)
from cookmeet.presentation.api.schemas import CuisineResponse

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("", summary="List cuisines")
async def list_cuisines(factory: RepoFactory) -> list[CuisineResponse]:
    """All of the current user's cuisines, oldest first."""
    query = ListCuisinesQuery.from_factory(factory)
    cuisines = await query.execute()
    return [CuisineResponse.from_domain(c) for c in cuisines]


@router.get(
    "/{cuisine_id}",
    summary="Get a cuisine",
    responses={
        400: {"description": "Invalid cuisine ID"},
        404: {"description": "Cuisine not found"},
    },
)
async def get_cuisine(cuisine_id: str, factory: RepoFactory) -> CuisineResponse:
    query = GetCuisineQuery.from_factory(factory)
    cuisine = await query.execute(parse_cuisine_id(cuisine_id))
    return CuisineResponse.from_domain(cuisine)


@router.post(
    "",
    summary="Add a cuisine",
    responses={
        400: {"description": "Title missing or invalid icon"},
    },
)
async def add_cuisine(  # NOQA: PLR0913
    factory: RepoFactory,
    storage: StorageDep,
    settings: SettingsDep,
    title: Annotated[str, Form()] = "",
    url: Annotated[str, Form()] = "",
    comment: Annotated[str, Form()] = "",
    icon: Annotated[Optional[UploadFile], File()] = None,
) -> CuisineResponse:
    """
    Create a cuisine bookmark.

    An optional icon image is uploaded under a random key namespaced by
    the owner before the row is inserted.
    """
    command = AddCuisineCommand.from_factory(
        factory,
        storage=storage,
        bucket=settings.storage_bucket,
    )

    try:
        cuisine = await command.execute(
            title=title,
            url=url,
            comment=comment,
            icon=await read_icon(icon),
        )
    except Exception:
        await factory.session.rollback()
        # Let the global exception handler process domain exceptions
        raise

    try:
        await factory.session.commit()
    except Exception:
        await factory.session.rollback()
        await command.discard_upload()
        raise

    return CuisineResponse.from_domain(cuisine)


@router.put(
    "/{cuisine_id}",
    summary="Update a cuisine",
    responses={
        400: {"description": "Invalid cuisine ID or empty title"},
        404: {"description": "Cuisine not found"},
    },
)
async def set_cuisine(  # NOQA: PLR0913
    cuisine_id: str,
    factory: RepoFactory,
    storage: StorageDep,
    settings: SettingsDep,
    title: Annotated[Optional[str], Form()] = None,
    url: Annotated[Optional[str], Form()] = None,
    icon: Annotated[Optional[UploadFile], File()] = None,
) -> CuisineResponse:
    """Overwrite only the supplied fields; empty form fields are ignored."""
    command = SetCuisineCommand.from_factory(
        factory,
        storage=storage,
        bucket=settings.storage_bucket,
    )

    try:
        cuisine = await command.execute(
            parse_cuisine_id(cuisine_id),
            title=blank_to_none(title),
            url=blank_to_none(url),
            icon=await read_icon(icon),
        )
        await factory.session.commit()
    except Exception:
        await factory.session.rollback()
        raise

    return CuisineResponse.from_domain(cuisine)


@router.delete(
    "/{cuisine_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete a cuisine",
    responses={
        204: {"description": "Cuisine deleted"},
        400: {"description": "Invalid cuisine ID"},
        403: {"description": "Cuisine belongs to another user"},
        404: {"description": "Cuisine not found"},
    },
)
async def delete_cuisine(
    cuisine_id: str,
    factory: RepoFactory,
    storage: StorageDep,
    settings: SettingsDep,
) -> Response:
    """
    Delete a cuisine permanently.

    The icon blob is removed best-effort; a storage failure does not
    keep the row alive.
    """
    command = DeleteCuisineCommand.from_factory(
        factory,
        storage=storage,
        bucket=settings.storage_bucket,
    )

    try:
        await command.execute(parse_cuisine_id(cuisine_id))
        await factory.session.commit()
    except Exception:
        await factory.session.rollback()
        raise

    logger.info("Cuisine deleted: %s", cuisine_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
