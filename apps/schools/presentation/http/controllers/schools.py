"""Schools Controller."""

from __future__ import annotations

from typing import Annotated, Any

from fastapi import APIRouter, Body, Depends, Query, status

from schools.application.nearby import ListSchoolsQuery
from schools.application.registry import AddSchoolCommand
from schools.presentation.http.schemas import (
    SchoolCreated,
    SchoolEntry,
    StoreErrorResponse,
    ValidationErrorResponse,
)
from schools.setup.dependencies import get_add_school_command, get_list_schools_query

router = APIRouter(tags=["schools"])

_ERROR_RESPONSES: dict[int | str, dict[str, Any]] = {
    status.HTTP_400_BAD_REQUEST: {"model": ValidationErrorResponse},
    status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": StoreErrorResponse},
}


@router.post(
    "/addSchool",
    response_model=SchoolCreated,
    status_code=status.HTTP_201_CREATED,
    responses=_ERROR_RESPONSES,
    summary="Add a school",
)
async def add_school(
    command: Annotated[AddSchoolCommand, Depends(get_add_school_command)],
    payload: Annotated[Any, Body()] = None,
) -> SchoolCreated:
    """학교를 등록합니다.

    본문 검증은 AddSchoolCommand 가 수행하므로 여기서는 임의의 JSON 을 받습니다.
    """
    school_id = await command.execute(payload)
    return SchoolCreated(school_id=school_id)


@router.get(
    "/listSchools",
    response_model=list[SchoolEntry],
    responses=_ERROR_RESPONSES,
    summary="List schools by distance",
)
async def list_schools(
    query: Annotated[ListSchoolsQuery, Depends(get_list_schools_query)],
    lat: str | None = Query(None, description="Latitude of the caller (-90..90)"),
    lon: str | None = Query(None, description="Longitude of the caller (-180..180)"),
) -> list[SchoolEntry]:
    """기준 좌표에서 가까운 순으로 학교 목록을 반환합니다."""
    params = {key: value for key, value in (("lat", lat), ("lon", lon)) if value is not None}
    entries = await query.execute(params)
    return [SchoolEntry.model_validate(e) for e in entries]
