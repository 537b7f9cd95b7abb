"""Record API: thin route delegating to RecordService."""

from typing import Annotated

from fastapi import APIRouter, Depends, Request

from family_circles.api.fc.dependencies import (
    TreeContext,
    get_record_service,
    require_record_kind,
)
from family_circles.application.dtos.record import (
    IndividualProjection,
    RecordProjection,
)
from family_circles.application.use_cases.records import RecordService
from family_circles.schemas.error import ErrorResponse
from family_circles.schemas.record import FamilyResponse, IndividualResponse

router = APIRouter()


def _optional_list(values: tuple[str, ...] | None) -> list[str] | None:
    return list(values) if values is not None else None


def _to_response(record: RecordProjection) -> IndividualResponse | FamilyResponse:
    """Map a projection DTO to its API schema."""
    if isinstance(record, IndividualProjection):
        return IndividualResponse(
            id=record.id,
            page=record.page,
            name=record.name,
            avatar=record.avatar,
            family=record.family,
            families=_optional_list(record.families),
        )
    return FamilyResponse(
        id=record.id,
        name=record.name,
        children=_optional_list(record.children),
        father=record.father,
        mother=record.mother,
    )


@router.get(
    "/{tree}/object/{xref}",
    response_model=IndividualResponse | FamilyResponse,
    response_model_exclude_none=True,
    # Route dependencies run before the endpoint's own, so before the tree lookup.
    dependencies=[Depends(require_record_kind)],
    responses={
        400: {"model": ErrorResponse, "description": "Identifier is not an individual or family"},
        403: {"model": ErrorResponse, "description": "Record is private"},
        404: {"model": ErrorResponse, "description": "Unknown tree or record"},
    },
)
async def get_record(
    xref: str,
    request: Request,
    current_tree: TreeContext,
    record_svc: Annotated[RecordService, Depends(get_record_service)],
) -> IndividualResponse | FamilyResponse:
    """Get an individual ('I...') or family ('F...') by xref. Absent links are omitted."""
    record = await record_svc.get_record(
        current_tree,
        xref,
        url=str(request.url),
        query_params=request.query_params.multi_items(),
    )
    return _to_response(record)
