"""Import API endpoints for bulk task and risk uploads."""

from fastapi import APIRouter, HTTPException
from pydantic import Field

from src.imports import (
    ImportFormat,
    ImportFormatError,
    ImportResult,
    import_risks,
    import_tasks,
    parse_records,
)
from src.models import Activity, RecordModel, Risk, Task

router = APIRouter(prefix="/imports", tags=["imports"])


class ImportRequest(RecordModel):
    """Request body carrying an import file's text."""

    format: ImportFormat = Field(description="json or csv")
    content: str = Field(description="Raw file contents")
    activities: list[Activity] = Field(
        default_factory=list,
        description="Existing project activities rows may reference",
    )


def _parse(body: ImportRequest) -> list[dict]:
    try:
        return parse_records(body.content, body.format)
    except ImportFormatError as e:
        raise HTTPException(status_code=400, detail=str(e)) from e


@router.post("/tasks", response_model=ImportResult[Task])
async def import_task_file(body: ImportRequest) -> ImportResult[Task]:
    """Validate an uploaded task file.

    Returns accepted tasks plus one error message per rejected row.
    """
    return import_tasks(_parse(body), body.activities)


@router.post("/risks", response_model=ImportResult[Risk])
async def import_risk_file(body: ImportRequest) -> ImportResult[Risk]:
    """Validate an uploaded risk file.

    Returns accepted risks plus one error message per rejected row.
    """
    return import_risks(_parse(body), body.activities)
