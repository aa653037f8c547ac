"""CSV import endpoints.

The request body is the raw file; the file name travels as a query
parameter because the classifier reads it.
"""

from __future__ import annotations

from fastapi import APIRouter, HTTPException, Query, Request

from bulkentry.core.exceptions import (
    AlreadyInProgressError,
    ColumnCountError,
    EmptyFileError,
    UploadRejectedError,
)
from bulkentry.engine.summary import summarize
from bulkentry.ingest.classifier import classify
from bulkentry.ingest.tokenizer import tokenize
from bulkentry.ingest.uploads import format_file_size, validate_upload

router = APIRouter(prefix="/imports", tags=["imports"])


async def _read_upload(request: Request, file_name: str) -> bytes:
    body = await request.body()
    try:
        validate_upload(file_name, len(body), request.app.state.settings.upload)
    except UploadRejectedError as exc:
        raise HTTPException(status_code=413 if exc.too_large else 415, detail=str(exc)) from exc
    return body


@router.post("")
async def create_import(request: Request, file_name: str = Query(..., min_length=1)) -> dict:
    """Process an uploaded file and return the run report."""
    body = await _read_upload(request, file_name)
    engine = request.app.state.engine
    try:
        report = await engine.process_file(file_name, body)
    except AlreadyInProgressError as exc:
        raise HTTPException(status_code=409, detail=str(exc)) from exc
    except (EmptyFileError, ColumnCountError) as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    return {"summary": summarize(report), "report": report.model_dump(mode="json")}


@router.post("/preview")
async def preview_import(request: Request, file_name: str = Query(..., min_length=1)) -> dict:
    """Detected kind and row count without submitting anything."""
    body = await _read_upload(request, file_name)
    processor = request.app.state.settings.processor
    try:
        parsed = tokenize(body, delimiter=processor.delimiter, lenient=processor.lenient_columns)
    except (EmptyFileError, ColumnCountError) as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    first = parsed.first_row
    return {
        "file_name": file_name,
        "file_size": format_file_size(len(body)),
        "kind": classify(file_name, first.fields if first is not None else None),
        "rows": len(parsed.rows),
        "header": list(parsed.header),
    }
