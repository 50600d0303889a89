"""Routes for uploading OFX statements and viewing their transactions."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from fastapi import APIRouter, File, Request, UploadFile
from fastapi.responses import HTMLResponse, JSONResponse
from fastapi.templating import Jinja2Templates

from expense_analyzer.core.config import settings
from expense_analyzer.ingestion.ofx import OfxParseResult, parse_ofx
from expense_analyzer.ingestion.parsers.ofx import decode_statement_bytes
from expense_analyzer.services.summary import summarize_by_account

logger = logging.getLogger(__name__)

router = APIRouter(tags=["upload"])

BASE_DIR = Path(__file__).resolve().parent.parent
templates = Jinja2Templates(directory=str(BASE_DIR / "templates"))

NOT_OFX_ERROR = "Error: not an OFX file."
TOO_LARGE_ERROR = "Error: file is too large."


class UploadRejected(Exception):
    """Upload refused before parsing."""


async def _read_upload(file: Optional[UploadFile]) -> str:
    """Validate the uploaded file and return its decoded text."""
    filename = file.filename if file is not None else None
    logger.info("Upload received. File present: %s, FileName: %s", file is not None, filename)

    if file is None or not filename or Path(filename).suffix.lower() not in settings.ALLOWED_EXTENSIONS:
        logger.warning("Upload failed: not an OFX file or file missing.")
        raise UploadRejected(NOT_OFX_ERROR)

    data = await file.read(settings.MAX_UPLOAD_BYTES + 1)
    if len(data) > settings.MAX_UPLOAD_BYTES:
        logger.warning("Upload failed: %s exceeds %d bytes", filename, settings.MAX_UPLOAD_BYTES)
        raise UploadRejected(TOO_LARGE_ERROR)

    logger.info("OFX file read. Length: %d", len(data))
    return decode_statement_bytes(data)


def _parse(text: str) -> OfxParseResult:
    result = parse_ofx(text)
    if result.success:
        logger.info("OFX parsing succeeded. Transactions parsed: %d", result.record_count)
    else:
        logger.error("OFX parsing failed: %s", result.error)
    return result


@router.get("/", response_class=HTMLResponse)
async def upload_form(request: Request):
    """Show the upload form."""
    return templates.TemplateResponse(
        request,
        "upload.html",
        {"error": None},
    )


@router.post("/upload", response_class=HTMLResponse)
async def upload_ofx(request: Request, file: Optional[UploadFile] = File(None)):
    """Parse an uploaded OFX file and render its transactions."""
    try:
        text = await _read_upload(file)
    except UploadRejected as exc:
        return templates.TemplateResponse(
            request, "upload.html", {"error": str(exc)}, status_code=400
        )

    result = _parse(text)
    if not result.success:
        return templates.TemplateResponse(
            request, "upload.html", {"error": result.error or "Unknown error."}, status_code=400
        )

    return templates.TemplateResponse(
        request,
        "transactions.html",
        {
            "transactions": result.transactions,
            "summaries": summarize_by_account(result.transactions),
            "warnings": result.warnings,
        },
    )


@router.post("/api/parse")
async def parse_api(file: Optional[UploadFile] = File(None)) -> JSONResponse:
    """Parse an uploaded OFX file and return the result as JSON."""
    try:
        text = await _read_upload(file)
    except UploadRejected as exc:
        return JSONResponse(OfxParseResult.failure(str(exc)).to_dict(), status_code=400)

    result = _parse(text)
    return JSONResponse(result.to_dict(), status_code=200 if result.success else 400)
