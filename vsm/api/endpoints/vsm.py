import logging
from typing import List

from fastapi import APIRouter, HTTPException, Query, Request, Response

from vsm.core.config import MAX_DOCUMENTS, REPORT_FILENAME
from vsm.schemas.vsm import VSMRequest, VSMResult
from vsm.services.parser import collect_form_documents, validate_input
from vsm.services.search_engine import search
from vsm.services.utils import generate_formatted_output, sort_term_rows

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Vector Space Model"])

def run_vsm(query: str, documents: List[str], download: bool):
    error = validate_input(query, documents, MAX_DOCUMENTS)
    if error:
        raise HTTPException(status_code=400, detail=error)

    logger.info("VSM request with %d documents", len(documents))

    try:
        result = search(query, documents)
    except Exception as e:
        logger.exception("VSM calculation failed")
        raise HTTPException(status_code=500, detail=f"Internal server error: {str(e)}")

    # Display order only; vectors were built from the unsorted vocabulary
    result = result.model_copy(update={"term_rows": sort_term_rows(result.term_rows)})

    if download:
        file_name = f"{REPORT_FILENAME}.txt"
        return Response(
            content=generate_formatted_output(result),
            media_type="text/plain",
            headers={
                "Content-Disposition": f'attachment; filename="{file_name}"',
                "Content-Type": "text/plain; charset=utf-8",
            }
        )

    return result

@router.post("/vsm/", response_model=VSMResult)
async def calculate_vsm(
    body: VSMRequest,
    download: bool = Query(False),
):
    return run_vsm(body.query, body.documents, download)

@router.post("/vsm/form/", response_model=VSMResult)
async def calculate_vsm_form(
    request: Request,
    download: bool = Query(False),
):
    """Form variant taking query and document_1 .. document_N fields"""
    form = await request.form()
    fields = {key: value for key, value in form.items() if isinstance(value, str)}
    try:
        documents = collect_form_documents(fields, MAX_DOCUMENTS)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return run_vsm(fields.get("query", ""), documents, download)
