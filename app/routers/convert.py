from typing import List, Optional

from fastapi import APIRouter, File, HTTPException, Query, Response, UploadFile

from app.converter import render_batch, select_files
from app.settings import ALLOW_MULTIPLE

# --------------------------------------------------------------------
# Router setup
# --------------------------------------------------------------------
router = APIRouter(prefix="", tags=["convert"])


@router.post("/convert")
async def convert(
    files: Optional[List[UploadFile]] = File(None),
    allow_multiple: bool = Query(ALLOW_MULTIPLE, description="Convert every file, or only the first"),
) -> Response:
    """
    One-shot conversion of uploaded XML files.

    Accepts:
        multipart/form-data with one or more `files` parts.

    Behavior:
        * Every file is read, parsed and normalized concurrently.
        * A file that can't be read or isn't valid XML gets an `error`
          in its own slot; the other files are unaffected.
        * With allow_multiple=false only the first file is converted.

    Returns (pretty-printed, in upload order):
        [
          {"fileName": "a.xml", "content": {...}},
          {"fileName": "b.xml", "error": "Invalid XML"}
        ]
        or, if the batch itself fails:
        {"error": "Error processing files", "detail": "..."}
    """
    if not files:
        raise HTTPException(400, "No files uploaded")

    body = await render_batch(select_files(files, allow_multiple))
    return Response(content=body, media_type="application/json")
