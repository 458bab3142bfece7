from typing import List, Optional

from fastapi import APIRouter, Depends, File, HTTPException, Query, Request, Response, UploadFile

from app.models import CopyText, SessionOptions, SessionState
from app.session import ConverterSession, SessionRegistry

router = APIRouter(prefix="/sessions", tags=["sessions"])


def get_registry(request: Request) -> SessionRegistry:
    """Registry lives on app.state (created at startup)."""
    return request.app.state.sessions


def get_session(session_id: str, registry: SessionRegistry = Depends(get_registry)) -> ConverterSession:
    session = registry.get(session_id)
    if session is None:
        raise HTTPException(404, "Session not found")
    return session


# -------------------------------------------------------------------
# Lifecycle
# -------------------------------------------------------------------
@router.post("", status_code=201)
def create_session(
    opts: Optional[SessionOptions] = None,
    registry: SessionRegistry = Depends(get_registry),
) -> SessionState:
    """Create a converter session; unset options fall back to the service defaults."""
    opts = opts or SessionOptions()
    kwargs = {k: v for k, v in opts.model_dump().items() if v is not None}
    session = registry.create(**kwargs)
    return session.state()


@router.get("/{session_id}")
def read_session(session: ConverterSession = Depends(get_session)) -> SessionState:
    return session.state()


@router.patch("/{session_id}")
def update_session(opts: SessionOptions, session: ConverterSession = Depends(get_session)) -> SessionState:
    """
    Push new host parameters. Only fields present in the body are applied,
    so {"reset": 3} changes the reset token and nothing else.
    """
    session.update(**{k: getattr(opts, k) for k in opts.model_fields_set})
    return session.state()


@router.delete("/{session_id}", status_code=204)
def delete_session(session_id: str, registry: SessionRegistry = Depends(get_registry)) -> Response:
    if not registry.destroy(session_id):
        raise HTTPException(404, "Session not found")
    return Response(status_code=204)


# -------------------------------------------------------------------
# Conversion / reset / copy
# -------------------------------------------------------------------
@router.post("/{session_id}/files")
async def upload_files(
    files: Optional[List[UploadFile]] = File(None),
    session: ConverterSession = Depends(get_session),
) -> SessionState:
    """Convert the selection; an empty selection clears the output."""
    await session.process_files(files)
    return session.state()


@router.post("/{session_id}/reset")
def reset_session(session: ConverterSession = Depends(get_session)) -> SessionState:
    session.reset()
    return session.state()


@router.get("/{session_id}/copy")
def copy_text(
    with_prompt: bool = Query(False, description="Prefix the schema with the instruction prompt"),
    session: ConverterSession = Depends(get_session),
) -> CopyText:
    """Text the client should put on the clipboard (null when there is no output)."""
    text = session.copy_schema_with_prompt() if with_prompt else session.copy_schema()
    return CopyText(text=text)
