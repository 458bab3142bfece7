import logging
import uuid
from typing import Any, Dict, Optional, Sequence

from app.converter import RawFile, render_batch, select_files
from app.models import SessionState, Token
from app.settings import ALLOW_MULTIPLE, COPY_PROMPT, IS_SCHEMA_VISIBLE

log = logging.getLogger(__name__)

_UNSET: Any = object()


class ConverterSession:
    """
    Host-side state for one converter widget.

    Holds the output property (`json_result`) and the switches the host
    pushes in (reset token, allow-multiple, schema visibility). Every batch
    gets a generation number; a reset or a newer batch bumps it, so a batch
    that finishes late cannot overwrite what the user sees now.
    """
    def __init__(
        self,
        allow_multiple: bool = ALLOW_MULTIPLE,
        is_schema_visible: bool = IS_SCHEMA_VISIBLE,
        reset: Optional[Token] = None,
        session_id: Optional[str] = None,
    ):
        self.session_id = session_id or uuid.uuid4().hex
        self.allow_multiple = allow_multiple
        self.is_schema_visible = is_schema_visible
        self.reset_value = reset
        self.json_result: Optional[str] = None
        self._generation = 0

    # ------------------------------------------------------------
    # Host callbacks
    # ------------------------------------------------------------
    def update(
        self,
        reset: Optional[Token] = _UNSET,
        allow_multiple: Optional[bool] = _UNSET,
        is_schema_visible: Optional[bool] = _UNSET,
    ) -> None:
        """
        Apply new host parameters. Only arguments that are passed are looked
        at; `None` for a flag means "back to its default".
        """
        if reset is not _UNSET and reset != self.reset_value:
            self.reset_value = reset
            # a token going away is recorded but does not clear anything
            if reset is not None:
                self.reset()

        if allow_multiple is not _UNSET:
            self.allow_multiple = ALLOW_MULTIPLE if allow_multiple is None else allow_multiple

        if is_schema_visible is not _UNSET:
            self.is_schema_visible = IS_SCHEMA_VISIBLE if is_schema_visible is None else is_schema_visible

    def outputs(self) -> Dict[str, Optional[str]]:
        return {"jsonResult": self.json_result}

    # ------------------------------------------------------------
    # Core
    # ------------------------------------------------------------
    def reset(self) -> None:
        """Drop the current output and orphan any batch still running."""
        self._generation += 1
        self.json_result = None
        log.info("session reset: session=%s", self.session_id)

    async def process_files(self, files: Optional[Sequence[RawFile]]) -> Optional[str]:
        """Convert the selected files and publish the JSON (unless superseded)."""
        if not files:
            self.reset()
            return None

        self._generation += 1
        generation = self._generation

        selected = select_files(files, self.allow_multiple)
        result = await render_batch(selected)

        if generation != self._generation:
            log.info(
                "discarding stale batch: session=%s generation=%d current=%d",
                self.session_id, generation, self._generation,
            )
            return self.json_result

        self.json_result = result
        return result

    # ------------------------------------------------------------
    # Copy helpers
    # ------------------------------------------------------------
    def copy_schema(self) -> Optional[str]:
        """Text for "Copy Schema", or None when there is nothing to copy."""
        return self.json_result or None

    def copy_schema_with_prompt(self) -> Optional[str]:
        schema = self.json_result
        if not schema:
            return None
        return f"{COPY_PROMPT}\n\n{schema}"

    # ------------------------------------------------------------
    # UI state
    # ------------------------------------------------------------
    @property
    def has_result(self) -> bool:
        return bool(self.json_result)

    @property
    def show_result_panel(self) -> bool:
        return self.is_schema_visible

    @property
    def copy_enabled(self) -> bool:
        return self.has_result

    def state(self) -> SessionState:
        return SessionState(
            session_id=self.session_id,
            json_result=self.json_result,
            allow_multiple=self.allow_multiple,
            is_schema_visible=self.is_schema_visible,
            reset=self.reset_value,
            has_result=self.has_result,
        )


class SessionRegistry:
    """In-memory sessions keyed by id (one per widget instance)."""
    def __init__(self):
        self._sessions: Dict[str, ConverterSession] = {}

    def create(self, **options) -> ConverterSession:
        session = ConverterSession(**options)
        self._sessions[session.session_id] = session
        log.info("session created: session=%s", session.session_id)
        return session

    def get(self, session_id: str) -> Optional[ConverterSession]:
        return self._sessions.get(session_id)

    def destroy(self, session_id: str) -> bool:
        return self._sessions.pop(session_id, None) is not None

    def __len__(self) -> int:
        return len(self._sessions)
