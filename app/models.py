from typing import Any, Dict, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, model_validator

# -----------------------------
# Conversion payloads
# -----------------------------
class ConversionResult(BaseModel):
    # One slot of a batch: either the converted document or why it failed
    model_config = ConfigDict(populate_by_name=True)

    file_name: str = Field(alias="fileName")
    content: Any = None
    error: Optional[str] = None

    @model_validator(mode="after")
    def _exactly_one(self):
        if (self.content is None) == (self.error is None):
            raise ValueError("exactly one of content or error must be set")
        return self

    @property
    def ok(self) -> bool:
        return self.error is None

    def to_json_obj(self) -> Dict[str, Any]:
        """Wire shape: {"fileName", "content"} or {"fileName", "error"}."""
        out: Dict[str, Any] = {"fileName": self.file_name}
        if self.error is None:
            out["content"] = self.content
        else:
            out["error"] = self.error
        return out


class BatchError(BaseModel):
    # Replaces the whole results array when gathering itself blows up
    error: str = "Error processing files"
    detail: str


# -----------------------------
# Session API schemas
# -----------------------------
Token = Union[int, float, str]


class SessionOptions(BaseModel):
    allow_multiple: Optional[bool] = None
    is_schema_visible: Optional[bool] = None
    reset: Optional[Token] = None


class SessionState(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    session_id: str = Field(alias="sessionId")
    json_result: Optional[str] = Field(default=None, alias="jsonResult")
    allow_multiple: bool = Field(alias="allowMultiple")
    is_schema_visible: bool = Field(alias="isSchemaVisible")
    reset: Optional[Token] = None
    has_result: bool = Field(alias="hasResult")


class CopyText(BaseModel):
    text: Optional[str] = None
