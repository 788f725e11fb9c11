from typing import Any, List, Optional

from pydantic import BaseModel, Field

from enums.recovery_strategy import RecoveryStrategy


class RawResponseRequest(BaseModel):
    raw: str = Field(..., description="Raw text returned by the model")


class LabeledRawResponseRequest(RawResponseRequest):
    label: Optional[str] = Field(
        default=None, description="Batch label prefixed to every question text"
    )


class SanitizeRequest(BaseModel):
    text: Any = Field(default=None, description="Text to clean up before rendering")


class SanitizeResponse(BaseModel):
    text: str


class RecoverResponse(BaseModel):
    records: List[Any]
    strategy: RecoveryStrategy
