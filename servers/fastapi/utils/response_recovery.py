import json
import logging
import re
from typing import Any, List, Optional

from pydantic import BaseModel, Field

from enums.recovery_strategy import RecoveryStrategy


logger = logging.getLogger(__name__)

_CODE_FENCE_RE = re.compile(r"^```[a-zA-Z0-9_-]*\s*|\s*```$")


class RecoveryResult(BaseModel):
    records: List[Any] = Field(default_factory=list)
    strategy: RecoveryStrategy = RecoveryStrategy.EMPTY

    @property
    def is_empty(self) -> bool:
        return not self.records


def _loads(text: str) -> tuple[bool, Any]:
    try:
        return True, json.loads(text)
    except (TypeError, ValueError, RecursionError):
        return False, None


def _as_sequence(value: Any) -> tuple[Optional[list], bool]:
    """
    Returns (sequence, unwrapped). A list is returned as-is; for an object, the
    first list-valued field in insertion order is returned instead.
    """
    if isinstance(value, list):
        return value, False
    if isinstance(value, dict):
        for item in value.values():
            if isinstance(item, list):
                return item, True
    return None, False


def _bracket_span(text: str) -> Optional[str]:
    stripped = _CODE_FENCE_RE.sub("", text.strip())
    start = stripped.find("[")
    end = stripped.rfind("]")
    if start == -1 or end <= start:
        return None
    return stripped[start : end + 1]


def _truncate_to_last_record(text: str) -> Optional[str]:
    cleaned = text.strip()
    first_bracket = cleaned.find("[")
    if first_bracket != -1:
        cleaned = cleaned[first_bracket:]
    # Assumes "}," never occurs inside a string value.
    last_record_end = cleaned.rfind("},")
    if last_record_end == -1:
        return None
    return cleaned[: last_record_end + 1] + "]"


def recover_records(raw: Any) -> RecoveryResult:
    """
    Best-effort decode of a model response that should be a JSON array of records.

    Strict decoding is tried first. When that fails, the array is cut out of any
    surrounding prose or code fence, and as a last resort a truncated response is
    cut back to its last complete record and closed. Never raises.
    """
    if not isinstance(raw, str):
        return RecoveryResult()

    ok, decoded = _loads(raw)
    if ok:
        sequence, unwrapped = _as_sequence(decoded)
        if sequence is None:
            return RecoveryResult()
        strategy = RecoveryStrategy.UNWRAPPED if unwrapped else RecoveryStrategy.STRICT
        return RecoveryResult(records=sequence, strategy=strategy)

    span = _bracket_span(raw)
    if span is not None:
        ok, decoded = _loads(span)
        if ok:
            sequence, _ = _as_sequence(decoded)
            if sequence is not None:
                return RecoveryResult(records=sequence, strategy=RecoveryStrategy.EXTRACTED)

    repaired = _truncate_to_last_record(raw)
    if repaired is not None:
        ok, decoded = _loads(repaired)
        if ok:
            sequence, _ = _as_sequence(decoded)
            if sequence is not None:
                logger.info("Recovered %d records from a truncated response", len(sequence))
                return RecoveryResult(records=sequence, strategy=RecoveryStrategy.TRUNCATED)

    logger.warning("Could not recover any records from model response (%d chars)", len(raw))
    return RecoveryResult()


def recover(raw: Any) -> list:
    return recover_records(raw).records
