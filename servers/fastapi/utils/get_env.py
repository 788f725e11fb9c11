import logging
import os
from typing import Optional

from constants.study_constants import (
    DEFAULT_LOG_LEVEL,
    DEFAULT_MAX_EXTRACTED_QUESTIONS,
    DEFAULT_MAX_EXTRACTION_RETRIES,
)


def _get_int_env(name: str, default: int) -> int:
    value: Optional[str] = os.getenv(name)
    if value is None or not value.strip():
        return default
    try:
        return int(value.strip())
    except ValueError:
        return default


def get_log_level_env() -> str:
    level = (os.getenv("LOG_LEVEL") or "").strip().upper()
    # getLevelName maps known names to their numeric level and anything else to a string.
    if not isinstance(logging.getLevelName(level), int):
        return DEFAULT_LOG_LEVEL
    return level


def get_max_extraction_retries_env() -> int:
    return _get_int_env("MAX_EXTRACTION_RETRIES", DEFAULT_MAX_EXTRACTION_RETRIES)


def get_max_extracted_questions_env() -> int:
    return _get_int_env("MAX_EXTRACTED_QUESTIONS", DEFAULT_MAX_EXTRACTED_QUESTIONS)
