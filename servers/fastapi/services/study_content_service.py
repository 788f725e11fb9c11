import logging
from typing import Any, Iterable, List, Optional

from constants.study_constants import DEFAULT_WRITTEN_SUBJECT
from enums.note_importance import NoteImportance
from enums.written_question_type import WrittenQuestionType
from models.study_content import NoteSection, Question, WrittenQuestion
from utils.latex_sanitizer import sanitize
from utils.response_recovery import recover


logger = logging.getLogger(__name__)


def _missing_keys(record: Any, keys: Iterable[str]) -> Optional[List[str]]:
    """
    Returns the required keys absent from `record`, or None when it is not a dict.
    """
    if not isinstance(record, dict):
        return None
    return [key for key in keys if record.get(key) is None]


def _skip(kind: str, index: int, record: Any, missing: Optional[List[str]]) -> None:
    if missing is None:
        logger.warning("Skipping %s #%d: expected an object, got %s", kind, index, type(record).__name__)
    else:
        logger.warning("Skipping %s #%d: missing %s", kind, index, ", ".join(missing))


def _as_text(value: Any) -> str:
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    return value if isinstance(value, str) else ""


def build_questions(records: List[Any], label: Optional[str] = None) -> List[Question]:
    questions: List[Question] = []
    for index, record in enumerate(records):
        missing = _missing_keys(record, ("q", "o", "a"))
        if missing is None or missing:
            _skip("question", index, record, missing)
            continue

        text = _as_text(record["q"])
        if label:
            text = f"[{label}] {text}"
        options = record["o"] if isinstance(record["o"], list) else []
        questions.append(
            Question(
                text=sanitize(text),
                options=[sanitize(_as_text(option)) for option in options],
                correct_answer=sanitize(_as_text(record["a"])),
            )
        )
    return questions


def build_notes(records: List[Any]) -> List[NoteSection]:
    notes: List[NoteSection] = []
    for index, record in enumerate(records):
        missing = _missing_keys(record, ("title", "content"))
        if missing is None or missing:
            _skip("note", index, record, missing)
            continue

        try:
            importance = NoteImportance(record.get("importance"))
        except ValueError:
            importance = NoteImportance.NORMAL

        notes.append(
            NoteSection(
                title=_as_text(record["title"]),
                content=sanitize(record["content"]),
                importance=importance,
            )
        )
    return notes


def build_written_questions(records: List[Any]) -> List[WrittenQuestion]:
    written: List[WrittenQuestion] = []
    for index, record in enumerate(records):
        missing = _missing_keys(record, ("question", "answer"))
        if missing is None or missing:
            _skip("written question", index, record, missing)
            continue

        try:
            question_type = WrittenQuestionType(record.get("type"))
        except ValueError:
            question_type = WrittenQuestionType.THEORY

        written.append(
            WrittenQuestion(
                subject=sanitize(record.get("subject") or DEFAULT_WRITTEN_SUBJECT),
                question=sanitize(record["question"]),
                answer=sanitize(record["answer"]),
                marks=_as_text(record.get("marks")),
                type=question_type,
            )
        )
    return written


def parse_questions(raw: str, label: Optional[str] = None) -> List[Question]:
    return build_questions(recover(raw), label=label)


def parse_notes(raw: str) -> List[NoteSection]:
    return build_notes(recover(raw))


def parse_written_questions(raw: str) -> List[WrittenQuestion]:
    return build_written_questions(recover(raw))
