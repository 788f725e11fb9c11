from enums.exam_type import ExamType


DEFAULT_LOG_LEVEL = "INFO"
DEFAULT_MAX_EXTRACTION_RETRIES = 3
DEFAULT_MAX_EXTRACTED_QUESTIONS = 300

DEFAULT_WRITTEN_SUBJECT = "General"

VARSITY_OPTION_COUNT = 4
ENGINEERING_OPTION_COUNT = 5


def exam_batch_labels(exam_type: ExamType) -> list[str]:
    # Varsity papers come from a single core batch; engineering papers are
    # split into an analytical batch and a math-heavy batch.
    if exam_type == ExamType.VARSITY:
        return ["Varsity Core"]
    name = exam_type.value.upper()
    return [f"{name} Analytical", f"{name} Math-Heavy"]


def exam_option_count(exam_type: ExamType) -> int:
    if exam_type == ExamType.VARSITY:
        return VARSITY_OPTION_COUNT
    return ENGINEERING_OPTION_COUNT
