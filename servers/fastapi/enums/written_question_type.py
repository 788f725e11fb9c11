from enum import Enum


class WrittenQuestionType(str, Enum):
    THEORY = "Theory"
    MATH = "Math"
    SHORT_NOTE = "Short Note"
