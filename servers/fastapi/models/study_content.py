from typing import List
import uuid

from pydantic import BaseModel, Field

from constants.study_constants import DEFAULT_WRITTEN_SUBJECT
from enums.note_importance import NoteImportance
from enums.written_question_type import WrittenQuestionType


class Question(BaseModel):
    id: uuid.UUID = Field(default_factory=uuid.uuid4)
    text: str
    options: List[str] = Field(default_factory=list)
    correct_answer: str = Field(..., description="Text of the correct option")


class NoteSection(BaseModel):
    id: uuid.UUID = Field(default_factory=uuid.uuid4)
    title: str
    content: str = Field(..., description="Markdown body of the note")
    importance: NoteImportance = NoteImportance.NORMAL


class WrittenQuestion(BaseModel):
    id: uuid.UUID = Field(default_factory=uuid.uuid4)
    subject: str = DEFAULT_WRITTEN_SUBJECT
    question: str
    answer: str = Field(..., description="Step-by-step model solution")
    marks: str
    type: WrittenQuestionType = WrittenQuestionType.THEORY
