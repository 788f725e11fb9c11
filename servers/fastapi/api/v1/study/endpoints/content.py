from typing import List

from fastapi import APIRouter

from models.study_content import NoteSection, Question, WrittenQuestion
from models.study_requests import LabeledRawResponseRequest, RawResponseRequest
from services.study_content_service import (
    parse_notes,
    parse_questions,
    parse_written_questions,
)


CONTENT_ROUTER = APIRouter(tags=["Study"])


@CONTENT_ROUTER.post("/questions", response_model=List[Question])
async def build_questions_from_response(request: LabeledRawResponseRequest):
    return parse_questions(request.raw, label=request.label)


@CONTENT_ROUTER.post("/notes", response_model=List[NoteSection])
async def build_notes_from_response(request: RawResponseRequest):
    return parse_notes(request.raw)


@CONTENT_ROUTER.post("/written-questions", response_model=List[WrittenQuestion])
async def build_written_questions_from_response(request: RawResponseRequest):
    return parse_written_questions(request.raw)
