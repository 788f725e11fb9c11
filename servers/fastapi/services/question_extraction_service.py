import asyncio
import functools
import logging
from typing import Awaitable, Callable, List, Optional, Sequence, Tuple

from constants.study_constants import exam_batch_labels, exam_option_count
from enums.exam_type import ExamType
from models.study_content import Question
from services.study_content_service import parse_questions
from utils.get_env import (
    get_max_extracted_questions_env,
    get_max_extraction_retries_env,
)


logger = logging.getLogger(__name__)

FetchBatch = Callable[[], Awaitable[str]]
OnBatch = Callable[[List[Question]], None]


def _is_cancelled(cancel_event: Optional[asyncio.Event]) -> bool:
    return cancel_event is not None and cancel_event.is_set()


class QuestionExtractionService:
    """
    Repeatedly asks the model for the next batch of questions until it stops
    producing any, the cap is reached, or the caller cancels.

    `fetch_batch` is the caller's model call and returns the raw response text.
    """

    def __init__(
        self,
        fetch_batch: FetchBatch,
        max_retries: Optional[int] = None,
        max_questions: Optional[int] = None,
    ):
        self.fetch_batch = fetch_batch
        self.max_retries = (
            max_retries if max_retries is not None else get_max_extraction_retries_env()
        )
        self.max_questions = (
            max_questions if max_questions is not None else get_max_extracted_questions_env()
        )

    async def extract(
        self,
        on_batch: OnBatch,
        cancel_event: Optional[asyncio.Event] = None,
    ) -> List[Question]:
        questions: List[Question] = []
        retry_count = 0

        while retry_count < self.max_retries and len(questions) < self.max_questions:
            if _is_cancelled(cancel_event):
                logger.info("Question extraction cancelled after %d questions", len(questions))
                break

            try:
                raw = await self.fetch_batch()
            except Exception as e:
                retry_count += 1
                logger.warning(
                    "Question batch failed (%d/%d): %s", retry_count, self.max_retries, e
                )
                continue

            batch = parse_questions(raw)
            if not batch:
                retry_count += 1
                logger.info("Empty question batch (%d/%d)", retry_count, self.max_retries)
                continue

            retry_count = 0
            questions.extend(batch)
            on_batch(batch)

        return questions

    @staticmethod
    async def extract_labeled(
        batches: Sequence[Tuple[str, FetchBatch]],
        on_batch: OnBatch,
        cancel_event: Optional[asyncio.Event] = None,
    ) -> List[Question]:
        """
        Runs each (label, fetch_batch) pair once, prefixing every question with its label.
        A failing or empty batch is skipped.
        """
        questions: List[Question] = []
        for label, fetch_batch in batches:
            if _is_cancelled(cancel_event):
                break
            try:
                raw = await fetch_batch()
            except Exception as e:
                logger.warning("Question batch '%s' failed: %s", label, e)
                continue

            batch = parse_questions(raw, label=label)
            if not batch:
                logger.info("Question batch '%s' returned no questions", label)
                continue
            questions.extend(batch)
            on_batch(batch)
        return questions

    @staticmethod
    async def extract_for_exam(
        exam_type: ExamType,
        fetch_for_label: Callable[[str], Awaitable[str]],
        on_batch: OnBatch,
        cancel_event: Optional[asyncio.Event] = None,
    ) -> List[Question]:
        """
        Runs the labeled batches of `exam_type`; `fetch_for_label` receives the
        batch label and returns the raw model response for it.
        """
        batches = [
            (label, functools.partial(fetch_for_label, label))
            for label in exam_batch_labels(exam_type)
        ]
        questions = await QuestionExtractionService.extract_labeled(
            batches, on_batch, cancel_event=cancel_event
        )

        option_count = exam_option_count(exam_type)
        off_count = [q for q in questions if len(q.options) != option_count]
        if off_count:
            logger.warning(
                "%d %s questions do not have %d options",
                len(off_count),
                exam_type.value,
                option_count,
            )
        return questions
