# services/questionnaire/controllers/question_service.py
"""Screening questions kept as one ordered list under the ``questions`` key.

Every mutation reads the whole list, changes it and writes it back with a
compare-and-swap on the revision it read, so two admins editing at the same
time get a 409 instead of silently losing one change.
"""
import logging
from typing import List, Optional, Sequence, Tuple

from services.questionnaire.default_questions import default_questions
from services.questionnaire.schemas.questions import Question
from shared.errors import Conflict, NotFound
from shared.kv_store import KeyValueStore

logger = logging.getLogger(__name__)

QUESTIONS_KEY = "questions"


class QuestionStore:
    def __init__(self, store: KeyValueStore):
        self.store = store

    async def _load(self, expected_revision: Optional[int] = None) -> Tuple[List[Question], int]:
        data, revision = await self.store.get_with_revision(QUESTIONS_KEY)
        if expected_revision is not None and expected_revision != revision:
            raise Conflict(f"Questions changed since revision {expected_revision} (now {revision})")
        return [Question.model_validate(item) for item in data or []], revision

    async def _save(self, questions: List[Question], revision: int) -> int:
        return await self.store.set(
            QUESTIONS_KEY,
            [question.model_dump() for question in questions],
            expected_revision=revision,
        )

    async def list_questions(self) -> Tuple[List[Question], int]:
        questions, revision = await self._load()
        # sorted() is stable, equal orders keep their storage order
        return sorted(questions, key=lambda q: q.order), revision

    async def add_question(self, text: str, category: str, expected_revision: Optional[int] = None) -> Tuple[Question, int]:
        questions, revision = await self._load(expected_revision)
        question = Question(
            id=max((q.id for q in questions), default=0) + 1,
            category=category,
            text=text,
            order=max((q.order for q in questions), default=0) + 1,
        )
        questions.append(question)
        return question, await self._save(questions, revision)

    async def update_question(
        self, question_id: int, text: str, category: str, expected_revision: Optional[int] = None
    ) -> Tuple[Question, int]:
        questions, revision = await self._load(expected_revision)
        for index, question in enumerate(questions):
            if question.id == question_id:
                questions[index] = question.model_copy(update={"text": text, "category": category})
                return questions[index], await self._save(questions, revision)
        raise NotFound("Question not found")

    async def delete_question(self, question_id: int, expected_revision: Optional[int] = None) -> int:
        questions, revision = await self._load(expected_revision)
        remaining = [q for q in questions if q.id != question_id]
        if len(remaining) == len(questions):
            raise NotFound("Question not found")
        return await self._save(remaining, revision)

    async def reorder_questions(self, question_ids: Sequence[int], expected_revision: Optional[int] = None) -> int:
        """Set ``order`` from the position in ``question_ids``.

        Only listed questions move. Unlisted ones keep their order and
        unknown ids are ignored.
        """
        questions, revision = await self._load(expected_revision)
        by_id = {q.id: q for q in questions}
        for position, question_id in enumerate(question_ids, start=1):
            if question_id in by_id:
                by_id[question_id].order = position
        return await self._save(questions, revision)

    async def init_default_questions(self) -> Tuple[int, bool]:
        """Seed the default catalog into an empty store.

        Returns the question count and whether seeding happened.
        """
        questions, revision = await self._load()
        if questions:
            return len(questions), False
        seeded = [Question.model_validate(item) for item in default_questions()]
        await self._save(seeded, revision)
        logger.info("Seeded %d default questions", len(seeded))
        return len(seeded), True
