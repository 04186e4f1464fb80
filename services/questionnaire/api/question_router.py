# services/questionnaire/api/question_router.py
from typing import Optional

from fastapi import APIRouter, Depends

from services.questionnaire.controllers.question_service import QuestionStore
from services.questionnaire.controllers.result_service import save_result
from services.questionnaire.schemas.questions import QuestionCreate, QuestionList, QuestionReorder, QuestionUpdate
from services.questionnaire.schemas.results import ResultCreate
from services.user_management.models.users import UserRole
from services.user_management.permissions import Caller, require_role
from shared.kv_store import KeyValueStore, get_kv_store

router = APIRouter(tags=["Questionnaire"])

require_admin = require_role(UserRole.ADMIN)


def get_question_store(store: KeyValueStore = Depends(get_kv_store)) -> QuestionStore:
    return QuestionStore(store)


# --- PUBLIC ---
@router.get("/questions", response_model=QuestionList)
async def get_questions(questions: QuestionStore = Depends(get_question_store)):
    items, revision = await questions.list_questions()
    return QuestionList(questions=items, revision=revision)


@router.post("/results")
async def create_result(payload: ResultCreate, store: KeyValueStore = Depends(get_kv_store)):
    result_id = await save_result(payload, store)
    return {"message": "Results saved successfully", "id": result_id}


# --- ADMIN (admin or above) ---
@router.post("/admin/init-questions")
async def init_questions(
    questions: QuestionStore = Depends(get_question_store),
    caller: Caller = Depends(require_admin),
):
    count, seeded = await questions.init_default_questions()
    message = "Questions initialized successfully" if seeded else "Questions already initialized"
    return {"message": message, "count": count}


@router.get("/admin/questions", response_model=QuestionList)
async def get_admin_questions(
    questions: QuestionStore = Depends(get_question_store),
    caller: Caller = Depends(require_admin),
):
    items, revision = await questions.list_questions()
    return QuestionList(questions=items, revision=revision)


@router.post("/admin/questions")
async def add_question(
    payload: QuestionCreate,
    questions: QuestionStore = Depends(get_question_store),
    caller: Caller = Depends(require_admin),
):
    question, revision = await questions.add_question(payload.text, payload.category, payload.revision)
    return {"message": "Question added successfully", "question": question.model_dump(), "revision": revision}


# Declared before /{question_id} so "reorder" is not parsed as an id
@router.put("/admin/questions/reorder")
async def reorder_questions(
    payload: QuestionReorder,
    questions: QuestionStore = Depends(get_question_store),
    caller: Caller = Depends(require_admin),
):
    revision = await questions.reorder_questions(payload.questionIds, payload.revision)
    return {"message": "Questions reordered successfully", "revision": revision}


@router.put("/admin/questions/{question_id}")
async def update_question(
    question_id: int,
    payload: QuestionUpdate,
    questions: QuestionStore = Depends(get_question_store),
    caller: Caller = Depends(require_admin),
):
    question, revision = await questions.update_question(question_id, payload.text, payload.category, payload.revision)
    return {"message": "Question updated successfully", "question": question.model_dump(), "revision": revision}


@router.delete("/admin/questions/{question_id}")
async def delete_question(
    question_id: int,
    revision: Optional[int] = None,
    questions: QuestionStore = Depends(get_question_store),
    caller: Caller = Depends(require_admin),
):
    new_revision = await questions.delete_question(question_id, revision)
    return {"message": "Question deleted successfully", "revision": new_revision}
