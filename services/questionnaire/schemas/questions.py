from pydantic import BaseModel, Field
from typing import List, Optional


class Question(BaseModel):
    id: int
    category: str
    text: str
    order: int


class QuestionCreate(BaseModel):
    text: str = Field(min_length=1)
    category: str
    # Revision the caller last read; stale values are rejected with 409
    revision: Optional[int] = None


class QuestionUpdate(QuestionCreate):
    pass


class QuestionReorder(BaseModel):
    questionIds: List[int]
    revision: Optional[int] = None


class QuestionList(BaseModel):
    questions: List[Question]
    revision: int
