# services/questionnaire/controllers/result_service.py
import time
import uuid

from services.questionnaire.schemas.results import ResultCreate
from services.user_management.profiles import utc_now
from shared.kv_store import KeyValueStore

RESULT_PREFIX = "result_"


def new_result_key() -> str:
    return f"{RESULT_PREFIX}{int(time.time() * 1000)}_{uuid.uuid4().hex[:9]}"


async def save_result(payload: ResultCreate, store: KeyValueStore) -> str:
    """Store one submitted answer set; results without a user are anonymized."""
    result_id = new_result_key()
    await store.set(
        result_id,
        {
            "testType": payload.testType or "unknown",
            "userId": payload.userId or "anonymous",
            "answers": payload.answers,
            "timestamp": payload.timestamp or utc_now(),
            "anonymized": not payload.userId,
        },
    )
    return result_id
