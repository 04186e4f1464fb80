from pydantic import BaseModel
from typing import Any, Optional, Union


class ResultCreate(BaseModel):
    # Stored as received: clients send ISO strings or epoch milliseconds
    answers: Any = None
    timestamp: Any = None
    testType: Optional[str] = None
    userId: Optional[Union[str, int]] = None
