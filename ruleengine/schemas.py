from typing import Literal

from pydantic import BaseModel

class EvaluationResult(BaseModel):
    order_id: str
    rule: str
    passed: bool
    verdict: Literal["pass", "fail"]
