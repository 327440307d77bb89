# schemas/challenge.py

from typing import Any, Dict, Optional

from pydantic import BaseModel, Field

from zhlink.models.spec import Spec


class NewChallengeRequest(BaseModel):
    difficulty: Optional[str] = Field(default=None, examples=["hsk3"])   # 없으면 설정 기본값


class EvaluateRequest(BaseModel):
    spec: Spec                 # /challenges/new 응답의 spec 을 그대로 되돌려 보낸다
    answer: Optional[str] = ""


class EvaluateResponse(BaseModel):
    correct: bool
    score: float
    explanation: str
    expected: str              # 결정적 기준문


class ValidateRequest(BaseModel):
    spec: Spec
    item: Dict[str, Any]       # seed_zh / challenge_zh / reference_answer_zh / meta


class ValidateResponse(BaseModel):
    ok: bool = True
