# zhlink/models/challenge.py
from __future__ import annotations

from typing import NamedTuple

from pydantic import BaseModel

from zhlink.models.spec import Spec


class EvaluationResult(NamedTuple):
    """자유 답안 채점 결과 - (correct, score, explanation) 로 언패킹 가능"""
    correct: bool
    score: float
    explanation: str


class Challenge(BaseModel):
    """학습자에게 제시되는 챌린지 1건"""
    id: str
    difficulty: str
    source: str
    seed_zh: str
    challenge_zh: str
    challenge_en: str
    summary_en: str
    reference_answer_zh: str
    spec: Spec
