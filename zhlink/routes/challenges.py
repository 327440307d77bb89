# zhlink/routes/challenges.py
from fastapi import APIRouter, Depends

from zhlink.models.challenge import Challenge
from zhlink.schemas.error import ErrorResponse
from zhlink.schemas.challenge import (
    EvaluateRequest,
    EvaluateResponse,
    NewChallengeRequest,
    ValidateRequest,
    ValidateResponse,
)
from zhlink.services.challenge_service import ChallengeService, get_challenge_service
from zhlink.specs.reference import build_expected_reference_answer

router = APIRouter(
    prefix="/challenges",
    tags=["challenges"],
    responses={422: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)


@router.post("/new", response_model=Challenge, responses={503: {"model": ErrorResponse}})
def new_challenge(
    req: NewChallengeRequest,
    service: ChallengeService = Depends(get_challenge_service),
):
    """
    난이도에 맞는 Spec 을 샘플링해 챌린지 1건을 반환.
    서버는 상태를 저장하지 않으므로 응답의 spec 을 채점 요청에 그대로 넣어야 한다.
    """
    return service.new_challenge(req.difficulty)


@router.post("/evaluate", response_model=EvaluateResponse)
def evaluate_answer(
    req: EvaluateRequest,
    service: ChallengeService = Depends(get_challenge_service),
):
    result = service.evaluate_answer(req.spec, req.answer)
    return EvaluateResponse(
        correct=result.correct,
        score=result.score,
        explanation=result.explanation,
        expected=build_expected_reference_answer(req.spec),
    )


@router.post("/validate", response_model=ValidateResponse)
def validate_item(
    req: ValidateRequest,
    service: ChallengeService = Depends(get_challenge_service),
):
    """외부 생성 문항 엄격 검증 (불일치 시 422 SCHEMA_VIOLATION)"""
    service.validate_item(req.spec, req.item)
    return ValidateResponse()
