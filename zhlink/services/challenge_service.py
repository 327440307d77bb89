# zhlink/services/challenge_service.py
"""
챌린지 서비스
Spec 샘플링 → 결정적 기준문/과제 문구 렌더링 → (선택) 외부 생성기 호출
"""
import logging
import random
import uuid
from typing import Any, Dict, Optional, Union

from zhlink.core.constants import ChallengeSources
from zhlink.core.exceptions import ItemGenerationError
from zhlink.core.settings import BaseConfig, settings as default_settings
from zhlink.models.challenge import Challenge, EvaluationResult
from zhlink.models.spec import GeneratedItem, Spec
from zhlink.specs.base import CompletionClient
from zhlink.specs.generate_with_retry import generate_with_retries
from zhlink.specs.reference import (
    build_challenge_en,
    build_compact_challenge_zh,
    build_expected_reference_answer,
    build_summary_en,
)
from zhlink.specs.sampler import SpecSampler
from zhlink.specs.scoring import evaluate
from zhlink.specs.validators import validate_generated_item

logger = logging.getLogger("zhlink.challenge_service")


class ChallengeService:
    """
    챌린지 생성/채점/검증
    상태를 갖지 않으므로 Spec 은 호출 측이 보관한다.
    """

    def __init__(
        self,
        sampler: Optional[SpecSampler] = None,
        config: Optional[BaseConfig] = None,
        rng: Optional[random.Random] = None,
    ):
        self.sampler = sampler or SpecSampler()
        self.config = config or default_settings
        self.rng = rng

    def new_challenge(
        self,
        difficulty: Optional[str] = None,
        client: Optional[CompletionClient] = None,
    ) -> Challenge:
        """
        새 챌린지 1건 생성

        Args:
            difficulty: "hsk1" ~ "hsk6" (없으면 DEFAULT_DIFFICULTY)
            client: 외부 생성기. 없거나 재시도가 모두 실패하면 결정적 기준문을 사용

        Raises:
            SamplingExhaustedError: 재시도 한도 내에서 조합을 찾지 못함
        """
        difficulty = difficulty or self.config.DEFAULT_DIFFICULTY
        spec = self.sampler.sample(difficulty, self.config.SAMPLE_MAX_TRIES, rng=self.rng)

        source = ChallengeSources.DETERMINISTIC
        seed_zh = spec.seed
        challenge_zh = build_compact_challenge_zh(spec)
        reference = build_expected_reference_answer(spec)

        if client is not None:
            try:
                item = generate_with_retries(
                    client,
                    spec,
                    max_retries=self.config.GENERATE_MAX_RETRIES,
                    base_temperature=self.config.GENERATE_BASE_TEMPERATURE,
                )
            except ItemGenerationError as e:
                logger.warning(
                    "generation_fallback",
                    extra={"chain_id": spec.chain_id, "scene_id": spec.scene_id,
                           "attempts": e.details.get("attempts")},
                )
            else:
                source = ChallengeSources.GENERATED
                seed_zh = item.seed_zh
                challenge_zh = item.challenge_zh or challenge_zh
                reference = item.reference_answer_zh

        challenge = Challenge(
            id=str(uuid.uuid4()),
            difficulty=difficulty,
            source=source,
            seed_zh=seed_zh,
            challenge_zh=challenge_zh,
            challenge_en=build_challenge_en(spec),
            summary_en=build_summary_en(spec),
            reference_answer_zh=reference,
            spec=spec,
        )
        logger.info(
            "challenge_created",
            extra={"challenge_id": challenge.id, "difficulty": difficulty, "source": source,
                   "chain_id": spec.chain_id, "scene_id": spec.scene_id},
        )
        return challenge

    def evaluate_answer(self, spec: Spec, answer: Optional[str]) -> EvaluationResult:
        return evaluate(spec, answer)

    def validate_item(self, spec: Spec, raw: Union[GeneratedItem, Dict[str, Any]]) -> None:
        """엄격 검증 (실패 시 SchemaViolationError)"""
        validate_generated_item(spec, raw)


# 싱글톤 인스턴스
_challenge_service: Optional[ChallengeService] = None


def get_challenge_service() -> ChallengeService:
    """ChallengeService 싱글톤 인스턴스 반환 (라우트 의존성)"""
    global _challenge_service
    if _challenge_service is None:
        _challenge_service = ChallengeService()
    return _challenge_service
