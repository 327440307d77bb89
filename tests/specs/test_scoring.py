"""
자유 답안 채점 테스트
100점에서 규칙별 감점, 60점 이상 통과
"""
import random

import pytest

from zhlink.specs.reference import build_expected_reference_answer
from zhlink.specs.sampler import sample
from zhlink.specs.scoring import EMPTY_ANSWER_EXPLANATION, SUCCESS_EXPLANATION, evaluate


class TestEmptyAnswer:
    """빈 답안"""

    @pytest.mark.parametrize("answer", ["", "   ", "\n\t", None])
    def test_empty_answer_scores_zero(self, cause_result_spec, answer):
        assert evaluate(cause_result_spec, answer) == (False, 0.0, EMPTY_ANSWER_EXPLANATION)


class TestReferenceRoundTrip:
    """기준문은 항상 통과"""

    def test_reference_scores_full(self, cause_result_spec, reference_answer):
        result = evaluate(cause_result_spec, reference_answer)
        assert result.correct is True
        assert result.score == 100.0
        assert result.explanation == SUCCESS_EXPLANATION

    def test_every_sampled_reference_passes(self):
        rng = random.Random(2024)
        for difficulty in ("hsk1", "hsk2", "hsk3", "hsk4", "hsk5", "hsk6"):
            for _ in range(150):
                spec = sample(difficulty, 200, rng=rng)
                result = evaluate(spec, build_expected_reference_answer(spec))
                assert result.correct, (spec.chain_id, spec.step1.pattern_id, spec.step2.pattern_id)
                assert result.score >= 60.0

    def test_shared_marker_reference_still_passes(self, bleeding_spec):
        """두 단계가 所以 를 공유하면 양쪽 섞임 감점(-16)만 받는다"""
        result = evaluate(bleeding_spec, build_expected_reference_answer(bleeding_spec))
        assert result.correct is True
        assert result.score == 84.0


class TestPenalties:
    """규칙별 감점"""

    def test_single_sentence(self, cause_result_spec):
        """두 문장이 아니면 -40, 두 문장 모두 전체 답안으로 검사"""
        result = evaluate(cause_result_spec, "因为下雨了，所以我没去远处")
        # -40 (문장 수) -25 (2단계 표지 없음) -8 (2문장에 1단계 표지)
        assert result.score == 27.0
        assert result.correct is False
        assert result.explanation == (
            "格式错误：需要正好两句（用句号分隔）；"
            "第2句不符合要求：缺少强标记：'于是'；"
            "第2句混入了第1步连接标记。"
        )

    def test_missing_step_marker(self, cause_result_spec):
        result = evaluate(cause_result_spec, "下雨了，所以我没去远处。我没去远处，于是我就在附近逛")
        assert result.score == 75.0
        assert result.correct is True
        assert result.explanation == "第1句不符合要求：缺少强标记：'因为'。"

    def test_seed_missing(self, cause_result_spec):
        result = evaluate(cause_result_spec, "因为天气不好，所以我没去远处。我没去远处，于是我在附近逛")
        assert result.score == 85.0
        assert result.explanation == "内容未围绕种子短语。"

    def test_both_steps_wrong_fails(self, cause_result_spec):
        result = evaluate(cause_result_spec, "下雨了，我没去远处。我就在附近逛")
        assert result.score == 50.0
        assert result.correct is False

    def test_pass_threshold_is_inclusive(self, cause_result_spec):
        """60점은 통과"""
        # -25 (1단계) -15 (seed)
        result = evaluate(cause_result_spec, "天气不好，我没去远处。我没去远处，于是我在附近逛")
        assert result.score == 60.0
        assert result.correct is True

    def test_score_is_clamped_at_zero(self, cause_result_spec):
        result = evaluate(cause_result_spec, "你好")
        assert result.score == 0.0
        assert result.correct is False


class TestMarkerBleed:
    """다른 단계 표지 섞임"""

    def test_bleed_lowers_score_strictly(self, cause_result_spec, reference_answer):
        clean = evaluate(cause_result_spec, reference_answer)
        bled = evaluate(cause_result_spec, reference_answer + "，因为不想走远")

        assert bled.score < clean.score
        assert bled.score == 92.0
        assert bled.explanation == "第2句混入了第1步连接标记。"

    def test_bleed_in_first_sentence(self, cause_result_spec):
        answer = "因为下雨了，所以我没去远处，于是待在家。我没去远处，于是我就在附近逛"
        result = evaluate(cause_result_spec, answer)
        assert result.score == 92.0
        assert result.explanation == "第1句混入了第2步连接标记。"
