# zhlink/prompts/prompt_manager.py

from __future__ import annotations

import json
import logging

from zhlink.models.spec import Spec

log = logging.getLogger("zhlink.prompt_manager")

CORE_PLUS_CORE_SYSTEM_PROMPT = """
You are a Chinese learning item generator.
You MUST follow the provided SPEC exactly.

Return ONLY strict JSON with keys:
  seed_zh, challenge_zh, reference_answer_zh, meta

Rules:
- Use SPEC.seed as seed_zh verbatim.
- Do NOT add any new facts. Use ONLY P1, P2, P3 from SPEC.props.
- Use P1, P2, P3 verbatim (no paraphrasing / no synonym replacement).
- The learner must rewrite using TWO patterns:
  - Sentence 1 must connect P1 and P2 using SPEC.step1.pattern_tpl
  - Sentence 2 must connect P2 and P3 using SPEC.step2.pattern_tpl
- reference_answer_zh format must be EXACTLY two sentences separated by ONE '。'
  - Sentence1 = apply step1 template with (A=P1, B=P2)
  - Sentence2 = apply step2 template with (A=P2, B=P3)
  - Output: "<Sentence1>。<Sentence2>"  (NO extra '。' at the end)
- challenge_zh must clearly instruct:
  - which TWO connector patterns to use, by showing SPEC.step1.markers_zh and SPEC.step2.markers_zh
  - "只写两句" (two sentences only)
- meta must include at minimum:
  chain_id, scene_id, step1.pattern_id, step2.pattern_id, step1.relation, step2.relation, version
""".strip()

USER_MESSAGE_PREFIX = "SPEC_JSON:\n"


def build_user_message(spec: Spec) -> str:
    """spec 전체를 압축 JSON으로 실어 보내는 사용자 메시지 (한자는 이스케이프하지 않음)"""
    spec_json = json.dumps(spec.to_payload(), ensure_ascii=False, separators=(",", ":"))
    return f"{USER_MESSAGE_PREFIX}{spec_json}"


class PromptManager:
    """외부 생성기용 (system, user) 메시지 한 쌍을 만든다."""

    @staticmethod
    def generate(spec: Spec) -> tuple[str, str]:
        user = build_user_message(spec)
        log.debug("prompt_built", extra={"chain_id": spec.chain_id, "user_chars": len(user)})
        return CORE_PLUS_CORE_SYSTEM_PROMPT, user
