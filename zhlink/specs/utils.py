# zhlink/specs/utils.py
from __future__ import annotations

from typing import Iterable, Optional, Tuple

from zhlink.core.constants import Punctuation

_TO_FULL_STOP = str.maketrans({c: Punctuation.FULL_STOP for c in Punctuation.TO_FULL_STOP})


def trim_sentence_trailing_punct(s: str) -> str:
    """앞뒤 공백과 문장 끝 종결 부호(。.!！?？)를 제거"""
    return (s or "").strip().rstrip(Punctuation.TERMINALS).strip()


def split_two_sentences(text: str) -> Optional[Tuple[str, str]]:
    """
    정확히 두 문장으로 분리:
      1) !！?？ → 。 로 통일
      2) 끝의 종결 부호 제거
      3) 。 기준 분리 후 트림, 빈 조각 제거
    조각이 정확히 2개가 아니면 None
    """
    canonical = (text or "").strip().translate(_TO_FULL_STOP)
    without_tail = canonical.rstrip(Punctuation.TERMINALS).strip()

    parts = [p.strip() for p in without_tail.split(Punctuation.FULL_STOP)]
    parts = [p for p in parts if p]
    if len(parts) != 2:
        return None
    return parts[0], parts[1]


def normalize_for_compare(s: str) -> str:
    """모든 공백 문자 제거"""
    return "".join(ch for ch in (s or "") if not ch.isspace())


def render_template_ab(tpl: str, a: str, b: str) -> str:
    return tpl.replace("{A}", a).replace("{B}", b)


def contains_any(text: str, tokens: Iterable[str]) -> bool:
    """빈 토큰은 무시하고 하나라도 포함되면 True"""
    return any(t and t in text for t in tokens)
