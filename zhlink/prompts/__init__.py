"""
프롬프트 레이어
외부 생성기용 메시지와 연결 표지 영어 라벨
"""
from zhlink.prompts.connector_labels import (
    CONNECTOR_ENGLISH,
    bilingual_connector_label,
    connector_english,
)
from zhlink.prompts.prompt_manager import (
    CORE_PLUS_CORE_SYSTEM_PROMPT,
    PromptManager,
    build_user_message,
)

__all__ = [
    "CONNECTOR_ENGLISH",
    "bilingual_connector_label",
    "connector_english",
    "CORE_PLUS_CORE_SYSTEM_PROMPT",
    "PromptManager",
    "build_user_message",
]
