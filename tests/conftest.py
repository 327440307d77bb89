"""
테스트 공통 설정 및 Fixtures
pytest의 conftest.py는 모든 테스트에서 공유되는 fixture를 정의
"""
import os
import sys
import json
import random
import logging
import pytest
from typing import Any, Callable, Dict, Generator, List

# 설정 모듈이 import 되기 전에 테스트 환경을 고정
os.environ.setdefault("ENV", "test")

# 프로젝트 루트를 path에 추가
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from fastapi.testclient import TestClient

from zhlink.catalogs import get_chain, get_pattern, get_scene
from zhlink.models.spec import Spec
from zhlink.specs.reference import build_expected_reference_answer
from zhlink.specs.sampler import assemble_spec


# ===========================================
# 환경 설정
# ===========================================

@pytest.fixture(scope="session", autouse=True)
def setup_test_environment():
    """테스트 환경 설정"""
    os.environ["ENV"] = "test"
    yield


# ===========================================
# FastAPI 클라이언트
# ===========================================

@pytest.fixture(scope="module")
def app():
    """FastAPI 애플리케이션 인스턴스"""
    from zhlink.main import app as fastapi_app
    return fastapi_app


@pytest.fixture(scope="module")
def client(app) -> Generator:
    """테스트 클라이언트"""
    with TestClient(app) as test_client:
        yield test_client


# ===========================================
# Spec Fixtures
# ===========================================

def build_spec(chain_id: str, step1_id: str, step2_id: str, scene_id: str) -> Spec:
    """카탈로그 id로 Spec 직접 조립 (샘플러를 거치지 않음)"""
    return assemble_spec(
        get_chain(chain_id),
        get_pattern(step1_id),
        get_pattern(step2_id),
        get_scene(scene_id),
    )


@pytest.fixture
def rng() -> random.Random:
    """고정 시드 난수원"""
    return random.Random(20240101)


@pytest.fixture
def cause_result_spec() -> Spec:
    """
    因为…所以… + …于是…  /  下雨了 → 我没去远处 → 我就在附近的小店慢慢逛
    """
    return build_spec(
        "zh_chain__cause_to_result__v1",
        "zh_pat__cause__yinwei_suoyi__pair__l1",
        "zh_pat__result__yushi__single__l1",
        "zh_scene__travel_rain__v1",
    )


@pytest.fixture
def bleeding_spec() -> Spec:
    """두 단계가 같은 강한 표지(所以)를 공유하는 Spec"""
    return build_spec(
        "zh_chain__cause_to_result__v1",
        "zh_pat__cause__yinwei_suoyi__pair__l1",
        "zh_pat__result__suoyi__single__l1",
        "zh_scene__travel_rain__v1",
    )


@pytest.fixture
def reference_answer(cause_result_spec) -> str:
    return build_expected_reference_answer(cause_result_spec)


@pytest.fixture
def valid_item(cause_result_spec, reference_answer) -> Dict[str, Any]:
    """검증을 통과하는 생성 문항"""
    return {
        "seed_zh": cause_result_spec.seed,
        "challenge_zh": "用“因为…所以…”和“于是…”，只写两句。",
        "reference_answer_zh": reference_answer,
        "meta": {"chain_id": cause_result_spec.chain_id},
    }


# ===========================================
# 외부 생성기 Fixtures
# ===========================================

class FakeCompletionClient:
    """
    준비된 응답을 순서대로 돌려주는 생성기
    응답이 Exception 인스턴스면 그대로 raise
    """

    def __init__(self, responses: List[Any]):
        self.responses = list(responses)
        self.calls: List[Dict[str, Any]] = []

    def complete(self, system: str, user: str, *, temperature: float) -> str:
        self.calls.append({"system": system, "user": user, "temperature": temperature})
        if not self.responses:
            raise RuntimeError("no more fake responses")
        resp = self.responses.pop(0)
        if isinstance(resp, Exception):
            raise resp
        return resp


@pytest.fixture
def fake_client_factory() -> Callable[..., FakeCompletionClient]:
    return lambda *responses: FakeCompletionClient(list(responses))


@pytest.fixture
def valid_item_json(valid_item) -> str:
    """코드펜스로 감싼 정상 응답"""
    return "```json\n" + json.dumps(valid_item, ensure_ascii=False) + "\n```"


# ===========================================
# 유틸리티 Fixtures
# ===========================================

@pytest.fixture
def capture_logs():
    """zhlink 로거 캡처 (DEBUG 이상)"""

    class LogCapture(logging.Handler):
        def __init__(self):
            super().__init__()
            self.records = []

        def emit(self, record):
            self.records.append(record)

        def get_messages(self):
            return [r.getMessage() for r in self.records]

    handler = LogCapture()
    logger = logging.getLogger("zhlink")
    old_level = logger.level
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG)
    yield handler
    logger.removeHandler(handler)
    logger.setLevel(old_level)
