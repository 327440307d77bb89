# zhlink/routes/catalog.py
from typing import List, Optional

from fastapi import APIRouter, Query

from zhlink.catalogs import ALL_PATTERNS
from zhlink.core.constants import DifficultyLevels, Relations
from zhlink.core.exceptions import ValidationError
from zhlink.models.catalog import PatternDef
from zhlink.schemas.error import ErrorResponse

router = APIRouter(prefix="/catalog", tags=["catalog"], responses={422: {"model": ErrorResponse}})


@router.get("/patterns", response_model=List[PatternDef])
def list_patterns(
    relation: Optional[str] = Query(default=None),
    max_level: int = Query(default=DifficultyLevels.ADVANCED, ge=DifficultyLevels.BASIC, le=DifficultyLevels.ADVANCED),
):
    """관계/최대 레벨로 걸러낸 패턴 정의 목록 (카탈로그 순서 유지)"""
    if relation is not None and relation not in Relations.ALL:
        raise ValidationError(
            f"알 수 없는 관계입니다: {relation}",
            details={"relation": relation, "allowed": Relations.ALL},
        )
    return [
        p for p in ALL_PATTERNS
        if (relation is None or p.relation == relation) and p.level <= max_level
    ]
