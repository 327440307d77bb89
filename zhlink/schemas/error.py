from typing import Any, Dict, List, Optional

from pydantic import BaseModel


class FieldError(BaseModel):
    field: str
    message: str
    type: Optional[str] = None


class ErrorResponse(BaseModel):
    code: str
    message: str
    trace_id: Optional[str] = None
    details: Optional[Dict[str, Any]] = None
    errors: Optional[List[FieldError]] = None
