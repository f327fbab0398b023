# appointments_api/schemas/common/common.py
from pydantic import BaseModel
from typing import Optional

class ErrorResponse(BaseModel):
    error: str

class DatabaseStatus(BaseModel):
    ok: bool
    error: Optional[str] = None

class HealthResponse(BaseModel):
    status: str
    service: str
    version: str
    timestamp: str
    database: DatabaseStatus
