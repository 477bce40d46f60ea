from enum import Enum
from pydantic import BaseModel, ConfigDict, field_validator
from typing import Optional, List

class FactCheckStatus(str, Enum):
    REAL = "REAL"
    FAKE = "FAKE"
    UNVERIFIED = "UNVERIFIED"
    ERROR = "ERROR"

# the answers the model itself is allowed to give
VERDICTS = (FactCheckStatus.REAL, FactCheckStatus.FAKE, FactCheckStatus.UNVERIFIED)

class Source(BaseModel):
    model_config = ConfigDict(frozen=True)

    title: Optional[str] = None
    url: str

    @property
    def display_title(self) -> str:
        return (self.title or "").strip() or self.url

class Citation(BaseModel):
    """Raw grounding record surfaced by Google Search retrieval."""
    uri: Optional[str] = None
    title: Optional[str] = None

class ModelVerdict(BaseModel):
    status: FactCheckStatus
    explanation: str
    sources: List[Source] = []

    @field_validator("status")
    @classmethod
    def _substantive(cls, v: FactCheckStatus) -> FactCheckStatus:
        if v not in VERDICTS:
            raise ValueError(f"status must be one of {[s.value for s in VERDICTS]}")
        return v

class FactCheckResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    status: FactCheckStatus
    explanation: str
    sources: List[Source] = []

    @classmethod
    def failure(cls, message: str) -> "FactCheckResult":
        return cls(status=FactCheckStatus.ERROR, explanation=message, sources=[])

class CheckIn(BaseModel):
    input: str  # headline, article link, or message

    @field_validator("input")
    @classmethod
    def _not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("input must not be empty")
        return v

class CheckView(BaseModel):
    result: Optional[FactCheckResult] = None  # None until a check has run
    error: Optional[str] = None               # banner text, mirrors explanation on ERROR

    @classmethod
    def from_result(cls, result: FactCheckResult) -> "CheckView":
        error = result.explanation if result.status == FactCheckStatus.ERROR else None
        return cls(result=result, error=error)
