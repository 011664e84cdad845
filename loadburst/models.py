"""
Pydantic Models for Load Driver Runs
=====================================

Ephemeral records produced by a single driver invocation.
Timestamps are whole epoch seconds.
"""

from typing import List
from pydantic import BaseModel, Field, validator


# ============================================
# PER-REQUEST MODELS
# ============================================

class RequestResult(BaseModel):
    """Outcome of one unit of work"""
    index: int = Field(..., ge=0, description="Launch index (0..N-1)")
    start: int = Field(..., description="Start time (epoch seconds)")
    end: int = Field(..., description="End time (epoch seconds)")
    status: str = Field("", description="HTTP status code, empty on transport failure")

    @validator("end")
    def end_not_before_start(cls, v, values):
        if "start" in values and v < values["start"]:
            raise ValueError("Request cannot end before it starts")
        return v

    @property
    def elapsed(self) -> int:
        return self.end - self.start

    class Config:
        json_schema_extra = {
            "example": {
                "index": 7,
                "start": 1700000000,
                "end": 1700000001,
                "status": "200"
            }
        }


# ============================================
# RUN MODELS
# ============================================

class RunSummary(BaseModel):
    """Totals for one burst"""
    requests: int = Field(..., ge=0, description="Number of requests launched")
    start: int = Field(..., description="Run start time (epoch seconds)")
    end: int = Field(..., description="Run end time (epoch seconds)")
    results: List[RequestResult] = Field(default_factory=list)

    @validator("end")
    def end_not_before_start(cls, v, values):
        if "start" in values and v < values["start"]:
            raise ValueError("Run cannot end before it starts")
        return v

    @property
    def elapsed(self) -> int:
        return self.end - self.start

    class Config:
        json_schema_extra = {
            "example": {
                "requests": 3,
                "start": 1700000000,
                "end": 1700000000,
                "results": []
            }
        }
