"""
Report job model - status and lifecycle of one report generation
"""

from __future__ import annotations

from datetime import datetime
from enum import Enum
from pathlib import Path

from pydantic import BaseModel, Field


class JobStatus(str, Enum):
    """Job status"""
    QUEUED = "queued"
    RUNNING = "running"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


class JobProgress(BaseModel):
    """Job progress"""
    stage: str = "INIT"
    message: str = ""


class ReportJob(BaseModel):
    """Report generation job"""
    job_id: str = Field(..., description="UUID")
    item_number: str

    status: JobStatus = JobStatus.QUEUED
    progress: JobProgress = Field(default_factory=JobProgress)

    # Output
    artifact_path: Path | None = None
    page_count: int | None = None

    errors: list[str] = Field(default_factory=list, description="error messages")

    created_at: datetime = Field(default_factory=datetime.now)
    started_at: datetime | None = None
    finished_at: datetime | None = None

    model_config = {"arbitrary_types_allowed": True}

    def mark_running(self, stage: str = "LOAD_DATA") -> None:
        """Mark as running"""
        self.status = JobStatus.RUNNING
        self.started_at = datetime.now()
        self.progress.stage = stage

    def mark_succeeded(self, artifact_path: Path, page_count: int) -> None:
        """Mark as succeeded"""
        self.status = JobStatus.SUCCEEDED
        self.finished_at = datetime.now()
        self.artifact_path = artifact_path
        self.page_count = page_count

    def mark_failed(self, error: str) -> None:
        """Mark as failed"""
        self.status = JobStatus.FAILED
        self.finished_at = datetime.now()
        self.errors.append(error)
