from typing import List, Optional
from pydantic import BaseModel


class RunError(BaseModel):
    stage: str
    path: Optional[str] = None
    error: str


class RunReport(BaseModel):
    run_id: Optional[str]
    status: str = "running"
    candidates_found: int = 0
    expected_count: int = 0
    processed_count: int = 0
    skipped_count: int = 0
    copied_count: int = 0
    manifest_path: Optional[str] = None
    manifest_written: bool = False
    finalize_count: int = 0
    errors: List[RunError] = []

    @classmethod
    def start_new(cls, run_id: Optional[str] = None) -> "RunReport":
        return cls(run_id=run_id)

    def add_error(self, stage: str, error: str, path: Optional[str] = None) -> None:
        self.errors.append(RunError(stage=stage, path=path, error=error))

    def abort(self, error: str) -> None:
        self.add_error(stage="config", error=error)
        self.status = "aborted"

    def finalize(self) -> None:
        if self.status == "aborted":
            return
        if self.errors:
            self.status = "completed_with_errors"
        else:
            self.status = "completed"

    @property
    def ok(self) -> bool:
        return self.status == "completed"
