"""Run execution domain exports."""

from .run_contracts import RunOutcome, RunRequest
from .validation_run_use_case import RunExecutionError, execute_validation_run

__all__ = [
    "RunRequest",
    "RunOutcome",
    "RunExecutionError",
    "execute_validation_run",
]
