"""
Step name injection for logging across the codebase.

Provides a logging filter that automatically tags all logs with the current bootstrap step.
"""

import logging

_current_step: str | None = None


class StepNameFilter(logging.Filter):
    """
    Logging filter that injects the current bootstrap step into all log records.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        record.step = _current_step or "no-step"
        return True


def set_current_step(step: str | None) -> None:
    """
    Set the current step name for logging.

    This is called by the orchestrator on every transition.
    All logs will be tagged with this step until it changes or is cleared.
    """
    global _current_step
    _current_step = None if step is None else str(step)
