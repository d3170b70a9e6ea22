from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from ..core.enums import StatusPrecedence
from .evaluators.base import StatusEvaluator
from .evaluators.holiday_first import HolidayFirstEvaluator
from .evaluators.leave_first import LeaveFirstEvaluator


@dataclass
class EvaluatorFactory:
    """Factory Pattern: choose the raw status evaluator from the configured precedence."""

    def for_precedence(self, precedence: Union[StatusPrecedence, str, None]) -> StatusEvaluator:
        if precedence is None:
            return HolidayFirstEvaluator()

        try:
            policy = StatusPrecedence(str(getattr(precedence, "value", precedence)).strip().lower())
        except ValueError as e:
            raise ValueError(f"Unknown status precedence: {precedence!r}") from e

        if policy == StatusPrecedence.LEAVE_FIRST:
            return LeaveFirstEvaluator()
        return HolidayFirstEvaluator()
