from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Optional

from ..core.exceptions import ValidationError
from .repository import AttendanceLogRepository
from .validator import SessionBreakValidator, ValidatedPayload

logger = logging.getLogger(__name__)


class AttendanceEditService:
    def __init__(self, logs: AttendanceLogRepository, validator: Optional[SessionBreakValidator] = None):
        self._logs = logs
        self._validator = validator or SessionBreakValidator()

    def save_edits(self, log_id: int, raw_log: Optional[Mapping]) -> ValidatedPayload:
        log = self._logs.get_by_id(int(log_id))
        if not log:
            raise ValidationError("Không tìm thấy bản ghi chấm công")

        payload = self._validator.build_validated_payload(raw_log, attendance_date=log.attendance_date.isoformat())

        if not self._logs.replace_entries(log_id=int(log_id), payload=payload):
            raise ValidationError("Không tìm thấy bản ghi chấm công")

        logger.info(
            "Saved attendance log %s: sessions=%d breaks=%d",
            log_id,
            len(payload.sessions),
            len(payload.breaks),
        )
        return payload
