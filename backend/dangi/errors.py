"""Errors raised by the balance engine.

Every error carries a machine-readable ``code`` and the HTTP status an outer
layer should answer with, so request handlers can render them without
knowing each class.
"""
from typing import Any, Optional


class DangiError(Exception):
    status_code = 500
    code = "INTERNAL_ERROR"

    def __init__(self, message: str, code: Optional[str] = None):
        super().__init__(message)
        self.message = message
        if code is not None:
            self.code = code

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": type(self).__name__,
            "message": self.message,
            "code": self.code,
            "status_code": self.status_code,
        }


class SplitError(DangiError):
    status_code = 400
    code = "INVALID_SPLIT"


class ManualSharesRequiredError(SplitError):
    code = "MANUAL_SHARES_REQUIRED"

    def __init__(self):
        super().__init__("برای تقسیم دستی باید سهم هر نفر مشخص شود")


class NoParticipantsError(SplitError):
    code = "NO_PARTICIPANTS"

    def __init__(self):
        super().__init__("حداقل یک نفر باید در تقسیم شرکت داشته باشد")


class ZeroTotalWeightError(SplitError):
    code = "ZERO_TOTAL_WEIGHT"

    def __init__(self):
        super().__init__("مجموع وزن شرکت‌کنندگان نمی‌تواند صفر باشد")


class SettlementError(DangiError):
    status_code = 400
    code = "INVALID_SETTLEMENT"


class SelfSettlementError(SettlementError):
    code = "SELF_SETTLEMENT"

    def __init__(self):
        super().__init__("پرداخت‌کننده و دریافت‌کننده نمی‌توانند یکی باشند")


class UnknownParticipantError(DangiError):
    status_code = 404
    code = "UNKNOWN_PARTICIPANT"

    def __init__(self, participant_id):
        super().__init__(f"شرکت‌کننده {participant_id} عضو پروژه نیست")
        self.participant_id = participant_id
