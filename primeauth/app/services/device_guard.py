"""
Device/Version Guard

HWID locking and client version enforcement. Evaluation is pure; the HWID
bind is applied separately with commit() once the password has been checked.
"""

from dataclasses import dataclass
from typing import Optional

from primeauth.domain.entities import AppUser, Application, AuthFailure

HWID_REQUIRED_MESSAGE = "Hardware ID is required for this application"


def short_hwid(hwid: Optional[str]) -> Optional[str]:
    """Truncated HWID for log lines"""
    if not hwid:
        return hwid
    return hwid[:8]


@dataclass(frozen=True)
class GuardDecision:
    ok: bool
    failure: Optional[AuthFailure] = None
    bind_hwid: Optional[str] = None


class DeviceGuard:
    @staticmethod
    def evaluate(
        application: Application,
        user: AppUser,
        version: Optional[str] = None,
        hwid: Optional[str] = None,
    ) -> GuardDecision:
        # Version is only enforced when the client sends one
        if version and version != application.version:
            return GuardDecision(ok=False, failure=AuthFailure.VERSION_MISMATCH)

        if not application.hwid_lock_enabled:
            return GuardDecision(ok=True)

        if not hwid:
            return GuardDecision(ok=False, failure=AuthFailure.HWID_REQUIRED)

        if user.hwid is None:
            return GuardDecision(ok=True, bind_hwid=hwid)

        if user.hwid != hwid:
            return GuardDecision(ok=False, failure=AuthFailure.HWID_MISMATCH)

        return GuardDecision(ok=True)

    @staticmethod
    def commit(user: AppUser, decision: GuardDecision) -> bool:
        """Apply a scheduled first-login bind. Returns True when the user changed."""
        if not decision.ok or decision.bind_hwid is None or user.hwid is not None:
            return False
        user.hwid = decision.bind_hwid
        return True

    @staticmethod
    def failure_message(application: Application, failure: AuthFailure) -> str:
        if failure == AuthFailure.VERSION_MISMATCH:
            return application.version_mismatch_message
        if failure == AuthFailure.HWID_MISMATCH:
            return application.hwid_mismatch_message
        return HWID_REQUIRED_MESSAGE
