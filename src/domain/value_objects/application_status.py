from __future__ import annotations

from enum import Enum


class ApplicationStatus(str, Enum):
    SUBMITTED = "submitted"
    INTERVIEW = "interview"
    REVIEW = "review"
    APPROVED = "approved"
    REJECTED = "rejected"

    @classmethod
    def pending(cls) -> tuple[ApplicationStatus, ...]:
        return (cls.SUBMITTED, cls.REVIEW)


class FinalDecision(str, Enum):
    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"
