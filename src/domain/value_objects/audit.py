from __future__ import annotations

from enum import Enum


class AuditEntityType(str, Enum):
    ANIMAL = "ANIMAL"
    APPLICATION = "APPLICATION"
    INTERVIEW = "INTERVIEW"
    CONTRACT = "CONTRACT"
    USER = "USER"


class EmailStatus(str, Enum):
    QUEUED = "QUEUED"
    SENT = "SENT"
    FAILED = "FAILED"
