from __future__ import annotations

from enum import Enum


class VolunteerStatus(str, Enum):
    ACTIVE = "active"
    INACTIVE = "inactive"
