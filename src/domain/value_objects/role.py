from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    ADMIN = "admin"
    FOSTER = "foster"
    INTERVIEWER = "interviewer"

    def is_admin(self) -> bool:
        return self is Role.ADMIN

    def can_manage_animals(self) -> bool:
        return self in {Role.ADMIN, Role.FOSTER}

    def can_change_animal_state(self) -> bool:
        return self in {Role.ADMIN, Role.FOSTER, Role.INTERVIEWER}

    def can_review_applications(self) -> bool:
        return self in {Role.ADMIN, Role.INTERVIEWER}

    def can_approve_applications(self) -> bool:
        return self is Role.ADMIN

    def can_conduct_interviews(self) -> bool:
        return self in {Role.ADMIN, Role.INTERVIEWER}

    def can_manage_volunteers(self) -> bool:
        return self is Role.ADMIN
