from __future__ import annotations

from enum import Enum


class AnimalStatus(str, Enum):
    DRAFT = "Draft"
    FOSTERING = "Fostering"
    READY_FOR_ADOPTION = "Ready for Adoption"
    PUBLISHED = "Published"
    INTERVIEWING = "Interviewing"
    RESERVED = "Reserved"
    ADOPTED = "Adopted"
    ARCHIVED = "Archived"


class Sex(str, Enum):
    MALE = "Male"
    FEMALE = "Female"


class AnimalSize(str, Enum):
    SMALL = "Small"
    MEDIUM = "Medium"
    LARGE = "Large"
