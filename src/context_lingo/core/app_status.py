"""Application status for the paragraph translation workflow."""

from enum import Enum


class AppStatus(str, Enum):
    IDLE = "idle"
    TRANSLATING = "translating"
    TRANSLATED = "translated"
    ERROR = "error"
