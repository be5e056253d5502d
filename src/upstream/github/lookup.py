# src/upstream/github/lookup.py

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class LookupStatus(str, Enum):
    FOUND = "found"
    NOT_FOUND = "not_found"
    LOOKUP_ERROR = "lookup_error"


@dataclass(frozen=True)
class DownloadUrlLookup:
    status: LookupStatus
    path: str
    url: Optional[str] = None
    reason: Optional[str] = None

    @classmethod
    def found(cls, path: str, url: str) -> "DownloadUrlLookup":
        return cls(status=LookupStatus.FOUND, path=path, url=url)

    @classmethod
    def not_found(cls, path: str, reason: Optional[str] = None) -> "DownloadUrlLookup":
        return cls(status=LookupStatus.NOT_FOUND, path=path, reason=reason)

    @classmethod
    def error(cls, path: str, reason: str) -> "DownloadUrlLookup":
        return cls(status=LookupStatus.LOOKUP_ERROR, path=path, reason=reason)

    @property
    def is_found(self) -> bool:
        return self.status is LookupStatus.FOUND
