# src/upstream/github/docs_path.py

from dataclasses import dataclass
from typing import Optional


DOCS_ROOT = "docs"
LATEST = "latest"


@dataclass(frozen=True)
class DocsVersion:
    """
    Which docs tree to read: the unversioned (latest) one or a pinned version.
    """

    name: Optional[str] = None

    @classmethod
    def latest(cls) -> "DocsVersion":
        return cls()

    @classmethod
    def parse(cls, value: Optional[str]) -> "DocsVersion":
        # empty string behaves like "no version"
        if not value or value == LATEST:
            return cls.latest()
        return cls(name=value)

    @property
    def is_latest(self) -> bool:
        return self.name is None

    @property
    def path_segment(self) -> str:
        return "" if self.is_latest else f"/{self.name}"


def build_docs_path(filename: str, repo_path: str, version: Optional[str] = None) -> str:
    """
    docs + [/<version>] + repo_path + filename

    No separators are added; callers embed them in repo_path.
    """
    return f"{DOCS_ROOT}{DocsVersion.parse(version).path_segment}{repo_path}{filename}"
