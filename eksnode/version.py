"""Build version information."""

from __future__ import annotations

import json
from dataclasses import dataclass

_BUILT_AT = ""
_GIT_COMMIT = ""
_GIT_TAG = "0.1.24"


@dataclass(frozen=True)
class VersionInfo:
    """Version details of this build."""

    built_at: str = ""
    git_commit: str = ""
    git_tag: str = ""

    def to_dict(self) -> dict:
        """Return the serialisable form; empty commit and tag are omitted."""
        data = {"BuiltAt": self.built_at}
        if self.git_commit:
            data["GitCommit"] = self.git_commit
        if self.git_tag:
            data["GitTag"] = self.git_tag
        return data


_INFO = VersionInfo(built_at=_BUILT_AT, git_commit=_GIT_COMMIT, git_tag=_GIT_TAG)


def get() -> VersionInfo:
    """Return the version information of this build."""
    return _INFO


def version_string() -> str:
    """Return the version information as compact JSON."""
    return json.dumps(_INFO.to_dict(), separators=(",", ":"))