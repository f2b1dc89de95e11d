"""Value objects — self-validating domain primitives."""

from __future__ import annotations

import re
from dataclasses import dataclass

from repo_files.domain.exceptions import ConfigurationError

_NAME_RE = re.compile(r"^[A-Za-z0-9\-_.]+$")


@dataclass(frozen=True, slots=True)
class RepositoryReference:
    """The ``owner/repo`` pair an adapter is bound to.

    Rejects names GitHub would never accept so that a typo in the settings
    surfaces at startup instead of as a 404 on the first request.
    """

    owner: str
    repo: str

    def __post_init__(self) -> None:
        for label, value in (("owner", self.owner), ("repository name", self.repo)):
            if not _NAME_RE.match(value or "") or value in (".", ".."):
                raise ConfigurationError(f"invalid GitHub {label}: '{value}'")

    @classmethod
    def from_string(cls, full_name: str) -> RepositoryReference:
        """Parse ``owner/repo``."""
        owner, sep, repo = full_name.strip().partition("/")
        if not sep or "/" in repo:
            raise ConfigurationError(
                f"invalid repository '{full_name}'. Expected format: owner/repo"
            )
        return cls(owner=owner, repo=repo)

    @property
    def full_name(self) -> str:
        return f"{self.owner}/{self.repo}"
