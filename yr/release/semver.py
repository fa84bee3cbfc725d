from __future__ import annotations

import re
from dataclasses import dataclass

from yr.release.model import ReleaseBump


_VERSION_RE = re.compile(r"^(0|[1-9]\d*)\.(0|[1-9]\d*)\.(0|[1-9]\d*)$")


@dataclass(frozen=True, slots=True, order=True)
class SemVer:
    major: int
    minor: int
    patch: int

    def __str__(self) -> str:
        return f"{self.major}.{self.minor}.{self.patch}"

    def to_tag(self, prefix: str = "v") -> str:
        return f"{prefix}{self}"

    def bump(self, kind: ReleaseBump) -> "SemVer":
        match kind:
            case "major":
                return SemVer(self.major + 1, 0, 0)
            case "minor":
                return SemVer(self.major, self.minor + 1, 0)
            case "patch":
                return SemVer(self.major, self.minor, self.patch + 1)
            case _:
                raise AssertionError(f"unexpected bump kind: {kind}")


def parse_version(text: str) -> SemVer | None:
    """Parse a plain ``X.Y.Z`` version (no prefix, no pre-release)."""
    m = _VERSION_RE.match(text.strip())
    if m is None:
        return None
    return SemVer(int(m.group(1)), int(m.group(2)), int(m.group(3)))
