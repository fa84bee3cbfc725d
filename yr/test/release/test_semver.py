import pytest

from yr.release.semver import SemVer, parse_version


@pytest.mark.parametrize(
    ("current", "kind", "expected"),
    [
        ("0.2.3", "patch", "0.2.4"),
        ("0.2.5", "minor", "0.3.0"),
        ("0.4.0", "major", "1.0.0"),
        ("1.9.9", "minor", "1.10.0"),
    ],
)
def test_bump(current: str, kind: str, expected: str) -> None:
    version = parse_version(current)
    assert version is not None
    assert str(version.bump(kind)) == expected  # type: ignore[arg-type]


def test_parse_version() -> None:
    assert parse_version("0.1.0") == SemVer(0, 1, 0)
    assert parse_version(" 12.0.7\n") == SemVer(12, 0, 7)


@pytest.mark.parametrize("text", ["", "1.2", "v1.2.3", "1.2.3-beta.1", "01.2.3", "1.2.x"])
def test_parse_version_rejects(text: str) -> None:
    assert parse_version(text) is None


def test_ordering_and_tag() -> None:
    assert SemVer(0, 9, 9) < SemVer(0, 10, 0) < SemVer(1, 0, 0)
    assert SemVer(1, 2, 3).to_tag() == "v1.2.3"
    assert SemVer(1, 2, 3).to_tag("") == "1.2.3"
