import random
import re

from dummygen.versions import UNSTABLE_SEMVER, Version, fake_version

_PATTERN = re.compile(r"^(\d+)\.(\d+)\.(\d+)(?:-(alpha|beta|rc)\.(\d))?$")


def test_version_text_forms():
    assert str(Version(1, 2, 3)) == "1.2.3"
    assert str(Version(1, 2, 3, "rc.4")) == "1.2.3-rc.4"


def test_fields_stay_in_range():
    rng = random.Random(0)
    for _ in range(500):
        version = fake_version(rng)
        assert 0 <= version.major < 9
        assert 0 <= version.minor < 20
        assert 0 <= version.patch < 20
        assert version.build == ""


def test_text_matches_semver_shape():
    rng = random.Random(1)
    for _ in range(500):
        version = fake_version(rng)
        match = _PATTERN.match(str(version))
        assert match
        assert int(match.group(1)) == version.major


def test_prereleases_are_rare_and_labelled():
    rng = random.Random(2)
    versions = [fake_version(rng) for _ in range(1000)]
    pre = [v.pre for v in versions if v.pre]
    assert 30 < len(pre) < 200
    for label in pre:
        name, number = label.split(".")
        assert name in UNSTABLE_SEMVER
        assert 0 <= int(number) < 9


def test_same_seed_same_versions():
    first, second = random.Random(42), random.Random(42)
    assert [fake_version(first) for _ in range(16)] == [fake_version(second) for _ in range(16)]