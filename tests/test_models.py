"""Tests for manifest data models."""

import pytest

from manifest.models import Coordinate, PlatformReference, ResolvedDependency, Role


class TestCoordinate:
    """Coordinate parsing and identity."""

    def test_parse_bare_artifact(self):
        c = Coordinate.parse("mybatis")
        assert (c.group, c.artifact, c.version) == ("", "mybatis", None)
        assert c.key == "mybatis"

    def test_parse_group_artifact(self):
        c = Coordinate.parse("org.mybatis:mybatis")
        assert (c.group, c.artifact, c.version) == ("org.mybatis", "mybatis", None)
        assert str(c) == "org.mybatis:mybatis"

    def test_parse_with_version(self):
        c = Coordinate.parse(" com.h2database:h2:2.2.224 ")
        assert c.version == "2.2.224"
        assert c.key == "com.h2database:h2"

    @pytest.mark.parametrize("text", ["", "a:", "a:b:c:d"])
    def test_parse_invalid(self, text):
        with pytest.raises(ValueError):
            Coordinate.parse(text)

    def test_identity_ignores_version(self):
        assert Coordinate("g", "a", "1") == Coordinate("g", "a", "2")
        assert hash(Coordinate("g", "a", "1")) == hash(Coordinate("g", "a"))


class TestPlatformLookup:
    """Version table lookups."""

    def test_lookup_order(self):
        platform = PlatformReference(
            Coordinate.parse("g:bom"),
            {"org.mybatis:mybatis": "3.5.13", "org.mybatis": "3.0", "mybatis": "1.0"},
        )
        assert platform.lookup(Coordinate.parse("org.mybatis:mybatis")) == "3.5.13"
        assert platform.lookup(Coordinate.parse("org.mybatis:mybatis-spring")) == "3.0"
        assert platform.lookup(Coordinate.parse("other:mybatis")) == "1.0"

    def test_lookup_missing(self):
        platform = PlatformReference(Coordinate.parse("g:bom"))
        assert platform.lookup(Coordinate.parse("h2")) is None

    def test_default_active(self):
        assert PlatformReference(Coordinate.parse("g:bom")).active is True


def test_resolved_as_tuple():
    rec = ResolvedDependency(Coordinate.parse("h2"), "2.2.224", Role.TEST_ONLY)
    assert rec.as_tuple() == ("h2", "2.2.224", "test-only")
