"""Tests for version catalog parsing."""

import pytest

from manifest.catalog import catalog_from_dict, load_catalog, normalize_alias
from manifest.errors import ManifestError

CATALOG_TOML = """\
[versions]
mybatis = "3.5.13"
junit = "5.10.0"

[libraries]
microsphere-java-dependencies = { module = "io.github.microsphere-projects:microsphere-java-dependencies", version = "0.0.8" }
mybatis = { module = "org.mybatis:mybatis", version.ref = "mybatis" }
junit-jupiter-engine = { group = "org.junit.jupiter", name = "junit-jupiter-engine", version.ref = "junit" }
h2 = "com.h2database:h2:2.2.224"
logback-classic = { module = "ch.qos.logback:logback-classic" }
"""


def test_load_catalog(tmp_path):
    path = tmp_path / "libs.versions.toml"
    path.write_text(CATALOG_TOML, encoding="utf-8")
    catalog = load_catalog(str(path))

    assert catalog.lookup("mybatis").version == "3.5.13"
    assert catalog.lookup("junit.jupiter.engine").key == "org.junit.jupiter:junit-jupiter-engine"
    assert catalog.lookup("junit_jupiter_engine").version == "5.10.0"
    assert catalog.lookup("h2").version == "2.2.224"
    assert catalog.lookup("logback.classic").version is None
    assert catalog.lookup("microsphere.java.dependencies").version == "0.0.8"


def test_normalize_alias():
    assert normalize_alias("Junit-Jupiter_engine") == "junit.jupiter.engine"


def test_unknown_alias():
    with pytest.raises(ManifestError, match="nope"):
        catalog_from_dict({}).lookup("nope")


def test_unknown_version_ref():
    data = {"libraries": {"x": {"module": "g:x", "version": {"ref": "missing"}}}}
    with pytest.raises(ManifestError, match="missing"):
        catalog_from_dict(data)


def test_rich_version():
    data = {"libraries": {"x": {"module": "g:x", "version": {"strictly": "1.2"}}}}
    assert catalog_from_dict(data).lookup("x").version == "1.2"


def test_library_without_module():
    with pytest.raises(ManifestError):
        catalog_from_dict({"libraries": {"x": {"version": "1"}}})


def test_missing_catalog(tmp_path):
    with pytest.raises(ManifestError, match="not found"):
        load_catalog(str(tmp_path / "libs.versions.toml"))


def test_invalid_toml(tmp_path):
    path = tmp_path / "libs.versions.toml"
    path.write_text("[libraries\n", encoding="utf-8")
    with pytest.raises(ManifestError):
        load_catalog(str(path))
