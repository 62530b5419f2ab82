# topmark:header:start
#
#   project      : Wia
#   file         : test_documents.py
#   file_relpath : tests/documents/test_documents.py
#   license      : MIT
#   copyright    : (c) 2025 The Wia authors
#
# topmark:header:end

"""Tests for the document readers in `wia.documents`."""

from __future__ import annotations

from types import SimpleNamespace
from typing import TYPE_CHECKING

import pytest

from tests.conftest import parametrize
from tests.pipeline.conftest import (
    write_episerver_config,
    write_manifest,
    write_packages_config,
    write_web_config,
)
from wia.documents import (
    CmsConfig,
    DocumentError,
    PackageManifest,
    ProjectManifest,
    find_project_manifest,
    major_version,
)
from wia.documents import assembly
from wia.documents.assembly import read_file_version, read_major_version
from wia.documents.xml import find_first, load_document, local_name

if TYPE_CHECKING:
    from pathlib import Path


def test_local_name_strips_namespace() -> None:
    assert local_name("{http://schemas.microsoft.com/developer/msbuild/2003}Project") == "Project"
    assert local_name("Project") == "Project"


def test_load_document_rejects_malformed_xml(tmp_path: Path) -> None:
    path: Path = tmp_path / "broken.config"
    path.write_text("<configuration>", "utf-8")

    with pytest.raises(DocumentError) as exc_info:
        load_document(path, expected_roots=("configuration",))

    assert exc_info.value.path == path
    assert "not well-formed" in str(exc_info.value)


def test_unexpected_root_still_loads(tmp_path: Path) -> None:
    path: Path = tmp_path / "other.xml"
    path.write_text("<other><siteSettings siteUrl='x' /></other>", "utf-8")

    root = load_document(path, expected_roots=("configuration",))

    assert find_first(root, "siteSettings") is not None


def test_project_manifest_namespaced(tmp_path: Path) -> None:
    """Elements are found by local name in a namespaced MSBuild project."""
    path: Path = write_manifest(
        tmp_path / "Foo.Web", framework="v4.7.2", custom_server_url="x.local"
    )

    manifest: ProjectManifest = ProjectManifest.load(path)

    assert manifest.target_framework_version == "v4.7.2"
    assert manifest.custom_server_url == "x.local"


def test_project_manifest_without_namespace(tmp_path: Path) -> None:
    path: Path = tmp_path / "Sdk.csproj"
    path.write_text(
        '<Project Sdk="Microsoft.NET.Sdk.Web">\n'
        "  <PropertyGroup><TargetFrameworkVersion>v4.8</TargetFrameworkVersion></PropertyGroup>\n"
        "  <ProjectExtensions><CustomServerUrl>  </CustomServerUrl></ProjectExtensions>\n"
        "</Project>\n",
        "utf-8",
    )

    manifest: ProjectManifest = ProjectManifest.load(path)

    assert manifest.target_framework_version == "v4.8"
    assert manifest.custom_server_url is None


def test_find_project_manifest(tmp_path: Path) -> None:
    write_manifest(tmp_path, name="B")
    write_manifest(tmp_path, name="A")

    found: Path | None = find_project_manifest(tmp_path)

    assert found is not None
    assert found.name == "A.csproj"
    assert find_project_manifest(tmp_path / "missing") is None


def test_cms_config_from_web_config(tmp_path: Path) -> None:
    config: CmsConfig = CmsConfig.load(write_web_config(tmp_path, site_url="http://a.local/"))

    assert config.site_settings_found
    assert config.site_url == "http://a.local/"


def test_cms_config_without_section(tmp_path: Path) -> None:
    config: CmsConfig = CmsConfig.load(write_web_config(tmp_path))

    assert not config.site_settings_found
    assert config.site_url is None


def test_cms_config_without_site_url(tmp_path: Path) -> None:
    config: CmsConfig = CmsConfig.load(write_episerver_config(tmp_path, site_url=None))

    assert config.site_settings_found
    assert config.site_url is None


def test_package_manifest(tmp_path: Path) -> None:
    path: Path = write_packages_config(
        tmp_path, {"EPiServer.Framework": "11.1.0", "EPiServer.CMS.Core": "11.3.0"}
    )
    with path.open("a", encoding="utf-8") as fh:
        fh.write("<!-- trailing comment -->\n")

    manifest: PackageManifest = PackageManifest.load(path)

    assert [p.id for p in manifest.packages] == ["EPiServer.Framework", "EPiServer.CMS.Core"]
    core = manifest.find("EPiServer.CMS.Core")
    assert core is not None
    assert core.version == "11.3.0"
    assert manifest.find("episerver.cms.core") is None


def test_package_manifest_skips_entries_without_id(tmp_path: Path) -> None:
    path: Path = tmp_path / "packages.config"
    path.write_text('<packages><package version="1.0.0" /></packages>', "utf-8")

    assert PackageManifest.load(path).packages == ()


@parametrize(
    "version,expected",
    [("11.3.0", 11), ("9", 9), (" 12.0.0-pre ", 12), ("10.10.4.123", 10)],
)
def test_major_version(version: str, expected: int) -> None:
    assert major_version(version) == expected


@parametrize("version", ["", "eleven", "v11.0", "-1.0", ".5"])
def test_major_version_rejects(version: str) -> None:
    with pytest.raises(ValueError):
        major_version(version)


def test_read_file_version_of_non_pe_file(tmp_path: Path) -> None:
    path: Path = tmp_path / "EPiServer.dll"
    path.write_bytes(b"definitely not a PE image " * 10)

    assert read_file_version(path) is None
    assert read_major_version(path) is None


class _FakeImage:
    """Stands in for `pefile.PE`: exposes ``VS_FIXEDFILEINFO`` when given one."""

    def __init__(self, fixed_infos: list[SimpleNamespace] | None) -> None:
        if fixed_infos is not None:
            self.VS_FIXEDFILEINFO = fixed_infos
        self.closed = False

    def close(self) -> None:
        self.closed = True


def _patch_pe(monkeypatch: pytest.MonkeyPatch, image: _FakeImage) -> list[str]:
    opened: list[str] = []

    def fake_pe(name: str) -> _FakeImage:
        opened.append(name)
        return image

    monkeypatch.setattr(assembly.pefile, "PE", fake_pe)
    return opened


def test_read_file_version_splits_fixed_file_info(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    path: Path = tmp_path / "EPiServer.dll"
    image = _FakeImage(
        [SimpleNamespace(FileVersionMS=(11 << 16) | 3, FileVersionLS=(7 << 16) | 42)]
    )
    opened: list[str] = _patch_pe(monkeypatch, image)

    assert read_file_version(path) == (11, 3, 7, 42)
    assert read_major_version(path) == 11
    assert opened == [str(path), str(path)]
    assert image.closed


@parametrize("fixed_infos", [None, []])
def test_read_file_version_without_version_resource(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, fixed_infos: list[SimpleNamespace] | None
) -> None:
    image = _FakeImage(fixed_infos)
    _patch_pe(monkeypatch, image)

    assert read_file_version(tmp_path / "EPiServer.dll") is None
    assert image.closed
