# topmark:header:start
#
#   project      : Wia
#   file         : conftest.py
#   file_relpath : tests/pipeline/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 The Wia authors
#
# topmark:header:end

"""Shared helpers for resolution pipeline tests.

Project trees are built under ``tmp_path`` with small writer helpers, one per
document kind. The `contoso_site` fixture builds a complete, resolvable tree:

    Contoso.sln
    Contoso.Web/
        Contoso.Web.csproj        (TargetFrameworkVersion v4.5)
        web.config                (siteSettings siteUrl="http://contoso.local/")
        packages.config           (EPiServer.CMS.Core 11.3.0)
    Contoso.Core/
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import TYPE_CHECKING, Any, NoReturn

import pytest

from tests.conftest import fixture
from wia.pipeline.context.model import WebsiteContext

if TYPE_CHECKING:
    from wia.pipeline.steps.base import BaseStep

MSBUILD_NS = "http://schemas.microsoft.com/developer/msbuild/2003"


def write_solution(root: Path, name: str) -> Path:
    """Create an (empty) solution file ``<name>.sln`` in ``root``."""
    path: Path = root / f"{name}.sln"
    path.write_text("Microsoft Visual Studio Solution File, Format Version 12.00\n", "utf-8")
    return path


def write_manifest(
    project_dir: Path,
    *,
    name: str | None = None,
    framework: str | None = "v4.5",
    custom_server_url: str | None = None,
) -> Path:
    """Create a classic MSBuild project manifest in ``project_dir``.

    Args:
        project_dir (Path): The web project directory (created if missing).
        name (str | None): Manifest base name; defaults to the directory name.
        framework (str | None): ``TargetFrameworkVersion`` text; None omits the element.
        custom_server_url (str | None): ``CustomServerUrl`` text; None omits the element.

    Returns:
        Path: The manifest file.
    """
    project_dir.mkdir(parents=True, exist_ok=True)
    lines: list[str] = [
        '<?xml version="1.0" encoding="utf-8"?>',
        f'<Project ToolsVersion="12.0" xmlns="{MSBUILD_NS}">',
        "  <PropertyGroup>",
        f"    <RootNamespace>{project_dir.name}</RootNamespace>",
    ]
    if framework is not None:
        lines.append(f"    <TargetFrameworkVersion>{framework}</TargetFrameworkVersion>")
    lines.append("  </PropertyGroup>")
    if custom_server_url is not None:
        lines += [
            "  <ProjectExtensions>",
            "    <VisualStudio>",
            "      <WebProjectProperties>",
            f"        <CustomServerUrl>{custom_server_url}</CustomServerUrl>",
            "      </WebProjectProperties>",
            "    </VisualStudio>",
            "  </ProjectExtensions>",
        ]
    lines.append("</Project>")
    path: Path = project_dir / f"{name or project_dir.name}.csproj"
    path.write_text("\n".join(lines) + "\n", "utf-8")
    return path


def write_web_config(project_dir: Path, *, site_url: str | None = None) -> Path:
    """Create a ``web.config`` in ``project_dir``.

    With ``site_url`` the file carries an inline EPiServer ``siteSettings``
    element; without it the file has no EPiServer section at all.
    """
    project_dir.mkdir(parents=True, exist_ok=True)
    episerver: str = (
        f'  <episerver>\n    <sites>\n      <site siteId="Contoso">\n'
        f'        <siteSettings siteUrl="{site_url}" />\n'
        f"      </site>\n    </sites>\n  </episerver>\n"
        if site_url is not None
        else ""
    )
    path: Path = project_dir / "web.config"
    path.write_text(
        '<?xml version="1.0" encoding="utf-8"?>\n<configuration>\n'
        f'{episerver}  <system.web>\n    <compilation debug="true" />\n  </system.web>\n'
        "</configuration>\n",
        "utf-8",
    )
    return path


def write_episerver_config(directory: Path, *, site_url: str | None) -> Path:
    """Create an ``episerver.config`` holding a ``siteSettings`` element in ``directory``."""
    directory.mkdir(parents=True, exist_ok=True)
    attribute: str = f' siteUrl="{site_url}"' if site_url is not None else ""
    path: Path = directory / "episerver.config"
    path.write_text(
        '<?xml version="1.0" encoding="utf-8"?>\n<episerver>\n  <sites>\n'
        f'    <site siteId="Contoso">\n      <siteSettings{attribute} />\n    </site>\n'
        "  </sites>\n</episerver>\n",
        "utf-8",
    )
    return path


def write_packages_config(project_dir: Path, packages: dict[str, str | None]) -> Path:
    """Create a ``packages.config`` listing ``packages`` (id -> version) in ``project_dir``."""
    project_dir.mkdir(parents=True, exist_ok=True)
    entries: list[str] = []
    for package_id, version in packages.items():
        version_attr: str = f' version="{version}"' if version is not None else ""
        entries.append(f'  <package id="{package_id}"{version_attr} targetFramework="net45" />')
    path: Path = project_dir / "packages.config"
    path.write_text(
        '<?xml version="1.0" encoding="utf-8"?>\n<packages>\n'
        + "\n".join(entries)
        + "\n</packages>\n",
        "utf-8",
    )
    return path


def make_context(root: Path, **fields: Any) -> WebsiteContext:
    """Return a context rooted at ``root`` with ``fields`` preset (overrides)."""
    return WebsiteContext(current_directory=root, **fields)


def run_step(step: BaseStep[Any], ctx: WebsiteContext) -> WebsiteContext:
    """Invoke ``step`` on ``ctx`` the way the runner does."""
    return step(ctx)


def _forbidden(*args: object, **kwargs: object) -> NoReturn:
    raise AssertionError("unexpected filesystem access")


@fixture()
def no_filesystem(monkeypatch: pytest.MonkeyPatch) -> None:
    """Make every directory listing, walk and existence check fail the test."""
    for attr in ("iterdir", "is_dir", "is_file", "exists", "read_text"):
        monkeypatch.setattr(Path, attr, _forbidden)
    monkeypatch.setattr(os, "walk", _forbidden)


def build_contoso_site(root: Path) -> Path:
    """Build a complete, resolvable project tree at ``root`` and return it."""
    root.mkdir(parents=True)
    write_solution(root, "Contoso")
    web: Path = root / "Contoso.Web"
    write_manifest(web, framework="v4.5")
    write_web_config(web, site_url="http://contoso.local/")
    write_packages_config(web, {"EPiServer.CMS.Core": "11.3.0", "EPiServer.Framework": "11.3.0"})
    (root / "Contoso.Core").mkdir()
    return root


@fixture()
def contoso_site(tmp_path: Path) -> Path:
    """Build a complete, resolvable project tree under ``tmp_path``."""
    return build_contoso_site(tmp_path / "contoso")
