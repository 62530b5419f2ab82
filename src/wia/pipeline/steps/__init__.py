# topmark:header:start
#
#   project      : Wia
#   file         : __init__.py
#   file_relpath : src/wia/pipeline/steps/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 The Wia authors
#
# topmark:header:end

"""Resolution steps, in pipeline order."""

from __future__ import annotations

from wia.pipeline.steps.base import BaseStep
from wia.pipeline.steps.framework_version import FrameworkVersionStep
from wia.pipeline.steps.platform_version import PlatformVersionStep
from wia.pipeline.steps.project_name import ProjectNameStep
from wia.pipeline.steps.project_url import ProjectUrlStep
from wia.pipeline.steps.web_project import WebProjectStep

__all__: list[str] = [
    "BaseStep",
    "FrameworkVersionStep",
    "PlatformVersionStep",
    "ProjectNameStep",
    "ProjectUrlStep",
    "WebProjectStep",
]
