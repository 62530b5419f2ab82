# topmark:header:start
#
#   project      : Wia
#   file         : pipelines.py
#   file_relpath : src/wia/pipeline/pipelines.py
#   license      : MIT
#   copyright    : (c) 2025 The Wia authors
#
# topmark:header:end

"""The resolution pipeline (immutable, typed step sequence).

```mermaid
flowchart LR
  N[name] --> W[web project] --> U[URL] --> F[framework] --> P[platform]
```

Later steps read directories resolved by earlier ones, so the order is fixed.
"""

from __future__ import annotations

from typing import Final

from wia.pipeline.protocols import Step
from wia.pipeline.steps import (
    FrameworkVersionStep,
    PlatformVersionStep,
    ProjectNameStep,
    ProjectUrlStep,
    WebProjectStep,
)

RESOLVE_PIPELINE: Final[tuple[Step, ...]] = (
    ProjectNameStep(),  # Solution file in the root directory
    WebProjectStep(),  # Web project directory
    ProjectUrlStep(),  # Override, CustomServerUrl or siteSettings/@siteUrl
    FrameworkVersionStep(),  # TargetFrameworkVersion
    PlatformVersionStep(),  # EPiServer.dll or packages.config
)
