# topmark:header:start
#
#   project      : Wia
#   file         : __init__.py
#   file_relpath : src/wia/pipeline/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 The Wia authors
#
# topmark:header:end

"""Resolution pipeline for Wia.

Public modules:
    - wia.pipeline.context: the mutable website context and the halt latch
    - wia.pipeline.outcomes: typed step results
    - wia.pipeline.steps: the five resolution steps
    - wia.pipeline.pipelines: the ordered resolution pipeline
    - wia.pipeline.engine: CLI-free entry points
"""

from __future__ import annotations
