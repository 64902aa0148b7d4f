# topmark:header:start
#
#   project      : FormatKit
#   file         : __init__.py
#   file_relpath : src/formatkit/pipeline/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""The setup pipeline: detection, generation, script merging and orchestration.

Stages run strictly in sequence (see `formatkit.pipeline.orchestrator`); each
stage lives in its own module and communicates through the immutable records
in `formatkit.pipeline.models`.
"""
