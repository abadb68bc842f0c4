# topmark:header:start
#
#   project      : Algomagic
#   file         : pipelines.py
#   file_relpath : src/algomagic/pipeline/pipelines.py
#   license      : MIT
#   copyright    : (c) 2025 Algomagic contributors
#
# topmark:header:end

"""Named pipeline variants (immutable, typed step sequences).

Overview
--------
- ``EXTRACT``: extract
- ``NORMALIZE``: extract → normalize → reinject

```mermaid
flowchart LR
  R[raw] --> E[extractor] --> N[normalizer] --> I[reinjector] --> O[normalized]
```
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Final

from .steps import extractor, normalizer, reinjector

if TYPE_CHECKING:
    from .steps.base import BaseStep

# Lift fenced blocks out of the prose (no escape handling):
EXTRACT_PIPELINE: Final[tuple[BaseStep, ...]] = (
    extractor.ExtractorStep(),  # Replace fenced blocks with placeholders
)

NORMALIZE_PIPELINE: Final[tuple[BaseStep, ...]] = EXTRACT_PIPELINE + (
    normalizer.NormalizerStep(),  # Resolve escapes in prose and in each block interior
    reinjector.ReinjectorStep(),  # Restore blocks at their placeholders
)


class Pipeline(Enum):
    """Registry of named pipelines."""

    EXTRACT = EXTRACT_PIPELINE
    NORMALIZE = NORMALIZE_PIPELINE


def get_pipeline(name: str) -> tuple[BaseStep, ...]:
    """Return the pipeline registered under ``name`` (case-insensitive).

    Raises:
        KeyError: If no pipeline has that name.
    """
    return Pipeline[name.upper()].value
