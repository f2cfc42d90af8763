"""
Exception types raised at the self map ingestion and generation boundaries.
"""

from __future__ import annotations


class SelfMapError(Exception):
    """Base class for all self map errors."""


class SelfMapValidationError(SelfMapError, ValueError):
    """The input document was rejected; no partial data is accepted."""


class DuplicateLabelError(SelfMapValidationError):
    """Two entries share a label, which is the identity key of the map."""

    def __init__(self, labels):
        self.labels = sorted(labels)
        super().__init__(f"Duplicate entry labels: {', '.join(repr(l) for l in self.labels)}")


class DanglingReferenceError(SelfMapValidationError):
    """An association points at a label that no entry carries (strict policy only)."""

    def __init__(self, references):
        self.references = list(references)
        pairs = ", ".join(f"{src!r} -> {dst!r}" for src, dst in self.references)
        super().__init__(f"Associations reference unknown entries: {pairs}")


class GenerationError(SelfMapError, RuntimeError):
    """The generative data source failed to produce a valid self map."""
