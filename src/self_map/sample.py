"""
Built-in sample self map shown before any upload or generation.
"""

from __future__ import annotations

from .models import Association, Entry, SelfMapData

DEFAULT_DATA = SelfMapData(
    entries=(
        Entry("Partner", "People", 0.96, 0.90),
        Entry("Child A", "People", 0.98, 0.95),
        Entry("Best Friend", "People", 0.85, 0.88),
        Entry("Parent", "People", 0.92, 0.75),
        Entry("Career: Staff Engineer", "Accomplishments", 0.88, 0.65),
        Entry("Financial Independence", "Accomplishments", 0.82, 0.78),
        Entry("Published Research", "Accomplishments", 0.68, 0.55),
        Entry("Childhood Trauma", "Life Story", 0.72, -0.85),
        Entry("Recovery (5 yrs)", "Life Story", 0.76, 0.82),
        Entry("College Years", "Life Story", 0.55, 0.45),
        Entry("Environmentalism", "Ideas/Likes", 0.74, 0.85),
        Entry("Philosophy", "Ideas/Likes", 0.62, 0.72),
        Entry("Music", "Ideas/Likes", 0.58, 0.90),
        Entry("Past Relationship", "Other", 0.45, -0.55),
    ),
    associations=(
        Association("Career: Staff Engineer", "Financial Independence", "affirms", 0.8),
        Association("Childhood Trauma", "Recovery (5 yrs)", "threatens", 0.6),
        Association("Partner", "Child A", "affirms", 0.95),
        Association("Environmentalism", "Philosophy", "associates_with", 0.7),
        Association("Best Friend", "Music", "affirms", 0.65),
        Association("Childhood Trauma", "Past Relationship", "associates_with", 0.4),
        Association("Recovery (5 yrs)", "Partner", "affirms", 0.8),
    ),
)
