"""
Video Record Domain Model
Uploads Enumeration & Statistics Merge
"""

from dataclasses import dataclass, asdict, replace
from typing import Dict, Any


@dataclass(frozen=True)
class VideoRecord:
    """
    Domain model representing a single uploaded video and its statistics.
    Immutable; statistics are merged by producing a new record.
    """
    video_id: str
    title: str
    published_at: str
    view_count: int = 0
    like_count: int = 0
    comment_count: int = 0

    @property
    def url(self) -> str:
        return f"https://www.youtube.com/watch?v={self.video_id}"

    def with_statistics(self, view_count: int, like_count: int, comment_count: int) -> "VideoRecord":
        """Return a copy of this record with the three counters replaced."""
        return replace(
            self,
            view_count=view_count,
            like_count=like_count,
            comment_count=comment_count,
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert object to dictionary for serialization (e.g., JSON, CSV)."""
        return asdict(self)
