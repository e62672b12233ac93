"""
Channel Report Domain Model
Assembled snapshot of a channel and its uploads
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple

from .video_record import VideoRecord


@dataclass(frozen=True)
class ChannelReport:
    """
    Domain model representing a fully assembled channel report.
    Represents a COMPLETE report only: it is never built from partial results.
    """
    channel_id: str
    subscriber_count: int
    creation_date: Optional[str]
    total_view_count: int
    total_upload_count: int
    uploads: Tuple[VideoRecord, ...] = field(default_factory=tuple)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "channel_id": self.channel_id,
            "subscriber_count": self.subscriber_count,
            "creation_date": self.creation_date,
            "total_view_count": self.total_view_count,
            "total_upload_count": self.total_upload_count,
            "uploads": [video.to_dict() for video in self.uploads],
        }

    def __repr__(self) -> str:
        return (
            f"ChannelReport(channel_id={self.channel_id!r}, "
            f"subscribers={self.subscriber_count}, uploads={len(self.uploads)})"
        )
