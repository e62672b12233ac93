"""
Channel Report Builder
Channel lookup, uploads enumeration and batched statistics merge
"""

import logging
from typing import Any, Dict, List, Optional

from .channel_report import ChannelReport
from .json_fetcher import JsonFetcher
from .video_record import VideoRecord

logger = logging.getLogger(__name__)

API_BASE = "https://www.googleapis.com/youtube/v3"
MAX_RESULTS = 50


class ChannelReportBuilder:
    """
    Service responsible for assembling a full report for one channel.

    Responsibilities:
    - Look up channel statistics and its uploads playlist.
    - Iterate through the uploads playlist with pagination.
    - Batch statistics requests (50 ids per call) and merge them by video id.

    Any fetch failure aborts the build; partial reports are never returned.
    """

    def __init__(
        self,
        fetcher: JsonFetcher,
        api_base: str = API_BASE,
        page_size: int = MAX_RESULTS,
        batch_size: int = MAX_RESULTS
    ):
        if page_size <= 0 or batch_size <= 0:
            raise ValueError(
                f"page_size and batch_size must be positive, got {page_size} and {batch_size}"
            )
        self._fetcher = fetcher
        self._api_base = api_base.rstrip("/")
        self._page_size = page_size
        self._batch_size = batch_size

    def build_report(self, channel_id: str) -> Optional[ChannelReport]:
        """
        Build the report for ``channel_id``.

        Returns:
            ChannelReport, or None when the channel does not exist.
        """
        logger.info(f"Building report for channel: {channel_id}")

        channel = self.fetch_channel(channel_id)
        if channel is None:
            logger.warning(f"Channel not found or inaccessible: {channel_id}")
            return None

        snippet = channel.get("snippet") or {}
        stats = channel.get("statistics") or {}
        playlist_id = (
            (channel.get("contentDetails") or {})
            .get("relatedPlaylists") or {}
        ).get("uploads")

        if playlist_id:
            uploads_by_id = self.fetch_uploads(playlist_id)
        else:
            logger.warning(f"Channel {channel_id} exposes no uploads playlist")
            uploads_by_id = {}
        logger.info(f"Discovered {len(uploads_by_id)} videos in uploads playlist")

        self.merge_statistics(uploads_by_id)

        return ChannelReport(
            channel_id=channel_id,
            subscriber_count=_safe_int(stats.get("subscriberCount")),
            creation_date=snippet.get("publishedAt"),
            total_view_count=_safe_int(stats.get("viewCount")),
            total_upload_count=_safe_int(stats.get("videoCount")),
            uploads=tuple(uploads_by_id.values()),
        )

    def fetch_channel(self, channel_id: str) -> Optional[Dict[str, Any]]:
        """Return the raw channels.list item, or None if there is no match."""
        data = self._fetcher.fetch_json(
            f"{self._api_base}/channels",
            {"part": "statistics,snippet,contentDetails", "id": channel_id},
        )
        items = data.get("items") or []
        # an empty item carries no channel data
        return items[0] if items and items[0] else None

    def fetch_uploads(self, playlist_id: str) -> Dict[str, VideoRecord]:
        """
        Enumerate every playlist item, keyed by video id in enumeration order.
        A repeated id overwrites the earlier record but keeps its position.
        """
        uploads_by_id: Dict[str, VideoRecord] = {}
        page_token: Optional[str] = None
        pages = 0

        while True:
            params = {
                "part": "snippet",
                "playlistId": playlist_id,
                "maxResults": self._page_size,
            }
            if page_token:
                params["pageToken"] = page_token

            data = self._fetcher.fetch_json(f"{self._api_base}/playlistItems", params)
            pages += 1

            for item in data.get("items") or []:
                snippet = item.get("snippet") or {}
                video_id = (snippet.get("resourceId") or {}).get("videoId")
                if not video_id:
                    continue
                uploads_by_id[video_id] = VideoRecord(
                    video_id=video_id,
                    title=snippet.get("title", ""),
                    published_at=snippet.get("publishedAt", ""),
                )

            page_token = data.get("nextPageToken")
            if not page_token:
                break

        logger.debug(f"Playlist {playlist_id}: {pages} page(s) fetched")
        return uploads_by_id

    def merge_statistics(self, uploads_by_id: Dict[str, VideoRecord]) -> None:
        """
        Fetch statistics for every known video and merge them in place.
        Ids not in ``uploads_by_id`` are ignored; unmatched videos keep zeros.
        """
        video_ids = list(uploads_by_id)
        total = len(video_ids)

        for number, chunk in enumerate(_chunks(video_ids, self._batch_size), start=1):
            logger.info(f"Processing statistics batch {number}: {len(chunk)} of {total} videos")
            data = self._fetcher.fetch_json(
                f"{self._api_base}/videos",
                {"part": "statistics", "id": ",".join(chunk)},
            )

            for item in data.get("items") or []:
                video_id = item.get("id")
                record = uploads_by_id.get(video_id)
                if record is None:
                    continue
                stats = item.get("statistics") or {}
                # dislikeCount is not returned by the API
                uploads_by_id[video_id] = record.with_statistics(
                    view_count=_safe_int(stats.get("viewCount")),
                    like_count=_safe_int(stats.get("likeCount")),
                    comment_count=_safe_int(stats.get("commentCount")),
                )


def _safe_int(value) -> int:
    try:
        return int(value)
    except (TypeError, ValueError):
        return 0


def _chunks(items: List[str], size: int) -> List[List[str]]:
    return [items[i : i + size] for i in range(0, len(items), size)]
