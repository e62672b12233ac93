"""
YouTube API integration module
"""

from .channel_report import ChannelReport
from .error_reporter import ErrorReporter, LoggingErrorReporter
from .errors import DecodeError, TransportError, YouTubeApiError
from .json_fetcher import JsonFetcher
from .report_builder import ChannelReportBuilder
from .video_record import VideoRecord

__all__ = [
    "ChannelReport",
    "ChannelReportBuilder",
    "DecodeError",
    "ErrorReporter",
    "JsonFetcher",
    "LoggingErrorReporter",
    "TransportError",
    "VideoRecord",
    "YouTubeApiError",
]
