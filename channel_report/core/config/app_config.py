"""
Application Configuration Model
Represents a validated configuration state
"""

from typing import Optional


class AppConfig:
    """
    Immutable configuration object for the channel report pipeline.

    Represents a VALID configuration state only.
    All validation must be performed before instantiation.
    """

    def __init__(
        self,
        api_key: str,
        channel: Optional[str] = None,
        timeout: float = 10.0,
        api_base: str = "https://www.googleapis.com/youtube/v3"
    ):
        """
        Initialize AppConfig with validated values.

        Args:
            api_key: YouTube API key (non-empty)
            channel: Channel ID to report on (optional, may come from the CLI)
            timeout: Per-request timeout in seconds (> 0)
            api_base: Base URL of the YouTube Data API
        """
        self._api_key = api_key
        self._channel = channel
        self._timeout = timeout
        self._api_base = api_base

    @property
    def api_key(self) -> str:
        """YouTube API key."""
        return self._api_key

    @property
    def channel(self) -> Optional[str]:
        """Channel ID."""
        return self._channel

    @property
    def timeout(self) -> float:
        """Per-request timeout in seconds."""
        return self._timeout

    @property
    def api_base(self) -> str:
        return self._api_base

    def with_channel(self, channel: str) -> "AppConfig":
        """Return a copy targeting a different channel."""
        return AppConfig(
            api_key=self._api_key,
            channel=channel,
            timeout=self._timeout,
            api_base=self._api_base,
        )

    def __repr__(self) -> str:
        # api_key deliberately omitted
        return (
            f"AppConfig(channel={self.channel!r}, "
            f"timeout={self.timeout}, "
            f"api_base={self.api_base!r})"
        )
