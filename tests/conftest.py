"""Shared test fixtures for all tests."""
from __future__ import annotations

from unittest.mock import MagicMock

import pytest

from channel_report.core.youtube import ChannelReportBuilder, JsonFetcher
from tests.fakes import API_BASE, FakeYouTube, channel_item


# ── Builder Fixtures ───────────────────────────────────────────────────────

@pytest.fixture
def fake_youtube() -> FakeYouTube:
    return FakeYouTube(channel=channel_item())


@pytest.fixture
def builder(fake_youtube) -> ChannelReportBuilder:
    return ChannelReportBuilder(fake_youtube, api_base=API_BASE)


# ── HTTP Fixtures ──────────────────────────────────────────────────────────

@pytest.fixture
def mock_session() -> MagicMock:
    session = MagicMock()
    response = MagicMock()
    response.status_code = 200
    response.raise_for_status.return_value = None
    response.json.return_value = {"items": []}
    session.get.return_value = response
    return session


@pytest.fixture
def mock_reporter() -> MagicMock:
    return MagicMock()


@pytest.fixture
def fetcher(mock_session, mock_reporter) -> JsonFetcher:
    return JsonFetcher("secret-key", timeout=10.0, reporter=mock_reporter, session=mock_session)
