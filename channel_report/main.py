"""
YouTube Channel Report - CLI
Builds a channel report and prints it to stdout
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

import pandas as pd

from channel_report.core.config import AppConfig, ConfigLoader, ConfigValidationError
from channel_report.core.youtube import (
    ChannelReport,
    ChannelReportBuilder,
    JsonFetcher,
    YouTubeApiError,
)

DEFAULT_CONFIG = Path("config.yaml")
CSV_COLUMNS = ["video_id", "title", "published_at", "view_count", "like_count", "comment_count"]

logger = logging.getLogger(__name__)


def setup_logging(level: str = "INFO") -> logging.Logger:
    """Configure console logging; stdout is reserved for the report."""
    log_format = "%(asctime)s - %(levelname)s - %(message)s"
    date_format = "%Y-%m-%d %H:%M:%S"

    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=log_format,
        datefmt=date_format,
        handlers=[logging.StreamHandler(sys.stderr)],
        force=True,
    )

    return logger


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="yt-channel-report",
        description="Fetch subscriber, view and per-video statistics for a YouTube channel.",
    )
    parser.add_argument("--config", type=Path, default=None, help="Path to YAML config (default: ./config.yaml if present).")
    parser.add_argument("--channel", default=None, help="Channel ID (overrides the config file).")
    parser.add_argument("--format", choices=["json", "csv"], default="json", help="Output format.")
    parser.add_argument("--log-level", default="INFO", help="Logging level.")
    return parser.parse_args(argv)


def load_configuration(args: argparse.Namespace) -> AppConfig:
    """Load and validate configuration, applying command line overrides."""
    config_path = args.config
    if config_path is None and DEFAULT_CONFIG.exists():
        config_path = DEFAULT_CONFIG

    if config_path is not None:
        logger.info(f"Loading configuration from: {config_path}")
    config = ConfigLoader(config_path).load()

    if args.channel:
        config = config.with_channel(args.channel.strip())
    if not config.channel:
        raise ConfigValidationError("No channel given (use --channel or 'channel' in config)")

    logger.info("Configuration validated successfully")
    logger.info(f"  Channel: {config.channel}")
    logger.info(f"  Timeout: {config.timeout}s")
    return config


def render_report(report: ChannelReport, fmt: str) -> str:
    """Render the report as JSON, or its uploads table as CSV."""
    if fmt == "csv":
        df = pd.DataFrame([v.to_dict() for v in report.uploads], columns=CSV_COLUMNS)
        return df.to_csv(index=False)
    return json.dumps(report.to_dict(), indent=2, ensure_ascii=False) + "\n"


def main(argv: Optional[List[str]] = None) -> int:
    """Main execution entry for the channel report."""
    args = parse_args(argv)
    setup_logging(args.log_level)

    try:
        config = load_configuration(args)
    except FileNotFoundError as e:
        logger.error(f"Configuration file not found: {e}")
        return 1
    except ConfigValidationError as e:
        logger.error(f"Configuration validation failed: {e}")
        return 1

    with JsonFetcher(config.api_key, timeout=config.timeout) as fetcher:
        builder = ChannelReportBuilder(fetcher, api_base=config.api_base)
        try:
            report = builder.build_report(config.channel)
        except YouTubeApiError as e:
            logger.error(f"Report aborted: {e}")
            return 1

    if report is None:
        logger.error(f"Channel not found: {config.channel}")
        return 1

    logger.info(f"Report complete: {len(report.uploads)} videos, {report.subscriber_count:,} subscribers")
    sys.stdout.write(render_report(report, args.format))
    return 0


if __name__ == "__main__":
    sys.exit(main())
