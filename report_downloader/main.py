from __future__ import annotations

import logging
import sys

from .client import ReportingApiClient
from .config import API_URL, LOG_LEVEL, REQUEST_TIMEOUT, DownloadConfig
from .workflow import download_report


def configure_logging(level: str = LOG_LEVEL) -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def main() -> int:
    configure_logging()
    config = DownloadConfig()
    with ReportingApiClient(base_url=API_URL, timeout=REQUEST_TIMEOUT) as client:
        # WorkflowFailed is left to propagate so the process exits non-zero
        download_report(config, client)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
