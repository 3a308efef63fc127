from __future__ import annotations

import os
from pathlib import Path

from pydantic import BaseModel, ConfigDict


API_URL = os.getenv("REPORTS_API_URL", "https://demos.telerik.com/reporting/api/reports/")
REQUEST_TIMEOUT = float(os.getenv("REPORTS_TIMEOUT", "30"))
LOG_LEVEL = os.getenv("REPORTS_LOG_LEVEL", "INFO")

DEFAULT_REPORT_NAME = "SwissQRBill.trdx"
OUTPUT_EXTENSION = ".pdf"


class DownloadConfig(BaseModel):
    """Options for a single report download run."""

    model_config = ConfigDict(frozen=True)

    # Logical report name on the reporting service; also the output file prefix
    report_name: str = DEFAULT_REPORT_NAME
    output_dir: Path = Path(".")

    def output_path(self, token: str) -> Path:
        return self.output_dir / f"{self.report_name}_{token}{OUTPUT_EXTENSION}"


def request_timeout(value: float = REQUEST_TIMEOUT) -> float | None:
    # requests treats None as "wait forever"
    return value if value > 0 else None
