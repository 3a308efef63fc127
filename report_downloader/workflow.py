from __future__ import annotations

import logging
import uuid
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable, Generic, NoReturn, TypeVar

import requests

from .client import ReportingApiClient
from .config import DownloadConfig
from .errors import ReportDownloadError, WorkflowFailed


logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class StageResult(Generic[T]):
    stage: str
    value: T | None = None
    error: Exception | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


def run_stage(stage: str, func: Callable[..., T], *args: Any) -> StageResult[T]:
    try:
        return StageResult(stage, value=func(*args))
    except Exception as exc:  # noqa: BLE001 - every stage failure becomes a result
        return StageResult(stage, error=exc)


def describe_failure(error: BaseException | None) -> str:
    """Normalize a stage error into one diagnostic line.

    Transport errors with a response report the status and body, other
    transport errors their message; anything else falls back to ``str``.
    """
    root: BaseException | None = error
    if isinstance(error, ReportDownloadError) and error.cause is not None:
        root = error.cause

    if isinstance(root, requests.RequestException):
        resp = root.response
        if resp is not None:
            try:
                detail: Any = resp.json()
            except ValueError:
                detail = resp.text
            return f"HTTP {resp.status_code}: {detail}"
        return str(root)
    if isinstance(root, Exception):
        return str(root)
    return f"Unknown error: {root!r}"


def _fail(result: StageResult[Any]) -> NoReturn:
    logger.error("Error in %s stage: %s", result.stage, describe_failure(result.error))
    raise WorkflowFailed("Failed to download report", result.error) from result.error


def _keep_alive(api: ReportingApiClient, client_id: str) -> None:
    result = run_stage("keep-alive", api.keep_session_alive, client_id)
    if not result.ok:
        # Best effort only; the session may still be valid
        logger.warning("Failed to keep client alive: %s", describe_failure(result.error))


def _run(api: ReportingApiClient, config: DownloadConfig) -> Path | None:
    registered = run_stage("register", api.register_session)
    if not registered.ok:
        _fail(registered)
    client_id: str = registered.value
    logger.info("Registered client ID: %s", client_id)

    output_path = config.output_path(str(uuid.uuid4()))

    _keep_alive(api, client_id)

    instance = run_stage("instance", api.resolve_instance, client_id, config.report_name)
    if not instance.ok:
        _fail(instance)
    instance_id: str = instance.value
    logger.info("Resolved instance ID: %s", instance_id)

    document = run_stage("document", api.resolve_document, client_id, instance_id)
    if not document.ok:
        _fail(document)
    document_id: str = document.value
    logger.info("Resolved document ID: %s", document_id)

    # Rendering can take long enough for the session to near expiry
    _keep_alive(api, client_id)

    download = run_stage(
        "download", api.download_document, client_id, instance_id, document_id, output_path
    )
    if not download.ok:
        _fail(download)
    # TODO: raise WorkflowFailed when nothing was written, once callers stop
    # treating a missing file as success.
    return download.value


def download_report(config: DownloadConfig, client: ReportingApiClient | None = None) -> Path | None:
    """Register, resolve, render and download one report.

    Returns the written file, or ``None`` when the download stage failed
    (that failure is logged by the client and not raised). Any other stage
    failure raises ``WorkflowFailed``.
    """
    api = client if client is not None else ReportingApiClient()
    try:
        return _run(api, config)
    finally:
        if client is None:
            api.close()
