from __future__ import annotations

import logging
from pathlib import Path

import requests

from .config import API_URL, REQUEST_TIMEOUT, request_timeout
from .errors import (
    DocumentResolutionFailed,
    DownloadFailed,
    InstanceResolutionFailed,
    KeepAliveFailed,
    RegistrationFailed,
)
from .schemas import (
    ClientResponse,
    DocumentRequest,
    DocumentResponse,
    InstanceRequest,
    InstanceResponse,
)


logger = logging.getLogger(__name__)


class ReportingApiClient:
    """Thin wrapper over the reporting REST service.

    Holds no workflow state: callers pass the client, instance and document
    ids through every call in the order the service expects.
    """

    def __init__(
        self,
        base_url: str = API_URL,
        timeout: float = REQUEST_TIMEOUT,
        session: requests.Session | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/") + "/"
        self.timeout = request_timeout(timeout)
        self._owns_session = session is None
        self._session = session if session is not None else requests.Session()

    def __enter__(self) -> ReportingApiClient:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def close(self) -> None:
        if self._owns_session:
            self._session.close()

    def _url(self, path: str) -> str:
        return f"{self.base_url}{path}"

    def _post(self, path: str, body: dict | None = None) -> requests.Response:
        resp = self._session.post(self._url(path), json=body, timeout=self.timeout)
        resp.raise_for_status()
        return resp

    def register_session(self) -> str:
        try:
            data = ClientResponse.model_validate(self._post("clients").json())
        except (requests.RequestException, ValueError) as exc:
            raise RegistrationFailed(f"Failed to register client: {exc}", exc) from exc
        return data.client_id

    def resolve_instance(self, client_id: str, report_name: str) -> str:
        body = InstanceRequest(report=report_name).model_dump()
        try:
            resp = self._post(f"clients/{client_id}/instances", body)
            data = InstanceResponse.model_validate(resp.json())
        except (requests.RequestException, ValueError) as exc:
            logger.error("Error resolving report instance for %s: %s", report_name, exc)
            raise InstanceResolutionFailed(f"Failed to resolve report instance: {exc}", exc) from exc
        return data.instance_id

    def resolve_document(self, client_id: str, instance_id: str) -> str:
        body = DocumentRequest().model_dump()
        try:
            resp = self._post(f"clients/{client_id}/instances/{instance_id}/documents", body)
            data = DocumentResponse.model_validate(resp.json())
        except (requests.RequestException, ValueError) as exc:
            logger.error("Error resolving document for instance %s: %s", instance_id, exc)
            raise DocumentResolutionFailed(f"Failed to resolve document instance: {exc}", exc) from exc
        return data.document_id

    def keep_session_alive(self, client_id: str) -> None:
        logger.debug("Extending session %s", client_id)
        try:
            # Response body carries nothing useful
            self._post(f"clients/keepAlive/{client_id}")
        except requests.RequestException as exc:
            logger.error("Error in keep_session_alive: %s", exc)
            raise KeepAliveFailed(f"Failed to keep client alive: {exc}", exc) from exc
        logger.info("Session expiration extended")

    def download_document(
        self,
        client_id: str,
        instance_id: str,
        document_id: str,
        output_name: str | Path,
    ) -> Path | None:
        """Fetch the rendered document and write it to ``output_name``.

        Failures are logged and swallowed; ``None`` means nothing was written
        (or a partial file may remain if the write itself failed).
        """
        path = Path(output_name)
        url = self._url(f"clients/{client_id}/instances/{instance_id}/documents/{document_id}")
        try:
            resp = self._session.get(url, timeout=self.timeout)
            resp.raise_for_status()
            path.write_bytes(resp.content)
        except (requests.RequestException, OSError) as exc:
            failure = DownloadFailed(f"Failed to download document {document_id}: {exc}", exc)
            logger.error("Error: %s", failure.message)
            return None
        logger.info("%s downloaded successfully.", path.name)
        return path
