from __future__ import annotations

import json
from typing import Any, Dict, List, Tuple
from urllib.parse import urlsplit

import pytest
import requests
from requests.adapters import BaseAdapter

from report_downloader.client import ReportingApiClient


BASE_URL = "http://reports.test/api/reports/"
PREFIX = "/api/reports"
PDF_BYTES = b"%PDF-1.4\n%\xe2\xe3\xcf\xd3\n1 0 obj\n<<>>\nendobj\n"


class ScriptedService(BaseAdapter):
    """Transport adapter answering requests from a route table."""

    def __init__(self) -> None:
        super().__init__()
        self.routes: Dict[Tuple[str, str], Tuple[int, Any]] = {}
        self.calls: List[Tuple[str, str, Any]] = []

    def route(self, method: str, path: str, status: int = 200, body: Any = None) -> None:
        # body: dict -> JSON, bytes -> raw, Exception -> raised by the transport
        self.routes[(method, PREFIX + path)] = (status, body)

    def paths(self) -> List[str]:
        return [path[len(PREFIX):] for _, path, _ in self.calls]

    def send(self, request, **kwargs):  # type: ignore[override]
        path = urlsplit(request.url).path
        sent = json.loads(request.body) if request.body else None
        self.calls.append((request.method, path, sent))

        status, body = self.routes.get((request.method, path), (404, {"message": "not found"}))
        if isinstance(body, Exception):
            raise body

        resp = requests.Response()
        resp.status_code = status
        resp.reason = "OK" if status < 400 else "Error"
        resp.url = request.url
        resp.request = request
        if isinstance(body, bytes):
            resp._content = body
            resp.headers["Content-Type"] = "application/pdf"
        else:
            resp._content = json.dumps(body).encode("utf-8") if body is not None else b""
            resp.headers["Content-Type"] = "application/json"
        resp.encoding = "utf-8"
        return resp

    def close(self) -> None:
        pass


@pytest.fixture
def service() -> ScriptedService:
    svc = ScriptedService()
    svc.route("POST", "/clients", body={"clientId": "C1"})
    svc.route("POST", "/clients/keepAlive/C1", body=None)
    svc.route("POST", "/clients/C1/instances", body={"instanceId": "I1"})
    svc.route("POST", "/clients/C1/instances/I1/documents", body={"documentId": "D1"})
    svc.route("GET", "/clients/C1/instances/I1/documents/D1", body=PDF_BYTES)
    return svc


@pytest.fixture
def api(service: ScriptedService) -> ReportingApiClient:
    session = requests.Session()
    session.mount("http://reports.test", service)
    return ReportingApiClient(base_url=BASE_URL, timeout=5, session=session)


@pytest.fixture
def pdf_bytes() -> bytes:
    return PDF_BYTES
