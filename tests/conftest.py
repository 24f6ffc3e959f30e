from __future__ import annotations

import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Iterator

import httpx
import pytest

PROJECT_ROOT = Path(__file__).resolve().parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from youtube_partner.runners import CustomClientRunner  # noqa: E402

Responder = Callable[[httpx.Request], httpx.Response]


@dataclass
class Recorder:
    responder: Responder
    sent: list[httpx.Request] = field(default_factory=list)

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.sent.append(request)
        return self.responder(request)

    @property
    def last(self) -> httpx.Request:
        return self.sent[-1]


RunnerFactory = Callable[[Responder], tuple[CustomClientRunner, Recorder]]


@pytest.fixture()
def make_runner() -> Iterator[RunnerFactory]:
    clients: list[httpx.Client] = []

    def _make(responder: Responder) -> tuple[CustomClientRunner, Recorder]:
        recorder = Recorder(responder)
        client = httpx.Client(transport=httpx.MockTransport(recorder))
        clients.append(client)
        return CustomClientRunner(client=client), recorder

    yield _make
    for client in clients:
        client.close()


@pytest.fixture()
def clean_env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    for name in (
        "GOOGLE_CLIENT_ID",
        "GOOGLE_CLIENT_SECRET",
        "GOOGLE_REDIRECT_URI",
        "GOOGLE_SERVICE_ACCOUNT_PATH",
        "YOUTUBE_API_TIMEOUT",
    ):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch
