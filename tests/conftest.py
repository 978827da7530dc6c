"""Root conftest: shared fakes for the network pipeline tests."""

from __future__ import annotations

from dataclasses import dataclass, field

import pytest
from pydantic import BaseModel

from core.domain.models import Get, HTTPMethod, TransportRequest, TransportResponse


class User(BaseModel):
    id: int
    name: str


@dataclass
class FakeDescriptor:
    address: str | None = "https://api.example.com/users/7"
    method: HTTPMethod = field(default_factory=Get)


class FakeTransport:
    """Returns a canned response and records what it was asked to send."""

    def __init__(self, content: bytes = b"", status_code: int = 200) -> None:
        self.content = content
        self.status_code = status_code
        self.sent: list[TransportRequest] = []

    async def send(self, request: TransportRequest) -> TransportResponse:
        self.sent.append(request)
        return TransportResponse(content=self.content, status_code=self.status_code)


@pytest.fixture
def user_shape() -> type[User]:
    return User


@pytest.fixture
def make_transport():
    return FakeTransport


@pytest.fixture
def make_descriptor():
    return FakeDescriptor
