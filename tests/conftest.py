from typing import AsyncGenerator, Iterator, List

import pytest
from httpx import ASGITransport, AsyncClient

from app.core.config import Settings
from app.curp.generator import PersonRecord
from app.curp.differentiator import get_differentiator
from app.main import app, create_app


class StubDifferentiator:
    """Deterministic differentiator: cycles through the given letters and digits."""

    def __init__(self, letters: str = "Q", digits: str = "7") -> None:
        self._letters: List[str] = list(letters)
        self._digits: List[str] = list(digits)
        self.calls = 0

    def next_letter(self) -> str:
        self.calls += 1
        return self._letters[(self.calls - 1) % len(self._letters)]

    def next_digit(self) -> str:
        return self._digits[(self.calls - 1) % len(self._digits)]


@pytest.fixture()
def stub_differentiator() -> StubDifferentiator:
    return StubDifferentiator()


@pytest.fixture()
def juan() -> PersonRecord:
    return PersonRecord(
        first_name="Juan",
        paternal_surname="Gomez",
        maternal_surname="Lopez",
        birth_date="1990-05-21",
        gender="H",
        birth_region="Jalisco",
    )


@pytest.fixture()
def juan_payload() -> dict:
    return {
        "first_name": "Juan",
        "father_surname": "Gomez",
        "mother_surname": "Lopez",
        "birth_date": "1990-05-21",
        "gender": "H",
        "birth_state": "Jalisco",
    }


@pytest.fixture()
def stubbed_app(stub_differentiator: StubDifferentiator) -> Iterator:
    """Default app with the random tail replaced by the stub."""
    app.dependency_overrides[get_differentiator] = lambda: stub_differentiator
    yield app
    app.dependency_overrides.pop(get_differentiator, None)


@pytest.fixture()
async def client(stubbed_app) -> AsyncGenerator[AsyncClient, None]:
    """Async HTTP client bound to the FastAPI app."""
    async with AsyncClient(transport=ASGITransport(app=stubbed_app), base_url="http://test") as ac:
        yield ac


@pytest.fixture()
async def strict_client(stub_differentiator: StubDifferentiator) -> AsyncGenerator[AsyncClient, None]:
    """Client for an app that reports generation failures as HTTP errors."""
    strict_app = create_app(Settings(CURP_FOLD_ERRORS=False, CURP_STRICT_GENDER=True))
    strict_app.dependency_overrides[get_differentiator] = lambda: stub_differentiator
    async with AsyncClient(transport=ASGITransport(app=strict_app), base_url="http://test") as ac:
        yield ac
