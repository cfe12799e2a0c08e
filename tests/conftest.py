import os

os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("RATE_LIMIT_ENABLED", "false")
os.environ.setdefault("METRICS_ENABLED", "false")

import uuid
from datetime import datetime, timedelta

import pytest
from httpx import AsyncClient, ASGITransport

from hanuram.exceptions import ConflictError, TransientError
from hanuram.schemas.engineer import EngineerDetail
from hanuram.services.engineer_directory import EngineerDirectory
from hanuram.services.password_reset import PinResetManager
from hanuram.services.profile_cache import ProfileCache
from hanuram.utils.security import get_password_hash


@pytest.fixture
def anyio_backend():
    return "asyncio"


class FakeClock:
    def __init__(self, now: datetime = datetime(2025, 6, 2, 9, 0, 0)) -> None:
        self.now = now

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs) -> None:
        self.now += timedelta(**kwargs)


class FakeUser:
    def __init__(self, name: str, email: str, password_hash: str) -> None:
        self.id = str(uuid.uuid4())
        self.name = name
        self.email = email
        self.password_hash = password_hash


class InMemoryUserStore:
    def __init__(self) -> None:
        self.users = {}

    def add_user(self, email: str, password: str = "old-secret", name: str = "Test User") -> FakeUser:
        user = FakeUser(name, email, get_password_hash(password))
        self.users[email] = user
        return user

    async def get_by_email(self, email):
        return self.users.get(email)

    async def create(self, name, email, password_hash):
        if email in self.users:
            raise ConflictError("Email already registered. Please login or use a different email.")
        user = FakeUser(name, email, password_hash)
        self.users[email] = user
        return user

    async def set_password(self, user, password_hash):
        user.password_hash = password_hash


class FakeToken:
    def __init__(self, email: str, pin: str, expires_at: datetime) -> None:
        self.id = str(uuid.uuid4())
        self.email = email
        self.pin = pin
        self.expires_at = expires_at
        self.used = False


class InMemoryResetTokenStore:
    def __init__(self) -> None:
        self.tokens = []

    def for_email(self, email: str):
        return [token for token in self.tokens if token.email == email]

    def unused_for(self, email: str):
        return [token for token in self.for_email(email) if not token.used]

    async def replace_active(self, email, pin, expires_at):
        self.tokens = [t for t in self.tokens if not (t.email == email and not t.used)]
        self.tokens.append(FakeToken(email, pin, expires_at))

    async def find_unused(self, email, pin):
        for token in self.tokens:
            if token.email == email and token.pin == pin and not token.used:
                return token
        return None

    async def mark_used(self, token):
        if token not in self.tokens or token.used:
            return False
        token.used = True
        return True

    async def delete(self, token):
        self.tokens = [t for t in self.tokens if t.id != token.id]

    async def delete_all(self, email):
        before = len(self.tokens)
        self.tokens = [t for t in self.tokens if t.email != email]
        return before - len(self.tokens)


class FakeMailer:
    def __init__(self) -> None:
        self.sent = []
        self.fail = False

    async def send_reset_pin(self, to_email, pin, resent=False):
        if self.fail:
            raise TransientError()
        self.sent.append({"to": to_email, "pin": pin, "resent": resent})

    @property
    def last_pin(self) -> str:
        return self.sent[-1]["pin"]


class InMemoryContactStore:
    def __init__(self) -> None:
        self.entries = {}

    async def add(self, **fields):
        if fields["email"] in self.entries:
            raise ConflictError("A message from this email was already received.")
        self.entries[fields["email"]] = fields
        return fields


class CountingFetcher:
    def __init__(self, records=None) -> None:
        self.records = dict(records or {})
        self.calls = []

    async def __call__(self, engineer_id):
        self.calls.append(engineer_id)
        return self.records.get(engineer_id)


def make_engineer(engineer_id: str = "eng-7", name: str = "R. Rao") -> EngineerDetail:
    return EngineerDetail(
        engineer_id=engineer_id,
        name=name,
        specialization="Geotechnical Engineering",
        experience=15,
        location="Pune",
        contact={"phone": "+91 98220 00000", "email": "rao@example.com"},
        bio="Soil investigation and foundation design.",
        qualifications=[{"degree": "M.Tech", "university": "COEP"}],
        project_highlights=["Riverside township foundations"],
        services_offered=[{"service": "Site survey", "price": 15000, "timeRequired": "3 days"}],
    )


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def users():
    return InMemoryUserStore()


@pytest.fixture
def tokens():
    return InMemoryResetTokenStore()


@pytest.fixture
def mailer():
    return FakeMailer()


@pytest.fixture
def manager(users, tokens, mailer, clock):
    return PinResetManager(users=users, tokens=tokens, mailer=mailer, clock=clock)


@pytest.fixture
def contacts():
    return InMemoryContactStore()


@pytest.fixture
def fetcher():
    return CountingFetcher({"eng-7": make_engineer()})


@pytest.fixture
def profile_cache(fetcher, clock):
    return ProfileCache(fetcher=fetcher, ttl=timedelta(minutes=10), clock=clock)


@pytest.fixture
async def client(manager, users, contacts, profile_cache):
    from hanuram.main import app
    from hanuram import dependencies

    app.dependency_overrides[dependencies.get_reset_manager] = lambda: manager
    app.dependency_overrides[dependencies.get_user_store] = lambda: users
    app.dependency_overrides[dependencies.get_contact_store] = lambda: contacts
    app.dependency_overrides[dependencies.get_profile_cache] = lambda: profile_cache
    app.dependency_overrides[dependencies.get_engineer_directory] = lambda: EngineerDirectory.from_file()

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://testserver") as ac:
        yield ac

    app.dependency_overrides.clear()
