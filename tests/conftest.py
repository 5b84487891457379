"""Shared fixtures: an in-memory stand-in for the Supabase query builder and token helpers."""

import uuid
from datetime import datetime, timedelta, timezone
from types import SimpleNamespace

import jwt
import pytest
from fastapi.testclient import TestClient
from postgrest.exceptions import APIError

from saafi.config.settings import Settings
from saafi.database.supabase_client import get_supabase
from saafi.main import create_app

TEST_SECRET = "test-secret"


class FakeQuery:
    def __init__(self, db, table):
        self.db = db
        self.table = table
        self.mode = "select"
        self.payload = None
        self.filters = []
        self.order_by = None
        self.single_row = False

    def select(self, *columns):
        self.mode = "select"
        return self

    def insert(self, payload):
        self.mode = "insert"
        self.payload = payload
        return self

    def update(self, payload):
        self.mode = "update"
        self.payload = payload
        return self

    def delete(self):
        self.mode = "delete"
        return self

    def eq(self, column, value):
        self.filters.append((column, value))
        return self

    def order(self, column, desc=False):
        self.order_by = (column, desc)
        return self

    def single(self):
        self.single_row = True
        return self

    def _matches(self, row):
        return all(row.get(column) == value for column, value in self.filters)

    def execute(self):
        self.db.calls.append((self.table, self.mode))
        message = self.db.failures.pop((self.table, self.mode), None)
        if message:
            raise APIError({"message": message, "code": "P0001", "hint": None, "details": None})

        rows = self.db.tables.setdefault(self.table, [])
        if self.mode == "insert":
            payloads = self.payload if isinstance(self.payload, list) else [self.payload]
            created = []
            for payload in payloads:
                row = {"id": str(uuid.uuid4()), "created_at": self.db.next_timestamp()}
                row.update(payload)
                rows.append(row)
                created.append(dict(row))
            return SimpleNamespace(data=created)

        matched = [row for row in rows if self._matches(row)]
        if self.mode == "update":
            for row in matched:
                row.update(self.payload)
            return SimpleNamespace(data=[dict(row) for row in matched])
        if self.mode == "delete":
            self.db.tables[self.table] = [row for row in rows if not self._matches(row)]
            return SimpleNamespace(data=[dict(row) for row in matched])

        data = [dict(row) for row in matched]
        if self.order_by:
            column, desc = self.order_by
            data.sort(key=lambda row: row[column], reverse=desc)
        if self.single_row:
            if len(data) != 1:
                raise APIError({
                    "message": "JSON object requested, multiple (or no) rows returned",
                    "code": "PGRST116",
                    "hint": None,
                    "details": f"The result contains {len(data)} rows",
                })
            return SimpleNamespace(data=data[0])
        return SimpleNamespace(data=data)


class FakeAuth:
    def __init__(self):
        self.user_id = None
        self.error = None
        self.oauth_requests = []

    def get_user(self, jwt=None):
        if self.error is not None:
            raise self.error
        if not self.user_id:
            return None
        return SimpleNamespace(user=SimpleNamespace(id=self.user_id))

    def sign_in_with_oauth(self, credentials):
        self.oauth_requests.append(credentials)
        provider = credentials["provider"]
        return SimpleNamespace(
            provider=provider,
            url=f"https://project.supabase.co/auth/v1/authorize?provider={provider}",
        )


class FakeSupabase:
    def __init__(self):
        self.tables = {}
        self.calls = []
        self.failures = {}
        self.auth = FakeAuth()
        self._clock = datetime(2024, 1, 1, tzinfo=timezone.utc)

    def table(self, name):
        return FakeQuery(self, name)

    def fail_next(self, table, mode, message):
        self.failures[(table, mode)] = message

    def next_timestamp(self):
        self._clock += timedelta(minutes=1)
        return self._clock.isoformat()

    def seed(self, table, **fields):
        row = {"id": str(uuid.uuid4()), "created_at": self.next_timestamp()}
        row.update(fields)
        self.tables.setdefault(table, []).append(row)
        return dict(row)


def make_token(sub="user-1", secret=TEST_SECRET, expires_in=3600, **claims):
    payload = {
        "sub": sub,
        "aud": "authenticated",
        "role": "authenticated",
        "exp": datetime.now(timezone.utc) + timedelta(seconds=expires_in),
    }
    payload.update(claims)
    return jwt.encode(payload, secret, algorithm="HS256")


@pytest.fixture
def fake_supabase():
    return FakeSupabase()


@pytest.fixture
def settings():
    return Settings(jwt_secret=TEST_SECRET, supabase_url="https://project.supabase.co", supabase_key="anon")


@pytest.fixture
def client(settings, fake_supabase):
    app = create_app(settings)
    app.dependency_overrides[get_supabase] = lambda: fake_supabase
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def auth_headers():
    return {"Authorization": f"Bearer {make_token()}"}
