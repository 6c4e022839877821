"""
pytest 공통 fixture.

앱 모듈을 import 하기 전에 환경변수를 세팅해서 SQLite(aiosqlite) 파일 DB 와
테스트용 JWT 키를 쓰게 한다. 카카오 API 는 FakeKakaoClient 로 대체한다.
"""
import os
import tempfile
from pathlib import Path

DB_FILE = Path(tempfile.gettempdir()) / "kakao_auth_pytest.db"

os.environ["DATABASE_URL"] = f"sqlite+aiosqlite:///{DB_FILE}"
os.environ["JWT_SECRET_KEY"] = "test-secret-key"
os.environ["KAKAO_CLIENT_ID"] = "test-client-id"
os.environ["KAKAO_CLIENT_SECRET"] = "test-client-secret"
os.environ["KAKAO_REDIRECT_URI"] = "http://localhost:3000/oauth/kakao"

import pytest
import pytest_asyncio
from fastapi.testclient import TestClient
from sqlalchemy.ext.asyncio import create_async_engine, async_sessionmaker, AsyncSession
from sqlalchemy.pool import StaticPool

from kakao_auth.db import Base
from kakao_auth.errors import ProviderError
from kakao_auth.kakao_client import get_kakao_client
from kakao_auth.main import app
from kakao_auth.security import create_access_token


class FakeKakaoClient:
    """KakaoClient 와 같은 인터페이스. 호출 내역을 calls 에 남긴다."""

    def __init__(self, email="tester@kakao.com", nickname="카카오테스터"):
        self.email = email
        self.nickname = nickname
        self.fail_exchange = False
        self.profile_override = None
        self.calls = []

    def exchange_code(self, code):
        self.calls.append(("exchange_code", code))
        if self.fail_exchange:
            raise ProviderError("token endpoint returned 400: KOE320", 400)
        return "kakao-access-token"

    def fetch_profile(self, access_token):
        self.calls.append(("fetch_profile", access_token))
        if self.profile_override is not None:
            return self.profile_override
        return {
            "id": 123456789,
            "kakao_account": {"email": self.email},
            "properties": {"nickname": self.nickname},
        }


@pytest.fixture
def fake_kakao():
    return FakeKakaoClient()


@pytest.fixture
def client(fake_kakao):
    DB_FILE.unlink(missing_ok=True)
    app.dependency_overrides[get_kakao_client] = lambda: fake_kakao
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()
    DB_FILE.unlink(missing_ok=True)


@pytest.fixture
def login(client, fake_kakao):
    """카카오 로그인 후 (응답 data, Authorization 헤더) 를 돌려준다."""
    def _login(code="auth-code"):
        res = client.post("/auth/kakao", json={"code": code})
        assert res.status_code == 200, res.text
        data = res.json()["data"]
        return data, {"Authorization": f"Bearer {data['token']}"}
    return _login


@pytest.fixture
def auth_header_for():
    def _header(member_id, email="nobody@kakao.com"):
        token = create_access_token(member_id=member_id, email=email)
        return {"Authorization": f"Bearer {token}"}
    return _header


@pytest_asyncio.fixture
async def db_session():
    """테스트마다 새로 만드는 in-memory SQLite 세션."""
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    TestingSessionLocal = async_sessionmaker(engine, expire_on_commit=False, class_=AsyncSession)
    async with TestingSessionLocal() as session:
        yield session

    await engine.dispose()
