"""
Shared test fixtures and configuration for entire test suite.

Provides: in-memory database, deterministic embeddings, in-memory vector
index, recording chat model, token factory, and a wired test application.
Dependencies: pytest, sqlalchemy, fastapi, langchain_core, PyJWT
System role: Test infrastructure and fixture management
"""

import hashlib
import math
import re
import time
from unittest.mock import MagicMock

import jwt
import pytest
from langchain_core.embeddings import Embeddings
from langchain_core.runnables import RunnableLambda
from langchain_core.vectorstores import InMemoryVectorStore

TEST_JWT_SECRET = "memoryvault-test-secret-with-enough-bytes-for-hs256"
TEST_AUDIENCE = "authenticated"


class KeywordEmbeddings(Embeddings):
    """Deterministic bag-of-words embeddings hashed into a fixed dimension."""

    def __init__(self, dimension: int = 256) -> None:
        self.dimension = dimension

    def _embed(self, text: str) -> list[float]:
        vector = [0.0] * self.dimension
        vector[0] = 0.01
        for token in re.findall(r"[a-z0-9]+", text.lower()):
            bucket = int(hashlib.md5(token.encode()).hexdigest(), 16) % (self.dimension - 1)
            vector[bucket + 1] += 1.0
        norm = math.sqrt(sum(value * value for value in vector))
        return [value / norm for value in vector]

    def embed_documents(self, texts: list[str]) -> list[list[float]]:
        return [self._embed(text) for text in texts]

    def embed_query(self, text: str) -> list[float]:
        return self._embed(text)


class RecordingChatModel:
    """Chat model stand-in that records prompts and echoes the context block."""

    def __init__(self, reply: str | None = None) -> None:
        self.reply = reply
        self.prompts = []

    def _respond(self, prompt_value) -> str:
        self.prompts.append(prompt_value)
        if self.reply is not None:
            return self.reply
        human = prompt_value.to_messages()[-1].content
        context = human.split("CONTEXT:", 1)[1].split("QUESTION:", 1)[0].strip()
        return f"According to your documents: {context}"

    @property
    def call_count(self) -> int:
        return len(self.prompts)

    def as_runnable(self) -> RunnableLambda:
        return RunnableLambda(self._respond)


@pytest.fixture
async def test_async_engine():
    """
    Create in-memory SQLite async engine with tables.

    Yields:
        AsyncEngine: Engine sharing one connection across sessions (StaticPool)
    """
    from sqlalchemy.ext.asyncio import create_async_engine
    from sqlalchemy.pool import StaticPool

    from backend.boundary.db.connection import create_tables

    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    await create_tables(engine)

    yield engine

    await engine.dispose()


@pytest.fixture
async def test_async_db(test_async_engine):
    """
    Create in-memory SQLite async database session for testing.

    Yields:
        AsyncSession: Test database session with cleanup
    """
    from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

    async_session = async_sessionmaker(
        test_async_engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )

    async with async_session() as session:
        yield session
        await session.rollback()


@pytest.fixture
def keyword_embeddings() -> KeywordEmbeddings:
    """Deterministic embeddings where shared words mean higher similarity."""
    return KeywordEmbeddings()


@pytest.fixture
def memory_vector_index(keyword_embeddings):
    """Owner-scoped vector index over langchain_core's in-memory store."""
    from backend.boundary.vdb.vector_index import InMemoryVectorIndex

    return InMemoryVectorIndex(InMemoryVectorStore(embedding=keyword_embeddings), namespace="memoryvault")


@pytest.fixture
def recording_chat_model() -> RecordingChatModel:
    """Chat model stand-in that echoes retrieved context."""
    return RecordingChatModel()


@pytest.fixture
def mock_storage() -> MagicMock:
    """Object storage client that accepts every upload."""
    from backend.boundary.aws.s3_client import S3DocumentClient

    storage = MagicMock(spec=S3DocumentClient)
    storage.upload_document.side_effect = lambda key, body, content_type: key
    return storage


@pytest.fixture
def make_token():
    """
    Build signed bearer tokens.

    Returns:
        Callable: make_token(sub, **overrides) -> encoded JWT
    """

    def _make_token(
        sub: str | None = "user-1",
        secret: str = TEST_JWT_SECRET,
        audience: str | None = TEST_AUDIENCE,
        expires_in: int = 3600,
        **claims,
    ) -> str:
        payload = {"exp": int(time.time()) + expires_in, **claims}
        if sub is not None:
            payload["sub"] = sub
        if audience is not None:
            payload["aud"] = audience
        return jwt.encode(payload, secret, algorithm="HS256")

    return _make_token


@pytest.fixture
def auth_headers(make_token):
    """
    Build Authorization headers for an owner.

    Returns:
        Callable: auth_headers(sub) -> {"Authorization": "Bearer ..."}
    """

    def _auth_headers(sub: str = "user-1") -> dict[str, str]:
        return {"Authorization": f"Bearer {make_token(sub)}"}

    return _auth_headers


@pytest.fixture
def test_settings():
    """Settings for an in-process application (memory vector store, HMAC auth)."""
    from backend.configs.auth import AuthSettings
    from backend.configs.database import DatabaseSettings
    from backend.configs.ingestion import IngestionSettings
    from backend.configs.settings import Settings
    from backend.configs.vector_store import VectorStoreSettings

    return Settings(
        environment="test",
        database=DatabaseSettings(url="sqlite+aiosqlite:///:memory:", create_tables=True),
        vector_store=VectorStoreSettings(store_type="memory"),
        auth=AuthSettings(jwt_secret=TEST_JWT_SECRET, audience=TEST_AUDIENCE),
        ingestion=IngestionSettings(chunk_size=1000, chunk_overlap=200, max_upload_bytes=5 * 1024 * 1024),
    )


@pytest.fixture
def test_container(
    test_settings,
    memory_vector_index,
    keyword_embeddings,
    recording_chat_model,
    mock_storage,
):
    """
    Service container wired with in-process fakes.

    The engine is built here with StaticPool so every request sees the same
    in-memory database.
    """
    from sqlalchemy.ext.asyncio import create_async_engine
    from sqlalchemy.pool import StaticPool

    from backend.api.deps.container import ServiceContainer

    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    extraction_model = MagicMock()
    return ServiceContainer(
        test_settings,
        engine=engine,
        storage=mock_storage,
        vector_index=memory_vector_index,
        embeddings=keyword_embeddings,
        extraction_model=extraction_model,
        chat_model=recording_chat_model.as_runnable(),
    )


@pytest.fixture
def client(test_container):
    """
    TestClient running the application lifespan.

    Yields:
        TestClient: Client bound to an app using test_container
    """
    from fastapi.testclient import TestClient

    from backend.api.main import create_app

    app = create_app(container=test_container)
    with TestClient(app) as test_client:
        yield test_client
