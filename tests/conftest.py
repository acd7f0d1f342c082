import os
import pathlib
import sys
from typing import Any, Generator

import pytest
from sqlalchemy import Column, Integer, String, create_engine
from sqlalchemy.orm import Session, declarative_base, sessionmaker

ROOT_DIR = pathlib.Path(__file__).resolve().parents[1]
SRC_DIR = ROOT_DIR / "src"
if str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))

from raw_query_paginator import QuerySpec, RawQueryPaginator  # noqa: E402
from raw_query_paginator.types import PositionalParams  # noqa: E402

DOMAIN = "https://example.test"
ARTICLE_COUNT = 25

Base = declarative_base()


class Article(Base):  # type: ignore[misc]
    __tablename__ = "paginator_article"
    id = Column(Integer, primary_key=True)
    title = Column(String(255), nullable=False)
    category = Column(String(32), nullable=False)


def _load_test_db_uri() -> str:
    """TEST_DB overrides the in-memory SQLite database."""
    uri = os.getenv("TEST_DB", "sqlite+pysqlite:///:memory:")
    # 如果是 mysql://，优先使用 PyMySQL 驱动
    if uri.startswith("mysql://"):
        uri = "mysql+pymysql://" + uri[len("mysql://") :]
    return uri


def seed_articles(session: Session, count: int = ARTICLE_COUNT) -> None:
    session.add_all(
        Article(
            id=idx,
            title=f"article-{idx}",
            category="even" if idx % 2 == 0 else "odd",
        )
        for idx in range(1, count + 1)
    )
    session.commit()


@pytest.fixture(scope="function")
def sa_session() -> Generator[Session, None, None]:
    engine = create_engine(_load_test_db_uri(), echo=False, future=True)
    Base.metadata.create_all(engine)
    SessionLocal = sessionmaker(bind=engine, class_=Session, expire_on_commit=False)
    session = SessionLocal()
    try:
        seed_articles(session)
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(engine)
        engine.dispose()


@pytest.fixture(autouse=True)
def reset_paginator_configuration() -> Generator[None, None, None]:
    """Class-level configure() must not leak between tests."""
    yield
    RawQueryPaginator.session_provider = None


class FakeExecutor:
    """In-memory executor recording every query it receives."""

    def __init__(self, total: int, rows: list[Any] | None = None) -> None:
        self.total = total
        self.rows = rows
        self.counted: list[QuerySpec] = []
        self.fetched: list[QuerySpec] = []

    def count(self, query: QuerySpec) -> int:
        self.counted.append(query)
        return self.total

    def fetch(self, query: QuerySpec) -> list[Any]:
        self.fetched.append(query)
        if self.rows is not None:
            return list(self.rows)
        if isinstance(query.params, PositionalParams):
            limit, offset = query.params.values[-2:]
        else:
            limit = query.params.values["raw_limit_num"]
            offset = query.params.values["raw_skip_num"]
        return list(range(self.total))[offset : offset + limit]


class FailingExecutor:
    def __init__(self, exc: Exception) -> None:
        self.exc = exc

    def count(self, query: QuerySpec) -> int:
        raise self.exc

    def fetch(self, query: QuerySpec) -> list[Any]:
        raise self.exc


@pytest.fixture
def make_paginator():
    def _make(
        path: str = "/items/list/1", total: int = 25, rows: list[Any] | None = None
    ) -> tuple[RawQueryPaginator, FakeExecutor]:
        executor = FakeExecutor(total, rows)
        paginator = RawQueryPaginator(path, DOMAIN, executor=executor)
        return paginator, executor

    return _make
