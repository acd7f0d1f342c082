from __future__ import annotations

import os
import pathlib
import sys
from collections.abc import Generator

import pytest
from sqlalchemy import Column, Integer, String, create_engine
from sqlalchemy.orm import Session, declarative_base, sessionmaker

ROOT_DIR = pathlib.Path(__file__).resolve().parents[1]
SRC_DIR = ROOT_DIR / "src"
if str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))

Base = declarative_base()

BENCH_ROWS = 2_000


class BenchRow(Base):  # type: ignore[misc]
    __tablename__ = "bench_row"
    id = Column(Integer, primary_key=True)
    label = Column(String(64), nullable=False)
    bucket = Column(Integer, nullable=False)


def _load_bench_db_uri() -> str:
    uri = os.getenv("BENCH_DB", "sqlite+pysqlite:///:memory:")
    if uri.startswith("mysql://"):
        uri = "mysql+pymysql://" + uri[len("mysql://") :]
    return uri


@pytest.fixture(scope="session")
def bench_engine():
    engine = create_engine(_load_bench_db_uri(), echo=False, future=True)
    Base.metadata.create_all(engine)
    with Session(engine) as session:
        session.add_all(
            BenchRow(id=idx, label=f"row-{idx}", bucket=idx % 7)
            for idx in range(1, BENCH_ROWS + 1)
        )
        session.commit()
    try:
        yield engine
    finally:
        Base.metadata.drop_all(engine)
        engine.dispose()


@pytest.fixture(scope="session")
def SessionLocal(bench_engine) -> sessionmaker[Session]:
    return sessionmaker(bind=bench_engine, class_=Session, expire_on_commit=False)


@pytest.fixture(scope="function")
def sa_session(SessionLocal: sessionmaker[Session]) -> Generator[Session, None, None]:
    session = SessionLocal()
    try:
        yield session
    finally:
        session.rollback()
        session.close()
