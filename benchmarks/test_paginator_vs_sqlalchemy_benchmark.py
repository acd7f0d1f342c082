from __future__ import annotations

import os

import pytest
from sqlalchemy import text
from sqlalchemy.orm import Session

pytest.importorskip("pytest_benchmark")

RUN_BENCHMARKS = os.getenv("RUN_BENCHMARKS") == "1"
pytestmark = pytest.mark.skipif(
    not RUN_BENCHMARKS,
    reason="Set RUN_BENCHMARKS=1 to run benchmark cases.",
)

from raw_query_paginator import RawQueryPaginator, SessionExecutor

PAGE_SIZE = 20
PAGE = 7
QUERY = "SELECT id, label FROM bench_row WHERE bucket = :bucket ORDER BY id"


@pytest.mark.benchmark(group="paginate_page")
def test_sa_hand_written_page(benchmark, sa_session: Session):
    def run() -> None:
        total = sa_session.execute(
            text(f"SELECT COUNT(*) FROM ({QUERY}) AS counted"), {"bucket": 3}
        ).scalar_one()
        rows = sa_session.execute(
            text(f"{QUERY} LIMIT :limit OFFSET :offset"),
            {"bucket": 3, "limit": PAGE_SIZE, "offset": (PAGE - 1) * PAGE_SIZE},
        ).all()
        if total == 0 or len(rows) > PAGE_SIZE:
            raise RuntimeError("Unexpected page")

    benchmark(run)


@pytest.mark.benchmark(group="paginate_page")
def test_raw_paginator_page(benchmark, sa_session: Session):
    executor = SessionExecutor(sa_session)

    def run() -> None:
        paginator = (
            RawQueryPaginator(f"/rows/{PAGE}", "http://bench.local", executor=executor)
            .set_page_options(PAGE_SIZE)
            .set_query(QUERY, {"bucket": 3})
            .execute()
        )
        if paginator.total_items == 0 or len(paginator.records) > PAGE_SIZE:
            raise RuntimeError("Unexpected page")

    benchmark(run)


@pytest.mark.benchmark(group="render_nav")
def test_raw_paginator_render(benchmark, sa_session: Session):
    paginator = (
        RawQueryPaginator(
            "/rows/5", "http://bench.local", executor=SessionExecutor(sa_session)
        )
        .set_page_options(PAGE_SIZE)
        .set_query(QUERY, {"bucket": 3})
        .execute()
    )

    def run() -> None:
        if paginator.render_pages_list() is None:
            raise RuntimeError("Navigation missing")

    benchmark(run)
