import os
from collections.abc import Generator
from pathlib import Path

import pytest

from research_portal.config.settings import Settings
from research_portal.database.connection import close_pool, get_connection, init_pool
from research_portal.documents.models import NewDocument

MIGRATIONS_DIR = Path(__file__).resolve().parents[2] / "migrations"


def _test_settings() -> Settings:
    os.environ.setdefault("DB_DATABASE", "research_portal_test")
    return Settings()


def _apply_migrations() -> None:
    with get_connection() as conn:
        with conn.cursor() as cur:
            for path in sorted(MIGRATIONS_DIR.glob("*.sql")):
                cur.execute(path.read_text(encoding="utf-8"))
        conn.commit()


@pytest.fixture(scope="session")
def test_settings() -> Settings:
    return _test_settings()


@pytest.fixture(scope="session")
def integration_pool(test_settings: Settings) -> Generator[None, None, None]:
    try:
        init_pool(test_settings)
        _apply_migrations()
    except Exception as e:
        close_pool()
        pytest.skip(
            f"PostgreSQL test DB not available: {e}. "
            "Set DB_* env or see tests/integration/README.md"
        )
    try:
        yield
    finally:
        close_pool()


@pytest.fixture
def integration_cleanup(integration_pool: None) -> Generator[list[str], None, None]:
    cleanup: list[str] = []
    yield cleanup
    if not cleanup:
        return
    with get_connection() as conn:
        with conn.cursor() as cur:
            for document_id in cleanup:
                cur.execute("DELETE FROM documents WHERE id = %s", (document_id,))
        conn.commit()


@pytest.fixture
def new_document() -> NewDocument:
    return NewDocument(
        filename="q3-call.txt",
        original_name="q3-call.txt",
        file_type="text/plain",
        file_size=42,
        text_content="CEO: Revenue grew 12% and margins improved.",
    )
