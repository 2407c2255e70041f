from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Garantiza que el paquete projectboard sea importable durante los tests locales
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from fastapi.testclient import TestClient  # noqa: E402

from projectboard.core import config as core_config  # noqa: E402
from projectboard.core.security import hash_password  # noqa: E402
from projectboard.db import models  # noqa: E402
from projectboard.db import session as db_session  # noqa: E402

ADMIN_PASSWORD = "s3cret-admin"
_ADMIN_HASH = hash_password(ADMIN_PASSWORD)


def _clear_caches() -> None:
    core_config.get_settings.cache_clear()
    db_session.get_engine.cache_clear()
    db_session._get_sessionmaker.cache_clear()  # type: ignore[attr-defined]


@pytest.fixture()
def db_env(tmp_path, monkeypatch):
    """Configura un SQLite temporal y resetea caches de settings/engine."""
    db_file = tmp_path / "test.db"
    monkeypatch.setenv("DATABASE_URL", f"sqlite:///{db_file}")
    monkeypatch.setenv("ADMIN_PASSWORD_HASH", _ADMIN_HASH)
    monkeypatch.setenv("SESSION_SECRET", "test-secret")
    monkeypatch.setenv("APP_ENV", "test")
    _clear_caches()

    engine = db_session.get_engine()
    models.Base.metadata.drop_all(bind=engine)
    models.Base.metadata.create_all(bind=engine)

    yield db_file

    models.Base.metadata.drop_all(bind=engine)
    engine.dispose()
    _clear_caches()


@pytest.fixture()
def client(db_env):
    from projectboard.app import create_app

    with TestClient(create_app()) as test_client:
        yield test_client


@pytest.fixture()
def admin_client(client):
    resp = client.post("/api/login", json={"password": ADMIN_PASSWORD})
    assert resp.status_code == 200
    return client


@pytest.fixture()
def admin_password() -> str:
    return ADMIN_PASSWORD
