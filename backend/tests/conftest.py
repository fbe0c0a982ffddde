import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker

from jobtracker.database import get_db, init_db
from jobtracker.main import app
from jobtracker.services.session_service import session_service


def _set_sqlite_pragmas(dbapi_conn, connection_record):
    cursor = dbapi_conn.cursor()
    cursor.execute("PRAGMA journal_mode=WAL")
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


@pytest.fixture
def test_db(tmp_path):
    db_path = tmp_path / "db.sqlite"
    engine = create_engine(
        f"sqlite:///{db_path}",
        connect_args={"check_same_thread": False},
    )
    event.listen(engine, "connect", _set_sqlite_pragmas)
    TestSession = sessionmaker(bind=engine, autoflush=False, autocommit=False)

    init_db(db_path)

    def override_get_db():
        db = TestSession()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    yield TestSession
    app.dependency_overrides.clear()
    engine.dispose()


@pytest.fixture
def client(test_db):
    return TestClient(app)


@pytest.fixture
def sign_in(test_db):
    """Register a user and open a session; returns auth headers."""

    def _sign_in(email="ada@example.com", name="Ada", ttl_seconds=None):
        db = test_db()
        try:
            user = session_service.get_or_create_user(db, email=email, name=name)
            token = session_service.create_session(db, user.id, ttl_seconds=ttl_seconds)
        finally:
            db.close()
        return {"Authorization": f"Bearer {token}"}

    return _sign_in


@pytest.fixture
def auth(sign_in):
    return sign_in()
