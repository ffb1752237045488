import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.db.base import Base
from app.dependencies.db import get_db
from app.main import app

# 테스트 전용 in-memory DB
engine = create_engine(
    "sqlite://",
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db_session():
    Base.metadata.create_all(bind=engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def client(db_session):
    def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def make_student(client):
    def _make(**overrides):
        body = {"name": "Ana Torres", "grade": "3A"}
        body.update(overrides)
        resp = client.post("/api/students", json=body)
        assert resp.status_code == 200, resp.text
        return resp.json()
    return _make


@pytest.fixture
def make_tablet(client):
    counter = {"n": 0}

    def _make(**overrides):
        counter["n"] += 1
        body = {"tabletNumber": f"T-{counter['n']:02d}"}
        body.update(overrides)
        resp = client.post("/api/tablets", json=body)
        assert resp.status_code == 200, resp.text
        return resp.json()
    return _make


@pytest.fixture
def student(make_student):
    return make_student()


@pytest.fixture
def tablet(make_tablet, student):
    return make_tablet(studentId=student["id"], status="online", screenTime=15)
