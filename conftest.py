import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from scamguard.database import init_db, get_db
from scamguard.main import app
from scamguard.api.routes import get_detector
from scamguard.services.ai_classifier import AIClassifier
from scamguard.services.detection_service import DetectionService


@pytest.fixture
def heuristic_detector():
    """DetectionService with the AI path switched off"""
    return DetectionService(ai_classifier=AIClassifier(api_key=""))


@pytest.fixture
def db_session():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    init_db(bind=engine)
    TestingSession = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    session = TestingSession()
    try:
        yield session
    finally:
        session.close()
        engine.dispose()


@pytest.fixture
def client(db_session, heuristic_detector):
    app.dependency_overrides[get_db] = lambda: db_session
    app.dependency_overrides[get_detector] = lambda: heuristic_detector
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
