import os

os.environ.setdefault("SECRET_KEY", "test-secret-key")
os.environ.setdefault("DATABASE_URL", "sqlite://")

import pytest
from sqlalchemy import func, select
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from core.database import Base, build_engine
import models.registry  # noqa: F401
from models.enums import LanguageCode
from repositories.user_repo import UserRepository
from schemas.analysis import WordAnalysis


CHAIR_PAYLOAD = {
    "isCorrect": True,
    "isWord": True,
    "baseLanguage": "ru",
    "targetLanguage": "en",
    "wordInBaseLanguage": "стул",
    "wordInTargetLanguage": "chair",
    "oneWordDefinitionInBaseLanguage": "сиденье",
    "oneWordDefinitionInTargetLanguage": "seat",
    "fillWordDescriptionInBaseLanguage": "Предмет мебели для сидения одного человека.",
    "fillWordDescriptionInTargetLanguage": "A piece of furniture for one person to sit on.",
    "examplesInBaseLanguage": ["Он сел на стул.", "Стул стоит у окна."],
    "examplesInTargetLanguage": ["He sat on the chair.", "The chair is by the window."],
    "synonymsInBaseLanguage": ["табурет", "сиденье", "кресло"],
    "synonymsInTargetLanguage": ["seat", "stool", "armchair"],
    "phoneticSpellingInBaseLanguage": "stul",
    "phoneticSpellingInTargetLanguage": "tʃeər",
    "partOfSpeechInBaseLanguage": "noun",
    "partOfSpeechInTargetLanguage": "noun",
    "difficultyLevel": "A1",
    "source": "ai_generated",
}


class FakeAnalysisClient:
    def __init__(self, result=None, error: Exception | None = None):
        self.result = result
        self.error = error
        self.calls = []

    async def analyze(self, word, base_language, target_language):
        self.calls.append((word, base_language, target_language))
        if self.error is not None:
            raise self.error
        return self.result


def count_rows(db, model) -> int:
    return db.execute(select(func.count()).select_from(model)).scalar_one()


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture
def engine():
    engine = build_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(engine)
    yield engine
    Base.metadata.drop_all(engine)
    engine.dispose()


@pytest.fixture
def db(engine):
    session = sessionmaker(bind=engine, autoflush=False, autocommit=False, future=True)()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def user(db):
    return UserRepository(db).create(
        email="learner@example.com",
        username="learner",
        base_language=LanguageCode.ru,
        target_language=LanguageCode.en,
    )


@pytest.fixture
def chair_payload():
    return {key: (list(value) if isinstance(value, list) else value) for key, value in CHAIR_PAYLOAD.items()}


@pytest.fixture
def chair_analysis(chair_payload):
    return WordAnalysis.model_validate(chair_payload)


@pytest.fixture
def make_analysis(chair_payload):
    def _make(**overrides):
        payload = dict(chair_payload)
        payload.update(overrides)
        return WordAnalysis.model_validate(payload)

    return _make


@pytest.fixture
def count(db):
    return lambda model: count_rows(db, model)


@pytest.fixture
def fake_client():
    return FakeAnalysisClient
