import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from selfreflect.db import init_db


@pytest.fixture
def session_factory(tmp_path):
    engine = create_engine(f"sqlite:///{tmp_path / 'test.db'}")
    init_db(engine)
    yield sessionmaker(autocommit=False, autoflush=False, bind=engine)
    engine.dispose()
