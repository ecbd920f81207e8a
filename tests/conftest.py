import pytest

from sqlalchemy.orm import sessionmaker

from sqlalchemy_querydemo import Config, QueryDemo, build_engine
from sqlalchemy_querydemo.seed import create_schema, seed_catalog


@pytest.fixture
def engine():
    engine = build_engine(Config(database_url="sqlite://"))
    create_schema(engine)

    yield engine

    engine.dispose()

@pytest.fixture
def SessionFactory(engine):
    with sessionmaker(engine).begin() as session:
        seed_catalog(session)

    yield sessionmaker(
        engine,
        expire_on_commit=False,
    )

@pytest.fixture
def demo(engine, SessionFactory):
    with QueryDemo(engine=engine) as demo:
        yield demo
