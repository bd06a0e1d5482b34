"""Fixtures compartilhadas: aplicação com banco SQLite em memória."""

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import text

from main import create_app
from questoes_api.config import Settings


@pytest.fixture
def settings() -> Settings:
    return Settings(database_url="sqlite://", create_tables=True, log_level="DEBUG")


@pytest.fixture
def app(settings):
    return create_app(settings)


@pytest.fixture
def client(app):
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def broken_client(tmp_path):
    """Cliente apontando para um banco que não pode ser aberto."""
    url = f"sqlite:///{tmp_path / 'inexistente' / 'banco.db'}"
    app = create_app(Settings(database_url=url))
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def external_app():
    """Aplicação cujas tabelas são criadas fora da API, sem NOT NULL."""
    return create_app(Settings(database_url="sqlite://"))


@pytest.fixture
def external_client(external_app):
    with TestClient(external_app) as test_client:
        database = external_app.state.database
        with database.engine.begin() as conn:
            conn.execute(text(
                "CREATE TABLE questoes (id INTEGER PRIMARY KEY, enunciado TEXT, "
                "disciplina TEXT, tema TEXT, nivel TEXT)"
            ))
            conn.execute(text(
                "CREATE TABLE usuarios (id INTEGER PRIMARY KEY, nome TEXT, idade NUMERIC, curso TEXT)"
            ))
        yield test_client
