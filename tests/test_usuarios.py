"""Testes das rotas de /usuarios."""

from types import SimpleNamespace
from unittest.mock import MagicMock

import pytest
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from questoes_api.database import get_db

ANA = {"nome": "Ana", "idade": 20, "curso": "CS"}


def test_full_lifecycle(client):
    created = client.post("/usuarios", json=ANA)
    assert created.status_code == 201
    assert created.json() == {"mensagem": "Usuário criado com sucesso!"}

    rows = client.get("/usuarios").json()
    assert rows == [{"id": 1, **ANA}]

    # Objeto direto, não lista
    single = client.get("/usuarios/1")
    assert single.status_code == 200
    assert single.json() == {"id": 1, **ANA}

    deleted = client.delete("/usuarios/1")
    assert deleted.status_code == 200
    assert deleted.json() == {"mensagem": "Usuário excluído com sucesso!"}

    missing = client.get("/usuarios/1")
    assert missing.status_code == 404
    assert missing.json() == {"mensagem": "Usuário não encontrado"}


def test_update_only_idade(client):
    client.post("/usuarios", json=ANA)

    response = client.put("/usuarios/1", json={"idade": 21})

    assert response.status_code == 200
    assert response.json() == {"mensagem": "Usuário atualizado com sucesso!"}
    assert client.get("/usuarios/1").json() == {"id": 1, "nome": "Ana", "idade": 21, "curso": "CS"}


def test_update_ignores_empty_values(client):
    client.post("/usuarios", json=ANA)

    client.put("/usuarios/1", json={"nome": "", "idade": 0, "curso": None})

    assert client.get("/usuarios/1").json() == {"id": 1, **ANA}


@pytest.mark.parametrize(
    "payload",
    [
        {},
        {"nome": "Ana", "curso": "CS"},
        {"nome": "Ana", "idade": 0, "curso": "CS"},
        {"nome": "", "idade": 20, "curso": "CS"},
    ],
)
def test_create_with_missing_fields_returns_400(client, payload):
    response = client.post("/usuarios", json=payload)

    assert response.status_code == 400
    assert response.json() == {
        "erro": "Dados inválidos",
        "mensagem": "Os campos (nome, idade, curso) são obrigatórios.",
    }
    assert client.get("/usuarios").json() == []


def test_create_with_non_numeric_idade_returns_400(client):
    response = client.post("/usuarios", json={**ANA, "idade": "vinte"})

    assert response.status_code == 400
    assert client.get("/usuarios").json() == []


@pytest.mark.parametrize("method", ["put", "delete"])
def test_missing_usuario_returns_404(client, method):
    response = client.request(method.upper(), "/usuarios/42", json={"nome": "Bia"})

    assert response.status_code == 404
    assert response.json() == {"mensagem": "Usuário não encontrado"}


def test_usuarios_and_questoes_are_independent(client):
    client.post("/usuarios", json=ANA)

    assert client.get("/questoes").json() == []
    assert len(client.get("/usuarios").json()) == 1


def test_store_failure_returns_generic_500(broken_client):
    for method, path in [("GET", "/usuarios"), ("GET", "/usuarios/1"), ("DELETE", "/usuarios/1")]:
        response = broken_client.request(method, path)
        assert response.status_code == 500
        assert response.json() == {"erro": "Erro interno do servidor"}


def test_create_accepts_fractional_idade(client):
    response = client.post("/usuarios", json={**ANA, "idade": 20.5})

    assert response.status_code == 201
    assert client.get("/usuarios/1").json() == {"id": 1, **ANA, "idade": 20.5}


def test_rows_with_null_columns_are_returned_as_stored(external_app, external_client):
    with external_app.state.database.engine.begin() as conn:
        conn.execute(text("INSERT INTO usuarios (id, nome, idade, curso) VALUES (1, 'Ana', NULL, 'CS')"))

    listed = external_client.get("/usuarios")
    single = external_client.get("/usuarios/1")

    assert listed.status_code == 200
    assert listed.json() == [{"id": 1, "nome": "Ana", "idade": None, "curso": "CS"}]
    assert single.json() == {"id": 1, "nome": "Ana", "idade": None, "curso": "CS"}


@pytest.mark.parametrize("method, path", [("POST", "/usuarios"), ("PUT", "/usuarios/1")])
def test_store_failure_on_writes_returns_500(broken_client, method, path):
    response = broken_client.request(method, path, json=ANA)

    assert response.status_code == 500
    assert response.json() == {"erro": "Erro interno do servidor"}


def test_failed_update_is_rolled_back(app, client):
    session = MagicMock()
    session.query.return_value.filter.return_value.with_for_update.return_value.first.return_value = (
        SimpleNamespace(id=1, **ANA)
    )
    session.commit.side_effect = SQLAlchemyError("falha no UPDATE")

    def failing_db():
        yield session

    app.dependency_overrides[get_db] = failing_db
    try:
        response = client.put("/usuarios/1", json={"idade": 21})
    finally:
        app.dependency_overrides.clear()

    assert response.status_code == 500
    assert response.json() == {"erro": "Erro interno do servidor"}
    session.rollback.assert_called_once()
