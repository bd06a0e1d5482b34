import logging
from typing import List, Optional
from fastapi import APIRouter, Body, Depends
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from starlette import status

# --- IMPORTAÇÕES DO BANCO DE DADOS (SQLAlchemy) ---
from questoes_api.database import get_db
from questoes_api.database_models import Questao
# --------------------------------------------------

# --- MODELOS PYDANTIC (entrada e saída) ---
from questoes_api.models.questao import QuestaoEntrada, Questao as QuestaoSaida
from questoes_api.crud_utils import (
    internal_error,
    invalid_data,
    merge_fields,
    missing_fields,
    not_found,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/questoes", tags=["questoes"])

FIELDS = ("enunciado", "disciplina", "tema", "nivel")
NOT_FOUND_MESSAGE = "Questão não encontrada"


# Rota 1: Listar Questões
@router.get("", response_model=List[QuestaoSaida], name="list_questoes")
def list_questoes(db: Session = Depends(get_db)):
    logger.info("Rota GET /questoes solicitada")
    try:
        return db.query(Questao).order_by(Questao.id).all()
    except SQLAlchemyError:
        raise internal_error(db, "Erro ao buscar questões")


# Rota 2: Buscar uma Questão
# Devolve uma lista com um elemento (formato mantido para os clientes existentes)
@router.get("/{questao_id}", response_model=List[QuestaoSaida], name="show_questao")
def show_questao(questao_id: int, db: Session = Depends(get_db)):
    logger.info("Rota GET /questoes/%s solicitada", questao_id)
    try:
        questao = db.query(Questao).filter(Questao.id == questao_id).first()
    except SQLAlchemyError:
        raise internal_error(db, "Erro ao buscar questão")

    if not questao:
        raise not_found(NOT_FOUND_MESSAGE)
    return [questao]


# Rota 3: Cadastrar Questão
@router.post("", status_code=status.HTTP_201_CREATED, name="create_questao")
def create_questao(dados: Optional[QuestaoEntrada] = Body(None), db: Session = Depends(get_db)):
    logger.info("Rota POST /questoes solicitada")
    data = dados.model_dump() if dados else {}

    if missing_fields(data, FIELDS):
        raise invalid_data(
            "Todos os campos (enunciado, disciplina, tema, nivel) são obrigatórios."
        )

    try:
        db.add(Questao(**{field: data[field] for field in FIELDS}))
        db.commit()
    except SQLAlchemyError:
        raise internal_error(db, "Erro ao inserir questão")

    return {"mensagem": "Questão criada com sucesso!"}


# Rota 4: Atualizar Questão
@router.put("/{questao_id}", name="update_questao")
def update_questao(
    questao_id: int,
    dados: Optional[QuestaoEntrada] = Body(None),
    db: Session = Depends(get_db),
):
    logger.info("Rota PUT /questoes/%s solicitada", questao_id)
    data = dados.model_dump() if dados else {}

    try:
        # 1. Busca e trava a linha até o commit
        questao = (
            db.query(Questao)
            .filter(Questao.id == questao_id)
            .with_for_update()
            .first()
        )
        if not questao:
            db.rollback()
            raise not_found(NOT_FOUND_MESSAGE)

        # 2. Mescla os campos enviados com os atuais
        for field, value in merge_fields(questao, data, FIELDS).items():
            setattr(questao, field, value)

        # 3. Salva no banco
        db.commit()
    except SQLAlchemyError:
        raise internal_error(db, "Erro ao atualizar questão")

    return {"mensagem": "Questão atualizada com sucesso!"}


# Rota 5: Deletar Questão
@router.delete("/{questao_id}", name="delete_questao")
def delete_questao(questao_id: int, db: Session = Depends(get_db)):
    logger.info("Rota DELETE /questoes/%s solicitada", questao_id)
    try:
        # Um único DELETE; o número de linhas afetadas decide o 404
        deleted = (
            db.query(Questao)
            .filter(Questao.id == questao_id)
            .delete(synchronize_session=False)
        )
        db.commit()
    except SQLAlchemyError:
        raise internal_error(db, "Erro ao excluir questão")

    if not deleted:
        raise not_found(NOT_FOUND_MESSAGE)
    return {"mensagem": "Questão excluída com sucesso!"}
