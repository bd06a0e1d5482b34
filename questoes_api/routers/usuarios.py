import logging
from typing import List, Optional
from fastapi import APIRouter, Body, Depends
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from starlette import status

from questoes_api.database import get_db
from questoes_api.database_models import Usuario
from questoes_api.models.usuario import UsuarioEntrada, Usuario as UsuarioSaida
from questoes_api.crud_utils import (
    internal_error,
    invalid_data,
    merge_fields,
    missing_fields,
    not_found,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/usuarios", tags=["usuarios"])

FIELDS = ("nome", "idade", "curso")
NOT_FOUND_MESSAGE = "Usuário não encontrado"


@router.get("", response_model=List[UsuarioSaida], name="list_usuarios")
def list_usuarios(db: Session = Depends(get_db)):
    logger.info("Rota GET /usuarios solicitada")
    try:
        return db.query(Usuario).order_by(Usuario.id).all()
    except SQLAlchemyError:
        raise internal_error(db, "Erro ao buscar usuários")


# Ao contrário de /questoes/{id}, devolve o objeto direto
@router.get("/{usuario_id}", response_model=UsuarioSaida, name="show_usuario")
def show_usuario(usuario_id: int, db: Session = Depends(get_db)):
    logger.info("Rota GET /usuarios/%s solicitada", usuario_id)
    try:
        usuario = db.query(Usuario).filter(Usuario.id == usuario_id).first()
    except SQLAlchemyError:
        raise internal_error(db, "Erro ao buscar usuário")

    if not usuario:
        raise not_found(NOT_FOUND_MESSAGE)
    return usuario


@router.post("", status_code=status.HTTP_201_CREATED, name="create_usuario")
def create_usuario(dados: Optional[UsuarioEntrada] = Body(None), db: Session = Depends(get_db)):
    logger.info("Rota POST /usuarios solicitada")
    data = dados.model_dump() if dados else {}

    # Validação simples
    if missing_fields(data, FIELDS):
        raise invalid_data("Os campos (nome, idade, curso) são obrigatórios.")

    try:
        db.add(Usuario(nome=data["nome"], idade=data["idade"], curso=data["curso"]))
        db.commit()
    except SQLAlchemyError:
        raise internal_error(db, "Erro ao inserir usuário")

    return {"mensagem": "Usuário criado com sucesso!"}


@router.put("/{usuario_id}", name="update_usuario")
def update_usuario(
    usuario_id: int,
    dados: Optional[UsuarioEntrada] = Body(None),
    db: Session = Depends(get_db),
):
    logger.info("Rota PUT /usuarios/%s solicitada", usuario_id)
    data = dados.model_dump() if dados else {}

    try:
        usuario = (
            db.query(Usuario)
            .filter(Usuario.id == usuario_id)
            .with_for_update()
            .first()
        )
        if not usuario:
            db.rollback()
            raise not_found(NOT_FOUND_MESSAGE)

        # Mantém valores antigos se o novo não for informado
        for field, value in merge_fields(usuario, data, FIELDS).items():
            setattr(usuario, field, value)

        db.commit()
    except SQLAlchemyError:
        raise internal_error(db, "Erro ao atualizar usuário")

    return {"mensagem": "Usuário atualizado com sucesso!"}


@router.delete("/{usuario_id}", name="delete_usuario")
def delete_usuario(usuario_id: int, db: Session = Depends(get_db)):
    logger.info("Rota DELETE /usuarios/%s solicitada", usuario_id)
    try:
        deleted = (
            db.query(Usuario)
            .filter(Usuario.id == usuario_id)
            .delete(synchronize_session=False)
        )
        db.commit()
    except SQLAlchemyError:
        raise internal_error(db, "Erro ao excluir usuário")

    if not deleted:
        raise not_found(NOT_FOUND_MESSAGE)
    return {"mensagem": "Usuário excluído com sucesso!"}
