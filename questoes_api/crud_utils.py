import logging
from typing import Any, Dict, Iterable, List, Mapping
from fastapi import HTTPException
from starlette import status

logger = logging.getLogger(__name__)

INTERNAL_ERROR = {"erro": "Erro interno do servidor"}


def is_filled(value: Any) -> bool:
    """
    Um valor enviado só conta quando está presente e preenchido.
    Vazios: None, string vazia, zero numérico e False.
    """
    if value is None:
        return False
    if isinstance(value, str):
        return value != ""
    if isinstance(value, (bool, int, float)):
        return value != 0
    return True


def missing_fields(data: Mapping[str, Any], fields: Iterable[str]) -> List[str]:
    return [field for field in fields if not is_filled(data.get(field))]


def merge_fields(current: Any, data: Mapping[str, Any], fields: Iterable[str]) -> Dict[str, Any]:
    """Valor enviado quando preenchido; senão mantém o valor salvo no banco."""
    merged = {}
    for field in fields:
        value = data.get(field)
        merged[field] = value if is_filled(value) else getattr(current, field)
    return merged


def invalid_data(message: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_400_BAD_REQUEST,
        detail={"erro": "Dados inválidos", "mensagem": message},
    )


def not_found(message: str) -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail={"mensagem": message})


def internal_error(db, log_message: str) -> HTTPException:
    """Desfaz a transação, registra o erro no servidor e devolve a resposta genérica."""
    db.rollback()
    logger.exception(log_message)
    return HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=INTERNAL_ERROR)
