import logging
from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from starlette import status

from questoes_api.config import SERVICE_DESCRIPTION

logger = logging.getLogger(__name__)

router = APIRouter(tags=["status"])


def _error_text(error: Exception) -> str:
    # Erros do SQLAlchemy guardam a exceção do driver em 'orig'
    original = getattr(error, "orig", None)
    return str(original if original is not None else error)


@router.get("/", name="status")
def status_check(request: Request):
    """Informações da API e situação da conexão com o banco."""
    logger.info("Rota GET / solicitada")
    settings = request.app.state.settings

    db_status = "ok"
    try:
        request.app.state.database.ping()
    except (SQLAlchemyError, OSError) as e:
        logger.warning("Banco de dados indisponível: %s", e)
        db_status = _error_text(e)

    status_code = status.HTTP_200_OK
    if db_status != "ok" and settings.strict_healthcheck:
        status_code = status.HTTP_503_SERVICE_UNAVAILABLE

    return JSONResponse(
        status_code=status_code,
        content={
            "mensagem": SERVICE_DESCRIPTION,
            "autor": settings.author,
            "dbStatus": db_status,
        },
    )
