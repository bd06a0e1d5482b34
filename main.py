import logging
from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError, ResponseValidationError
from fastapi.responses import JSONResponse
from starlette import status as status_codes
from starlette.exceptions import HTTPException as StarletteHTTPException

# --- Configuração e banco de dados ---
from questoes_api.config import Settings, SERVICE_DESCRIPTION
from questoes_api.database import Database
# -------------------------------------

# --- Importação dos Roteadores ---
from questoes_api.routers.status import router as status_router
from questoes_api.routers.questoes import router as questoes_router
from questoes_api.routers.usuarios import router as usuarios_router
# ---------------------------------

logger = logging.getLogger("questoes_api")


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Monta a aplicação. Sem 'settings', a configuração vem do ambiente na inicialização."""

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        app_settings = settings or Settings.from_env()
        configure_logging(app_settings.log_level)

        database = Database(app_settings.database_url)
        if app_settings.create_tables:
            database.create_tables()

        app.state.settings = app_settings
        app.state.database = database
        logger.info("Banco de dados configurado")
        try:
            yield
        finally:
            database.dispose()

    app = FastAPI(title=SERVICE_DESCRIPTION, lifespan=lifespan)

    # Inclui os roteadores
    app.include_router(status_router)
    app.include_router(questoes_router)
    app.include_router(usuarios_router)

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        # As rotas levantam HTTPException com o corpo da resposta já pronto em 'detail'
        if isinstance(exc.detail, dict):
            content = exc.detail
        else:
            content = {"mensagem": exc.detail}
        return JSONResponse(status_code=exc.status_code, content=content, headers=exc.headers)

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        logger.info("Requisição inválida em %s %s: %s", request.method, request.url.path, exc.errors())
        return JSONResponse(
            status_code=status_codes.HTTP_400_BAD_REQUEST,
            content={
                "erro": "Dados inválidos",
                "mensagem": "O corpo da requisição ou os parâmetros enviados são inválidos.",
            },
        )

    @app.exception_handler(ResponseValidationError)
    async def response_validation_exception_handler(request: Request, exc: ResponseValidationError):
        # Linha do banco que não cabe no formato de saída
        logger.error("Resposta inválida em %s %s: %s", request.method, request.url.path, exc.errors())
        return JSONResponse(
            status_code=status_codes.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"erro": "Erro interno do servidor"},
        )

    return app


app = create_app()

if __name__ == "__main__":
    run_settings = Settings.from_env()
    configure_logging(run_settings.log_level)
    logger.info("Serviço rodando na porta: %s", run_settings.port)
    uvicorn.run(create_app(run_settings), host=run_settings.host, port=run_settings.port)
