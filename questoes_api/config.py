import os
from typing import Optional
from pydantic import BaseModel
from dotenv import load_dotenv

# Valores padrão da API
DEFAULT_PORT = 3000
DEFAULT_AUTHOR = "Arthur Porto"
SERVICE_DESCRIPTION = "API para Questões e Usuários"


def _env_flag(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None or value.strip() == "":
        return default
    return value.strip().lower() in ("1", "true", "sim", "yes", "on")


class Settings(BaseModel):
    """Configurações do serviço, lidas das variáveis de ambiente."""

    database_url: str
    host: str = "0.0.0.0"
    port: int = DEFAULT_PORT
    author: str = DEFAULT_AUTHOR
    strict_healthcheck: bool = True
    create_tables: bool = False
    log_level: str = "INFO"

    @classmethod
    def from_env(cls, env_file: Optional[str] = None) -> "Settings":
        # Carrega o .env (se existir) sem sobrescrever o ambiente real
        load_dotenv(env_file)

        database_url = os.getenv("URL_BD")
        if not database_url:
            raise RuntimeError("URL_BD não encontrada no ambiente (coloque URL_BD=... no .env)")

        return cls(
            database_url=database_url,
            host=os.getenv("HOST", "0.0.0.0"),
            port=int(os.getenv("PORTA") or os.getenv("PORT") or DEFAULT_PORT),
            author=os.getenv("AUTOR", DEFAULT_AUTHOR),
            strict_healthcheck=_env_flag("HEALTHCHECK_ESTRITO", True),
            create_tables=_env_flag("CRIAR_TABELAS", False),
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        )
