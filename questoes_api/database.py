import logging
from fastapi import Request
from sqlalchemy import create_engine, text
from sqlalchemy.orm import declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool

logger = logging.getLogger(__name__)

# Base Declarativa: os modelos das tabelas herdam desta
Base = declarative_base()


def normalize_url(url: str) -> str:
    # Alguns provedores ainda entregam "postgres://", que o SQLAlchemy não aceita
    if url.startswith("postgres://"):
        return url.replace("postgres://", "postgresql://", 1)
    return url


class Database:
    """Engine e fábrica de sessões, criados uma vez na inicialização da API."""

    def __init__(self, url: str):
        self.url = normalize_url(url)

        engine_args = {}
        if self.url.startswith("sqlite"):
            # 'check_same_thread' é necessário apenas para SQLite
            engine_args["connect_args"] = {"check_same_thread": False}
            if ":memory:" in self.url or self.url in ("sqlite://", "sqlite+pysqlite://"):
                # Banco em memória: todas as sessões precisam da mesma conexão
                engine_args["poolclass"] = StaticPool
        else:
            engine_args["pool_pre_ping"] = True

        self.engine = create_engine(self.url, **engine_args)
        self.SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=self.engine)

    def session(self):
        return self.SessionLocal()

    def ping(self) -> None:
        """Executa uma consulta trivial; levanta a exceção do driver em caso de falha."""
        with self.engine.connect() as conn:
            conn.execute(text("SELECT 1"))

    def create_tables(self) -> None:
        # Importa os modelos para registrá-los no metadata
        from questoes_api import database_models  # noqa: F401

        Base.metadata.create_all(bind=self.engine)
        logger.info("Tabelas verificadas/criadas")

    def dispose(self) -> None:
        self.engine.dispose()
        logger.info("Conexões com o banco encerradas")


# --- Dependência do FastAPI para obter a sessão ---
def get_db(request: Request):
    """Entrega uma sessão por requisição e garante que ela será fechada."""
    db = request.app.state.database.session()
    try:
        yield db
    finally:
        db.close()
