from typing import Optional
from pydantic import BaseModel, ConfigDict, Field


class QuestaoEntrada(BaseModel):
    """
    Corpo aceito em POST e PUT de /questoes.
    Todos os campos são opcionais aqui: a obrigatoriedade no cadastro
    é verificada na rota, para devolver o erro no formato da API.
    Números enviados nos campos de texto são gravados como texto (ex: "nivel": 2).
    """
    model_config = ConfigDict(coerce_numbers_to_str=True)

    enunciado: Optional[str] = Field(None, description="Texto da questão.")
    disciplina: Optional[str] = Field(None, description="Disciplina da questão.")
    tema: Optional[str] = Field(None, description="Tema dentro da disciplina.")
    nivel: Optional[str] = Field(None, description="Nível de dificuldade.")


class Questao(BaseModel):
    # Linhas inseridas fora da API podem ter colunas nulas
    model_config = ConfigDict(from_attributes=True)

    id: int
    enunciado: Optional[str] = None
    disciplina: Optional[str] = None
    tema: Optional[str] = None
    nivel: Optional[str] = None
