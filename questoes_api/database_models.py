from sqlalchemy import Column, Integer, Numeric, TEXT
from .database import Base  # Importa o 'Base' declarativo


# 1. Modelo de Tabela para Questões
class Questao(Base):
    __tablename__ = "questoes"
    id = Column(Integer, primary_key=True, autoincrement=True)
    enunciado = Column(TEXT, nullable=False)
    disciplina = Column(TEXT, nullable=False)
    tema = Column(TEXT, nullable=False)
    nivel = Column(TEXT, nullable=False)


# 2. Modelo de Tabela para Usuários
class Usuario(Base):
    __tablename__ = "usuarios"
    id = Column(Integer, primary_key=True, autoincrement=True)
    nome = Column(TEXT, nullable=False)
    idade = Column(Numeric(asdecimal=False), nullable=False)
    curso = Column(TEXT, nullable=False)
