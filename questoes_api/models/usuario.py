from decimal import Decimal
from typing import Optional, Union
from pydantic import BaseModel, ConfigDict, field_validator

Numero = Union[int, float]


class UsuarioEntrada(BaseModel):
    model_config = ConfigDict(coerce_numbers_to_str=True)

    nome: Optional[str] = None
    idade: Optional[Numero] = None
    curso: Optional[str] = None


class Usuario(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    nome: Optional[str] = None
    idade: Optional[Numero] = None
    curso: Optional[str] = None

    @field_validator("idade", mode="before")
    @classmethod
    def idade_inteira(cls, value):
        # O banco devolve NUMERIC como float/Decimal; 20.0 sai como 20
        if isinstance(value, (float, Decimal)) and float(value).is_integer():
            return int(value)
        return value
