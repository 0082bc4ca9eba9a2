"""People and properties handled by the agency."""

from __future__ import annotations

import itertools
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import ClassVar, Iterator


class _ComIdentificador:
    """Gives every subclass its own sequence of ids starting at 1."""

    _ids: ClassVar[Iterator[int]]

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        cls._ids = itertools.count(1)

    def _proximo_id(self) -> int:
        return next(type(self)._ids)


@dataclass(eq=False)
class Pessoa(_ComIdentificador, ABC):
    """A person with a name and a phone number."""

    nome: str = ""
    telefone: str = ""
    id: int = field(init=False, default=0)

    def __post_init__(self) -> None:
        self.id = self._proximo_id()

    @abstractmethod
    def exibir_informacoes(self) -> None:
        """Print a description of this person."""


@dataclass(eq=False)
class Cliente(Pessoa):
    """A client of the agency."""

    def _linhas(self) -> list[str]:
        return [
            f"# Cliente {self.id}",
            f"+ Nome: {self.nome}; Telefone: {self.telefone}",
        ]

    def __str__(self) -> str:
        return "".join(f"{linha}\n" for linha in self._linhas())

    def exibir_informacoes(self) -> None:
        for linha in self._linhas():
            print(linha)


@dataclass(eq=False)
class Corretor(Pessoa):
    """A broker; brokers that are appraisers visit properties."""

    avaliador: bool = False
    lat: float = 0.0
    lng: float = 0.0

    def __post_init__(self) -> None:
        super().__post_init__()
        self.avaliador = bool(self.avaliador)

    def _linhas(self) -> list[str]:
        papel = "Avaliador" if self.avaliador else "Não avaliador"
        return [
            f"# Corretor {self.id}",
            f"+ Nome: {self.nome}; Telefone: {self.telefone}",
            f"+ Latitude: {self.lat:g}; Longitude {self.lng:g}",
            f"+ {papel}",
        ]

    def __str__(self) -> str:
        return "".join(f"{linha}\n" for linha in self._linhas())

    def exibir_informacoes(self) -> None:
        for linha in self._linhas():
            print(linha)


@dataclass(eq=False)
class Imovel(_ComIdentificador):
    """A property on offer, located by latitude and longitude."""

    tipo: str = ""
    proprietario_id: int = 0
    endereco: str = ""
    lat: float = 0.0
    lng: float = 0.0
    preco: float = 0.0
    id: int = field(init=False, default=0)

    def __post_init__(self) -> None:
        self.id = self._proximo_id()

    def _linhas(self) -> list[str]:
        return [
            f"# Imóvel {self.id}",
            f"+ Tipo: {self.tipo}; Id do Proprietário: {self.proprietario_id}",
            f"+ Latitude: {self.lat:g}; Longitude {self.lng:g}",
            f"+ Preço: R$ {self.preco:.2f}",
            f"+ Endereço: {self.endereco}",
        ]

    def __str__(self) -> str:
        return "".join(f"{linha}\n" for linha in self._linhas())

    def exibir_informacoes(self) -> None:
        for linha in self._linhas():
            print(linha)