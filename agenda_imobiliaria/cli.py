"""Command line entry point: read the agency data and print the schedule."""

from __future__ import annotations

import argparse
import re
import sys

from agenda_imobiliaria.agenda import formatar_agenda, montar_agenda
from agenda_imobiliaria.entidades import Cliente, Corretor, Imovel

SEM_AVALIADOR = "Nenhum avaliador disponível.\n"

_PALAVRA = re.compile(r"\s*(\S+)")
_RESTO_DA_LINHA = re.compile(r"\s*([^\n]+)")


class _Leitor:
    """Reads whitespace-separated words and rest-of-line fields from text."""

    def __init__(self, texto: str) -> None:
        self._texto = texto
        self._pos = 0

    def _casar(self, padrao: re.Pattern, campo: str) -> str:
        achado = padrao.match(self._texto, self._pos)
        if achado is None:
            raise ValueError(f"fim inesperado da entrada ao ler {campo}")
        self._pos = achado.end()
        return achado.group(1)

    def palavra(self, campo: str) -> str:
        return self._casar(_PALAVRA, campo)

    def inteiro(self, campo: str) -> int:
        valor = self.palavra(campo)
        try:
            return int(valor)
        except ValueError:
            raise ValueError(f"{campo} inválido: {valor!r}") from None

    def real(self, campo: str) -> float:
        valor = self.palavra(campo)
        try:
            return float(valor)
        except ValueError:
            raise ValueError(f"{campo} inválido: {valor!r}") from None

    def quantidade(self, campo: str) -> int:
        valor = self.inteiro(campo)
        if valor < 0:
            raise ValueError(f"{campo} negativa: {valor}")
        return valor

    def linha(self, campo: str) -> str:
        return self._casar(_RESTO_DA_LINHA, campo).rstrip("\r")


def _ler_corretor(leitor: _Leitor) -> Corretor:
    telefone = leitor.palavra("telefone")
    avaliador = leitor.inteiro("avaliador")
    lat = leitor.real("latitude")
    lng = leitor.real("longitude")
    nome = leitor.linha("nome")
    return Corretor(nome, telefone, avaliador, lat, lng)


def _ler_cliente(leitor: _Leitor) -> Cliente:
    telefone = leitor.palavra("telefone")
    nome = leitor.linha("nome")
    return Cliente(nome, telefone)


def _ler_imovel(leitor: _Leitor) -> Imovel:
    tipo = leitor.palavra("tipo")
    proprietario_id = leitor.inteiro("id do proprietário")
    lat = leitor.real("latitude")
    lng = leitor.real("longitude")
    preco = leitor.real("preço")
    endereco = leitor.linha("endereço")
    return Imovel(tipo, proprietario_id, endereco, lat, lng, preco)


def _ler_lista(leitor: _Leitor, rotulo: str, ler) -> list:
    quantidade = leitor.quantidade(f"quantidade de {rotulo}")
    itens = []
    for numero in range(1, quantidade + 1):
        try:
            itens.append(ler(leitor))
        except ValueError as erro:
            raise ValueError(f"Erro ao inicializar {rotulo} n°{numero}: {erro}") from erro
    return itens


def ler_entrada(texto: str) -> tuple[list[Corretor], list[Cliente], list[Imovel]]:
    """Parse brokers, clients and properties from the input text."""
    leitor = _Leitor(texto)
    corretores = _ler_lista(leitor, "corretor", _ler_corretor)
    clientes = _ler_lista(leitor, "cliente", _ler_cliente)
    imoveis = _ler_lista(leitor, "imóvel", _ler_imovel)
    return corretores, clientes, imoveis


def executar(texto: str) -> str:
    """Parse the input and return the text of the visit schedule."""
    corretores, _clientes, imoveis = ler_entrada(texto)
    agenda = montar_agenda(corretores, imoveis)
    if not agenda:
        return SEM_AVALIADOR
    return formatar_agenda(agenda)


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(
        prog="agenda-imobiliaria",
        description=(
            "Lê corretores, clientes e imóveis da entrada padrão e imprime "
            "a agenda de visitas dos avaliadores."
        ),
    )
    parser.parse_args(argv)
    try:
        saida = executar(sys.stdin.read())
    except ValueError as erro:
        print(f"> {erro}", file=sys.stderr)
        return 1
    sys.stdout.write(saida)
    return 0


if __name__ == "__main__":
    sys.exit(main())