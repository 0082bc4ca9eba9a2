import io
import re
import sys

import pytest

from agenda_imobiliaria.cli import executar, ler_entrada, main
from agenda_imobiliaria.entidades import Corretor

ENTRADA = (
    "2\n"
    "555-0101 1 -23.5 -46.6 Maria da Silva\n"
    "555-0103 1 -23.6 -46.7 Pedro Alves\n"
    "1\n"
    "555-0102 João Pereira\n"
    "3\n"
    "casa 1 -23.6 -46.7 250000 Rua das Flores, 100\n"
    "apartamento 1 -23.55 -46.65 180000.5 Avenida Central, 20\n"
    "terreno 1 -23.5 -46.6 90000 Estrada Velha, km 3\n"
)


def test_ler_entrada_reads_all_fields():
    corretores, clientes, imoveis = ler_entrada(ENTRADA)
    assert [c.nome for c in corretores] == ["Maria da Silva", "Pedro Alves"]
    assert corretores[0].avaliador is True
    assert (corretores[0].lat, corretores[0].lng) == (-23.5, -46.6)
    assert clientes[0].nome == "João Pereira"
    assert clientes[0].telefone == "555-0102"
    assert imoveis[0].tipo == "casa"
    assert imoveis[0].endereco == "Rua das Flores, 100"
    assert imoveis[1].preco == 180000.5
    assert imoveis[2].endereco == "Estrada Velha, km 3"


def test_ler_entrada_name_may_be_on_next_line():
    corretores, clientes, imoveis = ler_entrada("1\n555 0 1 2\nNome Completo\n0\n0\n")
    assert corretores[0].nome == "Nome Completo"
    assert clientes == [] and imoveis == []


def test_ler_entrada_invalid_count_raises():
    with pytest.raises(ValueError):
        ler_entrada("dois\n")


def test_ler_entrada_truncated_raises():
    with pytest.raises(ValueError, match="corretor n°1"):
        ler_entrada("1\n555 1 0.0\n")


def test_executar_without_avaliadores():
    assert executar("1\n555 0 0 0 Ana\n0\n0\n") == "Nenhum avaliador disponível.\n"


def test_executar_schedules_every_property():
    saida = executar(ENTRADA)
    linhas = saida.splitlines()
    assert sum(linha.startswith("Corretor ") for linha in linhas) == 2
    visitas = [linha for linha in linhas if " Imóvel " in linha]
    assert len(visitas) == 3
    assert all(re.fullmatch(r"\d\d:\d\d Imóvel \d+", v) for v in visitas)
    assert saida.count("\n\n") == 1


def test_executar_avaliador_without_properties():
    anterior = Corretor().id
    saida = executar("1\n555 1 0 0 Ana\n0\n0\n")
    assert saida == f"Corretor {anterior + 1}\n"


def test_main_prints_schedule(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO(ENTRADA))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert out.startswith("Corretor ")
    assert out.count(" Imóvel ") == 3


def test_main_reports_bad_input(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO("1\n555 x 0 0 Ana\n"))
    assert main([]) == 1
    err = capsys.readouterr().err
    assert err.startswith("> Erro ao inicializar corretor n°1")