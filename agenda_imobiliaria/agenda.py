"""Distribution of properties among appraisers and their visit schedules."""

from __future__ import annotations

import math
from operator import attrgetter
from typing import Iterable, Iterator, Sequence

from agenda_imobiliaria.entidades import Corretor, Imovel

RAIO_TERRA_KM = 6371.0
INICIO_DO_DIA = 9 * 60
DURACAO_VISITA = 60
MINUTOS_POR_KM = 2


def haversine(lat1: float, lng1: float, lat2: float, lng2: float) -> float:
    """Great-circle distance in kilometres between two coordinates."""
    dlat = math.radians(lat2 - lat1)
    dlng = math.radians(lng2 - lng1)
    a = (
        math.sin(dlat / 2) ** 2
        + math.cos(math.radians(lat1)) * math.cos(math.radians(lat2)) * math.sin(dlng / 2) ** 2
    )
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))
    return RAIO_TERRA_KM * c


def imovel_mais_proximo(lat: float, lng: float, imoveis: Sequence[Imovel]) -> Imovel:
    """Return the property closest to the position; the first one wins ties."""
    if not imoveis:
        raise ValueError("nenhum imóvel para escolher")
    return min(imoveis, key=lambda imovel: haversine(lat, lng, imovel.lat, imovel.lng))


def montar_agenda(
    corretores: Iterable[Corretor], imoveis: Iterable[Imovel]
) -> dict[Corretor, list[Imovel]]:
    """Deal the properties round-robin to the appraisers, ordered by id."""
    avaliadores = sorted((c for c in corretores if c.avaliador), key=attrgetter("id"))
    agenda: dict[Corretor, list[Imovel]] = {corretor: [] for corretor in avaliadores}
    if avaliadores:
        for posicao, imovel in enumerate(imoveis):
            agenda[avaliadores[posicao % len(avaliadores)]].append(imovel)
    return agenda


def _roteiro(corretor: Corretor, imoveis: Iterable[Imovel]) -> Iterator[tuple[int, Imovel]]:
    """Yield (minute of the day, property) visiting the nearest property next."""
    pendentes = list(imoveis)
    tempo = INICIO_DO_DIA
    lat, lng = corretor.lat, corretor.lng
    while pendentes:
        imovel = imovel_mais_proximo(lat, lng, pendentes)
        deslocamento = haversine(lat, lng, imovel.lat, imovel.lng) * MINUTOS_POR_KM
        horario = int(deslocamento) + tempo
        yield horario, imovel
        tempo = horario + DURACAO_VISITA
        lat, lng = imovel.lat, imovel.lng
        pendentes.remove(imovel)


def formatar_agenda(agenda: dict[Corretor, Sequence[Imovel]]) -> str:
    """Render the visit schedule of every appraiser, blocks separated by a blank line."""
    blocos = []
    for corretor in sorted(agenda, key=attrgetter("id")):
        linhas = [f"Corretor {corretor.id}"]
        for horario, imovel in _roteiro(corretor, agenda[corretor]):
            hora, minuto = horario // 60 % 24, horario % 60
            linhas.append(f"{hora:02d}:{minuto:02d} Imóvel {imovel.id}")
        blocos.append("".join(f"{linha}\n" for linha in linhas))
    return "\n".join(blocos)