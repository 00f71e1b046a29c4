# -*- coding: utf-8 -*-
"""
Bucle de generación: sortear -> redondear -> filtrar -> acumular.

Sin numbers_force se hacen exactamente `count` sorteos y la cantidad de
aceptados puede ser menor. Con numbers_force se sortea hasta aceptar
`count` valores; si los filtros no se pueden satisfacer eso no termina
nunca, por eso se corta tras `max_rechazos` rechazos consecutivos
(0 = sin tope).
"""
import logging
from collections import Counter
from typing import Callable, List, Optional

from .config import RunConfig
from .filtros import CadenaFiltros
from .motores import GeneradorAcotado
from .redondeo import redondear

logger = logging.getLogger(__name__)

# (posición 1-based entre los aceptados, valor)
Emisor = Callable[[int, float], None]


class GeneracionEstancada(RuntimeError):
    """numbers_force no consigue aceptar valores nuevos."""

    def __init__(self, rechazos: int, aceptados: int, objetivo: int):
        super().__init__(
            f"--numbers-force: {rechazos} sorteos consecutivos rechazados tras aceptar "
            f"{aceptados} de {objetivo} (los filtros pueden ser insatisfacibles, ver --max-rejections)"
        )
        self.rechazos = rechazos
        self.aceptados = aceptados
        self.objetivo = objetivo


def generar(
    config: RunConfig,
    generador: GeneradorAcotado,
    emitir: Optional[Emisor] = None,
    filtros: Optional[CadenaFiltros] = None,
) -> List[float]:
    """Ejecuta la corrida y devuelve los valores aceptados en orden de generación.

    Cada valor aceptado se pasa a `emitir` en el momento (salvo en modo quiet).
    """
    if filtros is None:
        filtros = CadenaFiltros.desde_config(config)

    aceptados: List[float] = []
    vistos = set()
    rechazos: Counter = Counter()
    sorteos = 0
    consecutivos = 0

    intento = 1
    while intento <= config.count:
        valor = redondear(generador.siguiente(), config.redondeo)
        sorteos += 1
        if not config.numbers_force:
            intento += 1

        motivo = filtros.motivo_rechazo(valor, vistos)
        if motivo is not None:
            rechazos[motivo] += 1
            consecutivos += 1
            if config.numbers_force and config.max_rechazos and consecutivos >= config.max_rechazos:
                raise GeneracionEstancada(consecutivos, len(aceptados), config.count)
            continue

        consecutivos = 0
        aceptados.append(valor)
        vistos.add(valor)
        if config.numbers_force:
            intento += 1
        if emitir is not None and not config.quiet:
            emitir(len(aceptados), valor)

    if rechazos:
        logger.debug("rechazos por filtro: %s", dict(rechazos))
    logger.info("%d sorteos, %d aceptados", sorteos, len(aceptados))
    return aceptados
