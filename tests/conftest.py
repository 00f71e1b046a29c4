# -*- coding: utf-8 -*-
import itertools
import logging
from typing import Sequence

import pytest

from generador_aleatorio.motores import GeneradorAcotado, Motor


class GeneradorFijo(GeneradorAcotado):
    """Devuelve los valores dados en ciclo; cuenta cuántas veces se sorteó."""

    def __init__(self, valores: Sequence[float]):
        super().__init__(Motor.MT19937, min(valores), max(valores))
        self._ciclo = itertools.cycle(valores)
        self.sorteos = 0

    def siguiente(self) -> float:
        self.sorteos += 1
        return next(self._ciclo)


@pytest.fixture
def fijo():
    return GeneradorFijo


@pytest.fixture(autouse=True)
def logger_limpio():
    """Deja el logger del paquete como estaba: sin handlers ni nivel propios."""
    yield
    logger = logging.getLogger("generador_aleatorio")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
