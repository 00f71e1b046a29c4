# -*- coding: utf-8 -*-
"""
Motores de números aleatorios acotados a [lbound, ubound].

El motor se elige una sola vez por corrida: `crear_generador` devuelve un
objeto con estado propio cuyo único método de uso es `siguiente()`.
La semilla se toma una vez al construirlo (entropía del sistema) salvo que
se pase una explícita para reproducir una corrida.

Motores disponibles:
- mt19937, pcg64, pcg64dxsm, philox, sfc64: bit generators de numpy.
- default: numpy.random.default_rng (PCG64 en numpy actual).
- python: random.Random de la biblioteca estándar (también MT19937).
- system: random.SystemRandom (os.urandom, no admite semilla).
- badrandom: generador degradado sembrado con la hora del reloj.
"""
import logging
import random
import time
from abc import ABC, abstractmethod
from enum import Enum
from typing import Optional

import numpy as np

logger = logging.getLogger(__name__)

# Equivalente al RAND_MAX de glibc
RAND_MAX = 2**31 - 1


class Motor(str, Enum):
    MT19937 = "mt19937"
    PCG64 = "pcg64"
    PCG64DXSM = "pcg64dxsm"
    PHILOX = "philox"
    SFC64 = "sfc64"
    DEFAULT = "default"
    PYTHON = "python"
    SYSTEM = "system"
    BADRANDOM = "badrandom"


_BIT_GENERATORS = {
    Motor.MT19937: np.random.MT19937,
    Motor.PCG64: np.random.PCG64,
    Motor.PCG64DXSM: np.random.PCG64DXSM,
    Motor.PHILOX: np.random.Philox,
    Motor.SFC64: np.random.SFC64,
}


class GeneradorAcotado(ABC):
    """Fuente de valores reales en [lbound, ubound]."""

    def __init__(self, motor: Motor, lbound: float, ubound: float):
        self.motor = motor
        self.lbound = lbound
        self.ubound = ubound

    @abstractmethod
    def siguiente(self) -> float:
        """Devuelve el próximo valor sorteado."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.motor.value}, [{self.lbound}, {self.ubound}])"


class GeneradorNumpy(GeneradorAcotado):
    """Uniforme continua sobre un bit generator de numpy."""

    def __init__(self, motor: Motor, lbound: float, ubound: float, seed: Optional[int] = None):
        super().__init__(motor, lbound, ubound)
        if motor is Motor.DEFAULT:
            self._rng = np.random.default_rng(seed)
        else:
            # SeedSequence(None) toma entropía del sistema operativo
            self._rng = np.random.Generator(_BIT_GENERATORS[motor](np.random.SeedSequence(seed)))

    def siguiente(self) -> float:
        return float(self._rng.uniform(self.lbound, self.ubound))


class GeneradorPython(GeneradorAcotado):
    """Uniforme continua con el módulo random de la biblioteca estándar."""

    def __init__(self, motor: Motor, lbound: float, ubound: float, seed: Optional[int] = None):
        super().__init__(motor, lbound, ubound)
        if motor is Motor.SYSTEM:
            if seed is not None:
                logger.warning("el motor 'system' ignora la semilla %s", seed)
            self._rng: random.Random = random.SystemRandom()
        else:
            self._rng = random.Random(seed)

    def siguiente(self) -> float:
        return self._rng.uniform(self.lbound, self.ubound)


class GeneradorDegradado(GeneradorAcotado):
    """Generador de baja calidad sembrado con la hora del reloj.

    Escala un entero crudo de 31 bits: lbound + crudo / (RAND_MAX / ancho).
    La granularidad es de 2**31 pasos, así que las colas quedan levemente
    sesgadas respecto de una uniforme continua. Es una limitación conocida.
    """

    def __init__(self, lbound: float, ubound: float, seed: Optional[int] = None):
        super().__init__(Motor.BADRANDOM, lbound, ubound)
        self._rng = random.Random(int(time.time()) if seed is None else seed)
        self._ancho = ubound - lbound

    def crudo(self) -> int:
        """Entero en [0, RAND_MAX]."""
        return self._rng.getrandbits(31)

    def siguiente(self) -> float:
        crudo = self.crudo()
        if self._ancho == 0:
            return self.lbound
        return self.lbound + crudo / (RAND_MAX / self._ancho)


def crear_generador(motor, lbound: float, ubound: float, seed: Optional[int] = None) -> GeneradorAcotado:
    """Construye el generador para el identificador `motor`.

    Lanza ValueError si el identificador no pertenece a Motor.
    """
    motor = Motor(motor)
    if motor in _BIT_GENERATORS or motor is Motor.DEFAULT:
        generador: GeneradorAcotado = GeneradorNumpy(motor, lbound, ubound, seed)
    elif motor in (Motor.PYTHON, Motor.SYSTEM):
        generador = GeneradorPython(motor, lbound, ubound, seed)
    else:
        logger.warning("usando el generador degradado 'badrandom' (sembrado con la hora)")
        generador = GeneradorDegradado(lbound, ubound, seed)

    logger.debug("motor %s creado, semilla=%s", generador, "entropía del sistema" if seed is None else seed)
    return generador
