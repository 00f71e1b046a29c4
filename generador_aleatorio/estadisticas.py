# -*- coding: utf-8 -*-
"""
Estadísticas sobre los valores aceptados.

Se calculan una sola vez, al terminar la generación, sobre una copia:
la secuencia del llamador nunca se reordena. Con una secuencia vacía
todas devuelven NaN.
"""
import logging
import math
from typing import Callable, Dict, Iterable, Sequence

import numpy as np

from .config import Estadistica

logger = logging.getLogger(__name__)

VACIO = float("nan")


def _vacio(nombre: str) -> float:
    logger.warning("%s: no hay valores aceptados, resultado NaN", nombre)
    return VACIO


def minimo(valores: Sequence[float]) -> float:
    if not len(valores):
        return _vacio("min")
    return float(min(valores))


def maximo(valores: Sequence[float]) -> float:
    if not len(valores):
        return _vacio("max")
    return float(max(valores))


def mediana(valores: Sequence[float]) -> float:
    """Mediana por partición.

    Largo impar: el elemento central. Largo par: se particiona en el
    elemento medio inferior y se promedia con el máximo de la mitad
    inferior. Para [1, 2, 3, 4] da 2.0 (no el 2.5 convencional).
    """
    n = len(valores)
    if n == 0:
        return _vacio("median")
    datos = np.array(valores, dtype=float)
    if n % 2:
        k = n // 2
        return float(np.partition(datos, k)[k])
    k = n // 2 - 1
    parte = np.partition(datos, k)
    return float((parte[k] + parte[: n // 2].max()) / 2)


def media(valores: Sequence[float]) -> float:
    if not len(valores):
        return _vacio("mean")
    return float(np.mean(np.asarray(valores, dtype=float)))


def varianza(valores: Sequence[float]) -> float:
    """Varianza poblacional (divide por N)."""
    if not len(valores):
        return _vacio("variance")
    return float(np.var(np.asarray(valores, dtype=float), ddof=0))


def desviacion(valores: Sequence[float]) -> float:
    if not len(valores):
        return _vacio("stddev")
    return math.sqrt(varianza(valores))


def coef_variacion(valores: Sequence[float]) -> float:
    """Desvío / media. Con media 0 el resultado es inf o nan, nunca una excepción."""
    if not len(valores):
        return _vacio("cv")
    with np.errstate(divide="ignore", invalid="ignore"):
        return float(np.float64(desviacion(valores)) / np.float64(media(valores)))


CALCULOS: Dict[Estadistica, Callable[[Sequence[float]], float]] = {
    Estadistica.MIN: minimo,
    Estadistica.MAX: maximo,
    Estadistica.MEDIAN: mediana,
    Estadistica.MEAN: media,
    Estadistica.VARIANCE: varianza,
    Estadistica.STDDEV: desviacion,
    Estadistica.CV: coef_variacion,
}


def calcular_estadisticas(valores: Sequence[float], pedidas: Iterable) -> Dict[str, float]:
    """Devuelve {etiqueta: valor} en el orden de `pedidas`."""
    resultados: Dict[str, float] = {}
    for est in pedidas:
        est = Estadistica(est)
        resultados[est.value] = CALCULOS[est](valores)
    return resultados
