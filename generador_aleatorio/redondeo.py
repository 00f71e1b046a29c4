# -*- coding: utf-8 -*-
"""Política de redondeo aplicada a cada sorteo antes de filtrar."""
import math
from typing import Callable, Dict

from .config import ModoRedondeo


def redondear_lejos_de_cero(x: float) -> float:
    """Entero más cercano; los empates (x.5) se alejan de cero.

    El round() nativo redondea empates al par, por eso no se usa.
    """
    t = math.trunc(x)
    if abs(x - t) >= 0.5:
        return float(t) + math.copysign(1.0, x)
    return float(t)


_FUNCIONES: Dict[ModoRedondeo, Callable[[float], float]] = {
    ModoRedondeo.CEIL: lambda x: float(math.ceil(x)),
    ModoRedondeo.FLOOR: lambda x: float(math.floor(x)),
    ModoRedondeo.ROUND: redondear_lejos_de_cero,
    ModoRedondeo.TRUNC: lambda x: float(math.trunc(x)),
}


def redondear(valor: float, modo: ModoRedondeo = ModoRedondeo.NINGUNO) -> float:
    modo = ModoRedondeo(modo)
    if modo is ModoRedondeo.NINGUNO:
        return valor
    return _FUNCIONES[modo](valor)
