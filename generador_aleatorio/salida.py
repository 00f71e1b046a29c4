# -*- coding: utf-8 -*-
"""
Formato de salida: números en punto fijo, bloque de estadísticas y eco
de la configuración resuelta (--flags).
"""
from typing import Dict, List

from .config import RunConfig


def formatear(valor: float, precision: int) -> str:
    """Punto fijo con `precision` decimales (incluye ceros a la derecha)."""
    return f"{valor:.{precision}f}"


def linea_valor(posicion: int, valor: float, config: RunConfig) -> str:
    prefijo = f"{posicion}.\t" if config.listar else ""
    return f"{prefijo}{formatear(valor, config.precision)}{config.delim}"


def lineas_estadisticas(resultados: Dict[str, float], precision: int) -> List[str]:
    return [f"{nombre}: {formatear(valor, precision)}" for nombre, valor in resultados.items()]


def _lista(valores) -> str:
    return " ".join(str(v) for v in valores)


def lineas_flags(config: RunConfig) -> List[str]:
    """Una línea `opción: valor` por parámetro resuelto."""
    pedidas = {e.value for e in config.estadisticas}
    return [
        f"number,n: {config.count}",
        f"lbound,l: {config.lbound}",
        f"ubound,u: {config.ubound}",
        f"rounding: {config.redondeo.value}",
        f"precision,p: {config.precision}",
        f"exclude,x: {_lista(config.excluded)}",
        f"include,i: {_lista(config.included)}",
        f"norepeat: {int(config.norepeat)}",
        f"stat-min: {int('min' in pedidas)}",
        f"stat-max: {int('max' in pedidas)}",
        f"stat-median: {int('median' in pedidas)}",
        f"stat-mean: {int('mean' in pedidas)}",
        f"stat-var: {int('variance' in pedidas)}",
        f"stat-stddev: {int('stddev' in pedidas)}",
        f"stat-cv: {int('cv' in pedidas)}",
        f"prefix: {_lista(config.prefix)}",
        f"suffix: {_lista(config.suffix)}",
        f"contains: {_lista(config.contains)}",
        f"list: {int(config.listar)}",
        f"delim: {config.delim!r}",
        f"quiet,q: {int(config.quiet)}",
        f"numbers-force: {int(config.numbers_force)}",
        f"generator,g: {config.generator.value}",
        f"seed: {'' if config.seed is None else config.seed}",
        f"max-rejections: {config.max_rechazos}",
        f"flags: {int(config.flags)}",
    ]
