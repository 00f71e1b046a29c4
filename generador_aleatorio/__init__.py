# -*- coding: utf-8 -*-
"""Generador de números aleatorios acotados con filtros y estadísticas."""
from .config import ConfigError, Estadistica, ExitCode, ModoRedondeo, RunConfig, validar_config
from .estadisticas import calcular_estadisticas
from .filtros import CadenaFiltros
from .generacion import GeneracionEstancada, generar
from .motores import Motor, crear_generador
from .redondeo import redondear

__version__ = "1.2.0"

__all__ = [
    "CadenaFiltros",
    "ConfigError",
    "Estadistica",
    "ExitCode",
    "GeneracionEstancada",
    "ModoRedondeo",
    "Motor",
    "RunConfig",
    "calcular_estadisticas",
    "crear_generador",
    "generar",
    "redondear",
    "validar_config",
]
