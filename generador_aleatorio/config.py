# -*- coding: utf-8 -*-
"""
Configuración validada de una corrida del generador.

La CLI entrega valores crudos; `validar_config` los normaliza y los
valida en un orden fijo. Cada problema tiene su propio código de salida
para que quien invoca sepa exactamente qué opción estaba mal.
"""
import logging
import math
import re
import sys
from enum import Enum, IntEnum
from typing import List, Optional, Sequence, Tuple

from pydantic import BaseModel, ConfigDict, Field

from .motores import Motor

logger = logging.getLogger(__name__)

# max_digits10 de un float64: 17
PRECISION_MAXIMA = math.ceil(sys.float_info.mant_dig * math.log10(2)) + 1

MAX_RECHAZOS_DEFAULT = 1_000_000

_PATRON_NUMERICO = re.compile(r"[0-9]*\.?[0-9]*")


class ExitCode(IntEnum):
    SUCCESS = 0
    KNOWN_ERR = 1
    OTHER_ERR = 2
    ZERO_ERR = 3
    CONFLICT_ERR = 4
    OVERD_ERR = 5
    UNDERD_ERR = 6
    EXCLUDE_ERR = 7
    BOUNDS_ERR = 8
    VECT_NAN = 9
    GEN_ERR = 10
    STALL_ERR = 11
    SEED_ERR = 12
    REJECT_ERR = 13
    HELP = -1


class ConfigError(Exception):
    """Error de validación con su código de salida asociado."""

    def __init__(self, codigo: ExitCode, mensaje: str):
        super().__init__(mensaje)
        self.codigo = codigo
        self.mensaje = mensaje


class ModoRedondeo(str, Enum):
    NINGUNO = "none"
    CEIL = "ceil"
    FLOOR = "floor"
    ROUND = "round"
    TRUNC = "trunc"


class Estadistica(str, Enum):
    MIN = "min"
    MAX = "max"
    MEDIAN = "median"
    MEAN = "mean"
    VARIANCE = "variance"
    STDDEV = "stddev"
    CV = "cv"


# Orden canónico para --stat-all
TODAS_LAS_ESTADISTICAS: Tuple[Estadistica, ...] = tuple(Estadistica)


class RunConfig(BaseModel):
    """Parámetros de una corrida, ya validados. Inmutable."""

    model_config = ConfigDict(frozen=True)

    count: int = Field(1, ge=1, description="Cantidad de sorteos (o de aceptados con numbers_force)")
    lbound: float = Field(0.0, description="Límite inferior")
    ubound: float = Field(1.0, description="Límite superior")
    precision: int = Field(PRECISION_MAXIMA, ge=0, le=PRECISION_MAXIMA)
    redondeo: ModoRedondeo = ModoRedondeo.NINGUNO
    excluded: Tuple[float, ...] = ()
    included: Tuple[float, ...] = ()
    norepeat: bool = False
    prefix: Tuple[str, ...] = ()
    suffix: Tuple[str, ...] = ()
    contains: Tuple[str, ...] = ()
    generator: Motor = Motor.MT19937
    numbers_force: bool = False
    quiet: bool = False
    listar: bool = False
    delim: str = "\n"
    estadisticas: Tuple[Estadistica, ...] = ()
    flags: bool = False
    seed: Optional[int] = None
    max_rechazos: int = Field(MAX_RECHAZOS_DEFAULT, ge=0, description="0 = sin tope")


def _es_numerico(patron: str) -> bool:
    return _PATRON_NUMERICO.fullmatch(patron) is not None


def validar_config(
    count: int = 1,
    lbound: float = 0.0,
    ubound: float = 1.0,
    precision: int = PRECISION_MAXIMA,
    ceil: bool = False,
    floor: bool = False,
    round: bool = False,
    trunc: bool = False,
    excluded: Optional[Sequence[float]] = None,
    included: Optional[Sequence[float]] = None,
    norepeat: bool = False,
    prefix: Optional[Sequence[str]] = None,
    suffix: Optional[Sequence[str]] = None,
    contains: Optional[Sequence[str]] = None,
    generator: str = "mt19937",
    numbers_force: bool = False,
    quiet: bool = False,
    listar: bool = False,
    delim: str = "\n",
    estadisticas: Optional[Sequence[str]] = None,
    flags: bool = False,
    seed: Optional[int] = None,
    max_rechazos: int = MAX_RECHAZOS_DEFAULT,
) -> RunConfig:
    """Valida los valores crudos de la CLI y devuelve un RunConfig.

    `excluded`/`included` en None significan "opción ausente"; una lista
    vacía significa que la opción se pasó sin argumentos (error).
    Lanza ConfigError en el primer chequeo que falle.
    """
    if count < 1:
        raise ConfigError(ExitCode.ZERO_ERR,
                          "el argumento de '--number' es inválido (n debe ser >= 1)")

    modos = [m for m, activo in ((ModoRedondeo.CEIL, ceil), (ModoRedondeo.FLOOR, floor),
                                 (ModoRedondeo.ROUND, round), (ModoRedondeo.TRUNC, trunc)) if activo]
    if len(modos) > 1:
        raise ConfigError(ExitCode.CONFLICT_ERR,
                          "--ceil, --floor, --round y --trunc son mutuamente excluyentes")
    redondeo = modos[0] if modos else ModoRedondeo.NINGUNO

    # Con redondeo activo la parte decimal no aporta nada
    if redondeo is not ModoRedondeo.NINGUNO:
        if precision != 0:
            logger.debug("precision %s reemplazada por 0 (--%s activo)", precision, redondeo.value)
        precision = 0

    if precision > PRECISION_MAXIMA:
        raise ConfigError(ExitCode.OVERD_ERR,
                          f"--precision no puede superar la precisión de <float> ({PRECISION_MAXIMA})")
    if precision < 0:
        raise ConfigError(ExitCode.UNDERD_ERR, "--precision no puede ser menor que cero")

    if excluded is not None and len(excluded) == 0:
        raise ConfigError(ExitCode.EXCLUDE_ERR,
                          "--exclude se indicó sin argumentos (los argumentos van separados por espacios)")
    if included is not None and len(included) == 0:
        raise ConfigError(ExitCode.EXCLUDE_ERR,
                          "--include se indicó sin argumentos (los argumentos van separados por espacios)")

    for nombre, limite in (("--lbound", lbound), ("--ubound", ubound)):
        if not math.isfinite(limite):
            raise ConfigError(ExitCode.BOUNDS_ERR, f"{nombre} debe ser un número finito (se recibió {limite})")
    if lbound > ubound:
        raise ConfigError(ExitCode.BOUNDS_ERR,
                          f"--lbound ({lbound}) no puede ser mayor que --ubound ({ubound})")

    nombres = [m.value for m in Motor]
    if generator not in nombres:
        raise ConfigError(ExitCode.GEN_ERR, "--generator debe ser uno de: " + ", ".join(nombres))

    for patrones in (prefix, suffix, contains):
        for patron in patrones or ():
            if not _es_numerico(patron):
                raise ConfigError(ExitCode.VECT_NAN,
                                  "--prefix, --suffix y --contains solo admiten números")

    if seed is not None and seed < 0:
        raise ConfigError(ExitCode.SEED_ERR, f"--seed debe ser un entero >= 0 (se recibió {seed})")

    if max_rechazos < 0:
        raise ConfigError(ExitCode.REJECT_ERR,
                          f"--max-rejections debe ser >= 0 (0 = sin tope, se recibió {max_rechazos})")

    pedidas: List[Estadistica] = []
    for nombre in estadisticas or ():
        if nombre == "all":
            candidatas = TODAS_LAS_ESTADISTICAS
        else:
            candidatas = (Estadistica(nombre),)
        for est in candidatas:
            if est not in pedidas:
                pedidas.append(est)
    # Se muestran siempre en orden canónico
    pedidas.sort(key=TODAS_LAS_ESTADISTICAS.index)

    return RunConfig(
        count=count,
        lbound=lbound,
        ubound=ubound,
        precision=precision,
        redondeo=redondeo,
        excluded=tuple(excluded or ()),
        included=tuple(included or ()),
        norepeat=norepeat,
        prefix=tuple(prefix or ()),
        suffix=tuple(suffix or ()),
        contains=tuple(contains or ()),
        generator=Motor(generator),
        numbers_force=numbers_force,
        quiet=quiet,
        listar=listar,
        delim=delim,
        estadisticas=tuple(pedidas),
        flags=flags,
        seed=seed,
        max_rechazos=max_rechazos,
    )
