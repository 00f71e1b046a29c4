# -*- coding: utf-8 -*-
"""Tests de la validación de configuración."""
import logging

import pytest
from pydantic import ValidationError

from generador_aleatorio.config import (
    PRECISION_MAXIMA,
    ConfigError,
    Estadistica,
    ExitCode,
    ModoRedondeo,
    validar_config,
)
from generador_aleatorio.motores import Motor


def _codigo(**crudos) -> ExitCode:
    with pytest.raises(ConfigError) as info:
        validar_config(**crudos)
    return info.value.codigo


def test_valores_por_defecto():
    config = validar_config()
    assert config.count == 1
    assert (config.lbound, config.ubound) == (0.0, 1.0)
    assert config.precision == PRECISION_MAXIMA == 17
    assert config.redondeo is ModoRedondeo.NINGUNO
    assert config.generator is Motor.MT19937
    assert config.delim == "\n"


def test_count_menor_a_uno():
    assert _codigo(count=0) is ExitCode.ZERO_ERR
    assert _codigo(count=-3) is ExitCode.ZERO_ERR


def test_redondeos_mutuamente_excluyentes():
    assert _codigo(ceil=True, floor=True) is ExitCode.CONFLICT_ERR
    assert _codigo(round=True, trunc=True, ceil=True) is ExitCode.CONFLICT_ERR


def test_redondeo_fuerza_precision_cero():
    """Con redondeo la precisión pedida se ignora, aun fuera de rango."""
    config = validar_config(floor=True, precision=5)
    assert config.redondeo is ModoRedondeo.FLOOR
    assert config.precision == 0
    assert validar_config(round=True, precision=99).precision == 0


def test_precision_fuera_de_rango():
    assert _codigo(precision=PRECISION_MAXIMA + 1) is ExitCode.OVERD_ERR
    assert _codigo(precision=-1) is ExitCode.UNDERD_ERR
    assert validar_config(precision=0).precision == 0


def test_listas_vacias():
    """--exclude / --include sin argumentos son un error; ausentes no."""
    assert _codigo(excluded=[]) is ExitCode.EXCLUDE_ERR
    assert _codigo(included=[]) is ExitCode.EXCLUDE_ERR
    assert validar_config(excluded=None).excluded == ()


def test_limites_invertidos():
    assert _codigo(lbound=2.0, ubound=1.0) is ExitCode.BOUNDS_ERR
    assert validar_config(lbound=1.0, ubound=1.0).ubound == 1.0


def test_generador_desconocido():
    assert _codigo(generator="ranlux48") is ExitCode.GEN_ERR
    assert validar_config(generator="pcg64").generator is Motor.PCG64


@pytest.mark.parametrize("patron", ["1a", "1.2.3", "-1", " 1", "1e5"])
def test_patrones_no_numericos(patron):
    assert _codigo(prefix=[patron]) is ExitCode.VECT_NAN
    assert _codigo(suffix=["1", patron]) is ExitCode.VECT_NAN
    assert _codigo(contains=[patron]) is ExitCode.VECT_NAN


@pytest.mark.parametrize("patron", ["", "0", "3.14", ".5", "5."])
def test_patrones_validos(patron):
    assert validar_config(prefix=[patron]).prefix == (patron,)


def test_gana_el_primer_chequeo():
    assert _codigo(count=0, ceil=True, floor=True, generator="x") is ExitCode.ZERO_ERR
    assert _codigo(precision=-1, generator="x") is ExitCode.UNDERD_ERR


def test_estadisticas_all_y_orden_canonico():
    config = validar_config(estadisticas=["cv", "min", "min"])
    assert config.estadisticas == (Estadistica.MIN, Estadistica.CV)
    config = validar_config(estadisticas=["mean", "all"])
    assert config.estadisticas == tuple(Estadistica)


def test_config_inmutable():
    config = validar_config()
    with pytest.raises(ValidationError):
        config.count = 5


def test_mensaje_nombra_la_opcion():
    with pytest.raises(ConfigError) as info:
        validar_config(generator="nope")
    assert "--generator" in str(info.value)


@pytest.mark.parametrize("limite", [float("inf"), float("-inf"), float("nan")])
def test_limites_no_finitos(limite):
    assert _codigo(lbound=limite) is ExitCode.BOUNDS_ERR
    assert _codigo(ubound=limite) is ExitCode.BOUNDS_ERR
    with pytest.raises(ConfigError) as info:
        validar_config(lbound=0.0, ubound=limite)
    assert "--ubound" in info.value.mensaje


def test_semilla_negativa():
    assert _codigo(seed=-5) is ExitCode.SEED_ERR
    assert validar_config(seed=0).seed == 0
    with pytest.raises(ConfigError) as info:
        validar_config(seed=-1)
    assert "--seed" in info.value.mensaje


def test_max_rechazos_negativo():
    assert _codigo(max_rechazos=-1) is ExitCode.REJECT_ERR
    assert validar_config(max_rechazos=0).max_rechazos == 0
    with pytest.raises(ConfigError) as info:
        validar_config(max_rechazos=-1)
    assert "--max-rejections" in info.value.mensaje


def test_reemplazo_de_precision_solo_en_debug(caplog):
    with caplog.at_level(logging.DEBUG, logger="generador_aleatorio"):
        validar_config(round=True)
    registros = [r for r in caplog.records if "precision" in r.getMessage()]
    assert len(registros) == 1
    assert registros[0].levelno == logging.DEBUG
    assert not [r for r in caplog.records if r.levelno >= logging.WARNING]
