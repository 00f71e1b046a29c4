# -*- coding: utf-8 -*-
"""Tests de la política de redondeo."""
import pytest

from generador_aleatorio.config import ModoRedondeo
from generador_aleatorio.redondeo import redondear

VALORES = [-2.5, -1.7, -0.5, -0.2, 0.0, 0.2, 0.5, 1.49, 2.5, 3.999, 7.0]


def test_sin_modo_es_identidad():
    """Sin redondeo el valor no cambia."""
    assert redondear(3.14159) == 3.14159
    assert redondear(3.14159, "none") == 3.14159


def test_ceil_y_floor():
    """Techo hacia +inf, piso hacia -inf."""
    assert redondear(0.2, ModoRedondeo.CEIL) == 1.0
    assert redondear(-0.2, ModoRedondeo.CEIL) == 0.0
    assert redondear(0.2, ModoRedondeo.FLOOR) == 0.0
    assert redondear(-0.2, ModoRedondeo.FLOOR) == -1.0


def test_round_empates_lejos_de_cero():
    """Los x.5 se alejan de cero, a diferencia del round() nativo."""
    assert redondear(2.5, ModoRedondeo.ROUND) == 3.0
    assert redondear(-2.5, ModoRedondeo.ROUND) == -3.0
    assert redondear(0.5, ModoRedondeo.ROUND) == 1.0
    assert redondear(2.4999, ModoRedondeo.ROUND) == 2.0
    assert redondear(0.49999999999999994, ModoRedondeo.ROUND) == 0.0


def test_trunc_hacia_cero():
    assert redondear(1.7, ModoRedondeo.TRUNC) == 1.0
    assert redondear(-1.7, ModoRedondeo.TRUNC) == -1.0


@pytest.mark.parametrize("modo", [m for m in ModoRedondeo])
def test_idempotente(modo):
    """Aplicar el mismo modo dos veces da lo mismo que una."""
    for x in VALORES:
        una = redondear(x, modo)
        assert redondear(una, modo) == una


def test_devuelve_float():
    assert isinstance(redondear(1.2, ModoRedondeo.CEIL), float)
