# -*- coding: utf-8 -*-
"""Tests de la configuración de logging."""
import logging
import sys

from generador_aleatorio.registro import ENV_NIVEL, configurar_logging


def test_nivel_desde_variable_de_entorno(monkeypatch):
    monkeypatch.setenv(ENV_NIVEL, "debug")
    logger = configurar_logging()
    assert logger.level == logging.DEBUG
    configurar_logging("warning")
    assert logger.level == logging.WARNING


def test_no_duplica_handlers():
    logger = configurar_logging()
    antes = len(logger.handlers)
    configurar_logging()
    configurar_logging("info")
    assert len(logger.handlers) == antes


def test_handler_es_stream_handler_comun():
    """Un StreamHandler común apuntado al sys.stderr vigente."""
    logger = configurar_logging()
    handlers = [h for h in logger.handlers if type(h) is logging.StreamHandler]
    assert len(handlers) == 1
    assert handlers[0].stream is sys.stderr


def test_reapunta_al_stderr_vigente(capsys):
    """Una segunda llamada sigue al sys.stderr reemplazado (por ejemplo por capsys)."""
    logger = configurar_logging()
    handler = next(h for h in logger.handlers if type(h) is logging.StreamHandler)
    configurar_logging()
    assert handler.stream is sys.stderr


def test_mensajes_propagan_con_el_nivel(caplog):
    configurar_logging("warning")
    with caplog.at_level(logging.WARNING, logger="generador_aleatorio"):
        logging.getLogger("generador_aleatorio.prueba").warning("algo raro")
        logging.getLogger("generador_aleatorio.prueba").info("no se ve")
    assert [r.getMessage() for r in caplog.records] == ["algo raro"]
    assert caplog.records[0].levelno == logging.WARNING
