# -*- coding: utf-8 -*-
"""Configuración del logging del paquete (siempre a stderr, stdout queda para los números)."""
import logging
import os
import sys
from typing import Optional

ENV_NIVEL = "GENERADOR_LOG_LEVEL"
NIVEL_DEFAULT = "WARNING"
FORMATO = "%(levelname)s %(name)s: %(message)s"


def configurar_logging(nivel: Optional[str] = None) -> logging.Logger:
    """Ajusta el logger `generador_aleatorio`.

    Prioridad del nivel: argumento, variable GENERADOR_LOG_LEVEL, WARNING.
    Llamarla varias veces no duplica el handler; solo lo apunta al
    sys.stderr vigente.
    """
    nivel = (nivel or os.environ.get(ENV_NIVEL) or NIVEL_DEFAULT).upper()
    logger = logging.getLogger("generador_aleatorio")
    handlers = [h for h in logger.handlers if type(h) is logging.StreamHandler]
    if handlers:
        handlers[0].setStream(sys.stderr)
    else:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(FORMATO))
        logger.addHandler(handler)
    logger.setLevel(nivel)
    return logger
