#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Generador de números aleatorios acotados con filtros y estadísticas.

Sortea valores reales en [lbound, ubound] con el motor elegido, los
redondea opcionalmente, los filtra (excluidos, incluidos, sin repetir,
prefijo/sufijo/contiene) y al final informa las estadísticas pedidas.

Ejemplos de uso:
    # 5 números en [10, 20] con 4 decimales
    generador-aleatorio -n 5 -l 10 -u 20 -p 4

    # 10 tiradas de dado sin repetir el 6, listadas
    generador-aleatorio -n 10 -l 1 -u 6.999 --floor -x 6 --list

    # 6 enteros distintos de 1 a 49, exactamente 6 aceptados
    generador-aleatorio -n 6 -l 1 -u 49 --round --norepeat --numbers-force

    # Solo estadísticas de 1000 sorteos con PCG64
    generador-aleatorio -n 1000 -g pcg64 -q --stat-all

    # Semilla fija para reproducibilidad
    generador-aleatorio -n 5 --seed 1234
"""
import argparse
import logging
import re
import sys
from typing import Iterable, Optional, TextIO

from .config import MAX_RECHAZOS_DEFAULT, PRECISION_MAXIMA, ConfigError, ExitCode, RunConfig, validar_config
from .estadisticas import calcular_estadisticas
from .generacion import GeneracionEstancada, generar
from .motores import Motor, crear_generador
from .registro import configurar_logging
from .salida import linea_valor, lineas_estadisticas, lineas_flags

logger = logging.getLogger(__name__)

# Fallas reconocidas -> KNOWN_ERR; cualquier otra -> OTHER_ERR
FALLOS_CONOCIDOS = (argparse.ArgumentError, ValueError, ArithmeticError, LookupError, OSError)


class ErrorDeArgumentos(ValueError):
    """Línea de comandos mal formada."""


# Negativos que argparse tiene que tomar como valores y no como opciones: -1e-5, -.5, -3.
_NEGATIVO = re.compile(r"^-(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?$")


class _Parser(argparse.ArgumentParser):
    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self._negative_number_matcher = _NEGATIVO

    # argparse por defecto hace sys.exit(2); acá se convierte en excepción
    def error(self, message):
        raise ErrorDeArgumentos(message)


def construir_parser() -> argparse.ArgumentParser:
    parser = _Parser(
        prog="generador-aleatorio",
        description="Genera números aleatorios acotados, con redondeo, filtros y estadísticas.",
        add_help=False,
    )
    parser.add_argument("-h", "--help", action="store_true", help="Muestra esta ayuda.")
    parser.add_argument("-n", "--number", type=int, default=1,
                        help="Cantidad de números a generar (entero >= 1).")
    parser.add_argument("-l", "--lbound", type=float, default=0.0, help="Mínimo a generar.")
    parser.add_argument("-u", "--ubound", type=float, default=1.0, help="Máximo a generar.")

    # Redondeo (mutuamente excluyentes, se valida aparte para dar un código propio)
    parser.add_argument("-c", "--ceil", action="store_true", help="Aplica techo a los números.")
    parser.add_argument("-f", "--floor", action="store_true", help="Aplica piso a los números.")
    parser.add_argument("-r", "--round", action="store_true",
                        help="Redondea al entero más cercano (empates lejos de cero).")
    parser.add_argument("-t", "--trunc", action="store_true", help="Trunca hacia cero.")
    parser.add_argument("-p", "--precision", type=int, default=PRECISION_MAXIMA,
                        help=f"Decimales de salida (0..{PRECISION_MAXIMA}). Con redondeo se fuerza a 0.")

    # Filtros
    parser.add_argument("-x", "--exclude", dest="excluded", type=float, nargs="*",
                        help="No imprimir estos números (conviene con --ceil/--floor/--round/--trunc).")
    parser.add_argument("-i", "--include", dest="included", type=float, nargs="*",
                        help="Imprimir solo estos números.")
    parser.add_argument("--norepeat", action="store_true", help="No repetir números ya impresos.")
    parser.add_argument("--prefix", nargs="*", help="Solo números que empiezan con alguno de estos textos.")
    parser.add_argument("--suffix", nargs="*", help="Solo números que terminan con alguno de estos textos.")
    parser.add_argument("--contains", nargs="*", help="Solo números que contienen alguno de estos textos.")

    # Salida
    parser.add_argument("--list", dest="listar", action="store_true",
                        help="Lista numerada: cada número con su posición delante.")
    parser.add_argument("--delim", default="\n", help="Separador entre números (por defecto salto de línea).")
    parser.add_argument("-q", "--quiet", action="store_true",
                        help="No imprime los números, útil junto con las estadísticas.")
    parser.add_argument("--numbers-force", action="store_true",
                        help="La cantidad pedida es de números impresos, no de sorteos.")
    parser.add_argument("--max-rejections", dest="max_rechazos", type=int, default=MAX_RECHAZOS_DEFAULT,
                        help="Con --numbers-force, rechazos consecutivos tolerados antes de abortar (0 = sin tope).")
    parser.add_argument("-g", "--generator", default=Motor.MT19937.value,
                        help="Motor: " + ", ".join(m.value for m in Motor) + " (default mt19937).")
    parser.add_argument("--seed", type=int, help="Semilla opcional para reproducibilidad (entero).")

    # Estadísticas
    for flag, nombre, ayuda in (
        ("--stat-min", "min", "el menor valor generado"),
        ("--stat-max", "max", "el mayor valor generado"),
        ("--stat-median", "median", "la mediana"),
        ("--stat-var", "variance", "la varianza poblacional"),
        ("--stat-stddev", "stddev", "el desvío estándar poblacional"),
        ("--stat-cv", "cv", "el coeficiente de variación"),
        ("--stat-all", "all", "todas las estadísticas"),
    ):
        parser.add_argument(flag, dest="estadisticas", action="append_const", const=nombre,
                            help=f"Imprime {ayuda}.")
    parser.add_argument("--stat-mean", "--stat-avg", dest="estadisticas", action="append_const",
                        const="mean", help="Imprime la media.")

    parser.add_argument("--flags", action="store_true", help="Imprime la configuración resuelta.")
    parser.add_argument("--log-level", choices=["DEBUG", "INFO", "WARNING", "ERROR"],
                        type=str.upper, help="Nivel de log en stderr (o GENERADOR_LOG_LEVEL).")
    return parser


def config_desde_args(args: argparse.Namespace) -> RunConfig:
    return validar_config(
        count=args.number,
        lbound=args.lbound,
        ubound=args.ubound,
        precision=args.precision,
        ceil=args.ceil,
        floor=args.floor,
        round=args.round,
        trunc=args.trunc,
        excluded=args.excluded,
        included=args.included,
        norepeat=args.norepeat,
        prefix=args.prefix,
        suffix=args.suffix,
        contains=args.contains,
        generator=args.generator,
        numbers_force=args.numbers_force,
        quiet=args.quiet,
        listar=args.listar,
        delim=args.delim,
        estadisticas=args.estadisticas,
        flags=args.flags,
        seed=args.seed,
        max_rechazos=args.max_rechazos,
    )


def ejecutar(argv: Optional[Iterable[str]] = None, out: Optional[TextIO] = None) -> ExitCode:
    """Corre el programa completo. Las fallas se propagan como excepciones."""
    out = out if out is not None else sys.stdout
    parser = construir_parser()
    args = parser.parse_args(list(argv) if argv is not None else None)

    if args.help:
        print(parser.format_help(), file=out)
        return ExitCode.HELP

    configurar_logging(args.log_level)
    config = config_desde_args(args)
    generador = crear_generador(config.generator, config.lbound, config.ubound, config.seed)

    def emitir(posicion: int, valor: float) -> None:
        print(linea_valor(posicion, valor, config), end="", file=out, flush=True)

    valores = generar(config, generador, emitir)

    if config.delim != "\n" and not config.quiet:
        print(file=out)

    if config.estadisticas:
        if not config.quiet:
            print(file=out)
        resultados = calcular_estadisticas(valores, config.estadisticas)
        for linea in lineas_estadisticas(resultados, config.precision):
            print(linea, file=out)

    if config.flags:
        print(file=out)
        for linea in lineas_flags(config):
            print(linea, file=out)

    return ExitCode.SUCCESS


def main(argv: Optional[Iterable[str]] = None) -> int:
    try:
        codigo = ejecutar(argv)
    except BrokenPipeError:
        raise
    except ConfigError as e:
        print(f"error: {e.mensaje}", file=sys.stderr)
        return int(e.codigo)
    except GeneracionEstancada as e:
        print(f"error: {e}", file=sys.stderr)
        return int(ExitCode.STALL_ERR)
    except FALLOS_CONOCIDOS as e:
        logger.debug("falla reconocida", exc_info=True)
        print(f"error: {e}", file=sys.stderr)
        return int(ExitCode.KNOWN_ERR)
    except Exception:
        logger.debug("falla no reconocida", exc_info=True)
        print("error: excepción de tipo desconocido", file=sys.stderr)
        return int(ExitCode.OTHER_ERR)

    # La ayuda no es un error
    if codigo is ExitCode.HELP:
        return int(ExitCode.SUCCESS)
    return int(codigo)


def script() -> None:
    """Punto de entrada de consola."""
    try:
        raise SystemExit(main())
    except BrokenPipeError:
        # Permite canalizar la salida (| head) sin errores de pipe
        try:
            sys.stdout.close()
        except OSError:
            pass
        raise SystemExit(0)
