# -*- coding: utf-8 -*-
"""
Cadena de filtros de aceptación.

Para cada valor ya redondeado se evalúan, en este orden y cortando en el
primer rechazo:
  1. excluded  -> se rechaza si es exactamente igual a algún excluido
  2. included  -> si hay incluidos, se rechaza si no es igual a alguno
  3. norepeat  -> se rechaza si ya fue aceptado antes
  4. prefix / suffix / contains -> el valor se escribe en punto fijo con la
     precisión configurada y tiene que coincidir con al menos un patrón

Un conjunto de patrones vacío significa que la prueba no se aplica.
"""
from typing import Callable, Container, List, Optional, Sequence, Tuple

from .config import PRECISION_MAXIMA, RunConfig
from .salida import formatear

# (valor, aceptados) -> True si el valor pasa la prueba
Prueba = Callable[[float, Container[float]], bool]


def _empieza(texto: str, patron: str) -> bool:
    return texto.startswith(patron)


def _termina(texto: str, patron: str) -> bool:
    return texto.endswith(patron)


def _contiene(texto: str, patron: str) -> bool:
    return patron in texto


class CadenaFiltros:
    def __init__(
        self,
        excluded: Sequence[float] = (),
        included: Sequence[float] = (),
        norepeat: bool = False,
        prefix: Sequence[str] = (),
        suffix: Sequence[str] = (),
        contains: Sequence[str] = (),
        precision: int = PRECISION_MAXIMA,
    ):
        self.precision = precision
        self._excluidos = frozenset(excluded)
        self._incluidos = frozenset(included)
        self._pruebas: List[Tuple[str, Prueba]] = []

        if self._excluidos:
            self._pruebas.append(("excluded", lambda v, _: v not in self._excluidos))
        if self._incluidos:
            self._pruebas.append(("included", lambda v, _: v in self._incluidos))
        if norepeat:
            self._pruebas.append(("norepeat", lambda v, aceptados: v not in aceptados))
        for nombre, patrones, predicado in (("prefix", tuple(prefix), _empieza),
                                            ("suffix", tuple(suffix), _termina),
                                            ("contains", tuple(contains), _contiene)):
            if patrones:
                self._pruebas.append((nombre, self._prueba_patron(patrones, predicado)))

    @classmethod
    def desde_config(cls, config: RunConfig) -> "CadenaFiltros":
        return cls(
            excluded=config.excluded,
            included=config.included,
            norepeat=config.norepeat,
            prefix=config.prefix,
            suffix=config.suffix,
            contains=config.contains,
            precision=config.precision,
        )

    def _prueba_patron(self, patrones: Tuple[str, ...], predicado: Callable[[str, str], bool]) -> Prueba:
        def prueba(valor: float, _aceptados: Container[float]) -> bool:
            texto = formatear(valor, self.precision)
            return any(predicado(texto, p) for p in patrones)
        return prueba

    @property
    def activas(self) -> List[str]:
        """Nombres de las pruebas activas, en orden de evaluación."""
        return [nombre for nombre, _ in self._pruebas]

    def motivo_rechazo(self, valor: float, aceptados: Container[float] = ()) -> Optional[str]:
        """Nombre de la primera prueba que rechaza `valor`, o None si pasa todas."""
        for nombre, prueba in self._pruebas:
            if not prueba(valor, aceptados):
                return nombre
        return None

    def acepta(self, valor: float, aceptados: Container[float] = ()) -> bool:
        return self.motivo_rechazo(valor, aceptados) is None
