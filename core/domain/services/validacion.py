import re
from dataclasses import dataclass
from datetime import date, datetime

from core.domain.errors import TipoError, ValidacionError
from core.domain.models.tarea import PrioridadTarea

FORMATO_FECHA = "%Y-%m-%d"
_PATRON_FECHA = re.compile(r"^\d{4}-\d{2}-\d{2}$")
_PRIORIDADES = {p.value: p for p in PrioridadTarea}


@dataclass(slots=True, frozen=True)
class EntradaValidada:
    titulo: str
    fecha_limite: date
    prioridad: PrioridadTarea


def _vacio(valor: str | None) -> bool:
    return valor is None or not valor.strip()


def parsear_fecha(texto: str) -> date:
    """
    Convierte `YYYY-MM-DD` en una fecha real del calendario.

    Raises:
        ValueError: si el texto no sigue el patrón o la fecha no existe.
    """
    if not _PATRON_FECHA.match(texto):
        raise ValueError(f"'{texto}' no sigue el formato YYYY-MM-DD")
    return datetime.strptime(texto, FORMATO_FECHA).date()


def validar_entrada(
    titulo: str | None, fecha_texto: str | None, prioridad: str | None
) -> EntradaValidada:
    """
    Valida los datos de una tarea nueva y devuelve la entrada ya tipada.

    El orden de las comprobaciones es fijo (título, fecha presente, formato
    de fecha, prioridad) y se informa solo el primer error encontrado.

    Raises:
        ValidacionError: con el `TipoError` correspondiente.
    """
    if _vacio(titulo):
        raise ValidacionError(TipoError.TITULO_VACIO, "El título no puede estar vacío")

    if _vacio(fecha_texto):
        raise ValidacionError(
            TipoError.FECHA_VACIA, "La fecha límite no puede estar vacía"
        )

    try:
        fecha_limite = parsear_fecha(fecha_texto)
    except ValueError as e:
        raise ValidacionError(
            TipoError.FORMATO_FECHA_INVALIDO,
            "Fecha límite inválida. Use el formato YYYY-MM-DD",
        ) from e

    prioridad_validada = _PRIORIDADES.get(prioridad)
    if prioridad_validada is None:
        opciones = ", ".join(_PRIORIDADES)
        raise ValidacionError(
            TipoError.PRIORIDAD_INVALIDA,
            f"Prioridad inválida '{prioridad}'. Opciones: {opciones}",
        )

    return EntradaValidada(
        titulo=titulo, fecha_limite=fecha_limite, prioridad=prioridad_validada
    )
