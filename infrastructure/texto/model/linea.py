"""
Formato de línea del almacén de texto.

Cada tarea ocupa una línea con 8 campos separados por el delimitador:
id, título, descripción, fecha límite, prioridad, estado, creada_en,
actualizada_en. El delimitador, la barra invertida y los saltos de línea
que aparezcan dentro de un campo se escapan con `\\`.
"""

from datetime import datetime

from core.domain.models.tarea import PrioridadTarea, Tarea
from core.domain.services.validacion import FORMATO_FECHA, parsear_fecha

NUM_CAMPOS = 8

_ESCAPES = {"n": "\n", "r": "\r"}

# Caracteres que no pueden ser delimitador: chocan con la secuencia de escape.
DELIMITADORES_RESERVADOS = frozenset({"\\", "\n", "\r", *_ESCAPES})


def validar_delimitador(delimitador: str) -> None:
    if len(delimitador) != 1 or delimitador in DELIMITADORES_RESERVADOS:
        raise ValueError(f"Delimitador no válido: {delimitador!r}")


def _escapar(valor: str, delimitador: str) -> str:
    return (
        valor.replace("\\", "\\\\")
        .replace(delimitador, "\\" + delimitador)
        .replace("\n", "\\n")
        .replace("\r", "\\r")
    )


def dividir(linea: str, delimitador: str) -> list[str]:
    campos: list[str] = []
    actual: list[str] = []
    escapado = False
    for caracter in linea:
        if escapado:
            actual.append(_ESCAPES.get(caracter, caracter))
            escapado = False
        elif caracter == "\\":
            escapado = True
        elif caracter == delimitador:
            campos.append("".join(actual))
            actual = []
        else:
            actual.append(caracter)
    campos.append("".join(actual))
    return campos


def tarea_a_linea(tarea: Tarea, delimitador: str) -> str:
    campos = [
        tarea.id,
        tarea.titulo,
        tarea.descripcion or "",
        tarea.fecha_limite.strftime(FORMATO_FECHA),
        tarea.prioridad.value,
        tarea.estado,
        tarea.creada_en.isoformat(),
        tarea.actualizada_en.isoformat(),
    ]
    return delimitador.join(_escapar(c, delimitador) for c in campos)


def linea_a_tarea(linea: str, delimitador: str) -> Tarea | None:
    """
    Reconstruye una tarea desde una línea.

    Devuelve None si la línea tiene menos de 8 campos. Los campos
    sobrantes se ignoran.

    Raises:
        ValueError: si la fecha, la prioridad o las marcas de tiempo no
            son válidas.
    """
    partes = dividir(linea, delimitador)
    if len(partes) < NUM_CAMPOS:
        return None

    id_, titulo, descripcion, fecha, prioridad, estado, creada, actualizada = partes[
        :NUM_CAMPOS
    ]
    return Tarea(
        id=id_,
        titulo=titulo,
        descripcion=descripcion or None,
        fecha_limite=parsear_fecha(fecha),
        prioridad=PrioridadTarea(prioridad),
        estado=estado,
        creada_en=datetime.fromisoformat(creada),
        actualizada_en=datetime.fromisoformat(actualizada),
    )
