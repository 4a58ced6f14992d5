from collections.abc import Iterable
from datetime import date

from core.domain.models.tarea import Tarea


def es_duplicada(existentes: Iterable[Tarea], titulo: str, fecha_limite: date) -> bool:
    """Misma fecha límite y mismo título sin distinguir mayúsculas."""
    clave = titulo.casefold()
    return any(
        t.titulo.casefold() == clave and t.fecha_limite == fecha_limite
        for t in existentes
    )
