from dataclasses import dataclass
from datetime import date, datetime
from enum import Enum

ESTADO_INICIAL = "pendiente"


class PrioridadTarea(Enum):
    BAJA = "Low"
    MEDIA = "Medium"
    ALTA = "High"


@dataclass(slots=True)
class Tarea:
    id: str
    titulo: str
    fecha_limite: date
    prioridad: PrioridadTarea
    creada_en: datetime
    actualizada_en: datetime
    descripcion: str | None = None
    estado: str = ESTADO_INICIAL
