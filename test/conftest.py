from datetime import date, datetime
from uuid import uuid4

import pytest

from core.domain.models.tarea import PrioridadTarea, Tarea


@pytest.fixture
def nueva_tarea():
    """Factory de tareas de ejemplo."""

    def _crear(
        titulo: str = "Tarea de prueba",
        descripcion: str | None = "Descripción de prueba",
        fecha_limite: date = date(2025, 7, 20),
        prioridad: PrioridadTarea = PrioridadTarea.MEDIA,
        estado: str = "pendiente",
    ) -> Tarea:
        ahora = datetime(2025, 7, 1, 9, 30, 15, 123456)
        return Tarea(
            id=str(uuid4()),
            titulo=titulo,
            descripcion=descripcion,
            fecha_limite=fecha_limite,
            prioridad=prioridad,
            estado=estado,
            creada_en=ahora,
            actualizada_en=ahora,
        )

    return _crear
