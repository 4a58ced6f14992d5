from collections.abc import Sequence
from typing import List

from peewee import PeeweeException, chunked

from core.domain.errors import ErrorEscrituraAlmacenamiento, ErrorLecturaAlmacenamiento
from core.domain.models.tarea import PrioridadTarea, Tarea
from core.domain.ports.tarea_repository import TareaRepository
from infrastructure.peewee.model.models import TareaModel
from infrastructure.peewee.session.db import DATABASE_URL_POR_DEFECTO, get_db


class PeeweeTareaRepository(TareaRepository):
    def __init__(self, database_url: str = DATABASE_URL_POR_DEFECTO):
        self.db = get_db(database_url)
        # Tables are created on init; there are no migrations for this store.
        self.db.connect(reuse_if_open=True)
        with self.db.bind_ctx([TareaModel]):
            self.db.create_tables([TareaModel], safe=True)

    def save_all(self, tareas: Sequence[Tarea]) -> None:
        filas = [
            {
                "id": t.id,
                "posicion": posicion,
                "titulo": t.titulo,
                "descripcion": t.descripcion,
                "fecha_limite": t.fecha_limite,
                "prioridad": t.prioridad.value,
                "estado": t.estado,
                "creada_en": t.creada_en,
                "actualizada_en": t.actualizada_en,
            }
            for posicion, t in enumerate(tareas)
        ]
        try:
            with self.db.bind_ctx([TareaModel]), self.db.atomic():
                TareaModel.delete().execute()
                for lote in chunked(filas, 100):
                    TareaModel.insert_many(lote).execute()
        except PeeweeException as e:
            raise ErrorEscrituraAlmacenamiento(f"Error guardando tareas: {e}") from e

    def list(self) -> List[Tarea]:
        try:
            with self.db.bind_ctx([TareaModel]):
                return [
                    Tarea(
                        id=t.id,
                        titulo=t.titulo,
                        descripcion=t.descripcion,
                        fecha_limite=t.fecha_limite,
                        prioridad=PrioridadTarea(t.prioridad),
                        estado=t.estado,
                        creada_en=t.creada_en,
                        actualizada_en=t.actualizada_en,
                    )
                    for t in TareaModel.select().order_by(TareaModel.posicion)
                ]
        except (PeeweeException, ValueError) as e:
            raise ErrorLecturaAlmacenamiento(f"Error leyendo tareas: {e}") from e
