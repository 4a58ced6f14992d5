from datetime import date, datetime

from pydantic import BaseModel, Field, TypeAdapter

from core.domain.models.tarea import PrioridadTarea, Tarea


class TareaJson(BaseModel):
    """
    Modelo de Tarea para el almacén JSON.
    Representa cómo se guarda cada objeto del array en el fichero.
    """

    id: str
    titulo: str = Field(alias="title")
    descripcion: str | None = Field(default=None, alias="description")
    fecha_limite: date = Field(alias="due_date")
    prioridad: PrioridadTarea = Field(alias="priority")
    estado: str = Field(alias="status")
    creada_en: datetime = Field(alias="created_at")
    actualizada_en: datetime = Field(alias="last_updated_at")

    model_config = {"populate_by_name": True}

    def to_domain(self) -> Tarea:
        """
        Convierte el modelo JSON al modelo de dominio.

        Retorna:
            Tarea: La entidad de dominio.
        """
        return Tarea(
            id=self.id,
            titulo=self.titulo,
            descripcion=self.descripcion,
            fecha_limite=self.fecha_limite,
            prioridad=self.prioridad,
            estado=self.estado,
            creada_en=self.creada_en,
            actualizada_en=self.actualizada_en,
        )

    @classmethod
    def from_domain(cls, tarea: Tarea) -> "TareaJson":
        """
        Crea una instancia de TareaJson a partir de una entidad de dominio.

        Argumentos:
            tarea (Tarea): La entidad de dominio.

        Retorna:
            TareaJson: El modelo JSON.
        """
        return cls(
            id=tarea.id,
            titulo=tarea.titulo,
            descripcion=tarea.descripcion,
            fecha_limite=tarea.fecha_limite,
            prioridad=tarea.prioridad,
            estado=tarea.estado,
            creada_en=tarea.creada_en,
            actualizada_en=tarea.actualizada_en,
        )


ListaTareasJson = TypeAdapter(list[TareaJson])
