import os
from dataclasses import dataclass

from core.domain.models.tarea import ESTADO_INICIAL
from infrastructure.peewee.session.db import DATABASE_URL_POR_DEFECTO
from infrastructure.texto.model.linea import validar_delimitador
from infrastructure.texto.repository.tarea_repository import DELIMITADOR_POR_DEFECTO

BACKENDS = ("texto", "json", "peewee")

_RUTAS_POR_DEFECTO = {
    "texto": "tasks_database.txt",
    "json": "tasks_database.json",
}


@dataclass(slots=True, frozen=True)
class Configuracion:
    backend: str = "texto"
    ruta: str | None = None
    database_url: str = DATABASE_URL_POR_DEFECTO
    delimitador: str = DELIMITADOR_POR_DEFECTO
    estado_inicial: str = ESTADO_INICIAL

    def __post_init__(self) -> None:
        if self.backend not in BACKENDS:
            raise ValueError(
                f"Backend desconocido '{self.backend}'. Opciones: {', '.join(BACKENDS)}"
            )
        validar_delimitador(self.delimitador)

    @property
    def ruta_archivo(self) -> str:
        return self.ruta or _RUTAS_POR_DEFECTO.get(self.backend, "")

    @property
    def destino(self) -> str:
        """Fichero o URL donde vive el almacén del backend elegido."""
        if self.backend == "peewee":
            return self.database_url
        return self.ruta_archivo


def cargar_configuracion() -> Configuracion:
    return Configuracion(
        backend=os.getenv("TAREAS_BACKEND", "texto").lower(),
        ruta=os.getenv("TAREAS_DB_PATH") or None,
        database_url=os.getenv("DATABASE_URL", DATABASE_URL_POR_DEFECTO),
        delimitador=os.getenv("TAREAS_DELIMITADOR", DELIMITADOR_POR_DEFECTO),
        estado_inicial=os.getenv("TAREAS_ESTADO_INICIAL", ESTADO_INICIAL),
    )
