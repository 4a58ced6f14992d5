from core.application.crear_tarea import CrearTareaUseCase
from core.application.listar_tareas import ListarTareasUseCase
from core.domain.ports.tarea_repository import TareaRepository
from infrastructure.archivo_json.repository.tarea_repository import JsonTareaRepository
from infrastructure.config import Configuracion, cargar_configuracion
from infrastructure.peewee.repository.tarea_repository import (
    PeeweeTareaRepository,
)
from infrastructure.texto.repository.tarea_repository import TextoTareaRepository


def get_tarea_repository(config: Configuracion | None = None) -> TareaRepository:
    config = config or cargar_configuracion()

    if config.backend == "json":
        return JsonTareaRepository(config.ruta_archivo)
    elif config.backend == "peewee":
        return PeeweeTareaRepository(config.database_url)
    # Default to the line-delimited text file
    return TextoTareaRepository(config.ruta_archivo, delimitador=config.delimitador)


def get_crear_tarea_use_case(config: Configuracion | None = None) -> CrearTareaUseCase:
    config = config or cargar_configuracion()
    return CrearTareaUseCase(
        repository=get_tarea_repository(config),
        estado_inicial=config.estado_inicial,
    )


def get_listar_tareas_use_case(
    config: Configuracion | None = None,
) -> ListarTareasUseCase:
    return ListarTareasUseCase(repository=get_tarea_repository(config))
