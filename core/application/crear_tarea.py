import logging
import threading
from dataclasses import dataclass, field
from datetime import datetime
from uuid import uuid4

from core.domain.errors import AlmacenamientoError, TareaDuplicadaError, TareaError
from core.domain.models.tarea import ESTADO_INICIAL, Tarea
from core.domain.ports.tarea_repository import TareaRepository
from core.domain.services.duplicados import es_duplicada
from core.domain.services.validacion import validar_entrada

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class CrearTareaCommand:
    titulo: str | None
    fecha_limite: str | None
    prioridad: str | None
    descripcion: str | None = None


@dataclass(slots=True)
class ResultadoCrearTarea:
    """
    Resultado explícito de crear una tarea.

    `tarea` está presente cuando la tarea se construyó; `error` cuando la
    operación se rechazó. `advertencias` recoge fallos de almacenamiento
    que no abortaron la operación: si contiene un error de escritura, la
    tarea devuelta puede no haberse persistido.
    """

    tarea: Tarea | None = None
    error: TareaError | None = None
    advertencias: list[AlmacenamientoError] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.error is None


class CrearTareaUseCase:
    def __init__(
        self, repository: TareaRepository, estado_inicial: str = ESTADO_INICIAL
    ) -> None:
        self._repository = repository
        self._estado_inicial = estado_inicial
        # Cubre cargar-comprobar-añadir-guardar como una sola sección crítica.
        self._lock = threading.Lock()

    def execute(self, cmd: CrearTareaCommand) -> ResultadoCrearTarea:
        try:
            entrada = validar_entrada(cmd.titulo, cmd.fecha_limite, cmd.prioridad)
        except TareaError as e:
            logger.warning(f"❌ Tarea rechazada ({e.tipo.value}): {e.mensaje}")
            return ResultadoCrearTarea(error=e)

        resultado = ResultadoCrearTarea()
        with self._lock:
            try:
                tareas = self._repository.list()
            except AlmacenamientoError as e:
                logger.error(f"⚠️ No se pudo leer el almacén, se asume vacío: {e}")
                resultado.advertencias.append(e)
                tareas = []

            if es_duplicada(tareas, entrada.titulo, entrada.fecha_limite):
                error = TareaDuplicadaError(entrada.titulo)
                logger.warning(f"❌ {error.mensaje}")
                resultado.error = error
                return resultado

            ahora = datetime.now()
            tarea = Tarea(
                id=str(uuid4()),
                titulo=entrada.titulo,
                descripcion=cmd.descripcion,
                fecha_limite=entrada.fecha_limite,
                prioridad=entrada.prioridad,
                estado=self._estado_inicial,
                creada_en=ahora,
                actualizada_en=ahora,
            )
            tareas.append(tarea)

            try:
                self._repository.save_all(tareas)
            except AlmacenamientoError as e:
                logger.error(f"⚠️ La tarea {tarea.id} no se pudo persistir: {e}")
                resultado.advertencias.append(e)

        logger.info(f"✅ Tarea creada con id {tarea.id}")
        resultado.tarea = tarea
        return resultado
