import logging
from collections.abc import Sequence
from pathlib import Path

from pydantic import ValidationError

from core.domain.errors import ErrorEscrituraAlmacenamiento, ErrorLecturaAlmacenamiento
from core.domain.models.tarea import Tarea
from core.domain.ports.tarea_repository import TareaRepository
from infrastructure.archivo_json.models.tarea import ListaTareasJson, TareaJson

logger = logging.getLogger(__name__)


class JsonTareaRepository(TareaRepository):
    """
    Implementación de TareaRepository sobre un fichero JSON (array de objetos).

    A diferencia del almacén de texto, un fichero mal formado no se
    recupera: se lanza `ErrorLecturaAlmacenamiento`.
    """

    def __init__(self, ruta: str | Path) -> None:
        self.ruta = Path(ruta)

    def list(self) -> list[Tarea]:
        """
        Lista todas las tareas del fichero.

        Retorna:
            list[Tarea]: Las tareas en el orden del array.

        Raises:
            ErrorLecturaAlmacenamiento: si el fichero no se puede leer o
                no contiene un array de tareas válido.
        """
        if not self.ruta.exists():
            logger.debug(f"🔍 {self.ruta} no existe todavía")
            return []

        try:
            contenido = self.ruta.read_bytes()
        except OSError as e:
            raise ErrorLecturaAlmacenamiento(
                f"No se pudo leer {self.ruta}: {e}"
            ) from e

        try:
            modelos = ListaTareasJson.validate_json(contenido)
        except ValidationError as e:
            raise ErrorLecturaAlmacenamiento(
                f"Contenido no válido en {self.ruta}: {e}"
            ) from e

        return [m.to_domain() for m in modelos]

    def save_all(self, tareas: Sequence[Tarea]) -> None:
        """
        Reescribe el fichero completo con las tareas dadas.

        Argumentos:
            tareas (Sequence[Tarea]): Las tareas, en el orden a conservar.
        """
        modelos = [TareaJson.from_domain(t) for t in tareas]
        datos = ListaTareasJson.dump_json(modelos, by_alias=True, indent=2)
        try:
            self.ruta.parent.mkdir(parents=True, exist_ok=True)
            self.ruta.write_bytes(datos)
        except OSError as e:
            raise ErrorEscrituraAlmacenamiento(
                f"No se pudo escribir {self.ruta}: {e}"
            ) from e
