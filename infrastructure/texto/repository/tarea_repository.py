import logging
from collections.abc import Sequence
from pathlib import Path

from core.domain.errors import ErrorEscrituraAlmacenamiento
from core.domain.models.tarea import Tarea
from core.domain.ports.tarea_repository import TareaRepository
from infrastructure.texto.model.linea import (
    linea_a_tarea,
    tarea_a_linea,
    validar_delimitador,
)

logger = logging.getLogger(__name__)

DELIMITADOR_POR_DEFECTO = "|"


class TextoTareaRepository(TareaRepository):
    """
    Implementación de TareaRepository sobre un fichero de texto, una tarea
    por línea.

    La lectura es tolerante: las líneas que no se pueden interpretar se
    descartan y un fichero ilegible se trata como vacío.
    """

    def __init__(
        self, ruta: str | Path, delimitador: str = DELIMITADOR_POR_DEFECTO
    ) -> None:
        validar_delimitador(delimitador)
        self.ruta = Path(ruta)
        self.delimitador = delimitador

    def list(self) -> list[Tarea]:
        """
        Carga todas las tareas en el orden del fichero.

        Retorna:
            list[Tarea]: Las tareas legibles; vacía si el fichero no existe.
        """
        if not self.ruta.exists():
            logger.debug(f"🔍 {self.ruta} no existe todavía")
            return []

        try:
            contenido = self.ruta.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            logger.error(f"❌ Error leyendo {self.ruta}: {e}")
            return []

        tareas: list[Tarea] = []
        for numero, linea in enumerate(contenido.split("\n"), start=1):
            if not linea.strip():
                continue
            try:
                tarea = linea_a_tarea(linea, self.delimitador)
            except ValueError as e:
                logger.debug(f"Línea {numero} descartada: {e}")
                continue
            if tarea is None:
                logger.debug(f"Línea {numero} descartada: faltan campos")
                continue
            tareas.append(tarea)
        return tareas

    def save_all(self, tareas: Sequence[Tarea]) -> None:
        """
        Reescribe el fichero completo con las tareas dadas.

        Argumentos:
            tareas (Sequence[Tarea]): Las tareas, en el orden a conservar.
        """
        lineas = [tarea_a_linea(t, self.delimitador) + "\n" for t in tareas]
        try:
            self.ruta.parent.mkdir(parents=True, exist_ok=True)
            with open(self.ruta, "w", encoding="utf-8", newline="\n") as f:
                f.writelines(lineas)
        except OSError as e:
            raise ErrorEscrituraAlmacenamiento(
                f"No se pudo escribir {self.ruta}: {e}"
            ) from e
