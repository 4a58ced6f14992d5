from abc import ABC, abstractmethod
from collections.abc import Sequence

from core.domain.models.tarea import Tarea


class TareaRepository(ABC):
    """
    Puerto de persistencia: el almacén completo se lee y se reescribe entero.

    Las implementaciones lanzan `ErrorLecturaAlmacenamiento` o
    `ErrorEscrituraAlmacenamiento` cuando el soporte falla. Un almacén que
    todavía no existe se lee como una lista vacía.
    """

    @abstractmethod
    def list(self) -> list[Tarea]:
        raise NotImplementedError

    @abstractmethod
    def save_all(self, tareas: Sequence[Tarea]) -> None:
        raise NotImplementedError
