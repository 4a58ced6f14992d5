"""
Errores del dominio de tareas.

Cada excepción lleva un `TipoError` para que los casos de uso y los tests
puedan distinguir el motivo sin depender del texto del mensaje.
"""

from enum import Enum


class TipoError(Enum):
    TITULO_VACIO = "EmptyTitle"
    FECHA_VACIA = "EmptyDueDate"
    FORMATO_FECHA_INVALIDO = "InvalidDateFormat"
    PRIORIDAD_INVALIDA = "InvalidPriority"
    TAREA_DUPLICADA = "DuplicateTask"
    ERROR_LECTURA = "StorageReadError"
    ERROR_ESCRITURA = "StorageWriteError"


class TareaError(Exception):
    """Base de todos los errores de la aplicación."""

    tipo: TipoError

    def __init__(self, tipo: TipoError, mensaje: str) -> None:
        super().__init__(mensaje)
        self.tipo = tipo
        self.mensaje = mensaje


class ValidacionError(TareaError):
    pass


class TareaDuplicadaError(TareaError):
    def __init__(self, titulo: str) -> None:
        super().__init__(
            TipoError.TAREA_DUPLICADA,
            f"La tarea '{titulo}' ya existe con la misma fecha límite",
        )
        self.titulo = titulo


class AlmacenamientoError(TareaError):
    pass


class ErrorLecturaAlmacenamiento(AlmacenamientoError):
    def __init__(self, mensaje: str) -> None:
        super().__init__(TipoError.ERROR_LECTURA, mensaje)


class ErrorEscrituraAlmacenamiento(AlmacenamientoError):
    def __init__(self, mensaje: str) -> None:
        super().__init__(TipoError.ERROR_ESCRITURA, mensaje)
