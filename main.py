import logging
import os

from dotenv import load_dotenv

from core.application.crear_tarea import CrearTareaCommand
from core.domain.errors import AlmacenamientoError
from infrastructure.config import cargar_configuracion
from infrastructure.container import (
    get_crear_tarea_use_case,
    get_listar_tareas_use_case,
)

load_dotenv()

DEMO = [
    CrearTareaCommand("Buy milk", "2025-07-20", "High", descripcion="2% fat"),
    CrearTareaCommand("Plan the 3-week schedule", "2025-07-02", "High", descripcion="Phases and assignments"),
    CrearTareaCommand("Set up the project board", "2025-07-03", "Medium", descripcion="Board and backlog"),
    CrearTareaCommand("Sprint 2 board", "2025-07-12", "Low"),
    # Rejected on purpose
    CrearTareaCommand("buy MILK", "2025-07-20", "High", descripcion="duplicate"),
    CrearTareaCommand("", "2025-07-21", "Medium", descripcion="no title"),
    CrearTareaCommand("Call client", "2025/07/22", "High", descripcion="wrong separator"),
    CrearTareaCommand("Bad date", "2025-13-40", "Medium", descripcion="impossible date"),
    CrearTareaCommand("Run", "2025-07-23", "Very High", descripcion="5km"),
]


def run() -> None:
    logging.basicConfig(
        level=os.getenv("LOG_LEVEL", "info").upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    config = cargar_configuracion()
    crear = get_crear_tarea_use_case(config)
    listar = get_listar_tareas_use_case(config)

    print(f"Backend: {config.backend} ({config.destino})")

    for cmd in DEMO:
        resultado = crear.execute(cmd)
        if resultado.ok:
            print(f"+ {cmd.titulo!r}: creada con id {resultado.tarea.id}")
        else:
            print(f"- {cmd.titulo!r}: {resultado.error.tipo.value} ({resultado.error.mensaje})")

    try:
        tareas = listar.execute()
    except AlmacenamientoError as e:
        print(f"No se pudieron listar las tareas: {e}")
        return

    if not tareas:
        print("No hay tareas.")
        return
    for t in tareas:
        print(
            f"{t.id} | {t.titulo} | {t.descripcion or '-'} | "
            f"{t.fecha_limite.isoformat()} | {t.prioridad.value} | {t.estado}"
        )


if __name__ == "__main__":
    run()
