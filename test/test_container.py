import pytest

from core.application.crear_tarea import CrearTareaCommand
from infrastructure.archivo_json.repository.tarea_repository import JsonTareaRepository
from infrastructure.config import Configuracion, cargar_configuracion
from infrastructure.container import (
    get_crear_tarea_use_case,
    get_listar_tareas_use_case,
    get_tarea_repository,
)
from infrastructure.peewee.repository.tarea_repository import PeeweeTareaRepository
from infrastructure.texto.repository.tarea_repository import TextoTareaRepository


@pytest.fixture(autouse=True)
def entorno_limpio(monkeypatch):
    for variable in (
        "TAREAS_BACKEND",
        "TAREAS_DB_PATH",
        "DATABASE_URL",
        "TAREAS_DELIMITADOR",
        "TAREAS_ESTADO_INICIAL",
    ):
        monkeypatch.delenv(variable, raising=False)


def test_configuracion_por_defecto():
    config = cargar_configuracion()

    assert config.backend == "texto"
    assert config.ruta_archivo == "tasks_database.txt"
    assert config.delimitador == "|"
    assert config.estado_inicial == "pendiente"


def test_configuracion_desde_entorno(monkeypatch, tmp_path):
    monkeypatch.setenv("TAREAS_BACKEND", "JSON")
    monkeypatch.setenv("TAREAS_DB_PATH", str(tmp_path / "t.json"))
    monkeypatch.setenv("TAREAS_ESTADO_INICIAL", "Not completed")

    config = cargar_configuracion()

    assert config.backend == "json"
    assert config.ruta_archivo == str(tmp_path / "t.json")
    assert config.estado_inicial == "Not completed"


@pytest.mark.parametrize(
    "kwargs",
    [
        {"backend": "mongo"},
        {"delimitador": ""},
        {"delimitador": "||"},
        {"delimitador": "n"},
        {"delimitador": "r"},
    ],
)
def test_configuracion_invalida(kwargs):
    with pytest.raises(ValueError):
        Configuracion(**kwargs)


def test_get_tarea_repository_por_backend(tmp_path):
    texto = get_tarea_repository(Configuracion(ruta=str(tmp_path / "t.txt")))
    json_repo = get_tarea_repository(
        Configuracion(backend="json", ruta=str(tmp_path / "t.json"))
    )
    sql = get_tarea_repository(
        Configuracion(backend="peewee", database_url="sqlite:///:memory:")
    )

    assert isinstance(texto, TextoTareaRepository)
    assert isinstance(json_repo, JsonTareaRepository)
    assert isinstance(sql, PeeweeTareaRepository)


@pytest.mark.parametrize("backend, fichero", [("texto", "t.txt"), ("json", "t.json")])
def test_casos_de_uso_sobre_fichero(tmp_path, backend, fichero):
    config = Configuracion(
        backend=backend, ruta=str(tmp_path / fichero), estado_inicial="Not completed"
    )
    crear = get_crear_tarea_use_case(config)
    listar = get_listar_tareas_use_case(config)

    primero = crear.execute(CrearTareaCommand("Buy milk", "2025-07-20", "High", "2% fat"))
    repetido = crear.execute(CrearTareaCommand("buy milk", "2025-07-20", "Low"))

    assert primero.ok
    assert not repetido.ok
    assert listar.execute() == [primero.tarea]
    assert listar.execute()[0].estado == "Not completed"


def test_json_corrupto_no_aborta_la_creacion(tmp_path):
    ruta = tmp_path / "t.json"
    ruta.write_text("{corrupto", encoding="utf-8")
    crear = get_crear_tarea_use_case(Configuracion(backend="json", ruta=str(ruta)))

    resultado = crear.execute(CrearTareaCommand("A", "2025-07-20", "High"))

    assert resultado.ok
    assert len(resultado.advertencias) == 1
    assert get_listar_tareas_use_case(
        Configuracion(backend="json", ruta=str(ruta))
    ).execute() == [resultado.tarea]


@pytest.mark.parametrize(
    "config, esperado",
    [
        (Configuracion(), "tasks_database.txt"),
        (Configuracion(backend="json"), "tasks_database.json"),
        (Configuracion(backend="peewee", database_url="sqlite:///t.db"), "sqlite:///t.db"),
    ],
)
def test_destino_segun_backend(config, esperado):
    assert config.destino == esperado
