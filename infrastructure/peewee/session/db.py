from peewee import Database
from playhouse.db_url import connect

# Default to SQLite
DATABASE_URL_POR_DEFECTO = "sqlite:///tareas.db"


def get_db(database_url: str = DATABASE_URL_POR_DEFECTO) -> Database:
    return connect(database_url)
