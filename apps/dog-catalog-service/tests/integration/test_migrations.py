from pathlib import Path

from alembic import command
from alembic.config import Config
from sqlalchemy import inspect

from dog_catalog.db import crud, schemas
from dog_catalog.db.database import Database


def _make_alembic_config(database_url: str) -> Config:
    """Return an Alembic config pointing at the service migrations."""
    service_root = Path(__file__).resolve().parents[2]
    cfg = Config(str(service_root / "alembic.ini"))
    cfg.set_main_option("sqlalchemy.url", database_url)
    cfg.set_main_option("script_location", str(service_root / "migrations"))
    return cfg


def test_alembic_upgrade_creates_dogs_table_and_downgrade_drops_it(tmp_path):
    url = f"sqlite+pysqlite:///{tmp_path / 'dogs.db'}"
    cfg = _make_alembic_config(url)

    command.upgrade(cfg, "head")
    database = Database(url)
    try:
        columns = {c["name"]: c for c in inspect(database.engine).get_columns("dogs")}
        assert set(columns) == {
            "id", "name", "breed", "description", "logo_url",
            "photo_url", "age", "is_featured", "created_at",
        }
        assert columns["name"]["nullable"] is False
        assert columns["description"]["nullable"] is True

        with database.session() as db:
            dog = crud.create_dog(db, schemas.DogCreate(name="Buddy", breed="Golden Retriever"))
            assert dog.id == 1
            assert dog.is_featured is False
    finally:
        database.dispose()

    command.downgrade(cfg, "base")
    database = Database(url)
    try:
        assert "dogs" not in inspect(database.engine).get_table_names()
    finally:
        database.dispose()
