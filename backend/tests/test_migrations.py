"""Apply the alembic revision to a fresh SQLite database."""
import importlib.util
from pathlib import Path

import pytest
from alembic.migration import MigrationContext
from alembic.operations import Operations
from sqlalchemy import create_engine, inspect, text
from sqlalchemy.exc import IntegrityError

VERSIONS = Path(__file__).resolve().parents[1] / "alembic" / "versions"


def _load_revision(filename: str):
    spec = importlib.util.spec_from_file_location(filename.removesuffix(".py"), VERSIONS / filename)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


@pytest.fixture
def migrated():
    revision = _load_revision("0001_create_departments_and_staffs.py")
    engine = create_engine("sqlite://")
    with engine.begin() as conn:
        with Operations.context(MigrationContext.configure(conn)):
            revision.upgrade()
    yield engine, revision
    engine.dispose()


def test_revision_is_root():
    revision = _load_revision("0001_create_departments_and_staffs.py")
    assert revision.revision == "0001"
    assert revision.down_revision is None


def test_upgrade_creates_tables(migrated):
    engine, _ = migrated
    insp = inspect(engine)
    assert {"departments", "staffs"} <= set(insp.get_table_names())
    staff_cols = {c["name"] for c in insp.get_columns("staffs")}
    assert {"id", "department_id", "first_name", "last_name", "email", "position", "hired_on"} <= staff_cols
    assert "ix_staffs_department_id" in {i["name"] for i in insp.get_indexes("staffs")}


def test_department_name_is_unique(migrated):
    engine, _ = migrated
    with engine.begin() as conn:
        conn.execute(text("INSERT INTO departments (name) VALUES ('Ops')"))
    with pytest.raises(IntegrityError):
        with engine.begin() as conn:
            conn.execute(text("INSERT INTO departments (name) VALUES ('Ops')"))


def test_downgrade_drops_tables(migrated):
    engine, revision = migrated
    with engine.begin() as conn:
        with Operations.context(MigrationContext.configure(conn)):
            revision.downgrade()
    assert inspect(engine).get_table_names() == []
