"""DDL for the animals table.

Two variants exist. The canonical one backs the ORM mapping and the Alembic
baseline. The relaxed one reproduces an older test fixture, created in its
own ``dinos_db`` database, where the data columns are nullable, ``id`` has
no default and the primary key is named ``dinos_pkey``. It is only rendered
and exercised in tests, never mapped.
"""

from __future__ import annotations

from sqlalchemy import Column, Integer, MetaData, PrimaryKeyConstraint, Table, Text, Uuid
from sqlalchemy.dialects import postgresql
from sqlalchemy.schema import CreateTable

from src.infrastructure.db.orm.animal import AnimalORM

CANONICAL = "canonical"
RELAXED = "relaxed"
VARIANTS = (CANONICAL, RELAXED)

RELAXED_DATABASE = "dinos_db"
RELAXED_PKEY = "dinos_pkey"


def relaxed_animals_table(metadata: MetaData) -> Table:
    return Table(
        "animals",
        metadata,
        Column("id", Uuid(as_uuid=True), nullable=False),
        Column("name", Text),
        Column("weight", Integer),
        Column("diet", Text),
        PrimaryKeyConstraint("id", name=RELAXED_PKEY),
    )


def canonical_animals_table() -> Table:
    return AnimalORM.__table__


def _table_for(variant: str) -> Table:
    if variant == CANONICAL:
        return canonical_animals_table()
    if variant == RELAXED:
        return relaxed_animals_table(MetaData())
    raise ValueError(f"Unknown schema variant {variant!r}; expected one of {', '.join(VARIANTS)}")


def render_schema(variant: str = CANONICAL, *, owner: str | None = None) -> str:
    """Render a psql script creating the animals table for ``variant``.

    The primary key is added with a separate ALTER TABLE the same way
    pg_dump lays it out.
    """
    table = _table_for(variant)
    dialect = postgresql.dialect()
    preparer = dialect.identifier_preparer
    ddl = dialect.ddl_compiler(dialect, CreateTable(table))
    table_name = preparer.format_table(table)

    statements: list[str] = []
    if variant == RELAXED:
        statements.append(f"CREATE DATABASE {preparer.quote(RELAXED_DATABASE)};")
        statements.append(f"\\connect {RELAXED_DATABASE}")
    else:
        statements.append("CREATE EXTENSION IF NOT EXISTS pgcrypto;")

    columns = ",\n".join(f"    {ddl.get_column_specification(column)}" for column in table.columns)
    statements.append(f"CREATE TABLE {table_name} (\n{columns}\n);")

    if owner:
        statements.append(f"ALTER TABLE {table_name} OWNER TO {preparer.quote(owner)};")

    pk = table.primary_key
    pk_columns = ", ".join(preparer.quote(column.name) for column in pk.columns)
    pk_name = preparer.format_constraint(pk)
    statements.append(
        f"ALTER TABLE ONLY {table_name}\n"
        f"    ADD CONSTRAINT {pk_name} PRIMARY KEY ({pk_columns});"
    )
    return "\n\n".join(statements) + "\n"
