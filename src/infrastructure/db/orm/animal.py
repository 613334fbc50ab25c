from __future__ import annotations

from uuid import UUID

from sqlalchemy import Integer, Text, Uuid
from sqlalchemy.ext.compiler import compiles
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.sql.functions import FunctionElement

from src.infrastructure.db.base import Base


class gen_random_uuid(FunctionElement):  # noqa: N801
    """Random UUID generated by the database.

    PostgreSQL uses pgcrypto's gen_random_uuid(). SQLite has no UUID
    function, so it gets 16 random bytes as lowercase hex, which is the
    storage format of a non-native Uuid column.
    """

    type = Uuid(as_uuid=True)
    name = "gen_random_uuid"
    inherit_cache = True


@compiles(gen_random_uuid)
def _compile_gen_random_uuid(element, compiler, **kw) -> str:
    return "gen_random_uuid()"


@compiles(gen_random_uuid, "sqlite")
def _compile_gen_random_uuid_sqlite(element, compiler, **kw) -> str:
    return "lower(hex(randomblob(16)))"


class AnimalORM(Base):
    __tablename__ = "animals"

    id: Mapped[UUID] = mapped_column(
        Uuid(as_uuid=True),
        primary_key=True,
        server_default=gen_random_uuid(),
    )
    name: Mapped[str] = mapped_column(Text, nullable=False)
    weight: Mapped[int] = mapped_column(Integer, nullable=False)
    diet: Mapped[str] = mapped_column(Text, nullable=False)
