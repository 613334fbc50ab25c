"""create animals table

Revision ID: 0001_create_animals
Revises:
Create Date: 2026-10-18 00:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

from src.config.settings import get_settings


# revision identifiers, used by Alembic.
revision: str = '0001_create_animals'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    is_postgres = op.get_bind().dialect.name == 'postgresql'
    if is_postgres:
        op.execute('CREATE EXTENSION IF NOT EXISTS pgcrypto')
        id_default = sa.text('gen_random_uuid()')
    else:
        id_default = sa.text('(lower(hex(randomblob(16))))')

    op.create_table(
        'animals',
        sa.Column('id', sa.Uuid(), server_default=id_default, nullable=False),
        sa.Column('name', sa.Text(), nullable=False),
        sa.Column('weight', sa.Integer(), nullable=False),
        sa.Column('diet', sa.Text(), nullable=False),
        sa.PrimaryKeyConstraint('id', name='animals_pkey'),
    )

    owner = get_settings().table_owner
    if is_postgres and owner:
        op.execute(f'ALTER TABLE animals OWNER TO "{owner}"')


def downgrade() -> None:
    op.drop_table('animals')
