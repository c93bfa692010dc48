"""Initial schema - pgvector extension and the chunk embeddings table.

Revision ID: 001
Revises:
Create Date: 2026-10-18

"""

from collections.abc import Sequence

from alembic import op
import sqlalchemy as sa
from pgvector.sqlalchemy import Vector

from ragchat.config import get_settings

# revision identifiers, used by Alembic.
revision: str = "001"
down_revision: str | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    settings = get_settings()
    table = settings.vector_table

    op.execute("CREATE EXTENSION IF NOT EXISTS vector")

    op.create_table(
        table,
        sa.Column("id", sa.UUID(), primary_key=True),
        sa.Column("embedding", Vector(settings.embedding_dimensions), nullable=False),
        sa.Column("text", sa.Text(), nullable=False),
        sa.Column("source_path", sa.Text(), nullable=False),
        sa.Column("chunk_index", sa.Integer(), nullable=False),
    )
    op.create_index(f"ix_{table}_source_path", table, ["source_path"])
    op.create_index(
        f"ix_{table}_embedding_hnsw",
        table,
        ["embedding"],
        postgresql_using="hnsw",
        postgresql_ops={"embedding": "vector_cosine_ops"},
    )


def downgrade() -> None:
    op.drop_table(get_settings().vector_table)
