"""Initial schema: projects, service_providers, checklists.

Revision ID: 0001_initial
Revises: None
Create Date: 2026-10-19

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "0001_initial"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _audit_columns() -> list:
    return [
        sa.Column("created_at", sa.TIMESTAMP(timezone=True), nullable=True),
        sa.Column("created_by", sa.String(100), nullable=True),
        sa.Column("last_updated_at", sa.TIMESTAMP(timezone=True), nullable=True),
        sa.Column("last_updated_by", sa.String(100), nullable=True),
    ]


def upgrade() -> None:
    op.create_table(
        "projects",
        sa.Column("id", sa.Uuid, primary_key=True),
        sa.Column("name", sa.String(200), nullable=False),
        sa.Column("region", sa.String(100), nullable=False),
        *_audit_columns(),
    )

    op.create_table(
        "service_providers",
        sa.Column("supplier_code", sa.String(50), primary_key=True),
        sa.Column("supplier_name", sa.String(200), nullable=False),
        *_audit_columns(),
    )

    op.create_table(
        "checklists",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column(
            "project_id",
            sa.Uuid,
            sa.ForeignKey("projects.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column(
            "supplier_code",
            sa.String(50),
            sa.ForeignKey("service_providers.supplier_code"),
            nullable=False,
        ),
        sa.Column("document_name", sa.String(200), nullable=False),
        sa.Column("is_checked", sa.Boolean, nullable=False, server_default=sa.false()),
        *_audit_columns(),
        sa.UniqueConstraint(
            "project_id", "supplier_code", "document_name",
            name="uq_checklist_project_supplier_document",
        ),
    )
    op.create_index("ix_checklists_project_id", "checklists", ["project_id"])
    op.create_index("ix_checklists_supplier_code", "checklists", ["supplier_code"])


def downgrade() -> None:
    op.drop_index("ix_checklists_supplier_code", table_name="checklists")
    op.drop_index("ix_checklists_project_id", table_name="checklists")
    op.drop_table("checklists")
    op.drop_table("service_providers")
    op.drop_table("projects")
