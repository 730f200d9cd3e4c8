"""create applications

Revision ID: 001_create_applications
Revises: 
Create Date: 2026-10-19

"""

from alembic import op
import sqlalchemy as sa


revision = "001_create_applications"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "applications",
        sa.Column("id", sa.String(length=36), primary_key=True, nullable=False),
        sa.Column("principal", sa.BigInteger(), nullable=False),
        sa.Column("duration", sa.BigInteger(), nullable=False),
        sa.Column("interest_rate", sa.Float(), nullable=False),
        sa.Column("interest", sa.Float(), nullable=False),
        sa.Column("total_amount", sa.Float(), nullable=False),
        sa.Column("status", sa.String(length=50), server_default=sa.text("'pending'"), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=True),
        sa.CheckConstraint("principal > 0", name="ck_applications_principal_positive"),
        sa.CheckConstraint("duration > 0", name="ck_applications_duration_positive"),
    )


def downgrade() -> None:
    op.drop_table("applications")
