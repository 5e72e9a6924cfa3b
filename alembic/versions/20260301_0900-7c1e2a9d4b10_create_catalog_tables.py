"""create_catalog_tables

Revision ID: 7c1e2a9d4b10
Revises:
Create Date: 2026-03-01 09:00:00.000000+00:00

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "7c1e2a9d4b10"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _base_columns() -> list[sa.Column]:
    """Primary key and creation timestamp shared by every catalog table."""
    return [
        sa.Column("id", sa.String(length=36), nullable=False),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.func.now(),
            nullable=False,
        ),
    ]


def upgrade() -> None:
    """Create environments, plans, developers, apis, resources, operations."""
    op.create_table(
        "environments",
        *_base_columns(),
        sa.Column("name", sa.String(length=100), nullable=False),
        sa.Column("inbound_url", sa.String(length=2048), nullable=False),
        sa.Column("outbound_url", sa.String(length=2048), nullable=False),
        sa.Column("description", sa.String(length=200), nullable=True),
        sa.Column("status", sa.String(length=20), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        op.f("ix_environments_created_at"), "environments", ["created_at"]
    )

    op.create_table(
        "plans",
        *_base_columns(),
        sa.Column("name", sa.String(length=100), nullable=False),
        sa.Column("description", sa.String(length=200), nullable=True),
        sa.Column("is_default", sa.Boolean(), nullable=False),
        sa.Column("status", sa.String(length=20), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_plans_created_at"), "plans", ["created_at"])

    op.create_table(
        "developers",
        *_base_columns(),
        sa.Column("name", sa.String(length=100), nullable=False),
        sa.Column("email", sa.String(length=255), nullable=False),
        sa.Column("password_hash", sa.String(length=255), nullable=False),
        sa.Column("status", sa.String(length=20), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_developers_created_at"), "developers", ["created_at"])
    op.create_index(
        op.f("ix_developers_email"), "developers", ["email"], unique=True
    )

    op.create_table(
        "apis",
        *_base_columns(),
        sa.Column("name", sa.String(length=80), nullable=False),
        sa.Column("version", sa.String(length=20), nullable=False),
        sa.Column("base_path", sa.String(length=120), nullable=False),
        sa.Column("description", sa.String(length=200), nullable=True),
        sa.Column("cors", sa.Boolean(), nullable=False),
        sa.Column("status", sa.String(length=20), nullable=False),
        sa.Column("environment_ids", sa.JSON(), nullable=False),
        sa.Column("plan_ids", sa.JSON(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_apis_created_at"), "apis", ["created_at"])
    op.create_index("idx_apis_base_path", "apis", ["base_path"])

    op.create_table(
        "resources",
        *_base_columns(),
        sa.Column("api_id", sa.String(length=36), nullable=False),
        sa.Column("name", sa.String(length=80), nullable=False),
        sa.Column("description", sa.String(length=200), nullable=True),
        sa.ForeignKeyConstraint(["api_id"], ["apis.id"]),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_resources_created_at"), "resources", ["created_at"])
    op.create_index(
        "idx_resources_api_created", "resources", ["api_id", "created_at"]
    )

    op.create_table(
        "operations",
        *_base_columns(),
        sa.Column("api_id", sa.String(length=36), nullable=False),
        sa.Column("resource_id", sa.String(length=36), nullable=False),
        sa.Column("method", sa.String(length=10), nullable=False),
        sa.Column("path", sa.String(length=180), nullable=False),
        sa.Column("description", sa.String(length=200), nullable=True),
        sa.ForeignKeyConstraint(["api_id"], ["apis.id"]),
        sa.ForeignKeyConstraint(["resource_id"], ["resources.id"]),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint(
            "resource_id", "method", "path", name="uq_operations_route"
        ),
    )
    op.create_index(op.f("ix_operations_created_at"), "operations", ["created_at"])
    op.create_index(
        "idx_operations_resource_created",
        "operations",
        ["resource_id", "created_at"],
    )
    op.create_index("idx_operations_api", "operations", ["api_id"])


def downgrade() -> None:
    """Drop catalog tables in reverse dependency order."""
    op.drop_table("operations")
    op.drop_table("resources")
    op.drop_table("apis")
    op.drop_table("developers")
    op.drop_table("plans")
    op.drop_table("environments")
