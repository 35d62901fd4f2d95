from __future__ import annotations
"""server/scada/migrations/versions/0001_initial.py
~~~~~~~~~~~~~~~~~~~~~~~~
Schéma initial (machines, users, speed_history, maintenance_comments).
La ligne de l'admin intégré est créée au démarrage (session.init_db).
"""
from alembic import op
import sqlalchemy as sa

revision = "0001_initial"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "machines",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("name", sa.String(255), nullable=False, unique=True),
        sa.Column("code", sa.String(64), nullable=False, unique=True),
        sa.Column("api_key", sa.String(128), nullable=False),
        sa.Column("location", sa.String(255), nullable=True),
        sa.Column("machine_type", sa.String(100), nullable=True),
        sa.Column("current_speed", sa.Float(), server_default="0", nullable=False),
        sa.Column("status_message", sa.String(), server_default="", nullable=False),
        sa.Column("is_online", sa.Boolean(), server_default=sa.false(), nullable=False),
        sa.Column("last_update", sa.BigInteger(), server_default="0", nullable=False),
        sa.Column("created_at", sa.BigInteger(), nullable=False),
    )
    op.create_index("ix_machines_api_key", "machines", ["api_key"], unique=True)

    op.create_table(
        "users",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("username", sa.String(150), nullable=False, unique=True),
        sa.Column("password_hash", sa.String(255), nullable=False),
        sa.Column("role", sa.String(32), nullable=False),
        sa.Column("token", sa.String(128), nullable=True),
        sa.Column("created_at", sa.BigInteger(), nullable=False),
        sa.CheckConstraint("role IN ('admin', 'manager', 'technician')", name="ck_users_role"),
    )
    op.create_index("ix_users_token", "users", ["token"], unique=True)

    op.create_table(
        "speed_history",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("machine_id", sa.Integer(), nullable=False),
        sa.Column("speed", sa.Float(), nullable=False),
        sa.Column("message", sa.Text(), nullable=True),
        sa.Column("timestamp", sa.BigInteger(), nullable=False),
        sa.ForeignKeyConstraint(["machine_id"], ["machines.id"]),
    )
    op.create_index("ix_speed_history_machine_ts", "speed_history", ["machine_id", "timestamp"])

    op.create_table(
        "maintenance_comments",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("machine_id", sa.Integer(), nullable=False),
        sa.Column("username", sa.String(150), nullable=False),
        sa.Column("comment", sa.Text(), nullable=False),
        sa.Column("priority", sa.String(16), server_default="normal", nullable=False),
        sa.Column("created_at", sa.BigInteger(), nullable=False),
        sa.ForeignKeyConstraint(["machine_id"], ["machines.id"]),
        sa.CheckConstraint(
            "priority IN ('low', 'normal', 'high', 'critical')",
            name="ck_maintenance_comments_priority",
        ),
    )
    op.create_index("ix_maintenance_comments_machine_id", "maintenance_comments", ["machine_id"])


def downgrade() -> None:
    op.drop_index("ix_maintenance_comments_machine_id", table_name="maintenance_comments")
    op.drop_table("maintenance_comments")
    op.drop_index("ix_speed_history_machine_ts", table_name="speed_history")
    op.drop_table("speed_history")
    op.drop_index("ix_users_token", table_name="users")
    op.drop_table("users")
    op.drop_index("ix_machines_api_key", table_name="machines")
    op.drop_table("machines")
