"""create_task_manager_tables

Revision ID: 3f1c2a7d9b10
Revises:
Create Date: 2026-10-19 09:00:00

"""
from typing import Sequence, Union

from alembic import op

revision: str = '3f1c2a7d9b10'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.execute("""
        CREATE TABLE users (
            id UUID PRIMARY KEY DEFAULT gen_random_uuid(),
            email VARCHAR(255) NOT NULL,
            first_name VARCHAR(255),
            last_name VARCHAR(255),
            password_digest VARCHAR(255) NOT NULL,
            role VARCHAR(16) NOT NULL DEFAULT 'USER',
            created_at TIMESTAMPTZ NOT NULL DEFAULT now(),
            updated_at TIMESTAMPTZ NOT NULL DEFAULT now()
        )
    """)
    op.execute("CREATE UNIQUE INDEX ix_users_email ON users(email)")
    op.execute("CREATE INDEX ix_users_created_at ON users(created_at)")

    op.execute("""
        CREATE TABLE task_statuses (
            id UUID PRIMARY KEY DEFAULT gen_random_uuid(),
            name VARCHAR(255) NOT NULL UNIQUE,
            slug VARCHAR(255) NOT NULL,
            created_at TIMESTAMPTZ NOT NULL DEFAULT now()
        )
    """)
    op.execute("CREATE UNIQUE INDEX ix_task_statuses_slug ON task_statuses(slug)")
    op.execute("CREATE INDEX ix_task_statuses_created_at ON task_statuses(created_at)")

    op.execute("""
        CREATE TABLE labels (
            id UUID PRIMARY KEY DEFAULT gen_random_uuid(),
            name VARCHAR(1000) NOT NULL UNIQUE,
            created_at TIMESTAMPTZ NOT NULL DEFAULT now()
        )
    """)
    op.execute("CREATE INDEX ix_labels_created_at ON labels(created_at)")

    op.execute("""
        CREATE TABLE tasks (
            id UUID PRIMARY KEY DEFAULT gen_random_uuid(),
            index INTEGER,
            name VARCHAR(255) NOT NULL,
            description TEXT,
            status_id UUID NOT NULL REFERENCES task_statuses(id) ON DELETE RESTRICT,
            assignee_id UUID REFERENCES users(id) ON DELETE RESTRICT,
            created_at TIMESTAMPTZ NOT NULL DEFAULT now()
        )
    """)
    op.execute("CREATE INDEX ix_tasks_status_id ON tasks(status_id)")
    op.execute("CREATE INDEX ix_tasks_assignee_id ON tasks(assignee_id)")
    op.execute("CREATE INDEX ix_tasks_created_at ON tasks(created_at)")

    op.execute("""
        CREATE TABLE task_labels (
            task_id UUID NOT NULL REFERENCES tasks(id) ON DELETE CASCADE,
            label_id UUID NOT NULL REFERENCES labels(id) ON DELETE RESTRICT,
            PRIMARY KEY (task_id, label_id)
        )
    """)
    op.execute("CREATE INDEX ix_task_labels_label_id ON task_labels(label_id)")


def downgrade() -> None:
    op.execute("DROP TABLE IF EXISTS task_labels")
    op.execute("DROP TABLE IF EXISTS tasks")
    op.execute("DROP TABLE IF EXISTS labels")
    op.execute("DROP TABLE IF EXISTS task_statuses")
    op.execute("DROP TABLE IF EXISTS users")
