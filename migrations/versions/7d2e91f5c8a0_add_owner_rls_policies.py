"""add_owner_rls_policies

Revision ID: 7d2e91f5c8a0
Revises: 1a4c7e20b9d3
Create Date: 2026-10-17 09:40:03.118906

"""

from collections.abc import Sequence

from alembic import op

# revision identifiers, used by Alembic.
revision: str = "7d2e91f5c8a0"
down_revision: str | Sequence[str] | None = "1a4c7e20b9d3"
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None

OWNED_TABLES = ("categories", "entries", "reports")


def upgrade() -> None:
    """Restrict journal rows to their owner for direct Supabase client access.

    The API connects with a service role that bypasses RLS and checks
    ownership in the service layer.
    """
    op.execute("ALTER TABLE profiles ENABLE ROW LEVEL SECURITY;")
    op.execute("""
        CREATE POLICY profiles_owner ON profiles
            FOR ALL USING (id = (SELECT auth.uid()))
            WITH CHECK (id = (SELECT auth.uid()));
    """)

    for table in OWNED_TABLES:
        op.execute(f"ALTER TABLE {table} ENABLE ROW LEVEL SECURITY;")
        op.execute(f"""
            CREATE POLICY {table}_owner ON {table}
                FOR ALL USING (user_id = (SELECT auth.uid()))
                WITH CHECK (user_id = (SELECT auth.uid()));
        """)


def downgrade() -> None:
    """Drop owner policies and disable RLS."""
    for table in reversed(OWNED_TABLES):
        op.execute(f"DROP POLICY IF EXISTS {table}_owner ON {table};")
        op.execute(f"ALTER TABLE {table} DISABLE ROW LEVEL SECURITY;")

    op.execute("DROP POLICY IF EXISTS profiles_owner ON profiles;")
    op.execute("ALTER TABLE profiles DISABLE ROW LEVEL SECURITY;")
