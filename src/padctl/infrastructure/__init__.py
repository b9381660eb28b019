"""Infrastructure layer — SQLite persistence and schema migrations.

This layer depends on stdlib, domain value types, and SQLAlchemy/Alembic.
It must never import from services, commands, or output.
"""
