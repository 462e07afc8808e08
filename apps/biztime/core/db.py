import logging
import sqlite3

from sqlalchemy import create_engine, event, inspect, text
from sqlalchemy.engine import Engine
from sqlalchemy.orm import declarative_base, sessionmaker

from apps.biztime.core.config import settings

logger = logging.getLogger(__name__)

# ----------------------------------------------------
# 1. CREATE ENGINE
# ----------------------------------------------------
engine = create_engine(
    settings.DATABASE_URL,
    echo=settings.SQL_ECHO,
    connect_args=({"check_same_thread": False} if settings.DATABASE_URL.startswith("sqlite") else {}),
)


@event.listens_for(Engine, "connect")
def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    # SQLite ships with FK enforcement off; cascades and comp_code checks need it
    if isinstance(dbapi_connection, sqlite3.Connection):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


# ----------------------------------------------------
# 2. SESSION FACTORY
# ----------------------------------------------------
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

# ----------------------------------------------------
# 3. BASE CLASS FOR ALL MODELS
# ----------------------------------------------------
Base = declarative_base()


# ----------------------------------------------------
# 4. DEPENDENCY FOR FASTAPI
# ----------------------------------------------------
def get_db():
    """
    FastAPI dependency, one DB session per request, closed afterwards.
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


# ----------------------------------------------------
# 5. AUTO-MIGRATION LOGIC
# ----------------------------------------------------
def table_exists(table_name: str) -> bool:
    inspector = inspect(engine)
    return table_name in inspector.get_table_names()


_NON_CONSTANT_DEFAULTS = {"CURRENT_DATE", "CURRENT_TIME", "CURRENT_TIMESTAMP"}


def _server_default_sql(col_obj):
    if col_obj.server_default is None:
        return None
    arg = col_obj.server_default.arg
    if isinstance(arg, str):
        return "'" + arg.replace("'", "''") + "'"
    return str(arg.compile(dialect=engine.dialect))


def _add_column_sql(table_name: str, col_obj) -> str:
    """
    ADD COLUMN keeping the server default, and NOT NULL when a default
    backfills existing rows. SQLite refuses CURRENT_* defaults in ALTER
    TABLE, so such columns are added nullable.
    """
    col_type = col_obj.type.compile(engine.dialect)
    alter = f"ALTER TABLE {table_name} ADD COLUMN {col_obj.name} {col_type}"

    default = _server_default_sql(col_obj)
    if default is not None and engine.dialect.name == "sqlite" and default.upper() in _NON_CONSTANT_DEFAULTS:
        default = None

    if default is not None:
        alter += f" DEFAULT {default}"
        if not col_obj.nullable:
            alter += " NOT NULL"
    elif not col_obj.nullable:
        logger.warning(
            "[DB][MIGRATION] %s.%s added as nullable without a default",
            table_name,
            col_obj.name,
        )
    return alter


def run_migrations():
    """
    Performs minimal startup migrations:
    - If a table doesn't exist → create it.
    - If columns are missing → ADD COLUMN.

    This avoids a full schema rebuild (not safe for SQLite). Proper schema
    changes go through the Alembic revisions in apps/biztime/migrations.
    """

    # Register models on Base.metadata
    from apps.biztime.models import company_model, invoice_model  # noqa: F401

    missing = [t for t in Base.metadata.sorted_tables if not table_exists(t.name)]
    created = {t.name for t in missing}
    if missing:
        logger.info("[DB] Creating tables: %s", ", ".join(sorted(created)))
        Base.metadata.create_all(bind=engine, tables=missing)

    inspector = inspect(engine)
    for table in Base.metadata.sorted_tables:
        if table.name in created:
            continue

        existing_cols = [col["name"] for col in inspector.get_columns(table.name)]

        for col_name, col_obj in table.columns.items():
            if col_name not in existing_cols:
                alter = _add_column_sql(table.name, col_obj)
                logger.info("[DB][MIGRATION] %s", alter)
                with engine.begin() as conn:
                    conn.execute(text(alter))

    logger.info("[DB] Migration complete.")
