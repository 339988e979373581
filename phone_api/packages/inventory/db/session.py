"""Database engine and session factory configuration."""

from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker

from phone_api.packages.inventory.core.config import get_settings

settings = get_settings()

_connect_args = {}
if settings.sql_database_url.startswith("sqlite"):
    # FastAPI 在线程池中执行同步依赖，SQLite 连接需允许跨线程使用
    _connect_args["check_same_thread"] = False

# ``pool_pre_ping`` keeps the connection pool healthy; ``echo`` mirrors SQL logs
# when enabled in settings for easier debugging.
engine = create_engine(
    settings.sql_database_url,
    pool_pre_ping=True,
    echo=settings.database_echo,
    connect_args=_connect_args,
)

if engine.dialect.name == "sqlite":

    @event.listens_for(engine, "connect")
    def _enable_sqlite_foreign_keys(dbapi_connection, connection_record) -> None:
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
