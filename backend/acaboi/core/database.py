"""
Database configuration and session management

Usa a conexão direta ao Supabase (porta 5432). O pooler do Supabase
(porta 6543) não suporta tudo o que as migrations e transações precisam.
"""
import logging
import threading
import time

from sqlalchemy import create_engine, text
from sqlalchemy.ext.declarative import declarative_base
from sqlalchemy.orm import sessionmaker

from .config import settings

logger = logging.getLogger(__name__)


def _engine_kwargs(url: str) -> dict:
    # Pool e keepalives só fazem sentido no PostgreSQL
    if not url.startswith("postgresql"):
        return {"connect_args": {"check_same_thread": False}} if url.startswith("sqlite") else {}
    return {
        "pool_size": 5,
        "max_overflow": 5,
        "pool_recycle": 300,  # recicla conexões a cada 5 minutos
        "pool_timeout": 30,
        "pool_reset_on_return": "commit",
        "connect_args": {
            "connect_timeout": 10,
            "keepalives": 1,
            "keepalives_idle": 30,
            "keepalives_interval": 10,
            "keepalives_count": 5,
        },
    }


engine = create_engine(
    settings.DATABASE_URL,
    pool_pre_ping=True,
    echo=False,
    **_engine_kwargs(settings.DATABASE_URL),
)


_warmup_thread = None
_warmup_complete = False


def warmup_pool(connections: int = 2):
    """Pre-create connections to reduce cold start latency"""
    global _warmup_thread, _warmup_complete

    def _warmup_sync():
        global _warmup_complete
        opened = []
        try:
            for _ in range(connections):
                try:
                    conn = engine.connect()
                    conn.execute(text("SELECT 1"))
                    opened.append(conn)
                except Exception as e:
                    logger.warning("Falha ao abrir conexão no warmup: %s", e)
            for conn in opened:
                conn.close()
            if opened:
                logger.info("Pool de conexões aquecido (%d conexões)", len(opened))
            else:
                logger.warning("Nenhuma conexão aquecida")
        finally:
            _warmup_complete = True

    # Thread daemon para não bloquear o startup
    _warmup_thread = threading.Thread(target=_warmup_sync, daemon=True)
    _warmup_thread.start()


def wait_for_warmup_complete(timeout=5.0):
    """Aguarda o fim do warmup (usado no shutdown)"""
    if _warmup_complete:
        return True

    start_time = time.time()
    while not _warmup_complete and (time.time() - start_time) < timeout:
        time.sleep(0.1)

    return _warmup_complete


SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

Base = declarative_base()


def get_db():
    """Dependency to get database session"""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
