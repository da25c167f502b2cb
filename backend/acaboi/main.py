"""
ACABOI - FastAPI Backend
Main application entry point
"""

from contextlib import asynccontextmanager
from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import OperationalError, SQLAlchemyError
import logging
import traceback

from acaboi.api.v1.endpoints import api_router
from acaboi.core.auth_context import AuthContext, log_auth_event
from acaboi.core.config import settings
from acaboi.core.database import engine, wait_for_warmup_complete, warmup_pool
from acaboi.services.supabase_client import get_supabase_client, get_supabase_public_client

logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup and shutdown events"""
    warmup_pool()

    auth_context = AuthContext(
        get_supabase_public_client,
        get_supabase_client,
        timeout=settings.AUTH_TIMEOUT_SECONDS,
    )
    unsubscribe = auth_context.subscribe(log_auth_event)
    app.state.auth_context = auth_context

    yield

    unsubscribe()
    auth_context.close()
    try:
        # Aguarda o warmup terminar (no máximo 1 segundo)
        wait_for_warmup_complete(timeout=1.0)
        logger.info("Closing database connection pool...")
        engine.dispose(close=True)
        logger.info("Database connection pool closed successfully")
    except OperationalError as e:
        logger.error(f"Error closing database connections: {e}")


app = FastAPI(
    title=f"{settings.APP_NAME} API",
    description="Backend API for ACABOI - Gestão de abates e produtores",
    version=settings.APP_VERSION,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Comprime respostas acima de 1000 bytes (planilhas e PDFs)
app.add_middleware(GZipMiddleware, minimum_size=1000)


@app.exception_handler(OperationalError)
async def database_error_handler(request: Request, exc: OperationalError):
    """Handle database connection errors with user-friendly messages"""
    error_msg = str(exc.orig) if hasattr(exc, "orig") else str(exc)

    if "could not translate host name" in error_msg or "nodename nor servname provided" in error_msg:
        logger.error(f"Database DNS resolution error: {error_msg}")
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={
                "detail": "Erro de conexão com o banco de dados. O endereço do banco não pôde ser resolvido. "
                          "Verifique se o projeto Supabase está ativo.",
                "error_type": "database_connection_error",
            },
        )

    logger.error(f"Database operational error: {error_msg}")
    return JSONResponse(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        content={
            "detail": "Erro de conexão com o banco de dados. O serviço pode estar temporariamente indisponível.",
            "error_type": "database_error",
        },
    )


@app.exception_handler(SQLAlchemyError)
async def sqlalchemy_error_handler(request: Request, exc: SQLAlchemyError):
    """Other database failures, already logged and rolled back by the gateway"""
    logger.error(f"Database error on {request.url.path}: {exc}")
    return JSONResponse(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        content={"detail": "Erro ao acessar o banco de dados. Tente novamente mais tarde."},
    )


@app.exception_handler(Exception)
async def generic_exception_handler(request: Request, exc: Exception):
    """Log unhandled exceptions and return a generic 500"""
    tb = traceback.format_exc()
    logger.error(f"Unhandled exception: {exc}\n{tb}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Erro interno do servidor. Tente novamente mais tarde."},
    )


app.include_router(api_router, prefix="/api/v1")


@app.get("/")
async def root():
    """Health check endpoint"""
    return {
        "message": f"{settings.APP_NAME} API",
        "version": settings.APP_VERSION,
        "status": "running",
    }


@app.get("/health")
async def health_check():
    """Health check endpoint without database round trip"""
    return {
        "status": "healthy",
        "service": "acaboi-api",
        "version": settings.APP_VERSION,
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=8000)
