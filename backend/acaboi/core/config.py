"""
Configuration settings for ACABOI
"""
from typing import Optional

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings"""

    # Database
    # Supabase: usar a conexão direta (porta 5432), não o pooler (porta 6543)
    DATABASE_URL: str = "postgresql://postgres@localhost:5432/acaboi"

    # Application
    APP_NAME: str = "ACABOI"
    APP_VERSION: str = "1.0.0"
    DEBUG: bool = True
    LOG_LEVEL: str = "INFO"

    # URL pública do frontend, usada no link compartilhável da agenda
    PUBLIC_APP_URL: str = "http://localhost:5173"

    # Supabase integration
    SUPABASE_URL: Optional[str] = None
    SUPABASE_SERVICE_ROLE_KEY: Optional[str] = None
    SUPABASE_ANON_KEY: Optional[str] = None

    # Tempo máximo de espera do login no Supabase Auth (segundos)
    AUTH_TIMEOUT_SECONDS: float = 5.0

    # Fator arrobas por cabeça usado na média do relatório por produtor
    ARROBAS_POR_CABECA: int = 15

    class Config:
        env_file = ".env"
        case_sensitive = True


settings = Settings()
