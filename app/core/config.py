from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import Dict, List, Optional
from pydantic import field_validator


class Settings(BaseSettings):
    # Database settings
    POSTGRES_USER: str = 'nordico_user'
    POSTGRES_PASSWORD: str = 'nordico_pass'
    POSTGRES_DB: str = 'nordico_db'
    POSTGRES_HOST: str = 'postgres'
    POSTGRES_PORT: int = 5432
    DATABASE_URL: Optional[str] = None  # Override completo (ej: sqlite:///./nordico.db)

    # Pagination
    DEFAULT_PAGE_SIZE: int = 20
    MAX_PAGE_SIZE: int = 100

    # Distribución de ganancias (tasas como fracción: 0.5 = 50%)
    LOCAL_SHARE_RATE: float = 0.50      # Parte local de la ganancia neta
    HEAD_BARBER_RATE: float = 0.05      # Corte del barbero principal sobre la parte local
    FRANCHISEE_RATE: float = 0.60       # Franquiciado sobre la parte de distribución
    POOL_PARTNERS_RATE: float = 0.60    # Socios sobre el pozo de socios (resto va a planta)

    # Socios y su porcentaje (deben sumar 100)
    PARTNERS: List[Dict[str, float | str]] = [
        {"name": "Engel", "share": 33.3},
        {"name": "Roy", "share": 33.3},
        {"name": "Katherine", "share": 33.3},
    ]

    # Tabla de comisiones: servicios semanales mínimos -> porcentaje
    COMMISSION_TIERS: List[Dict[str, Optional[float]]] = [
        {"min_count": 41, "percentage": 65, "next_threshold": None},
        {"min_count": 30, "percentage": 60, "next_threshold": 41},
        {"min_count": 0, "percentage": 55, "next_threshold": 30},
    ]
    HEAD_BARBER_DEFAULT_COMMISSION: float = 65.0

    # Montos faltantes o no numéricos se tratan como 0 (si es False se rechazan)
    MISSING_AMOUNT_AS_ZERO: bool = True

    # Tasa BCV inicial (Bs. por USD)
    DEFAULT_BCV_RATE: float = 36.5

    # Environment
    ENVIRONMENT: str = "development"
    DEBUG: bool = True

    @property
    def database_url(self) -> str:
        if self.DATABASE_URL:
            return self.DATABASE_URL
        return (
            f"postgresql+psycopg2://{self.POSTGRES_USER}:{self.POSTGRES_PASSWORD}"
            f"@{self.POSTGRES_HOST}:{self.POSTGRES_PORT}/{self.POSTGRES_DB}"
        )

    model_config = SettingsConfigDict(
        extra="allow",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True
    )

    @field_validator("DEBUG", mode="before")
    @classmethod
    def parse_debug(cls, v):
        if isinstance(v, str):
            return v.lower().strip('"').strip("'") in ("true", "1", "yes", "on")
        return bool(v)

    @field_validator("MISSING_AMOUNT_AS_ZERO", mode="before")
    @classmethod
    def parse_missing_amount(cls, v):
        if isinstance(v, str):
            return v.lower().strip('"').strip("'") in ("true", "1", "yes", "on")
        return bool(v)

settings = Settings()
