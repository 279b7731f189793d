from pydantic_settings import BaseSettings
from typing import List

class Settings(BaseSettings):
    backend_cors_origins: str = "http://localhost:5173"
    budget_reveal_seconds: float = 5.0
    budget_mask: str = "*****"
    currency_symbol: str = "৳"
    max_open_panels: int = 200
    log_level: str = "INFO"

    class Config:
        env_file = ".env"
        extra = "allow"

    @property
    def cors_origins_list(self) -> List[str]:
        return [origin.strip() for origin in self.backend_cors_origins.split(",") if origin.strip()]
