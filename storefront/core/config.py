"""Storefront Configuration"""

from typing import Optional
from pydantic_settings import BaseSettings
from functools import lru_cache

from ..services import pricing


class Settings(BaseSettings):
    """Application settings loaded from environment"""

    # Application
    app_name: str = "Storefront"
    debug: bool = True
    host: str = "0.0.0.0"
    port: int = 8001

    # Persistence (None keeps every slot in memory)
    storage_dir: Optional[str] = None

    # Cart pricing policy (amounts in rupees)
    free_shipping_threshold: int = pricing.FREE_SHIPPING_THRESHOLD
    shipping_fee: int = pricing.SHIPPING_FEE
    tax_rate: float = pricing.TAX_RATE

    # Home trial
    trial_min_items: int = 5
    trial_max_items: int = 10
    trial_service_fee: int = 499
    trial_deposit_per_item: int = 100
    trial_security_deposit: int = 1000
    default_kept_item_price: int = 2500

    # Simulated checkout latency
    payment_delay_seconds: float = 0.0

    class Config:
        env_file = "config/.env"
        env_file_encoding = "utf-8"
        env_prefix = "STOREFRONT_"
        case_sensitive = False

    @property
    def persistent(self) -> bool:
        """Whether slots are written to disk"""
        return bool(self.storage_dir)


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance"""
    return Settings()


settings = get_settings()
