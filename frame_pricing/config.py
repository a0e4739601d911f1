import logging

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    DATABASE_URL: str = "sqlite:///./pricing.db"
    SQL_ECHO: bool = False
    LOG_LEVEL: str = "INFO"

    # Unresolved molding/matboard/backing/accessory refs cost zero unless strict
    STRICT_CATALOG: bool = False

    # Thread pool size for price_lines()
    BATCH_MAX_WORKERS: int = 4

    class Config:
        env_file = ".env"


settings = Settings()


def configure_logging(level: str = None) -> None:
    """Apply LOG_LEVEL to the package logger (and root, if nothing configured it yet)."""
    level_name = (level or settings.LOG_LEVEL).upper()
    logging.basicConfig(
        level=level_name,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logging.getLogger("frame_pricing").setLevel(level_name)
