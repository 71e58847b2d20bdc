"""Application configuration settings"""

import os
from dotenv import load_dotenv

load_dotenv()

_TRUTHY = {"1", "true", "yes", "on"}


class Config:
    # Server settings
    ENVIRONMENT: str = os.getenv("ENVIRONMENT", "development")
    HOST: str = os.getenv("HOST", "0.0.0.0")
    PORT: int = int(os.getenv("PORT", "8000"))
    TESTING = os.getenv("TESTING", "false").lower() in _TRUTHY
    DEBUG = os.getenv("DEBUG", "false").lower() in _TRUTHY

    # Logging
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
    LOG_PATH: str = os.getenv("LOG_PATH", "")
    LOG_FORMAT: str = os.getenv(
        "LOG_FORMAT",
        "%(asctime)s %(levelname)s [%(correlation_id)s] %(name)s: %(message)s",
    )

    # Postgresql Database settings (empty → in-memory repositories)
    DATABASE_URL: str = os.getenv("DATABASE_URL", "")

    # Redis settings
    REDIS_URL: str = os.getenv("REDIS_URL", "redis://localhost:6379")
    REDIS_ENABLED: bool = os.getenv("REDIS_ENABLED", "true").lower() in _TRUTHY
    CACHE_CONVERSATION_TTL: int = int(os.getenv("CACHE_CONVERSATION_TTL", "1800"))
    CACHE_MESSAGES_TTL: int = int(os.getenv("CACHE_MESSAGES_TTL", "600"))

    # Auth
    JWT_SECRET: str = os.getenv("JWT_SECRET", "")
    JWT_ISSUER: str = os.getenv("JWT_ISSUER", "messaging-service")

    # File storage: "local" writes under FILE_STORAGE_LOCAL_PATH, "none" disables uploads
    FILE_STORAGE_PROVIDER: str = os.getenv("FILE_STORAGE_PROVIDER", "local").lower()
    FILE_STORAGE_LOCAL_PATH: str = os.getenv("FILE_STORAGE_LOCAL_PATH", "uploads")
    FILE_STORAGE_MAX_SIZE: int = int(
        os.getenv("FILE_STORAGE_MAX_SIZE", str(10 * 1024 * 1024))
    )

    # Events: "redis" publishes to EVENTS_TOPIC, "none" drops events
    EVENTS_PROVIDER: str = os.getenv("EVENTS_PROVIDER", "redis").lower()
    EVENTS_TOPIC: str = os.getenv("EVENTS_TOPIC", "message.events")

    # Pagination
    DEFAULT_CONVERSATION_LIMIT: int = int(os.getenv("DEFAULT_CONVERSATION_LIMIT", "20"))
    DEFAULT_MESSAGE_LIMIT: int = int(os.getenv("DEFAULT_MESSAGE_LIMIT", "50"))
    MAX_PAGE_LIMIT: int = int(os.getenv("MAX_PAGE_LIMIT", "100"))


class DevelopmentConfig(Config):
    """Development configuration: auto-reload and debug logging"""

    DEBUG = True
    LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")


class TestingConfig(Config):
    """Testing configuration"""

    TESTING = True
    DATABASE_URL = ""
    REDIS_ENABLED = False
    EVENTS_PROVIDER = "none"


class ProductionConfig(Config):
    """Production configuration"""

    DEBUG = False
    LOG_LEVEL = os.getenv("LOG_LEVEL", "WARNING")


# Configuration dictionary
config = {
    "development": DevelopmentConfig,
    "testing": TestingConfig,
    "production": ProductionConfig,
    "default": DevelopmentConfig,
}


def get_config(env=None):
    """Get configuration based on environment (ENVIRONMENT by default)"""
    if env is None:
        env = Config.ENVIRONMENT
    return config.get(env, config["default"])
