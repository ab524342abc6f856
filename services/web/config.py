import os
import logging
from pydantic_settings import BaseSettings
from typing import Optional, Tuple

logger = logging.getLogger(__name__)

DEFAULT_BACKEND_URL = "http://localhost:8000"
DEFAULT_PORT = 3000

# Checked in order; the first non-blank one wins
BACKEND_URL_ENV_VARS = [
    "TAILOR_BACKEND_URL",
    "BACKEND_URL",
    "VITE_BACKEND_URL",
]


def get_port_from_env() -> int:
    """
    Get port from environment.

    Hosting platforms set PORT directly, so it takes priority.
    Priority: PORT > TAILOR_PORT > default 3000
    """
    port_str = os.environ.get("PORT") or os.environ.get("TAILOR_PORT") or str(DEFAULT_PORT)
    try:
        return int(port_str)
    except ValueError:
        return DEFAULT_PORT


def get_backend_url_from_env() -> Tuple[str, Optional[str]]:
    """
    Get the tailoring backend base URL from environment variables.

    Checks in order: TAILOR_BACKEND_URL, BACKEND_URL, VITE_BACKEND_URL

    Returns:
        Tuple of (base_url, source_env_var_name). When none is set the
        default http://localhost:8000 is returned with source None.
    """
    for var_name in BACKEND_URL_ENV_VARS:
        value = os.environ.get(var_name)
        if value and len(value.strip()) > 0:
            return value.strip().rstrip("/"), var_name

    return DEFAULT_BACKEND_URL, None


class WebConfig(BaseSettings):
    """Configuration for the tailoring console (web and CLI)."""

    # Tailoring backend
    backend_url: str = DEFAULT_BACKEND_URL
    http_timeout: float = 60.0  # seconds, applied by the HTTP transport
    backend_env_source: Optional[str] = None  # env var that supplied backend_url, set by get_config()

    # Server configuration
    host: str = "0.0.0.0"
    port: int = DEFAULT_PORT
    debug: bool = False

    # CORS configuration
    cors_origins: str = "*"

    class Config:
        env_prefix = "TAILOR_"
        env_file = ".env"
        extra = "ignore"

    @property
    def tailor_endpoint(self) -> str:
        """Full URL the client POSTs to."""
        return f"{self.backend_url.rstrip('/')}/api/tailor"


def get_config() -> WebConfig:
    """Get console configuration from environment."""
    config = WebConfig()
    # Backend URL and port can come from several env var names
    config_dict = config.model_dump()
    config_dict["backend_url"], config_dict["backend_env_source"] = get_backend_url_from_env()
    config_dict["port"] = get_port_from_env()
    return WebConfig(**config_dict)


def log_backend_status(config: WebConfig) -> None:
    """Log which backend the console will call at startup."""
    source = config.backend_env_source
    if source:
        logger.info(f"Tailoring backend: {config.backend_url} (from {source})")
    else:
        logger.warning(
            f"Tailoring backend not configured - using default {DEFAULT_BACKEND_URL}. "
            f"Checked: {', '.join(BACKEND_URL_ENV_VARS)}"
        )
