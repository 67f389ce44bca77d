from dataclasses import dataclass, field
import os
import logging
from typing import Dict

import yaml
from dotenv import load_dotenv
from rich.logging import RichHandler
from rich.traceback import install as install_rich_traceback

from http_request import __version__

logger = logging.getLogger(__name__)


@dataclass
class Config:
    app_name: str = "HttpRequest"
    debug: bool = False
    rich_logging: bool = True
    timeout: float = 30.0
    user_agent: str = f"http-request/{__version__}"
    default_headers: Dict[str, str] = field(default_factory=dict)


def setup_logging(config: "Config") -> None:
    """Configure logging level based on ``config.debug``."""
    level = logging.DEBUG if config.debug else logging.INFO
    use_rich = config.rich_logging
    if use_rich:
        install_rich_traceback()
        logging.basicConfig(
            level=level,
            format="%(message)s",
            datefmt="[%X]",
            handlers=[RichHandler(rich_tracebacks=True)],
        )
    else:
        logging.basicConfig(
            level=level,
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        )
    logger.debug("Logging initialized at level %s", logging.getLevelName(level))
    # Connection pool chatter from requests is rarely useful
    logging.getLogger("urllib3").setLevel(logging.WARNING)


def load_config(path: str = None) -> Config:
    """Load configuration from YAML file and environment variables."""
    load_dotenv()
    logger.debug("Loading configuration from %s", path or "default config.yml")

    if path is None:
        config_dir = os.path.dirname(os.path.abspath(__file__))
        path = os.path.join(config_dir, "config.yml")

    data = {}
    if os.path.exists(path):
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
        logger.debug("Loaded YAML configuration from %s", path)

    defaults = Config()

    def _env_bool(name: str, default: bool) -> bool:
        val = os.getenv(name)
        if val is None:
            return bool(data.get(name.lower(), default))
        return val.lower() in {"1", "true", "yes", "on"}

    def _env_float(name: str, key: str, default: float) -> float:
        val = os.getenv(name)
        if val is None:
            val = data.get(key, default)
        try:
            return float(val)
        except (TypeError, ValueError):
            logger.warning("Invalid value for %s: %r; using %s", name, val, default)
            return default

    headers = data.get("default_headers") or {}
    return Config(
        app_name=os.getenv("APP_NAME", data.get("app_name", defaults.app_name)),
        debug=_env_bool("DEBUG", defaults.debug),
        rich_logging=_env_bool("RICH_LOGGING", defaults.rich_logging),
        timeout=_env_float("HTTP_TIMEOUT", "timeout", defaults.timeout),
        user_agent=os.getenv("HTTP_USER_AGENT", data.get("user_agent", defaults.user_agent)),
        default_headers={str(k): str(v) for k, v in headers.items()},
    )
