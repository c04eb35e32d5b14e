import os
import yaml
from dotenv import load_dotenv

from core.errors import ConfigError

# Loads variables from .env into the environment
load_dotenv()

DEFAULT_API_BASE_PATH = "/wiki/api/v2"
DEFAULT_REQUEST_TIMEOUT = 30.0


class ConfigLoader:
    _instance = None
    _config = None

    def __new__(cls):
        """
        Create a singleton instance of ConfigLoader.
        Loads configuration from YAML file on first instantiation.
        """
        if cls._instance is None:
            cls._instance = super(ConfigLoader, cls).__new__(cls)
            cls._load_config()
        return cls._instance

    @classmethod
    def _load_config(cls):
        """
        Load the configuration from the YAML file into the class variable _config.

        CONFLUENCE_MCP_CONFIG may point at an alternative file.
        """
        config_path = os.getenv("CONFLUENCE_MCP_CONFIG") or os.path.join(
            os.path.dirname(__file__), "..", "config.yaml"
        )
        config_path = os.path.abspath(config_path)
        try:
            with open(config_path, "r", encoding="utf-8") as f:
                cls._config = yaml.safe_load(f) or {}
        except FileNotFoundError as e:
            raise ConfigError(f"Configuration file not found: {config_path}") from e
        except yaml.YAMLError as e:
            raise ConfigError(f"Error parsing '{config_path}': {e}") from e

    @classmethod
    def reset(cls):
        """Forget the loaded configuration so the next access reloads it."""
        cls._instance = None
        cls._config = None

    def get_config(self):
        """
        Return the loaded configuration dictionary.
        """
        return self._config


def get_config():
    """
    Helper function to get the singleton configuration instance's config dictionary.
    """
    return ConfigLoader().get_config()


def get_request_timeout(cfg: dict | None = None) -> float:
    cfg = get_config() if cfg is None else cfg
    value = cfg.get("request_timeout", DEFAULT_REQUEST_TIMEOUT)
    try:
        timeout = float(value)
    except (TypeError, ValueError) as e:
        raise ConfigError(f"'request_timeout' must be a number of seconds, got {value!r}") from e
    if timeout <= 0:
        raise ConfigError(f"'request_timeout' must be positive, got {timeout}")
    return timeout


def load_credentials() -> tuple[str, str]:
    """Read and validate CONFLUENCE_CLIENT_ID / CONFLUENCE_CLIENT_SECRET.

    Both must be non-empty strings. They are validated at startup only; per-request
    authentication uses the bearer token forwarded from the MCP client.
    """
    missing = [name for name in ("CONFLUENCE_CLIENT_ID", "CONFLUENCE_CLIENT_SECRET") if not (os.getenv(name) or "").strip()]
    if missing:
        raise ConfigError(f"Missing required environment variable(s): {', '.join(missing)}")
    return os.environ["CONFLUENCE_CLIENT_ID"].strip(), os.environ["CONFLUENCE_CLIENT_SECRET"].strip()
