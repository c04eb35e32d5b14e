import os

from core.config import get_config, DEFAULT_API_BASE_PATH  # type: ignore
from core.errors import ConfigError


def get_endpoint(path: str = "", cfg: dict | None = None) -> str:
    """Absolute Confluence v2 URL for `path`, e.g. https://acme.atlassian.net/wiki/api/v2/pages.

    With no path this is the API root the shared HTTP client is rooted at.
    CONFLUENCE_DOMAIN in the environment overrides `confluence_domain` from config.yaml.
    """
    _cfg = get_config() if cfg is None else cfg
    _cfg = _cfg or {}
    domain = (os.getenv("CONFLUENCE_DOMAIN") or _cfg.get("confluence_domain") or "").strip()
    if not domain:
        raise ConfigError("'confluence_domain' must be set in config.yaml (or CONFLUENCE_DOMAIN in the environment)")
    domain = domain.removeprefix("https://").removeprefix("http://").rstrip("/")

    base_path = "/" + str(_cfg.get("api_base_path") or DEFAULT_API_BASE_PATH).strip("/")
    return f"https://{domain}{base_path}{path}"
