"""Read and write ~/.wikichat/config.json."""

import json
from pathlib import Path

from wikichat.config.schema import DEFAULT_API_URL, Config


def get_config_path() -> Path:
    return Path.home() / ".wikichat" / "config.json"


def load_config(config_path: Path | None = None) -> Config:
    """
    Load the wikichat configuration.

    A missing file gives the built-in defaults (English, five results, the
    public Wikipedia API). A file that cannot be parsed or validated is
    reported on stdout and the defaults are used instead.
    """
    path = config_path or get_config_path()
    if not path.exists():
        return Config()

    try:
        data = json.loads(path.read_text(encoding="utf-8"))
        return Config.model_validate(_migrate_config(data))
    except (json.JSONDecodeError, ValueError) as e:
        print(f"Warning: Failed to load config from {path}: {e}")
        print("Using default configuration.")
        return Config()


def save_config(config: Config, config_path: Path | None = None) -> None:
    """Write `config` with camelCase keys, creating the directory if needed."""
    path = config_path or get_config_path()
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(
        json.dumps(config.model_dump(by_alias=True), indent=2, ensure_ascii=False),
        encoding="utf-8",
    )


def _section(data: dict, key: str) -> dict:
    value = data.setdefault(key, {})
    if not isinstance(value, dict):
        raise ValueError(f"config section '{key}' must be an object")
    return value


def _migrate_config(data: dict) -> dict:
    """Migrate old config formats to current."""
    if not isinstance(data, dict):
        raise ValueError("config root must be an object")

    # Move top-level language -> chat.language
    chat_cfg = _section(data, "chat")
    legacy_language = data.pop("language", None)
    if legacy_language and "language" not in chat_cfg:
        chat_cfg["language"] = legacy_language

    # Move wikipedia.endpoint -> wikipedia.apiUrl
    wiki_cfg = _section(data, "wikipedia")
    legacy_endpoint = wiki_cfg.pop("endpoint", None)
    if legacy_endpoint and not wiki_cfg.get("apiUrl"):
        wiki_cfg["apiUrl"] = legacy_endpoint

    # Fill default API URL when missing/empty
    if not wiki_cfg.get("apiUrl") and not wiki_cfg.get("api_url"):
        wiki_cfg["apiUrl"] = DEFAULT_API_URL

    return data
