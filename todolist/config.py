"""KEY=VALUE configuration for the task list."""
from pathlib import Path

from todolist.store import DEFAULT_FILE

DEFAULT_CONFIG = "todolist.config"

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}


class ConfigError(RuntimeError):
    """Config file exists but cannot be read."""

    def __init__(self, path, reason):
        super().__init__(f"Failed to read config {path}: {reason}")
        self.path = path


def _parse_setting(line: str) -> tuple[str, str] | None:
    """Split one 'KEY = value' line. Comments and blanks give None."""
    line = line.strip()
    if not line or line.startswith("#") or "=" not in line:
        return None
    key, _, value = line.partition("=")
    key = key.strip()
    if not key.isidentifier():
        return None
    value = value.strip()
    if len(value) >= 2 and value[0] == value[-1] and value[0] in "\"'":
        value = value[1:-1]
    elif " #" in value:
        value = value.split(" #", 1)[0].rstrip()
    return key, value


def load_config(config_path) -> dict[str, str]:
    """Read settings from a config file. A missing file gives no settings.

    Raises ConfigError when the file exists but is unreadable or not UTF-8.
    """
    config_path = Path(config_path)
    if not config_path.exists():
        return {}
    try:
        text = config_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigError(config_path, e) from e
    settings = (_parse_setting(line) for line in text.splitlines())
    return dict(s for s in settings if s is not None)


def get_config_str(config: dict[str, str], key: str, default: str) -> str:
    return config.get(key) or default


def get_config_bool(config: dict[str, str], key: str, default: bool) -> bool:
    value = config.get(key, "").strip().lower()
    if value in _TRUE:
        return True
    if value in _FALSE:
        return False
    return default


def resolve_tasks_file(cli_value: str | None, config: dict[str, str]) -> Path:
    """Pick the backing file: --file, then TASKS_FILE, then the default."""
    if cli_value:
        return Path(cli_value)
    return Path(get_config_str(config, "TASKS_FILE", DEFAULT_FILE))
