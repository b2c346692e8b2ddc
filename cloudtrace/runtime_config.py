"""Runtime configuration state management."""

from cloudtrace.errors import ConfigError

# Global runtime configuration state
_config = {
    "log_decode_failures": False,
    "include_w3c": False,
}


def _require_bool(name: str, value: bool) -> bool:
    if not isinstance(value, bool):
        raise ConfigError(f"{name} must be a bool", {"value": value})
    return value


def set_log_decode_failures(value: bool) -> None:
    _config["log_decode_failures"] = _require_bool("log_decode_failures", value)


def get_log_decode_failures() -> bool:
    return _config["log_decode_failures"]


def set_include_w3c(value: bool) -> None:
    _config["include_w3c"] = _require_bool("include_w3c", value)


def get_include_w3c() -> bool:
    return _config["include_w3c"]
