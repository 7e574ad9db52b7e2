"""Collector configuration.

Defaults target WSGI applications with Pylons/Routes style controllers.
Every value can be overridden from a YAML file, e.g.:

    controllers_root: myapp
    controller_path_template: "controllers/{controller}.py"
    excluded_request_headers:
      - wsgi.
      - HTTP_COOKIE
"""

import os
from pathlib import Path

import yaml
from pydantic import BaseModel, ValidationError

CONFIG_ENV_VAR = "REQRES_CONFIG"

PARAM_IMPORTANCES = ["required", "optional"]

PARAM_TYPES = ["Integer", "Boolean", "String", "Text", "Float", "Date", "DateTime", "File", "Array"]

# Framework-injected security/compat headers
EXCLUDED_RESPONSE_HEADERS = [
    "X-Frame-Options",
    "X-XSS-Protection",
    "X-Content-Type-Options",
    "X-UA-Compatible",
]

# Routing internals and low-level server variables found in the environ
EXCLUDED_REQUEST_HEADERS = [
    "wsgi.",
    "wsgiorg.",
    "werkzeug.",
    "paste.",
    "webob.",
    "routes.",
    "beaker.",
    "rack.",
    "ROUTES_",
    "action_dispatch",
    "action_controller.",
    "REQUEST_METHOD",
    "SERVER_NAME",
    "SERVER_PORT",
    "SERVER_PROTOCOL",
    "QUERY_STRING",
    "SCRIPT_NAME",
    "CONTENT_LENGTH",
    "HTTPS",
    "HTTP_HOST",
    "HTTP_USER_AGENT",
    "REMOTE_ADDR",
    "REMOTE_PORT",
    "PATH_INFO",
    "ORIGINAL_FULLPATH",
    "ORIGINAL_SCRIPT_NAME",
    "HTTP_COOKIE",
    "HTTP_ORIGIN",
    "RAW_POST_DATA",
]


class ConfigError(ValueError):
    """Raised when a configuration file cannot be loaded."""


class CollectorConfig(BaseModel):
    """Settings shared by the collector and the comment parser."""

    routing_key: str = "wsgiorg.routing_args"
    controllers_root: Path = Path(".")
    controller_path_template: str = "controllers/{controller}.py"
    comment_marker: str = "#"
    param_importances: list[str] = PARAM_IMPORTANCES
    param_types: list[str] = PARAM_TYPES
    excluded_request_headers: list[str] = EXCLUDED_REQUEST_HEADERS
    excluded_response_headers: list[str] = EXCLUDED_RESPONSE_HEADERS

    def controller_file(self, controller: str) -> Path:
        """Source file expected to define the given controller's actions."""
        return self.controllers_root / self.controller_path_template.format(controller=controller)


def load_config(file_path: Path | None = None) -> CollectorConfig:
    """Load configuration from YAML, falling back to defaults.

    Without an explicit path, the file named by $REQRES_CONFIG is used if set.
    """
    if file_path is None:
        env_path = os.getenv(CONFIG_ENV_VAR)
        if not env_path:
            return CollectorConfig()
        file_path = Path(env_path)

    try:
        data = yaml.safe_load(file_path.read_text(encoding="utf-8")) or {}
    except (OSError, yaml.YAMLError) as e:
        raise ConfigError(f"Cannot read config {file_path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigError(f"Config {file_path} must be a mapping, got {type(data).__name__}")

    try:
        return CollectorConfig(**data)
    except ValidationError as e:
        raise ConfigError(f"Invalid config {file_path}: {e}") from e
