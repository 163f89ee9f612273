"""Request construction: descriptor + options -> HttpRequest.

Pure and synchronous. Parameter problems surface here, before any
throttling or network I/O.
"""

import json
import platform
import sys
from dataclasses import dataclass, field
from urllib.parse import quote

from highsystems.config.options import HighSystemsOptions
from highsystems.errors import ConfigurationError, InvalidParameter, MissingParameter
from highsystems.logging.debug import get_logger
from highsystems.operations.choices import FIELD_CHOICES
from highsystems.operations.descriptors import RequestDescriptor
from highsystems.version import VERSION

API_DOMAIN = "highsystems.io"
API_PREFIX = "/api/rest/v1"

# Option keys consumed by the client itself, never sent to the Service
META_KEYS = frozenset({"request_options", "return_raw"})

# Browser runtimes (Pyodide) refuse to let scripts override User-Agent
IS_BROWSER = sys.platform == "emscripten"

logger = get_logger("request")


@dataclass
class HttpRequest:
    method: str
    url: str
    params: dict[str, str] = field(default_factory=dict)
    headers: dict[str, str] = field(default_factory=dict)
    json: dict | None = None


def serialize_query_value(value) -> str:
    """Render one query value the way the Service expects it.

    Arrays are period-delimited ("3.6.7"), booleans lowercase, objects JSON.
    """
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (list, tuple)):
        return ".".join(serialize_query_value(item) for item in value)
    if isinstance(value, dict):
        return json.dumps(value, separators=(",", ":"))
    return str(value)


class RequestBuilder:
    """Turns a descriptor and a caller's options into a ready-to-send request."""

    def __init__(self, options: HighSystemsOptions):
        self._options = options

    @property
    def base_url(self) -> str:
        if not self._options.instance:
            raise ConfigurationError("No High Systems instance configured")
        return f"https://{self._options.instance}.{API_DOMAIN}{API_PREFIX}"

    def build_headers(self) -> dict[str, str]:
        headers = {"Content-Type": "application/json"}

        token = self._options.token
        if token:
            headers["Authorization"] = f"Bearer {token}"

        runtime = "browser" if IS_BROWSER else f"python/{platform.python_version()}"
        agent = f"{self._options.user_agent} python-highsystems/v{VERSION} {runtime}".strip()
        headers["X-User-Agent" if IS_BROWSER else "User-Agent"] = agent
        return headers

    def build(self, descriptor: RequestDescriptor, options: dict) -> HttpRequest:
        path_values = {}
        for name in descriptor.path_params:
            value = options.get(name)
            if value is None or value == "":
                raise MissingParameter(name, descriptor.name)
            path_values[name] = quote(str(value), safe="")

        for name in descriptor.required:
            if options.get(name) is None:
                raise MissingParameter(name, descriptor.name)

        params = {
            key: serialize_query_value(options[key])
            for key in descriptor.query
            if options.get(key) is not None
        }

        leftover = {
            key: value
            for key, value in options.items()
            if key not in descriptor.reserved and key not in META_KEYS and value is not None
        }

        body = None
        if descriptor.body:
            for key, choices in FIELD_CHOICES.items():
                if key in leftover and (not isinstance(leftover[key], str) or leftover[key] not in choices):
                    raise InvalidParameter(key, leftover[key])
            body = leftover
        elif leftover:
            logger.debug(
                "Ignoring options not accepted by operation",
                extra={"debug_data": {"operation": descriptor.name, "ignored": sorted(leftover)}},
            )

        return HttpRequest(
            method=descriptor.method,
            url=self.base_url + descriptor.render_path(path_values),
            params=params,
            headers=self.build_headers(),
            json=body,
        )
