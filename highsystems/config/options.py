"""Client configuration model.

HighSystemsOptions is the resolved configuration owned by one client
instance. It serializes to the camelCase keys the Service's other clients
use, so a configuration saved by one can be loaded by another.
"""

import json
from dataclasses import dataclass, fields, replace

from highsystems.config.settings import Settings
from highsystems.errors import ConfigurationError

# attribute name -> serialized key
_WIRE_KEYS = {
    "instance": "instance",
    "user_token": "userToken",
    "temp_token": "tempToken",
    "user_agent": "userAgent",
    "connection_limit": "connectionLimit",
    "connection_limit_period": "connectionLimitPeriod",
    "error_on_connection_limit": "errorOnConnectionLimit",
    "proxy": "proxy",
}
_ATTRIBUTES = {wire: attr for attr, wire in _WIRE_KEYS.items()}


@dataclass(frozen=True)
class ProxyAuth:
    username: str
    password: str


@dataclass(frozen=True)
class ProxyConfig:
    host: str
    port: int
    auth: ProxyAuth | None = None

    def __post_init__(self):
        if not self.host:
            raise ConfigurationError("Proxy host must not be empty")
        if isinstance(self.port, bool) or not isinstance(self.port, int) or not 0 < self.port < 65536:
            raise ConfigurationError(f"Invalid proxy port: {self.port!r}")

    @property
    def url(self) -> str:
        credentials = ""
        if self.auth is not None:
            credentials = f"{self.auth.username}:{self.auth.password}@"
        return f"http://{credentials}{self.host}:{self.port}"

    def to_json(self) -> dict:
        data: dict = {"host": self.host, "port": self.port}
        if self.auth is not None:
            data["auth"] = {"username": self.auth.username, "password": self.auth.password}
        return data

    @classmethod
    def from_json(cls, data: dict) -> "ProxyConfig":
        if not isinstance(data, dict):
            raise ConfigurationError("proxy must be false or an object with host and port")
        auth = data.get("auth")
        try:
            return cls(
                host=data["host"],
                port=data["port"],
                auth=ProxyAuth(**auth) if auth else None,
            )
        except (KeyError, TypeError) as e:
            raise ConfigurationError(f"Invalid proxy configuration: {e}") from e


@dataclass(frozen=True)
class HighSystemsOptions:
    instance: str = ""
    user_token: str = ""
    temp_token: str = ""  # preferred over user_token when both are set
    user_agent: str = ""
    connection_limit: int = 10
    connection_limit_period: int = 1000  # milliseconds
    error_on_connection_limit: bool = False
    proxy: ProxyConfig | bool = False

    def __post_init__(self):
        if isinstance(self.connection_limit, bool) or not isinstance(self.connection_limit, int) \
                or self.connection_limit <= 0:
            raise ConfigurationError(
                f"connectionLimit must be a positive integer, got {self.connection_limit!r}"
            )
        if isinstance(self.connection_limit_period, bool) \
                or not isinstance(self.connection_limit_period, (int, float)) \
                or self.connection_limit_period <= 0:
            raise ConfigurationError(
                f"connectionLimitPeriod must be a positive number, got {self.connection_limit_period!r}"
            )
        if self.proxy is not False and not isinstance(self.proxy, (dict, ProxyConfig)):
            raise ConfigurationError(f"proxy must be false or a ProxyConfig, got {self.proxy!r}")
        if isinstance(self.proxy, dict):
            # frozen: normalize the nested dict in place
            object.__setattr__(self, "proxy", ProxyConfig.from_json(self.proxy))

    @property
    def token(self) -> str:
        """The credential sent to the Service: temp token first, then user token."""
        return self.temp_token or self.user_token

    def with_overrides(self, **changes) -> "HighSystemsOptions":
        unknown = sorted(set(changes) - set(_WIRE_KEYS))
        if unknown:
            raise ConfigurationError(f"Unknown configuration option: {', '.join(unknown)}")
        return replace(self, **changes)

    def to_json(self) -> dict:
        data = {}
        for f in fields(self):
            value = getattr(self, f.name)
            if f.name == "proxy":
                value = value.to_json() if isinstance(value, ProxyConfig) else False
            data[_WIRE_KEYS[f.name]] = value
        return data

    @classmethod
    def from_json(cls, value: "str | dict") -> "HighSystemsOptions":
        """Build options from a dict or its JSON string form.

        Accepts either serialized camelCase keys or attribute names.
        """
        if isinstance(value, str):
            value = json.loads(value)
        if not isinstance(value, dict):
            raise TypeError("json argument must be an object or a valid JSON string")

        kwargs = {}
        for key, item in value.items():
            attr = _ATTRIBUTES.get(key, key)
            if attr not in _WIRE_KEYS:
                raise ConfigurationError(f"Unknown configuration option: {key}")
            kwargs[attr] = item
        return cls(**kwargs)

    @classmethod
    def from_settings(cls, settings: Settings) -> "HighSystemsOptions":
        proxy: ProxyConfig | bool = False
        if settings.proxy_host:
            auth = None
            if settings.proxy_username:
                auth = ProxyAuth(settings.proxy_username, settings.proxy_password)
            proxy = ProxyConfig(settings.proxy_host, settings.proxy_port, auth)

        return cls(
            instance=settings.instance,
            user_token=settings.user_token,
            temp_token=settings.temp_token,
            user_agent=settings.user_agent,
            connection_limit=settings.connection_limit,
            connection_limit_period=settings.connection_limit_period,
            error_on_connection_limit=settings.error_on_connection_limit,
            proxy=proxy,
        )
