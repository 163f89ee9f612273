"""Static description of one High Systems REST operation."""

import re
from dataclasses import dataclass

_PLACEHOLDER = re.compile(r"\{([A-Za-z_][A-Za-z0-9_]*)\}")


@dataclass(frozen=True)
class RequestDescriptor:
    name: str          # client method name, e.g. "get_records"
    method: str        # HTTP verb
    path: str          # relative to /api/rest/v1, with {placeholders}
    query: tuple[str, ...] = ()     # option keys sent as query parameters
    body: bool = False              # remaining options form the JSON body
    required: tuple[str, ...] = ()  # non-path options that must be present

    @property
    def path_params(self) -> tuple[str, ...]:
        return tuple(_PLACEHOLDER.findall(self.path))

    @property
    def reserved(self) -> frozenset[str]:
        """Option keys that never end up in the body."""
        return frozenset(self.path_params) | frozenset(self.query)

    def render_path(self, values: dict[str, str]) -> str:
        return _PLACEHOLDER.sub(lambda m: values[m.group(1)], self.path)
