"""High Systems API client.

A thin facade over the Dispatcher: one method per operation in the
catalog, each forwarding its keyword options untouched. Calling a method
numbers the call right away and returns an awaitable that runs it.

    async with HighSystems(instance="demo", user_token="...") as hs:
        records = await hs.get_records(appid="a1", tableid="t1", columns="id")
        response = await hs.get_records(appid="a1", tableid="t1", return_raw=True)

Option names are the Service's own field names (``relatedTable``,
``mergeQuery``, ...). Fields that are Python keywords, such as a
notification's ``from``, are passed by unpacking: ``**{"from": addr}``.
"""

from highsystems.config.options import HighSystemsOptions
from highsystems.config.settings import get_settings
from highsystems.logging.debug import get_logger
from highsystems.operations.catalog import OPERATIONS
from highsystems.operations.descriptors import RequestDescriptor
from highsystems.transport.dispatcher import Dispatcher
from highsystems.version import VERSION

logger = get_logger("main")


def _operation(descriptor: RequestDescriptor):
    def call(self, *, request_options: dict | None = None, return_raw: bool = False, **options):
        return self._dispatcher.request(
            descriptor, options, request_options=request_options, return_raw=return_raw
        )

    call.__name__ = descriptor.name
    call.__qualname__ = f"HighSystems.{descriptor.name}"
    params = ", ".join(descriptor.path_params + descriptor.query)
    call.__doc__ = (
        f"{descriptor.method} /api/rest/v1{descriptor.path}\n\n"
        f"Parameters: {params or 'none'}"
        f"{'; remaining options form the JSON body' if descriptor.body else ''}.\n"
        "Pass return_raw=True for the full httpx.Response instead of the results payload."
    )
    call.descriptor = descriptor
    return call


class HighSystems:
    """Client for one High Systems instance."""

    VERSION = VERSION

    def __init__(self, options: "HighSystemsOptions | dict | str | None" = None, **overrides):
        if options is None:
            options = HighSystemsOptions()
        elif not isinstance(options, HighSystemsOptions):
            options = HighSystemsOptions.from_json(options)
        if overrides:
            options = options.with_overrides(**overrides)

        self._dispatcher = Dispatcher(options)
        logger.debug("New Instance", extra={"debug_data": {"instance": options.instance}})

    @classmethod
    def from_env(cls) -> "HighSystems":
        """Build a client from HS_* environment variables (and .env)."""
        return cls(HighSystemsOptions.from_settings(get_settings()))

    @property
    def settings(self) -> HighSystemsOptions:
        return self._dispatcher.options

    def to_json(self) -> dict:
        """Serialize the client configuration."""
        return self.settings.to_json()

    def from_json(self, value: "str | dict") -> "HighSystems":
        """Replace the client configuration with a serialized one."""
        self._dispatcher.reconfigure(HighSystemsOptions.from_json(value))
        logger.debug("Reconfigured", extra={"debug_data": {"instance": self.settings.instance}})
        return self

    async def close(self) -> None:
        await self._dispatcher.close()

    async def __aenter__(self) -> "HighSystems":
        return self

    async def __aexit__(self, *args) -> None:
        await self.close()


for _descriptor in OPERATIONS:
    setattr(HighSystems, _descriptor.name, _operation(_descriptor))
del _descriptor
