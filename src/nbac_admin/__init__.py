"""High-level NBAC admin client entrypoints."""
from .client import NBACAdminClient
from .config import SDK_VERSION as __version__
from .config import ClientConfig
from .converter import DetailedResponse
from .exceptions import (
    ApiError,
    InvalidArgumentError,
    NBACError,
    RequestError,
    UnexpectedResponseError,
)

__all__ = [
    "NBACAdminClient",
    "ClientConfig",
    "DetailedResponse",
    "NBACError",
    "ApiError",
    "InvalidArgumentError",
    "RequestError",
    "UnexpectedResponseError",
    "__version__",
]
