"""
URL-segment API versioning.

The version is read only from the path (``/api/v{version}/...``); a request
without a version segment gets the configured default. Accepted forms are
``major`` and ``major.minor`` ("2" and "2.0" name the same version).
"""

import re
from enum import Enum
from typing import Dict, FrozenSet, List, Optional

from .exceptions import UnsupportedApiVersionError, UnsupportedOperationError

_VERSION_RE = re.compile(r"(\d+)(?:\.(\d+))?")


class ApiVersion(str, Enum):
    V1 = "1.0"
    V2 = "2.0"

    @property
    def major(self) -> int:
        return int(self.value.split(".")[0])


SUPPORTED_VERSIONS: List[ApiVersion] = list(ApiVersion)

# operation name -> versions that expose it
OPERATION_VERSIONS: Dict[str, FrozenSet[ApiVersion]] = {
    "list_products": frozenset({ApiVersion.V1, ApiVersion.V2}),
    "get_product_by_id": frozenset({ApiVersion.V1, ApiVersion.V2}),
    "create_product": frozenset({ApiVersion.V2}),
}

# HTTP method on the products collection -> operation
COLLECTION_METHODS: Dict[str, str] = {
    "GET": "list_products",
    "POST": "create_product",
}


def parse_api_version(raw: Optional[str], default: Optional[ApiVersion] = None) -> ApiVersion:
    if raw is None or raw == "":
        if default is None:
            raise UnsupportedApiVersionError(raw)
        return default

    m = _VERSION_RE.fullmatch(raw)
    if not m:
        raise UnsupportedApiVersionError(raw)
    normalized = f"{int(m.group(1))}.{int(m.group(2) or 0)}"
    try:
        return ApiVersion(normalized)
    except ValueError:
        raise UnsupportedApiVersionError(raw) from None


def allowed_collection_methods(version: ApiVersion) -> List[str]:
    return [
        method
        for method, operation in COLLECTION_METHODS.items()
        if version in OPERATION_VERSIONS[operation]
    ]


def ensure_supported(operation: str, version: ApiVersion) -> None:
    """Raise UnsupportedOperationError if ``operation`` is not mapped under ``version``."""
    if version not in OPERATION_VERSIONS[operation]:
        raise UnsupportedOperationError(operation, version.value, allowed_collection_methods(version))
