"""
Endpoint resolution for the service clients.

An EndpointProvider turns the configured region and endpoint flags into a base
URL; operations then extend the resulting Endpoint with their path segments,
query string and host prefix.
"""
import logging
import re
import threading
from typing import Any, Dict, List, Optional, Sequence, Tuple
from urllib.parse import quote, urlencode, urlsplit

from cachetools import LRUCache

from .error_handler import EndpointResolutionError

logger = logging.getLogger(__name__)

# Characters left unescaped in path segments besides alphanumerics and "-_.~"
PATH_SAFE_CHARS = "$&,:=@"

HOST_LABEL_PATTERN = re.compile(r'^[a-zA-Z0-9]([a-zA-Z0-9-]{0,61}[a-zA-Z0-9])?$')
REGION_PATTERN = re.compile(r'^[a-zA-Z0-9-]+$')

PARTITIONS: List[Dict[str, Any]] = [
    {
        "id": "aws-us-gov",
        "regionRegex": re.compile(r'^us-gov-\w+-\d+$'),
        "dnsSuffix": "amazonaws.com",
        "dualStackDnsSuffix": "api.aws",
        "supportsFIPS": True,
        "supportsDualStack": True,
    },
    {
        "id": "aws-iso-b",
        "regionRegex": re.compile(r'^us-isob-\w+-\d+$'),
        "dnsSuffix": "sc2s.sgov.gov",
        "dualStackDnsSuffix": None,
        "supportsFIPS": True,
        "supportsDualStack": False,
    },
    {
        "id": "aws-iso",
        "regionRegex": re.compile(r'^us-iso-\w+-\d+$'),
        "dnsSuffix": "c2s.ic.gov",
        "dualStackDnsSuffix": None,
        "supportsFIPS": True,
        "supportsDualStack": False,
    },
    {
        "id": "aws-cn",
        "regionRegex": re.compile(r'^cn-\w+-\d+$'),
        "dnsSuffix": "amazonaws.com.cn",
        "dualStackDnsSuffix": "api.amazonwebservices.com.cn",
        "supportsFIPS": True,
        "supportsDualStack": True,
    },
    {
        "id": "aws",
        "regionRegex": re.compile(r'^(us|eu|ap|sa|ca|me|af|il|mx)-\w+-\d+$'),
        "dnsSuffix": "amazonaws.com",
        "dualStackDnsSuffix": "api.aws",
        "supportsFIPS": True,
        "supportsDualStack": True,
    },
]

DEFAULT_PARTITION = PARTITIONS[-1]


def compute_signer_region(region: Optional[str]) -> Optional[str]:
    """Strip FIPS markers from a region and map aws-global to us-east-1."""
    if not region:
        return region
    if region == "aws-global":
        return "us-east-1"
    if region.startswith("fips-"):
        region = region[len("fips-"):]
    if region.endswith("-fips"):
        region = region[:-len("-fips")]
    return region


def find_partition(region: str) -> Dict[str, Any]:
    """Return the partition whose region pattern matches, defaulting to aws."""
    for partition in PARTITIONS:
        if partition["regionRegex"].match(region):
            return partition
    return DEFAULT_PARTITION


def is_valid_host(host: str) -> bool:
    """Check every dot separated label of a host name."""
    hostname = host.split(":", 1)[0]
    return bool(hostname) and all(HOST_LABEL_PATTERN.match(label) for label in hostname.split("."))


class Endpoint:
    """A resolved endpoint that operations extend with path and query components."""

    def __init__(self, url: str):
        parts = urlsplit(url if "://" in url else f"https://{url}")
        self.scheme = parts.scheme or "https"
        self.host = parts.netloc
        self._segments: List[str] = [s for s in parts.path.split("/") if s]
        self._trailing_slash = parts.path.endswith("/") and bool(self._segments)
        self.query_string = parts.query

    def add_path_segment(self, value: Any) -> "Endpoint":
        """Append a single member value, percent-encoding it as one segment."""
        self._segments.append(quote(str(value), safe=PATH_SAFE_CHARS))
        self._trailing_slash = False
        return self

    def add_path_segments(self, literal: str) -> "Endpoint":
        """Append literal path text, keeping a trailing slash if present."""
        parts = [s for s in literal.split("/") if s]
        self._segments.extend(parts)
        if parts or literal.endswith("/"):
            self._trailing_slash = literal.endswith("/")
        return self

    def set_query_string(self, query_string: str) -> "Endpoint":
        self.query_string = query_string.lstrip("?")
        return self

    def add_query_parameters(self, params: Sequence[Tuple[str, str]]) -> "Endpoint":
        """Append already stringified query parameters, repeating keys for lists."""
        if not params:
            return self
        encoded = urlencode(list(params), quote_via=quote)
        self.query_string = f"{self.query_string}&{encoded}" if self.query_string else encoded
        return self

    def add_prefix_if_missing(self, prefix: str) -> Optional[str]:
        """
        Prepend a host prefix such as "data." unless the host already starts with it.

        Returns:
            Error message when the prefixed host is not a valid host name, else None
        """
        if self.host.startswith(prefix):
            return None
        candidate = f"{prefix}{self.host}"
        if not is_valid_host(candidate):
            return f"Host prefix {prefix!r} produces an invalid host name: {candidate}"
        self.host = candidate
        return None

    @property
    def path(self) -> str:
        if not self._segments:
            return "/"
        path = "/" + "/".join(self._segments)
        if self._trailing_slash:
            path += "/"
        return path

    @property
    def url(self) -> str:
        url = f"{self.scheme}://{self.host}{self.path}"
        if self.query_string:
            url += f"?{self.query_string}"
        return url

    def copy(self) -> "Endpoint":
        return Endpoint(self.url)

    def __repr__(self) -> str:
        return f"Endpoint({self.url!r})"


class EndpointProvider:
    """
    Resolves a service endpoint from region, FIPS and dual-stack settings.

    Resolved base URLs are memoised; each call still returns a fresh Endpoint
    so operations can extend it independently.
    """

    def __init__(self, endpoint_prefix: str, cache_size: int = 128):
        self.endpoint_prefix = endpoint_prefix
        self.region: Optional[str] = None
        self.use_fips = False
        self.use_dual_stack = False
        self.scheme = "https"
        self._override: Optional[str] = None
        self._cache = LRUCache(maxsize=cache_size)
        self._cache_lock = threading.RLock()

    def init_built_in_parameters(self, config) -> None:
        """Copy region, scheme, endpoint flags and override from a ClientConfiguration."""
        self.region = config.region
        self.use_fips = config.use_fips
        self.use_dual_stack = config.use_dual_stack
        self.scheme = config.scheme or "https"
        if config.endpoint_override:
            self.override_endpoint(config.endpoint_override)

    def override_endpoint(self, endpoint: str) -> None:
        """Pin every resolution to the given base URL."""
        self._override = endpoint if "://" in endpoint else f"{self.scheme}://{endpoint}"
        logger.info(f"Endpoint for {self.endpoint_prefix} overridden with {self._override}")

    @property
    def endpoint_override(self) -> Optional[str]:
        return self._override

    def resolve_endpoint(self) -> Endpoint:
        """
        Resolve the base endpoint for the current parameters.

        Raises:
            EndpointResolutionError: If no endpoint can be built
        """
        key = (self.region, self.use_fips, self.use_dual_stack, self.scheme, self._override)
        with self._cache_lock:
            url = self._cache.get(key)
        if url is None:
            url = self._build_url()
            with self._cache_lock:
                self._cache[key] = url
        return Endpoint(url)

    def _build_url(self) -> str:
        if self._override:
            return self._override

        region = self.region
        if not region:
            raise EndpointResolutionError("Invalid Configuration: Missing Region")

        use_fips = self.use_fips
        if region.startswith("fips-") or region.endswith("-fips"):
            use_fips = True
        region = compute_signer_region(region)

        if not REGION_PATTERN.match(region):
            raise EndpointResolutionError(f"Invalid Configuration: region {self.region!r} is not a valid host label")

        partition = find_partition(region)

        if self.use_dual_stack and not partition["supportsDualStack"]:
            raise EndpointResolutionError(
                f"DualStack is enabled but partition {partition['id']} does not support DualStack"
            )
        if use_fips and not partition["supportsFIPS"]:
            raise EndpointResolutionError(
                f"FIPS is enabled but partition {partition['id']} does not support FIPS"
            )

        prefix = f"{self.endpoint_prefix}-fips" if use_fips else self.endpoint_prefix
        suffix = partition["dualStackDnsSuffix"] if self.use_dual_stack else partition["dnsSuffix"]
        url = f"{self.scheme}://{prefix}.{region}.{suffix}"
        logger.debug(f"Resolved endpoint {url} for region {self.region}")
        return url
