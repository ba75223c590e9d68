"""Construction of theme entries from extracted capabilities data."""

from urllib.parse import SplitResult, parse_qsl, urlencode, urlsplit, urlunsplit

from wms_themes.core.config import SERVICE_QUERY_PARAM
from wms_themes.models.extent import ExtentInfo
from wms_themes.models.layer import LayerNode
from wms_themes.models.theme_entry import Sublayer, ThemeEntry

def _netloc_without_userinfo(parts: SplitResult) -> str:
    """Host and port of a URL, credentials left out."""
    host = parts.hostname or ""
    if ":" in host:
        host = f"[{host}]"
    if parts.port is not None:
        host = f"{host}:{parts.port}"
    return host

def derive_service_url(capabilities_url: str, public_url: str | None = None) -> str:
    """
    Derive the WMS endpoint of a theme from its capabilities URL.

    Only scheme, host, port and path are kept, plus the MAP parameter
    identifying the project (matched case-insensitively, first occurrence).
    Credentials in the URL are never carried over.

    A public URL takes precedence over the derived one. If it has a query of
    its own it is used as given; otherwise the MAP parameter is appended to it.

    Args:
        capabilities_url: GetCapabilities URL
        public_url: Optional public base URL of the endpoint

    Returns:
        Service endpoint URL

    Example:
        >>> derive_service_url("http://qgis:8080/ows?MAP=/io/a.qgz&REQUEST=GetCapabilities")
        'http://qgis:8080/ows?MAP=%2Fio%2Fa.qgz'
    """
    parts = urlsplit(capabilities_url)

    service_params = [
        (key, value)
        for key, value in parse_qsl(parts.query, keep_blank_values=True)
        if key.upper() == SERVICE_QUERY_PARAM
    ][:1]

    if public_url:
        base = urlsplit(public_url)
        netloc = _netloc_without_userinfo(base)
        if base.query:
            return urlunsplit((base.scheme, netloc, base.path, base.query, base.fragment))
        return urlunsplit((base.scheme, netloc, base.path, urlencode(service_params), base.fragment))

    netloc = _netloc_without_userinfo(parts)
    return urlunsplit((parts.scheme, netloc, parts.path, urlencode(service_params), ""))


def build_sublayers(layers: list[LayerNode]) -> list[Sublayer]:
    """Map layers to sublayers with only the first one visible."""
    return [
        Sublayer(name=layer.name, title=layer.title, visibility=index == 0, crs=list(layer.crs))
        for index, layer in enumerate(layers)
    ]

def build_theme_entry(
    theme_key: str,
    service_url: str,
    layers: list[LayerNode],
    extent_info: ExtentInfo | None = None,
) -> ThemeEntry:
    """
    Build the theme entry for one project.

    The entry is always flagged as default.

    Args:
        theme_key: Theme identifier, used as id, name and title
        service_url: WMS endpoint serving the layers
        layers: Selectable layers in display order
        extent_info: Resolved extent, if any

    Returns:
        ThemeEntry instance
    """
    return ThemeEntry(
        id=theme_key,
        name=theme_key,
        title=theme_key,
        abstract=f"Layers from {theme_key}",
        url=service_url,
        sublayers=build_sublayers(layers),
        default=True,
        extent_info=extent_info,
    )
