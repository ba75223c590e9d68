"""WMS GetCapabilities retrieval and parsing."""

import logging
import xml.etree.ElementTree as ET
from typing import Any

import requests

from wms_themes.utils.xml_tree import parse_xml_tree

logger = logging.getLogger(__name__)


class CapabilitiesFetchError(RuntimeError):
    """The capabilities document could not be retrieved."""


class CapabilitiesClient:
    """Client for retrieving WMS capabilities documents."""

    def __init__(self, session: requests.Session | None = None):
        """
        Initialize capabilities client.

        Args:
            session: Optional requests session (a plain one is created otherwise)
        """
        self.session = session or requests.Session()

    def __enter__(self):
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit."""
        self.close()

    def close(self) -> None:
        """Close the underlying HTTP session."""
        self.session.close()

    def fetch(self, url: str) -> bytes:
        """
        Download a capabilities document with a single GET request.

        Args:
            url: GetCapabilities URL

        Returns:
            Raw response body

        Raises:
            CapabilitiesFetchError: If the host is unreachable or the response is not 2xx
        """
        logger.info(f"Fetching GetCapabilities from {url}")
        try:
            response = self.session.get(url)
            response.raise_for_status()
        except requests.RequestException as e:
            raise CapabilitiesFetchError(f"Failed to fetch capabilities from {url}: {e}") from e

        logger.debug(f"Received {len(response.content)} bytes (HTTP {response.status_code})")
        return response.content

    @staticmethod
    def parse(xml: str | bytes) -> dict[str, Any]:
        """
        Parse a capabilities document into a generic tree.

        Args:
            xml: Capabilities XML

        Returns:
            Tree keyed by the root element name

        Raises:
            ValueError: If the document is not well-formed XML
        """
        try:
            return parse_xml_tree(xml)
        except ET.ParseError as e:
            raise ValueError(f"Invalid capabilities document: {e}") from e

    def fetch_capabilities(self, url: str) -> dict[str, Any]:
        """Fetch and parse a capabilities document."""
        return self.parse(self.fetch(url))
