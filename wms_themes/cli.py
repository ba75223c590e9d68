"""Single merge run: capabilities to theme stores."""

import logging

from wms_themes.core.capabilities_client import CapabilitiesClient, CapabilitiesFetchError
from wms_themes.core.config_merger import ConfigMerger
from wms_themes.core.extent_resolver import resolve_extent
from wms_themes.core.layer_extractor import extract_layers
from wms_themes.core.theme_builder import build_theme_entry, derive_service_url
from wms_themes.models.merge_config import MergeConfig

logger = logging.getLogger(__name__)


def run_merge(config: MergeConfig, client: CapabilitiesClient | None = None) -> int:
    """
    Publish one project's capabilities as a theme.

    Fetching and parsing happen before either store is read, so a failing
    service or a malformed document leaves both outputs untouched.

    Args:
        config: Merge configuration
        client: Optional capabilities client (closed when the run ends)

    Returns:
        Exit code (0 for success, 1 for error)
    """
    try:
        with (client or CapabilitiesClient()) as capabilities:
            tree = capabilities.fetch_capabilities(config.capabilities_url)

        layers = extract_layers(tree)
        logger.info(f"Found {len(layers)} layers.")

        extent_info = resolve_extent(tree)

        service_url = derive_service_url(config.capabilities_url, config.public_url)
        if config.public_url:
            logger.info(f"Using public service URL: {service_url}")

        entry = build_theme_entry(config.theme_key, service_url, layers, extent_info)

        ConfigMerger(config).merge(entry)
        logger.info(f"Theme '{config.theme_key}' published")
        return 0

    except CapabilitiesFetchError as e:
        logger.error(str(e))
        return 1
    except FileNotFoundError as e:
        logger.error(f"File not found: {e}")
        return 1
    except ValueError as e:
        logger.error(f"Error: {e}")
        return 1
    except OSError as e:
        logger.error(f"I/O error: {e}")
        return 1
    except Exception as e:
        logger.error(f"Unexpected error: {e}")
        logger.debug("Traceback", exc_info=True)
        return 1
