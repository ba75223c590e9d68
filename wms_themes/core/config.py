"""Protocol constants and application settings."""

# WMS protocol fields written into every theme entry
WMS_VERSION = "1.3.0"
IMAGE_FORMAT = "image/png"
TRANSPARENT = True
TILED = False

# Reference system of EX_GeographicBoundingBox values
GEOGRAPHIC_CRS = "EPSG:4326"

# Root element of a WMS 1.3.0 capabilities document
CAPABILITIES_ROOT = "WMS_Capabilities"

# Query parameter identifying the QGIS project served by the endpoint
SERVICE_QUERY_PARAM = "MAP"

# Environment variable holding the public base URL of the WMS endpoint
PUBLIC_URL_ENV = "QWC2_PUBLIC_WMS_URL"

# JSON output formatting
JSON_INDENT = 2
