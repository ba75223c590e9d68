"""Pytest configuration and fixtures."""

import http.server
import shutil
import socketserver
import threading
from pathlib import Path

import pytest

FIXTURES_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture
def fixtures_dir():
    """Directory holding capabilities documents and store templates."""
    return FIXTURES_DIR


@pytest.fixture
def store_paths(tmp_path):
    """
    Template and output paths for both stores.

    Templates are copied into the temporary directory so tests may modify
    them freely. Outputs do not exist yet.

    Returns:
        Dictionary with themes_template, themes_config_template,
        themes_output and themes_config_output paths
    """
    templates = tmp_path / "templates"
    templates.mkdir()
    shutil.copy(FIXTURES_DIR / "themes_template.json", templates / "themes.json")
    shutil.copy(FIXTURES_DIR / "themes_config_template.json", templates / "themesConfig.json")

    output = tmp_path / "output"
    return {
        "themes_template": templates / "themes.json",
        "themes_config_template": templates / "themesConfig.json",
        "themes_output": output / "themes.json",
        "themes_config_output": output / "themesConfig.json",
    }


@pytest.fixture
def capabilities_server(tmp_path):
    """
    Fixture for serving capabilities documents over HTTP.

    Serves files from a temporary directory and shuts the server down when
    the test completes. Query strings are ignored when resolving files, so
    URLs may carry MAP/SERVICE/REQUEST parameters.

    Usage:
        def test_fetch(capabilities_server):
            capabilities_server.add("parcels.xml", "capabilities.xml")
            url = capabilities_server.url("parcels.xml", map_path="/io/data/parcels.qgz")
            ...

    Attributes:
        port (int): The port the server is listening on
        serve_dir (Path): Directory served by the server
    """

    class CapabilitiesServer:
        def __init__(self, port, serve_dir):
            self.port = port
            self.serve_dir = serve_dir

        def add(self, name: str, fixture: str) -> None:
            """Serve a fixture file under the given name."""
            shutil.copy(FIXTURES_DIR / fixture, self.serve_dir / name)

        def url(self, name: str, map_path: str | None = None) -> str:
            """Build a GetCapabilities URL for a served file."""
            url = f"http://127.0.0.1:{self.port}/{name}?"
            if map_path:
                url += f"MAP={map_path}&"
            return url + "SERVICE=WMS&REQUEST=GetCapabilities"

    serve_dir = tmp_path / "wms"
    serve_dir.mkdir()

    class CapabilitiesHTTPRequestHandler(http.server.SimpleHTTPRequestHandler):
        def __init__(self, *args, **kwargs):
            super().__init__(*args, directory=str(serve_dir), **kwargs)

        def log_message(self, format, *args):
            pass  # Suppress logging during tests

    # Start server on auto-assigned port
    server = socketserver.TCPServer(("127.0.0.1", 0), CapabilitiesHTTPRequestHandler)
    port = server.server_address[1]

    thread = threading.Thread(target=server.serve_forever, daemon=True)
    thread.start()

    yield CapabilitiesServer(port, serve_dir)

    # Cleanup: shutdown server
    server.shutdown()
    server.server_close()
    thread.join(timeout=1.0)
