"""Configuration settings for patient lookup service."""

import os


def get_api_host_and_port():
    """Get API bind host and port from environment variables."""
    host = os.environ.get("API_HOST", "0.0.0.0")
    port = int(os.environ.get("API_PORT", "8000"))
    return dict(host=host, port=port)


def get_api_url():
    """Get API URL from environment variables."""
    api_config = get_api_host_and_port()
    host = "localhost" if api_config["host"] == "0.0.0.0" else api_config["host"]
    return f"http://{host}:{api_config['port']}"


def get_log_level():
    """Get log level name from environment variables."""
    return os.environ.get("LOG_LEVEL", "INFO").upper()
