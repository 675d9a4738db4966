import os
import ssl
from typing import Any, Dict

import httpx

from .constants import (
    ENV_REQUESTS_CA_BUNDLE,
    ENV_SSL_CERT_DIR,
    ENV_SSL_CERT_FILE,
    MAX_REDIRECTS,
)


def expand_path(path):
    """Expand environment variables and user home directory in path."""
    if not path:
        return path
    path = os.path.expandvars(path)
    path = os.path.expanduser(path)
    return path


def create_ssl_context() -> ssl.SSLContext:
    # Try truststore first (system certificates)
    try:
        import truststore

        return truststore.SSLContext(ssl.PROTOCOL_TLS_CLIENT)
    except ImportError:
        import certifi

        ssl_cert_file = expand_path(os.environ.get(ENV_SSL_CERT_FILE))
        requests_ca_bundle = expand_path(os.environ.get(ENV_REQUESTS_CA_BUNDLE))
        ssl_cert_dir = expand_path(os.environ.get(ENV_SSL_CERT_DIR))

        return ssl.create_default_context(
            cafile=ssl_cert_file or requests_ca_bundle or certifi.where(),
            capath=ssl_cert_dir,
        )


def get_httpx_client_kwargs(timeout: float, skip_verify: bool) -> Dict[str, Any]:
    """Get the httpx client configuration for a single request.

    Redirects are followed up to ``MAX_REDIRECTS`` hops. ``timeout`` applies
    to every phase (connect, write, read, pool).
    """
    client_kwargs: Dict[str, Any] = {
        "follow_redirects": True,
        "max_redirects": MAX_REDIRECTS,
        "timeout": httpx.Timeout(timeout),
    }

    if skip_verify:
        client_kwargs["verify"] = False
    else:
        client_kwargs["verify"] = create_ssl_context()

    # HTTP_PROXY, HTTPS_PROXY, NO_PROXY are read by httpx by default

    return client_kwargs
