import logging
import ssl
from pathlib import Path
from typing import Any, cast

from httpx import AsyncBaseTransport, AsyncClient, AsyncHTTPTransport, Limits, Timeout

from framework.authenticators import TokenTransport
from framework.configuration.http import HTTPClientConfig

LOG = logging.getLogger(__name__)

USER_AGENT: str = "powerbi-client/1.0.0"


def _get_verify_value(config: HTTPClientConfig) -> ssl.SSLContext | bool:
    if not config.ssl_verify:
        return False
    if config.ssl_cert_file is None:
        return True
    return ssl.create_default_context(cafile=Path(config.ssl_cert_file).resolve())


def get_timeout(config: HTTPClientConfig) -> Timeout:
    return Timeout(
        connect=config.connection_timeout,
        read=config.read_timeout,
        write=config.write_timeout,
        pool=config.pool_timeout,
    )


def get_transport(config: HTTPClientConfig) -> AsyncHTTPTransport:
    """A pooled transport honouring the TLS and connection limit settings."""
    limits = Limits(
        max_connections=config.max_total_connections,
        max_keepalive_connections=config.max_keepalive_connections,
        keepalive_expiry=config.keepalive_expiration,
    )
    return AsyncHTTPTransport(verify=_get_verify_value(config), limits=limits)


def get_client(
    config: HTTPClientConfig | None = None,
    *,
    token: str | None = None,
    transport: AsyncBaseTransport | None = None,
) -> AsyncClient:
    """
    Create and return an AsyncClient instance.

    When a token is given every request is authenticated by wrapping the transport in a `TokenTransport`. Without an
    explicit transport, one is built from the configuration.
    """
    config = config or HTTPClientConfig()
    base_transport = transport or get_transport(config)
    LOG.debug("Creating HTTP client over %s, authenticated: %s", type(base_transport).__name__, token is not None)
    return AsyncClient(
        # httpx accepts a wider set of query parameter types than the configuration declares
        params=cast(Any, config.params),
        headers={"User-Agent": USER_AGENT},
        follow_redirects=config.follow_redirects,
        timeout=get_timeout(config),
        transport=base_transport if token is None else TokenTransport(token, transport=base_transport),
    )
