"""Default OpenSearch client construction."""

import re

from botocore.credentials import Credentials
from opensearchpy import AWSV4SignerAuth, OpenSearch, RequestsHttpConnection
from opensearchpy.exceptions import AuthorizationException

from opensearch_persistence.config import ClientSettings
from opensearch_persistence.errors import BackendUnavailable, ConfigError
from opensearch_persistence.logging import get_logger
from opensearch_persistence.utils import get_aws_credentials

logger = get_logger(__name__)


def create_client(
    settings: ClientSettings | None = None,
    *,
    credentials: Credentials | None = None,
) -> OpenSearch:
    """Create an OpenSearch client.

    Repositories call this only when no client was passed in and the
    repository class declares none.

    Args:
        settings: Connection settings, read from the environment when omitted
        credentials: AWS credentials for SigV4 signing; looked up through boto3
            when the host is an AWS domain and none are given

    Returns:
        An ``opensearchpy.OpenSearch`` client

    """
    settings = settings or ClientSettings.from_env()
    host = re.sub(r"^https?://", "", settings.host)

    use_aws_auth = settings.use_aws_auth if settings.use_aws_auth is not None else settings.is_aws_domain
    if use_aws_auth:
        if credentials is None:
            credentials = get_aws_credentials(region=settings.region)
        http_auth = AWSV4SignerAuth(credentials, settings.region)
        use_ssl = True
    else:
        http_auth = None
        use_ssl = False

    client = OpenSearch(
        hosts=[{"host": host, "port": settings.port}],
        http_compress=True,
        http_auth=http_auth,
        use_ssl=use_ssl,
        verify_certs=use_ssl,
        ssl_assert_hostname=False,
        ssl_show_warn=False,
        connection_class=RequestsHttpConnection,
        timeout=settings.timeout,
    )

    if settings.verify_connection:
        _verify_connection(client)

    return client


def _verify_connection(client: OpenSearch) -> None:
    try:
        info = client.info()
    except AuthorizationException as e:
        raise ConfigError(
            f"Authentication successful but access denied (403). "
            f"Please check the OpenSearch domain's resource-based access policy. "
            f"Error details: {e.info if hasattr(e, 'info') else 'Access denied'}"
        ) from e
    except Exception as e:
        raise BackendUnavailable(f"Failed to connect to OpenSearch: {type(e).__name__}: {e}") from e

    logger.info(f"Connected to OpenSearch cluster: {info['cluster_name']}")
