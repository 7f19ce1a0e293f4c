"""
OpenSearch client factory.

Builds a SigV4-signed client for an OpenSearch Serverless collection using
credentials from the default boto3 chain.

Dependencies: opensearch-py, boto3
System role: Shared transport for index bootstrap, writes and k-NN search
"""

import boto3
from opensearchpy import AWSV4SignerAuth, OpenSearch, RequestsHttpConnection

from rag_service.core.exceptions import ConfigurationError


def build_opensearch_client(
    endpoint: str,
    region: str,
    service: str = "aoss",
    timeout: int = 30,
) -> OpenSearch:
    """
    Build an OpenSearch client for a collection endpoint.

    Automatic retries are disabled; a failed request surfaces immediately.

    Args:
        endpoint: Collection host, with or without the https:// scheme
        region: AWS region of the collection
        service: SigV4 service name ("aoss" for Serverless, "es" for domains)
        timeout: Per-request timeout in seconds

    Returns:
        OpenSearch: Configured client

    Raises:
        ConfigurationError: When the endpoint is empty or no AWS credentials are available
    """
    host = endpoint.removeprefix("https://").removeprefix("http://").rstrip("/")
    if not host:
        raise ConfigurationError("OPENSEARCH_COLLECTION_ENDPOINT is not set")

    credentials = boto3.Session().get_credentials()
    if credentials is None:
        raise ConfigurationError(
            "No AWS credentials available for OpenSearch signing",
            details={"region": region},
        )
    auth = AWSV4SignerAuth(credentials, region, service)

    return OpenSearch(
        hosts=[{"host": host, "port": 443}],
        http_auth=auth,
        use_ssl=True,
        verify_certs=True,
        connection_class=RequestsHttpConnection,
        timeout=timeout,
        max_retries=0,
        retry_on_timeout=False,
        pool_maxsize=20,
    )
