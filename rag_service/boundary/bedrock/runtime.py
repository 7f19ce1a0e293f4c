"""
Bedrock runtime client factory.

Dependencies: boto3, botocore
System role: Shared transport for embedding and generation calls
"""

import boto3
from botocore.config import Config


def build_bedrock_runtime_client(
    region: str,
    connect_timeout: int = 10,
    read_timeout: int = 60,
):
    """
    Build a bedrock-runtime client with bounded timeouts and no automatic retries.

    Args:
        region: AWS region hosting the models
        connect_timeout: Connection timeout in seconds
        read_timeout: Read timeout in seconds

    Returns:
        botocore client for bedrock-runtime
    """
    config = Config(
        connect_timeout=connect_timeout,
        read_timeout=read_timeout,
        retries={"mode": "standard", "total_max_attempts": 1},
    )
    return boto3.client("bedrock-runtime", region_name=region, config=config)
