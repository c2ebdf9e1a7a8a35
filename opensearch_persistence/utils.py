"""AWS credential helpers for the default client."""

import boto3
from botocore.credentials import Credentials

from opensearch_persistence.errors import ConfigError
from opensearch_persistence.logging import get_logger

logger = get_logger(__name__)


def get_aws_credentials(
    *,
    profile: str | None = None,
    assume_role: str | None = None,
    region: str = "us-east-1",
    role_session_name: str = "opensearch-persistence",
) -> Credentials:
    """Get AWS credentials, optionally from a profile or by assuming a role.

    Args:
        profile: Optional AWS profile name
        assume_role: Optional IAM role ARN to assume
        region: AWS region (default: us-east-1)
        role_session_name: Name of the role session (default: opensearch-persistence)

    Returns:
        Credentials object

    Raises:
        ConfigError: If role assumption fails or credentials cannot be obtained

    """
    session = boto3.Session(profile_name=profile) if profile else boto3.Session()

    if assume_role:
        logger.info(f"Assuming role: {assume_role}")
        sts_client = session.client("sts", region_name=region)

        try:
            response = sts_client.assume_role(
                RoleArn=assume_role,
                RoleSessionName=role_session_name,
            )
        except Exception as e:
            raise ConfigError(f"Failed to assume role {assume_role}: {e!s}") from e

        credentials = response["Credentials"]
        logger.info(f"Successfully assumed role: {assume_role}")
        return Credentials(
            access_key=credentials["AccessKeyId"],
            secret_key=credentials["SecretAccessKey"],
            token=credentials["SessionToken"],
        )

    credentials = session.get_credentials()
    if credentials is None:
        raise ConfigError(
            "No AWS credentials found. Please configure AWS credentials, a profile or a role to assume.",
        )
    return credentials
