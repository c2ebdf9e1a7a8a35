"""Unit tests for AWS credential lookup."""

from collections.abc import Generator
from unittest.mock import MagicMock, patch

import pytest
from botocore.credentials import Credentials

from opensearch_persistence.errors import ConfigError
from opensearch_persistence.utils import get_aws_credentials


@pytest.fixture
def mock_session() -> Generator[MagicMock, None, None]:
    with patch("opensearch_persistence.utils.boto3.Session") as mock_class:
        yield mock_class


@pytest.mark.unit
class TestGetAwsCredentials:
    """Tests for get_aws_credentials."""

    def test_default_session(self, mock_session: MagicMock) -> None:
        """Test that the default session's credentials are returned."""
        credentials = Credentials("key", "secret")
        mock_session.return_value.get_credentials.return_value = credentials

        assert get_aws_credentials() is credentials
        mock_session.assert_called_once_with()

    def test_profile(self, mock_session: MagicMock) -> None:
        """Test that a named profile is used."""
        get_aws_credentials(profile="search")

        mock_session.assert_called_once_with(profile_name="search")

    def test_no_credentials(self, mock_session: MagicMock) -> None:
        """Test that missing credentials raise ConfigError."""
        mock_session.return_value.get_credentials.return_value = None

        with pytest.raises(ConfigError, match="No AWS credentials found"):
            get_aws_credentials()

    def test_assume_role(self, mock_session: MagicMock) -> None:
        """Test that assumed role credentials are returned."""
        sts = mock_session.return_value.client.return_value
        sts.assume_role.return_value = {
            "Credentials": {"AccessKeyId": "AKIA", "SecretAccessKey": "secret", "SessionToken": "token"}
        }

        credentials = get_aws_credentials(assume_role="arn:aws:iam::123456789012:role/search", region="eu-west-1")

        assert (credentials.access_key, credentials.secret_key, credentials.token) == ("AKIA", "secret", "token")
        mock_session.return_value.client.assert_called_once_with("sts", region_name="eu-west-1")
        sts.assume_role.assert_called_once_with(
            RoleArn="arn:aws:iam::123456789012:role/search",
            RoleSessionName="opensearch-persistence",
        )

    def test_assume_role_failure(self, mock_session: MagicMock) -> None:
        """Test that a failed role assumption raises ConfigError."""
        mock_session.return_value.client.return_value.assume_role.side_effect = RuntimeError("AccessDenied")

        with pytest.raises(ConfigError, match="Failed to assume role"):
            get_aws_credentials(assume_role="arn:aws:iam::123456789012:role/search")
