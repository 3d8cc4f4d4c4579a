"""Tests for environment configuration and logging setup."""

import logging
from unittest.mock import patch

import pytest

from amazon_seller_mcp.config import SPAPIConfig
from amazon_seller_mcp.exceptions import ConfigurationError
from amazon_seller_mcp.logging_config import SafeFileHandler, configure_logging, mask

FULL_ENV = {
    "SP_API_REFRESH_TOKEN": "Atzr|refresh",
    "SP_API_CLIENT_ID": "amzn1.application-oa2-client.test",
    "SP_API_CLIENT_SECRET": "secret",
    "SP_API_AWS_ACCESS_KEY": "AKIATEST",
    "SP_API_AWS_SECRET_KEY": "aws_secret",
    "SP_API_ROLE_ARN": "arn:aws:iam::123456789012:role/SellingPartner",
    "SP_API_REGION": "eu-west-1",
    "SP_API_MARKETPLACE_ID": "A1PA6795UKMFR9",
}


class TestSPAPIConfig:
    def test_from_env(self):
        with patch.dict("os.environ", FULL_ENV, clear=True):
            config = SPAPIConfig.from_env()

        assert config.refresh_token == "Atzr|refresh"
        assert config.region == "eu-west-1"
        assert config.marketplace_id == "A1PA6795UKMFR9"
        assert config.uses_role_assumption is True
        config.validate()

    def test_legacy_variable_names(self):
        """LWA_* and AWS_* names are accepted when SP_API_* are absent."""
        env = {
            "LWA_REFRESH_TOKEN": "legacy_refresh",
            "LWA_CLIENT_ID": "legacy_id",
            "LWA_CLIENT_SECRET": "legacy_secret",
            "AWS_ACCESS_KEY_ID": "AKIALEGACY",
            "AWS_SECRET_ACCESS_KEY": "legacy_aws_secret",
        }
        with patch.dict("os.environ", env, clear=True):
            config = SPAPIConfig.from_env()

        assert config.client_id == "legacy_id"
        assert config.aws_access_key == "AKIALEGACY"
        assert config.region == "us-east-1"
        assert config.uses_role_assumption is False

    def test_quoted_values_are_stripped(self):
        with patch.dict("os.environ", {"SP_API_CLIENT_ID": '"quoted_id"'}, clear=True):
            assert SPAPIConfig.from_env().client_id == "quoted_id"

    def test_marketplace_country_key_resolved(self):
        with patch.dict("os.environ", {"SP_API_MARKETPLACE_ID": "uk"}, clear=True):
            assert SPAPIConfig.from_env().marketplace_id == "A1F83G8C2ARO7P"

    def test_unknown_marketplace_kept_verbatim(self):
        with patch.dict("os.environ", {"SP_API_MARKETPLACE_ID": "A2Q3Y263D00KWC"}, clear=True):
            assert SPAPIConfig.from_env().marketplace_id == "A2Q3Y263D00KWC"

    def test_validate_lists_missing_names(self):
        with patch.dict("os.environ", {"SP_API_CLIENT_ID": "id"}, clear=True):
            config = SPAPIConfig.from_env()

        with pytest.raises(ConfigurationError) as exc_info:
            config.validate()

        assert "SP_API_REFRESH_TOKEN" in exc_info.value.message
        assert "SP_API_CLIENT_ID" not in exc_info.value.message
        assert exc_info.value.error_code == "invalid_input"


class TestLogging:
    def test_configure_logging_writes_to_file(self, tmp_path):
        log_file = tmp_path / "debug.log"
        handler = configure_logging(str(log_file), "INFO")
        try:
            logging.getLogger("amazon_seller_mcp.test").info("hello from the test")
            handler.flush()
            assert "hello from the test" in log_file.read_text()
        finally:
            logging.getLogger("amazon_seller_mcp").removeHandler(handler)
            handler.close()

    def test_safe_handler_swallows_write_errors(self, tmp_path):
        handler = SafeFileHandler(str(tmp_path / "missing" / "debug.log"), delay=True)
        record = logging.LogRecord("x", logging.INFO, __file__, 1, "message", None, None)

        handler.emit(record)
        handler.close()

    def test_mask(self):
        assert mask("Atza|IwEBIExampleTokenValue") == "Atza|IwEBI..."
        assert mask(None) == "none"
        assert mask("AKIAEXAMPLE", 4) == "AKIA..."
