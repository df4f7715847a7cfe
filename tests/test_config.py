import os
from unittest.mock import patch

from apns_contract.config import ResponseConfig


class TestResponseConfig:
    def test_defaults(self):
        config = ResponseConfig()
        assert config.log_level == "INFO"
        assert config.id_header == "apns-id"
        assert config.warn_on_success_body is True

    def test_from_env(self):
        env = {
            "APNS_LOG_LEVEL": "DEBUG",
            "APNS_ID_HEADER": "x-apns-id",
            "APNS_WARN_ON_SUCCESS_BODY": "false",
        }
        with patch.dict(os.environ, env, clear=False):
            config = ResponseConfig()
        assert config.log_level == "DEBUG"
        assert config.id_header == "x-apns-id"
        assert config.warn_on_success_body is False
