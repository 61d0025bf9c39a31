"""Tests for logging setup."""

import pytest
from loguru import logger

from model_catalog.core.config import Settings
from model_catalog.core.exceptions import ModelParseError
from model_catalog.core.logger import setup_logging
from model_catalog.services.model_service import ModelService


@pytest.fixture(autouse=True)
def reset_logger():
    yield
    logger.remove()
    logger.disable("model_catalog")


class TestSetupLogging:
    """Test setup_logging enables package logs."""

    @pytest.mark.unit
    def test_returns_handler_id(self):
        handler_id = setup_logging(Settings(_env_file=None))
        assert isinstance(handler_id, int)

    @pytest.mark.unit
    def test_package_logs_disabled_by_default(self):
        import model_catalog  # noqa: F401

        records = []
        logger.add(records.append, level="DEBUG")
        ModelService().parse_model_list({"object": "list", "data": []})
        assert records == []

    @pytest.mark.unit
    def test_rejected_entry_is_logged(self):
        setup_logging(Settings(_env_file=None, log_level="WARNING"))
        records = []
        logger.add(records.append, level="DEBUG", format="{message}")

        with pytest.raises(ModelParseError):
            ModelService().parse_model({"id": ""})

        assert [r.record["level"].name for r in records] == ["WARNING"]

    @pytest.mark.unit
    def test_level_filters_stderr(self, capsys):
        setup_logging(Settings(_env_file=None, log_level="ERROR"))
        ModelService().parse_model_list({"object": "list", "data": []})
        assert "解析模型列表" not in capsys.readouterr().err

    @pytest.mark.unit
    def test_debug_overrides_level(self, capsys):
        setup_logging(Settings(_env_file=None, debug=True, log_level="ERROR"))
        ModelService().parse_model_list({"object": "list", "data": []})
        assert "解析模型列表: 0 个模型" in capsys.readouterr().err
