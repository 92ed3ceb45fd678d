"""
Unit tests for environment configuration and logging setup.
"""

import logging
import os
from logging.handlers import RotatingFileHandler

import pytest

from forum_search.config import EngineSettings, load_environment
from forum_search.logging_config import setup_logging, setup_logging_from_settings

pytestmark = pytest.mark.unit

ENV_VARS = [
    "LEXICAL_DB_ENABLED",
    "LEXICAL_DB_TYPE",
    "SYNONYM_LOOKUP_TIMEOUT_MS",
    "MAX_EXTERNAL_SYNONYMS",
    "MAX_EXPANDED_TERMS",
    "NLTK_AUTO_DOWNLOAD",
    "LOG_LEVEL",
    "LOG_FILE",
]


@pytest.fixture
def clean_env(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


class TestEngineSettings:
    """Test settings defaults, parsing and validation"""

    def test_defaults(self, clean_env):
        settings = EngineSettings.from_env()

        assert settings.lexical_db_enabled is True
        assert settings.lexical_db_type == "wordnet"
        assert settings.lookup_timeout_ms == 3000
        assert settings.lookup_timeout == pytest.approx(3.0)
        assert settings.max_external_synonyms == 15
        assert settings.max_expanded_terms == 100
        assert settings.nltk_auto_download is True
        assert settings.log_level == "INFO"

    def test_from_env(self, clean_env):
        clean_env.setenv("LEXICAL_DB_ENABLED", "no")
        clean_env.setenv("LEXICAL_DB_TYPE", " NONE ")
        clean_env.setenv("SYNONYM_LOOKUP_TIMEOUT_MS", "250")
        clean_env.setenv("MAX_EXTERNAL_SYNONYMS", "5")
        clean_env.setenv("MAX_EXPANDED_TERMS", "40")
        clean_env.setenv("NLTK_AUTO_DOWNLOAD", "0")
        clean_env.setenv("LOG_LEVEL", "debug")
        clean_env.setenv("LOG_FILE", "/tmp/engine.log")

        settings = EngineSettings.from_env()

        assert settings.lexical_db_enabled is False
        assert settings.lexical_db_type == "none"
        assert settings.lookup_timeout == pytest.approx(0.25)
        assert settings.max_external_synonyms == 5
        assert settings.max_expanded_terms == 40
        assert settings.nltk_auto_download is False
        assert settings.log_level == "DEBUG"
        assert settings.log_file == "/tmp/engine.log"

    @pytest.mark.parametrize("value", ["1", "true", "TRUE", "yes", "on"])
    def test_truthy_values(self, clean_env, value):
        clean_env.setenv("LEXICAL_DB_ENABLED", value)
        assert EngineSettings.from_env().lexical_db_enabled is True

    def test_blank_values_use_defaults(self, clean_env):
        clean_env.setenv("MAX_EXPANDED_TERMS", "  ")
        clean_env.setenv("LEXICAL_DB_ENABLED", "")

        settings = EngineSettings.from_env()

        assert settings.max_expanded_terms == 100
        assert settings.lexical_db_enabled is True

    def test_invalid_integer(self, clean_env):
        clean_env.setenv("SYNONYM_LOOKUP_TIMEOUT_MS", "soon")

        with pytest.raises(ValueError, match="SYNONYM_LOOKUP_TIMEOUT_MS"):
            EngineSettings.from_env()

    @pytest.mark.parametrize("field", ["lookup_timeout_ms", "max_external_synonyms", "max_expanded_terms"])
    def test_non_positive_rejected(self, field):
        with pytest.raises(ValueError):
            EngineSettings(**{field: 0})


class TestLoadEnvironment:
    """Test .env.local / .env loading"""

    def test_env_local_preferred(self, tmp_path, monkeypatch):
        monkeypatch.delenv("FORUM_SEARCH_TEST_VALUE", raising=False)
        (tmp_path / ".env.local").write_text("FORUM_SEARCH_TEST_VALUE=local\n")
        (tmp_path / ".env").write_text("FORUM_SEARCH_TEST_VALUE=shared\n")

        try:
            loaded = load_environment(tmp_path)
            assert loaded == tmp_path / ".env.local"
            assert os.environ["FORUM_SEARCH_TEST_VALUE"] == "local"
        finally:
            os.environ.pop("FORUM_SEARCH_TEST_VALUE", None)

    def test_process_environment_wins(self, tmp_path, monkeypatch):
        monkeypatch.setenv("FORUM_SEARCH_TEST_VALUE", "process")
        (tmp_path / ".env").write_text("FORUM_SEARCH_TEST_VALUE=file\n")

        assert load_environment(tmp_path) == tmp_path / ".env"
        assert os.environ["FORUM_SEARCH_TEST_VALUE"] == "process"

    def test_no_files(self, tmp_path):
        assert load_environment(tmp_path) is None


@pytest.fixture
def restore_root_logger():
    """Drop handlers added by setup_logging, keep pytest's capture handlers"""
    root = logging.getLogger()
    level = root.level
    yield root
    for handler in list(root.handlers):
        if isinstance(handler, RotatingFileHandler) or type(handler) is logging.StreamHandler:
            root.removeHandler(handler)
            handler.close()
    root.setLevel(level)


class TestLoggingSetup:
    """Test console + rotating file handlers"""

    def test_session_log_written(self, tmp_path, restore_root_logger):
        session_log = setup_logging(log_file=str(tmp_path / "logs" / "engine.log"))

        logging.getLogger("forum_search.test").debug("debug detail")
        for handler in restore_root_logger.handlers:
            handler.flush()

        assert session_log.parent == tmp_path / "logs"
        assert session_log.name.startswith("engine_")
        assert "debug detail" in session_log.read_text(encoding="utf-8")
        assert len(restore_root_logger.handlers) == 2

    def test_reconfiguration_does_not_duplicate_handlers(self, tmp_path, restore_root_logger):
        setup_logging(log_file=str(tmp_path / "engine.log"))
        setup_logging(log_file=str(tmp_path / "engine.log"))

        assert len(restore_root_logger.handlers) == 2

    def test_old_session_logs_pruned(self, tmp_path, restore_root_logger):
        for i in range(7):
            (tmp_path / f"engine_20200101_00000{i}.log").write_text("old")

        setup_logging(log_file=str(tmp_path / "engine.log"))

        assert len(list(tmp_path.glob("engine_*.log"))) == 5
        assert not (tmp_path / "engine_20200101_000000.log").exists()

    def test_from_settings(self, tmp_path, restore_root_logger):
        settings = EngineSettings(log_level="WARNING", log_file=str(tmp_path / "engine.log"))

        setup_logging_from_settings(settings)

        console = [h for h in restore_root_logger.handlers if not hasattr(h, "baseFilename")]
        assert console[0].level == logging.WARNING

    def test_unknown_level_falls_back_to_info(self, tmp_path, restore_root_logger):
        settings = EngineSettings(log_level="CHATTY", log_file=str(tmp_path / "engine.log"))

        setup_logging_from_settings(settings)

        console = [h for h in restore_root_logger.handlers if not hasattr(h, "baseFilename")]
        assert console[0].level == logging.INFO
