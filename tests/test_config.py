import logging

from schematize.config import CheckerConfig
from schematize.utils.logging_utils import configure_split_stream_logging, level_from_name


def test_config_defaults(monkeypatch):
    for name in ("LOG_LEVEL", "PRINT_LEVEL", "CACHE_ENABLED", "OUTPUT_FORMAT"):
        monkeypatch.delenv(f"SCHEMATIZE_{name}", raising=False)
    config = CheckerConfig.from_env()
    assert config == CheckerConfig()
    assert config.cache_enabled is True


def test_config_from_env(monkeypatch):
    monkeypatch.setenv("SCHEMATIZE_LOG_LEVEL", "DEBUG")
    monkeypatch.setenv("SCHEMATIZE_CACHE_ENABLED", "false")
    monkeypatch.setenv("SCHEMATIZE_OUTPUT_FORMAT", "json")
    config = CheckerConfig.from_env()
    assert config.log_level == "DEBUG"
    assert config.cache_enabled is False
    assert config.output_format == "json"


def test_level_from_name():
    assert level_from_name("debug") == logging.DEBUG
    assert level_from_name(" Error ") == logging.ERROR
    assert level_from_name(None) == logging.INFO
    assert level_from_name("bogus", logging.WARNING) == logging.WARNING


def test_split_stream_logging(capsys):
    configure_split_stream_logging(level=logging.DEBUG, stderr_level=logging.WARNING)
    log = logging.getLogger("schematize.tests")
    log.info("to stdout")
    log.warning("to stderr")

    captured = capsys.readouterr()
    assert "to stdout" in captured.out
    assert "to stdout" not in captured.err
    assert "schematize.tests - WARNING - to stderr" in captured.err
    assert "to stderr" not in captured.out


def test_set_logging_returns_package_logger():
    config = CheckerConfig(log_level="INFO", print_level="ERROR")
    logger = config.set_logging()
    assert logger.name == "schematize"
    assert logging.getLogger().level == logging.INFO
