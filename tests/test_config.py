import logging

import pytest
import yaml

from tokeq.io.config import LoaderConfig, VariableNames, load_loader_config, load_yaml
from tokeq.io.logging_utils import LOGGER_NAME, parse_level, reset_logger, setup_logger


def _write(path, data):
    path.write_text(yaml.safe_dump(data) if data is not None else "", encoding="utf-8")
    return path


def test_load_yaml_empty_file(tmp_path):
    assert load_yaml(_write(tmp_path / "empty.yaml", None)) == {}


def test_load_yaml_requires_mapping(tmp_path):
    p = tmp_path / "list.yaml"
    p.write_text("- a\n- b\n", encoding="utf-8")
    with pytest.raises(TypeError):
        load_yaml(p)


def test_defaults():
    cfg = load_loader_config(None)
    assert cfg == LoaderConfig()
    assert cfg.names.theta == "boozer_theta"
    assert cfg.shape_consistency is True
    assert cfg.log_level == "INFO"


def test_full_config(tmp_path):
    p = _write(
        tmp_path / "loader.yaml",
        {
            "variables": {"baxis": "B0", "b": "bmod"},
            "checks": {"shape_consistency": False},
            "logging": {"level": "debug"},
        },
    )
    cfg = load_loader_config(p)
    assert cfg.names.baxis == "B0"
    assert cfg.names.b == "bmod"
    assert cfg.names.psi == "psi"
    assert cfg.shape_consistency is False
    assert cfg.log_level == "DEBUG"


def test_unknown_variable_role():
    with pytest.raises(ValueError, match="Unknown variable roles: pressure"):
        VariableNames.from_mapping({"pressure": "p"})


def test_variables_must_be_mapping():
    with pytest.raises(TypeError):
        LoaderConfig.from_mapping({"variables": ["psi"]})


def test_setup_logger_file_and_no_duplicates(tmp_path):
    reset_logger()
    try:
        log_path = tmp_path / "logs" / "run.log"
        logger = setup_logger(log_path, level="DEBUG")
        again = setup_logger(log_path, level="DEBUG")

        assert logger is again
        assert logger.name == LOGGER_NAME
        assert len(logger.handlers) == 2
        assert logger.level == logging.DEBUG

        logging.getLogger("tokeq.io.extract").debug("hello from a child")
        for h in logger.handlers:
            h.flush()
        assert "hello from a child" in log_path.read_text()
    finally:
        reset_logger()


def test_parse_level():
    assert parse_level("debug") == logging.DEBUG
    assert parse_level(" Warning ") == logging.WARNING
    assert parse_level(logging.ERROR) == logging.ERROR
    with pytest.raises(ValueError, match="Unknown logging level"):
        parse_level("verbose")


def test_unknown_config_level_fails_on_load():
    with pytest.raises(ValueError, match="Unknown logging level"):
        LoaderConfig.from_mapping({"logging": {"level": "chatty"}})


def test_setup_logger_console_only_and_reconfigure():
    reset_logger()
    try:
        logger = setup_logger(level="warning")
        assert len(logger.handlers) == 1
        assert logger.level == logging.WARNING
        assert logger.handlers[0].level == logging.WARNING

        reset_logger()
        assert setup_logger(level="ERROR").level == logging.ERROR
    finally:
        reset_logger()
