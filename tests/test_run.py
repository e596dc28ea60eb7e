import importlib
import logging
import sys

from instance_info import run
from instance_info.config import Config


def test_main_starts_server_from_config(mocker):
    mocker.patch.object(run, "setup_logging")
    flask_run = mocker.patch("flask.Flask.run")

    run.main()

    flask_run.assert_called_once_with(host=Config.HOST, port=Config.PORT, debug=False)


def test_setup_logging_adds_one_stdout_handler(bare_root_logger, mocker):
    mocker.patch.object(Config, "LOG_LEVEL", "WARNING")

    run.setup_logging()
    run.setup_logging()

    assert bare_root_logger.level == logging.WARNING
    assert len(bare_root_logger.handlers) == 1
    handler = bare_root_logger.handlers[0]
    assert isinstance(handler, logging.StreamHandler)
    assert handler.stream is sys.stdout
    assert handler.formatter._fmt == Config.LOG_FORMAT


def test_setup_logging_explicit_level_wins(bare_root_logger, mocker):
    mocker.patch.object(Config, "LOG_LEVEL", "WARNING")

    run.setup_logging("DEBUG")

    assert bare_root_logger.level == logging.DEBUG


def test_wsgi_builds_app_with_configured_logging(bare_root_logger, mocker):
    mocker.patch.object(Config, "LOG_LEVEL", "ERROR")
    sys.modules.pop("wsgi", None)

    wsgi = importlib.import_module("wsgi")

    assert wsgi.app.name == "instance_info.app"
    assert "/" in [rule.rule for rule in wsgi.app.url_map.iter_rules()]
    assert bare_root_logger.level == logging.ERROR
    assert len(bare_root_logger.handlers) == 1
    sys.modules.pop("wsgi", None)
