import logging

from rich.logging import RichHandler

from filecombiner.core.config.settings import settings
from filecombiner.core.logging.setup import configure_logging, resolve_level


def test_level_resolution(monkeypatch):
    assert resolve_level(quiet=True) == logging.ERROR
    assert resolve_level(verbose=True) == logging.DEBUG

    monkeypatch.setattr(settings, "LOG_LEVEL", "WARNING")
    assert resolve_level() == logging.WARNING

    monkeypatch.setattr(settings, "LOG_LEVEL", "NOT_A_LEVEL")
    assert resolve_level() == logging.INFO


def test_configure_logging_installs_single_rich_handler():
    root = logging.getLogger()
    previous_level = root.level

    try:
        configure_logging(verbose=True)
        configure_logging(verbose=True)

        rich_handlers = [h for h in root.handlers if isinstance(h, RichHandler)]
        assert len(rich_handlers) == 1
        assert root.level == logging.DEBUG
    finally:
        for handler in [h for h in root.handlers if isinstance(h, RichHandler)]:
            root.removeHandler(handler)
        root.setLevel(previous_level)


def test_settings_defaults():
    assert settings.HEADER_FORMAT
    assert settings.ENCODING
    assert settings.BASE_DIR.joinpath("filecombiner").is_dir()
