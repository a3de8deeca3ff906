"""
Tests for the structured logger
"""

from border_shimmer.models.enums import LogCategory, LogLevel
from border_shimmer.utils.logger import Logger, configure_logger, get_category_logger, get_logger


def test_message_with_details_tree(capsys):
    logger = Logger(use_colors=False)

    logger.log(LogCategory.SINK, "borders command failed", LogLevel.ERROR, returncode=1, frame=12)

    lines = capsys.readouterr().out.splitlines()
    assert "SINK" in lines[0]
    assert lines[0].endswith("✗ borders command failed")
    assert lines[1].strip() == "├─ returncode: 1"
    assert lines[2].strip() == "└─ frame: 12"


def test_preformatted_details_come_before_fields(capsys):
    logger = Logger(use_colors=False)

    logger.log(LogCategory.CONFIG, "loaded", details=["source: defaults"], fps=3.0)

    lines = capsys.readouterr().out.splitlines()
    assert lines[1].strip() == "├─ source: defaults"
    assert lines[2].strip() == "└─ fps: 3.0"


def test_level_filter(capsys):
    bound = Logger(min_level=LogLevel.WARN, use_colors=False).for_category(LogCategory.CONFIG)

    bound.info("hidden")
    bound.debug("hidden too")
    bound.warn("shown")

    out = capsys.readouterr().out
    assert "hidden" not in out
    assert "⚠ shown" in out


def test_no_escape_codes_without_colors(capsys):
    Logger(use_colors=False).log(LogCategory.SHUTDOWN, "stopping", frames=4)

    assert "\033[" not in capsys.readouterr().out


def test_bound_logger_uses_category(capsys):
    logger = Logger(use_colors=False)
    bound = logger.for_category(LogCategory.ANIMATION)

    bound.info("started")
    bound.with_category(LogCategory.COLOR).info("parsed")

    lines = capsys.readouterr().out.splitlines()
    assert "ANIMATION" in lines[0]
    assert "COLOR" in lines[1]


def test_every_category_has_a_color():
    from border_shimmer.utils.logger import CATEGORY_COLORS

    assert set(CATEGORY_COLORS) == set(LogCategory)


def test_configure_logger_updates_singleton_in_place(capsys):
    singleton = get_logger()
    bound = get_category_logger(LogCategory.SYSTEM)
    try:
        configure_logger(LogLevel.ERROR, use_colors=False)
        bound.info("suppressed")
        assert get_logger() is singleton
        assert capsys.readouterr().out == ""
    finally:
        configure_logger(LogLevel.INFO, use_colors=True)
