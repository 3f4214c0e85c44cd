"""
Category logger output format and level filtering
"""

from quadlight.models.enums import LogCategory, LogLevel
from quadlight.utils.logger import Logger, configure_logger, get_category_logger, get_logger


def test_message_with_details_renders_as_tree(capsys):
    logger = Logger(min_level=LogLevel.DEBUG, use_colors=False)
    logger.info(LogCategory.TRANSPORT, "Device connected", path="/dev/hidraw3", interface=1)

    lines = capsys.readouterr().out.splitlines()
    assert "TRANSPORT" in lines[0]
    assert lines[0].endswith("Device connected")
    assert lines[1].strip() == "├─ path: /dev/hidraw3"
    assert lines[2].strip() == "└─ interface: 1"


def test_levels_below_minimum_are_dropped(capsys):
    logger = Logger(min_level=LogLevel.WARN, use_colors=False)
    logger.info(LogCategory.API, "hidden")
    logger.debug(LogCategory.API, "hidden too")
    logger.error(LogCategory.API, "shown")

    out = capsys.readouterr().out
    assert "hidden" not in out
    assert "shown" in out


def test_colors_can_be_disabled(capsys):
    Logger(use_colors=False).info(LogCategory.CONFIG, "plain")
    assert "\033[" not in capsys.readouterr().out


def test_bound_logger_uses_its_category(capsys):
    configure_logger(LogLevel.DEBUG, use_colors=False)
    log = get_category_logger(LogCategory.HARDWARE)
    log.debug("probe")
    log.with_category(LogCategory.STATE).info("saved")

    lines = capsys.readouterr().out.splitlines()
    assert "HARDWARE" in lines[0]
    assert "STATE" in lines[1]


def test_configure_updates_shared_instance(capsys):
    log = get_logger().for_category(LogCategory.SYSTEM)
    configure_logger(LogLevel.ERROR, use_colors=False)
    log.info("suppressed")
    configure_logger(LogLevel.INFO, use_colors=False)
    log.info("visible")

    out = capsys.readouterr().out
    assert "suppressed" not in out
    assert "visible" in out


def test_format_without_details_is_one_line():
    lines = Logger(use_colors=False).format(LogCategory.GENERAL, "hello", LogLevel.WARN)
    assert len(lines) == 1
    assert "GENERAL" in lines[0]
    assert lines[0].endswith("⚠ hello")


def test_explicit_stream(tmp_path):
    path = tmp_path / "log.txt"
    with open(path, "w", encoding="utf-8") as f:
        Logger(use_colors=False, stream=f).error(LogCategory.API, "to file", code=7)
    text = path.read_text(encoding="utf-8")
    assert "to file" in text
    assert "code: 7" in text
