import logging

from aideck.core.ctx import set_ctx
from aideck.core.logging import ContextFilter, UTCFormatter, DEFAULT_FORMAT
from aideck.main import create_app

from conftest import make_settings


def test_settings_log_level_is_applied():
    root = logging.getLogger()
    before = root.level
    try:
        create_app(make_settings(LOG_LEVEL="debug"))
        assert root.level == logging.DEBUG
        create_app(make_settings(LOG_LEVEL="WARNING"))
        assert root.level == logging.WARNING
    finally:
        root.setLevel(before)


def test_records_carry_request_context():
    set_ctx(request_id="rid-1", provider="gemini")
    rec = logging.LogRecord("aideck.test", logging.INFO, __file__, 1, "hello", None, None)
    assert ContextFilter().filter(rec) is True
    line = UTCFormatter(DEFAULT_FORMAT).format(rec)
    assert "req=rid-1 provider=gemini msg=hello" in line
    assert line.split(" ", 1)[0].endswith("Z")
