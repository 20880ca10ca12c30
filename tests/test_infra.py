import io
import logging

from grcal.core.models import CalendarDate, Weekday
from grcal.infra.constants import CONSTANTS
from grcal.infra.logger import LoggerFactory, _LoggerConfig
from grcal.pdio.writer import ResultWriter


def test_logger_config_from_env(monkeypatch):
    monkeypatch.setenv("GRCAL_LOGLEVEL", " debug ")
    monkeypatch.setenv("GRCAL_LOGFILE", " /tmp/x.log ")
    cfg = _LoggerConfig.from_env()
    assert cfg.level == logging.DEBUG
    assert cfg.logfile == "/tmp/x.log"


def test_logger_config_unknown_level_falls_back(monkeypatch):
    monkeypatch.setenv("GRCAL_LOGLEVEL", "chatty")
    monkeypatch.delenv("GRCAL_LOGFILE", raising=False)
    cfg = _LoggerConfig.from_env()
    assert cfg.level == logging.INFO
    assert cfg.logfile is None


def test_logger_writes_file(monkeypatch, tmp_path):
    logfile = tmp_path / "grcal.log"
    monkeypatch.setenv("GRCAL_LOGFILE", str(logfile))
    monkeypatch.setenv("GRCAL_LOGLEVEL", "INFO")
    log = LoggerFactory.get_logger("grcal.test.file")
    log.info("hello %s", "file")
    for h in log.handlers:
        h.flush()
    assert "[INFO] hello file" in logfile.read_text(encoding="utf-8")


def test_logger_is_idempotent():
    first = LoggerFactory.get_logger("grcal.test.idem")
    count = len(first.handlers)
    second = LoggerFactory.get_logger("grcal.test.idem")
    assert first is second
    assert len(second.handlers) == count


def test_writer_formats():
    buf = io.StringIO()
    writer = ResultWriter(buf)
    assert writer.write_date(CalendarDate(1582, 10, 15), Weekday.FRIDAY) == "1582-10-15 Fri"
    assert writer.write_offset(141427) == "141427"
    assert buf.getvalue() == "1582-10-15 Fri\n141427\n"


def test_constants_are_consistent():
    assert CONSTANTS.qc_days == 4 * CONSTANTS.c_days + 1
    assert CONSTANTS.c_days == 25 * CONSTANTS.q_days - 1
    assert CONSTANTS.q_days == 4 * CONSTANTS.y_days + 1
    assert len(CONSTANTS.day_abbreviations) == CONSTANTS.week_length


def test_logger_uses_plain_stderr_handler_and_propagates():
    log = LoggerFactory.get_logger("grcal.test.stderr")
    stream_handlers = [h for h in log.handlers if type(h) is logging.StreamHandler]
    assert len(stream_handlers) == 1
    assert log.propagate is True
