# tests/test_logging.py
import json
import logging

from concertdraft.core.logging import configure_logging


def test_configure_logging_writes_json_lines(capsys):
    root = logging.getLogger()
    saved = list(root.handlers), root.level
    try:
        configure_logging("debug")
        assert root.level == logging.DEBUG
        assert len(root.handlers) == 1
        logging.getLogger("concertdraft.test").info("저장 %s건", 3)
        try:
            raise ValueError("boom")
        except ValueError:
            logging.getLogger("concertdraft.test").exception("실패")
    finally:
        root.handlers[:] = saved[0]
        root.setLevel(saved[1])

    rows = [json.loads(ln) for ln in capsys.readouterr().out.splitlines()]
    assert rows[0]["level"] == "INFO"
    assert rows[0]["logger"] == "concertdraft.test"
    assert rows[0]["msg"] == "저장 3건"
    assert "ValueError: boom" in rows[1]["exc_info"]
