import logging
import os
from pathlib import Path

import pytest

from toolkit.logging_tools import logging_init


@pytest.mark.unit()
@pytest.mark.parametrize("as_type", [str, Path], ids=["str", "path"])
def test_init_logging_file(as_type, tmp_path):
    log_file = tmp_path / "logs" / "powerbi.log"
    logging_init(logfile=as_type(log_file))
    assert log_file.is_file()

    logging.getLogger("powerbi.client").warning("token exchange failed")
    for handler in logging.getLogger("powerbi").handlers:
        handler.flush()
    assert "token exchange failed" in log_file.read_text()


@pytest.mark.unit()
def test_init_logging_console_only():
    logging_init()
    handlers = logging.getLogger("powerbi").handlers
    assert len(handlers) == 1
    assert not isinstance(handlers[0], logging.FileHandler)


@pytest.mark.unit()
def test_init_logging_levels():
    logging_init(level="DEBUG", client_level="INFO", library_level="ERROR")
    assert logging.getLogger("powerbi").level == logging.DEBUG
    assert logging.getLogger("framework").level == logging.INFO
    assert logging.getLogger("registry").level == logging.INFO
    assert logging.getLogger("httpx").level == logging.ERROR
    assert logging.getLogger("powerbi").propagate is False


@pytest.mark.unit()
def test_init_logging_unwritable_folder(tmp_path):
    folder = tmp_path / "readonly"
    folder.mkdir()
    folder.chmod(0o500)
    try:
        if os.access(folder, os.W_OK):
            pytest.skip("Running with privileges that ignore folder permissions")
        with pytest.raises(PermissionError):
            logging_init(logfile=folder / "powerbi.log")
    finally:
        folder.chmod(0o700)
