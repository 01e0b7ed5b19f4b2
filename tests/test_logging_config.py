import logging

import logging_config
from logging_config import configure_logging, export_recent_output, get_logger, get_recent_output, set_run_id


def test_records_land_in_ring_buffer_with_run_id():
    logger = get_logger("dronepath.tests")
    set_run_id("test-run")
    try:
        logger.warning("buffer probe 42")
    finally:
        set_run_id("-")

    lines = get_recent_output(50)
    assert any("buffer probe 42" in line and "test-run" in line for line in lines)
    assert "buffer probe 42" in export_recent_output(50)


def test_recent_output_limit():
    assert get_recent_output(0) == []
    logger = get_logger("dronepath.tests")
    for i in range(5):
        logger.warning("line %d", i)
    assert len(get_recent_output(3)) == 3


def test_get_logger_is_idempotent():
    get_logger("a")
    get_logger("b")
    root = logging.getLogger()
    buffers = [h for h in root.handlers if isinstance(h, logging_config._BufferingHandler)]
    assert len(buffers) == 1


def test_configure_logging_adds_file_handler(tmp_path):
    path = configure_logging(outputs_dir=str(tmp_path))
    try:
        get_logger("dronepath.tests").warning("file probe")
        for h in logging.getLogger().handlers:
            h.flush()
        assert "file probe" in (tmp_path / "dronepath.log").read_text(encoding="utf-8")
        # second call reuses the handler
        configure_logging(outputs_dir=str(tmp_path))
        same = [
            h for h in logging.getLogger().handlers
            if isinstance(h, logging.FileHandler) and h.baseFilename == path
        ]
        assert len(same) == 1
    finally:
        root = logging.getLogger()
        for h in list(root.handlers):
            if isinstance(h, logging.FileHandler) and h.baseFilename == path:
                root.removeHandler(h)
                h.close()


def test_public_names_are_all_defined():
    for name in logging_config.__all__:
        assert callable(getattr(logging_config, name))
    assert "iter_output" not in logging_config.__all__
