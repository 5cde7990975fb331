import time
from unittest.mock import MagicMock, patch

from precision_utility.utils import format_time, log_performance


def test_format_time_basic():
    assert format_time(0) == (0, 0, 0)
    assert format_time(59) == (0, 0, 59)
    assert format_time(60) == (0, 1, 0)
    assert format_time(3661) == (1, 1, 1)


def test_log_performance():
    """
    Verify that log_performance calls logger.info with time + memory.
    """

    logger = MagicMock()

    # Fake memory info
    class FakeProcess:
        def memory_info(self):
            class X:
                rss = 123 * 1024 * 1024  # 123MB
            return X()

    with patch("psutil.Process", return_value=FakeProcess()):
        start_time = time.time() - 1.5  # pretend 1.5 sec elapsed
        log_performance("TestStep", start_time, log=logger)

    assert logger.info.call_count == 1
    logged_msg = logger.info.call_args[0][0]

    assert "TestStep" in logged_msg
    assert "Time taken" in logged_msg
    assert "123.00 MB" in logged_msg
