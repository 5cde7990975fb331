import logging
import os
import time

import psutil

logger = logging.getLogger("precision_utility")


def log_performance(step_name: str, start_time: float, log=None):
    """Logs elapsed time and memory usage for a step."""
    log = log or logger
    process = psutil.Process(os.getpid())
    mem_mb = process.memory_info().rss / (1024 * 1024)

    elapsed = time.time() - start_time
    log.info(f"[{step_name}] Time taken: {elapsed:.2f} sec | Memory: {mem_mb:.2f} MB")


def format_time(seconds):
    """
    Convert elapsed time in seconds into hours, minutes, and seconds.

    Args:
        seconds (float): Elapsed time.

    Returns:
        tuple: (hours, minutes, seconds)
    """
    hours = int(seconds // 3600)
    minutes = int((seconds % 3600) // 60)
    secs = int(seconds % 60)
    return hours, minutes, secs
