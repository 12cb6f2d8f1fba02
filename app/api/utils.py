"""
Utility functions untuk API
"""
import inspect
import logging
import time
from functools import wraps

from app.scraper.models import utc_timestamp

logger = logging.getLogger(__name__)

__all__ = ['format_response_time', 'measure_execution_time', 'utc_timestamp']


def format_response_time(start_time: float) -> float:
    """Format response time dengan precision 3 decimal places"""
    return round(time.time() - start_time, 3)


def measure_execution_time(func):
    """Decorator untuk mengukur execution time"""
    @wraps(func)
    async def async_wrapper(*args, **kwargs):
        start_time = time.time()
        try:
            result = await func(*args, **kwargs)
            logger.info(f"{func.__name__} executed in {format_response_time(start_time)}s")
            return result
        except Exception as e:
            logger.error(f"{func.__name__} failed in {format_response_time(start_time)}s: {str(e)}")
            raise

    @wraps(func)
    def sync_wrapper(*args, **kwargs):
        start_time = time.time()
        try:
            result = func(*args, **kwargs)
            logger.info(f"{func.__name__} executed in {format_response_time(start_time)}s")
            return result
        except Exception as e:
            logger.error(f"{func.__name__} failed in {format_response_time(start_time)}s: {str(e)}")
            raise

    return async_wrapper if inspect.iscoroutinefunction(func) else sync_wrapper
