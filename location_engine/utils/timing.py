"""Timing utilities for performance monitoring."""
import time
from functools import wraps
from typing import Callable
from location_engine.utils.logging import log_structured


class Timer:
    """Context manager for timing code blocks."""
    
    def __init__(self, operation: str):
        """
        Initialize timer.
        
        Args:
            operation: Name of the operation being timed
        """
        self.operation = operation
        self.start = None
        self.elapsed = None
    
    def __enter__(self):
        self.start = time.perf_counter()
        return self
    
    def __exit__(self, *args):
        self.elapsed = time.perf_counter() - self.start
        log_structured(
            "info",
            f"Operation {self.operation} completed",
            operation=self.operation,
            elapsed_seconds=self.elapsed
        )


def time_function(func: Callable) -> Callable:
    """Decorator running each call inside a Timer named after the function."""
    operation = func.__name__
    
    @wraps(func)
    def wrapper(*args, **kwargs):
        with Timer(operation):
            return func(*args, **kwargs)
    return wrapper
