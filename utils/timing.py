"""Wall-clock timing for encode runs."""

import time


class Timer:
    """Simple timer for encode runtime."""
    
    def __init__(self):
        self.encode_time_ms = 0.0
    
    def measure_encode(self, func, *args, **kwargs):
        start = time.perf_counter()
        result = func(*args, **kwargs)
        self.encode_time_ms = (time.perf_counter() - start) * 1000.0
        return result
