import time
from typing import Callable, Tuple, TypeVar

T = TypeVar("T")


def do_and_get_timing(fn: Callable[[], T]) -> Tuple[T, float]:
    """Call fn and return its result with the elapsed wall time in milliseconds."""
    start = time.perf_counter()
    return_value = fn()
    end = time.perf_counter()

    return return_value, (end - start) * 1000


def format_elapsed_time(elapsed_ms: float) -> str:
    """Format milliseconds as ``MM min. SS sec. mmm ms.``, truncating sub-millisecond parts."""
    if elapsed_ms < 0:
        raise ValueError("Elapsed time cannot be negative")

    minutes, remainder = divmod(int(elapsed_ms), 60_000)
    seconds, millis = divmod(remainder, 1000)
    return f"{minutes:02d} min. {seconds:02d} sec. {millis:03d} ms."
