"""Colored console logging and timing utilities for vrm-dryrun."""

import sys
import time
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass


# ANSI color codes
class Colors:
    """ANSI escape codes for terminal colors."""

    RESET = "\033[0m"
    BOLD = "\033[1m"
    DIM = "\033[2m"

    CYAN = "\033[36m"
    YELLOW = "\033[33m"

    BRIGHT_GREEN = "\033[92m"
    BRIGHT_YELLOW = "\033[93m"
    BRIGHT_CYAN = "\033[96m"


def _supports_color() -> bool:
    """Check if terminal supports color output."""
    if not hasattr(sys.stdout, "isatty"):
        return False
    return sys.stdout.isatty()


_USE_COLOR = _supports_color()
_QUIET = False


def set_quiet(quiet: bool) -> None:
    """Suppress info/ok/detail output; warnings and errors still print."""
    global _QUIET
    _QUIET = quiet


def _c(color: str, text: str) -> str:
    """Apply color to text if supported."""
    if not _USE_COLOR:
        return text
    return f"{color}{text}{Colors.RESET}"


def _emit(line: str, always: bool = False) -> None:
    if _QUIET and not always:
        return
    print(line)


def bold(text: str) -> str:
    return _c(Colors.BOLD, text)


def dim(text: str) -> str:
    return _c(Colors.DIM, text)


def cyan(text: str) -> str:
    return _c(Colors.CYAN, text)


def yellow(text: str) -> str:
    return _c(Colors.YELLOW, text)


def bright_green(text: str) -> str:
    return _c(Colors.BRIGHT_GREEN, text)


def bright_yellow(text: str) -> str:
    return _c(Colors.BRIGHT_YELLOW, text)


def bright_cyan(text: str) -> str:
    return _c(Colors.BRIGHT_CYAN, text)


# Log level formatting
def log_info(msg: str) -> None:
    """Print info message."""
    _emit(f"  {cyan('INFO')}  {msg}")


def log_ok(msg: str) -> None:
    """Print success message."""
    _emit(f"    {bright_green('OK')}  {msg}")


def log_step(current: int, total: int, msg: str) -> None:
    """Print step progress message."""
    step_str = f"[{current}/{total}]"
    _emit(f"\n{cyan(step_str)} {msg}")


def log_detail(msg: str, indent: int = 6) -> None:
    """Print indented detail message."""
    _emit(f"{' ' * indent}{msg}")


def log_timing(msg: str, seconds: float) -> None:
    _emit(f"  {dim('TIME')}  {msg}: {bright_cyan(format_duration(seconds))}")


def print_header(title: str, char: str = "=", width: int = 60) -> None:
    """Print a header with decorative borders."""
    border = char * width
    _emit(f"\n{cyan(border)}")
    _emit(f"  {bold(title)}")
    _emit(f"{cyan(border)}")


def print_section(title: str, char: str = "-", width: int = 60) -> None:
    border = char * width
    _emit(f"\n{dim(border)}")
    _emit(f"  {title}")
    _emit(f"{dim(border)}")


def print_warning_box(title: str, warnings: list[str]) -> None:
    """Print report warnings inside a yellow box (shown even when quiet)."""
    border = bright_yellow("~" * 60)
    _emit(f"\n{border}", always=True)
    _emit(f"  {bright_yellow(title)}", always=True)
    _emit(border, always=True)
    for w in warnings:
        _emit(f"  {yellow('!')} {w}", always=True)
    _emit(border, always=True)


def format_duration(seconds: float) -> str:
    """Format seconds into human-readable duration."""
    if seconds < 0.001:
        return f"{seconds * 1000000:.0f}μs"
    elif seconds < 1:
        return f"{seconds * 1000:.1f}ms"
    elif seconds < 60:
        return f"{seconds:.2f}s"
    mins = int(seconds // 60)
    return f"{mins}m {seconds % 60:.1f}s"


def format_count(count: int, singular: str, plural: str | None = None) -> str:
    """Format count with proper singular/plural form."""
    if plural is None:
        plural = singular + "s"
    word = singular if count == 1 else plural
    return f"{count:,} {word}"


@dataclass
class TimingResult:
    """Result from a timed operation."""

    elapsed: float
    message: str


@contextmanager
def timed(description: str, print_on_exit: bool = True) -> Iterator[TimingResult]:
    """Context manager for timing operations.

    Usage:
        with timed("Loading input") as t:
            load()
        # Prints timing on exit unless print_on_exit=False
    """
    result = TimingResult(elapsed=0.0, message=description)
    start = time.perf_counter()
    try:
        yield result
    finally:
        result.elapsed = time.perf_counter() - start
        if print_on_exit:
            log_timing(description, result.elapsed)


class StepTimer:
    """Number the steps of a dry-run and print each as it starts."""

    def __init__(self, total_steps: int) -> None:
        self.total = total_steps
        self.current = 0
        self._start = time.perf_counter()

    def step(self, message: str) -> None:
        self.current += 1
        log_step(self.current, self.total, message)

    def total_elapsed(self) -> float:
        return time.perf_counter() - self._start
