"""Frame timing, frame-rate limiting and a rolling FPS statistics reporter."""

from __future__ import annotations

import math
import threading
import time
from collections import deque
from dataclasses import dataclass
from datetime import timedelta
from typing import Callable, Iterable, Optional, Union

Seconds = Union[float, int, timedelta]

# Window size used when the frame rate is unlimited: about 5 s at 120 fps.
_UNLIMITED_SAMPLES = int(5.0 * 120.0)
_FIRST_FRAME_UNLIMITED_DT = 0.001


def _seconds(value: Seconds) -> float:
    if isinstance(value, timedelta):
        return value.total_seconds()
    return float(value)


@dataclass(frozen=True)
class FpsStats:
    """Average FPS and percentile samples over the sliding window."""

    count: int
    average: float
    low1: float
    low5: float
    low25: float
    max25: float
    max5: float
    max1: float


def compute_stats(samples: Iterable[float], total: float) -> Optional[FpsStats]:
    """Statistics of the FPS samples whose sum is total; None when empty."""
    ordered = sorted(samples)
    if not ordered:
        return None
    n = len(ordered)

    def at(q: float) -> float:
        return ordered[min(math.floor(n * q), n - 1)]

    return FpsStats(
        count=n,
        average=total / n,
        low1=at(0.01),
        low5=at(0.05),
        low25=at(0.25),
        max25=at(0.75),
        max5=at(0.95),
        max1=at(0.99),
    )


def format_stats(stats: FpsStats) -> str:
    """One-line human readable rendering of the statistics."""
    return (
        f"[DEBUG] Average FPS: {stats.average:.1f}"
        f" | 1% Low: {stats.low1:.1f}"
        f" | 5% Low: {stats.low5:.1f}"
        f" | 25% Low: {stats.low25:.1f}"
        f" | 25% Max: {stats.max25:.1f}"
        f" | 5% Max: {stats.max5:.1f}"
        f" | 1% Max: {stats.max1:.1f}"
    )


@dataclass
class FrameManagerDesc:
    """Target frame rate (0 or less means unlimited) and the FPS window in seconds."""

    target_fps: float = 60.0
    time_to_death_fps: float = 60.0
    report_interval: float = 1.0

    def __post_init__(self) -> None:
        self.target_fps = float(self.target_fps)
        self.time_to_death_fps = _seconds(self.time_to_death_fps)
        self.report_interval = _seconds(self.report_interval)
        if self.report_interval <= 0.0:
            raise ValueError("report_interval must be positive")


class FrameManager:
    """Records frame times and periodically reports FPS statistics."""

    def __init__(
        self,
        desc: Optional[FrameManagerDesc] = None,
        *,
        clock: Callable[[], float] = time.monotonic,
        report: Optional[Callable[[str], None]] = None,
    ) -> None:
        self.desc = desc if desc is not None else FrameManagerDesc()
        self.last_frame_instant: Optional[float] = None
        self._clock = clock
        self._report = report if report is not None else print
        self._lock = threading.Lock()
        self._samples: deque[float] = deque()
        self._total = 0.0
        self._stop = threading.Event()
        self._thread: Optional[threading.Thread] = None

    def max_samples(self) -> int:
        """Number of FPS samples kept in the sliding window."""
        if self.desc.target_fps <= 0.0:
            samples = _UNLIMITED_SAMPLES
        else:
            samples = int(self.desc.time_to_death_fps * self.desc.target_fps)
        return max(samples, 1)

    def add_frame(self, delta_time: Seconds) -> None:
        """Record a frame that took delta_time; non-positive or non-finite times are ignored."""
        dt = _seconds(delta_time)
        if not math.isfinite(dt) or dt <= 0.0:
            return
        fps = 1.0 / dt
        limit = self.max_samples()
        with self._lock:
            self._total += fps
            self._samples.append(fps)
            while len(self._samples) > limit:
                self._total -= self._samples.popleft()

    def register_frame(self) -> None:
        """Record the time since the previous frame; call after presenting a frame."""
        now = self._clock()
        if self.last_frame_instant is not None:
            dt = max(0.0, now - self.last_frame_instant)
        elif self.desc.target_fps <= 0.0:
            dt = _FIRST_FRAME_UNLIMITED_DT
        else:
            dt = 1.0 / self.desc.target_fps
        self.last_frame_instant = now
        self.add_frame(dt)

    def next_frame_interval(self) -> Optional[float]:
        """Seconds to wait until the next frame, or None when unlimited."""
        if self.desc.target_fps <= 0.0:
            return None
        return 1.0 / self.desc.target_fps

    def stats(self) -> Optional[FpsStats]:
        """Current statistics of the window, or None if no frame was recorded."""
        with self._lock:
            samples = list(self._samples)
            total = self._total
        return compute_stats(samples, total)

    def run(self) -> None:
        """Start the background reporter; does nothing if it is already running."""
        if self._thread is not None and self._thread.is_alive():
            return
        self._report(
            f"Initializing frames with FPS window of {self.desc.time_to_death_fps}s"
        )
        self._stop.clear()
        self._thread = threading.Thread(
            target=self._report_loop, name="fps-reporter", daemon=True
        )
        self._thread.start()

    def stop(self) -> None:
        """Stop the background reporter and wait for it to finish."""
        self._stop.set()
        thread, self._thread = self._thread, None
        if thread is not None:
            thread.join()

    def _report_loop(self) -> None:
        while not self._stop.wait(self.desc.report_interval):
            stats = self.stats()
            if stats is not None:
                self._report(format_stats(stats))

    def __enter__(self) -> FrameManager:
        self.run()
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.stop()