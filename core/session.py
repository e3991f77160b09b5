"""Loop state and the per-frame drain-and-parse phase."""
from __future__ import annotations

import enum
import logging
from dataclasses import dataclass
from typing import Protocol

from core.line_parser import parse_record
from core.ring_buffer import SampleRing

__all__ = ["ByteSource", "IngestStats", "PlotSession", "RunState"]

LOG = logging.getLogger(__name__)


class ByteSource(Protocol):
    def read(self, size: int) -> bytes:
        ...


class RunState(enum.Enum):
    RUNNING = "running"
    PAUSED = "paused"


@dataclass
class IngestStats:
    reads: int = 0
    committed: int = 0
    rejected: int = 0
    errors: int = 0


class PlotSession:
    """Everything the single loop mutates: the ring, run state and pointer.

    ``ingest`` is the first half of a tick; the render half reads the same
    object through :func:`core.frame.build_frame`.
    """

    def __init__(
        self,
        *,
        max_channels: int,
        capacity: int,
        samples_per_frame: int,
        display_period_us: int,
        read_size: int = 1023,
        accept_zero_timestamp: bool = False,
    ):
        if samples_per_frame < 1:
            raise ValueError("samples_per_frame must be at least 1")
        if display_period_us <= 0:
            raise ValueError("display_period_us must be positive")
        if read_size < 1:
            raise ValueError("read_size must be at least 1")
        self.ring = SampleRing(capacity, max_channels)
        self.max_channels = int(max_channels)
        self.samples_per_frame = int(samples_per_frame)
        self.display_period_us = int(display_period_us)
        self.read_size = int(read_size)
        self.accept_zero_timestamp = bool(accept_zero_timestamp)
        self.state = RunState.RUNNING
        self.pointer: tuple[float, float] = (0.0, 0.0)

    @classmethod
    def from_config(cls, cfg) -> "PlotSession":
        return cls(
            max_channels=cfg.max_channels,
            capacity=cfg.max_sample_count,
            samples_per_frame=cfg.max_samples_per_frame,
            display_period_us=cfg.display_period_us,
            read_size=cfg.read_size,
            accept_zero_timestamp=cfg.accept_zero_timestamp,
        )

    # ----- run state -----

    @property
    def paused(self) -> bool:
        return self.state is RunState.PAUSED

    def pause(self) -> None:
        self.state = RunState.PAUSED

    def resume(self) -> None:
        self.state = RunState.RUNNING

    def toggle_pause(self) -> RunState:
        if self.paused:
            self.resume()
        else:
            self.pause()
        LOG.info("Ingestion %s", self.state.value)
        return self.state

    def set_pointer(self, x: float, y: float) -> None:
        self.pointer = (float(x), float(y))

    @property
    def now(self) -> int:
        return self.ring.latest_timestamp()

    # ----- ingestion -----

    def _commit(self, chunk: bytes, stats: IngestStats) -> bool:
        record = parse_record(chunk, self.max_channels)
        if record is None or (record.timestamp == 0 and not self.accept_zero_timestamp):
            stats.rejected += 1
            LOG.debug("Rejected record %r", chunk[:64])
            return False
        self.ring.append(record.timestamp, record.values)
        stats.committed += 1
        return True

    def ingest(self, source: ByteSource) -> IngestStats:
        """Read up to ``samples_per_frame`` chunks, one candidate record each.

        Stops early on an empty read or on the first rejected record. Read
        errors yield nothing for that sub-iteration. While paused the chunks
        are still drained but dropped.
        """
        stats = IngestStats()
        for _ in range(self.samples_per_frame):
            try:
                chunk = source.read(self.read_size)
            except OSError as exc:
                stats.errors += 1
                LOG.debug("Transient read failure: %s", exc)
                continue
            if not chunk:
                break
            stats.reads += 1
            if self.paused:
                continue
            if not self._commit(chunk, stats):
                break
        return stats
