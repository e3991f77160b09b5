import pytest

from config import PlotterConfig
from core.session import IngestStats, PlotSession, RunState


class FakeSource:
    """Hands out one queued chunk per read; ``OSError`` instances are raised."""

    def __init__(self, chunks):
        self.chunks = list(chunks)
        self.reads = 0

    def read(self, size):
        self.reads += 1
        if not self.chunks:
            return b""
        item = self.chunks.pop(0)
        if isinstance(item, Exception):
            raise item
        return item[:size]


def make_session(**overrides):
    kwargs = dict(max_channels=2, capacity=8, samples_per_frame=10, display_period_us=2000)
    kwargs.update(overrides)
    return PlotSession(**kwargs)


def test_ingest_commits_records_in_order():
    session = make_session()
    source = FakeSource([b"1000:1.0;2.0\n", b"2000:1.5;2.5\n", b"3000:2.0;3.0\n"])
    stats = session.ingest(source)
    assert stats == IngestStats(reads=3, committed=3, rejected=0, errors=0)
    ring = session.ring
    assert ring.total_writes == 3
    assert session.now == 3000
    assert ring.read(ring.latest_index(), 1) == 3.0


def test_ingest_respects_samples_per_frame():
    session = make_session(samples_per_frame=2)
    source = FakeSource([b"1:1", b"2:2", b"3:3"])
    stats = session.ingest(source)
    assert stats.committed == 2
    assert source.chunks == [b"3:3"]
    session.ingest(source)
    assert session.now == 3


def test_empty_read_ends_batch():
    session = make_session()
    source = FakeSource([])
    stats = session.ingest(source)
    assert stats == IngestStats()
    assert source.reads == 1


def test_malformed_record_leaves_cursor_and_stops_batch():
    session = make_session()
    source = FakeSource([b"abc:1.0", b"1000:1.0"])
    cursor_before = session.ring.cursor
    stats = session.ingest(source)
    assert session.ring.cursor == cursor_before
    assert session.ring.total_writes == 0
    assert stats.rejected == 1
    assert source.chunks == [b"1000:1.0"]


def test_oversized_timestamp_is_rejected_not_raised():
    session = make_session(read_size=8192)
    stats = session.ingest(FakeSource([b"9" * 5000 + b":1.0"]))
    assert stats.rejected == 1
    assert stats.committed == 0
    assert session.ring.total_writes == 0


def test_zero_timestamp_is_discarded_by_default():
    session = make_session()
    source = FakeSource([b"0:1.0", b"5:1.0"])
    stats = session.ingest(source)
    assert stats.committed == 0
    assert stats.rejected == 1
    assert session.ring.total_writes == 0


def test_zero_timestamp_accepted_when_enabled():
    session = make_session(accept_zero_timestamp=True)
    stats = session.ingest(FakeSource([b"0:1.0", b"5:1.0"]))
    assert stats.committed == 2


def test_paused_session_drains_without_committing():
    session = make_session(samples_per_frame=3)
    session.pause()
    source = FakeSource([b"1:1", b"garbage", b"3:3", b"4:4"])
    stats = session.ingest(source)
    assert stats.reads == 3
    assert stats.committed == 0
    assert session.ring.total_writes == 0
    assert source.chunks == [b"4:4"]


def test_read_errors_are_transient():
    session = make_session()
    source = FakeSource([OSError("device hiccup"), b"10:1.0"])
    stats = session.ingest(source)
    assert stats.errors == 1
    assert stats.committed == 1


def test_toggle_pause():
    session = make_session()
    assert session.state is RunState.RUNNING
    assert session.toggle_pause() is RunState.PAUSED
    assert session.paused
    assert session.toggle_pause() is RunState.RUNNING


def test_set_pointer():
    session = make_session()
    session.set_pointer(12, 34.5)
    assert session.pointer == (12.0, 34.5)


def test_from_config():
    cfg = PlotterConfig(max_channels=3, max_sample_count=16, max_samples_per_frame=4)
    session = PlotSession.from_config(cfg)
    assert session.ring.channels == 3
    assert session.ring.capacity == 16
    assert session.samples_per_frame == 4
    assert session.display_period_us == cfg.display_period_us


@pytest.mark.parametrize(
    "overrides",
    [dict(samples_per_frame=0), dict(display_period_us=0), dict(read_size=0), dict(capacity=0)],
)
def test_invalid_session_parameters(overrides):
    with pytest.raises(ValueError):
        make_session(**overrides)
