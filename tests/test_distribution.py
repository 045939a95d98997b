"""Tests for the placement of serial children."""

import pytest

from timeweave import Distribution, OffsetTimeline, ParallelTimeline, ScheduleOptions, SerialTimeline


@pytest.fixture
def window(noop):
    """A day-long serial holding a 10h serial, a 2h parallel and three moments."""
    child_serial = SerialTimeline(36000)
    child_parallel = ParallelTimeline().append(SerialTimeline(7200))
    serial = SerialTimeline(86400)
    serial.extend(child_serial, child_parallel, noop, noop, noop)
    return serial


def test_one_offset_per_child(window):
    distribution = Distribution(window, 0)
    entries = list(distribution)
    assert len(entries) == 5
    assert all(isinstance(entry, OffsetTimeline) for entry in entries)
    assert [entry.timeline for entry in entries] == list(window.children)


def test_defaults(window):
    distribution = Distribution(window, 0)
    assert distribution.cram == 1
    assert distribution.stretch == 1


def test_offsets_follow_formula(window, fake_random):
    options = ScheduleOptions()
    # draws are sorted before use
    fake_random(options, 0.5, 0.0, 0.25, 1.0 - 1e-9, 0.75)
    unused = window.unused_duration
    start = 1000

    offsets = [entry.offset for entry in Distribution(window, start, options)]

    assert offsets[0] == start
    assert offsets[1] == pytest.approx(start + 36000 + 0.25 * unused)
    assert offsets[2] == pytest.approx(start + 36000 + 7200 + 0.5 * unused)
    assert offsets[3] == pytest.approx(start + 36000 + 7200 + 0.75 * unused)
    assert offsets[4] == pytest.approx(start + window.duration, abs=1e-3)


@pytest.mark.parametrize("seed", range(10))
def test_children_never_overlap(window, seed):
    entries = list(Distribution(window, 500, ScheduleOptions(seed=seed)))
    for previous, current in zip(entries, entries[1:]):
        assert previous.offset + previous.duration <= current.offset
    assert entries[0].offset >= 500
    assert entries[-1].offset + entries[-1].duration <= 500 + window.duration


def test_packs_children_when_no_duration_is_unused(noop):
    serial = SerialTimeline(30).extend(SerialTimeline(10), noop, SerialTimeline(20))
    offsets = [entry.offset for entry in Distribution(serial, 100, ScheduleOptions(seed=3))]
    assert offsets == [100, 110, 110]


def test_cram_replicates_moments_only(window):
    distribution = Distribution(window, 0, ScheduleOptions(cram=3, seed=1))
    entries = list(distribution)

    assert distribution.count == len(entries) == 2 + 3 * 3
    serial_child, parallel_child = window.children[:2]
    assert [entry.timeline for entry in entries].count(serial_child) == 1
    assert [entry.timeline for entry in entries].count(parallel_child) == 1


def test_stretch_scales_every_offset(window):
    plain = [e.offset for e in Distribution(window, 0, ScheduleOptions(seed=9))]
    stretched = [e.offset for e in Distribution(window, 0, ScheduleOptions(seed=9, stretch=2.5))]
    assert stretched == pytest.approx([2.5 * offset for offset in plain])


def test_stretched_span_can_exceed_duration(window, fake_random):
    options = ScheduleOptions(stretch=2)
    fake_random(options, 0, 0, 0, 0, 1.0 - 1e-12)
    entries = list(Distribution(window, 0, options))
    assert entries[-1].offset == pytest.approx(2 * window.duration)


def test_empty_serial_has_no_offsets():
    assert list(Distribution(SerialTimeline(10), 0)) == []
