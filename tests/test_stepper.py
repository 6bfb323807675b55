"""Tests for push-based decimation."""

import pytest

from decim.sampler import Decimator
from decim.stepper import Stepper, decimate_stream
from decim.types import DegenerateGeometry, InvalidInput, Point


def push_all(stepper, source):
    out = []
    for p in source:
        retained = stepper.push(p.x, p.y)
        if retained is not None:
            out.append(retained)
    last = stepper.close()
    if last is not None:
        out.append(last)
    return out


class TestStepper:
    """Test cases for the Stepper class."""

    def test_first_push_is_emitted(self):
        """Test that the first sample is retained immediately."""
        stepper = Stepper(0.1)

        assert stepper.push(0.0, 0.0) == Point(0.0, 0.0)
        assert stepper.push(1.0, 1.0) is None
        assert stepper.push(2.0, 2.0) is None
        assert stepper.close() == Point(2.0, 2.0)

    def test_close_without_samples(self):
        """Test closing an empty stream."""
        assert Stepper(0.1).close() is None

    def test_close_after_single_sample(self):
        """Test that a lone sample is not emitted twice."""
        stepper = Stepper(0.1)
        stepper.push(0.0, 0.0)

        assert stepper.close() is None

    def test_reuse_after_close(self):
        """Test that close readies the stepper for a new stream."""
        stepper = Stepper(0.1)
        stepper.push(0.0, 0.0)
        stepper.push(1.0, 1.0)
        stepper.close()

        assert stepper.state is None
        assert stepper.push(5.0, 5.0) == Point(5.0, 5.0)

    def test_state_tracks_segment(self):
        """Test that the exposed state follows the pushed samples."""
        stepper = Stepper(0.1)
        stepper.push(0.0, 0.0)
        stepper.push(1.0, 1.0)

        assert stepper.state.pivot == Point(0.0, 0.0)
        assert stepper.state.trailing == Point(1.0, 1.0)
        assert stepper.state.is_open

    def test_bad_tolerance(self):
        """Test that the tolerance is validated."""
        with pytest.raises(InvalidInput):
            Stepper(-1.0)

    def test_duplicate_x(self):
        """Test that a duplicate x is reported."""
        stepper = Stepper(0.1)
        stepper.push(0.0, 0.0)

        with pytest.raises(DegenerateGeometry):
            stepper.push(0.0, 1.0)

    def test_error_is_terminal(self):
        """Test that a failed stream keeps failing until closed."""
        stepper = Stepper(0.1)
        stepper.push(0.0, 0.0)
        stepper.push(1.0, 1.0)
        with pytest.raises(DegenerateGeometry) as first:
            stepper.push(1.0, float("nan"))

        with pytest.raises(DegenerateGeometry) as second:
            stepper.push(2.0, 2.0)
        with pytest.raises(DegenerateGeometry):
            stepper.close()

        assert second.value is first.value
        # close() clears the failed stream
        assert stepper.state is None
        assert stepper.push(5.0, 5.0) == Point(5.0, 5.0)

    def test_stream_stops_at_error(self):
        """Test that decimate_stream raises instead of skipping a sample."""
        pairs = [(0.0, 0.0), (1.0, 1.0), (1.0, float("nan")), (2.0, 2.0)]
        stream = decimate_stream(pairs, 0.1)

        assert next(stream) == Point(0.0, 0.0)
        with pytest.raises(DegenerateGeometry):
            next(stream)

    @pytest.mark.parametrize("interpolate", [False, True])
    def test_matches_decimator(self, sine_source, interpolate):
        """Test that push and pull decimation agree."""
        expected = list(Decimator(sine_source, 0.01, interpolate=interpolate))

        actual = push_all(Stepper(0.01, interpolate=interpolate), sine_source)

        assert actual == expected

    def test_matches_decimator_worst_case(self, zigzag_source):
        """Test agreement when every point is retained."""
        expected = list(Decimator(zigzag_source, 0.1))

        assert push_all(Stepper(0.1), zigzag_source) == expected


class TestDecimateStream:
    """Test cases for decimate_stream."""

    def test_lazy_generator(self, corner_source):
        """Test decimating a generator of pairs."""
        pairs = ((p.x, p.y) for p in corner_source)

        retained = list(decimate_stream(pairs, 0.1))

        assert retained == list(Decimator(corner_source, 0.1))

    def test_empty_stream(self):
        """Test that an empty stream yields nothing."""
        assert list(decimate_stream([], 0.1)) == []

    def test_short_streams(self):
        """Test streams below the Decimator's minimum length."""
        assert list(decimate_stream([(0, 0)], 0.1)) == [Point(0.0, 0.0)]
        assert list(decimate_stream([(0, 0), (1, 3)], 0.1)) == [
            Point(0.0, 0.0),
            Point(1.0, 3.0),
        ]
