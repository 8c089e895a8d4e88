import numpy as np

from audioscope.errors import InvalidParameterError
from audioscope.tests.test_case import TestCase
import audioscope.util.waveform as waveform


class WaveformTests(TestCase):


    def test_reduce(self):

        cases = [
            (10, 3, [0, 3, 6]),
            (10, 4, [0, 2, 4, 6]),
            (10, 10, list(range(10))),
            (5, 10, [0, 1, 2, 3, 4]),
            (0, 10, [])
        ]

        for length, width, expected in cases:
            actual = waveform.reduce(np.arange(length), width)
            expected = np.array(expected, dtype='float64')
            self.assert_arrays_equal(actual, expected)


    def test_reduce_length(self):
        samples = np.sin(np.arange(44100) / 10)
        for width in [1, 100, 800, 1023, 44100, 50000]:
            reduced = waveform.reduce(samples, width)
            self.assertLessEqual(len(reduced), width)


    def test_reduce_returns_copy(self):
        samples = np.zeros(10)
        reduced = waveform.reduce(samples, 20)
        reduced[0] = 1
        self.assertEqual(samples[0], 0)


    def test_get_envelope(self):

        cases = [
            ([1, -1, 2, -2, 3, -3], 3, [-1, -2, -3], [1, 2, 3]),
            ([1, -1, 2, -2, 3, -3], 10, [1, -1, 2, -2, 3, -3],
             [1, -1, 2, -2, 3, -3]),
            ([1, 5, 3, 2, 4], 2, [1, 2], [5, 4]),
            ([], 4, [], [])
        ]

        for samples, width, expected_mins, expected_maxs in cases:
            mins, maxs = waveform.get_envelope(np.array(samples), width)
            self.assert_arrays_equal(
                mins, np.array(expected_mins, dtype='float64'))
            self.assert_arrays_equal(
                maxs, np.array(expected_maxs, dtype='float64'))


    def test_errors(self):
        for function in [waveform.reduce, waveform.get_envelope]:
            for width in [0, -5]:
                self.assert_raises(
                    InvalidParameterError, function, np.zeros(10), width)
