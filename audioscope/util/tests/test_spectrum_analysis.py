import numpy as np

from audioscope.errors import InputTooShortError, InvalidParameterError
from audioscope.tests.test_case import TestCase
import audioscope.util.spectrum_analysis as spectrum_analysis


def _create_tone(freq, sample_rate, length):
    times = np.arange(length) / sample_rate
    return np.sin(2 * np.pi * freq * times)


class SpectrumAnalysisTests(TestCase):


    def test_tone_peak(self):

        samples = _create_tone(440, 44100, 44100)

        spectrum = spectrum_analysis.analyze(samples, 44100, 4096)

        self.assertEqual(spectrum.dft_size, 4096)
        self.assertEqual(len(spectrum), 2048)
        self.assertEqual(len(spectrum.freqs), 2048)
        self.assertEqual(spectrum.peak_bin_num, round(440 * 4096 / 44100))
        self.assertEqual(spectrum.peak_bin_num, 41)
        self.assertAlmostEqual(spectrum.freq_spacing, 44100 / 4096)
        self.assertAlmostEqual(spectrum.peak_freq, 41 * 44100 / 4096)
        self.assertFalse(spectrum.is_silent)


    def test_bin_placement(self):

        sample_rate = 8000
        dft_size = 1024

        for bin_num in [5, 64, 300]:
            freq = bin_num * sample_rate / dft_size
            samples = _create_tone(freq, sample_rate, dft_size)
            spectrum = spectrum_analysis.analyze(samples, sample_rate)
            self.assertEqual(spectrum.dft_size, dft_size)
            self.assertEqual(spectrum.peak_bin_num, bin_num)


    def test_dft_size(self):

        cases = [
            (1, spectrum_analysis.DEFAULT_MAX_DFT_SIZE, 1),
            (2, spectrum_analysis.DEFAULT_MAX_DFT_SIZE, 2),
            (3, spectrum_analysis.DEFAULT_MAX_DFT_SIZE, 2),
            (44100, spectrum_analysis.DEFAULT_MAX_DFT_SIZE, 32768),
            (5000, 1024, 1024),
            (2 ** 19, spectrum_analysis.DEFAULT_MAX_DFT_SIZE, 2 ** 18)
        ]

        for length, max_dft_size, expected in cases:
            samples = np.ones(length)
            spectrum = spectrum_analysis.analyze(samples, 1000, max_dft_size)
            self.assertEqual(spectrum.dft_size, expected)


    def test_freqs(self):

        spectrum = spectrum_analysis.analyze(np.ones(1000), 8000)

        freqs = spectrum.freqs
        self.assertEqual(spectrum.dft_size, 512)
        self.assertEqual(freqs[0], 0)
        self.assertTrue(np.all(np.diff(freqs) > 0))
        self.assert_arrays_close(freqs, np.arange(256) * 8000 / 512)


    def test_constant_signal_peaks_at_dc(self):
        spectrum = spectrum_analysis.analyze(np.full(256, .25), 1000)
        self.assertEqual(spectrum.peak_bin_num, 0)


    def test_single_sample(self):

        spectrum = spectrum_analysis.analyze([.5], 8000)

        self.assertEqual(spectrum.dft_size, 1)
        self.assert_arrays_close(spectrum.magnitudes, [.5])
        self.assert_arrays_equal(spectrum.freqs, np.zeros(1))


    def test_analyze_does_not_modify_input(self):
        samples = _create_tone(1000, 8000, 3000)
        original = samples.copy()
        spectrum_analysis.analyze(samples, 8000)
        self.assert_arrays_equal(samples, original)


    def test_silence(self):

        spectrum = spectrum_analysis.analyze(np.zeros(1024), 8000)

        self.assertTrue(spectrum.is_silent)
        self.assert_arrays_equal(spectrum.magnitudes, np.zeros(512))

        decibels = spectrum.decibels
        self.assert_all_finite(decibels)
        self.assert_arrays_close(decibels, np.full(512, -240.))

        normalized = spectrum.normalized_decibels
        self.assert_all_finite(normalized)
        self.assert_arrays_equal(normalized, np.zeros(512))


    def test_to_decibels(self):
        actual = spectrum_analysis.to_decibels([1, 10, 100, 0])
        self.assert_arrays_close(actual, [0, 20, 40, -240])


    def test_normalize_decibels(self):

        cases = [

            # maximum at least zero
            ([-120, 0, -60], [0, 1, .5]),
            ([-120, 60, -180], [0, 1, 0]),

            # maximum less than zero, so zero is used
            ([-60, -90], [.5, .25]),

            # empty
            ([], [])

        ]

        for decibels, expected in cases:
            actual = spectrum_analysis.normalize_decibels(decibels)
            self.assert_arrays_close(actual, np.array(expected))


    def test_normalize_decibels_floor(self):
        actual = spectrum_analysis.normalize_decibels([-60, 0], floor=-60)
        self.assert_arrays_close(actual, [0, 1])


    def test_normalize_decibels_floor_errors(self):

        cases = [

            # floor equal to maximum
            ([-60, 20], 20),

            # floor above maximum
            ([-60, 20], 30),

            # floor above maximum of all-quiet values, which is epsilon
            ([-60, -90], 1)

        ]

        for decibels, floor in cases:
            self.assert_raises(
                InvalidParameterError, spectrum_analysis.normalize_decibels,
                decibels, floor)


    def test_rectangular_window(self):

        # With a rectangular window the DC magnitude of a constant
        # signal is exactly the sum of its samples.
        spectrum = spectrum_analysis.analyze(
            np.full(1000, .5), 8000, window_name='Rectangular')

        self.assertEqual(spectrum.dft_size, 512)
        self.assertEqual(spectrum.magnitudes[0], 256)
        self.assertLess(np.max(spectrum.magnitudes[1:]), 1e-9)


    def test_analyze_errors(self):

        cases = [
            (InputTooShortError, ([], 8000)),
            (InvalidParameterError, ([1, 2], 0)),
            (InvalidParameterError, ([1, 2], -8000)),
            (InvalidParameterError, ([1, 2], 8000, 1000)),
            (InvalidParameterError, ([1, 2], 8000, 1024, 'Bobo')),
            (InvalidParameterError, (np.zeros((2, 8)), 8000))
        ]

        for exception_class, args in cases:
            self.assert_raises(
                exception_class, spectrum_analysis.analyze, *args)


    def test_input_too_short_is_value_error(self):
        self.assert_raises(ValueError, spectrum_analysis.analyze, [], 8000)
