"""Single-record magnitude spectrum analysis."""


import numpy as np

from audioscope.errors import InputTooShortError, InvalidParameterError
import audioscope.util.data_windows as data_windows
import audioscope.util.fft as fft
import audioscope.util.signal_utils as signal_utils
import audioscope.util.time_frequency_analysis_utils as tfa_utils


DEFAULT_MAX_DFT_SIZE = 2 ** 18
"""
Default maximum DFT size of a spectrum analysis.

The maximum bounds the cost of analyzing very long recordings.
"""

EPSILON = 1e-12
"""Small magnitude added before taking logarithms."""

DISPLAY_FLOOR_DB = -120
"""Decibel value that normalizes to zero for display."""


class MagnitudeSpectrum(object):
    
    """
    Magnitude spectrum of a windowed record of a real signal.
    
    The spectrum has `get_num_bins(dft_size)` bins. Bin `i` has
    magnitude `magnitudes[i]` and frequency
    `freqs[i] = i * sample_rate / dft_size`.
    """
    
    
    def __init__(self, magnitudes, freqs, dft_size, sample_rate):
        self.magnitudes = magnitudes
        self.freqs = freqs
        self.dft_size = dft_size
        self.sample_rate = sample_rate
        
        
    def __len__(self):
        return len(self.magnitudes)
    
    
    @property
    def freq_spacing(self):
        return self.sample_rate / self.dft_size
    
    
    @property
    def peak_bin_num(self):
        return int(np.argmax(self.magnitudes))
    
    
    @property
    def peak_freq(self):
        return self.freqs[self.peak_bin_num]
    
    
    @property
    def is_silent(self):
        return not np.any(self.magnitudes)
    
    
    @property
    def decibels(self):
        return to_decibels(self.magnitudes)
    
    
    @property
    def normalized_decibels(self):
        return normalize_decibels(self.decibels)
    
    
def analyze(
        samples, sample_rate, max_dft_size=DEFAULT_MAX_DFT_SIZE,
        window_name=data_windows.DEFAULT_WINDOW_NAME):

    """
    Computes the magnitude spectrum of the start of a signal.

    The DFT size is the largest power of two not exceeding the signal
    length, limited to `max_dft_size`. That many samples from the start
    of the signal are multiplied by a data window (a Hann window unless
    otherwise specified) and transformed. A
    signal with only one sample yields a DFT size of one, i.e. a
    spectrum containing only a DC term.
    
    Parameters
    ----------
    samples : one-dimensional array-like
        the signal samples. They are not modified.
    sample_rate : positive number
        the signal sample rate in hertz.
    max_dft_size : power of two
        the maximum DFT size.
    window_name : str
        the name of the data window type, either "Hann" or
        "Rectangular".

    Returns
    -------
    MagnitudeSpectrum
        the spectrum.
        
    Raises
    ------
    InvalidParameterError
        if the sample rate is not positive or the maximum DFT size is
        not a power of two, or if the window type is unrecognized.
    InputTooShortError
        if `samples` is empty.
    """
    
    signal_utils.check_sample_rate(sample_rate)
    
    if not fft.is_power_of_two(max_dft_size):
        raise InvalidParameterError(
            f'Maximum DFT size must be a power of two, but it is '
            f'{max_dft_size}.')
        
    samples = np.asarray(samples, dtype='float64')
    
    if samples.ndim != 1:
        raise InvalidParameterError(
            'Spectrum analysis requires a one-dimensional signal.')
    
    if len(samples) == 0:
        raise InputTooShortError(
            'Spectrum analysis requires at least one sample.')
    
    dft_size = min(fft.get_largest_power_of_two(len(samples)), max_dft_size)
    
    # Multiplication allocates a new record, leaving `samples` intact.
    window = data_windows.create_window(window_name, dft_size)
    record = samples[:dft_size] * window.samples
    
    spectrum = fft.transform(record)
    magnitudes = tfa_utils.compute_magnitudes(spectrum)
    freqs = tfa_utils.get_dft_freqs(sample_rate, dft_size)
    
    return MagnitudeSpectrum(magnitudes, freqs, dft_size, sample_rate)


def to_decibels(magnitudes):
    
    """
    Converts spectral magnitudes to decibels.
    
    `EPSILON` is added to each magnitude before taking its logarithm,
    so zero magnitudes yield large negative values rather than minus
    infinity.
    """
    
    magnitudes = np.asarray(magnitudes, dtype='float64')
    return 20 * np.log10(magnitudes + EPSILON)


def normalize_decibels(decibels, floor=DISPLAY_FLOOR_DB):
    
    """
    Normalizes decibel values to [0, 1] for display.
    
    `floor` maps to zero and the maximum of the values maps to one,
    with values outside that range clamped. The maximum is taken to be
    at least `EPSILON`.

    Raises `InvalidParameterError` if `floor` is not less than the
    maximum.
    """

    decibels = np.asarray(decibels, dtype='float64')

    if len(decibels) == 0:
        return np.zeros(0)

    max_db = max(EPSILON, float(np.max(decibels)))

    if not floor < max_db:
        raise InvalidParameterError(
            f'Decibel floor {floor} must be less than the maximum '
            f'decibel value {max_db}.')

    normalized = (decibels - floor) / (max_db - floor)
    
    return np.clip(normalized, 0, 1)
