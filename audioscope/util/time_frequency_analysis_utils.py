"""Utility functions for time-frequency analysis."""


import numpy as np

from audioscope.errors import InvalidParameterError


'''
We use the term *record* for one of the uniformly-sized sample vectors
that a time-frequency analysis extracts from a continuous sample
sequence, windows, and transforms. Successive records start `hop_size`
samples apart, so they overlap when the hop size is less than the
record size. Spectrogram frames are computed from records.
'''


def get_num_bins(dft_size):
    
    """
    Gets the number of bins of interest of a DFT of a real signal.
    
    This is half the DFT size, except that a DFT of size one has one
    bin, its DC term.
    """
    
    return max(1, dft_size // 2)


def get_dft_freqs(sample_rate, dft_size):

    """
    Gets the bin frequencies of a DFT analysis of a real signal.

    The frequencies are `i * sample_rate / dft_size` for `i` in
    `[0, get_num_bins(dft_size))`, i.e. from zero to just below the
    Nyquist frequency.
    """

    spacing = sample_rate / dft_size
    return np.arange(get_num_bins(dft_size)) * spacing


def check_record_parameters(record_size, hop_size):
    
    if record_size <= 0:
        raise InvalidParameterError('Record size must be positive.')

    elif hop_size <= 0:
        raise InvalidParameterError('Hop size must be positive.')

    elif hop_size > record_size:
        raise InvalidParameterError('Hop size must not exceed record size.')


def get_num_analysis_records(num_samples, record_size, hop_size):

    check_record_parameters(record_size, hop_size)
    
    if num_samples < record_size:
        # not enough samples for any records

        return 0

    else:
        # have enough samples for at least one record

        return (num_samples - record_size) // hop_size + 1


def get_decimation_stride(num_records, out_width):
    
    """
    Gets the record decimation stride for an analysis of limited width.
    
    An analysis that will be displayed with at most `out_width` columns
    retains only records whose indices are multiples of the returned
    stride. Since the stride is rounded down, more than `out_width`
    records may be retained, in which case the excess records at the
    end of the signal are dropped.
    """
    
    if out_width <= 0:
        raise InvalidParameterError('Output width must be positive.')
    
    return max(1, num_records // out_width)


def compute_magnitudes(spectrum):
    
    """
    Computes the bin magnitudes of a complex spectrum of a real signal.
    
    Only the first `get_num_bins(spectrum.size)` bins are included.
    """
    
    num_bins = get_num_bins(spectrum.size)
    re = spectrum.re[:num_bins]
    im = spectrum.im[:num_bins]
    return np.sqrt(re * re + im * im)
