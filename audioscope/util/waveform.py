"""Waveform reductions for display."""


import numpy as np

from audioscope.errors import InvalidParameterError


def reduce(samples, width):
    
    """
    Decimates a signal for plotting at a given width.
    
    The signal is decimated by `max(1, len(samples) // width)` and the
    result truncated to at most `width` samples. No anti-alias filtering
    is performed, so the result is suitable only for display.
    
    Returns
    -------
    NumPy array
        the reduced samples, a new array.
    """
    
    _check_width(width)
    
    samples = np.asarray(samples, dtype='float64')
    step = max(1, len(samples) // width)
    
    return samples[::step][:width].copy()


def _check_width(width):
    if width <= 0:
        raise InvalidParameterError(
            f'Waveform width must be positive, but it is {width}.')


def get_envelope(samples, width):
    
    """
    Gets the minimum and maximum samples of each column of a waveform plot.
    
    The signal is divided into `min(width, len(samples))` contiguous,
    nearly equal parts, and the minimum and maximum of each part are
    computed. A plot can fill the area between them for each column.
    
    Returns
    -------
    tuple of two NumPy arrays
        the part minima and maxima.
    """
    
    _check_width(width)
    
    samples = np.asarray(samples, dtype='float64')
    length = len(samples)
    
    if length == 0:
        return np.zeros(0), np.zeros(0)
    
    column_count = min(width, length)
    
    # Since `column_count <= length`, the start indices strictly
    # increase and every part is nonempty.
    start_indices = (np.arange(column_count) * length) // column_count
    
    mins = np.minimum.reduceat(samples, start_indices)
    maxs = np.maximum.reduceat(samples, start_indices)
    
    return mins, maxs
