"""Module containing data window definitions."""


import numpy as np

from audioscope.errors import InvalidParameterError


DEFAULT_WINDOW_NAME = 'Hann'
"""Name of the window type used by analyses unless another is requested."""


def hann(n):
    
    """
    Computes a symmetric Hann window.
    
    The window has samples `.5 * (1 - cos(2 * pi * i / (n - 1)))` for
    `i` in `[0, n)`, so its first and last samples are zero. The
    formula is undefined for `n < 2`, for which this function returns
    `n` ones.
    """
    
    if n < 2:
        return np.ones(n)
    
    phases = 2 * np.pi * np.arange(n) / float(n - 1)
    return .5 - .5 * np.cos(phases)


class HannWindow(object):
    
    name = 'Hann'
    
    def __init__(self, n):
        self.size = n
        self.samples = hann(n)
    
        
class RectangularWindow(object):
    
    name = 'Rectangular'
    
    def __init__(self, n):
        self.size = n
        self.samples = np.ones(n)
    
    
_WINDOW_TYPES = dict((t.name, t) for t in (HannWindow, RectangularWindow))


def create_window(name, n):
    
    try:
        window_type = _WINDOW_TYPES[name]
    except KeyError:
        raise InvalidParameterError(
            'Unrecognized window type "{:s}".'.format(name))
    
    return window_type(n)
