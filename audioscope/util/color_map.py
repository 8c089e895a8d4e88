"""
Perceptual color map for spectrogram display.

The map takes a value in [0, 1] to an RGB color on a gradient from
dark blue through teal to yellow. Values outside [0, 1] are clamped,
so the map is defined for any input.
"""


import math

import numpy as np


def map_value(v):
    
    """Maps a scalar in [0, 1] to an `(r, g, b)` tuple of ints."""
    
    v = _clamp(v)
    
    r = _to_channel(30 + 225 * v * v)
    g = _to_channel(60 + 180 * math.sqrt(v))
    b = _to_channel(80 + 120 * (1 - v))
    
    return (r, g, b)


def _clamp(v):
    
    v = float(v)
    
    # NaN compares false with everything, so test it explicitly.
    if math.isnan(v):
        return 0.
    
    return max(0., min(1., v))


def _to_channel(x):
    
    # Round half up, as JavaScript's `Math.round` and unlike Python's
    # `round`, which rounds half to even.
    return max(0, min(255, int(math.floor(x + .5))))


def map_values(values):
    
    """
    Maps an array of values in [0, 1] to RGB colors.
    
    Returns
    -------
    NumPy array of dtype uint8
        colors of shape `values.shape + (3,)`, agreeing elementwise
        with `map_value`.
    """
    
    v = np.nan_to_num(
        np.asarray(values, dtype='float64'), nan=0., posinf=1., neginf=0.)
    v = np.clip(v, 0, 1)
    
    rgb = np.stack(
        (30 + 225 * v * v, 60 + 180 * np.sqrt(v), 80 + 120 * (1 - v)),
        axis=-1)
    
    rgb = np.clip(np.floor(rgb + .5), 0, 255)
    
    return rgb.astype('uint8')
