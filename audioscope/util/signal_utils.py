"""Utility functions pertaining to signals."""


import math

import numpy as np

from audioscope.errors import InvalidParameterError


MIN_MAX_DURATION = 1
"""Minimum value of the maximum analysis duration, in seconds."""

MAX_MAX_DURATION = 120
"""Maximum value of the maximum analysis duration, in seconds."""

DEFAULT_MAX_DURATION = 30
"""Default maximum analysis duration, in seconds."""


def get_duration(num_samples, sample_rate):
    
    """
    Gets the duration of some consecutive samples in seconds.
    
    The duration of consecutive samples is defined as the number of
    samples times the sample period.
    
    :Parameters:
    
        num_samples : nonnegative number
            the number of samples.
            
        sample_rate : positive number
            the sample rate in Hertz.
    """
    
    return num_samples / sample_rate


def check_sample_rate(sample_rate):
    
    if isinstance(sample_rate, bool) or \
            not isinstance(sample_rate, (int, float, np.number)):
        raise InvalidParameterError(
            f'Sample rate must be a number, not a '
            f'{sample_rate.__class__.__name__}.')
        
    if not math.isfinite(sample_rate) or sample_rate <= 0:
        raise InvalidParameterError(
            f'Sample rate must be positive, but it is {sample_rate}.')


def clamp_max_duration(seconds, default=DEFAULT_MAX_DURATION):
    
    """
    Clamps a maximum analysis duration to `[1, 120]` seconds.
    
    A duration of `None` or one that is not a finite number yields
    the default.
    """
    
    if seconds is None:
        return default
    
    try:
        seconds = float(seconds)
    except (TypeError, ValueError):
        return default
    
    if not math.isfinite(seconds):
        return default
    
    return max(MIN_MAX_DURATION, min(MAX_MAX_DURATION, seconds))


def limit_duration(samples, sample_rate, max_duration):
    
    """
    Gets the initial portion of a signal not exceeding a duration.
    
    The result is a view of `samples` when truncation is needed, and
    `samples` itself otherwise.
    """
    
    max_length = int(math.floor(max_duration * sample_rate))
    
    if len(samples) > max_length:
        return samples[:max_length]
    else:
        return samples


def get_mono_samples(samples):
    
    """
    Gets the samples of one channel of a signal as a float64 array.
    
    A two-dimensional `samples` array is taken to have shape
    `(channel_count, length)`, and its first channel is returned.
    Channels are never mixed.
    """
    
    samples = np.asarray(samples, dtype='float64')
    
    if samples.ndim == 1:
        return samples
    
    elif samples.ndim == 2:
        
        if samples.shape[0] == 0:
            raise InvalidParameterError('Signal has no channels.')
        
        return samples[0]
    
    else:
        raise InvalidParameterError(
            f'Signal samples must have one or two dimensions, but they '
            f'have {samples.ndim}.')
