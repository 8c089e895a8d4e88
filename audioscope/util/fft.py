"""
Radix-2 fast Fourier transform of real signals.

The transform is the classic iterative Cooley-Tukey algorithm: the
input is permuted into bit-reversed index order and then combined in
`log2(N)` butterfly stages. Signals whose lengths are not powers of
two are zero-padded to the next power of two.

Within a stage, the twiddle factors `exp(-2j * pi * k / size)` are
computed by repeated multiplication by `exp(-2j * pi / size)` rather
than by evaluating a sine and cosine for every `k`. The rounding error
of this recurrence grows linearly with `k`, so it stays around
`size * 1e-16` for all sizes we use.
"""


import numpy as np

from audioscope.errors import InvalidParameterError


class ComplexSpectrum(object):
    
    """
    Discrete Fourier transform of a real signal.
    
    The real and imaginary parts of the transform are stored in the
    float64 arrays `re` and `im`, whose common length is a power of
    two. Element zero is the DC term. For a real input only the first
    half of the elements is of interest, since the second half is the
    complex conjugate mirror of the first.
    """
    
    
    def __init__(self, re, im):
        
        if len(re) != len(im):
            raise ValueError(
                'Real and imaginary parts of spectrum must have the same '
                'length.')
            
        self.re = re
        self.im = im
        
        
    @property
    def size(self):
        return len(self.re)
    
    
    def __len__(self):
        return len(self.re)
    
    
def is_power_of_two(n):
    return n > 0 and n & (n - 1) == 0


def get_next_power_of_two(n):
    
    """Returns the smallest power of two that is at least `n`."""
    
    size = 1
    while size < n:
        size <<= 1
        
    return size


def get_largest_power_of_two(n):
    
    """Returns the largest power of two that is at most `n`."""
    
    if n < 1:
        raise InvalidParameterError(
            f'Cannot get largest power of two not exceeding {n}.')
        
    return 1 << (int(n).bit_length() - 1)


def bit_reversal_permutation(n):
    
    """
    Gets the bit reversal permutation of `range(n)`.
    
    Element `i` of the returned array is `i` with the order of its
    `log2(n)` low-order bits reversed. `n` must be a power of two.
    """
    
    if not is_power_of_two(n):
        raise InvalidParameterError(
            f'Bit reversal permutation size {n} is not a power of two.')
    
    bit_count = int(n).bit_length() - 1
    indices = np.arange(n)
    permutation = np.zeros(n, dtype='int64')
    
    for _ in range(bit_count):
        permutation = (permutation << 1) | (indices & 1)
        indices = indices >> 1
        
    return permutation


def transform(samples):
    
    """
    Computes the discrete Fourier transform of a real signal.
    
    Parameters
    ----------
    samples : one-dimensional array-like of real numbers
        the signal to transform. It must contain at least one sample.
        It is not modified.
        
    Returns
    -------
    ComplexSpectrum
        the transform. Its length is the length of `samples` if that
        is a power of two, or the next power of two otherwise.
        
    Raises
    ------
    InvalidParameterError
        if `samples` is empty or not one-dimensional.
    """
    
    samples = np.asarray(samples, dtype='float64')
    
    if samples.ndim != 1:
        raise InvalidParameterError(
            f'FFT input must be one-dimensional, but it has '
            f'{samples.ndim} dimensions.')
    
    n = len(samples)
    
    if n == 0:
        raise InvalidParameterError('FFT input must not be empty.')
    
    if not is_power_of_two(n):
        padded = np.zeros(get_next_power_of_two(n))
        padded[:n] = samples
        return transform(padded)
    
    # Fancy indexing gives us an owned, contiguous working copy.
    x = samples[bit_reversal_permutation(n)].astype('complex128')
    
    size = 2
    
    while size <= n:
        
        half_size = size // 2
        twiddles = _get_twiddle_factors(size)
        
        # View each group of `size` consecutive elements as a row so
        # all of the butterflies of a stage run at once.
        blocks = x.reshape((n // size, size))
        u = blocks[:, :half_size].copy()
        v = blocks[:, half_size:] * twiddles
        blocks[:, :half_size] = u + v
        blocks[:, half_size:] = u - v
        
        size <<= 1
        
    return ComplexSpectrum(x.real.copy(), x.imag.copy())


def _get_twiddle_factors(size):
    
    half_size = size // 2
    
    angle = -2 * np.pi / size
    step = complex(np.cos(angle), np.sin(angle))
    
    factors = np.empty(half_size, dtype='complex128')
    factors[0] = 1
    
    if half_size > 1:
        # `cumprod` multiplies sequentially, so this is the recurrence
        # `factors[k] = factors[k - 1] * step`.
        factors[1:] = np.cumprod(np.full(half_size - 1, step))
        
    return factors
