"""
Color-mapped spectrogram rasters.

A spectrogram raster is computed from overlapping windowed records of
a signal, one raster column per record. Records are Hann-windowed
unless a rectangular window is requested. To bound the cost of long
signals, records are decimated so that at most a requested number of
columns is produced: if a signal has `n` records and at most `w`
columns are wanted, only records whose numbers are multiples of
`max(1, n // w)` are retained.

Magnitudes are compressed with `log10(1 + magnitude)` and normalized
by the same function of the largest magnitude of all retained records.
Since that maximum must be known before any column is colored, the
computation makes two passes over the retained records. The first
pass finds the maximum and the second recomputes each record's
spectrum and colors its column. Recomputation keeps memory use
independent of the number of records.
"""


import numpy as np

from audioscope.errors import AnalysisCancelledError, InvalidParameterError
import audioscope.util.color_map as color_map
import audioscope.util.data_windows as data_windows
import audioscope.util.fft as fft
import audioscope.util.signal_utils as signal_utils
import audioscope.util.time_frequency_analysis_utils as tfa_utils


_MIN_GLOBAL_MAX = 1e-12


class SpectrogramRaster(object):
    
    """
    RGB raster of a spectrogram.
    
    The raster's `pixels` attribute is a NumPy array of dtype uint8 and
    shape `(height, width, 3)`. Column `j` displays retained record
    `frame_nums[j]`. Row zero displays the highest frequency bin and
    row `height - 1` the DC bin, so that low frequencies appear at the
    bottom of the raster.
    """
    
    
    def __init__(
            self, pixels, frame_nums, window_size, hop_size, sample_rate,
            global_max):
        
        self.pixels = pixels
        self.frame_nums = frame_nums
        self.window_size = window_size
        self.hop_size = hop_size
        self.sample_rate = sample_rate
        self.global_max = global_max
        
        
    @property
    def height(self):
        return self.pixels.shape[0]
    
    
    @property
    def width(self):
        return self.pixels.shape[1]
    
    
    @property
    def is_empty(self):
        return self.width == 0
    
    
    @property
    def times(self):
        
        """
        Times of the raster columns in seconds.
        
        The time of a column is the center time of the samples of the
        record it displays.
        """
        
        start_indices = self.frame_nums * self.hop_size
        offset = (self.window_size - 1) / 2
        return (start_indices + offset) / self.sample_rate
        
        
def build(
        samples, sample_rate, window_size, hop_size, out_width,
        cancellation_event=None,
        window_name=data_windows.DEFAULT_WINDOW_NAME):
    
    """
    Builds a spectrogram raster of a signal.
    
    Parameters
    ----------
    samples : one-dimensional array-like
        the signal samples. They are not modified.
    sample_rate : positive number
        the signal sample rate in hertz.
    window_size : int
        the record size in samples, at least two. The raster height
        is `window_size // 2`.
    hop_size : positive int
        the distance in samples between the starts of successive
        records. It must not exceed `window_size`.
    out_width : positive int
        the maximum raster width.
    cancellation_event : `threading.Event` or `None`
        event that, when set, cancels the build. It is checked once
        for each retained record in each pass.
    window_name : str
        the name of the data window type, either "Hann" or
        "Rectangular".
        
    Returns
    -------
    SpectrogramRaster
        the raster. It is empty (i.e. has width zero) if the signal
        is shorter than one record.
        
    Raises
    ------
    InvalidParameterError
        if a parameter is out of range or the window type is
        unrecognized.
    AnalysisCancelledError
        if the build is cancelled.
    """
    
    signal_utils.check_sample_rate(sample_rate)
    _check_sizes(window_size, hop_size, out_width)
    window = data_windows.create_window(window_name, window_size).samples
    
    samples = np.asarray(samples, dtype='float64')
    
    if samples.ndim != 1:
        raise InvalidParameterError(
            'Spectrogram analysis requires a one-dimensional signal.')
    
    height = window_size // 2
    
    num_frames = tfa_utils.get_num_analysis_records(
        len(samples), window_size, hop_size)
    
    if num_frames == 0:
        # signal too short for even one record
        
        pixels = np.zeros((height, 0, 3), dtype='uint8')
        return SpectrogramRaster(
            pixels, np.zeros(0, dtype='int64'), window_size, hop_size,
            sample_rate, _MIN_GLOBAL_MAX)
        
    stride = tfa_utils.get_decimation_stride(num_frames, out_width)
    retained_frame_nums = np.arange(0, num_frames, stride)
    
    def compute_magnitudes(frame_num):
        _check_cancellation(cancellation_event)
        return _compute_frame_magnitudes(
            samples, frame_num, window, hop_size, height)
    
    # Find maximum magnitude over all retained records. Note that this
    # includes any records that will not be displayed since they
    # would exceed the output width.
    global_max = _MIN_GLOBAL_MAX
    for frame_num in retained_frame_nums:
        magnitudes = compute_magnitudes(frame_num)
        global_max = max(global_max, float(np.max(magnitudes)))
        
    frame_nums = retained_frame_nums[:out_width]
    pixels = np.zeros((height, len(frame_nums), 3), dtype='uint8')
    rows = _get_bin_rows(height)
    scale = np.log10(1 + global_max)
    
    for column, frame_num in enumerate(frame_nums):
        values = np.log10(1 + compute_magnitudes(frame_num)) / scale
        pixels[rows, column] = color_map.map_values(values)
        
    return SpectrogramRaster(
        pixels, frame_nums, window_size, hop_size, sample_rate, global_max)


def _check_sizes(window_size, hop_size, out_width):
    
    tfa_utils.check_record_parameters(window_size, hop_size)
    
    if window_size < 2:
        raise InvalidParameterError(
            f'Spectrogram window size must be at least two, but it is '
            f'{window_size}.')
    
    if out_width <= 0:
        raise InvalidParameterError(
            f'Spectrogram width must be positive, but it is {out_width}.')
    
    
def _check_cancellation(cancellation_event):
    if cancellation_event is not None and cancellation_event.is_set():
        raise AnalysisCancelledError('Spectrogram computation cancelled.')
    

def _compute_frame_magnitudes(samples, frame_num, window, hop_size, height):
    
    start_index = frame_num * hop_size
    end_index = start_index + len(window)
    
    record = samples[start_index:end_index] * window
    
    # For a window size that is not a power of two the transform is
    # zero-padded, and we keep only its first `height` bins.
    spectrum = fft.transform(record)
    return tfa_utils.compute_magnitudes(spectrum)[:height]


def _get_bin_rows(height):
    
    """
    Gets the raster row of each frequency bin.
    
    Row `floor((1 - k / height) * (height - 1))` displays bin `k`,
    which puts the DC bin in the bottom row and the highest bin in
    the top one.
    """
    
    # Integer arithmetic gives the floor exactly for any height.
    bin_nums = np.arange(height, dtype='int64')
    return ((height - bin_nums) * (height - 1)) // height
