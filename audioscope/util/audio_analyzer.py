"""
Complete analyses of audio for display.

An analysis comprises a reduced waveform, a magnitude spectrum, and a
spectrogram raster of the initial portion of a signal. The duration
of the portion is limited by the `max_duration` analysis setting.
"""


from threading import Event, Thread
import logging

from audioscope.util.analysis_settings import AnalysisSettings
import audioscope.util.signal_utils as signal_utils
import audioscope.util.spectrogram as spectrogram
import audioscope.util.spectrum_analysis as spectrum_analysis
import audioscope.util.waveform as waveform


_logger = logging.getLogger(__name__)


class AudioAnalysis(object):
    
    
    def __init__(self, samples, sample_rate, waveform, spectrum, spectrogram):
        self.samples = samples
        self.sample_rate = sample_rate
        self.waveform = waveform
        self.spectrum = spectrum
        self.spectrogram = spectrogram
        
        
    @property
    def duration(self):
        return signal_utils.get_duration(len(self.samples), self.sample_rate)
    
    
def analyze_audio(
        samples, sample_rate, settings=None, cancellation_event=None):
    
    """
    Analyzes audio for display.
    
    Parameters
    ----------
    samples : array-like
        the audio samples, either one-dimensional or of shape
        `(channel_count, length)`. Only the first channel of
        multichannel audio is analyzed.
    sample_rate : positive number
        the audio sample rate in hertz.
    settings : AnalysisSettings or `None`
        the analysis settings, or `None` for default settings.
    cancellation_event : `threading.Event` or `None`
        event that, when set, cancels the spectrogram computation.
        
    Returns
    -------
    AudioAnalysis
        the analysis.
    """
    
    if settings is None:
        settings = AnalysisSettings()
        
    signal_utils.check_sample_rate(sample_rate)
    
    samples = signal_utils.get_mono_samples(samples)
    samples = signal_utils.limit_duration(
        samples, sample_rate, settings.max_duration)
    
    _logger.debug(
        'Analyzing %.2f seconds of audio at %s Hz (%d samples).',
        signal_utils.get_duration(len(samples), sample_rate), sample_rate,
        len(samples))
    
    reduced_waveform = waveform.reduce(samples, settings.waveform_width)
    
    spectrum = spectrum_analysis.analyze(
        samples, sample_rate, settings.max_dft_size)
    
    raster = spectrogram.build(
        samples, sample_rate, settings.spectrogram_window_size,
        settings.hop_size, settings.spectrogram_width, cancellation_event)
    
    _logger.debug(
        'Computed spectrum with DFT size %d and spectrogram with %d '
        'columns.', spectrum.dft_size, raster.width)
    
    return AudioAnalysis(
        samples, sample_rate, reduced_waveform, spectrum, raster)


class BackgroundAnalysis(object):
    
    """
    Audio analysis that runs on its own thread.
    
    The analysis starts when the object is created. It can be
    cancelled with the `cancel` method, and its result obtained with
    the `wait` method.
    """
    
    
    def __init__(self, samples, sample_rate, settings=None):
        
        self._cancellation_event = Event()
        self._result = None
        self._exception = None
        
        self._thread = Thread(
            target=self._run, args=(samples, sample_rate, settings),
            daemon=True)
        self._thread.start()
        
        
    def _run(self, samples, sample_rate, settings):
        
        try:
            self._result = analyze_audio(
                samples, sample_rate, settings, self._cancellation_event)
            
        except Exception as e:
            # The exception is re-raised on the waiting thread.
            self._exception = e
            
            
    @property
    def done(self):
        return not self._thread.is_alive()
    
    
    @property
    def cancelled(self):
        return self._cancellation_event.is_set()
    
    
    def cancel(self):
        
        """
        Requests cancellation of this analysis.
        
        After cancellation `wait` raises `AnalysisCancelledError`,
        unless the analysis completed before it noticed the request.
        """
        
        self._cancellation_event.set()
        
        
    def wait(self, timeout=None):
        
        """
        Waits for this analysis to complete.
        
        :Returns:
            the `AudioAnalysis`.
            
        :Raises TimeoutError:
            if the analysis does not complete within `timeout` seconds.
            
        :Raises Exception:
            the exception raised by the analysis, if any.
        """
        
        self._thread.join(timeout)
        
        if self._thread.is_alive():
            raise TimeoutError('Audio analysis did not complete in time.')
        
        if self._exception is not None:
            raise self._exception
        else:
            return self._result
