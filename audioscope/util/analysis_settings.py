"""Module containing class `AnalysisSettings`."""


from pathlib import Path

from ruamel.yaml import YAML

from audioscope.errors import InvalidParameterError
import audioscope.util.fft as fft
import audioscope.util.signal_utils as signal_utils


SPECTROGRAM_WINDOW_SIZES = (512, 1024, 2048, 4096)

_DEFAULTS = {
    'max_duration': signal_utils.DEFAULT_MAX_DURATION,
    'spectrogram_window_size': 2048,
    'spectrogram_hop_size': None,
    'spectrogram_width': 1024,
    'waveform_width': 1024,
    'max_dft_size': 2 ** 18,
}


class AnalysisSettings(object):
    
    """
    Audio analysis settings.
    
    Settings are accessed as attributes, for example `s.waveform_width`.
    The available settings and their defaults are:
    
        max_duration : number (30)
            maximum duration in seconds of audio to analyze. Values are
            clamped to [1, 120].
            
        spectrogram_window_size : int (2048)
            spectrogram record size, one of 512, 1024, 2048, and 4096.
            
        spectrogram_hop_size : int or `None` (`None`)
            spectrogram hop size. `None` means a quarter of the window
            size, i.e. 75 percent record overlap.
            
        spectrogram_width : int (1024)
            maximum spectrogram raster width.
            
        waveform_width : int (1024)
            maximum number of points of the reduced waveform.
            
        max_dft_size : int (262144)
            maximum DFT size of the spectrum analysis, a power of two.
            
    Settings may be specified with keyword arguments, and positional
    `AnalysisSettings` arguments supply values for settings not
    specified with keywords. Later positional arguments take
    precedence over earlier ones.
    """
    
    
    @staticmethod
    def create_from_dict(d):
        
        """Creates a settings object from a dictionary."""
        
        if not isinstance(d, dict):
            raise TypeError(
                'Settings data must be a dictionary, not a {}.'.format(
                    d.__class__.__name__))
            
        return AnalysisSettings(**dict(d))
    
    
    @staticmethod
    def create_from_yaml(s):
    
        """Creates a settings object from a YAML string."""
        
        try:
            d = _create_yaml().load(s)
            
        except Exception as e:
            raise ValueError(
                'YAML parse failed. Error message was:\n{}'.format(str(e)))
        
        if d is None:
            d = dict()
            
        elif not isinstance(d, dict):
            raise ValueError('Settings must be a YAML mapping.')
        
        return AnalysisSettings.create_from_dict(d)
    
    
    @staticmethod
    def create_from_yaml_file(file_path):
        
        """Creates a settings object from a YAML file."""
        
        s = Path(file_path).read_text(encoding='utf-8')
        return AnalysisSettings.create_from_yaml(s)
    
    
    def __init__(self, *args, **kwargs):
        
        settings = dict(_DEFAULTS)
        
        for arg in args:
            settings.update(arg.__dict__)
            
        settings.update(kwargs)
        
        unknown_names = sorted(set(settings) - set(_DEFAULTS))
        if len(unknown_names) != 0:
            raise ValueError(
                'Unrecognized analysis setting names: {}.'.format(
                    ', '.join(f'"{n}"' for n in unknown_names)))
        
        self.__dict__.update(_check_settings(settings))
        
        
    def __eq__(self, other):
        if not isinstance(other, AnalysisSettings):
            return False
        else:
            return self.__dict__ == other.__dict__
        
        
    def __repr__(self):
        items = ', '.join(f'{k}={v!r}' for k, v in self.__dict__.items())
        return f'AnalysisSettings({items})'
    
    
    @property
    def hop_size(self):
        
        """The effective spectrogram hop size."""
        
        if self.spectrogram_hop_size is None:
            return self.spectrogram_window_size // 4
        else:
            return self.spectrogram_hop_size
        
        
    def to_dict(self):
        return dict(self.__dict__)
    
    
def _create_yaml():

    # We use the default 'rt' type, which is safe. We also use the
    # pure-Python implementation, which is slower than the default
    # C implementation but less quirky. See
    # https://yaml.readthedocs.io/en/latest for details.
    return YAML(pure=True)


def _check_settings(s):
    
    s['max_duration'] = signal_utils.clamp_max_duration(s['max_duration'])
    
    window_size = _get_int(s, 'spectrogram_window_size')
    if window_size not in SPECTROGRAM_WINDOW_SIZES:
        raise InvalidParameterError(
            'Spectrogram window size must be one of {}, but it is {}.'.format(
                ', '.join(str(n) for n in SPECTROGRAM_WINDOW_SIZES),
                window_size))
        
    if s['spectrogram_hop_size'] is not None:
        hop_size = _get_int(s, 'spectrogram_hop_size')
        if hop_size <= 0 or hop_size > window_size:
            raise InvalidParameterError(
                f'Spectrogram hop size must be in [1, {window_size}], '
                f'but it is {hop_size}.')
    
    for name in ('spectrogram_width', 'waveform_width'):
        if _get_int(s, name) <= 0:
            raise InvalidParameterError(
                f'Setting "{name}" must be positive, but it is {s[name]}.')
        
    if not fft.is_power_of_two(_get_int(s, 'max_dft_size')):
        raise InvalidParameterError(
            f'Setting "max_dft_size" must be a power of two, but it is '
            f'{s["max_dft_size"]}.')
        
    return s


def _get_int(s, name):
    
    value = s[name]
    
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidParameterError(
            f'Setting "{name}" must be an integer, not a '
            f'{value.__class__.__name__}.')
        
    # Replace any YAML scalar subclass with a plain int.
    s[name] = int(value)
    
    return s[name]
