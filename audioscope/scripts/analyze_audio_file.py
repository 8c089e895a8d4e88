"""
Analyzes an audio file for display.

The script reads a 16-bit WAVE file, computes its reduced waveform,
magnitude spectrum, and spectrogram raster, and logs a summary of the
results. With the `--output` option it also saves the results to a
compressed NumPy `.npz` file with the arrays:

    waveform       reduced waveform samples
    freqs          spectrum bin frequencies in hertz
    magnitudes     spectrum bin magnitudes
    decibels       spectrum bin magnitudes normalized in decibels
    spectrogram    spectrogram raster, of shape (height, width, 3)
    times          spectrogram column times in seconds

Analysis settings are read from an optional YAML file and may be
overridden by command line options. See the `AnalysisSettings` class
for the available settings.
"""


import argparse
import logging
import sys

import numpy as np

from audioscope.errors import AnalysisError
from audioscope.util.analysis_settings import AnalysisSettings
from audioscope.util.audio_analyzer import analyze_audio
from audioscope.util.audio_file_utils import AudioFileFormatError
import audioscope.util.audio_file_utils as audio_file_utils
import audioscope.util.logging_utils as logging_utils


_logger = logging.getLogger(__name__)


def _main(argv=None):
    
    args = _parse_args(argv)
    
    level = logging.DEBUG if args.verbose else logging.INFO
    logging_utils.configure_root_logger(level)
    
    try:
        settings = _get_settings(args)
        samples, sample_rate = audio_file_utils.read_wave_file(args.file_path)
        analysis = analyze_audio(samples, sample_rate, settings)
        
    except (OSError, ValueError, AudioFileFormatError, AnalysisError) as e:
        _logger.error(f'Analysis of "{args.file_path}" failed: {e}')
        return 1
    
    _log_summary(analysis)
    
    if args.output is not None:
        _save_analysis(analysis, args.output)
        _logger.info(f'Saved analysis to "{args.output}".')
        
    return 0


def _parse_args(argv):
    
    parser = argparse.ArgumentParser(
        description='Analyzes a WAVE file for display.')
    
    parser.add_argument('file_path', help='WAVE file path')
    
    parser.add_argument(
        '--config', help='YAML analysis settings file path')
    
    parser.add_argument(
        '--max-duration', type=float,
        help='maximum duration to analyze in seconds, in [1, 120]')
    
    parser.add_argument(
        '--window-size', type=int,
        help='spectrogram window size: 512, 1024, 2048, or 4096')
    
    parser.add_argument(
        '--width', type=int,
        help='maximum waveform and spectrogram width')
    
    parser.add_argument('--output', help='output .npz file path')
    
    parser.add_argument(
        '--verbose', action='store_true', help='log debug messages')
    
    return parser.parse_args(argv)


def _get_settings(args):
    
    if args.config is not None:
        settings = AnalysisSettings.create_from_yaml_file(args.config)
    else:
        settings = AnalysisSettings()
        
    overrides = {}
    
    if args.max_duration is not None:
        overrides['max_duration'] = args.max_duration
        
    if args.window_size is not None:
        overrides['spectrogram_window_size'] = args.window_size
        
    if args.width is not None:
        overrides['spectrogram_width'] = args.width
        overrides['waveform_width'] = args.width
        
    return AnalysisSettings(settings, **overrides)


def _log_summary(analysis):
    
    spectrum = analysis.spectrum
    raster = analysis.spectrogram
    
    _logger.info(
        f'Analyzed {analysis.duration:.2f} s of audio at '
        f'{analysis.sample_rate} Hz ({len(analysis.samples)} samples).')
    
    if spectrum.is_silent:
        _logger.info(
            f'Spectrum with DFT size {spectrum.dft_size} is silent.')
    else:
        _logger.info(
            f'Spectrum with DFT size {spectrum.dft_size} peaks at '
            f'{spectrum.peak_freq:.1f} Hz.')
        
    if raster.is_empty:
        _logger.info(
            'Audio is shorter than one spectrogram window, so the '
            'spectrogram is empty.')
    else:
        _logger.info(
            f'Spectrogram raster is {raster.width} by {raster.height} '
            f'pixels.')
        
        
def _save_analysis(analysis, file_path):
    spectrum = analysis.spectrum
    raster = analysis.spectrogram
    np.savez_compressed(
        file_path,
        waveform=analysis.waveform,
        freqs=spectrum.freqs,
        magnitudes=spectrum.magnitudes,
        decibels=spectrum.normalized_decibels,
        spectrogram=raster.pixels,
        times=raster.times)


if __name__ == '__main__':
    sys.exit(_main())
