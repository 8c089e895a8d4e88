"""
Functions pertaining to audio files.

For the time being, this module supports only reading uncompressed
16-bit WAVE files, which Python's `wave` module handles. Decoding of
other formats is left to callers, which can pass decoded samples to
the analysis functions directly.
"""


import wave

import numpy as np


WAVE_FILE_NAME_EXTENSION = '.wav'
_WAVE_SAMPLE_DTYPE = np.dtype('<i2')
_WAVE_SAMPLE_SCALE = 1 / 32768


class AudioFileFormatError(Exception):
    pass


class UnsupportedAudioFileFormatError(AudioFileFormatError):
    pass


def read_wave_file(path):
    
    """
    Reads a 16-bit WAVE file.
    
    Returns
    -------
    tuple
        `(samples, sample_rate)`, where `samples` is a float64 NumPy
        array of shape `(channel_count, length)` with values in
        [-1, 1), and `sample_rate` is an int.
        
    Raises
    ------
    UnsupportedAudioFileFormatError
        if the file's samples are not 16-bit or are compressed.
    """
    
    try:
        reader = wave.open(str(path), 'rb')
    except (wave.Error, EOFError) as e:
        raise AudioFileFormatError(
            f'Could not read WAVE file "{path}". Error message was: {e}')
    
    with reader:
        p = reader.getparams()
        _check_wave_file_format(p.sampwidth * 8, p.comptype)
        data = reader.readframes(p.nframes)
        
    samples = np.frombuffer(data, dtype=_WAVE_SAMPLE_DTYPE)
    
    # Frames may be truncated in a damaged file, so we get the length
    # from the data rather than the header.
    length = len(samples) // p.nchannels
    samples = samples[:length * p.nchannels]
    samples = samples.reshape((length, p.nchannels)).transpose()
    
    samples = samples * _WAVE_SAMPLE_SCALE
    
    return samples, p.framerate
 
 
def _check_wave_file_format(sample_size, compression_type):
    
    if sample_size != 16:
        raise UnsupportedAudioFileFormatError(
            ('Audio file has unsupported sample size of {} bits. Only '
             '16-bit samples are currently supported.').format(sample_size))
        
    if compression_type != 'NONE':
        raise UnsupportedAudioFileFormatError(
            'Audio file compression type is not "NONE". Only uncompressed '
            'audio files are currently supported.')
