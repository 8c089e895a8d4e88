"""Exceptions raised by Audioscope analyses."""


class AnalysisError(Exception):
    pass


class InvalidParameterError(AnalysisError, ValueError):
    
    """
    Raised when an analysis parameter is out of range.
    
    Parameters are checked at the call boundary, before any
    computation is performed.
    """


class InputTooShortError(AnalysisError, ValueError):
    
    """Raised when a signal has too few samples for an analysis."""


class AnalysisCancelledError(AnalysisError):
    
    """
    Raised when an analysis is cancelled between spectrogram frames.
    
    Cancellation is cooperative: a long analysis checks its
    cancellation event once per frame and raises this exception if
    the event has been set.
    """
