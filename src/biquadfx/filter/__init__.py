from .__base import ProcessingBlock
from .biquad import (
    DEFAULT_Q_FACTOR,
    make_allpass,
    make_bandpass,
    make_highpass,
    make_highshelf,
    make_lowpass,
    make_lowshelf,
    make_notch,
    make_peak,
    make_peak_eq_constant_q,
)
from .equalizer import TEN_BAND_FREQUENCIES, Equalizer
from .iir import IIRFilter

__all__ = [
    "ProcessingBlock",
    "IIRFilter",
    "Equalizer",
    "TEN_BAND_FREQUENCIES",
    "DEFAULT_Q_FACTOR",
    "make_lowpass",
    "make_highpass",
    "make_bandpass",
    "make_allpass",
    "make_peak",
    "make_lowshelf",
    "make_highshelf",
    "make_notch",
    "make_peak_eq_constant_q",
]
