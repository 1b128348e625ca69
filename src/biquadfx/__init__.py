import biquadfx.analysis as analysis
import biquadfx.filter as filter  # noqa: A001,A004
import biquadfx.logging as logging  # noqa: A001,A004
import biquadfx.validation as validation
from biquadfx.config import load_equalizer_config
from biquadfx.filter import Equalizer, IIRFilter, ProcessingBlock

__all__ = [
    "Equalizer",
    "IIRFilter",
    "ProcessingBlock",
    "analysis",
    "filter",
    "load_equalizer_config",
    "logging",
    "validation",
]
