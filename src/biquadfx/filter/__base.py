import abc


class ProcessingBlock(abc.ABC):
    """Base class for anything that filters a signal one sample at a time.

    Both a single :class:`~biquadfx.filter.iir.IIRFilter` and an
    :class:`~biquadfx.filter.equalizer.Equalizer` implement it, so response
    analysis and host code can treat either uniformly. Calls must be made in
    temporal order: each one depends on the state the previous call left.
    """

    @abc.abstractmethod
    def process(self, sample: float) -> float:
        """Consume one input sample and return one output sample."""
