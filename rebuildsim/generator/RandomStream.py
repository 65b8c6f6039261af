from abc import ABCMeta, abstractmethod


class RandomStream(metaclass=ABCMeta):
    """
    Unbounded stream of unsigned 64-bit values. The same seed always gives
    the same stream.
    """

    @abstractmethod
    def __init__(self, seed):
        raise NotImplementedError

    @abstractmethod
    def nextValue(self):
        raise NotImplementedError
