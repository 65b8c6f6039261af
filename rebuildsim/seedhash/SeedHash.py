from abc import ABCMeta, abstractmethod


class SeedHash(metaclass=ABCMeta):
    """
    Derives the permutation seed of a stripe from its sequence index. Both
    index and seed are unsigned 64-bit values.
    """

    @abstractmethod
    def seedFor(self, index):
        raise NotImplementedError

    @abstractmethod
    def getName(self):
        raise NotImplementedError
