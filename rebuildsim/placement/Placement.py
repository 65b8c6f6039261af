from abc import ABCMeta, abstractmethod


class Placement(metaclass=ABCMeta):
    """
    Chooses the physical disk holding logical position 0 of a stripe.
    Logical position k then lives on disk (offset + k) mod disks.
    """

    @abstractmethod
    def place(self, stripe_index, stripe_length, disks):
        raise NotImplementedError

    @abstractmethod
    def getName(self):
        raise NotImplementedError
