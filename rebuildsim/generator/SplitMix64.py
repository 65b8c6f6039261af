from rebuildsim.generator.RandomStream import RandomStream
from rebuildsim.utils import MASK64


class SplitMix64(RandomStream):
    """
    Used to expand a 64-bit seed into the state of the xorshift generators.
    """

    def __init__(self, seed):
        self.state = seed & MASK64

    def nextValue(self):
        self.state = (self.state + 0x9e3779b97f4a7c15) & MASK64
        z = self.state
        z = ((z ^ (z >> 30)) * 0xbf58476d1ce4e5b9) & MASK64
        z = ((z ^ (z >> 27)) * 0x94d049bb133111eb) & MASK64
        return z ^ (z >> 31)
