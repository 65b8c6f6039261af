from rebuildsim.generator.RandomStream import RandomStream
from rebuildsim.generator.SplitMix64 import SplitMix64
from rebuildsim.utils import MASK64


class Xorshift128Plus(RandomStream):
    """
    xorshift128+ with the 23/17/26 shift triple.
    """

    def __init__(self, seed):
        seeder = SplitMix64(seed)
        self.s0 = seeder.nextValue()
        self.s1 = seeder.nextValue()
        if not (self.s0 or self.s1):
            self.s1 = 1

    def nextValue(self):
        a = self.s0
        b = self.s1
        self.s0 = b
        a ^= (a << 23) & MASK64
        self.s1 = a ^ b ^ (a >> 17) ^ (b >> 26)
        return (self.s1 + b) & MASK64
