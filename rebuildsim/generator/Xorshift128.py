from rebuildsim.generator.RandomStream import RandomStream
from rebuildsim.generator.SplitMix64 import SplitMix64
from rebuildsim.utils import MASK32


class Xorshift128(RandomStream):
    """
    Marsaglia's xorshift128 on four 32-bit words. Two consecutive 32-bit
    outputs make one 64-bit value, the first one in the high half.
    """

    def __init__(self, seed):
        seeder = SplitMix64(seed)
        a = seeder.nextValue()
        b = seeder.nextValue()
        self.x = a & MASK32
        self.y = a >> 32
        self.z = b & MASK32
        self.w = b >> 32
        # all-zero state is a fixed point
        if not (self.x or self.y or self.z or self.w):
            self.w = 0x9e3779b9

    def _next32(self):
        t = (self.x ^ (self.x << 11)) & MASK32
        self.x, self.y, self.z = self.y, self.z, self.w
        self.w = self.w ^ (self.w >> 19) ^ t ^ (t >> 8)
        return self.w

    def nextValue(self):
        high = self._next32()
        return (high << 32) | self._next32()
