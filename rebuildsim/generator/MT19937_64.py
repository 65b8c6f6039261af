from rebuildsim.generator.RandomStream import RandomStream
from rebuildsim.utils import MASK64

N = 312
M = 156
MATRIX_A = 0xB5026F5AA96619E9
UPPER_MASK = 0xFFFFFFFF80000000
LOWER_MASK = 0x7FFFFFFF
INIT_MULTIPLIER = 6364136223846793005


class MT19937_64(RandomStream):
    """
    64-bit Mersenne Twister, the same stream as std::mt19937_64.

    A stripe only draws a couple of dozen values, so the state is neither
    fully initialised nor fully twisted up front. Word i of a generation is
    twisted right before it is tempered and returned; this only reads words
    at i, i+1 and i+M (mod N), which the full in-order twist would read in
    the same state. Initial words are computed on demand for the same reason.
    """

    def __init__(self, seed):
        self.mt = [seed & MASK64]
        # N forces a twist before the first value is returned.
        self.index = N

    def _word(self, i):
        mt = self.mt
        while len(mt) <= i:
            prev = mt[-1]
            mt.append((INIT_MULTIPLIER * (prev ^ (prev >> 62)) + len(mt)) & MASK64)
        return mt[i]

    def _twist(self, i):
        x = (self._word(i) & UPPER_MASK) | (self._word((i + 1) % N) & LOWER_MASK)
        xA = x >> 1
        if x & 1:
            xA ^= MATRIX_A
        self.mt[i] = self._word((i + M) % N) ^ xA

    def nextValue(self):
        if self.index >= N:
            self.index = 0
        i = self.index
        self._twist(i)
        self.index += 1

        y = self.mt[i]
        y ^= (y >> 29) & 0x5555555555555555
        y ^= (y << 17) & 0x71D67FFFEDA60000
        y ^= (y << 37) & 0xFFF7EEE000000000
        y ^= y >> 43
        return y


if __name__ == "__main__":
    mt = MT19937_64(5489)
    for i in range(9999):
        mt.nextValue()
    print(mt.nextValue())
