from rebuildsim.seedhash.SeedHash import SeedHash
from rebuildsim.utils import MASK64

# (shift, sign) applied in this order, each on the current value.
STEPS = ((18, -1), (33, -1), (3, 1), (3, -1), (4, 1), (2, 1))


class Multiplicative(SeedHash):
    """
    Kernel style multiplicative hash written as shifts and adds. Every step
    wraps modulo 2^64, so the order must not change.
    """

    def getName(self):
        return "multiplicative"

    def seedFor(self, index):
        h = index & MASK64
        for shift, sign in STEPS:
            h = (h + sign * (h << shift)) & MASK64
        return h


if __name__ == "__main__":
    m = Multiplicative()
    for i in range(4):
        print(i, hex(m.seedFor(i)))
