from rebuildsim.seedhash.SeedHash import SeedHash
from rebuildsim.utils import MASK64

FNV_OFFSET_BASIS = 0xcbf29ce484222325
FNV_PRIME = 0x100000001b3


class FNV(SeedHash):
    """
    FNV-1a over the 8 bytes of the index, least significant byte first.
    """

    def getName(self):
        return "fnv"

    def seedFor(self, index):
        number = index & MASK64
        result = FNV_OFFSET_BASIS
        for offset in range(0, 64, 8):
            result ^= (number >> offset) & 0xFF
            result = (result * FNV_PRIME) & MASK64
        return result


if __name__ == "__main__":
    fnv = FNV()
    for i in range(4):
        print(i, hex(fnv.seedFor(i)))
