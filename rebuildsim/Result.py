import numpy as np

from rebuildsim.errors import DegenerateStatistics


class Result(object):
    """
    Spread of the rebuild reads over the surviving disks. Counter 0 belongs
    to the failed disk itself and is left out of min and max.
    """

    def __init__(self, counters):
        self.counters = np.asarray(counters, dtype=np.uint64)
        if len(self.counters) < 2:
            raise DegenerateStatistics("Need at least one surviving disk, got " +
                                       str(len(self.counters)) + " disks")

        survivors = self.counters[1:]
        self.min = int(survivors.min())
        self.max = int(survivors.max())
        if self.max == 0:
            raise DegenerateStatistics("No rebuild reads were counted")

        self.diff = self.max - self.min
        self.deviation = self.diff * 100.0 / self.max

    def toString(self):
        return " ".join(str(int(c)) for c in self.counters) + "\n" + \
            "Min: " + str(self.min) + ", max: " + str(self.max) + "\n" + \
            "Diff: " + str(self.diff) + ", (max-min)/max: " + str(self.deviation) + "%"


if __name__ == "__main__":
    r = Result([0, 10, 12, 11])
    print(r.toString())
