import numpy as np

from rebuildsim.layout.StripeConfig import G, sameLocalGroup

ONE = np.uint64(1)


def newCounters(config):
    return np.zeros(config.disks, dtype=np.uint64)


def accumulate(counters, stripe, offset, config):
    """
    Add the reads needed to rebuild physical disk 0 from one placed stripe.

    Every surviving member of the lost block's local group costs one read;
    a lost global parity costs one read per data and local parity block.
    Empty slots and global parities are never read. When disk 0 lies outside
    the stripe's footprint nothing is counted.
    """
    disks = config.disks
    failed_index = (disks - offset) % disks
    if failed_index >= len(stripe):
        return

    failed = stripe[failed_index]
    for i, source in enumerate(stripe):
        if i == failed_index:
            continue
        if sameLocalGroup(source, failed, config.local_groups) or \
                (failed == G and source > 0):
            counters[(offset + i) % disks] += ONE
