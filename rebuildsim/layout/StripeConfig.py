from collections import namedtuple
from operator import index

from rebuildsim.errors import InvalidConfig

# Role code sentinels. Positive codes 1..L are data blocks of local group
# `code`, L+1..2L are local parities of group `code - L`.
G = -1
E = -2


class StripeConfig(namedtuple("StripeConfig",
                              "disks local_groups local_group_size global_parities")):
    """
    disks: D, width of the disk array.
    local_groups: L, number of local parity groups in one stripe.
    local_group_size: S, members per group, the group's local parity included.
    global_parities: P, global parity blocks per stripe.

    One stripe occupies L*S + P + 1 consecutive disks, the last slot being
    an empty one.
    """
    __slots__ = ()

    def __new__(cls, disks, local_groups, local_group_size, global_parities):
        try:
            values = [index(v) for v in (disks, local_groups, local_group_size, global_parities)]
        except TypeError:
            raise InvalidConfig("Stripe parameters must be integers: " +
                                str((disks, local_groups, local_group_size, global_parities)))
        self = super(StripeConfig, cls).__new__(cls, *values)
        self._check()
        return self

    def _check(self):
        if self.disks <= 0 or self.local_groups <= 0 or self.local_group_size <= 0:
            raise InvalidConfig("disks, local_groups and local_group_size must be positive: "
                                + str(tuple(self)))
        if self.global_parities < 0:
            raise InvalidConfig("global_parities must not be negative: " + str(tuple(self)))
        if self.stripe_length > self.disks:
            raise InvalidConfig("stripe length " + str(self.stripe_length) +
                                " exceeds array width " + str(self.disks))

    @property
    def stripe_length(self):
        return self.local_groups * self.local_group_size + self.global_parities + 1

    def toString(self):
        return "disks=" + str(self.disks) + \
            ", local_groups=" + str(self.local_groups) + \
            ", local_group_size=" + str(self.local_group_size) + \
            ", global_parities=" + str(self.global_parities) + \
            ", stripe_length=" + str(self.stripe_length)


def buildCanonical(config):
    """
    Unshuffled stripe: for every local group its S-1 data codes followed by
    its local parity code, then P global parities, then the empty slot.
    """
    result = []
    for local_group in range(1, config.local_groups + 1):
        result += [local_group] * (config.local_group_size - 1)
        result.append(local_group + config.local_groups)
    result += [G] * config.global_parities
    result.append(E)
    return tuple(result)


def sameLocalGroup(source, failed, local_groups):
    if source <= 0 or failed <= 0:
        return False
    return source == failed or source == failed + local_groups or \
        failed == source + local_groups


if __name__ == "__main__":
    config = StripeConfig(24, 3, 7, 1)
    print(config.toString())
    print(buildCanonical(config))
