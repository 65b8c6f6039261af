from rebuildsim.placement.Placement import Placement


class StrideByFootprint(Placement):
    """
    Consecutive stripes are laid end to end, each starting where the previous
    footprint stopped.
    """

    def getName(self):
        return "stride"

    def place(self, stripe_index, stripe_length, disks):
        return (stripe_index * stripe_length) % disks
