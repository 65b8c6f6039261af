from rebuildsim.placement.Placement import Placement


class RoundRobin(Placement):

    def getName(self):
        return "roundrobin"

    def place(self, stripe_index, stripe_length, disks):
        return stripe_index % disks
