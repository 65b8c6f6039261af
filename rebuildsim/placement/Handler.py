from rebuildsim.errors import InvalidConfig
from rebuildsim.utils import normalizeName
from rebuildsim.placement.RoundRobin import RoundRobin
from rebuildsim.placement.StrideByFootprint import StrideByFootprint


def getPlacement(name):
    placement_name = normalizeName(name)
    if placement_name in ("roundrobin", "rr"):
        placement = RoundRobin()
    elif placement_name in ("stride", "stridebyfootprint"):
        placement = StrideByFootprint()
    else:
        raise InvalidConfig("Incorrect placement name: " + name)
    return placement
