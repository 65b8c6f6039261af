from rebuildsim.errors import InvalidConfig
from rebuildsim.utils import normalizeName
from rebuildsim.seedhash.FNV import FNV
from rebuildsim.seedhash.Multiplicative import Multiplicative


def getSeedHash(name):
    hash_name = normalizeName(name)
    if hash_name in ("fnv", "fnv1a", "fnv1a64"):
        seed_hash = FNV()
    elif hash_name in ("multiplicative", "kernel"):
        seed_hash = Multiplicative()
    else:
        raise InvalidConfig("Incorrect seed hash name: " + name)
    return seed_hash
