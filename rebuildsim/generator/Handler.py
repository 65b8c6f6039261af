from rebuildsim.errors import InvalidConfig
from rebuildsim.utils import normalizeName
from rebuildsim.generator.MT19937_64 import MT19937_64
from rebuildsim.generator.Xorshift128 import Xorshift128
from rebuildsim.generator.Xorshift128Plus import Xorshift128Plus


# Returns the generator class, which is instantiated once per stripe with
# that stripe's seed. "identity" returns None and leaves stripes unshuffled.
def getGenerator(name):
    generator_name = normalizeName(name)
    if generator_name in ("mt1993764", "mt", "mt64"):
        generator = MT19937_64
    elif generator_name == "xorshift128":
        generator = Xorshift128
    elif generator_name in ("xorshift128plus", "xorshift128+"):
        generator = Xorshift128Plus
    elif generator_name in ("identity", "none"):
        generator = None
    else:
        raise InvalidConfig("Incorrect generator name: " + name)
    return generator
