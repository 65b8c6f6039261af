import pytest

from rebuildsim.errors import InvalidConfig
from rebuildsim.generator.Handler import getGenerator
from rebuildsim.generator.MT19937_64 import MT19937_64
from rebuildsim.generator.SplitMix64 import SplitMix64
from rebuildsim.generator.Xorshift128 import Xorshift128
from rebuildsim.generator.Xorshift128Plus import Xorshift128Plus

GENERATORS = [MT19937_64, Xorshift128, Xorshift128Plus]


def take(stream, n):
    return [stream.nextValue() for _ in range(n)]


def test_mt19937_64_default_seed():
    mt = MT19937_64(5489)
    assert take(mt, 3) == [14514284786278117030, 4620546740167642908,
                           13109570281517897720]


def test_mt19937_64_ten_thousandth_value():
    # value required of std::mt19937_64 by the C++ standard, spans many twists
    mt = MT19937_64(5489)
    values = take(mt, 10000)
    assert values[-1] == 9981545732273789042


def test_mt19937_64_seed_42():
    assert take(MT19937_64(42), 3) == [13930160852258120406, 11788048577503494824,
                                       13874630024467741450]


def test_splitmix64():
    assert take(SplitMix64(0), 2) == [0xe220a8397b1dcdaf, 0x6e789e6aa1b965f4]


def test_xorshift128():
    assert take(Xorshift128(0), 3) == [18130743053673777301, 8567843375582434143,
                                       14843810315546028060]
    assert take(Xorshift128(42), 3) == [6630635096469074137, 15937671988991781590,
                                        17513042843594470701]


def test_xorshift128plus():
    assert take(Xorshift128Plus(0), 3) == [18401257598216456881, 6679806265443826002,
                                           8572058604621795811]
    assert take(Xorshift128Plus(42), 3) == [12618900322348487378, 13639555000553200875,
                                            10127226059668577270]


@pytest.mark.parametrize("generator", GENERATORS)
def test_same_seed_same_stream(generator):
    seed = 0xa8c7f832281a39c5
    assert take(generator(seed), 50) == take(generator(seed), 50)


@pytest.mark.parametrize("generator", GENERATORS)
def test_values_are_64_bit(generator):
    for value in take(generator(2**64 - 1), 700):
        assert 0 <= value < 2**64


@pytest.mark.parametrize("generator", GENERATORS)
def test_different_seeds_differ(generator):
    assert take(generator(1), 4) != take(generator(2), 4)


@pytest.mark.parametrize("name,expected", [
    ("mt19937_64", MT19937_64),
    ("MT", MT19937_64),
    ("xorshift128", Xorshift128),
    ("xorshift128plus", Xorshift128Plus),
    ("xorshift128+", Xorshift128Plus),
    ("identity", None),
])
def test_handler(name, expected):
    assert getGenerator(name) is expected


def test_handler_rejects_unknown_name():
    with pytest.raises(InvalidConfig):
        getGenerator("lcg")
