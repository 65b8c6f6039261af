from collections import Counter

import pytest

from rebuildsim.Stripe import shuffle, nextStripe
from rebuildsim.generator.MT19937_64 import MT19937_64
from rebuildsim.generator.Xorshift128 import Xorshift128
from rebuildsim.generator.Xorshift128Plus import Xorshift128Plus
from rebuildsim.layout.StripeConfig import StripeConfig, buildCanonical, E
from rebuildsim.seedhash.FNV import FNV
from rebuildsim.seedhash.Multiplicative import Multiplicative


class ConstantStream(object):

    def __init__(self, value):
        self.value = value

    def nextValue(self):
        return self.value


GENERATORS = [MT19937_64, Xorshift128, Xorshift128Plus]
HASHES = [FNV(), Multiplicative()]


def test_shuffle_zero_stream():
    # j is always 0: position 0 rotates through every slot
    assert shuffle("abcd", ConstantStream(0)) == ["b", "c", "d", "a"]


def test_shuffle_uses_modulo():
    # 7 % 4 = 3, 7 % 3 = 1, 7 % 2 = 1
    assert shuffle("abcd", ConstantStream(7)) == ["a", "c", "b", "d"]


def test_shuffle_draws_one_value_per_swap():
    class CountingStream(ConstantStream):
        calls = 0

        def nextValue(self):
            self.calls += 1
            return 0

    stream = CountingStream(0)
    shuffle(range(23), stream)
    assert stream.calls == 22


def test_shuffle_does_not_touch_input():
    items = (1, 2, 3)
    shuffle(items, ConstantStream(0))
    assert items == (1, 2, 3)


@pytest.mark.parametrize("generator", GENERATORS)
@pytest.mark.parametrize("seed_hash", HASHES)
def test_next_stripe_is_permutation(generator, seed_hash):
    config = StripeConfig(24, 3, 7, 1)
    canonical = buildCanonical(config)
    for i in range(200):
        stripe = nextStripe(i, canonical, config, seed_hash, generator)
        assert len(stripe) == config.stripe_length
        assert Counter(stripe) == Counter(canonical)


@pytest.mark.parametrize("generator", GENERATORS)
@pytest.mark.parametrize("seed_hash", HASHES)
def test_next_stripe_is_deterministic(generator, seed_hash):
    config = StripeConfig(24, 3, 7, 1)
    canonical = buildCanonical(config)
    for i in (0, 1, 17, 598015):
        assert nextStripe(i, canonical, config, seed_hash, generator) == \
            nextStripe(i, canonical, config, seed_hash, generator)


def test_next_stripe_varies_with_index():
    config = StripeConfig(24, 3, 7, 1)
    canonical = buildCanonical(config)
    stripes = set(tuple(nextStripe(i, canonical, config, FNV(), MT19937_64))
                  for i in range(50))
    assert len(stripes) > 40


def test_identity_generator_keeps_layout():
    config = StripeConfig(4, 1, 3, 0)
    canonical = buildCanonical(config)
    assert nextStripe(5, canonical, config, FNV(), None) == [1, 1, 2, E]


def test_next_stripe_rejects_foreign_layout():
    config = StripeConfig(24, 3, 7, 1)
    with pytest.raises(ValueError):
        nextStripe(0, (1, 1, 2, E), config, FNV(), MT19937_64)
