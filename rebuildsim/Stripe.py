def shuffle(items, stream):
    """
    Fisher-Yates driven by `stream`: for i from n-1 down to 1 swap position i
    with position nextValue() mod (i+1). Modulo bias is accepted.
    """
    result = list(items)
    for i in range(len(result) - 1, 0, -1):
        j = stream.nextValue() % (i + 1)
        result[i], result[j] = result[j], result[i]
    return result


def nextStripe(stripe_index, canonical, config, seed_hash, generator):
    """
    Stripe number `stripe_index`: the canonical layout permuted by a
    `generator` stream seeded with seed_hash.seedFor(stripe_index). A None
    generator leaves the layout as it is.
    """
    if len(canonical) != config.stripe_length:
        raise ValueError("canonical layout does not match " + config.toString())

    if generator is None:
        return list(canonical)
    return shuffle(canonical, generator(seed_hash.seedFor(stripe_index)))
