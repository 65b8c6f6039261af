from rebuildsim.errors import InvalidConfig

KB = 1024
MB = 1024 * KB
GB = 1024 * MB
TB = 1024 * GB

UNITS = {"": 1, "B": 1, "KB": KB, "MB": MB, "GB": GB, "TB": TB}

MASK64 = 0xFFFFFFFFFFFFFFFF
MASK32 = 0xFFFFFFFF


def normalizeName(string):
    return string.strip().lower().replace('-', '').replace('_', '')


# "128KB" -> 131072, "73 gb" -> 78383153152. Binary units only.
def parseSize(string):
    s = string.strip().upper().replace(' ', '')
    i = len(s)
    while i > 0 and not s[i - 1].isdigit():
        i -= 1
    number, unit = s[:i], s[i:]
    if number == "" or not number.isdigit() or unit not in UNITS:
        raise InvalidConfig("Invalid size: " + string)

    return int(number) * UNITS[unit]


def splitRange(total, shards):
    """
    Cut [0, total) into at most `shards` contiguous (start, end) ranges whose
    lengths differ by at most one.
    """
    if shards < 1:
        raise InvalidConfig("Shard count must be positive!")
    shards = min(shards, total) if total > 0 else 1
    base, extra = divmod(total, shards)

    ranges = []
    start = 0
    for i in range(shards):
        end = start + base + (1 if i < extra else 0)
        ranges.append((start, end))
        start = end
    return ranges
