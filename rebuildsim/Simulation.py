import os
import sys
from multiprocessing import Pool

from rebuildsim.Accumulator import accumulate, newCounters
from rebuildsim.Configuration import Configuration, CONF_PATH
from rebuildsim.Log import info_logger, error_logger, setupLogging
from rebuildsim.Result import Result
from rebuildsim.Stripe import nextStripe
from rebuildsim.errors import SimulationError
from rebuildsim.layout.StripeConfig import buildCanonical
from rebuildsim.utils import splitRange


def simulateStripes(config, seed_hash, generator, placement, start, end):
    """
    Counters of one contiguous range of stripe indices. Each stripe only
    depends on its own index, so ranges can be summed in any grouping.
    """
    canonical = buildCanonical(config)
    counters = newCounters(config)
    for i in range(start, end):
        stripe = nextStripe(i, canonical, config, seed_hash, generator)
        offset = placement.place(i, config.stripe_length, config.disks)
        accumulate(counters, stripe, offset, config)
    return counters


def _simulateShard(args):
    return simulateStripes(*args)


class Simulation(object):

    def __init__(self, conf):
        if isinstance(conf, Configuration):
            self.conf = conf
        else:
            self.conf = Configuration(conf)

        setupLogging(self.conf.log_dir)
        self.config = self.conf.stripe_config
        self.conf.printAll()

    def run(self, stripes=None, workers=None):
        if stripes is None:
            stripes = self.conf.total_stripes
        if workers is None:
            workers = self.conf.workers

        jobs = [(self.config, self.conf.seed_hash, self.conf.generator, self.conf.placement,
                 start, end) for start, end in splitRange(stripes, workers)]

        if len(jobs) == 1:
            counters = _simulateShard(jobs[0])
        else:
            for job in jobs:
                info_logger.info("shard [" + str(job[-2]) + ", " + str(job[-1]) + ")")
            with Pool(len(jobs)) as pool:
                partials = pool.map(_simulateShard, jobs)
            counters = newCounters(self.config)
            for partial in partials:
                counters += partial

        info_logger.info("simulated " + str(stripes) + " stripes")
        return counters

    def main(self):
        counters = self.run()
        result = Result(counters)
        info_logger.info("Min: " + str(result.min) + ", max: " + str(result.max) +
                         ", (max-min)/max: " + str(result.deviation) + "%")
        return result


def main(argv=None):
    if argv is None:
        argv = sys.argv[1:]
    if len(argv) > 1:
        raise SystemExit("Usage: rebuildsim [conf_path]")

    if not argv:
        conf_path = None
    elif os.path.isabs(argv[0]) or os.path.exists(argv[0]):
        conf_path = argv[0]
    else:
        conf_path = os.path.join(CONF_PATH, argv[0])

    try:
        sim = Simulation(conf_path)
        result = sim.main()
    except SimulationError as e:
        setupLogging()
        error_logger.error(str(e))
        return 1

    print(result.toString())
    return 0


if __name__ == "__main__":
    sys.exit(main())
