import configparser
import os

from rebuildsim.errors import InvalidConfig
from rebuildsim.Log import info_logger
from rebuildsim.layout.StripeConfig import StripeConfig
from rebuildsim.seedhash.Handler import getSeedHash
from rebuildsim.generator.Handler import getGenerator
from rebuildsim.placement.Handler import getPlacement
from rebuildsim.utils import parseSize

BASE_PATH = os.environ.get("REBUILDSIM_HOME", os.getcwd())
CONF_PATH = os.path.join(BASE_PATH, "conf")


def getConfParser(conf_file_path):
    conf = configparser.ConfigParser()
    try:
        found = conf.read(conf_file_path)
    except configparser.Error as e:
        raise InvalidConfig("Malformed configuration file " + conf_file_path + ": " + str(e))
    if not found:
        raise InvalidConfig("Can not read configuration file: " + conf_file_path)
    return conf


class Configuration(object):
    path = os.path.join(CONF_PATH, "rebuildsim.conf")

    def __init__(self, path=None):
        if path is None:
            conf_path = Configuration.path
        else:
            conf_path = path
        self.conf = getConfParser(conf_path)

        d = self.conf.defaults()
        if not d:
            raise InvalidConfig("No Default Section!")

        try:
            self.stripe_config = StripeConfig(int(d["disks"]), int(d["local_groups"]),
                                              int(d["local_group_size"]),
                                              int(d["global_parities"]))
            self.workers = int(d.get("workers", "1"))
            stripes = d.get("stripes")
            if stripes is not None:
                self.total_stripes = int(stripes)
            else:
                self.disk_capacity = parseSize(d["disk_capacity"])
                self.stripe_width = parseSize(d["stripe_width"])
                self.total_stripes = self.comStripes()
        except KeyError as e:
            raise InvalidConfig("Missing option: " + str(e))
        except ValueError as e:
            raise InvalidConfig("Invalid option value: " + str(e))

        if self.total_stripes < 0:
            raise InvalidConfig("stripes must not be negative!")
        if self.workers < 1:
            raise InvalidConfig("workers must be positive!")

        self.generator_name = d.get("generator", "mt19937_64")
        self.seed_hash = getSeedHash(d.get("seed_hash", "fnv"))
        self.generator = getGenerator(self.generator_name)
        self.placement = getPlacement(d.get("placement", "roundrobin"))

        self.log_dir = d.get("log_dir") or None

    def comStripes(self):
        if self.stripe_width <= 0:
            raise InvalidConfig("stripe_width must be positive!")
        return self.disk_capacity // self.stripe_width

    def returnAll(self):
        return {"stripe_config": self.stripe_config.toString(),
                "total_stripes": self.total_stripes,
                "seed_hash": self.seed_hash.getName(),
                "generator": self.generator_name,
                "placement": self.placement.getName(),
                "workers": self.workers,
                "log_dir": self.log_dir}

    def printAll(self):
        default_infos = "Default Configurations: \t " + self.stripe_config.toString() + \
                        ", stripes: " + str(self.total_stripes) + \
                        ", seed hash: " + self.seed_hash.getName() + \
                        ", generator: " + self.generator_name + \
                        ", placement: " + self.placement.getName() + \
                        ", workers: " + str(self.workers)

        info_logger.info(default_infos)


if __name__ == "__main__":
    conf = Configuration()
    conf.printAll()
    print(conf.returnAll())
