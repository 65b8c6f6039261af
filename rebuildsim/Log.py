import os
import logging
from time import strftime

fmt = "%(asctime)s - %(name)s - %(filename)s - %(funcName)s - %(lineno)d - %(message)s"
datefmt = "%Y-%m-%d %H:%M:%S"
fmt_str = logging.Formatter(fmt, datefmt)

info_logger = logging.getLogger('rebuildsim.info')
error_logger = logging.getLogger('rebuildsim.error')
info_logger.setLevel(logging.INFO)
error_logger.setLevel(logging.INFO)


def setupLogging(log_dir=None):
    """
    Attach handlers once per process. With a log directory the records go to
    timestamped info/error files, otherwise to stderr.
    """
    if info_logger.handlers or error_logger.handlers:
        return

    if log_dir:
        if not os.path.isdir(log_dir):
            os.makedirs(log_dir)
        ts = strftime("%Y%m%d.%H.%M.%S")
        info_handler = logging.FileHandler(os.path.join(log_dir, "info-" + ts + ".log"))
        error_handler = logging.FileHandler(os.path.join(log_dir, "error-" + ts + ".log"))
    else:
        info_handler = logging.StreamHandler()
        error_handler = logging.StreamHandler()

    info_handler.setLevel(logging.INFO)
    error_handler.setLevel(logging.INFO)
    info_handler.setFormatter(fmt_str)
    error_handler.setFormatter(fmt_str)

    info_logger.addHandler(info_handler)
    error_logger.addHandler(error_handler)
