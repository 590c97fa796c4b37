import logging


LOGGING_FORMAT = "[%(asctime)s] - %(name)s - %(levelname)s: %(message)s"

# Setup the logger.
logger = logging.getLogger(__name__)
logger.setLevel(logging.DEBUG)
# Prevent propagating to higher loggers.
logger.propagate = 0
# Console log handler. By default any logs of level info and above are
# written to the console
ch = logging.StreamHandler()
ch.setLevel(logging.INFO)
# Add formatter
formatter = logging.Formatter(LOGGING_FORMAT)
ch.setFormatter(formatter)
logger.addHandler(ch)

from sacformat.core.sac_h import SacIOError, HeaderError  # NOQA
from sacformat.core.trace import Trace  # NOQA


def read_sac(infile, byteorder=None):
    """
    Read a SAC file into a Trace
    :type infile: string or binary file like object
    :param byteorder: 'little', 'big' or None to detect
    :raises: SacIOError
    """
    return Trace.read(infile, byteorder=byteorder)


def write_sac(trace, outfile, legacy=False, byteorder=None):
    """
    Write a Trace as a version 7 SAC file, or version 6 if legacy
    :raises: SacIOError
    """
    trace.write(outfile, legacy=legacy, byteorder=byteorder)
