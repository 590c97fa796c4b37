#!/usr/bin/env python
#
# A low level SAC library
#
# Constants, the field catalog and the binary layouts of the
# SAC header (158 words) and the version 7 footer (22 doubles).
#

import sys
import math
import types
import construct

from sacformat.core import binary

PROG_VERSION = '2026.292'

WORD_LENGTH = binary.WORD_LENGTH
# First word of data1, also the header length in words
DATA_WORD = 158
HEADER_WORDS = DATA_WORD
FOOTER_WORDS = 44
# Header versions
MODERN_HDR_VERSION = 7
OLD_HDR_VERSION = 6
# Plausible range for nvhdr, used to detect byte swapped files
MAX_HDR_VERSION = 20

# Values marking a header field as unset
UNSET_INT = -12345
UNSET_FLOAT = -12345.0
UNSET_DOUBLE = -12345.0
UNSET_BOOL = False
UNSET_STRING = "-12345"

# Tolerance for float comparisons, data is narrowed to float on write
F_EPS = 2.75e-6

RAD_PER_DEG = math.pi / 180.0
DEG_PER_RAD = 1.0 / RAD_PER_DEG
CIRCLE_DEG = 360.0
# km
EARTH_RADIUS = 6378.14

# Enumerated header values
ICONSTANTS = {
    # iftype, file type
    "ITIME": 1,         # time series
    "IRLIM": 2,         # real & imaginary spectrum
    "IAMPH": 3,         # amplitude & phase spectrum
    "IXY": 4,           # general x vs y
    "IXYZ": 51,         # general xyz (3-D)
    # idep, dependent variable
    "IUNKN": 5,
    "IDISP": 6,         # displacement nm
    "IVEL": 7,          # velocity nm/sec
    "IACC": 8,          # acceleration nm/sec/sec
    "IVOLTS": 50,       # velocity volts
    # iztype, reference time
    "IB": 9,            # start of file
    "IDAY": 10,         # 0000 of GMT day
    "IO": 11,           # event origin
    "IA": 12,           # first arrival
    "IT0": 13, "IT1": 14, "IT2": 15, "IT3": 16, "IT4": 17,
    "IT5": 18, "IT6": 19, "IT7": 20, "IT8": 21, "IT9": 22,
    # ievtyp, event type
    "INUCL": 37, "IPREN": 38, "IPOSTN": 39, "IQUAKE": 40,
    "IPREQ": 41, "IPOSTQ": 42, "ICHEM": 43, "IOTHER": 44,
    # iqual, data quality
    "IGOOD": 45, "IGLCH": 46, "IDROP": 47, "ILOWSN": 48,
    # isynth
    "IRLDTA": 49,
    # imagtyp, magnitude type
    "IMB": 52, "IMS": 53, "IML": 54, "IMW": 55, "IMD": 56, "IMX": 57,
}

# Catalog categories
FLOAT = 'float'
DOUBLE = 'double'
INT = 'int'
BOOL = 'bool'
STRING = 'string'
DATA = 'data'

FLOAT_KEYS = (
    "depmin", "depmax", "odelta",
    "resp0", "resp1", "resp2", "resp3", "resp4",
    "resp5", "resp6", "resp7", "resp8", "resp9",
    "stel", "stdp", "evel", "evdp", "mag",
    "user0", "user1", "user2", "user3", "user4",
    "user5", "user6", "user7", "user8", "user9",
    "dist", "az", "baz", "gcarc", "depmen", "cmpaz", "cmpinc",
    "xminimum", "xmaximum", "yminimum", "ymaximum")

# Header quantities also kept in double precision (footer)
DOUBLE_KEYS = (
    "delta", "b", "e", "o", "a",
    "t0", "t1", "t2", "t3", "t4", "t5", "t6", "t7", "t8", "t9",
    "f", "stla", "stlo", "evla", "evlo", "sb", "sdelta")

INT_KEYS = (
    "nzyear", "nzjday", "nzhour", "nzmin", "nzsec", "nzmsec",
    "nvhdr", "norid", "nevid", "npts", "nsnpts", "nwfid",
    "nxsize", "nysize", "iftype", "idep", "iztype", "iinst",
    "istreg", "ievreg", "ievtyp", "iqual", "isynth", "imagtyp",
    "imagsrc", "ibody")

BOOL_KEYS = ("leven", "lpspol", "lovrok", "lcalda")

STRING_KEYS = (
    "kstnm", "kevnm", "khole", "ko", "ka",
    "kt0", "kt1", "kt2", "kt3", "kt4", "kt5", "kt6", "kt7", "kt8", "kt9",
    "kf", "kuser0", "kuser1", "kuser2", "kcmpnm", "knetwk", "kdatrd",
    "kinst")

DATA_KEYS = ("data1", "data2")

UNSET = {FLOAT: UNSET_FLOAT,
         DOUBLE: UNSET_DOUBLE,
         INT: UNSET_INT,
         BOOL: UNSET_BOOL,
         STRING: UNSET_STRING}


def _build_sac_map():
    ret = {}
    for category, keys in ((FLOAT, FLOAT_KEYS),
                           (DOUBLE, DOUBLE_KEYS),
                           (INT, INT_KEYS),
                           (BOOL, BOOL_KEYS),
                           (STRING, STRING_KEYS),
                           (DATA, DATA_KEYS)):
        for index, name in enumerate(keys):
            ret[name] = (category, index)
    return types.MappingProxyType(ret)


# name -> (category, index), read only
SAC_MAP = _build_sac_map()


class HeaderError(Exception):
    """
    Raised on an attempt to use a field name that is not in the header.
    """


class SacIOError(Exception):
    """
    Raised if a SAC file can't be read or written, or if its size does
    not match what its header declares.
    """


def lookup(name):
    try:
        return SAC_MAP[name]
    except KeyError:
        raise HeaderError(
            "Attempt to use unknown variable {0} in trace header.".format(
                name))


# SAC binary header, float part (words 0 - 69)


def bin_header_float(byteorder=sys.byteorder):
    f = binary.float_format(byteorder)
    BIN = construct.Struct(
        # Increment between evenly spaced samples (nominal value).
        "delta" / f,
        # Minimum value of dependent variable.
        "depmin" / f,
        # Maximum value of dependent variable.
        "depmax" / f,
        # Multiplying scale factor for dependent variable (internal).
        "scale" / f,
        # Observed increment if different from nominal value.
        "odelta" / f,
        # Beginning value of the independent variable.
        "b" / f,
        # Ending value of the independent variable.
        "e" / f,
        # Event origin time (seconds relative to reference time.)
        "o" / f,
        # First arrival time (seconds relative to reference time.)
        "a" / f,
        "fmt" / f,
        # User defined time picks
        "t0" / f, "t1" / f, "t2" / f, "t3" / f, "t4" / f,
        "t5" / f, "t6" / f, "t7" / f, "t8" / f, "t9" / f,
        # Fini or end of event time (seconds relative to reference time.)
        "f" / f,
        # Instrument response parameters
        "resp0" / f, "resp1" / f, "resp2" / f, "resp3" / f, "resp4" / f,
        "resp5" / f, "resp6" / f, "resp7" / f, "resp8" / f, "resp9" / f,
        # Station latitude (degrees, north positive)
        "stla" / f,
        # Station longitude (degrees, east positive).
        "stlo" / f,
        # Station elevation (meters).
        "stel" / f,
        # Station depth below surface (meters).
        "stdp" / f,
        # Event latitude (degrees north positive).
        "evla" / f,
        # Event longitude (degrees east positive).
        "evlo" / f,
        # Event elevation (meters).
        "evel" / f,
        # Event depth below surface (meters).
        "evdp" / f,
        # Event magnitude.
        "mag" / f,
        # User defined variable storage area
        "user0" / f, "user1" / f, "user2" / f, "user3" / f, "user4" / f,
        "user5" / f, "user6" / f, "user7" / f, "user8" / f, "user9" / f,
        # Station to event distance (km).
        "dist" / f,
        # Event to station azimuth (degrees).
        "az" / f,
        # Station to event azimuth (degrees).
        "baz" / f,
        # Station to event great circle arc length (degrees).
        "gcarc" / f,
        "sb" / f,
        "sdelta" / f,
        # Mean value of dependent variable.
        "depmen" / f,
        # Component azimuth (degrees, clockwise from north).
        "cmpaz" / f,
        # Component incident angle (degrees, from vertical).
        "cmpinc" / f,
        "xminimum" / f,
        "xmaximum" / f,
        "yminimum" / f,
        "ymaximum" / f,
        "unused0" / f, "unused1" / f, "unused2" / f, "unused3" / f,
        "unused4" / f, "unused5" / f, "unused6" / f,
    )
    return BIN

# SAC binary header, int part (words 70 - 104)


def bin_header_int(byteorder=sys.byteorder):
    i = binary.int_format(byteorder)
    BIN = construct.Struct(
        # GMT year corresponding to reference (zero) time in file.
        "nzyear" / i,
        # GMT julian day.
        "nzjday" / i,
        # GMT hour.
        "nzhour" / i,
        # GMT minute.
        "nzmin" / i,
        # GMT second.
        "nzsec" / i,
        # GMT millisecond.
        "nzmsec" / i,
        # Header version number.
        "nvhdr" / i,
        # Origin ID
        "norid" / i,
        # Event ID
        "nevid" / i,
        # Number of points per data component. [required]
        "npts" / i,
        "nsnpts" / i,
        # Waveform ID
        "nwfid" / i,
        "nxsize" / i,
        "nysize" / i,
        "unused7" / i,
        # Type of file [required]: ITIME, IRLIM, IAMPH, IXY
        "iftype" / i,
        # Type of dependent variable: IUNKN, IDISP, IVEL, IVOLTS, IACC
        "idep" / i,
        # Reference time equivalence: IUNKN, IB, IDAY, IO, IA, ITn
        "iztype" / i,
        "unused8" / i,
        # Type of recording instrument.
        "iinst" / i,
        # Station geographic region.
        "istreg" / i,
        # Event geographic region.
        "ievreg" / i,
        # Type of event
        "ievtyp" / i,
        # Quality of data
        "iqual" / i,
        # Synthetic data flag [not currently used]: IRLDTA
        "isynth" / i,
        # Magnitude type
        "imagtyp" / i,
        # Source of magnitude information
        "imagsrc" / i,
        # Body and spheroid definition
        "ibody" / i,
        "unused9" / i, "unused10" / i, "unused11" / i, "unused12" / i,
        "unused13" / i, "unused14" / i, "unused15" / i,
    )
    return BIN

# SAC binary header, logical part (words 105 - 109)


def bin_header_bool(byteorder=sys.byteorder):
    BIN = construct.Struct(
        # TRUE if data is evenly spaced. [required]
        "leven" / binary.BoolWord(byteorder),
        # TRUE if station components have a positive polarity
        "lpspol" / binary.BoolWord(byteorder),
        # TRUE if it is okay to overwrite this file on disk.
        "lovrok" / binary.BoolWord(byteorder),
        # TRUE if DIST, AZ, BAZ, and GCARC are to be calculated from
        # station and event coordinates.
        "lcalda" / binary.BoolWord(byteorder),
        "unused16" / binary.BoolWord(byteorder),
    )
    return BIN

# SAC binary header, string part (words 110 - 157)


def bin_header_char(byteorder=sys.byteorder):
    # Strings are byte sequences, byteorder does not apply
    BIN = construct.Struct(
        # Station name.
        "kstnm" / binary.TextWords(2),
        # Event name.
        "kevnm" / binary.TextWords(4),
        # Hole identification if nuclear event.
        "khole" / binary.TextWords(2),
        # Event origin time identification.
        "ko" / binary.TextWords(2),
        # First arrival time identification.
        "ka" / binary.TextWords(2),
        # User defined time pick identifications
        "kt0" / binary.TextWords(2), "kt1" / binary.TextWords(2),
        "kt2" / binary.TextWords(2), "kt3" / binary.TextWords(2),
        "kt4" / binary.TextWords(2), "kt5" / binary.TextWords(2),
        "kt6" / binary.TextWords(2), "kt7" / binary.TextWords(2),
        "kt8" / binary.TextWords(2), "kt9" / binary.TextWords(2),
        # Fini identification.
        "kf" / binary.TextWords(2),
        # User defined variable storage area.
        "kuser0" / binary.TextWords(2),
        "kuser1" / binary.TextWords(2),
        "kuser2" / binary.TextWords(2),
        # Component name.
        "kcmpnm" / binary.TextWords(2),
        # Name of seismic network.
        "knetwk" / binary.TextWords(2),
        # Date data was read onto computer.
        "kdatrd" / binary.TextWords(2),
        # Generic name of recording instrument
        "kinst" / binary.TextWords(2),
    )
    return BIN

# Version 7 footer, doubles


def bin_footer(byteorder=sys.byteorder):
    d = binary.double_format(byteorder)
    BIN = construct.Struct(
        "delta" / d,
        "b" / d,
        "e" / d,
        "o" / d,
        "a" / d,
        "t0" / d, "t1" / d, "t2" / d, "t3" / d, "t4" / d,
        "t5" / d, "t6" / d, "t7" / d, "t8" / d, "t9" / d,
        "f" / d,
        "evlo" / d,
        "evla" / d,
        "stlo" / d,
        "stla" / d,
        "sb" / d,
        "sdelta" / d,
    )
    return BIN


def _keys(layout):
    return tuple(sc.name for sc in layout.subcons)


class SAC_part(object):
    """
    One section of the SAC header (or the footer). Holds a value for
    every word of the section, reserved words included, and converts
    between those values and bytes.
    """
    layout = None
    unset = None
    __keys__ = ()

    def __init__(self):
        for k in self.__keys__:
            self.__dict__[k] = self.unset

    @classmethod
    def size(cls):
        return cls.layout().sizeof()

    def set(self, keyval):
        for k in keyval.keys():
            if k in self.__keys__:
                self.__dict__[k] = keyval[k]
            else:
                raise HeaderError(
                    "Attempt to set unknown variable {0} in {1}.".format(
                        k, self.__class__.__name__))

    def values(self):
        return dict((k, self.__dict__[k]) for k in self.__keys__)

    def get(self, byteorder=sys.byteorder):
        t = self.layout(byteorder)

        return t.build(self.values())

    def parse(self, buf, byteorder=sys.byteorder):
        t = self.layout(byteorder)
        container = t.parse(buf)
        self.set(dict((k, container[k]) for k in self.__keys__))

        return self.values()


class SAC_float(SAC_part):
    layout = staticmethod(bin_header_float)
    unset = UNSET_FLOAT
    __keys__ = _keys(bin_header_float())


class SAC_int(SAC_part):
    layout = staticmethod(bin_header_int)
    unset = UNSET_INT
    __keys__ = _keys(bin_header_int())


class SAC_bool(SAC_part):
    layout = staticmethod(bin_header_bool)
    unset = UNSET_BOOL
    __keys__ = _keys(bin_header_bool())


class SAC_char(SAC_part):
    layout = staticmethod(bin_header_char)
    unset = UNSET_STRING
    __keys__ = _keys(bin_header_char())


class SAC_footer(SAC_part):
    layout = staticmethod(bin_footer)
    unset = UNSET_DOUBLE
    __keys__ = _keys(bin_footer())


# Header sections in file order
HEADER_PARTS = (SAC_float, SAC_int, SAC_bool, SAC_char)


def is_reserved(key):
    """
    True for header words that carry no catalog field.
    """
    return key not in SAC_MAP
