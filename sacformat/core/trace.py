#!/usr/bin/env python
#
# In memory SAC trace.
#
# Header values live in one small array per category, addressed by
# name through sac_h.SAC_MAP. Most fields are plain attributes; npts,
# leven, iftype, the coordinates and the data vectors keep each other
# consistent when they are set:
#
#   len(data1) == max(npts, 0)
#   data2 has npts points when (not leven) or iftype > 1, else it is
#   empty
#   leven False with iftype > 1 never happens: clearing leven unsets
#   iftype, setting iftype > 1 sets leven
#   stla/evla are in [-90, 90], stlo/evlo in (-180, 180]
#

import logging
import numpy

from sacformat.core import geometry
from sacformat.core import sac_h
from sacformat.core import sacfactory
from sacformat.core import sacreader
from sacformat.core.sac_h import (UNSET_INT, UNSET_DOUBLE, UNSET_STRING,
                                  FLOAT, DOUBLE, INT, BOOL, STRING)

PROG_VERSION = '2026.292'
LOGGER = logging.getLogger(__name__)

_NPTS = sac_h.SAC_MAP['npts'][1]
_IFTYPE = sac_h.SAC_MAP['iftype'][1]
_LEVEN = sac_h.SAC_MAP['leven'][1]
_DATA1 = sac_h.SAC_MAP['data1'][1]
_DATA2 = sac_h.SAC_MAP['data2'][1]

LATITUDES = ('stla', 'evla')
LONGITUDES = ('stlo', 'evlo')


def equal_within_tolerance(a, b, tolerance=sac_h.F_EPS):
    """
    True if `a` and `b` (scalars or sequences of the same length)
    differ by no more than `tolerance` everywhere.
    """
    a = numpy.asarray(a, dtype=numpy.float64)
    b = numpy.asarray(b, dtype=numpy.float64)
    if a.shape != b.shape:
        return False
    return bool(numpy.all(numpy.abs(a - b) <= tolerance))


def _resized(data, n):
    """
    Copy of `data` with n points, zero filled at the end.
    """
    ret = numpy.zeros(n, dtype=numpy.float64)
    keep = min(n, len(data))
    ret[:keep] = data[:keep]
    return ret


class Trace (object):
    """
    One SAC trace, header plus data.

    Every header field is an attribute (trace.delta, trace.kstnm, ...).
    A new trace has every field unset (-12345, -12345.0, False or
    "-12345") and no data.
    """

    def __init__(self):
        self._floats = numpy.full(len(sac_h.FLOAT_KEYS), sac_h.UNSET[FLOAT],
                                  dtype=numpy.float32)
        self._doubles = numpy.full(len(sac_h.DOUBLE_KEYS), sac_h.UNSET[DOUBLE],
                                   dtype=numpy.float64)
        self._ints = numpy.full(len(sac_h.INT_KEYS), sac_h.UNSET[INT],
                                dtype=numpy.int32)
        self._bools = [sac_h.UNSET[BOOL]] * len(sac_h.BOOL_KEYS)
        self._strings = [sac_h.UNSET[STRING]] * len(sac_h.STRING_KEYS)
        self._data = [numpy.zeros(0, dtype=numpy.float64)
                      for k in sac_h.DATA_KEYS]

    # Raw storage, no side effects

    def _load(self, category, index):
        if category == FLOAT:
            return float(self._floats[index])
        elif category == DOUBLE:
            return float(self._doubles[index])
        elif category == INT:
            return int(self._ints[index])
        elif category == BOOL:
            return self._bools[index]
        elif category == STRING:
            return self._strings[index]
        return self._data[index].copy()

    def _store(self, category, index, value):
        if category == FLOAT:
            self._floats[index] = value
        elif category == DOUBLE:
            self._doubles[index] = value
        elif category == INT:
            self._ints[index] = int(value)
        elif category == BOOL:
            self._bools[index] = bool(value)
        elif category == STRING:
            self._strings[index] = str(value)
        else:
            self._data[index] = numpy.array(value, dtype=numpy.float64)

    # Consistency between npts, leven, iftype and the data vectors

    def _data2_legal(self):
        return sacreader.data2_present(self._bools[_LEVEN],
                                       self._ints[_IFTYPE])

    def _data_size(self):
        return max(int(self._ints[_NPTS]), 0)

    def _resize_data1(self):
        self._data[_DATA1] = _resized(self._data[_DATA1], self._data_size())

    def _resize_data2(self):
        if self._data2_legal():
            self._data[_DATA2] = _resized(self._data[_DATA2],
                                          self._data_size())
        else:
            self._data[_DATA2] = numpy.zeros(0, dtype=numpy.float64)

    def _follow_data_length(self, data):
        """
        A data vector whose length differs from npts redefines npts.
        Empty data with npts unset is left alone.
        """
        npts = int(self._ints[_NPTS])
        if len(data) == 0 and npts == UNSET_INT:
            return
        if len(data) != npts:
            self.npts = len(data)

    # Generic access

    def get(self, name):
        """
        Value of header field (or data vector) `name`.
        :raises: HeaderError for unknown names
        """
        sac_h.lookup(name)
        return getattr(self, name)

    def set(self, keyval):
        """
        Set fields from a {name: value} dict through their setters.
        :raises: HeaderError for unknown names
        """
        for k in keyval.keys():
            sac_h.lookup(k)
        for k, v in keyval.items():
            setattr(self, k, v)

    def header(self):
        """
        :returns: dict of every scalar header field
        """
        return dict((k, self._load(*sac_h.SAC_MAP[k]))
                    for k in sac_h.SAC_MAP if k not in sac_h.DATA_KEYS)

    # Fields with side effects

    @property
    def npts(self):
        return int(self._ints[_NPTS])

    @npts.setter
    def npts(self, value):
        value = int(value)
        if value < 0 and value != UNSET_INT:
            LOGGER.warning("Ignoring negative npts: {0}".format(value))
            return
        self._ints[_NPTS] = value
        self._resize_data1()
        self._resize_data2()

    @property
    def leven(self):
        return self._bools[_LEVEN]

    @leven.setter
    def leven(self, value):
        value = bool(value)
        self._bools[_LEVEN] = value
        # Unevenly spaced spectral/xy data is not supported
        if not value and self._ints[_IFTYPE] > 1:
            self._ints[_IFTYPE] = UNSET_INT
        self._resize_data2()

    @property
    def iftype(self):
        return int(self._ints[_IFTYPE])

    @iftype.setter
    def iftype(self, value):
        value = int(value)
        self._ints[_IFTYPE] = value
        if value > 1 and not self._bools[_LEVEN]:
            self._bools[_LEVEN] = True
        self._resize_data2()

    @property
    def data1(self):
        return self._data[_DATA1].copy()

    @data1.setter
    def data1(self, value):
        data = numpy.array(value, dtype=numpy.float64).ravel()
        self._data[_DATA1] = data
        self._follow_data_length(data)

    @property
    def data2(self):
        return self._data[_DATA2].copy()

    @data2.setter
    def data2(self, value):
        data = numpy.array(value, dtype=numpy.float64).ravel()
        if len(data) > 0 and not self._data2_legal():
            self._ints[_IFTYPE] = sac_h.ICONSTANTS['IRLIM']
        self._data[_DATA2] = data
        if self._data2_legal():
            self._follow_data_length(data)

    # Derived values

    def frequency(self):
        """
        Sampling frequency, 1 / delta.
        """
        delta = self.delta
        if delta == UNSET_DOUBLE or delta <= 0.0:
            return UNSET_DOUBLE
        return 1.0 / delta

    def date(self):
        """
        Reference date as "year-julianday", e.g. "2023-123".
        """
        if UNSET_INT in (self.nzyear, self.nzjday):
            return UNSET_STRING
        return "{0}-{1:03d}".format(self.nzyear, self.nzjday)

    def time(self):
        """
        Reference time as "hh:mm:ss.msec", e.g. "13:57:34.0".
        """
        parts = (self.nzhour, self.nzmin, self.nzsec, self.nzmsec)
        if UNSET_INT in parts:
            return UNSET_STRING
        return "{0:02d}:{1:02d}:{2:02d}.{3}".format(*parts)

    def calc_geometry(self):
        """
        Fill gcarc, dist, az and baz from the station and event
        coordinates, or unset them if any coordinate is unset.
        """
        coordinates = (self.stla, self.stlo, self.evla, self.evlo)
        if UNSET_DOUBLE in coordinates:
            self.gcarc = sac_h.UNSET_FLOAT
            self.dist = sac_h.UNSET_FLOAT
            self.az = sac_h.UNSET_FLOAT
            self.baz = sac_h.UNSET_FLOAT
            return

        stla, stlo, evla, evlo = coordinates
        arc = geometry.gcarc(evla, evlo, stla, stlo)
        self.gcarc = arc
        self.dist = arc * sac_h.EARTH_RADIUS * sac_h.RAD_PER_DEG
        self.az = geometry.azimuth(evla, evlo, stla, stlo)
        self.baz = geometry.azimuth(stla, stlo, evla, evlo)

    # Comparison

    def __eq__(self, other):
        if not isinstance(other, Trace):
            return NotImplemented
        return (numpy.array_equal(self._floats, other._floats) and
                numpy.array_equal(self._doubles, other._doubles) and
                numpy.array_equal(self._ints, other._ints) and
                self._bools == other._bools and
                self._strings == other._strings and
                all(equal_within_tolerance(mine, theirs)
                    for mine, theirs in zip(self._data, other._data)))

    __hash__ = None

    def __repr__(self):
        return "<Trace {0}.{1}.{2} npts={3}>".format(
            self.knetwk, self.kstnm, self.kcmpnm, self.npts)

    # I/O

    @classmethod
    def from_header(cls, header, data1, data2):
        """
        Build a trace from decoded values. Values are stored as read,
        then iftype and the coordinates go through their setters so a
        file with leven false and iftype > 1 reads as evenly spaced.
        """
        trace = cls()
        for k, v in header.items():
            trace._store(sac_h.SAC_MAP[k][0], sac_h.SAC_MAP[k][1], v)
        trace._data[_DATA1] = numpy.asarray(data1, dtype=numpy.float64)
        trace._data[_DATA2] = numpy.asarray(data2, dtype=numpy.float64)
        if 'iftype' in header:
            trace.iftype = header['iftype']
        for k in LATITUDES + LONGITUDES:
            if k in header:
                setattr(trace, k, header[k])
        return trace

    @classmethod
    def read(cls, infile, byteorder=None):
        """
        Read a SAC file.
        :param infile: path or binary file like object
        :param byteorder: 'little', 'big' or None to detect
        :raises: SacIOError, no trace is built if any part of the file
        is missing or there are bytes left over
        """
        header, data1, data2 = sacreader.Reader(infile, byteorder).read()
        return cls.from_header(header, data1, data2)

    def write(self, outfile, legacy=False, byteorder=None):
        """
        Write as version 7, or version 6 if `legacy`.
        :raises: SacIOError
        """
        sacfactory.Writer(self, legacy=legacy,
                          byteorder=byteorder).write(outfile)


def _field_property(name):
    category, index = sac_h.SAC_MAP[name]

    def fget(self):
        return self._load(category, index)

    def fset(self, value):
        self._store(category, index, value)

    return property(fget, fset, doc="SAC header field {0}".format(name))


def _coordinate_property(name, limit):
    index = sac_h.SAC_MAP[name][1]

    def fget(self):
        return float(self._doubles[index])

    def fset(self, value):
        value = float(value)
        if value != UNSET_DOUBLE:
            value = limit(value)
        self._doubles[index] = value

    return property(fget, fset, doc="SAC header field {0}".format(name))


for _name in LATITUDES:
    setattr(Trace, _name, _coordinate_property(_name, geometry.limit_90))
for _name in LONGITUDES:
    setattr(Trace, _name, _coordinate_property(_name, geometry.limit_180))
for _name in sac_h.SAC_MAP:
    if not hasattr(Trace, _name):
        setattr(Trace, _name, _field_property(_name))
del _name
