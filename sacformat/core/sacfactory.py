#!/usr/bin/env python

#
# Build a SAC file from a trace.
#
# Header (158 words), data1, data2 when the file type needs it and,
# for version 7, the 22 double footer.
#

import sys
import logging
import numpy
import construct

from sacformat.core import sac_h
from sacformat.core.sac_h import SacIOError
from sacformat.core.sacreader import data_dtype, data2_present, file_name

PROG_VERSION = '2026.292'
LOGGER = logging.getLogger(__name__)


class Writer (object):
    """
    Encode a trace. The trace is only read, a legacy write stamps
    version 6 in the file without touching the trace's nvhdr.
    :param trace: sacformat.core.trace.Trace
    :param legacy: write version 6 (no footer) instead of version 7
    :param byteorder: 'little' or 'big'
    """

    def __init__(self, trace, legacy=False, byteorder=None):
        self.trace = trace
        self.legacy = legacy
        if byteorder:
            self.byteorder = byteorder  # Byte order of the output file
        else:
            self.byteorder = sys.byteorder
        if legacy:
            self.version = sac_h.OLD_HDR_VERSION
        else:
            self.version = sac_h.MODERN_HDR_VERSION
        self.init_float_header()
        self.init_int_header()
        self.init_bool_header()
        self.init_char_header()
        self.init_footer()

    def init_float_header(self):
        self.float_header = sac_h.SAC_float()

    def init_int_header(self):
        self.int_header = sac_h.SAC_int()

    def init_bool_header(self):
        self.bool_header = sac_h.SAC_bool()

    def init_char_header(self):
        self.char_header = sac_h.SAC_char()

    def init_footer(self):
        self.footer = sac_h.SAC_footer()

    def _fields(self, part):
        return dict((k, self.trace.get(k)) for k in part.__keys__
                    if not sac_h.is_reserved(k))

    def set_float_header(self):
        f = self._fields(self.float_header)
        # Doubles are narrowed back to single precision for the header
        for k, v in f.items():
            f[k] = float(numpy.float32(v))

        self.float_header.set(f)

    def set_int_header(self):
        i = self._fields(self.int_header)
        i['nvhdr'] = self.version

        self.int_header.set(i)

    def set_bool_header(self):
        self.bool_header.set(self._fields(self.bool_header))

    def set_char_header(self):
        self.char_header.set(self._fields(self.char_header))

    def set_footer(self):
        self.footer.set(self._fields(self.footer))

    def set_headers(self):
        self.set_float_header()
        self.set_int_header()
        self.set_bool_header()
        self.set_char_header()
        self.set_footer()

    def _write_part(self, fd, part, what):
        try:
            buf = part.get(self.byteorder)
        except construct.ConstructError as e:
            raise SacIOError(
                "Failed to write SAC {0}: {1}".format(what, e))

        fd.write(buf)

    def write_float_header(self, fd):
        self._write_part(fd, self.float_header, "float header")

    def write_int_header(self, fd):
        self._write_part(fd, self.int_header, "int header")

    def write_bool_header(self, fd):
        self._write_part(fd, self.bool_header, "logical header")

    def write_char_header(self, fd):
        self._write_part(fd, self.char_header, "char header")

    def write_footer(self, fd):
        self._write_part(fd, self.footer, "footer")

    def write_data_array(self, fd, data):
        # Data is single precision on disk
        array = numpy.asarray(data, dtype=numpy.float64)
        fd.write(array.astype(data_dtype(self.byteorder)).tobytes())

    def write_data(self, fd):
        self.write_data_array(fd, self.trace.data1)
        if data2_present(self.trace.leven, self.trace.iftype):
            self.write_data_array(fd, self.trace.data2)

    def write_stream(self, fd):
        self.set_headers()
        self.write_float_header(fd)
        self.write_int_header(fd)
        self.write_bool_header(fd)
        self.write_char_header(fd)
        self.write_data(fd)
        if self.version == sac_h.MODERN_HDR_VERSION:
            self.write_footer(fd)

    def write(self, outfile):
        """
        Write to a path or to a binary file like object.
        :raises: SacIOError
        """
        if hasattr(outfile, 'write'):
            try:
                self.write_stream(outfile)
            except (IOError, OSError) as e:
                raise SacIOError("{0} cannot be written: {1}".format(
                    file_name(outfile), e))
        else:
            try:
                fd = open(outfile, 'wb')
            except (IOError, OSError, TypeError):
                raise SacIOError("{0} cannot be written.".format(outfile))
            try:
                with fd:
                    self.write_stream(fd)
            except (IOError, OSError) as e:
                raise SacIOError(
                    "{0} cannot be written: {1}".format(outfile, e))

        LOGGER.debug("Wrote {0}: npts {1}, nvhdr {2}, {3} endian".format(
            file_name(outfile), self.trace.npts, self.version,
            self.byteorder))
