#!/usr/bin/env python

#
# Read a SAC file
#
# Every section is size checked before it is read so a short or
# padded file fails with a SacIOError instead of a partial trace.
#

import os
import sys
import logging
import numpy as np

from sacformat.core import binary
from sacformat.core import sac_h
from sacformat.core.sac_h import SacIOError

PROG_VERSION = '2026.292'
LOGGER = logging.getLogger(__name__)


def data_dtype(byteorder):
    if byteorder == 'little':
        return np.dtype('<f4')
    return np.dtype('>f4')


def file_name(f):
    """
    Path, or the name of a file object, for messages. Streams without a
    name are "<stream>".
    """
    if hasattr(f, 'read') or hasattr(f, 'write'):
        return getattr(f, 'name', '<stream>')
    return f


def data2_present(leven, iftype):
    """
    Unevenly spaced data and spectral or xy files carry a second
    data component.
    """
    return (not leven) or iftype > 1


class Reader (object):
    """
    Decode one SAC file.
    :param infile: path to a SAC file or a binary file like object
    :param byteorder: 'little' or 'big', None to detect from nvhdr
    """

    def __init__(self, infile=None, byteorder=None):
        self.infile = infile
        self.FH = None
        self.owns_fh = False
        self.end = 0
        self.byteorder = byteorder

    @property
    def name(self):
        return file_name(self.infile)

    def open(self):
        if hasattr(self.infile, 'read'):
            self.FH = self.infile
            self.owns_fh = False
        else:
            try:
                self.FH = open(self.infile, 'rb')
            except (IOError, OSError, TypeError):
                self.FH = None
                raise SacIOError(
                    "{0} could not be read.".format(self.infile))
            self.owns_fh = True

        start = self.FH.tell()
        self.FH.seek(0, os.SEEK_END)
        self.end = self.FH.tell()
        self.FH.seek(start)

    def close(self):
        if self.FH is not None and self.owns_fh:
            self.FH.close()
        self.FH = None

    def bytes_after_current(self):
        return self.end - self.FH.tell()

    def nwords_after_current(self):
        return self.bytes_after_current() // sac_h.WORD_LENGTH

    def _require_words(self, nwords, section):
        if self.bytes_after_current() < binary.word_position(nwords):
            raise SacIOError(
                "Insufficient filesize for {0}.".format(section))

    def safe_to_read_header(self):
        self._require_words(sac_h.HEADER_WORDS, 'header')

    def safe_to_read_data(self, npts, data2=False):
        self._require_words(npts, 'data2' if data2 else 'data1')

    def safe_to_read_footer(self):
        self._require_words(sac_h.FOOTER_WORDS, 'footer')

    def safe_to_finish_reading(self):
        excess = self.bytes_after_current()
        if excess > 0:
            raise SacIOError(
                "Filesize exceeds data specification with {0} bytes excess. "
                "Data corruption suspected.".format(excess))

    def read_buf(self, size):
        buf = self.FH.read(size)
        if len(buf) != size:
            raise SacIOError(
                "Short read from {0}: wanted {1} bytes, got {2}.".format(
                    self.name, size, len(buf)))

        return buf

    def guess_endianness(self):
        """
        Peek at nvhdr and swap the byte order if the host order gives a
        nonsense version but the swapped order does not.
        """
        self.byteorder = sys.byteorder
        start = self.FH.tell()
        nvhdr_word = sac_h.SAC_float.size() // sac_h.WORD_LENGTH + \
            sac_h.SAC_int.__keys__.index('nvhdr')
        if self.nwords_after_current() <= nvhdr_word:
            return

        self.FH.seek(start + binary.word_position(nvhdr_word))
        word = self.read_buf(sac_h.WORD_LENGTH)
        self.FH.seek(start)
        other = 'big' if sys.byteorder == 'little' else 'little'
        version = binary.word_to_int(word, sys.byteorder)
        swapped = binary.word_to_int(word, other)
        if not 0 <= version <= sac_h.MAX_HDR_VERSION and \
                0 < swapped <= sac_h.MAX_HDR_VERSION:
            LOGGER.debug("{0} is byte swapped, reading as {1} endian".format(
                self.name, other))
            self.byteorder = other

    def read_part(self, part):
        buf = self.read_buf(part.size())

        return part().parse(buf, self.byteorder)

    def read_float_header(self):
        return self.read_part(sac_h.SAC_float)

    def read_int_header(self):
        return self.read_part(sac_h.SAC_int)

    def read_bool_header(self):
        return self.read_part(sac_h.SAC_bool)

    def read_char_header(self):
        return self.read_part(sac_h.SAC_char)

    def read_header(self):
        """
        Read the 158 word header.
        :returns: dict of catalog field name to value, reserved words
        dropped and double fields widened from their header floats
        """
        self.safe_to_read_header()
        ret = {}
        for values in (self.read_float_header(),
                       self.read_int_header(),
                       self.read_bool_header(),
                       self.read_char_header()):
            for k, v in values.items():
                if not sac_h.is_reserved(k):
                    ret[k] = v

        return ret

    def read_trace(self, n, data2=False):
        self.safe_to_read_data(n, data2)
        buf = self.read_buf(binary.word_position(n))
        ret = np.frombuffer(buf, dtype=data_dtype(self.byteorder))

        return ret.astype(np.float64)

    def read_footer(self, header):
        """
        Version 7, the doubles at the end of the file replace the header
        floats.
        """
        self.safe_to_read_footer()
        footer = self.read_part(sac_h.SAC_footer)
        header.update(footer)

        return header

    def upgrade_footer(self, header):
        """
        Older versions have no footer. The double fields keep the header
        floats and the trace is treated as version 7 from now on.
        """
        LOGGER.debug("Upgrading {0} from header version {1} to {2}".format(
            self.name, header['nvhdr'], sac_h.MODERN_HDR_VERSION))
        header['nvhdr'] = sac_h.MODERN_HDR_VERSION

        return header

    def footer_reader(self, version):
        if version == sac_h.MODERN_HDR_VERSION:
            return self.read_footer
        return self.upgrade_footer

    def read(self):
        """
        Read the whole file.
        :returns: (header, data1, data2), header is a dict keyed by
        catalog field name
        :raises: SacIOError
        """
        self.open()
        try:
            if self.byteorder is None:
                self.guess_endianness()
            header = self.read_header()
            finish_footer = self.footer_reader(header['nvhdr'])

            npts = header['npts']
            data1 = np.zeros(0, dtype=np.float64)
            data2 = np.zeros(0, dtype=np.float64)
            if npts != sac_h.UNSET_INT:
                if npts < 0:
                    raise SacIOError(
                        "Header of {0} declares a negative npts: {1}.".format(
                            self.name, npts))
                data1 = self.read_trace(npts)
                if data2_present(header['leven'], header['iftype']):
                    data2 = self.read_trace(npts, data2=True)

            header = finish_footer(header)
            self.safe_to_finish_reading()
        finally:
            self.close()

        LOGGER.debug("Read {0}: npts {1}, nvhdr {2}, {3} endian".format(
            self.name, header['npts'], header['nvhdr'], self.byteorder))

        return header, data1, data2
