'''
Tests for sacreader
'''
import io
import sys
import unittest

import numpy
from testfixtures import LogCapture

from sacformat.core import sac_h
from sacformat.core.sac_h import SacIOError
from sacformat.core.sacreader import Reader, data2_present
from sacformat.core.trace import Trace
from sacformat.core.tests.test_base import (LogTestCase, TempDirTestCase,
                                            corrupt_sac_bytes,
                                            gen_fake_trace)

OTHER_BYTEORDER = 'big' if sys.byteorder == 'little' else 'little'


class TestData2Present(unittest.TestCase):

    def test_data2_present(self):
        self.assertTrue(data2_present(False, 1))
        self.assertTrue(data2_present(False, sac_h.UNSET_INT))
        self.assertTrue(data2_present(True, 2))
        self.assertFalse(data2_present(True, 1))
        self.assertFalse(data2_present(True, sac_h.UNSET_INT))


class TestBoundaries(TempDirTestCase, LogTestCase):

    def read(self, buf):
        return Trace.read(self.write_bytes('test.sac', buf))

    def assertReadFails(self, buf, msg):
        with self.assertRaises(SacIOError) as cm:
            self.read(buf)
        self.assertEqual(str(cm.exception), msg)

    def test_missing_file(self):
        path = self.tmpfile('missing.sac')
        with self.assertRaises(SacIOError) as cm:
            Trace.read(path)
        self.assertEqual(str(cm.exception),
                         "{0} could not be read.".format(path))

    def test_header_only(self):
        path = self.tmpfile('header.sac')
        Trace().write(path, legacy=True)
        with open(path, 'rb') as fd:
            self.assertEqual(len(fd.read()), 158 * 4)
        sac = Trace.read(path)
        self.assertEqual(sac.npts, -12345)
        self.assertEqual(sac.nvhdr, 7)
        self.assertEqual(len(sac.data1), 0)

    def test_header_short_by_one_word(self):
        self.assertReadFails(corrupt_sac_bytes(n_hdr=157),
                             "Insufficient filesize for header.")

    def test_empty_file(self):
        self.assertReadFails(b"", "Insufficient filesize for header.")

    def test_data1_short(self):
        self.assertReadFails(corrupt_sac_bytes(npts=100, n_data1=50),
                             "Insufficient filesize for data1.")

    def test_data2_short(self):
        buf = corrupt_sac_bytes(npts=10, leven=False, n_data1=10, n_data2=9)
        self.assertReadFails(buf, "Insufficient filesize for data2.")

    def test_footer_short(self):
        buf = corrupt_sac_bytes(nvhdr=7, npts=10, n_data1=10, n_footer=43)
        self.assertReadFails(buf, "Insufficient filesize for footer.")

    def test_complete_legacy(self):
        sac = self.read(corrupt_sac_bytes(npts=10, n_data1=10))
        self.assertEqual(sac.npts, 10)
        self.assertEqual(sac.nvhdr, 7)
        self.assertTrue(numpy.all(sac.data1 == 0.0))
        self.assertEqual(len(sac.data2), 0)

    def test_complete_with_data2(self):
        sac = self.read(corrupt_sac_bytes(npts=10, leven=False, n_data1=10,
                                          n_data2=10))
        self.assertTrue(numpy.all(sac.data2 == 1.0))

    def test_complete_modern(self):
        sac = self.read(corrupt_sac_bytes(nvhdr=7, npts=10, n_data1=10,
                                          n_footer=44))
        self.assertEqual(sac.delta, 2.0)
        self.assertEqual(sac.sdelta, 2.0)

    def test_one_extra_byte(self):
        self.assertReadFails(
            corrupt_sac_bytes(npts=10, n_data1=10, extra_bytes=1),
            "Filesize exceeds data specification with 1 bytes excess. "
            "Data corruption suspected.")

    def test_extra_words(self):
        self.assertReadFails(
            corrupt_sac_bytes(nvhdr=7, npts=3, n_data1=3, n_footer=44,
                              extra_words=2),
            "Filesize exceeds data specification with 8 bytes excess. "
            "Data corruption suspected.")

    def test_negative_npts(self):
        with self.assertRaises(SacIOError):
            self.read(corrupt_sac_bytes(npts=-5))

    def test_uneven_spectral_reads_as_even(self):
        buf = corrupt_sac_bytes(npts=4, leven=False, iftype=2, n_data1=4,
                                n_data2=4)
        sac = self.read(buf)
        self.assertEqual(sac.iftype, 2)
        self.assertTrue(sac.leven)
        self.assertEqual(sac.npts, 4)
        self.assertEqual(list(sac.data1), [0.0] * 4)
        self.assertEqual(list(sac.data2), [1.0] * 4)

    def test_uneven_time_series_keeps_data2(self):
        buf = corrupt_sac_bytes(npts=3, leven=False, iftype=1, n_data1=3,
                                n_data2=3)
        sac = self.read(buf)
        self.assertFalse(sac.leven)
        self.assertEqual(sac.iftype, 1)
        self.assertEqual(list(sac.data2), [1.0] * 3)


class TestReader(TempDirTestCase, LogTestCase):

    def test_read_file_like(self):
        buf = io.BytesIO()
        gen_fake_trace(npts=20).write(buf)
        buf.seek(0)
        header, data1, data2 = Reader(buf).read()
        self.assertEqual(header['kstnm'], 'Test1')
        self.assertEqual(header['npts'], 20)
        self.assertEqual(len(data1), 20)
        self.assertEqual(len(data2), 0)
        self.assertEqual(data1.dtype, numpy.float64)
        self.assertFalse(buf.closed)

    def test_header_parts(self):
        buf = io.BytesIO(corrupt_sac_bytes(nvhdr=6, npts=0))
        reader = Reader(buf, sys.byteorder)
        reader.open()
        reader.safe_to_read_header()
        self.assertEqual(reader.nwords_after_current(), 158)
        self.assertEqual(reader.read_float_header()['delta'], 0.0)
        self.assertEqual(reader.nwords_after_current(), 88)
        ints = reader.read_int_header()
        self.assertEqual(ints['nvhdr'], 6)
        self.assertEqual(ints['npts'], 0)
        self.assertTrue(reader.read_bool_header()['leven'])
        self.assertEqual(reader.read_char_header()['kstnm'], '')
        reader.safe_to_finish_reading()
        with self.assertRaises(SacIOError):
            reader.safe_to_read_data(1)

    def test_reserved_words_dropped(self):
        reader = Reader(io.BytesIO(corrupt_sac_bytes()), sys.byteorder)
        reader.open()
        header = reader.read_header()
        self.assertNotIn('unused0', header)
        self.assertNotIn('scale', header)
        self.assertEqual(set(header),
                         set(sac_h.SAC_MAP) - set(sac_h.DATA_KEYS))

    def test_byte_swapped(self):
        buf = corrupt_sac_bytes(npts=4, n_data2=0, n_data1=4,
                                byteorder=OTHER_BYTEORDER)
        with LogCapture() as log:
            header, data1, data2 = Reader(io.BytesIO(buf)).read()
            self.assertIn('byte swapped', log.records[0].getMessage())
        self.assertEqual(header['npts'], 4)
        self.assertEqual(header['nvhdr'], 7)

    def test_explicit_byteorder(self):
        sac = gen_fake_trace(npts=8)
        buf = io.BytesIO()
        sac.write(buf, byteorder=OTHER_BYTEORDER)
        buf.seek(0)
        self.assertEqual(Trace.read(buf, byteorder=OTHER_BYTEORDER), sac)

    def test_wrong_byteorder(self):
        """
        Forcing the wrong order reads nonsense npts and fails cleanly.
        """
        buf = io.BytesIO()
        gen_fake_trace(npts=8).write(buf, byteorder=sys.byteorder)
        buf.seek(0)
        with self.assertRaises(SacIOError):
            Trace.read(buf, byteorder=OTHER_BYTEORDER)

    def test_unnamed_stream_logged(self):
        buf = io.BytesIO(corrupt_sac_bytes(npts=2, n_data1=2))
        with LogCapture() as log:
            Trace.read(buf)
        messages = [r.getMessage() for r in log.records]
        self.assertIn("Upgrading <stream> from header version 6 to 7",
                      messages)

    def test_upgrade_logged(self):
        path = self.tmpfile('old.sac')
        gen_fake_trace(npts=4).write(path, legacy=True)
        with LogCapture() as log:
            Trace.read(path)
        messages = [r.getMessage() for r in log.records]
        self.assertIn("Upgrading {0} from header version 6 to 7".format(path),
                      messages)


if __name__ == "__main__":
    unittest.main()
