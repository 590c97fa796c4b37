#!/usr/bin/env python
#
# Conversions between SAC binary words and python values.
#
# A word is the 4 raw bytes read from (or written to) a SAC stream.
# Wide values (doubles, 8 and 16 character strings) span consecutive
# words and are composed in stream order.
#

import sys
import construct

PROG_VERSION = '2026.292'

WORD_LENGTH = 4
# Characters removed from both ends of header strings
STRIP_CHARS = "".join(chr(c) for c in range(0x21)) + chr(0x7f)
TEXT_ENCODING = 'latin-1'

INT_FORMATS = {'little': construct.Int32sl, 'big': construct.Int32sb}
UINT_FORMATS = {'little': construct.Int32ul, 'big': construct.Int32ub}
FLOAT_FORMATS = {'little': construct.Float32l, 'big': construct.Float32b}
DOUBLE_FORMATS = {'little': construct.Float64l, 'big': construct.Float64b}


def _format(formats, byteorder):
    try:
        return formats[byteorder]
    except KeyError:
        raise ValueError(
            "byteorder must be 'little' or 'big', not {0!r}".format(
                byteorder))


def int_format(byteorder=sys.byteorder):
    return _format(INT_FORMATS, byteorder)


def uint_format(byteorder=sys.byteorder):
    return _format(UINT_FORMATS, byteorder)


def float_format(byteorder=sys.byteorder):
    return _format(FLOAT_FORMATS, byteorder)


def double_format(byteorder=sys.byteorder):
    return _format(DOUBLE_FORMATS, byteorder)


def word_position(word_number):
    """
    Byte offset of word number `word_number` from the start of the file.
    """
    return word_number * WORD_LENGTH


def split_words(buf):
    """
    Split a buffer into a list of words
    :type buf: bytes
    :rtype: list of bytes
    """
    if len(buf) % WORD_LENGTH:
        raise ValueError(
            "Buffer of {0} bytes is not a whole number of words".format(
                len(buf)))
    return [buf[i:i + WORD_LENGTH] for i in range(0, len(buf), WORD_LENGTH)]


def concat_words(first, second):
    """
    Join two reads into one wider value. `first` is the earlier read
    in the stream; the byte order of the stream decides how the joined
    value is interpreted, never the order of the words.
    """
    return bytes(first) + bytes(second)


def _check_words(buf, nwords):
    if len(buf) != nwords * WORD_LENGTH:
        raise ValueError("Expected {0} bytes, got {1}".format(
            nwords * WORD_LENGTH, len(buf)))


# Integers, two's complement over 32 bits


def int_to_word(value, byteorder=sys.byteorder):
    return int_format(byteorder).build(int(value))


def word_to_int(word, byteorder=sys.byteorder):
    _check_words(word, 1)
    return int_format(byteorder).parse(word)


# IEEE-754 single precision, the bits are copied as is


def float_to_word(value, byteorder=sys.byteorder):
    return float_format(byteorder).build(float(value))


def word_to_float(word, byteorder=sys.byteorder):
    _check_words(word, 1)
    return float_format(byteorder).parse(word)


# IEEE-754 double precision over two words


def double_to_word2(value, byteorder=sys.byteorder):
    return double_format(byteorder).build(float(value))


def word2_to_double(word2, byteorder=sys.byteorder):
    _check_words(word2, 2)
    return double_format(byteorder).parse(word2)


# Booleans live in the least significant bit


def bool_to_word(flag, byteorder=sys.byteorder):
    return uint_format(byteorder).build(1 if flag else 0)


def word_to_bool(word, byteorder=sys.byteorder):
    _check_words(word, 1)
    return bool(uint_format(byteorder).parse(word) & 1)


# Strings


def clean_string(text):
    """
    Cut `text` at the first NUL and strip leading/trailing white space
    and control characters.
    """
    position = text.find('\0')
    if position != -1:
        text = text[:position]
    return text.strip(STRIP_CHARS)


def prep_string(text, width):
    """
    Clean `text` then truncate or right pad it with spaces to `width`
    characters.
    """
    text = clean_string(text)
    if len(text) > width:
        return text[:width]
    return text.ljust(width)


def text_to_bytes(text, width):
    if isinstance(text, bytes):
        text = text.decode(TEXT_ENCODING)
    return prep_string(text, width).encode(TEXT_ENCODING, 'replace')


def bytes_to_text(buf):
    return clean_string(bytes(buf).decode(TEXT_ENCODING))


def text_to_word2(text):
    return text_to_bytes(text, 2 * WORD_LENGTH)


def word2_to_text(word2):
    _check_words(word2, 2)
    return bytes_to_text(word2)


def text_to_word4(text):
    return text_to_bytes(text, 4 * WORD_LENGTH)


def word4_to_text(word4):
    _check_words(word4, 4)
    return bytes_to_text(word4)


# construct adapters used by the header layouts in sac_h


class BoolWord(construct.Adapter):
    """
    Logical header word. Only the low bit is significant.
    """

    def __init__(self, byteorder=sys.byteorder):
        super(BoolWord, self).__init__(uint_format(byteorder))

    def _decode(self, obj, context, path):
        return bool(obj & 1)

    def _encode(self, obj, context, path):
        return 1 if obj else 0


class TextWords(construct.Adapter):
    """
    Fixed width header string of `nwords` words.
    """

    def __init__(self, nwords):
        self.width = nwords * WORD_LENGTH
        super(TextWords, self).__init__(construct.Bytes(self.width))

    def _decode(self, obj, context, path):
        return bytes_to_text(obj)

    def _encode(self, obj, context, path):
        return text_to_bytes(obj, self.width)
