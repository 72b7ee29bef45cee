# coding: utf8

import base64
import calendar
import datetime
import decimal
import re
import struct


ENCODING = 'cp866'

EPOCH = datetime.datetime(1970, 1, 1)

_UNSIGNED = re.compile(r'\+?[0-9]+\Z')


class ProtocolError(RuntimeError):
    pass


class EndOfData(ProtocolError):
    def __init__(self, msg='unexpected end of data'):
        super(EndOfData, self).__init__(msg)


class InvalidLength(ProtocolError):
    def __init__(self, msg='invalid length'):
        super(InvalidLength, self).__init__(msg)


class InvalidFormat(ProtocolError):
    def __init__(self, msg='invalid format'):
        super(InvalidFormat, self).__init__(msg)


class NumberOutOfRange(ProtocolError):
    def __init__(self, msg='number out of range'):
        super(NumberOutOfRange, self).__init__(msg)


class InvalidString(ProtocolError):
    def __init__(self, msg='invalid cp866 string'):
        super(InvalidString, self).__init__(msg)


class FieldTooBig(ProtocolError):
    def __init__(self, msg='field too big'):
        super(FieldTooBig, self).__init__(msg)


class StreamError(ProtocolError):
    """
    Wraps an I/O error raised by the file-like object a document is read from.
    """
    def __init__(self, error):
        super(StreamError, self).__init__('io error: {}'.format(error))
        self.error = error


class Repr:
    """
    Display-only classification of a payload, used to render untyped data.
    """
    BYTES = 'bytes'
    FLOAT = 'float'
    INT = 'int'
    STRING = 'string'
    OBJECT = 'object'


class Int(object):
    """
    Represents an unsigned little-endian integer packer/unpacker.

    High-order zero bytes are not transmitted, so zero packs into an empty byte string.
    """
    REPR = Repr.INT

    def __init__(self, width):
        """
        :param width: size of the target integer type in bytes, one of 1, 2, 4 or 8.
        """
        self.width = width
        self.maxval = (1 << (8 * width)) - 1

    def pack(self, data):
        """
        Pack the given value into its trimmed byte representation.
        :param data: non-negative integer that fits into `width` bytes.
        :raise NumberOutOfRange: if the value does not fit.
        :return: packed value.
        >>> U32.pack(0x12345678)
        b'xV4\\x12'
        >>> U32.pack(0)
        b''
        """
        if not isinstance(data, int):
            raise TypeError('integer expected, got {!r}'.format(data))
        if not 0 <= data <= self.maxval:
            raise NumberOutOfRange('{} does not fit into {} byte(s)'.format(data, self.width))
        return struct.pack('<Q', data).rstrip(b'\x00')

    def unpack(self, data):
        if len(data) > self.width:
            raise NumberOutOfRange('integer actual size {} is greater than maximum {}'.format(len(data), self.width))
        return struct.unpack('<Q', bytes(data) + b'\x00' * (8 - len(data)))[0]

    @staticmethod
    def to_json(value):
        return int(value)

    @staticmethod
    def from_json(value):
        return value


U8 = Int(1)
U16 = Int(2)
U32 = Int(4)
U64 = Int(8)


class Bool(object):
    """
    Boolean flag on top of the single-byte integer. Only 0 and 1 are accepted.
    """
    REPR = Repr.INT

    @staticmethod
    def pack(data):
        return U8.pack(1 if data else 0)

    @staticmethod
    def unpack(data):
        value = U8.unpack(data)
        if value not in (0, 1):
            raise NumberOutOfRange('boolean expected, got {}'.format(value))
        return value == 1

    @staticmethod
    def to_json(value):
        return int(value)

    @staticmethod
    def from_json(value):
        return bool(value)


def _parse_unsigned(text):
    if not _UNSIGNED.match(text):
        raise InvalidFormat('{!r} is not an unsigned number'.format(text))
    value = int(text)
    if value > U64.maxval:
        raise InvalidFormat('{!r} does not fit into 64 bits'.format(text))
    return value


class VarFloat(object):
    """
    Decimal value transmitted as a mantissa and the position of the decimal point, counting from the right.
    """

    def __init__(self, mantissa=0, dot_offset=0):
        self.mantissa = mantissa
        self.dot_offset = dot_offset

    @classmethod
    def from_string(cls, text):
        """
        Build a value from its decimal notation.

        Trailing zeros after the decimal point do not contribute to the dot offset.
        >>> VarFloat.from_string('1453.670')
        VarFloat(mantissa=145367, dot_offset=2)
        >>> VarFloat.from_string('42')
        VarFloat(mantissa=42, dot_offset=0)
        """
        if text.count('.') != 1:
            return cls.from_int(_parse_unsigned(text))

        text = text.rstrip('0').rstrip('.')
        mantissa = _parse_unsigned(text.replace('.', ''))
        point = text.find('.')
        dot_offset = len(text) - point - 1 if point >= 0 else 0
        if dot_offset > 0xff:
            raise NumberOutOfRange('too many fractional digits: {}'.format(dot_offset))
        return cls(mantissa, dot_offset)

    @classmethod
    def from_int(cls, value):
        if not 0 <= value <= U64.maxval:
            raise NumberOutOfRange('{} does not fit into 64 bits'.format(value))
        return cls(value, 0)

    @classmethod
    def from_decimal(cls, value):
        return cls.from_string(format(value, 'f'))

    @classmethod
    def from_float(cls, value):
        # repr gives the shortest string that reads back as the same float.
        return cls.from_decimal(decimal.Decimal(repr(value)))

    @classmethod
    def coerce(cls, value):
        if isinstance(value, cls):
            return value
        if isinstance(value, bool):
            raise TypeError('number expected, got {!r}'.format(value))
        if isinstance(value, int):
            return cls.from_int(value)
        if isinstance(value, float):
            return cls.from_float(value)
        if isinstance(value, decimal.Decimal):
            return cls.from_decimal(value)
        if isinstance(value, str):
            return cls.from_string(value)
        raise TypeError('number expected, got {!r}'.format(value))

    def to_float(self):
        return self.mantissa / 10.0 ** self.dot_offset

    def to_decimal(self):
        return decimal.Decimal(self.mantissa).scaleb(-self.dot_offset)

    def __float__(self):
        return self.to_float()

    def __eq__(self, other):
        if not isinstance(other, VarFloat):
            return NotImplemented
        return (self.mantissa, self.dot_offset) == (other.mantissa, other.dot_offset)

    def __hash__(self):
        return hash((self.mantissa, self.dot_offset))

    def __repr__(self):
        return 'VarFloat(mantissa={}, dot_offset={})'.format(self.mantissa, self.dot_offset)

    def __str__(self):
        return str(self.to_decimal())


class FVLN(object):
    REPR = Repr.FLOAT
    STRUCT = struct.Struct('B')

    @classmethod
    def pack(cls, data):
        value = VarFloat.coerce(data)
        if not 0 <= value.dot_offset <= 0xff:
            raise NumberOutOfRange('dot offset {} does not fit into a byte'.format(value.dot_offset))
        return cls.STRUCT.pack(value.dot_offset) + U64.pack(value.mantissa)

    @classmethod
    def unpack(cls, data):
        if len(data) == 0:
            raise EndOfData('decimal value has no dot offset')
        if len(data) > cls.STRUCT.size + U64.width:
            raise NumberOutOfRange('decimal value actual size {} is greater than maximum'.format(len(data)))
        return VarFloat(U64.unpack(data[1:]), data[0])

    @staticmethod
    def to_json(value):
        if value.dot_offset == 0:
            return value.mantissa
        return value.to_float()

    @staticmethod
    def from_json(value):
        return VarFloat.coerce(value)


class String(object):
    REPR = Repr.STRING

    @staticmethod
    def pack(value):
        try:
            return value.encode(ENCODING)
        except UnicodeEncodeError:
            raise InvalidString('{!r} is not representable in {}'.format(value, ENCODING))

    @staticmethod
    def unpack(data):
        try:
            return bytes(data).decode(ENCODING)
        except UnicodeDecodeError:
            raise InvalidString()

    @staticmethod
    def to_json(value):
        return value

    @staticmethod
    def from_json(value):
        return value


class Bytes(object):
    REPR = Repr.BYTES

    @staticmethod
    def pack(value):
        return bytes(value)

    @staticmethod
    def unpack(data):
        return bytes(data)

    @staticmethod
    def to_json(value):
        return base64.b64encode(value).decode('ascii')

    @staticmethod
    def from_json(value):
        return base64.b64decode(value)


class ByteArray(object):
    """
    Fixed-size byte array. In JSON it is either base64 or, for fiscal signs, a big-endian number.
    """
    REPR = Repr.BYTES

    def __init__(self, length, as_number=False):
        self.length = length
        self.as_number = as_number

    def pack(self, value):
        value = bytes(value)
        if len(value) != self.length:
            raise InvalidLength('byte array size {} differs from {}'.format(len(value), self.length))
        return value

    def unpack(self, data):
        if len(data) != self.length:
            raise InvalidLength('byte array size {} differs from {}'.format(len(data), self.length))
        return bytes(data)

    def to_json(self, value):
        if self.as_number:
            return int.from_bytes(value, 'big')
        return base64.b64encode(value).decode('ascii')

    def from_json(self, value):
        if self.as_number:
            try:
                return value.to_bytes(self.length, 'big')
            except OverflowError:
                raise NumberOutOfRange('{} does not fit into {} bytes'.format(value, self.length))
        return base64.b64decode(value)


def to_local_timestamp(value):
    """
    Convert a calendar value into seconds since 1970-01-01 counted in local civil time.

    Aware datetimes contribute their wall-clock reading, the offset is dropped.
    """
    if isinstance(value, int):
        stamp = value
    elif isinstance(value, datetime.datetime):
        stamp = calendar.timegm(value.replace(tzinfo=None).timetuple())
    elif isinstance(value, datetime.date):
        stamp = calendar.timegm(value.timetuple())
    else:
        raise TypeError('date or datetime expected, got {!r}'.format(value))

    if not 0 <= stamp <= U32.maxval:
        raise NumberOutOfRange('{} is out of the local timestamp range'.format(value))
    return stamp


def from_local_timestamp(stamp):
    return EPOCH + datetime.timedelta(seconds=stamp)


class UnixTime(object):
    REPR = Repr.INT

    @staticmethod
    def pack(time):
        return U32.pack(to_local_timestamp(time))

    @staticmethod
    def unpack(data):
        return from_local_timestamp(U32.unpack(data))

    @staticmethod
    def to_json(value):
        return to_local_timestamp(value)

    @staticmethod
    def from_json(value):
        return from_local_timestamp(value)


class Date(UnixTime):
    @staticmethod
    def unpack(data):
        return from_local_timestamp(U32.unpack(data)).date()

    @staticmethod
    def from_json(value):
        return from_local_timestamp(value).date()


class NoPadding(object):
    def __init__(self, maxlen=None):
        self.maxlen = maxlen

    def strip(self, data):
        return self.apply(data)

    def apply(self, data):
        if self.maxlen is not None and len(data) > self.maxlen:
            raise InvalidLength('actual size {} is greater than maximum {}'.format(len(data), self.maxlen))
        return data


class Fixed(object):
    def __init__(self, length):
        self.length = length

    def strip(self, data):
        return self.apply(data)

    def apply(self, data):
        if len(data) != self.length:
            raise InvalidLength('actual size {} differs from {}'.format(len(data), self.length))
        return data


class RightPadded(object):
    """
    Value padded on the right up to `length` bytes with the `fill` byte.
    """

    def __init__(self, length, fill=b'\x00'):
        self.length = length
        self.fill = fill

    def strip(self, data):
        if len(data) != self.length:
            raise InvalidLength('actual size {} differs from {}'.format(len(data), self.length))
        return data.rstrip(self.fill)

    def apply(self, data):
        if len(data) > self.length:
            raise InvalidLength('actual size {} is greater than maximum {}'.format(len(data), self.length))
        return data.ljust(self.length, self.fill)


class Field(object):
    def __init__(self, tag, codec, padding=None, multi=False, name=None, desc='', parents=None):
        """
        Describe a document item as it is assigned by the Federal Tax Service.
        :param tag: numeric tag of the item.
        :param codec: packer/unpacker of the item value.
        :param padding: length policy applied to the packed value.
        :param multi: whether the item may appear several times in the same parent.
        :param name: name of the item in the JSON exchange format, None if there is no such name.
        :param desc: description as it is specified in the format.
        :param parents: tags of the items this one is bound to when its name is not unique.
        """
        self.tag = tag
        self.codec = codec
        self.padding = padding or NoPadding()
        self.multi = multi
        self.name = name
        self.desc = desc
        self.parents = parents

    @property
    def repr(self):
        return self.codec.REPR

    def pack(self, value):
        return self.padding.apply(self.codec.pack(value))

    def unpack(self, data):
        return self.codec.unpack(self.padding.strip(bytes(data)))

    def __repr__(self):
        return 'Field({}, {!r})'.format(self.tag, self.name or self.desc)


FIELDS = {}


def register(*fields):
    for field in fields:
        if field.tag in FIELDS:
            raise ValueError('tag {} is already registered'.format(field.tag))
        FIELDS[field.tag] = field


def by_tag(tag):
    return FIELDS.get(tag)


def repr_of(tag):
    field = FIELDS.get(tag)
    if field is None:
        return Repr.BYTES
    return field.repr
