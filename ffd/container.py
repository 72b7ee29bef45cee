# coding: utf8

import logging
import struct

from .protocol import (
    EndOfData, FieldTooBig, NumberOutOfRange, ProtocolError, StreamError, Repr, FVLN, String, U64, repr_of
)


logger = logging.getLogger(__name__)

HEADER = struct.Struct('<HH')

# Запись с тегом меньше порога завершает тело документа, остаток считается подписью.
LOW_TAG_THRESHOLD = 100

MAX_PAYLOAD_SIZE = 0xFFFF


def _check_tag(tag):
    if not 0 <= tag <= 0xFFFF:
        raise NumberOutOfRange('tag {} does not fit into 16 bits'.format(tag))


class Container(object):
    """
    Multi-map from a 16-bit tag to the list of its raw payloads plus an uninterpreted trailer.

    Payloads under the same tag keep their insertion order, tags are always serialized in ascending order.
    """

    def __init__(self, trailer=b''):
        self._records = {}
        self.trailer = bytes(trailer)

    @classmethod
    def unpack(cls, data):
        """
        Unpack the given sequence of TLV records.
        :param data: packed records, optionally followed by a trailer.
        :raise EndOfData: if a tag, a length or a value is cut short.
        :return: new container owning copies of all payloads.
        """
        data = bytes(data)
        container = cls()
        offset = 0

        while offset < len(data):
            if len(data) - offset < HEADER.size:
                raise EndOfData('record header is cut short at offset {}'.format(offset))
            tag, length = HEADER.unpack_from(data, offset)
            offset += HEADER.size

            value = data[offset:offset + length]
            if len(value) != length:
                raise EndOfData('record {} expects {} bytes, {} left'.format(tag, length, len(value)))
            offset += length

            logger.debug('record %d, %d byte(s)', tag, length)
            container._records.setdefault(tag, []).append(value)

            if tag < LOW_TAG_THRESHOLD:
                container.trailer = data[offset:]
                logger.debug('low tag %d stops parsing, %d trailing byte(s)', tag, len(container.trailer))
                break

        return container

    @classmethod
    def read_from(cls, stream):
        try:
            data = stream.read()
        except OSError as e:
            raise StreamError(e) from e
        return cls.unpack(data)

    def pack(self):
        """
        Pack all the records in ascending tag order followed by the trailer.
        :raise FieldTooBig: if some payload does not fit into 16-bit length.
        """
        wr = []
        for tag, value in self.iter_raw():
            if len(value) > MAX_PAYLOAD_SIZE:
                raise FieldTooBig('record {} has {} bytes'.format(tag, len(value)))
            wr.append(HEADER.pack(tag, len(value)))
            wr.append(value)
        wr.append(self.trailer)
        return b''.join(wr)

    def get(self, field):
        values = self._records.get(field.tag)
        if not values:
            return None
        return field.unpack(values[0])

    def get_all(self, field):
        return [field.unpack(value) for value in self._records.get(field.tag, ())]

    def set(self, field, value):
        self._records[field.tag] = [field.pack(value)]

    def push(self, field, value):
        if not field.multi:
            raise TypeError('{!r} is not a repeatable field'.format(field))
        self._records.setdefault(field.tag, []).append(field.pack(value))

    def remove(self, field):
        return self.remove_raw(field.tag)

    def contains(self, field):
        return self.contains_raw(field.tag)

    def get_raw(self, tag):
        values = self._records.get(tag)
        if not values:
            return None
        return values[0]

    def get_all_raw(self, tag):
        return list(self._records.get(tag, ()))

    def set_raw(self, tag, *values):
        _check_tag(tag)
        self._records[tag] = [bytes(value) for value in values]

    def push_raw(self, tag, value):
        _check_tag(tag)
        self._records.setdefault(tag, []).append(bytes(value))

    def remove_raw(self, tag):
        return self._records.pop(tag, None) is not None

    def contains_raw(self, tag):
        return bool(self._records.get(tag))

    def tags(self):
        return sorted(tag for tag, values in self._records.items() if values)

    def iter_raw(self):
        for tag in sorted(self._records):
            for value in self._records[tag]:
                yield tag, value

    def first_object(self):
        """
        Find the first payload, in ascending tag order, that is known to hold a nested container and decodes as one.
        :return: nested container or None.
        """
        for tag in self.tags():
            if repr_of(tag) != Repr.OBJECT:
                continue
            try:
                return Container.unpack(self._records[tag][0])
            except ProtocolError as e:
                logger.debug('record %d is not a valid object: %s', tag, e)
        return None

    def fill_missing(self, other):
        """
        Copy the records of `other` whose tags are absent here. Present tags are left untouched.
        """
        for tag in other.tags():
            if not self.contains_raw(tag):
                self._records[tag] = list(other._records[tag])

    def canonical(self):
        records = tuple(
            (tag, tuple(_canonical_payload(tag, value) for value in self._records[tag])) for tag in self.tags()
        )
        return records, self.trailer

    def __eq__(self, other):
        if not isinstance(other, Container):
            return NotImplemented
        return self.canonical() == other.canonical()

    def __ne__(self, other):
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    __hash__ = None

    def __repr__(self):
        items = ', '.join(
            '{}: [{}]'.format(tag, ', '.join(_render(tag, value) for value in self._records[tag]))
            for tag in self.tags()
        )
        if self.trailer:
            return 'Container({{{}}}, trailer={!r})'.format(items, self.trailer)
        return 'Container({{{}}})'.format(items)


def _canonical_payload(tag, value):
    if repr_of(tag) != Repr.OBJECT:
        return value
    try:
        return Container.unpack(value).canonical()
    except ProtocolError:
        return value


def _render(tag, value):
    ty = repr_of(tag)
    try:
        if ty == Repr.INT:
            return str(U64.unpack(value))
        if ty == Repr.FLOAT:
            return repr(FVLN.unpack(value).to_float())
        if ty == Repr.STRING:
            return repr(String.unpack(value))
        if ty == Repr.OBJECT:
            return repr(Container.unpack(value))
    except ProtocolError:
        return '<invalid {}>'.format(ty)
    return repr(value)


class STLV(object):
    """
    Nested structure codec: either a plain container or, when `record` is given, a typed record bound to it.
    """
    REPR = Repr.OBJECT

    def __init__(self, record=None):
        self.record = record

    def pack(self, value):
        if self.record is not None and isinstance(value, self.record):
            value = value.to_container()
        if not isinstance(value, Container):
            raise TypeError('container expected, got {!r}'.format(value))
        return value.pack()

    def unpack(self, data):
        container = Container.unpack(data)
        if self.record is None:
            return container
        return self.record.from_container(container)
