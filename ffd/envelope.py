# coding: utf8

"""
Transport envelope the fiscal documents travel in between the cash register and the operator.

message := session header (30 bytes) | frame header (32 bytes) | framed document
"""

import logging
import struct

import crcmod.predefined

from .document import Document
from .protocol import EndOfData, InvalidFormat, InvalidLength, NumberOutOfRange


logger = logging.getLogger(__name__)

SIGNATURE = bytes.fromhex('2a08410a')

crc_ccitt = crcmod.predefined.mkPredefinedCrcFun('crc-ccitt-false')


class SessionHeader(object):
    MAGIC_ID, PVERS_ID, PVERA_ID = range(3)
    MAGIC, = struct.unpack('<I', SIGNATURE)
    PVERS, = struct.unpack('<H', bytes.fromhex('81a2'))
    PVERA = {
        struct.unpack('<H', bytes.fromhex('0001'))[0],
        struct.unpack('<H', bytes.fromhex('0002'))[0]
    }
    STRUCT = struct.Struct('<IHH16sHHH')

    def __init__(self, pva, fs_id, length, flags, crc):
        # Версия A-протокола.
        self.pva = pva
        # Номер ФН.
        self.fs_id = fs_id
        # Размер тела сообщения.
        self.length = length
        self.flags = flags
        self.crc = crc

    def pack(self):
        return self.STRUCT.pack(
            self.MAGIC,
            self.PVERS,
            self.pva,
            self.fs_id,
            self.length,
            self.flags,
            self.crc
        )

    @classmethod
    def unpack_from(cls, data):
        if len(data) < cls.STRUCT.size:
            raise EndOfData('session header must be {} bytes, got {}'.format(cls.STRUCT.size, len(data)))
        if len(data) != cls.STRUCT.size:
            raise InvalidLength('session header must be {} bytes, got {}'.format(cls.STRUCT.size, len(data)))
        pack = cls.STRUCT.unpack(data)

        if pack[cls.MAGIC_ID] != cls.MAGIC:
            raise InvalidFormat('invalid protocol signature')
        if pack[cls.PVERS_ID] != cls.PVERS:
            raise InvalidFormat('invalid session protocol version')
        if pack[cls.PVERA_ID] not in cls.PVERA:
            raise InvalidFormat('invalid application protocol version')

        return cls(pack[cls.PVERA_ID], *pack[cls.PVERA_ID + 1:])

    def __str__(self):
        return 'Заголовок Сообщения сеансового уровня\n' \
               '{:24}: {:#010x}\n' \
               '{:24}: {:#06x}\n' \
               '{:24}: {:#06x}\n' \
               '{:24}: {}\n' \
               '{:24}: {}\n' \
               '{:24}: {:#b}\n' \
               '{:24}: {}'.format(
                                'Сигнатура', self.MAGIC,
                                'Версия S-протокола', self.PVERS,
                                'Версия A-протокола', self.pva,
                                'Номер ФН', self.fs_id,
                                'Размер тела', self.length,
                                'Флаги', self.flags,
                                'Проверочный код (CRC)', self.crc)


class FrameHeader(object):
    MSGTYPE_ID, VERSION_ID = (2, 4)
    MSGTYPE = 0xa5
    VERSION = 1
    STRUCT = struct.Struct('<HHBBB2s8s3s12s')

    def __init__(self, length, crc, doctype, extra1, devnum, docnum, extra2):
        # Длина контейнера вместе с заголовком.
        self.length = length
        # Проверочный код.
        self.crc = crc
        # Тип сообщения протокола.
        self.msgtype = self.MSGTYPE
        # Тип фискального документа.
        self.doctype = doctype
        # Версия протокола.
        self.version = self.VERSION
        # Служебные данные 1.
        self.extra1 = extra1
        # Номер ФН.
        self.devnum = devnum
        # Номер ФД, 3 байта big-endian.
        self._docnum = docnum
        # Служебные данные 2.
        self.extra2 = extra2

    def pack(self):
        return self.STRUCT.pack(
            self.length,
            self.crc,
            self.msgtype,
            self.doctype,
            self.version,
            self.extra1,
            self.devnum,
            self._docnum,
            self.extra2
        )

    @classmethod
    def unpack_from(cls, data):
        if len(data) < cls.STRUCT.size:
            raise EndOfData('frame header must be {} bytes, got {}'.format(cls.STRUCT.size, len(data)))
        if len(data) != cls.STRUCT.size:
            raise InvalidLength('frame header must be {} bytes, got {}'.format(cls.STRUCT.size, len(data)))
        pack = cls.STRUCT.unpack(data)

        if pack[cls.VERSION_ID] != cls.VERSION:
            raise InvalidFormat('invalid protocol version')

        header = cls(pack[0], pack[1], pack[3], *pack[5:])
        header.msgtype = pack[cls.MSGTYPE_ID]
        return header

    @staticmethod
    def pack_docnum(number):
        if not 0 <= number < 1 << 24:
            raise NumberOutOfRange('document number {} does not fit into 3 bytes'.format(number))
        return struct.pack('>I', number)[1:]

    def docnum(self):
        return struct.unpack('>I', b'\0' + self._docnum)[0]

    def calculate_crc(self, body):
        pack = self.pack()
        return crc_ccitt(pack[:2] + pack[4:] + body)

    def recalculate_crc(self, body):
        self.crc = self.calculate_crc(body)

    def __str__(self):
        return 'Заголовок Контейнера\n' \
               '{:26}: {}\n' \
               '{:26}: {}\n' \
               '{:26}: {}\n' \
               '{:26}: {}\n' \
               '{:26}: {}\n' \
               '{:26}: {}\n' \
               '{:26}: {}\n' \
               '{:26}: {}\n' \
               '{:26}: {}'.format(
                                'Длина', self.length,
                                'Проверочный код', self.crc,
                                'Тип сообщения протокола', self.msgtype,
                                'Тип фискального документа', self.doctype,
                                'Версия протокола', self.version,
                                'Служебные данные 1', self.extra1,
                                'Номер ФН', self.devnum,
                                'Номер ФД', self.docnum(),
                                'Служебные данные 2', self.extra2)


def pack_message(document, fs_id, devnum, docnum, pva=0x0100, flags=0b10100, extra1=b'\x00\x00',
                 extra2=b' ' * 12):
    """
    Wrap the framed document into the frame and session headers.
    :param document: framed document.
    :param fs_id: fiscal drive number as it is put into the session header, 16 bytes.
    :param devnum: fiscal drive number as it is put into the frame header, 8 bytes.
    :param docnum: fiscal document number.
    :return: message ready to be sent.
    """
    body = document.pack()
    header = FrameHeader(
        length=FrameHeader.STRUCT.size + len(body),
        crc=0,
        doctype=document.tag,
        extra1=extra1,
        devnum=devnum,
        docnum=FrameHeader.pack_docnum(docnum),
        extra2=extra2
    )
    if header.length > 0xFFFF:
        raise InvalidLength('message body has {} bytes'.format(header.length))
    header.recalculate_crc(body)
    container = header.pack() + body

    session = SessionHeader(pva=pva, fs_id=fs_id, length=len(container), flags=flags, crc=0)
    return session.pack() + container


def unpack_message(data, verify_crc=True):
    """
    Unwrap the message.
    :param data: whole message with both headers.
    :param verify_crc: whether the frame checksum must match the frame contents.
    :raise InvalidFormat: on signature, version or checksum mismatch.
    :return: session header, frame header and the framed document.
    """
    data = bytes(data)
    session = SessionHeader.unpack_from(data[:SessionHeader.STRUCT.size])
    container = data[SessionHeader.STRUCT.size:]
    if len(container) < session.length:
        raise EndOfData('message body expects {} bytes, {} left'.format(session.length, len(container)))
    container = container[:session.length]

    header = FrameHeader.unpack_from(container[:FrameHeader.STRUCT.size])
    body = container[FrameHeader.STRUCT.size:header.length]
    if header.length != len(container):
        raise InvalidLength('frame length {} differs from session body length {}'.format(header.length, len(container)))

    logger.debug('message for document %d (%d), %d byte(s)', header.docnum(), header.doctype, len(body))
    if verify_crc:
        crc = header.calculate_crc(body)
        if crc != header.crc:
            raise InvalidFormat('frame checksum {:#06x} differs from {:#06x}'.format(header.crc, crc))

    return session, header, Document.unpack(body)
