# coding: utf8

import logging

from .container import Container, HEADER, MAX_PAYLOAD_SIZE
from .protocol import EndOfData, InvalidLength, StreamError


logger = logging.getLogger(__name__)

MESSAGE_FISCAL_SIGN_SIZE = 8


class Document(object):
    """
    Framed fiscal document: tag, body length, body records and the signature that follows the body.
    """

    def __init__(self, tag, data=b'', signature=b''):
        self.tag = tag
        self.data = bytes(data)
        self.signature = bytes(signature)

    @classmethod
    def unpack(cls, data):
        """
        Split the raw document into its header, body and trailing signature.
        :param data: raw document.
        :raise EndOfData: if the header or the body is cut short.
        :return: framed document.
        """
        data = bytes(data)
        if len(data) < HEADER.size:
            raise EndOfData('document header is cut short')
        tag, length = HEADER.unpack_from(data)
        body = data[HEADER.size:HEADER.size + length]
        if len(body) != length:
            raise EndOfData('document {} expects {} body bytes, {} left'.format(tag, length, len(body)))
        signature = data[HEADER.size + length:]
        logger.debug('document %d, %d body byte(s), %d signature byte(s)', tag, length, len(signature))
        return cls(tag, body, signature)

    @classmethod
    def read_from(cls, stream):
        try:
            data = stream.read()
        except OSError as e:
            raise StreamError(e) from e
        return cls.unpack(data)

    def pack(self):
        if len(self.data) > MAX_PAYLOAD_SIZE:
            raise InvalidLength('document body has {} bytes'.format(len(self.data)))
        return HEADER.pack(self.tag, len(self.data)) + self.data + self.signature

    def body(self):
        return Container.unpack(self.data)

    def to_container(self):
        container = Container(trailer=self.signature)
        container.set_raw(self.tag, self.data)
        return container

    @classmethod
    def from_container(cls, container):
        tags = container.tags()
        if len(tags) != 1 or len(container.get_all_raw(tags[0])) != 1:
            raise InvalidLength('framed document must hold exactly one record, got {}'.format(len(tags)))
        return cls(tags[0], container.get_raw(tags[0]), container.trailer)

    def message_fiscal_sign(self):
        if len(self.signature) != MESSAGE_FISCAL_SIGN_SIZE:
            return None
        return self.signature

    def set_message_fiscal_sign(self, sign):
        if len(sign) != MESSAGE_FISCAL_SIGN_SIZE:
            raise InvalidLength('message fiscal sign must be {} bytes'.format(MESSAGE_FISCAL_SIGN_SIZE))
        self.signature = bytes(sign)

    def __eq__(self, other):
        if not isinstance(other, Document):
            return NotImplemented
        return (self.tag, self.data, self.signature) == (other.tag, other.data, other.signature)

    __hash__ = None

    def __repr__(self):
        return 'Document({}, {} byte(s), signature={!r})'.format(self.tag, len(self.data), self.signature)
