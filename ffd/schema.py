# coding: utf8

"""
Declarative binding of record attributes to container tags.

A record class lists its attributes in `FIELDS`. Every entry plays exactly one role:

* `Tagged` -- bound to a catalogue field, optional, repeated or mandatory;
* `Default` -- not transmitted, reset to its default on decoding;
* `Header` -- the tag of the enclosing document record;
* `Signature` -- bytes that follow the document body.

The table is checked once, when the class is created.
"""

from .container import Container, STLV
from .document import Document
from .protocol import Field, ByteArray, InvalidFormat, InvalidLength, NumberOutOfRange


class SchemaError(TypeError):
    pass


class Tagged(object):
    def __init__(self, attr, field, optional=False, repeated=False, record=None):
        """
        :param attr: record attribute name.
        :param field: catalogue field the attribute is stored under.
        :param optional: whether the tag may be absent.
        :param repeated: whether the attribute is a list of all the values stored under the tag.
        :param record: record class the nested container is bound to.
        """
        if optional and repeated:
            raise SchemaError('{}: field cannot be both optional and repeated'.format(attr))
        if repeated and not field.multi:
            raise SchemaError('{}: tag {} is not repeatable'.format(attr, field.tag))
        if record is not None:
            field = Field(
                field.tag, STLV(record), field.padding, field.multi, field.name, field.desc, field.parents
            )
        self.attr = attr
        self.field = field
        self.optional = optional
        self.repeated = repeated

    @property
    def tag(self):
        return self.field.tag

    def default(self):
        return [] if self.repeated else None

    def read(self, container):
        if self.repeated:
            return container.get_all(self.field)
        value = container.get(self.field)
        if value is None and not self.optional:
            raise InvalidFormat('mandatory field {} (tag {}) is missing'.format(self.attr, self.tag))
        return value

    def write(self, container, value):
        if self.repeated:
            for item in value or ():
                container.push(self.field, item)
        elif value is not None:
            container.set(self.field, value)
        elif not self.optional:
            raise InvalidFormat('mandatory field {} (tag {}) is not set'.format(self.attr, self.tag))


class Default(object):
    def __init__(self, attr, factory=lambda: None):
        self.attr = attr
        self.factory = factory

    def default(self):
        return self.factory()

    def read(self, container):
        return self.factory()

    def write(self, container, value):
        pass


class Header(object):
    """
    Tag of the framed document. With a `code` the record accepts that tag only.
    """

    def __init__(self, attr, code=None):
        self.attr = attr
        self.code = code

    def default(self):
        return self.code

    def read(self, container):
        return self.code

    def write(self, container, value):
        pass

    def check(self, tag):
        if self.code is not None and tag != self.code:
            raise NumberOutOfRange('document tag {} differs from {}'.format(tag, self.code))
        return tag


class Signature(object):
    """
    Bytes following the document body that are not covered by its length.
    """

    def __init__(self, attr, codec=None, optional=True):
        self.attr = attr
        self.codec = codec or ByteArray(8)
        self.optional = optional

    def default(self):
        return None

    def read(self, container):
        return None

    def write(self, container, value):
        pass

    def decode(self, data):
        if not data and self.optional:
            return None
        try:
            return self.codec.unpack(data)
        except (NumberOutOfRange, InvalidFormat) as e:
            raise InvalidLength('invalid signature: {}'.format(e)) from e

    def encode(self, value):
        if value is None:
            if self.optional:
                return b''
            raise InvalidLength('mandatory signature {} is not set'.format(self.attr))
        return self.codec.pack(value)


class Record(object):
    """
    Typed view of a container. Conversion is all-or-nothing: the first failing field aborts it.
    """
    FIELDS = ()

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        if 'FIELDS' in cls.__dict__:
            cls._check_fields()

    @classmethod
    def _check_fields(cls):
        attrs, tags = set(), set()
        for field in cls.FIELDS:
            if field.attr in attrs:
                raise SchemaError('{}: duplicate attribute {}'.format(cls.__name__, field.attr))
            attrs.add(field.attr)
            if isinstance(field, Tagged):
                if field.tag in tags:
                    raise SchemaError('{}: duplicate tag {}'.format(cls.__name__, field.tag))
                tags.add(field.tag)
        cls._check_roles()

    @classmethod
    def _check_roles(cls):
        for field in cls.FIELDS:
            if isinstance(field, (Header, Signature)):
                raise SchemaError('{}: nested record cannot have {}'.format(cls.__name__, type(field).__name__))

    def __init__(self, **kwargs):
        for field in self.FIELDS:
            setattr(self, field.attr, kwargs.pop(field.attr) if field.attr in kwargs else field.default())
        if kwargs:
            raise TypeError('{}: unexpected attributes {}'.format(type(self).__name__, ', '.join(sorted(kwargs))))

    @classmethod
    def from_container(cls, container):
        record = cls.__new__(cls)
        for field in cls.FIELDS:
            setattr(record, field.attr, field.read(container))
        return record

    def to_container(self):
        container = Container()
        for field in self.FIELDS:
            field.write(container, getattr(self, field.attr))
        return container

    @classmethod
    def unpack(cls, data):
        return cls.from_container(Container.unpack(data))

    def pack(self):
        return self.to_container().pack()

    def __eq__(self, other):
        if type(self) is not type(other):
            return NotImplemented
        return all(getattr(self, f.attr) == getattr(other, f.attr) for f in self.FIELDS)

    __hash__ = None

    def __repr__(self):
        values = ', '.join(
            '{}={!r}'.format(f.attr, getattr(self, f.attr)) for f in self.FIELDS
            if getattr(self, f.attr) not in (None, [])
        )
        return '{}({})'.format(type(self).__name__, values)


class DocumentRecord(Record):
    """
    Top-level record: its header is the document tag and its signature follows the body.
    """

    @classmethod
    def _check_roles(cls):
        headers = [f for f in cls.FIELDS if isinstance(f, Header)]
        if len(headers) != 1:
            raise SchemaError('{}: exactly one header expected, got {}'.format(cls.__name__, len(headers)))
        signatures = [f for f in cls.FIELDS if isinstance(f, Signature)]
        if len(signatures) > 1:
            raise SchemaError('{}: at most one signature expected, got {}'.format(cls.__name__, len(signatures)))

    @classmethod
    def header(cls):
        for field in cls.FIELDS:
            if isinstance(field, Header):
                return field

    @classmethod
    def signature(cls):
        for field in cls.FIELDS:
            if isinstance(field, Signature):
                return field
        return None

    @classmethod
    def from_document(cls, document):
        header = cls.header()
        tag = header.check(document.tag)
        record = cls.from_container(Container.unpack(document.data))
        setattr(record, header.attr, tag)
        signature = cls.signature()
        if signature is not None:
            setattr(record, signature.attr, signature.decode(document.signature))
        return record

    def to_document(self):
        header = self.header()
        tag = getattr(self, header.attr)
        if tag is None:
            raise InvalidFormat('{}: document tag is not set'.format(type(self).__name__))
        header.check(tag)
        signature = self.signature()
        trailer = b''
        if signature is not None:
            trailer = signature.encode(getattr(self, signature.attr))
        return Document(tag, self.to_container().pack(), trailer)

    @classmethod
    def unpack(cls, data):
        return cls.from_document(Document.unpack(data))

    def pack(self):
        return self.to_document().pack()
