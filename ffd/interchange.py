# coding: utf8

import base64
import json
import os

import jsonschema
from jsonschema import ValidationError

from .container import Container
from .document import Document
from .fields import FIELDS, by_tag
from .protocol import InvalidFormat, NumberOutOfRange, ProtocolError, Repr


# Имя тега зависит от родителя: в отчёте о текущем состоянии ресурс ключей называется иначе.
NAME_OVERRIDES = {
    (21, 1213): 'keyResource',
}

# Служебные ключи документа, которые не являются тегами.
SERVICE_KEYS = ('code', 'messageFiscalSign', 'rawData')

VERSIONS = {1: '1.0', 2: '1.05', 3: '1.1', 4: '1.2'}


def group_by_name(fields):
    """
    Группируем теги по name - т.к. поле неуникальное, то возможны коллизии. В этом случае в значение пишем list
    всех соответствующих полей.
    :param fields: исходный dict tag -> Field
    :return: dict name -> list of Field
    """
    result = {}
    for tag in sorted(fields):
        field = fields[tag]
        if field.name is not None:
            result.setdefault(field.name, []).append(field)
    return result


def _name_of(field, parent):
    return NAME_OVERRIDES.get((parent, field.tag)) or field.name or str(field.tag)


def _select_field(key, parent):
    """
    workaround для решения проблемы протокола
    # один name может использоваться несколькими тегами (по протоколу ФНС)
    # в этом случае выбираем нужный тег на основе родительского - проверяем есть ли он в списке
    """
    for (parent_tag, tag), name in NAME_OVERRIDES.items():
        if name == key and parent_tag == parent:
            return by_tag(tag)

    if key.isdigit():
        return by_tag(int(key))

    candidates = group_by_name(FIELDS).get(key)
    if not candidates:
        raise InvalidFormat('unknown field name {!r}'.format(key))
    if len(candidates) == 1:
        return candidates[0]

    for field in candidates:
        if field.parents and parent in field.parents:
            return field
    for field in candidates:
        if not field.parents:
            return field

    # если соответствие не найдено, то кидаем ошибку - это лучше, чем неправильно зашифровать ответ
    raise ProtocolError('cannot find a tag for {} with parent {}'.format(key, parent))


def _value_to_json(field, payload):
    value = field.unpack(payload)
    if isinstance(value, Container):
        return container_to_json(value, parent=field.tag)
    return field.codec.to_json(value)


def container_to_json(container, parent=None):
    """
    Convert the container into the JSON exchange form.
    :param container: records to convert.
    :param parent: tag of the enclosing record, None for a document body.
    :return: dict name -> value, repeatable fields are lists.
    """
    doc = {}
    for tag in container.tags():
        payloads = container.get_all_raw(tag)
        field = by_tag(tag)
        if field is None:
            values = [base64.b64encode(payload).decode('ascii') for payload in payloads]
            doc[str(tag)] = values if len(values) > 1 else values[0]
            continue

        values = [_value_to_json(field, payload) for payload in payloads]
        doc[_name_of(field, parent)] = values if field.multi or len(values) > 1 else values[0]
    return doc


def _value_from_json(field, value):
    if isinstance(value, dict):
        if field.repr != Repr.OBJECT:
            raise InvalidFormat('tag {} does not hold nested records'.format(field.tag))
        return field.padding.apply(json_to_container(value, parent=field.tag).pack())
    if field.repr == Repr.OBJECT:
        raise InvalidFormat('tag {} holds nested records, got {!r}'.format(field.tag, value))
    return field.pack(field.codec.from_json(value))


def json_to_container(doc, parent=None):
    """
    Build a container from the JSON exchange form.
    :param doc: valid JSON document as object.
    :param parent: value of parent tag. None for root element.
    :return: container with the records in the order they are listed.
    """
    container = Container()
    for key, value in doc.items():
        items = value if isinstance(value, list) else [value]
        field = _select_field(key, parent)
        if field is None:
            for item in items:
                container.push_raw(int(key), base64.b64decode(item))
            continue

        for item in items:
            container.push_raw(field.tag, _value_from_json(field, item))
    return container


def document_to_json(document):
    """
    Convert the framed document into the JSON exchange form with the service keys.
    :param document: framed document.
    :raise InvalidFormat: if the document tag is not a known document code.
    :return: dict with the single key naming the document.
    """
    field = by_tag(document.tag)
    if field is None or field.repr != Repr.OBJECT or field.name is None:
        raise InvalidFormat('unknown document code {}'.format(document.tag))

    body = container_to_json(document.body(), parent=document.tag)
    body['code'] = document.tag
    sign = document.message_fiscal_sign()
    if sign is not None:
        body['messageFiscalSign'] = int.from_bytes(sign, 'big')
    body['rawData'] = base64.b64encode(document.pack()).decode('ascii')
    return {field.name: body}


def json_to_document(doc):
    if len(doc) != 1:
        raise InvalidFormat('exactly one document expected, got {}'.format(len(doc)))
    (name, body), = doc.items()
    candidates = [f for f in group_by_name(FIELDS).get(name, ()) if f.tag < 100]
    if not candidates:
        raise InvalidFormat('unknown document {!r}'.format(name))
    tag = candidates[0].tag

    code = body.get('code', tag)
    if code != tag:
        raise NumberOutOfRange('document code {} differs from {}'.format(code, tag))

    records = dict((key, value) for key, value in body.items() if key not in SERVICE_KEYS)
    signature = b''
    if body.get('messageFiscalSign') is not None:
        try:
            signature = body['messageFiscalSign'].to_bytes(8, 'big')
        except OverflowError:
            raise NumberOutOfRange('message fiscal sign does not fit into 8 bytes')
    return Document(tag, json_to_container(records, parent=tag).pack(), signature)


class NullValidator(object):
    def validate(self, doc: dict, version: str):
        pass


class DocumentValidator(object):
    def __init__(self, versions, path, skip_unknown=False):
        """
        Класс для валидации документов от ККТ по json-схеме.
        :param versions: поддерживаемые версии протокола, например ['1.0', '1.05'].
        :param path: путь до директории, которая содержит все директории со схемами, разбитым по версиям,
        например, схемы для протокола 1.0 должны лежать в <path>/1.0/
        :param skip_unknown: если номер версии отличается от поддерживаемых пропускать валидацию
        """
        self._schemas = {}
        self._skip_unknown = skip_unknown
        for version in versions:
            full_path = os.path.abspath(os.path.join(path, version, 'document.schema.json'))
            with open(full_path, encoding='utf-8') as fh:
                self._schemas[version] = {
                    'root': json.loads(fh.read()),
                    'resolver': jsonschema.RefResolver('file://' + full_path, None)
                }

    def validate(self, doc: dict, version: str):
        """
        Валидация документа на соответствие json схеме протокола
        :param doc: документ в формате обмена.
        :param version: номер версии, например '1.0' или '1.05'
        :return: Exception в случае ошибки валидации
        """
        schema = self._schemas.get(version)
        if schema:
            jsonschema.validate(doc, schema['root'], resolver=schema['resolver'])
        elif not self._skip_unknown:
            raise ValidationError('Version ' + version + ' is unsupported')

    def validate_document(self, document):
        """
        Валидация документа в формате обмена по версии ФФД из тега 1209.
        """
        (body,) = document.values()
        version = VERSIONS.get(body.get('fiscalDocumentFormatVer'), 'unknown')
        self.validate(document, version)
