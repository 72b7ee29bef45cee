# coding: utf8

import argparse
import json
import logging
import sys

from .document import Document
from .documents import unpack_document
from .envelope import SIGNATURE, unpack_message
from .interchange import document_to_json
from .protocol import ProtocolError


def dump(path, as_json=False, verify_crc=True):
    """
    Распаковать документ из файла и вывести его в stdout. Файл может содержать как сам документ, так и
    сообщение целиком вместе с заголовками сессии и контейнера.
    """
    with open(path, 'rb') as fh:
        data = fh.read()

    if data.startswith(SIGNATURE):
        session, header, document = unpack_message(data, verify_crc=verify_crc)
        print(session)
        print(header)
    else:
        document = Document.unpack(data)

    if as_json:
        print(json.dumps(document_to_json(document), ensure_ascii=False, indent=4))
    else:
        print(repr(unpack_document(document.pack())))


def main(args=None):
    parser = argparse.ArgumentParser(prog='ffd', description='разбор фискальных документов')
    commands = parser.add_subparsers(dest='command')
    commands.required = True

    parser_dump = commands.add_parser('dump', help='вывести содержимое документа')
    parser_dump.add_argument('file', help='файл с документом или сообщением')
    parser_dump.add_argument('--json', action='store_true', help='вывести документ в формате обмена')
    parser_dump.add_argument('--no-crc', action='store_true', help='не проверять контрольную сумму контейнера')
    parser_dump.add_argument('--verbose', action='store_true', help='отладочный вывод разбора')

    argv = parser.parse_args(args)
    logging.basicConfig(
        level=logging.DEBUG if argv.verbose else logging.WARNING,
        format='%(asctime)s %(name)s %(levelname)s %(message)s'
    )

    try:
        dump(argv.file, as_json=argv.json, verify_crc=not argv.no_crc)
    except (OSError, ProtocolError) as e:
        print('failed to dump {}: {}'.format(argv.file, e), file=sys.stderr)
        return 1
    return 0


if __name__ == '__main__':
    sys.exit(main())
