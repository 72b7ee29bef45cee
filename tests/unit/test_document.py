# CODING: UTF8

import datetime
import io
import unittest

import ffd
from ffd import fields as f
from ffd.documents import FiscalReport, OperatorAck, MessageToFn

from samples import FISCAL_REPORT


class TestDocument(unittest.TestCase):
    def test_unpack(self):
        document = ffd.Document.unpack(FISCAL_REPORT)

        self.assertEqual(1, document.tag)
        self.assertEqual(259, len(document.data))
        self.assertEqual(bytes.fromhex('810673fca34b28720000'), document.signature)
        self.assertIsNone(document.message_fiscal_sign())
        self.assertEqual(FISCAL_REPORT, document.pack())

    def test_body(self):
        body = ffd.Document.unpack(FISCAL_REPORT).body()

        self.assertEqual(20, len(body.tags()))
        self.assertEqual('999907891234567 ', body.get(f.FISCAL_DRIVE_NUMBER))
        self.assertEqual('120000130000', body.get(f.KKT_REG_ID))
        self.assertEqual('112233445566', body.get(f.USER_INN))
        self.assertEqual(1, body.get(f.FISCAL_DOCUMENT_NUMBER))
        self.assertEqual(datetime.datetime(2016, 4, 13, 14, 14), body.get(f.DATE_TIME))
        self.assertEqual(bytes.fromhex('21041c6b81a4'), body.get(f.FISCAL_SIGN))
        self.assertFalse(body.get(f.AUTO_MODE))
        self.assertTrue(body.get(f.TAXATION_TYPE).general)
        self.assertEqual('ООО "МММ"', body.get(f.USER))
        self.assertEqual('Москва, Зеленый проспект, д.66 корп. 2', body.get(f.RETAIL_PLACE_ADDRESS))
        self.assertEqual('ОФД-тест', body.get(f.OFD_NAME))
        self.assertEqual('СИС. АДМИНИСТРАТОР', body.get(f.OPERATOR))
        self.assertEqual('0620000001', body.get(f.KKT_NUMBER))
        self.assertEqual(b'111234', body.get_raw(1049))

    def test_read_from(self):
        self.assertEqual(ffd.Document.unpack(FISCAL_REPORT), ffd.Document.read_from(io.BytesIO(FISCAL_REPORT)))

    def test_unpack_cut_header(self):
        with self.assertRaises(ffd.EndOfData):
            ffd.Document.unpack(b'\x01')

    def test_unpack_cut_body(self):
        with self.assertRaises(ffd.EndOfData):
            ffd.Document.unpack(b'\x01\x00\x05\x00ab')

    def test_pack_body_too_long(self):
        self.assertEqual(4 + 0xffff, len(ffd.Document(3, b'x' * 0xffff).pack()))
        with self.assertRaises(ffd.InvalidLength):
            ffd.Document(3, b'x' * 0x10000).pack()

    def test_container(self):
        document = ffd.Document(3, b'\x28\x04\x01\x00\x01', b'\x00' * 8)
        container = document.to_container()

        self.assertEqual([3], container.tags())
        self.assertEqual(document.pack(), container.pack())
        self.assertEqual(document, ffd.Document.from_container(container))

    def test_from_container_with_several_records(self):
        container = ffd.Container()
        container.set_raw(3, b'')
        container.set_raw(5, b'')
        with self.assertRaises(ffd.InvalidLength):
            ffd.Document.from_container(container)

    def test_message_fiscal_sign(self):
        document = ffd.Document(3)
        document.set_message_fiscal_sign(b'\x01' * 8)
        self.assertEqual(b'\x01' * 8, document.message_fiscal_sign())
        with self.assertRaises(ffd.InvalidLength):
            document.set_message_fiscal_sign(b'\x01' * 3)


class TestUnpackDocument(unittest.TestCase):
    def test_missing_mandatory_fields(self):
        # Документ ФФД 1.0 не содержит номер версии ФФД (тег 1209).
        with self.assertRaises(ffd.InvalidFormat):
            ffd.unpack_document(FISCAL_REPORT)
        with self.assertRaises(ffd.InvalidFormat):
            FiscalReport.unpack(FISCAL_REPORT)

    def test_unknown_code(self):
        with self.assertRaises(ffd.InvalidFormat):
            ffd.unpack_document(b'\x63\x00\x00\x00')

    def test_cut_code(self):
        with self.assertRaises(ffd.EndOfData):
            ffd.unpack_document(b'\x07')

    def test_operator_ack(self):
        ack = OperatorAck(
            ofd_inn='7704358518',
            date_time=datetime.datetime(2016, 4, 13, 14, 14),
            fiscal_drive_number='9999078900001234',
            fiscal_document_number=1,
            message_to_fn=MessageToFn(ofd_response_code=ffd.OfdResponse.SUCCESS),
        )
        data = ack.pack()

        actual = ffd.unpack_document(data)

        self.assertIsInstance(actual, OperatorAck)
        self.assertEqual(data, actual.raw_data)
        self.assertEqual('7704358518', actual.ofd_inn)
        self.assertEqual(ffd.OfdResponse.SUCCESS, actual.message_to_fn.ofd_response_code)


if __name__ == '__main__':
    unittest.main()
