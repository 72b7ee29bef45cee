# CODING: UTF8

import datetime
import struct
import unittest

import ffd
from ffd import fields as f
from ffd.documents import Item, OpenShift, OperatorAck, MessageToFn


def open_shift(**kwargs):
    values = dict(
        fiscal_document_format_ver=ffd.FfdVersion.V1_05,
        user_inn='7704358518',
        date_time=datetime.datetime(2020, 1, 2, 3, 4, 5),
        shift_number=5,
        kkt_reg_id='0000000001012345',
        fiscal_document_number=42,
        fiscal_drive_number='9999078900001234',
        fiscal_sign=bytes.fromhex('21041c6b81a4'),
        kkt_version='3.0',
        document_kkt_version=ffd.FfdVersion.V1_05,
    )
    values.update(kwargs)
    return OpenShift(**values)


class SignedAck(ffd.DocumentRecord):
    FIELDS = (
        ffd.Header('code', code=ffd.FormCode.OPERATOR_CONFIRMATION),
        ffd.Tagged('ofd_inn', f.OFD_INN, optional=True),
        ffd.Signature('message_fiscal_sign', optional=False),
    )


class TestSchemaDefinition(unittest.TestCase):
    def test_duplicate_attribute(self):
        with self.assertRaises(ffd.SchemaError):
            class Broken(ffd.Record):
                FIELDS = (
                    ffd.Tagged('user', f.USER),
                    ffd.Tagged('user', f.OPERATOR),
                )

    def test_duplicate_tag(self):
        with self.assertRaises(ffd.SchemaError):
            class Broken(ffd.Record):
                FIELDS = (
                    ffd.Tagged('user', f.USER),
                    ffd.Tagged('user_name', f.USER),
                )

    def test_optional_and_repeated(self):
        with self.assertRaises(ffd.SchemaError):
            ffd.Tagged('phones', f.PROVIDER_PHONE, optional=True, repeated=True)

    def test_repeated_single_tag(self):
        with self.assertRaises(ffd.SchemaError):
            ffd.Tagged('users', f.USER, repeated=True)

    def test_document_without_header(self):
        with self.assertRaises(ffd.SchemaError):
            class Broken(ffd.DocumentRecord):
                FIELDS = (
                    ffd.Tagged('user', f.USER),
                )

    def test_document_with_two_signatures(self):
        with self.assertRaises(ffd.SchemaError):
            class Broken(ffd.DocumentRecord):
                FIELDS = (
                    ffd.Header('code'),
                    ffd.Signature('first'),
                    ffd.Signature('second'),
                )

    def test_nested_record_with_header(self):
        with self.assertRaises(ffd.SchemaError):
            class Broken(ffd.Record):
                FIELDS = (
                    ffd.Header('code'),
                )

    def test_unexpected_attribute(self):
        with self.assertRaises(TypeError):
            MessageToFn(ofd_response=0)


class TestRecord(unittest.TestCase):
    def test_defaults(self):
        record = OpenShift()
        self.assertEqual(ffd.FormCode.SHIFT_START_REPORT, record.code)
        self.assertIsNone(record.user)
        self.assertIsNone(record.message_fiscal_sign)

    def test_pack_unpack(self):
        expected = open_shift(user='ООО "МММ"', message_fiscal_sign=b'\x00' * 7 + b'\x01')
        actual = OpenShift.unpack(expected.pack())
        self.assertEqual(expected, actual)
        self.assertEqual(b'\x00' * 7 + b'\x01', actual.to_document().message_fiscal_sign())

    def test_document(self):
        document = open_shift().to_document()
        self.assertEqual(2, document.tag)
        self.assertEqual(b'', document.signature)
        self.assertEqual(42, document.body().get(f.FISCAL_DOCUMENT_NUMBER))
        self.assertEqual('7704358518', document.body().get(f.USER_INN))

    def test_header_framing(self):
        record = open_shift()
        body = record.to_container().pack()
        self.assertEqual(struct.pack('<HH', 2, len(body)) + body, record.pack())

    def test_missing_mandatory_field_on_pack(self):
        with self.assertRaises(ffd.InvalidFormat):
            open_shift(shift_number=None).pack()

    def test_missing_mandatory_field_on_unpack(self):
        document = open_shift().to_document()
        container = document.body()
        container.remove(f.KKT_REG_ID)
        with self.assertRaises(ffd.InvalidFormat):
            OpenShift.from_document(ffd.Document(2, container.pack()))

    def test_header_mismatch(self):
        document = open_shift().to_document()
        with self.assertRaises(ffd.NumberOutOfRange):
            OpenShift.from_document(ffd.Document(5, document.data))

    def test_invalid_signature(self):
        document = open_shift().to_document()
        with self.assertRaises(ffd.InvalidLength):
            OpenShift.from_document(ffd.Document(2, document.data, b'\x01\x02'))

    def test_nested_record(self):
        item = Item(
            name='Хлеб',
            sum=5000,
            price=2500,
            quantity=ffd.VarFloat(2, 0),
            nds=ffd.VatType.VAT_10,
            product_type=ffd.ItemType.PRODUCT,
            payment_type=ffd.PaymentMethod.FULL,
        )
        actual = Item.unpack(item.pack())
        self.assertEqual(item, actual)
        self.assertEqual([], actual.items_industry_details)
        self.assertIsNone(actual.provider_data)

    def test_nested_record_field(self):
        ack = OperatorAck(
            ofd_inn='7704358518',
            date_time=datetime.datetime(2020, 1, 2, 3, 4, 5),
            fiscal_drive_number='9999078900001234',
            fiscal_document_number=42,
            message_to_fn=MessageToFn(ofd_response_code=ffd.OfdResponse.SUCCESS),
        )
        document = ack.to_document()
        nested = document.body().get(f.MESSAGE_TO_FN)
        self.assertEqual(ffd.OfdResponse.SUCCESS, nested.get(f.OFD_RESPONSE_CODE))

        actual = OperatorAck.from_document(document)
        self.assertEqual(ack, actual)
        self.assertIsInstance(actual.message_to_fn, MessageToFn)


class TestMandatorySignature(unittest.TestCase):
    def test_pack_unpack(self):
        expected = SignedAck(ofd_inn='7704358518', message_fiscal_sign=b'\x00' * 7 + b'\x01')
        self.assertEqual(expected, SignedAck.unpack(expected.pack()))

    def test_unpack_without_signature(self):
        with self.assertRaises(ffd.InvalidLength):
            SignedAck.from_document(ffd.Document(7, b''))

    def test_pack_without_signature(self):
        with self.assertRaises(ffd.InvalidLength):
            SignedAck(ofd_inn='7704358518').pack()


if __name__ == '__main__':
    unittest.main()
