# CODING: UTF8

import datetime
import decimal
import unittest

import ffd
from ffd import fields as f


class TestInt(unittest.TestCase):
    def test_unpack(self):
        self.assertEqual(1, ffd.U32.unpack(b'\x01\x00\x00\x00'))

    def test_unpack_trimmed(self):
        self.assertEqual(0x123456, ffd.U32.unpack(b'\x56\x34\x12'))
        self.assertEqual(0, ffd.U32.unpack(b''))

    def test_pack_drops_high_zero_bytes(self):
        self.assertEqual(bytes.fromhex('78563412'), ffd.U32.pack(0x12345678))
        self.assertEqual(bytes.fromhex('563412'), ffd.U32.pack(0x123456))
        self.assertEqual(b'', ffd.U32.pack(0))

    def test_pack_byte(self):
        self.assertEqual(b'\x03', ffd.U8.pack(3))

    def test_pack_throws_on_overflow(self):
        with self.assertRaises(ffd.NumberOutOfRange):
            ffd.U8.pack(256)

    def test_pack_throws_on_negative(self):
        with self.assertRaises(ffd.NumberOutOfRange):
            ffd.U32.pack(-1)

    def test_unpack_throws_on_length_mismatch(self):
        with self.assertRaises(ffd.NumberOutOfRange):
            ffd.U8.unpack(b'\x03\x04')


class TestBool(unittest.TestCase):
    def test_unpack(self):
        self.assertFalse(ffd.Bool.unpack(b''))
        self.assertFalse(ffd.Bool.unpack(b'\x00'))
        self.assertTrue(ffd.Bool.unpack(b'\x01'))

    def test_unpack_throws_on_other_values(self):
        with self.assertRaises(ffd.NumberOutOfRange):
            ffd.Bool.unpack(b'\x02')

    def test_pack(self):
        self.assertEqual(b'\x01', ffd.Bool.pack(True))
        self.assertEqual(b'', ffd.Bool.pack(False))

    def test_padded_flag(self):
        self.assertEqual(b'\x00', f.AUTO_MODE.pack(False))
        self.assertFalse(f.AUTO_MODE.unpack(b'\x00'))


class TestVarFloat(unittest.TestCase):
    def test_from_float(self):
        value = ffd.VarFloat.from_float(12345678.9012345)
        self.assertEqual(123456789012345, value.mantissa)
        self.assertEqual(7, value.dot_offset)

    def test_from_string_drops_trailing_zeros(self):
        self.assertEqual(ffd.VarFloat(145367, 2), ffd.VarFloat.from_string('1453.670'))
        self.assertEqual(ffd.VarFloat(1, 0), ffd.VarFloat.from_string('1.000'))

    def test_from_string_throws_on_garbage(self):
        for text in ('abc', '-1', '1.2.3', ''):
            with self.assertRaises(ffd.InvalidFormat):
                ffd.VarFloat.from_string(text)

    def test_from_string_throws_on_overflow(self):
        with self.assertRaises(ffd.InvalidFormat):
            ffd.VarFloat.from_string('18446744073709551616')

    def test_from_decimal(self):
        self.assertEqual(ffd.VarFloat(12345, 3), ffd.VarFloat.from_decimal(decimal.Decimal('12.345')))

    def test_coerce_rejects_bool(self):
        with self.assertRaises(TypeError):
            ffd.VarFloat.coerce(True)

    def test_to_decimal(self):
        self.assertEqual(decimal.Decimal('1453.67'), ffd.VarFloat(145367, 2).to_decimal())
        self.assertEqual('1453.67', str(ffd.VarFloat(145367, 2)))


class TestFVLN(unittest.TestCase):
    def test_unpack(self):
        actual = ffd.FVLN.unpack(b'\x02\x15\xcd\x5b\x07')
        self.assertEqual(ffd.VarFloat(123456789, 2), actual)
        self.assertAlmostEqual(1234567.89, actual.to_float(), delta=1e-3)

    def test_pack(self):
        self.assertEqual(bytes.fromhex('05563412'), ffd.FVLN.pack(ffd.VarFloat(0x123456, 5)))

    def test_pack_two_points(self):
        self.assertEqual(b'\x02\x15\xcd\x5b\x07', ffd.FVLN.pack(1234567.89))

    def test_pack_several_points(self):
        packed = ffd.FVLN.pack(1453.67)
        self.assertEqual(b'\x02\xd77\x02', packed)
        self.assertEqual(1453.67, ffd.FVLN.unpack(packed).to_float())

    def test_unpack_empty_throws(self):
        with self.assertRaises(ffd.EndOfData):
            ffd.FVLN.unpack(b'')

    def test_unpack_too_long_throws(self):
        with self.assertRaises(ffd.NumberOutOfRange):
            ffd.FVLN.unpack(b'\x01' * 10)

    def test_json(self):
        self.assertEqual(42, ffd.FVLN.to_json(ffd.VarFloat(42, 0)))
        self.assertEqual(1453.67, ffd.FVLN.to_json(ffd.VarFloat(145367, 2)))
        self.assertEqual(ffd.VarFloat(145367, 2), ffd.FVLN.from_json(1453.67))


class TestString(unittest.TestCase):
    def test_unpack(self):
        self.assertEqual('Тест', ffd.String.unpack(b'\x92\xa5\xe1\xe2'))

    def test_unpack_zero_string(self):
        self.assertEqual('', ffd.String.unpack(b''))

    def test_pack(self):
        self.assertEqual(bytes.fromhex('8fe0a8a2a5e22c20aca8e021'), ffd.String.pack('Привет, мир!'))

    def test_pack_throws_on_unrepresentable(self):
        with self.assertRaises(ffd.InvalidString):
            ffd.String.pack('€')


class TestByteArray(unittest.TestCase):
    def test_unpack_throws_on_length_mismatch(self):
        with self.assertRaises(ffd.InvalidLength):
            ffd.ByteArray(6).unpack(b'\x01\x02')

    def test_number_json(self):
        codec = ffd.ByteArray(6, as_number=True)
        self.assertEqual(0x21041c6b81a4, codec.to_json(bytes.fromhex('21041c6b81a4')))
        self.assertEqual(bytes.fromhex('21041c6b81a4'), codec.from_json(0x21041c6b81a4))

    def test_number_json_overflow(self):
        with self.assertRaises(ffd.NumberOutOfRange):
            ffd.ByteArray(6, as_number=True).from_json(1 << 48)

    def test_base64_json(self):
        self.assertEqual('AQI=', ffd.ByteArray(2).to_json(b'\x01\x02'))


class TestUnixTime(unittest.TestCase):
    def test_unpack(self):
        actual = ffd.UnixTime.unpack(b'\x8a\x02\x9e\x55')
        self.assertEqual(datetime.datetime(2015, 7, 9, 5, 11, 38), actual)
        self.assertEqual(1436418698, ffd.UnixTime.to_json(actual))

    def test_pack(self):
        self.assertEqual(b'\x8a\x02\x9e\x55', ffd.UnixTime.pack(datetime.datetime(2015, 7, 9, 5, 11, 38)))

    def test_pack_keeps_wall_clock_of_aware_value(self):
        moscow = datetime.timezone(datetime.timedelta(hours=3))
        value = datetime.datetime(2015, 7, 9, 5, 11, 38, tzinfo=moscow)
        self.assertEqual(b'\x8a\x02\x9e\x55', ffd.UnixTime.pack(value))

    def test_pack_before_epoch_throws(self):
        with self.assertRaises(ffd.NumberOutOfRange):
            ffd.UnixTime.pack(datetime.datetime(1969, 12, 31))

    def test_date(self):
        self.assertEqual(datetime.date(2015, 7, 9), ffd.Date.unpack(b'\x8a\x02\x9e\x55'))
        self.assertEqual(ffd.Date.pack(datetime.date(2015, 7, 9)), ffd.U32.pack(1436400000))


class TestPadding(unittest.TestCase):
    def test_right_padded(self):
        padding = ffd.RightPadded(4)
        self.assertEqual(bytes.fromhex('56341200'), padding.apply(ffd.U32.pack(0x123456)))
        self.assertEqual(0x123456, ffd.U32.unpack(padding.strip(bytes.fromhex('56341200'))))

    def test_shift_number(self):
        self.assertEqual(bytes.fromhex('56341200'), f.SHIFT_NUMBER.pack(0x123456))
        self.assertEqual(0x123456, f.SHIFT_NUMBER.unpack(bytes.fromhex('56341200')))

    def test_right_padded_throws_on_wrong_size(self):
        with self.assertRaises(ffd.InvalidLength):
            ffd.RightPadded(4).strip(b'\x01')
        with self.assertRaises(ffd.InvalidLength):
            ffd.RightPadded(1).apply(b'\x01\x02')

    def test_space_padded_inn(self):
        self.assertEqual(b'7704358518  ', f.OFD_INN.pack('7704358518'))
        self.assertEqual('7704358518', f.OFD_INN.unpack(b'7704358518  '))

    def test_fixed(self):
        with self.assertRaises(ffd.InvalidLength):
            ffd.Fixed(6).apply(b'12345')

    def test_no_padding(self):
        self.assertEqual(b'123', ffd.NoPadding(3).apply(b'123'))
        with self.assertRaises(ffd.InvalidLength):
            ffd.NoPadding(3).apply(b'1234')


class TestCatalogue(unittest.TestCase):
    def test_lookup(self):
        self.assertIs(f.DATE_TIME, ffd.by_tag(1012))
        self.assertIsNone(ffd.by_tag(1049))

    def test_repr_of(self):
        self.assertEqual(ffd.Repr.OBJECT, ffd.repr_of(1059))
        self.assertEqual(ffd.Repr.STRING, ffd.repr_of(1048))
        self.assertEqual(ffd.Repr.FLOAT, ffd.repr_of(1023))
        self.assertEqual(ffd.Repr.BYTES, ffd.repr_of(1049))

    def test_register_duplicate_throws(self):
        with self.assertRaises(ValueError):
            ffd.protocol.register(ffd.Field(1012, ffd.U32))

    def test_every_document_is_an_object(self):
        for tag, field in ffd.FIELDS.items():
            if tag < 100:
                self.assertEqual(ffd.Repr.OBJECT, field.repr, tag)


if __name__ == '__main__':
    unittest.main()
