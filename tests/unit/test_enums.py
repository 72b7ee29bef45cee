# CODING: UTF8

import unittest

import ffd
from ffd import enums
from ffd import fields as f


class TestFlags(unittest.TestCase):
    def test_properties(self):
        flags = ffd.TaxationTypes(0b100001)
        self.assertTrue(flags.general)
        self.assertTrue(flags.patent)
        self.assertFalse(flags.envd)
        self.assertEqual(['general', 'patent'], flags.active())

    def test_set_flags(self):
        flags = ffd.TaxationTypes(general=True, patent=True)
        self.assertEqual(33, flags.bits)
        flags.general = False
        self.assertEqual(32, int(flags))

    def test_unknown_flag_name_throws(self):
        with self.assertRaises(TypeError):
            ffd.TaxationTypes(bitcoin=True)

    def test_unknown_bits_are_kept(self):
        flags = ffd.TaxationTypes(0x81)
        self.assertEqual(0x80, flags.unknown_bits)
        self.assertEqual('TaxationTypes(general | 0x80)', repr(flags))
        self.assertEqual(b'\x81', enums.TAXATION_TYPES.pack(flags))

    def test_equality(self):
        self.assertEqual(ffd.AgentTypes(4), ffd.AgentTypes(payment_agent=True))
        self.assertEqual(ffd.AgentTypes(4), 4)
        self.assertNotEqual(ffd.AgentTypes(4), ffd.TaxationTypes(4))

    def test_wide_flags(self):
        reasons = enums.KKT_INFO_UPDATE_REASONS.unpack(b'\x01\x00\x00\x80')
        self.assertTrue(reasons.fn_replacement)
        self.assertTrue(reasons.other)
        self.assertFalse(reasons.user_change)

    def test_marking_flags(self):
        result = f.KM_CHECK_RESULT.unpack(b'\x0b')
        self.assertIsInstance(result, ffd.MarkingCheckResult)
        self.assertEqual(['got_km_result', 'km_result_positive', 'oism_result_positive'], result.active())

        flags = f.INCORRECT_MARKING_CODES.unpack(b'\x05')
        self.assertTrue(flags.got_incorrect_km_notification_receipt)
        self.assertEqual(1, flags.unknown_bits)
        self.assertEqual(b'\x05', f.INCORRECT_MARKING_CODES.pack(flags))

        self.assertTrue(f.INCORRECT_REQUESTS_AND_NOTIFICATIONS.unpack(b'\x02').got_negative_km_notification_receipt)

    def test_applied_taxation_type_zero_fill(self):
        self.assertEqual(b'0', f.APPLIED_TAXATION_TYPE.pack(ffd.TaxationTypes(0)))
        self.assertEqual(ffd.TaxationTypes(0), f.APPLIED_TAXATION_TYPE.unpack(b'0'))
        self.assertTrue(f.APPLIED_TAXATION_TYPE.unpack(b'\x01').general)


class TestChoice(unittest.TestCase):
    def test_unpack(self):
        self.assertEqual(ffd.VatType.VAT_10, enums.VAT_TYPE.unpack(b'\x02'))
        self.assertEqual(ffd.OfdResponse.SUCCESS, enums.OFD_RESPONSE.unpack(b''))

    def test_unknown_value_maps_to_sentinel(self):
        self.assertIs(ffd.VatType.UNKNOWN, enums.VAT_TYPE.unpack(b'\x63'))
        self.assertIs(ffd.FfdVersion.UNKNOWN, enums.FFD_VERSION.unpack(b'\x63'))

    def test_unknown_form_code_maps_to_sentinel(self):
        value = enums.FORM_CODE.unpack(b'\x63')
        self.assertIs(ffd.FormCode.UNKNOWN, value)
        self.assertEqual(b'', enums.FORM_CODE.pack(value))

    def test_marking_enumerations(self):
        self.assertIs(ffd.MarkingType.LEN_88_TO_CHECK, enums.MARKING_TYPE.unpack(b'\x02'))
        self.assertIs(ffd.MarkingType.UNIDENTIFIED, enums.MARKING_TYPE.unpack(b''))
        self.assertIs(ffd.MarkingType.UNKNOWN, enums.MARKING_TYPE.unpack(b'\x63'))
        self.assertIs(ffd.ProductStatus.UNCHANGED, enums.PRODUCT_STATUS.unpack(b'\xff'))
        self.assertIs(ffd.ProductStatus.UNKNOWN, enums.PRODUCT_STATUS.unpack(b'\x05'))
        self.assertIs(ffd.OismProductStatus.PRODUCT_OUT_OF_SALE, enums.OISM_PRODUCT_STATUS.unpack(b'\x03'))

    def test_marking_fields(self):
        self.assertIs(ffd.ProductStatus.INDIVIDUAL_PRODUCT_RETURNED, f.ASSIGNED_PRODUCT_STATUS.unpack(b'\x03'))
        self.assertEqual(b'\x00', f.MARKING_CODE_TYPE.pack(ffd.MarkingType.UNIDENTIFIED))

    def test_correction_type_from_json_out_of_range(self):
        with self.assertRaises(ffd.NumberOutOfRange):
            enums.CORRECTION_TYPE.from_json(5)

    def test_form_code(self):
        self.assertIs(ffd.FormCode.CORRECTION_RECEIPT, enums.FORM_CODE.unpack(b'\x1f'))
        self.assertEqual(b'\x1f', enums.FORM_CODE.pack(ffd.FormCode.CORRECTION_RECEIPT))

    def test_correction_type(self):
        self.assertEqual(ffd.CorrectionType.MANDATED_CORRECTION, enums.CORRECTION_TYPE.unpack(b'\x01'))
        self.assertEqual(ffd.CorrectionType.SELF_CORRECTION, enums.CORRECTION_TYPE.unpack(b''))
        with self.assertRaises(ffd.NumberOutOfRange):
            enums.CORRECTION_TYPE.unpack(b'\x02')

    def test_json(self):
        self.assertEqual(2, enums.PAYMENT_TYPE.to_json(ffd.PaymentType.SALE_RETURN))
        self.assertIs(ffd.PaymentType.SALE_RETURN, enums.PAYMENT_TYPE.from_json(2))


if __name__ == '__main__':
    unittest.main()
