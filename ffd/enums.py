# coding: utf8

import enum

from .protocol import NumberOutOfRange, Repr, Bool, U8, U16, U32


class Flags(object):
    """
    Set of independent bits backed by an unsigned integer.

    Subclasses list their documented bits in `FLAGS` as (name, mask) pairs, every pair becomes a boolean property.
    Bits missing from the table are kept as is, so the stored pattern survives decoding and encoding unchanged.
    """
    FLAGS = ()

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        for name, mask in cls.FLAGS:
            setattr(cls, name, cls._make_property(mask))

    @staticmethod
    def _make_property(mask):
        def getter(self):
            return self.bits & mask == mask

        def setter(self, value):
            if value:
                self.bits |= mask
            else:
                self.bits &= ~mask

        return property(getter, setter)

    def __init__(self, bits=0, **flags):
        self.bits = bits
        for name, value in flags.items():
            if name not in self.names():
                raise TypeError('{} has no flag {!r}'.format(type(self).__name__, name))
            setattr(self, name, value)

    @classmethod
    def names(cls):
        return [name for name, _ in cls.FLAGS]

    @property
    def known_mask(self):
        mask = 0
        for _, bit in self.FLAGS:
            mask |= bit
        return mask

    @property
    def unknown_bits(self):
        return self.bits & ~self.known_mask

    def active(self):
        return [name for name, mask in self.FLAGS if self.bits & mask == mask]

    def __int__(self):
        return self.bits

    def __index__(self):
        return self.bits

    def __eq__(self, other):
        if isinstance(other, Flags):
            return type(self) is type(other) and self.bits == other.bits
        if isinstance(other, int):
            return self.bits == other
        return NotImplemented

    __hash__ = None

    def __repr__(self):
        parts = self.active()
        if self.unknown_bits:
            parts.append('{:#x}'.format(self.unknown_bits))
        return '{}({})'.format(type(self).__name__, ' | '.join(parts) or '0')


class FlagSet(object):
    REPR = Repr.INT

    def __init__(self, flags, codec=U8):
        self.flags = flags
        self.codec = codec

    def pack(self, value):
        if isinstance(value, Flags):
            value = value.bits
        return self.codec.pack(value)

    def unpack(self, data):
        return self.flags(self.codec.unpack(data))

    @staticmethod
    def to_json(value):
        return int(value)

    def from_json(self, value):
        return self.flags(value)


class CatchAll(enum.IntEnum):
    """
    Enumeration that maps every unlisted discriminant to its UNKNOWN member.
    """

    @classmethod
    def _missing_(cls, value):
        return cls.UNKNOWN


class Choice(object):
    """
    Enumeration codec. Values rejected by the enumeration itself are out of range.
    """
    REPR = Repr.INT

    def __init__(self, enum_cls, codec=U8):
        self.enum = enum_cls
        self.codec = codec

    def _convert(self, value):
        try:
            return self.enum(value)
        except ValueError as e:
            raise NumberOutOfRange(str(e)) from e

    def pack(self, value):
        return self.codec.pack(int(value))

    def unpack(self, data):
        return self._convert(self.codec.unpack(data))

    @staticmethod
    def to_json(value):
        return int(value)

    def from_json(self, value):
        return self._convert(value)


class TaxationTypes(Flags):
    """Теги 1055/1062"""
    FLAGS = (
        ('general', 1),
        ('simplified_gross', 2),
        ('simplified_net', 4),
        ('envd', 8),
        ('agricultural', 16),
        ('patent', 32),
    )


class AgentTypes(Flags):
    """Теги 1057/1222"""
    FLAGS = (
        ('bank_payment_agent', 1),
        ('bank_payment_subagent', 2),
        ('payment_agent', 4),
        ('payment_subagent', 8),
        ('attorney', 16),
        ('commissioner', 32),
        ('agent', 64),
    )


class KktInfoUpdateReasons(Flags):
    """Тег 1205"""
    FLAGS = (
        ('fn_replacement', 0x1),
        ('fd_operator_replacement', 0x2),
        ('user_change', 0x4),
        ('location_change', 0x8),
        ('autonomous_to_data_transfer', 0x10),
        ('data_transfer_to_autonomous', 0x20),
        ('model_version_change', 0x40),
        ('taxation_system_change', 0x80),
        ('automatic_device_number_change', 0x100),
        ('automatic_to_non_automatic', 0x200),
        ('non_automatic_to_automatic', 0x400),
        ('non_bso_to_bso', 0x800),
        ('bso_to_non_bso', 0x1000),
        ('internet_to_print', 0x2000),
        ('print_to_internet', 0x4000),
        ('payment_agent_to_non_payment_agent', 0x8000),
        ('non_payment_agent_to_payment_agent', 0x10000),
        ('gambling_to_non_gambling', 0x20000),
        ('non_gambling_to_gambling', 0x40000),
        ('lottery_to_non_lottery', 0x80000),
        ('non_lottery_to_lottery', 0x100000),
        ('ffd_version_change', 0x200000),
        ('other', 0x80000000),
    )


class OperatorMessages(Flags):
    """Тег 1206"""
    FLAGS = (
        ('flk_error', 2),
        ('check_kkt_cabinet', 4),
        ('ffd_update_required', 8),
        ('kkt_to_be_checked', 16),
        ('update_ofd_comm_params', 32),
        ('operator_annuled', 64),
    )


class KktUsage(Flags):
    """Тег 1290"""
    FLAGS = (
        ('has_printer', 1 << 1),
        ('as_bso', 1 << 2),
        ('internet_only', 1 << 5),
        ('excisable_product', 1 << 6),
        ('marked_products', 1 << 8),
        ('services_only', 1 << 9),
        ('gambling', 1 << 10),
        ('lottery', 1 << 11),
        ('pawnshop', 1 << 12),
        ('insurance', 1 << 13),
        ('vending_machine', 1 << 14),
        ('catering', 1 << 15),
        ('wholesale', 1 << 16),
    )


class VatType(CatchAll):
    """Тег 1199"""
    UNKNOWN = 0
    VAT_20 = 1
    VAT_10 = 2
    VAT_20_120 = 3
    VAT_10_110 = 4
    VAT_0 = 5
    NO_VAT = 6


class PaymentType(CatchAll):
    """Тег 1054"""
    UNKNOWN = 0
    SALE = 1
    SALE_RETURN = 2
    PURCHASE = 3
    PURCHASE_RETURN = 4


class FormCode(CatchAll):
    UNKNOWN = 0
    REGISTRATION_REPORT = 1
    REGISTRATION_PARAMETER_UPDATE_REPORT = 11
    SHIFT_START_REPORT = 2
    PAYMENT_STATE_REPORT = 21
    RECEIPT = 3
    CORRECTION_RECEIPT = 31
    BSO = 4
    CORRECTION_BSO = 41
    SHIFT_END_REPORT = 5
    FN_CLOSE_REPORT = 6
    OPERATOR_CONFIRMATION = 7
    MARKING_CODE_REQUEST = 81
    MARKED_PRODUCT_SALE_NOTIFICATION = 82
    RESPONSE = 83
    NOTIFICATION_RECEIPT = 84


class ReregistrationReason(CatchAll):
    """Тег 1101"""
    UNKNOWN = 0
    FN_REPLACEMENT = 1
    OFD_REPLACEMENT = 2
    REQUISITE_UPDATE = 3
    KKT_SETTINGS_UPDATE = 4


class PaymentMethod(CatchAll):
    """Тег 1214"""
    UNKNOWN = 0
    FULL_PREPAID = 1
    PREPAID = 2
    ADVANCE = 3
    FULL = 4
    PARTIAL_AND_CREDIT = 5
    CREDIT = 6
    PAYMENT_OF_CREDIT = 7


class ItemType(CatchAll):
    """Тег 1212"""
    UNKNOWN = 0
    PRODUCT = 1
    EXCISABLE_PRODUCT = 2
    LABOR = 3
    SERVICE = 4
    BET = 5
    BET_WINNINGS = 6
    LOTTERY_TICKET = 7
    LOTTERY_WINNINGS = 8
    NON_MATERIAL_GOOD = 9
    PAYMENT = 10
    AGENT_REWARD = 11
    COMPOSITE_PAYMENT_ITEM = 12
    OTHER_PAYMENT_ITEM = 13
    PROPERTY_RIGHT = 14
    NON_REALIZATION_INCOME = 15
    INSURANCE_PREMIUM = 16
    SALES_FEE = 17
    HOTEL_TAX = 18
    PLEDGE = 19
    EXPENSE = 20
    OPS_PREMIUM_IP = 21
    OPS_PREMIUM = 22
    OMS_PREMIUM_IP = 23
    OMS_PREMIUM = 24
    OSS_PREMIUM = 25
    CASINO_PAYMENT = 26
    MONEY = 27
    ATNM = 30
    ATM = 31
    TNM = 32
    TM = 33


class OfdResponse(CatchAll):
    """Тег 1022"""
    UNKNOWN = 255
    SUCCESS = 0
    NOT_RECOGNIZED = 11
    INVALID_FORMAT = 14


class CorrectionType(enum.IntEnum):
    """Тег 1173"""
    SELF_CORRECTION = 0
    MANDATED_CORRECTION = 1


class FfdVersion(CatchAll):
    """Теги 1189/1190/1209"""
    UNKNOWN = 255
    V1_BETA = 0
    V1 = 1
    V1_05 = 2
    V1_1 = 3
    V1_2 = 4


class MarkingType(CatchAll):
    """Тег 2100"""
    UNKNOWN = 255
    UNIDENTIFIED = 0
    SHORT = 1
    LEN_88_TO_CHECK = 2
    LEN_44_NO_CHECK = 3
    LEN_44_CHECK = 4
    LEN_4_NO_CHECK = 5


class ProductStatus(CatchAll):
    """Теги 2003/2110"""
    UNKNOWN = 0
    INDIVIDUAL_PRODUCT_SOLD = 1
    MEASURABLE_PRODUCT_SOLD = 2
    INDIVIDUAL_PRODUCT_RETURNED = 3
    PART_OF_PRODUCT_RETURNED = 4
    UNCHANGED = 255


class OismProductStatus(CatchAll):
    """Тег 2109"""
    UNKNOWN = 0
    CORRECT_PLANNED_STATUS = 1
    INCORRECT_PLANNED_STATUS = 2
    PRODUCT_OUT_OF_SALE = 3


class MarkingCheckResult(Flags):
    """Теги 2004/2005/2106"""
    FLAGS = (
        ('got_km_result', 1),
        ('km_result_positive', 2),
        ('got_oism_result', 4),
        ('oism_result_positive', 8),
        ('km_result_from_autonomous_kkt', 16),
    )


class IncorrectMarkingCodeFlags(Flags):
    """Тег 2112"""
    FLAGS = (
        ('got_incorrect_km_response', 2),
        ('got_incorrect_km_notification_receipt', 4),
    )


class IncorrectDataFlags(Flags):
    """Тег 2113"""
    FLAGS = (
        ('got_negative_km_response', 1),
        ('got_negative_km_notification_receipt', 2),
    )


TAXATION_TYPES = FlagSet(TaxationTypes)
AGENT_TYPES = FlagSet(AgentTypes)
KKT_INFO_UPDATE_REASONS = FlagSet(KktInfoUpdateReasons, codec=U32)
OPERATOR_MESSAGES = FlagSet(OperatorMessages)
KKT_USAGE = FlagSet(KktUsage, codec=U32)
MARKING_CHECK_RESULT = FlagSet(MarkingCheckResult)
INCORRECT_MARKING_CODE_FLAGS = FlagSet(IncorrectMarkingCodeFlags)
INCORRECT_DATA_FLAGS = FlagSet(IncorrectDataFlags)

VAT_TYPE = Choice(VatType)
PAYMENT_TYPE = Choice(PaymentType)
FORM_CODE = Choice(FormCode, codec=U16)
REREGISTRATION_REASON = Choice(ReregistrationReason)
PAYMENT_METHOD = Choice(PaymentMethod)
ITEM_TYPE = Choice(ItemType)
OFD_RESPONSE = Choice(OfdResponse)
CORRECTION_TYPE = Choice(CorrectionType, codec=Bool)
FFD_VERSION = Choice(FfdVersion)
MARKING_TYPE = Choice(MarkingType)
PRODUCT_STATUS = Choice(ProductStatus)
OISM_PRODUCT_STATUS = Choice(OismProductStatus)
