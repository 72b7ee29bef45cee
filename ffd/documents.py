# coding: utf8

from . import fields as f
from .document import Document
from .enums import FormCode
from .protocol import EndOfData, InvalidFormat
from .schema import Record, DocumentRecord, Tagged, Default, Header, Signature


def _opt(attr, field, record=None):
    return Tagged(attr, field, optional=True, record=record)


def _many(attr, field, record=None):
    return Tagged(attr, field, repeated=True, record=record)


def _document_fields(code):
    return (
        Header('code', code=code),
        Signature('message_fiscal_sign'),
        Default('raw_data'),
    )


class Property(Record):
    FIELDS = (
        _opt('property_name', f.PROPERTY_NAME),
        _opt('property_value', f.PROPERTY_VALUE),
    )


class ProviderData(Record):
    FIELDS = (
        _many('provider_phone', f.PROVIDER_PHONE),
        _opt('provider_name', f.PROVIDER_NAME),
    )


class PaymentAgentData(Record):
    FIELDS = (
        _many('transfer_operator_phone', f.TRANSFER_OPERATOR_PHONE),
        _many('payment_agent_operation', f.PAYMENT_AGENT_OPERATION),
        _many('payment_agent_phone', f.PAYMENT_AGENT_PHONE),
        _many('payment_operator_phone', f.PAYMENT_OPERATOR_PHONE),
        _many('transfer_operator_name', f.TRANSFER_OPERATOR_NAME),
        _many('transfer_operator_address', f.TRANSFER_OPERATOR_ADDRESS),
        _many('transfer_operator_inn', f.TRANSFER_OPERATOR_INN),
    )


class IndustryDetails(Record):
    FIELDS = (
        _opt('id_foiv', f.ID_FOIV),
        _opt('foundation_doc_date_time', f.FOUNDATION_DOC_DATE_TIME),
        _opt('foundation_doc_number', f.FOUNDATION_DOC_NUMBER),
        _opt('industry_prop_value', f.INDUSTRY_PROP_VALUE),
    )


class BuyerInfo(Record):
    FIELDS = (
        _opt('buyer', f.BUYER),
        _opt('buyer_inn', f.BUYER_INN),
        _opt('buyer_birthday', f.BUYER_BIRTHDAY),
        _opt('buyer_citizenship', f.BUYER_CITIZENSHIP),
        _opt('buyer_document_code', f.BUYER_DOCUMENT_CODE),
        _opt('buyer_document_data', f.BUYER_DOCUMENT_DATA),
        _opt('buyer_address', f.BUYER_ADDRESS),
    )


class OperationalDetails(Record):
    FIELDS = (
        _opt('date_time', f.OPERATION_DATE_TIME),
        _opt('operation_id', f.OPERATION_ID),
        _opt('operation_data', f.OPERATION_DATA),
    )


class Item(Record):
    """
    Предмет расчета (тег 1059).
    """
    FIELDS = (
        _opt('name', f.ITEM_NAME),
        _opt('payment_type', f.PAYMENT_TYPE_FIELD),
        _opt('product_type', f.PRODUCT_TYPE),
        Tagged('sum', f.ITEM_SUM),
        Tagged('price', f.PRICE),
        Tagged('quantity', f.QUANTITY),
        _opt('properties_item', f.PROPERTIES_ITEM),
        _opt('payment_agent_by_product_type', f.PAYMENT_AGENT_BY_PRODUCT_TYPE),
        _opt('unit', f.UNIT),
        _opt('provider_inn', f.PROVIDER_INN),
        _opt('origin_country_code', f.ORIGIN_COUNTRY_CODE),
        _opt('custom_entry_num', f.CUSTOM_ENTRY_NUM),
        _opt('unit_nds', f.UNIT_NDS),
        _opt('excise_duty', f.EXCISE_DUTY),
        _opt('nds', f.NDS),
        _opt('nds_sum', f.NDS_SUM),
        _opt('product_code', f.PRODUCT_CODE),
        _opt('provider_data', f.PROVIDER_DATA, record=ProviderData),
        _opt('payment_agent_data', f.PAYMENT_AGENT_DATA, record=PaymentAgentData),
        _many('items_industry_details', f.ITEMS_INDUSTRY_DETAILS, record=IndustryDetails),
    )


class CounterByPaymentType(Record):
    FIELDS = (
        _opt('receipt_bso_count', f.RECEIPT_BSO_COUNT),
        _opt('cash_sum', f.CASH_SUM),
        _opt('ecash_sum', f.ECASH_SUM),
        _opt('prepaid_sum', f.COUNTER_PREPAID_SUM),
        _opt('credit_sum', f.COUNTER_CREDIT_SUM),
        _opt('provision_sum', f.COUNTER_PROVISION_SUM),
        _opt('total_sum', f.COUNTER_TOTAL_SUM),
        _opt('tax_18_sum', f.TAX_18_SUM),
        _opt('tax_10_sum', f.TAX_10_SUM),
        _opt('tax_18_118_sum', f.TAX_18_118_SUM),
        _opt('tax_10_110_sum', f.TAX_10_110_SUM),
        _opt('tax_0_sum', f.TAX_0_SUM),
        _opt('tax_free_sum', f.TAX_FREE_SUM),
    )


class CorrectionCounter(Record):
    FIELDS = (
        _opt('receipt_bso_count', f.RECEIPT_BSO_COUNT),
        _opt('cash_sum', f.CASH_SUM),
        _opt('ecash_sum', f.ECASH_SUM),
        _opt('prepaid_sum', f.COUNTER_PREPAID_SUM),
        _opt('credit_sum', f.COUNTER_CREDIT_SUM),
        _opt('provision_sum', f.COUNTER_PROVISION_SUM),
        _opt('total_sum', f.COUNTER_TOTAL_SUM),
    )


class CorrectionCounters(Record):
    FIELDS = (
        _opt('receipt_correction_count', f.RECEIPT_CORRECTION_COUNT),
        _opt('sell_correction', f.SELL_CORRECTION, record=CorrectionCounter),
        _opt('buy_correction', f.BUY_CORRECTION, record=CorrectionCounter),
        _opt('sell_return_correction', f.SELL_RETURN_CORRECTION, record=CorrectionCounter),
        _opt('buy_return_correction', f.BUY_RETURN_CORRECTION, record=CorrectionCounter),
    )


class DriveStats(Record):
    """
    Счетчики итогов ФН, смены или непереданных ФД.
    """
    FIELDS = (
        _opt('total_receipt_bso_count', f.TOTAL_RECEIPT_BSO_COUNT),
        _opt('sell_oper', f.SELL_OPER, record=CounterByPaymentType),
        _opt('sell_return_oper', f.SELL_RETURN_OPER, record=CounterByPaymentType),
        _opt('buy_oper', f.BUY_OPER, record=CounterByPaymentType),
        _opt('buy_return_oper', f.BUY_RETURN_OPER, record=CounterByPaymentType),
        _opt('receipt_correction', f.RECEIPT_CORRECTION_COUNTERS, record=CorrectionCounters),
    )


class CorrectionBase(Record):
    FIELDS = (
        _opt('correction_document_date', f.CORRECTION_DOCUMENT_DATE),
        _opt('correction_document_number', f.CORRECTION_DOCUMENT_NUMBER),
    )


def _registration_fields(code, correction):
    return _document_fields(code) + (
        Tagged('fiscal_document_format_ver', f.FISCAL_DOCUMENT_FORMAT_VER),
        Tagged('user', f.USER, optional=not correction),
        Tagged('user_inn', f.USER_INN, optional=not correction),
        Tagged('date_time', f.DATE_TIME),
        Tagged('offline_mode', f.OFFLINE_MODE),
        _opt('print_in_machine_sign', f.PRINT_IN_MACHINE_SIGN),
        _opt('bso_sign', f.BSO_SIGN),
        Tagged('kkt_reg_id', f.KKT_REG_ID),
        Tagged('encryption_sign', f.ENCRYPTION_SIGN),
        Tagged('auto_mode', f.AUTO_MODE),
        _opt('usage_condition_signs', f.USAGE_CONDITION_SIGNS),
        Tagged('retail_place_address', f.RETAIL_PLACE_ADDRESS),
        Tagged('retail_place', f.RETAIL_PLACE),
        _opt('internet_sign', f.INTERNET_SIGN),
        Tagged('kkt_number', f.KKT_NUMBER),
        Tagged('operator', f.OPERATOR),
        Tagged('fiscal_document_number', f.FISCAL_DOCUMENT_NUMBER),
        Tagged('fiscal_drive_number', f.FISCAL_DRIVE_NUMBER),
        Tagged('fiscal_sign', f.FISCAL_SIGN),
        Tagged('kkt_version', f.KKT_VERSION),
        Tagged('document_kkt_version', f.DOCUMENT_KKT_VERSION),
        _opt('excise_duty_product_sign', f.EXCISE_DUTY_PRODUCT_SIGN),
        _opt('service_sign', f.SERVICE_SIGN),
        _opt('gambling_sign', f.GAMBLING_SIGN),
        _opt('lottery_sign', f.LOTTERY_SIGN),
        _opt('payment_agent_type', f.PAYMENT_AGENT_TYPE),
        _opt('document_fd_version', f.DOCUMENT_FD_VERSION),
        _opt('fd_key_resource', f.FD_KEY_RESOURCE),
        _opt('operator_inn', f.OPERATOR_INN),
        _opt('taxation_type', f.TAXATION_TYPE),
        _opt('machine_number', f.MACHINE_NUMBER),
        Tagged('ofd_name', f.OFD_NAME, optional=not correction),
        _opt('seller_address', f.SELLER_ADDRESS),
        _opt('fns_url', f.FNS_URL),
        Tagged('ofd_inn', f.OFD_INN, optional=not correction),
        _opt('additional_props_frc', f.ADDITIONAL_PROPS_FRC),
        _opt('additional_data_frc', f.ADDITIONAL_DATA_FRC),
    )


class FiscalReport(DocumentRecord):
    FIELDS = _registration_fields(FormCode.REGISTRATION_REPORT, correction=False)


class FiscalReportCorrection(DocumentRecord):
    FIELDS = _registration_fields(FormCode.REGISTRATION_PARAMETER_UPDATE_REPORT, correction=True) + (
        _opt('correction_kkt_reason_code', f.CORRECTION_KKT_REASON_CODE),
        _many('correction_reason_code', f.CORRECTION_REASON_CODE),
        _opt('fiscal_drive_sum_reports', f.FISCAL_DRIVE_SUM_REPORTS, record=DriveStats),
    )


class OpenShift(DocumentRecord):
    FIELDS = _document_fields(FormCode.SHIFT_START_REPORT) + (
        Tagged('fiscal_document_format_ver', f.FISCAL_DOCUMENT_FORMAT_VER),
        Tagged('user_inn', f.USER_INN),
        Tagged('date_time', f.DATE_TIME),
        Tagged('shift_number', f.SHIFT_NUMBER),
        Tagged('kkt_reg_id', f.KKT_REG_ID),
        Tagged('fiscal_document_number', f.FISCAL_DOCUMENT_NUMBER),
        Tagged('fiscal_drive_number', f.FISCAL_DRIVE_NUMBER),
        Tagged('fiscal_sign', f.FISCAL_SIGN),
        Tagged('kkt_version', f.KKT_VERSION),
        Tagged('document_kkt_version', f.DOCUMENT_KKT_VERSION),
        _opt('user', f.USER),
        _opt('retail_place_address', f.RETAIL_PLACE_ADDRESS),
        _opt('retail_place', f.RETAIL_PLACE),
        _opt('operator', f.OPERATOR),
        _opt('operator_inn', f.OPERATOR_INN),
        _opt('ofd_response_timeout_sign', f.OFD_RESPONSE_TIMEOUT_SIGN),
        _opt('fiscal_drive_replace_required_sign', f.FISCAL_DRIVE_REPLACE_REQUIRED_SIGN),
        _opt('fiscal_drive_memory_exceeded_sign', f.FISCAL_DRIVE_MEMORY_EXCEEDED_SIGN),
        _opt('fiscal_drive_exhaustion_sign', f.FISCAL_DRIVE_EXHAUSTION_SIGN),
        _opt('operator_message', f.OPERATOR_MESSAGE),
        _opt('additional_props_os', f.ADDITIONAL_PROPS_OS),
        _opt('additional_data_os', f.ADDITIONAL_DATA_OS),
    )


class CurrentStateReport(DocumentRecord):
    FIELDS = _document_fields(FormCode.PAYMENT_STATE_REPORT) + (
        Tagged('fiscal_document_format_ver', f.FISCAL_DOCUMENT_FORMAT_VER),
        Tagged('user_inn', f.USER_INN),
        Tagged('date_time', f.DATE_TIME),
        _opt('key_resource', f.FD_KEY_RESOURCE),
        Tagged('kkt_reg_id', f.KKT_REG_ID),
        Tagged('fiscal_document_number', f.FISCAL_DOCUMENT_NUMBER),
        Tagged('fiscal_drive_number', f.FISCAL_DRIVE_NUMBER),
        Tagged('fiscal_sign', f.FISCAL_SIGN),
        _opt('user', f.USER),
        _opt('retail_place_address', f.RETAIL_PLACE_ADDRESS),
        _opt('retail_place', f.RETAIL_PLACE),
        _opt('shift_number', f.SHIFT_NUMBER),
        _opt('offline_mode', f.OFFLINE_MODE),
        _opt('not_transmitted_document_number', f.NOT_TRANSMITTED_DOCUMENT_NUMBER),
        _opt('not_transmitted_documents_quantity', f.NOT_TRANSMITTED_DOCUMENTS_QUANTITY),
        _opt('undelivered_notifications_number', f.UNDELIVERED_NOTIFICATIONS_NUMBER),
        _opt('not_transmitted_documents_date_time', f.NOT_TRANSMITTED_DOCUMENTS_DATE_TIME),
        _opt('additional_props_csr', f.ADDITIONAL_PROPS_CSR),
        _opt('additional_data_csr', f.ADDITIONAL_DATA_CSR),
        _opt('fiscal_drive_sum_reports', f.FISCAL_DRIVE_SUM_REPORTS, record=DriveStats),
        _opt('not_transmitted_documents_sum_reports', f.NOT_TRANSMITTED_DOCUMENTS_SUM_REPORTS, record=DriveStats),
    )


def _receipt_fields(code):
    return _document_fields(code) + (
        Tagged('fiscal_document_format_ver', f.FISCAL_DOCUMENT_FORMAT_VER),
        Tagged('request_number', f.REQUEST_NUMBER),
        Tagged('date_time', f.DATE_TIME),
        Tagged('shift_number', f.SHIFT_NUMBER),
        Tagged('operation_type', f.OPERATION_TYPE),
        Tagged('applied_taxation_type', f.APPLIED_TAXATION_TYPE),
        _opt('taxation_type', f.TAXATION_TYPE),
        Tagged('kkt_reg_id', f.KKT_REG_ID),
        _opt('retail_place_address', f.RETAIL_PLACE_ADDRESS),
        _opt('retail_place', f.RETAIL_PLACE),
        Tagged('total_sum', f.TOTAL_SUM),
        Tagged('cash_total_sum', f.CASH_TOTAL_SUM),
        Tagged('ecash_total_sum', f.ECASH_TOTAL_SUM),
        Tagged('prepaid_sum', f.PREPAID_SUM),
        Tagged('credit_sum', f.CREDIT_SUM),
        Tagged('provision_sum', f.PROVISION_SUM),
        Tagged('fiscal_document_number', f.FISCAL_DOCUMENT_NUMBER),
        Tagged('fiscal_drive_number', f.FISCAL_DRIVE_NUMBER),
        Tagged('fiscal_sign', f.FISCAL_SIGN),
        _opt('user', f.USER),
        _opt('user_inn', f.USER_INN),
        _opt('machine_number', f.MACHINE_NUMBER),
        _opt('buyer_phone_or_address', f.BUYER_PHONE_OR_ADDRESS),
        _opt('nds_18', f.NDS_18),
        _opt('nds_10', f.NDS_10),
        _opt('nds_0', f.NDS_0),
        _opt('nds_no', f.NDS_NO),
        _opt('nds_18_118', f.NDS_18_118),
        _opt('nds_10_110', f.NDS_10_110),
        _opt('internet_sign', f.INTERNET_SIGN),
        _opt('seller_address', f.SELLER_ADDRESS),
        _opt('payment_agent_type', f.PAYMENT_AGENT_TYPE),
        _many('transfer_operator_phone', f.TRANSFER_OPERATOR_PHONE),
        _many('payment_agent_operation', f.PAYMENT_AGENT_OPERATION),
        _many('payment_agent_phone', f.PAYMENT_AGENT_PHONE),
        _many('payment_operator_phone', f.PAYMENT_OPERATOR_PHONE),
        _many('transfer_operator_name', f.TRANSFER_OPERATOR_NAME),
        _many('transfer_operator_address', f.TRANSFER_OPERATOR_ADDRESS),
        _many('transfer_operator_inn', f.TRANSFER_OPERATOR_INN),
        _opt('fns_url', f.FNS_URL),
        _many('properties_data', f.PROPERTIES_DATA),
        _opt('operator', f.OPERATOR),
        _opt('operator_inn', f.OPERATOR_INN),
        _many('items', f.ITEMS, record=Item),
        _opt('properties', f.PROPERTIES, record=Property),
        _many('industry_receipt_details', f.INDUSTRY_RECEIPT_DETAILS, record=IndustryDetails),
        _opt('buyer_information', f.BUYER_INFORMATION, record=BuyerInfo),
        _opt('operational_details', f.OPERATIONAL_DETAILS, record=OperationalDetails),
    )


def _correction_fields(code):
    return _receipt_fields(code) + (
        _opt('correction_type', f.CORRECTION_TYPE_FIELD),
        Tagged('correction_base', f.CORRECTION_BASE, record=CorrectionBase),
    )


class Receipt(DocumentRecord):
    FIELDS = _receipt_fields(FormCode.RECEIPT)


class Bso(DocumentRecord):
    FIELDS = _receipt_fields(FormCode.BSO)


class ReceiptCorrection(DocumentRecord):
    FIELDS = _correction_fields(FormCode.CORRECTION_RECEIPT)


class BsoCorrection(DocumentRecord):
    FIELDS = _correction_fields(FormCode.CORRECTION_BSO)


class CloseShift(DocumentRecord):
    FIELDS = _document_fields(FormCode.SHIFT_END_REPORT) + (
        Tagged('fiscal_document_format_ver', f.FISCAL_DOCUMENT_FORMAT_VER),
        Tagged('date_time', f.DATE_TIME),
        Tagged('shift_number', f.SHIFT_NUMBER),
        Tagged('kkt_reg_id', f.KKT_REG_ID),
        Tagged('receipts_quantity', f.RECEIPTS_QUANTITY),
        Tagged('documents_quantity', f.DOCUMENTS_QUANTITY),
        _opt('fd_key_resource', f.FD_KEY_RESOURCE),
        Tagged('fiscal_document_number', f.FISCAL_DOCUMENT_NUMBER),
        Tagged('fiscal_drive_number', f.FISCAL_DRIVE_NUMBER),
        Tagged('fiscal_sign', f.FISCAL_SIGN),
        _opt('fiscal_drive_sum_reports', f.FISCAL_DRIVE_SUM_REPORTS, record=DriveStats),
        _opt('shift_sum_reports', f.SHIFT_SUM_REPORTS, record=DriveStats),
        _opt('operator_inn', f.OPERATOR_INN),
        _opt('user', f.USER),
        _opt('operator', f.OPERATOR),
        Tagged('user_inn', f.USER_INN),
        _opt('retail_place_address', f.RETAIL_PLACE_ADDRESS),
        _opt('retail_place', f.RETAIL_PLACE),
        _opt('ofd_response_timeout_sign', f.OFD_RESPONSE_TIMEOUT_SIGN),
        _opt('fiscal_drive_replace_required_sign', f.FISCAL_DRIVE_REPLACE_REQUIRED_SIGN),
        _opt('fiscal_drive_memory_exceeded_sign', f.FISCAL_DRIVE_MEMORY_EXCEEDED_SIGN),
        _opt('fiscal_drive_exhaustion_sign', f.FISCAL_DRIVE_EXHAUSTION_SIGN),
        _opt('operator_message', f.OPERATOR_MESSAGE),
        _opt('not_transmitted_documents_quantity', f.NOT_TRANSMITTED_DOCUMENTS_QUANTITY),
        _opt('not_transmitted_documents_date_time', f.NOT_TRANSMITTED_DOCUMENTS_DATE_TIME),
        _opt('undelivered_notifications_number', f.UNDELIVERED_NOTIFICATIONS_NUMBER),
        _opt('additional_props_cs', f.ADDITIONAL_PROPS_CS),
        _opt('additional_data_cs', f.ADDITIONAL_DATA_CS),
    )


class CloseArchive(DocumentRecord):
    FIELDS = _document_fields(FormCode.FN_CLOSE_REPORT) + (
        Tagged('fiscal_document_format_ver', f.FISCAL_DOCUMENT_FORMAT_VER),
        _opt('user', f.USER),
        Tagged('user_inn', f.USER_INN),
        _opt('retail_place_address', f.RETAIL_PLACE_ADDRESS),
        _opt('retail_place', f.RETAIL_PLACE),
        Tagged('date_time', f.DATE_TIME),
        Tagged('shift_number', f.SHIFT_NUMBER),
        Tagged('kkt_reg_id', f.KKT_REG_ID),
        Tagged('fiscal_document_number', f.FISCAL_DOCUMENT_NUMBER),
        Tagged('fiscal_drive_number', f.FISCAL_DRIVE_NUMBER),
        Tagged('fiscal_sign', f.FISCAL_SIGN),
        _opt('fiscal_drive_sum_reports', f.FISCAL_DRIVE_SUM_REPORTS, record=DriveStats),
        _opt('operator_inn', f.OPERATOR_INN),
        _opt('operator', f.OPERATOR),
        _opt('additional_props_ca', f.ADDITIONAL_PROPS_CA),
        _opt('additional_data_ca', f.ADDITIONAL_DATA_CA),
    )


class MessageToFn(Record):
    FIELDS = (
        _opt('ofd_response_code', f.OFD_RESPONSE_CODE),
    )


class OperatorAck(DocumentRecord):
    """
    Подтверждение оператора: квитанция ОФД о приеме фискального документа.
    """
    FIELDS = (
        Header('code', code=FormCode.OPERATOR_CONFIRMATION),
        Default('raw_data'),
        Tagged('ofd_inn', f.OFD_INN),
        Tagged('date_time', f.DATE_TIME),
        Tagged('fiscal_drive_number', f.FISCAL_DRIVE_NUMBER),
        Tagged('fiscal_document_number', f.FISCAL_DOCUMENT_NUMBER),
        _opt('operator_fiscal_sign', f.OPERATOR_FISCAL_SIGN),
        _opt('message_to_fn', f.MESSAGE_TO_FN, record=MessageToFn),
    )


DOCUMENT_TYPES = {
    FormCode.REGISTRATION_REPORT: FiscalReport,
    FormCode.REGISTRATION_PARAMETER_UPDATE_REPORT: FiscalReportCorrection,
    FormCode.SHIFT_START_REPORT: OpenShift,
    FormCode.PAYMENT_STATE_REPORT: CurrentStateReport,
    FormCode.RECEIPT: Receipt,
    FormCode.CORRECTION_RECEIPT: ReceiptCorrection,
    FormCode.BSO: Bso,
    FormCode.CORRECTION_BSO: BsoCorrection,
    FormCode.SHIFT_END_REPORT: CloseShift,
    FormCode.FN_CLOSE_REPORT: CloseArchive,
    FormCode.OPERATOR_CONFIRMATION: OperatorAck,
}


def unpack_document(data):
    """
    Unpack a framed document choosing the record type by its leading tag.
    :param data: raw document with the optional message fiscal sign.
    :raise EndOfData: if there is no tag.
    :raise InvalidFormat: if the tag is not a known document code.
    :return: typed document record with `raw_data` holding the source bytes.
    """
    data = bytes(data)
    if len(data) < 2:
        raise EndOfData('document tag is cut short')
    tag = int.from_bytes(data[:2], 'little')
    cls = DOCUMENT_TYPES.get(tag)
    if cls is None:
        raise InvalidFormat('unknown document code {}'.format(tag))
    record = cls.from_document(Document.unpack(data))
    record.raw_data = data
    return record
