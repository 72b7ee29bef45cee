# coding: utf8

from .container import STLV
from .enums import (
    TAXATION_TYPES, AGENT_TYPES, KKT_INFO_UPDATE_REASONS, OPERATOR_MESSAGES, KKT_USAGE, VAT_TYPE, PAYMENT_TYPE,
    REREGISTRATION_REASON, PAYMENT_METHOD, ITEM_TYPE, OFD_RESPONSE, CORRECTION_TYPE, FFD_VERSION, MARKING_CHECK_RESULT,
    INCORRECT_MARKING_CODE_FLAGS, INCORRECT_DATA_FLAGS, MARKING_TYPE, PRODUCT_STATUS, OISM_PRODUCT_STATUS
)
from .protocol import (
    Field, FIELDS, NoPadding, Fixed, RightPadded, Bool, U8, U16, U32, U64, FVLN, String, Bytes, ByteArray, UnixTime,
    Date, register, by_tag, repr_of
)

__all__ = ['FIELDS', 'by_tag', 'repr_of']

# Теги, внутри которых суммарные счётчики называются так же, как суммы чека.
COUNTER_TAGS = [1129, 1130, 1131, 1132, 1145, 1146, 1232, 1233]


def _doc(tag, name, desc, maxlen):
    return Field(tag, STLV(), NoPadding(maxlen), name=name, desc=desc)


def _stlv(tag, name, desc, maxlen, multi=False, parents=None):
    return Field(tag, STLV(), NoPadding(maxlen), multi=multi, name=name, desc=desc, parents=parents)


def _flag(tag, name, desc):
    return Field(tag, Bool, RightPadded(1), name=name, desc=desc)


def _u32(tag, name, desc, parents=None):
    return Field(tag, U32, RightPadded(4), name=name, desc=desc, parents=parents)


def _sum(tag, name, desc, parents=None):
    return Field(tag, U64, NoPadding(6), name=name, desc=desc, parents=parents)


def _str(tag, name, desc, maxlen, multi=False):
    return Field(tag, String, NoPadding(maxlen), multi=multi, name=name, desc=desc)


def _inn(tag, name, desc, multi=False):
    return Field(tag, String, RightPadded(12, b' '), multi=multi, name=name, desc=desc)


FISCAL_REPORT = _doc(1, 'fiscalReport', 'отчёт о регистрации', 6144)
OPEN_SHIFT = _doc(2, 'openShift', 'отчёт об открытии смены', 4096)
RECEIPT = _doc(3, 'receipt', 'кассовый чек', 32768)
BSO = _doc(4, 'bso', 'бланк строгой отчетности', 32768)
CLOSE_SHIFT = _doc(5, 'closeShift', 'отчёт о закрытии смены', 4096)
CLOSE_ARCHIVE = _doc(6, 'closeArchive', 'отчёт о закрытии фискального накопителя', 4096)
OPERATOR_ACK = _doc(7, 'operatorAck', 'подтверждение оператора', 512)
FISCAL_REPORT_CORRECTION = _doc(11, 'fiscalReportCorrection', 'отчёт об изменении параметров регистрации', 6144)
CURRENT_STATE_REPORT = _doc(21, 'currentStateReport', 'отчёт о текущем состоянии расчетов', 32768)
RECEIPT_CORRECTION = _doc(31, 'receiptCorrection', 'кассовый чек коррекции', 32768)
BSO_CORRECTION = _doc(41, 'bsoCorrection', 'бланк строгой отчетности коррекции', 32768)

DOC_NAME = _str(1000, None, 'наименование документа', None)
AUTO_MODE = _flag(1001, 'autoMode', 'признак автоматического режима')
OFFLINE_MODE = _flag(1002, 'offlineMode', 'признак автономного режима')
TRANSFER_OPERATOR_ADDRESS = _str(1005, 'transferOperatorAddress', 'адрес оператора перевода', 256, multi=True)
BUYER_PHONE_OR_ADDRESS = _str(1008, 'buyerPhoneOrAddress', 'телефон или электронный адрес покупателя', 64)
RETAIL_PLACE_ADDRESS = _str(1009, 'retailPlaceAddress', 'адрес расчетов', 256)
DATE_TIME = Field(1012, UnixTime, RightPadded(4), name='dateTime', desc='дата, время')
KKT_NUMBER = _str(1013, 'kktNumber', 'заводской номер ККТ', 20)
TRANSFER_OPERATOR_INN = _inn(1016, 'transferOperatorInn', 'ИНН оператора перевода', multi=True)
OFD_INN = _inn(1017, 'ofdInn', 'ИНН ОФД')
USER_INN = _inn(1018, 'userInn', 'ИНН пользователя')
TOTAL_SUM = _sum(1020, 'totalSum', 'сумма расчета, указанного в чеке (БСО)')
OPERATOR = _str(1021, 'operator', 'кассир', 64)
OFD_RESPONSE_CODE = Field(1022, OFD_RESPONSE, RightPadded(1), name='ofdResponseCode', desc='код ответа ОФД')
QUANTITY = Field(1023, FVLN, NoPadding(8), name='quantity', desc='количество предмета расчета')
TRANSFER_OPERATOR_NAME = _str(1026, 'transferOperatorName', 'наименование оператора перевода', 64, multi=True)
ITEM_NAME = _str(1030, 'name', 'наименование предмета расчета', 128)
CASH_TOTAL_SUM = _sum(1031, 'cashTotalSum', 'сумма по чеку (БСО) наличными')
MACHINE_NUMBER = _str(1036, 'machineNumber', 'номер автомата', 20)
KKT_REG_ID = Field(1037, String, RightPadded(20, b' '), name='kktRegId', desc='регистрационный номер ККТ')
SHIFT_NUMBER = _u32(1038, 'shiftNumber', 'номер смены')
FISCAL_DOCUMENT_NUMBER = _u32(1040, 'fiscalDocumentNumber', 'номер ФД')
FISCAL_DRIVE_NUMBER = Field(1041, String, Fixed(16), name='fiscalDriveNumber', desc='номер ФН')
REQUEST_NUMBER = _u32(1042, 'requestNumber', 'номер чека за смену')
ITEM_SUM = _sum(1043, 'sum', 'стоимость предмета расчета с учетом скидок и наценок')
PAYMENT_AGENT_OPERATION = _str(1044, 'paymentAgentOperation', 'операция платежного агента', 24, multi=True)
OFD_NAME = _str(1046, 'ofdName', 'наименование ОФД', 256)
USER = _str(1048, 'user', 'наименование пользователя', 256)
FISCAL_DRIVE_EXHAUSTION_SIGN = _flag(1050, 'fiscalDriveExhaustionSign', 'признак исчерпания ресурса ФН')
FISCAL_DRIVE_REPLACE_REQUIRED_SIGN = _flag(1051, 'fiscalDriveReplaceRequiredSign', 'признак необходимости срочной замены ФН')
FISCAL_DRIVE_MEMORY_EXCEEDED_SIGN = _flag(1052, 'fiscalDriveMemoryExceededSign', 'признак заполнения памяти ФН')
OFD_RESPONSE_TIMEOUT_SIGN = _flag(1053, 'ofdResponseTimeoutSign', 'признак превышения времени ожидания ответа ОФД')
OPERATION_TYPE = Field(1054, PAYMENT_TYPE, RightPadded(1), name='operationType', desc='признак расчета')
# Некоторые ККТ дополняют этот тег символом '0', а не нулевым байтом.
APPLIED_TAXATION_TYPE = Field(
    1055, TAXATION_TYPES, RightPadded(1, b'0'), name='appliedTaxationType', desc='применяемая система налогообложения'
)
ENCRYPTION_SIGN = _flag(1056, 'encryptionSign', 'признак шифрования')
PAYMENT_AGENT_TYPE = Field(1057, AGENT_TYPES, RightPadded(1), name='paymentAgentType', desc='признак агента')
ITEMS = _stlv(1059, 'items', 'предмет расчета', 1024, multi=True)
FNS_URL = _str(1060, 'fnsUrl', 'адрес сайта ФНС', 256)
OFD_URL = _str(1061, None, 'адрес сайта ОФД', 64)
TAXATION_TYPE = Field(1062, TAXATION_TYPES, RightPadded(1), name='taxationType', desc='системы налогообложения')
MESSAGE_TO_FN = _stlv(1068, 'messageToFn', 'сообщение оператора для ФН', 169)
PAYMENT_AGENT_PHONE = _str(1073, 'paymentAgentPhone', 'телефон платежного агента', 19, multi=True)
PAYMENT_OPERATOR_PHONE = _str(1074, 'paymentOperatorPhone', 'телефон оператора по приему платежей', 19, multi=True)
TRANSFER_OPERATOR_PHONE = _str(1075, 'transferOperatorPhone', 'телефон оператора перевода', 19, multi=True)
FISCAL_SIGN = Field(1077, ByteArray(6, as_number=True), Fixed(6), name='fiscalSign', desc='ФПД')
OPERATOR_FISCAL_SIGN = Field(1078, Bytes, NoPadding(16), name='operatorFiscalSign', desc='ФПО')
PRICE = _sum(1079, 'price', 'цена за единицу предмета расчета с учетом скидок и наценок')
ECASH_TOTAL_SUM = _sum(1081, 'ecashTotalSum', 'сумма по чеку (БСО) безналичными')
PROPERTIES = _stlv(1084, 'properties', 'дополнительный реквизит пользователя', 320)
PROPERTY_NAME = _str(1085, 'propertyName', 'наименование дополнительного реквизита пользователя', 64)
PROPERTY_VALUE = _str(1086, 'propertyValue', 'значение дополнительного реквизита пользователя', 256)
NOT_TRANSMITTED_DOCUMENTS_QUANTITY = _u32(1097, 'notTransmittedDocumentsQuantity', 'количество непереданных ФД')
NOT_TRANSMITTED_DOCUMENTS_DATE_TIME = Field(
    1098, Date, RightPadded(4), name='notTransmittedDocumentsDateTime', desc='дата первого из непереданных ФД'
)
CORRECTION_REASON_CODE = Field(
    1101, REREGISTRATION_REASON, RightPadded(1), multi=True, name='correctionReasonCode',
    desc='код причины перерегистрации'
)
NDS_18 = _sum(1102, 'nds18', 'сумма НДС чека по ставке 20%')
NDS_10 = _sum(1103, 'nds10', 'сумма НДС чека по ставке 10%')
NDS_0 = _sum(1104, 'nds0', 'сумма расчета по чеку с НДС по ставке 0%')
NDS_NO = _sum(1105, 'ndsNo', 'сумма расчета по чеку без НДС')
NDS_18_118 = _sum(1106, 'nds18118', 'сумма НДС чека по расч. ставке 20/120')
NDS_10_110 = _sum(1107, 'nds10110', 'сумма НДС чека по расч. ставке 10/110')
INTERNET_SIGN = _flag(1108, 'internetSign', 'признак ККТ для расчетов только в Интернет')
SERVICE_SIGN = _flag(1109, 'serviceSign', 'признак расчетов за услуги')
BSO_SIGN = _flag(1110, 'bsoSign', 'признак АС БСО')
DOCUMENTS_QUANTITY = _u32(1111, 'documentsQuantity', 'общее количество ФД за смену')
NOT_TRANSMITTED_DOCUMENT_NUMBER = _u32(1116, 'notTransmittedDocumentNumber', 'номер первого непереданного документа')
SELLER_ADDRESS = _str(1117, 'sellerAddress', 'адрес электронной почты отправителя чека', 64)
RECEIPTS_QUANTITY = _u32(1118, 'receiptsQuantity', 'количество кассовых чеков (БСО) за смену')
LOTTERY_SIGN = _flag(1126, 'lotterySign', 'признак проведения лотереи')
SELL_OPER = _stlv(1129, 'sellOper', 'счетчики операций «приход»', 116)
SELL_RETURN_OPER = _stlv(1130, 'sellReturnOper', 'счетчики операций «возврат прихода»', 116)
BUY_OPER = _stlv(1131, 'buyOper', 'счетчики операций «расход»', 116)
BUY_RETURN_OPER = _stlv(1132, 'buyReturnOper', 'счетчики операций «возврат расхода»', 116)
RECEIPT_CORRECTION_COUNTERS = _stlv(1133, 'receiptCorrection', 'счетчики операций по чекам коррекции', 216)
TOTAL_RECEIPT_BSO_COUNT = _u32(1134, 'totalReceiptBsoCount', 'количество чеков (БСО) и чеков коррекции (БСО коррекции)')
RECEIPT_BSO_COUNT = _u32(1135, 'receiptBsoCount', 'количество чеков (БСО) по признаку расчетов')
CASH_SUM = _sum(1136, 'cashSum', 'итоговая сумма в чеках (БСО) наличными')
ECASH_SUM = _sum(1138, 'ecashSum', 'итоговая сумма в чеках (БСО) безналичными')
TAX_18_SUM = _sum(1139, 'tax18Sum', 'сумма НДС по ставке 20%')
TAX_10_SUM = _sum(1140, 'tax10Sum', 'сумма НДС по ставке 10%')
TAX_18_118_SUM = _sum(1141, 'tax18118Sum', 'сумма НДС по расч. ставке 20/120')
TAX_10_110_SUM = _sum(1142, 'tax10110Sum', 'сумма НДС по расч. ставке 10/110')
TAX_0_SUM = _sum(1143, 'tax0Sum', 'сумма расчетов с НДС по ставке 0%')
RECEIPT_CORRECTION_COUNT = _u32(1144, 'receiptCorrectionCount', 'количество чеков коррекции (БСО коррекции)')
SELL_CORRECTION = _stlv(1145, 'sellCorrection', 'счетчики коррекций по признаку «приход»', 32)
BUY_CORRECTION = _stlv(1146, 'buyCorrection', 'счетчики коррекций по признаку «расход»', 32)
FISCAL_DRIVE_SUM_REPORTS = _stlv(1157, 'fiscalDriveSumReports', 'счетчики итогов ФН', 708)
NOT_TRANSMITTED_DOCUMENTS_SUM_REPORTS = _stlv(
    1158, 'notTransmittedDocumentsSumReports', 'счетчики итогов непереданных ФД', 708
)
PRODUCT_CODE = Field(1162, Bytes, NoPadding(32), name='productCode', desc='код товара')
PROVIDER_PHONE = _str(1171, 'providerPhone', 'телефон поставщика', 19, multi=True)
CORRECTION_TYPE_FIELD = Field(1173, CORRECTION_TYPE, RightPadded(1), name='correctionType', desc='тип коррекции')
# В формате обмена имя тега начинается с кириллической «с».
CORRECTION_BASE = _stlv(1174, 'сorrectionBase', 'основание для коррекции', 292)
CORRECTION_DOCUMENT_DATE = Field(
    1178, Date, RightPadded(4), name='correctionDocumentDate', desc='дата совершения корректируемого расчета'
)
CORRECTION_DOCUMENT_NUMBER = _str(1179, 'correctionDocumentNumber', 'номер предписания налогового органа', 32)
TAX_FREE_SUM = _sum(1183, 'taxFreeSum', 'сумма расчетов без НДС')
RETAIL_PLACE = _str(1187, 'retailPlace', 'место расчетов', 256)
KKT_VERSION = _str(1188, 'kktVersion', 'версия ККТ', 8)
DOCUMENT_KKT_VERSION = Field(1189, FFD_VERSION, RightPadded(1), name='documentKktVersion', desc='версия ФФД ККТ')
DOCUMENT_FD_VERSION = Field(1190, FFD_VERSION, RightPadded(1), name='documentFdVersion', desc='версия ФФД ФН')
PROPERTIES_ITEM = _str(1191, 'propertiesItem', 'дополнительный реквизит предмета расчета', 64)
PROPERTIES_DATA = _str(1192, 'propertiesData', 'дополнительный реквизит чека (БСО)', 16, multi=True)
GAMBLING_SIGN = _flag(1193, 'gamblingSign', 'признак проведения азартных игр')
SHIFT_SUM_REPORTS = _stlv(1194, 'shiftSumReports', 'счетчики итогов смены', 708)
UNIT = _str(1197, 'unit', 'единица измерения предмета расчета', 16)
UNIT_NDS = _sum(1198, 'unitNds', 'размер НДС за единицу предмета расчета')
NDS = Field(1199, VAT_TYPE, RightPadded(1), name='nds', desc='ставка НДС')
NDS_SUM = _sum(1200, 'ndsSum', 'сумма НДС за предмет расчета')
COUNTER_TOTAL_SUM = _sum(1201, 'totalSum', 'общая итоговая сумма в чеках (БСО)', parents=COUNTER_TAGS)
OPERATOR_INN = _inn(1203, 'operatorInn', 'ИНН кассира')
CORRECTION_KKT_REASON_CODE = Field(
    1205, KKT_INFO_UPDATE_REASONS, RightPadded(4), name='correctionKktReasonCode',
    desc='коды причин изменения сведений о ККТ'
)
OPERATOR_MESSAGE = Field(1206, OPERATOR_MESSAGES, RightPadded(1), name='operatorMessage', desc='сообщение оператора')
EXCISE_DUTY_PRODUCT_SIGN = _flag(1207, 'exciseDutyProductSign', 'признак торговли подакцизными товарами')
FISCAL_DOCUMENT_FORMAT_VER = Field(
    1209, FFD_VERSION, RightPadded(1), name='fiscalDocumentFormatVer', desc='номер версии ФФД'
)
PRODUCT_TYPE = Field(1212, ITEM_TYPE, RightPadded(1), name='productType', desc='признак предмета расчета')
FD_KEY_RESOURCE = Field(1213, U16, RightPadded(2), name='fdKeyResource', desc='ресурс ключей ФП')
PAYMENT_TYPE_FIELD = Field(1214, PAYMENT_METHOD, RightPadded(1), name='paymentType', desc='признак способа расчета')
PREPAID_SUM = _sum(1215, 'prepaidSum', 'сумма по чеку (БСО) предоплатой (зачетом аванса)')
CREDIT_SUM = _sum(1216, 'creditSum', 'сумма по чеку (БСО) постоплатой (в кредит)')
PROVISION_SUM = _sum(1217, 'provisionSum', 'сумма по чеку (БСО) встречным предоставлением')
COUNTER_PREPAID_SUM = _sum(1218, 'prepaidSum', 'итоговая сумма в чеках (БСО) предоплатами', parents=COUNTER_TAGS)
COUNTER_CREDIT_SUM = _sum(1219, 'creditSum', 'итоговая сумма в чеках (БСО) постоплатами', parents=COUNTER_TAGS)
COUNTER_PROVISION_SUM = _sum(
    1220, 'provisionSum', 'итоговая сумма в чеках (БСО) встречными предоставлениями', parents=COUNTER_TAGS
)
PRINT_IN_MACHINE_SIGN = _flag(1221, 'printInMachineSign', 'признак установки принтера в автомате')
PAYMENT_AGENT_BY_PRODUCT_TYPE = Field(
    1222, AGENT_TYPES, RightPadded(1), name='paymentAgentByProductType', desc='признак агента по предмету расчета'
)
PAYMENT_AGENT_DATA = _stlv(1223, 'paymentAgentData', 'данные агента', 512)
PROVIDER_DATA = _stlv(1224, 'providerData', 'данные поставщика', 512)
PROVIDER_NAME = _str(1225, 'providerName', 'наименование поставщика', 256)
PROVIDER_INN = _inn(1226, 'providerInn', 'ИНН поставщика')
BUYER = _str(1227, 'buyer', 'покупатель (клиент)', 256)
BUYER_INN = _inn(1228, 'buyerInn', 'ИНН покупателя (клиента)')
EXCISE_DUTY = _sum(1229, 'exciseDuty', 'акциз')
ORIGIN_COUNTRY_CODE = Field(
    1230, String, RightPadded(3, b' '), name='originCountryCode', desc='код страны происхождения товара'
)
CUSTOM_ENTRY_NUM = _str(1231, 'customEntryNum', 'номер декларации на товар', 32)
SELL_RETURN_CORRECTION = _stlv(1232, 'sellReturnCorrection', 'счетчики коррекций по признаку «возврат прихода»', 32)
BUY_RETURN_CORRECTION = _stlv(1233, 'buyReturnCorrection', 'счетчики коррекций по признаку «возврат расхода»', 32)
BUYER_BIRTHDAY = Field(1243, String, Fixed(10), name='buyerBirthday', desc='дата рождения покупателя (клиента)')
BUYER_CITIZENSHIP = Field(1244, String, RightPadded(3, b' '), name='buyerCitizenship', desc='гражданство')
BUYER_DOCUMENT_CODE = Field(
    1245, String, RightPadded(2), name='buyerDocumentCode', desc='код вида документа, удостоверяющего личность'
)
BUYER_DOCUMENT_DATA = _str(1246, 'buyerDocumentData', 'данные документа, удостоверяющего личность', 64)
BUYER_ADDRESS = _str(1254, 'buyerAddress', 'адрес покупателя (клиента)', 256)
BUYER_INFORMATION = _stlv(1256, 'buyerInformation', 'сведения о покупателе (клиенте)', 1024)
ITEMS_INDUSTRY_DETAILS = _stlv(1260, 'itemsIndustryDetails', 'отраслевой реквизит предмета расчета', 317, multi=True)
INDUSTRY_RECEIPT_DETAILS = _stlv(1261, 'industryReceiptDetails', 'отраслевой реквизит чека', 317, multi=True)
ID_FOIV = _str(1262, 'idFoiv', 'идентификатор ФОИВ', 3)
FOUNDATION_DOC_DATE_TIME = Field(
    1263, String, Fixed(10), name='foundationDocDateTime', desc='дата документа основания'
)
FOUNDATION_DOC_NUMBER = _str(1264, 'foundationDocNumber', 'номер документа основания', 32)
INDUSTRY_PROP_VALUE = _str(1265, 'industryPropValue', 'значение отраслевого реквизита', 256)
OPERATIONAL_DETAILS = _stlv(1270, 'operationalDetails', 'операционный реквизит чека', 144)
OPERATION_ID = Field(1271, U8, RightPadded(1), name='operationId', desc='идентификатор операции')
OPERATION_DATA = _str(1272, 'operationData', 'данные операции', 64)
OPERATION_DATE_TIME = Field(
    1273, UnixTime, RightPadded(4), name='dateTime', desc='дата, время операции', parents=[1270]
)
ADDITIONAL_PROPS_FRC = _str(1274, 'additionalPropsFRC', 'дополнительный реквизит ОР', 32)
ADDITIONAL_DATA_FRC = Field(1275, Bytes, NoPadding(32), name='additionalDataFRC', desc='дополнительные данные ОР')
ADDITIONAL_PROPS_OS = _str(1276, 'additionalPropsOS', 'дополнительный реквизит ООС', 32)
ADDITIONAL_DATA_OS = Field(1277, Bytes, NoPadding(32), name='additionalDataOS', desc='дополнительные данные ООС')
ADDITIONAL_PROPS_CS = _str(1278, 'additionalPropsCS', 'дополнительный реквизит ОЗС', 32)
ADDITIONAL_DATA_CS = Field(1279, Bytes, NoPadding(32), name='additionalDataCS', desc='дополнительные данные ОЗС')
ADDITIONAL_PROPS_CSR = _str(1280, 'additionalPropsCSR', 'дополнительный реквизит ОТР', 32)
ADDITIONAL_DATA_CSR = Field(1281, Bytes, NoPadding(32), name='additionalDataCSR', desc='дополнительные данные ОТР')
ADDITIONAL_PROPS_CA = _str(1282, 'additionalPropsCA', 'дополнительный реквизит ОЗФН', 32)
ADDITIONAL_DATA_CA = Field(1283, Bytes, NoPadding(32), name='additionalDataCA', desc='дополнительные данные ОЗФН')
USAGE_CONDITION_SIGNS = Field(
    1290, KKT_USAGE, RightPadded(4), name='usageConditionSigns', desc='признаки условий применения ККТ'
)
PLANNED_PRODUCT_STATUS = Field(2003, PRODUCT_STATUS, RightPadded(1), desc='планируемый статус товара')
KM_CHECK_RESULT = Field(2004, MARKING_CHECK_RESULT, RightPadded(1), desc='результат проверки КМ')
REQUEST_PROCESSING_RESULTS = Field(
    2005, MARKING_CHECK_RESULT, RightPadded(1), desc='результаты обработки запроса о коде маркировки'
)
MARKING_CODE_TYPE = Field(2100, MARKING_TYPE, RightPadded(1), desc='тип кода маркировки')
UNDELIVERED_NOTIFICATIONS_NUMBER = _u32(2104, 'undeliveredNotificationsNumber', 'количество непереданных уведомлений')
PRODUCT_INFO_CHECK_RESULT = Field(
    2106, MARKING_CHECK_RESULT, RightPadded(1), name='checkingProdInformationResult',
    desc='результат проверки сведений о товаре'
)
OISM_PRODUCT_STATUS_RESPONSE = Field(2109, OISM_PRODUCT_STATUS, RightPadded(1), desc='ответ ОИСМ о статусе товара')
ASSIGNED_PRODUCT_STATUS = Field(2110, PRODUCT_STATUS, RightPadded(1), desc='присвоенный статус товара')
INCORRECT_MARKING_CODES = Field(
    2112, INCORRECT_MARKING_CODE_FLAGS, RightPadded(1), desc='признак некорректных кодов маркировки'
)
INCORRECT_REQUESTS_AND_NOTIFICATIONS = Field(
    2113, INCORRECT_DATA_FLAGS, RightPadded(1), desc='признак некорректных запросов и уведомлений'
)


register(*[value for value in list(globals().values()) if isinstance(value, Field)])
