# coding: utf8

from .version import __version__
from .protocol import (
    ProtocolError, EndOfData, InvalidLength, InvalidFormat, NumberOutOfRange, InvalidString, FieldTooBig, StreamError,
    Repr, Int, U8, U16, U32, U64, Bool, VarFloat, FVLN, String, Bytes, ByteArray, UnixTime, Date, NoPadding, Fixed,
    RightPadded, Field
)
from .container import Container, STLV
from .document import Document
from .fields import FIELDS, by_tag, repr_of
from .enums import (
    Flags, FlagSet, CatchAll, Choice, TaxationTypes, AgentTypes, KktInfoUpdateReasons, OperatorMessages, KktUsage,
    MarkingCheckResult, IncorrectMarkingCodeFlags, IncorrectDataFlags, VatType, PaymentType, FormCode,
    ReregistrationReason, PaymentMethod, ItemType, OfdResponse, CorrectionType, FfdVersion, MarkingType, ProductStatus,
    OismProductStatus
)
from .schema import SchemaError, Tagged, Default, Header, Signature, Record, DocumentRecord
from .documents import DOCUMENT_TYPES, unpack_document
from .interchange import (
    container_to_json, json_to_container, document_to_json, json_to_document, NullValidator, DocumentValidator
)
from .envelope import SessionHeader, FrameHeader, pack_message, unpack_message
