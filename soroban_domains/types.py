"""
Value types shared by the codec and the client.

Records
-------
A lookup yields exactly one of:

- :class:`Domain`    — a top-level name (owner, expiration, collateral…)
- :class:`SubDomain` — a name scoped under a parent domain

Binary fields are lowercase hex strings and large integers are decimal strings,
so every record is JSON-safe as returned by :meth:`to_dict`.

Storage values
--------------
The key/value contract accepts and returns a tagged union with exactly three
variants: :class:`BytesValue`, :class:`NumberValue` and :class:`StringValue`.
Each carries its discriminant in the class-level ``TAG``.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from enum import Enum
from typing import Any, Dict, Tuple, Type, Union

__all__ = [
    "RecordKey",
    "RecordType",
    "Domain",
    "SubDomain",
    "Record",
    "BytesValue",
    "NumberValue",
    "StringValue",
    "StorageValue",
    "STORAGE_VALUE_TYPES",
    "I128_MIN",
    "I128_MAX",
    "PreparedTransaction",
]


class RecordKey(str, Enum):
    """Which lookup table of the naming contract a call addresses."""

    Record = "Record"
    SubRecord = "SubRecord"


class RecordType(str, Enum):
    Domain = "Domain"
    SubDomain = "SubDomain"


@dataclass(frozen=True)
class Domain:
    node: str
    owner: str
    address: str
    exp_date: str
    snapshot: str
    collateral: str

    type = RecordType.Domain

    def to_dict(self) -> Dict[str, Any]:
        return {"type": self.type.value, "value": asdict(self)}


@dataclass(frozen=True)
class SubDomain:
    node: str
    parent: str
    address: str
    snapshot: str

    type = RecordType.SubDomain

    def to_dict(self) -> Dict[str, Any]:
        return {"type": self.type.value, "value": asdict(self)}


Record = Union[Domain, SubDomain]


# --- Storage values -----------------------------------------------------------

I128_MIN = -(2**127)
I128_MAX = 2**127 - 1


@dataclass(frozen=True)
class BytesValue:
    value: bytes

    TAG = "Bytes"

    def as_tuple(self) -> Tuple[str, bytes]:
        return (self.TAG, self.value)

    def to_json(self) -> Dict[str, Any]:
        return {"type": self.TAG, "value": bytes(self.value).hex()}


@dataclass(frozen=True)
class NumberValue:
    value: int

    TAG = "Number"

    def as_tuple(self) -> Tuple[str, int]:
        return (self.TAG, self.value)

    def to_json(self) -> Dict[str, Any]:
        # decimal string: i128 does not fit a JSON double
        return {"type": self.TAG, "value": str(self.value)}


@dataclass(frozen=True)
class StringValue:
    value: str

    TAG = "String"

    def as_tuple(self) -> Tuple[str, str]:
        return (self.TAG, self.value)

    def to_json(self) -> Dict[str, Any]:
        return {"type": self.TAG, "value": self.value}


StorageValue = Union[BytesValue, NumberValue, StringValue]

STORAGE_VALUE_TYPES: Dict[str, Type[Any]] = {
    BytesValue.TAG: BytesValue,
    NumberValue.TAG: NumberValue,
    StringValue.TAG: StringValue,
}


# --- Transactions -------------------------------------------------------------


@dataclass(frozen=True)
class PreparedTransaction:
    """
    An assembled, *unsigned* transaction and the simulation it was built from.

    ``tx`` is a ``stellar_sdk.TransactionEnvelope`` ready for signing; ``sim``
    is the RPC's ``SimulateTransactionResponse``.
    """

    tx: Any
    sim: Any

    def to_xdr(self) -> str:
        return self.tx.to_xdr()
