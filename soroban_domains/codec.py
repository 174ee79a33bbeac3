"""
soroban_domains.codec
=====================

Encoding and decoding between SDK value types and Soroban ``SCVal``.

- :func:`to_storage_value` normalizes caller input (a typed variant or a raw
  ``(discriminant, payload)`` pair) into a :data:`StorageValue`.
- :func:`encode_storage_value` renders it as the contract expects:
  ``Vec[Symbol(tag), payload]`` with a ``Bytes``, ``I128`` or ``String`` payload.
- :func:`scval_to_native` turns any returned ``SCVal`` into plain Python
  (lists, dicts, ints, bytes, str).
- :func:`decode_record` / :func:`decode_storage_value` interpret the native
  form of ``record`` and ``get`` responses.
"""

from __future__ import annotations

from typing import Any, Callable, Dict, Mapping, Optional, Sequence

from stellar_sdk import scval
from stellar_sdk import xdr as stellar_xdr

from .errors import CodecError, DomainDataNotFoundError, DomainNotFoundError, UnsupportedValueTypeError
from .types import (
    I128_MAX,
    I128_MIN,
    STORAGE_VALUE_TYPES,
    BytesValue,
    Domain,
    NumberValue,
    Record,
    RecordKey,
    StorageValue,
    StringValue,
    SubDomain,
)
from .utils.bytes import from_hex

__all__ = [
    "to_storage_value",
    "encode_storage_value",
    "encode_record_key",
    "encode_node",
    "decode_retval",
    "scval_to_native",
    "decode_record",
    "decode_storage_value",
]


# --- Storage values -----------------------------------------------------------


def _check_payload(tag: str, payload: Any) -> Any:
    if tag == BytesValue.TAG:
        if not isinstance(payload, (bytes, bytearray, memoryview)):
            raise CodecError(f"Bytes payload must be bytes, got {type(payload).__name__}", field="value")
        return bytes(payload)
    if tag == NumberValue.TAG:
        if isinstance(payload, bool) or not isinstance(payload, int):
            raise CodecError(f"Number payload must be int, got {type(payload).__name__}", field="value")
        if not I128_MIN <= payload <= I128_MAX:
            raise CodecError(f"Number payload {payload} is outside the i128 range", field="value")
        return payload
    if not isinstance(payload, str):
        raise CodecError(f"String payload must be str, got {type(payload).__name__}", field="value")
    return payload


def to_storage_value(value: Any) -> StorageValue:
    """
    Normalize ``value`` into a typed storage value.

    Accepts a :class:`BytesValue` / :class:`NumberValue` / :class:`StringValue`
    instance or a 2-item ``(discriminant, payload)`` sequence.
    """
    if isinstance(value, (BytesValue, NumberValue, StringValue)):
        tag, payload = value.TAG, value.value
    elif isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray)) and len(value) == 2:
        tag, payload = value[0], value[1]
    else:
        raise UnsupportedValueTypeError(type(value).__name__)

    cls = STORAGE_VALUE_TYPES.get(tag) if isinstance(tag, str) else None
    if cls is None:
        raise UnsupportedValueTypeError(tag)
    return cls(_check_payload(tag, payload))


def encode_storage_value(value: Any) -> stellar_xdr.SCVal:
    """Encode a storage value as ``Vec[Symbol(tag), payload]``."""
    sv = to_storage_value(value)
    if isinstance(sv, BytesValue):
        payload = scval.to_bytes(sv.value)
    elif isinstance(sv, NumberValue):
        payload = scval.to_int128(sv.value)
    else:
        payload = scval.to_string(sv.value)
    return scval.to_vec([scval.to_symbol(sv.TAG), payload])


# --- Call arguments -------------------------------------------------------------


def encode_node(node: str) -> stellar_xdr.SCVal:
    """Hex node (optionally 0x-prefixed) -> ``Bytes`` SCVal."""
    try:
        return scval.to_bytes(from_hex(node))
    except ValueError as e:
        raise CodecError(f"node must be a hex string: {e}", field="node") from e


def encode_record_key(node: str, sub_domain: bool) -> stellar_xdr.SCVal:
    """``Vec[Symbol(Record|SubRecord), Bytes(node)]``."""
    key = RecordKey.SubRecord if sub_domain else RecordKey.Record
    return scval.to_vec([scval.to_symbol(key.value), encode_node(node)])


# --- SCVal -> native ------------------------------------------------------------


def _from_string(v: stellar_xdr.SCVal) -> str:
    raw = scval.from_string(v)
    return raw.decode("utf-8", errors="replace") if isinstance(raw, bytes) else raw


def _from_address(v: stellar_xdr.SCVal) -> str:
    return scval.from_address(v).address


def _from_vec(v: stellar_xdr.SCVal) -> Optional[list]:
    if v.vec is None:
        return None
    return [scval_to_native(item) for item in v.vec.sc_vec]


def _from_map(v: stellar_xdr.SCVal) -> Optional[Dict[Any, Any]]:
    if v.map is None:
        return None
    out: Dict[Any, Any] = {}
    for entry in v.map.sc_map:
        key = scval_to_native(entry.key)
        if isinstance(key, (list, dict)):
            key = repr(key)
        out[key] = scval_to_native(entry.val)
    return out


_T = stellar_xdr.SCValType

_NATIVE: Dict[Any, Callable[[stellar_xdr.SCVal], Any]] = {
    _T.SCV_VOID: lambda v: None,
    _T.SCV_BOOL: scval.from_bool,
    _T.SCV_U32: scval.from_uint32,
    _T.SCV_I32: scval.from_int32,
    _T.SCV_U64: scval.from_uint64,
    _T.SCV_I64: scval.from_int64,
    _T.SCV_TIMEPOINT: scval.from_timepoint,
    _T.SCV_DURATION: scval.from_duration,
    _T.SCV_U128: scval.from_uint128,
    _T.SCV_I128: scval.from_int128,
    _T.SCV_U256: scval.from_uint256,
    _T.SCV_I256: scval.from_int256,
    _T.SCV_BYTES: scval.from_bytes,
    _T.SCV_STRING: _from_string,
    _T.SCV_SYMBOL: scval.from_symbol,
    _T.SCV_VEC: _from_vec,
    _T.SCV_MAP: _from_map,
    _T.SCV_ADDRESS: _from_address,
}


def scval_to_native(v: stellar_xdr.SCVal) -> Any:
    """
    Convert an ``SCVal`` into plain Python.

    void -> None, integers of every width -> int, bytes -> bytes,
    string/symbol -> str, vec -> list, map -> dict, address -> strkey str.
    """
    conv = _NATIVE.get(v.type)
    if conv is None:
        raise CodecError(f"unsupported SCVal type {v.type!r}")
    return conv(v)


def decode_retval(retval_xdr: Optional[str]) -> Any:
    """base64 XDR of a simulation's return value -> native Python."""
    if not retval_xdr:
        return None
    return scval_to_native(stellar_xdr.SCVal.from_xdr(retval_xdr))


# --- Responses ------------------------------------------------------------------


def _field(fields: Mapping[str, Any], name: str) -> Any:
    try:
        return fields[name]
    except (KeyError, TypeError) as e:
        raise CodecError("record response is missing a field", field=name) from e


def _hex(fields: Mapping[str, Any], name: str) -> str:
    v = _field(fields, name)
    if not isinstance(v, (bytes, bytearray)):
        raise CodecError(f"expected bytes, got {type(v).__name__}", field=name)
    return bytes(v).hex()


def _dec(fields: Mapping[str, Any], name: str) -> str:
    return str(_field(fields, name))


def decode_record(result: Any, *, node: Optional[str] = None) -> Record:
    """
    Interpret the native ``record`` response ``[tag, fields]``.

    Raises DomainNotFoundError on an empty response. A ``"Domain"`` tag yields
    :class:`Domain`; any other tag yields :class:`SubDomain`.
    """
    if not result:
        raise DomainNotFoundError(node)
    if not isinstance(result, (list, tuple)) or len(result) < 2:
        raise CodecError(f"unexpected record response shape: {result!r}")

    tag, fields = result[0], result[1]
    if tag == "Domain":
        return Domain(
            node=_hex(fields, "node"),
            owner=_hex(fields, "owner"),
            address=str(_field(fields, "address")),
            exp_date=_dec(fields, "exp_date"),
            snapshot=_dec(fields, "snapshot"),
            collateral=_dec(fields, "collateral"),
        )
    return SubDomain(
        node=_hex(fields, "node"),
        parent=_hex(fields, "parent"),
        address=str(_field(fields, "address")),
        snapshot=_dec(fields, "snapshot"),
    )


def decode_storage_value(result: Any, *, node: Optional[str] = None, key: Optional[str] = None) -> StorageValue:
    """
    Interpret the native ``get`` response ``[tag, payload]``.

    Raises DomainDataNotFoundError on an empty response and
    UnsupportedValueTypeError on an unknown tag.
    """
    if not result:
        raise DomainDataNotFoundError(node, key)
    return to_storage_value(result)
