"""Typed values for DHCPv4 options and the functions that build those options."""

from __future__ import annotations

import struct
from dataclasses import dataclass
from datetime import timedelta
from ipaddress import IPv4Address, IPv4Network
from typing import Iterable

from .options import DecodeError, Option, Options, opt_generic
from .types import MessageType, OptionCode

__all__ = [
    "MAX_LEASE_TIME",
    "IP",
    "IPs",
    "Duration",
    "Uint16",
    "IPMask",
    "Strings",
    "OptionCodeList",
    "VIVCIdentifier",
    "VIVCIdentifiers",
    "Route",
    "Routes",
    "get_ip",
    "get_ips",
    "get_uint16",
    "opt_broadcast_address",
    "opt_requested_ip_address",
    "opt_server_identifier",
    "opt_ip_address_lease_time",
    "opt_router",
    "opt_ntp_servers",
    "opt_dns",
    "opt_max_message_size",
    "opt_message_type",
    "opt_parameter_request_list",
    "opt_classless_static_route",
    "opt_rfc3004_user_class",
    "opt_subnet_mask",
    "opt_vivc",
    "opt_client_identifier",
]

_IPV4_LEN = 4
_UINT32_MAX = 0xFFFFFFFF


def _require_length(data: bytes, size: int, what: str) -> None:
    if len(data) < size:
        raise DecodeError(f"short byte stream: {what} needs {size} bytes, got {len(data)}")
    if len(data) > size:
        raise DecodeError(f"{len(data) - size} trailing bytes after {what}")


def _as_ipv4(value) -> IPv4Address:
    return value if isinstance(value, IPv4Address) else IPv4Address(value)


class IP(IPv4Address):
    """A single IPv4 address option value (RFC 2132, Sections 5.3, 9.1, 9.7)."""

    def to_bytes(self) -> bytes:
        """Return the four address bytes."""
        return self.packed

    @classmethod
    def from_bytes(cls, data: bytes) -> "IP":
        """Parse exactly four bytes."""
        data = bytes(data)
        _require_length(data, _IPV4_LEN, "IPv4 address")
        return cls(data)


class IPs(list):
    """A list of IPv4 addresses (RFC 2132, Sections 3.5-3.13, 8.x)."""

    def __init__(self, addresses: Iterable = ()):
        super().__init__(_as_ipv4(a) for a in addresses)

    def to_bytes(self) -> bytes:
        """Return the concatenated address bytes."""
        return b"".join(_as_ipv4(a).packed for a in self)

    @classmethod
    def from_bytes(cls, data: bytes) -> "IPs":
        """Parse one or more four-byte addresses."""
        data = bytes(data)
        if not data:
            raise DecodeError("IP DHCP options must always list at least one IP")
        if len(data) % _IPV4_LEN:
            raise DecodeError(
                f"{len(data) % _IPV4_LEN} trailing bytes after IPv4 address list"
            )
        return cls(
            IPv4Address(data[i : i + _IPV4_LEN]) for i in range(0, len(data), _IPV4_LEN)
        )

    def __str__(self) -> str:
        return ", ".join(str(ip) for ip in self)


def _decimal(value: int, places: int) -> str:
    whole, frac = divmod(value, 10**places)
    if frac:
        return f"{whole}." + f"{frac:0{places}d}".rstrip("0")
    return str(whole)


class Duration(timedelta):
    """The IP address lease time option value (RFC 2132, Section 9.2)."""

    def _total_microseconds(self) -> int:
        return (self.days * 86400 + self.seconds) * 1_000_000 + self.microseconds

    def to_bytes(self) -> bytes:
        """Return the whole seconds as a big-endian uint32."""
        micros = self._total_microseconds()
        seconds = abs(micros) // 1_000_000 * (-1 if micros < 0 else 1)
        if not 0 <= seconds <= _UINT32_MAX:
            raise ValueError(f"lease time of {seconds}s cannot be encoded")
        return struct.pack(">I", seconds)

    @classmethod
    def from_bytes(cls, data: bytes) -> "Duration":
        """Parse a four-byte count of seconds."""
        data = bytes(data)
        _require_length(data, 4, "lease time")
        return cls(seconds=struct.unpack(">I", data)[0])

    def __str__(self) -> str:
        total = self._total_microseconds()
        if total == 0:
            return "0s"
        sign = "-" if total < 0 else ""
        micros = abs(total)
        if micros < 1000:
            return f"{sign}{micros}\u00b5s"
        if micros < 1_000_000:
            return f"{sign}{_decimal(micros, 3)}ms"
        seconds, frac = divmod(micros, 1_000_000)
        hours, rest = divmod(seconds, 3600)
        minutes, seconds = divmod(rest, 60)
        sec_text = _decimal(seconds * 1_000_000 + frac, 6) + "s"
        if hours:
            return f"{sign}{hours}h{minutes}m{sec_text}"
        if minutes:
            return f"{sign}{minutes}m{sec_text}"
        return sign + sec_text


MAX_LEASE_TIME = Duration(seconds=_UINT32_MAX)


class Uint16(int):
    """A 16-bit unsigned option value (RFC 2132, Section 9.10)."""

    def __new__(cls, value: int = 0):
        number = int(value)
        if not 0 <= number <= 0xFFFF:
            raise ValueError(f"{number} does not fit in 16 bits")
        return super().__new__(cls, number)

    def to_bytes(self) -> bytes:  # type: ignore[override]
        """Return the big-endian encoding."""
        return struct.pack(">H", int(self))

    @classmethod
    def from_bytes(cls, data: bytes) -> "Uint16":  # type: ignore[override]
        """Parse exactly two big-endian bytes."""
        data = bytes(data)
        _require_length(data, 2, "uint16")
        return cls(struct.unpack(">H", data)[0])

    def __str__(self) -> str:
        return str(int(self))

    def __repr__(self) -> str:
        return f"Uint16({int(self)})"


class IPMask(bytes):
    """The subnet mask option value (RFC 2132, Section 3.3)."""

    def __new__(cls, value=b""):
        if isinstance(value, (str, IPv4Address)):
            value = _as_ipv4(value).packed
        return super().__new__(cls, bytes(value))

    def to_bytes(self) -> bytes:
        """Return at most the first four mask bytes."""
        return bytes(self[:_IPV4_LEN])

    @classmethod
    def from_bytes(cls, data: bytes) -> "IPMask":
        """Parse exactly four bytes."""
        data = bytes(data)
        _require_length(data, _IPV4_LEN, "subnet mask")
        return cls(data)

    def __str__(self) -> str:
        return self.hex() if self else "<nil>"

    def __repr__(self) -> str:
        return f"IPMask({bytes(self)!r})"


class Strings(list):
    """A list of length-prefixed strings (RFC 3004)."""

    def to_bytes(self) -> bytes:
        """Encode each string with a one-byte length prefix."""
        out = bytearray()
        for text in self:
            raw = text.encode("utf-8", "surrogateescape")
            if len(raw) > 255:
                raise ValueError(f"string of {len(raw)} bytes is too long")
            out.append(len(raw))
            out += raw
        return bytes(out)

    @classmethod
    def from_bytes(cls, data: bytes) -> "Strings":
        """Parse one or more non-empty length-prefixed strings."""
        data = bytes(data)
        if not data:
            raise DecodeError("Strings DHCP option must always list at least one String")
        result = cls()
        pos = 0
        while pos < len(data):
            length = data[pos]
            pos += 1
            if length == 0:
                raise DecodeError("DHCP Strings must have length greater than 0")
            if pos + length > len(data):
                raise DecodeError(
                    f"short byte stream: string needs {length} bytes, got {len(data) - pos}"
                )
            result.append(data[pos : pos + length].decode("utf-8", "surrogateescape"))
            pos += length
        return result

    def __str__(self) -> str:
        return ", ".join(self)


class OptionCodeList(list):
    """A list of option codes, as in the parameter request list (RFC 2132, 9.8)."""

    def has(self, code) -> bool:
        """Return whether ``code`` is in the list."""
        return code in self

    def add(self, *args) -> None:
        """Append each code not yet in the list."""
        for code in args:
            if not self.has(code):
                self.append(code)

    def to_bytes(self) -> bytes:
        """Return one byte per code, in list order."""
        return bytes(int(code) for code in self)

    @classmethod
    def from_bytes(cls, data: bytes) -> "OptionCodeList":
        """Parse one code per byte."""
        return cls(OptionCode(b) for b in bytes(data))

    def __str__(self) -> str:
        return ", ".join(str(code) for code in sorted(self, key=int))


@dataclass(frozen=True)
class VIVCIdentifier:
    """One vendor class entry of the vendor-identifying vendor class option."""

    ent_id: int
    data: bytes

    def __post_init__(self) -> None:
        object.__setattr__(self, "data", bytes(self.data))


class VIVCIdentifiers(list):
    """The vendor-identifying vendor class option value (RFC 3925)."""

    def to_bytes(self) -> bytes:
        """Encode each entry as enterprise ID, length and data."""
        out = bytearray()
        for ident in self:
            if len(ident.data) > 255:
                raise ValueError(f"vendor class data of {len(ident.data)} bytes is too long")
            out += struct.pack(">IB", ident.ent_id, len(ident.data))
            out += ident.data
        return bytes(out)

    @classmethod
    def from_bytes(cls, data: bytes) -> "VIVCIdentifiers":
        """Parse the entries; any incomplete entry is an error."""
        data = bytes(data)
        result = cls()
        pos = 0
        while len(data) - pos >= 5:
            ent_id, length = struct.unpack_from(">IB", data, pos)
            pos += 5
            if pos + length > len(data):
                raise DecodeError(
                    f"short byte stream: vendor class needs {length} bytes, "
                    f"got {len(data) - pos}"
                )
            result.append(VIVCIdentifier(ent_id, data[pos : pos + length]))
            pos += length
        if pos != len(data):
            raise DecodeError(f"{len(data) - pos} trailing bytes after vendor classes")
        return result

    def __str__(self) -> str:
        return ", ".join(
            f"{ident.ent_id}:'{ident.data.decode('utf-8', 'replace')}'" for ident in self
        )


@dataclass(frozen=True)
class Route:
    """A classless static route (RFC 3442)."""

    dest: IPv4Network
    router: IPv4Address

    def __post_init__(self) -> None:
        if not isinstance(self.dest, IPv4Network):
            object.__setattr__(self, "dest", IPv4Network(self.dest, strict=False))
        object.__setattr__(self, "router", _as_ipv4(self.router))

    def _pack(self) -> bytes:
        ones = self.dest.prefixlen
        significant = (ones + 7) // 8
        return (
            bytes([ones])
            + self.dest.network_address.packed[:significant]
            + self.router.packed
        )

    @classmethod
    def _unpack(cls, data: bytes, pos: int) -> tuple["Route", int]:
        mask_size = data[pos]
        pos += 1
        if mask_size > 32:
            raise DecodeError(f"invalid mask length {mask_size} in route option")
        significant = (mask_size + 7) // 8
        needed = significant + _IPV4_LEN
        if pos + needed > len(data):
            raise DecodeError(
                f"short byte stream: route needs {needed} bytes, got {len(data) - pos}"
            )
        dest_bytes = data[pos : pos + significant].ljust(_IPV4_LEN, b"\x00")
        pos += significant
        router = IPv4Address(data[pos : pos + _IPV4_LEN])
        pos += _IPV4_LEN
        dest = IPv4Network((IPv4Address(dest_bytes), mask_size), strict=False)
        return cls(dest, router), pos

    def __str__(self) -> str:
        return f"route to {self.dest} via {self.router}"


class Routes(list):
    """A list of classless static routes (RFC 3442)."""

    def to_bytes(self) -> bytes:
        """Encode every route."""
        return b"".join(route._pack() for route in self)

    @classmethod
    def from_bytes(cls, data: bytes) -> "Routes":
        """Parse routes until the data runs out."""
        data = bytes(data)
        result = cls()
        pos = 0
        while pos < len(data):
            route, pos = Route._unpack(data, pos)
            result.append(route)
        return result

    def __str__(self) -> str:
        return "; ".join(str(route) for route in self)


def get_ip(code, options: Options) -> IPv4Address | None:
    """Return option ``code`` parsed as one address, or None if absent or invalid."""
    data = options.get(code)
    if data is None:
        return None
    try:
        return IP.from_bytes(data)
    except DecodeError:
        return None


def get_ips(code, options: Options) -> IPs | None:
    """Return option ``code`` parsed as addresses, or None if absent or invalid."""
    data = options.get(code)
    if data is None:
        return None
    try:
        return IPs.from_bytes(data)
    except DecodeError:
        return None


def get_uint16(code, options: Options) -> int:
    """Return option ``code`` parsed as a uint16.

    Raises KeyError when absent and DecodeError when malformed.
    """
    data = options.get(code)
    if data is None:
        raise KeyError(f"option {code} not present")
    return int(Uint16.from_bytes(data))


def opt_broadcast_address(ip) -> Option:
    """Broadcast Address option (RFC 2132, Section 5.3)."""
    return Option(OptionCode.BROADCAST_ADDRESS, IP(ip))


def opt_requested_ip_address(ip) -> Option:
    """Requested IP Address option (RFC 2132, Section 9.1)."""
    return Option(OptionCode.REQUESTED_IP_ADDRESS, IP(ip))


def opt_server_identifier(ip) -> Option:
    """Server Identifier option (RFC 2132, Section 9.7)."""
    return Option(OptionCode.SERVER_IDENTIFIER, IP(ip))


def opt_ip_address_lease_time(duration) -> Option:
    """IP Address Lease Time option (RFC 2132, Section 9.2).

    ``duration`` is a timedelta or a number of seconds.
    """
    if isinstance(duration, timedelta):
        value = Duration(
            days=duration.days, seconds=duration.seconds, microseconds=duration.microseconds
        )
    else:
        value = Duration(seconds=duration)
    return Option(OptionCode.IP_ADDRESS_LEASE_TIME, value)


def opt_router(*args) -> Option:
    """Router option (RFC 2132, Section 3.5)."""
    return Option(OptionCode.ROUTER, IPs(args))


def opt_ntp_servers(*args) -> Option:
    """NTP Servers option (RFC 2132, Section 8.3)."""
    return Option(OptionCode.NTP_SERVERS, IPs(args))


def opt_dns(*args) -> Option:
    """Domain Name Server option (RFC 2132, Section 3.8)."""
    return Option(OptionCode.DOMAIN_NAME_SERVER, IPs(args))


def opt_max_message_size(size: int) -> Option:
    """Maximum DHCP Message Size option (RFC 2132, Section 9.10)."""
    return Option(OptionCode.MAXIMUM_DHCP_MESSAGE_SIZE, Uint16(size))


def opt_message_type(message_type) -> Option:
    """DHCP Message Type option (RFC 2132, Section 9.6)."""
    return Option(OptionCode.DHCP_MESSAGE_TYPE, MessageType(message_type))


def opt_parameter_request_list(*args) -> Option:
    """Parameter Request List option (RFC 2132, Section 9.8)."""
    return Option(OptionCode.PARAMETER_REQUEST_LIST, OptionCodeList(args))


def opt_classless_static_route(*args: Route) -> Option:
    """Classless Static Route option (RFC 3442)."""
    return Option(OptionCode.CLASSLESS_STATIC_ROUTE, Routes(args))


def opt_rfc3004_user_class(values: Iterable[str]) -> Option:
    """User Class option (RFC 3004)."""
    return Option(OptionCode.USER_CLASS_INFORMATION, Strings(values))


def opt_subnet_mask(mask) -> Option:
    """Subnet Mask option (RFC 2132, Section 3.3)."""
    return Option(OptionCode.SUBNET_MASK, IPMask(mask))


def opt_vivc(*args: VIVCIdentifier) -> Option:
    """Vendor-Identifying Vendor Class option (RFC 3925)."""
    return Option(OptionCode.VENDOR_IDENTIFYING_VENDOR_CLASS, VIVCIdentifiers(args))


def opt_client_identifier(ident: bytes) -> Option:
    """Client Identifier option, carried as raw data."""
    return opt_generic(OptionCode.CLIENT_IDENTIFIER, ident)