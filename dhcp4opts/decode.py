"""Human-readable decoding of raw DHCPv4 option data by option code."""

from __future__ import annotations

from typing import Any, Callable

from .options import OptionGeneric
from .relay import RelayOptions
from .types import MessageType, OptionCode
from .values import (
    IP,
    IPMask,
    IPs,
    Duration,
    OptionCodeList,
    Routes,
    Strings,
    Uint16,
    VIVCIdentifiers,
)

__all__ = ["parse_option", "parser_for", "get_option"]


class _Text(str):
    """Option data shown as text."""

    @classmethod
    def from_bytes(cls, data: bytes) -> "_Text":
        return cls(bytes(data).decode("utf-8", "replace"))


_DECODERS: dict[int, Any] = {
    OptionCode.ROUTER: IPs,
    OptionCode.DOMAIN_NAME_SERVER: IPs,
    OptionCode.NTP_SERVERS: IPs,
    OptionCode.SERVER_IDENTIFIER: IPs,
    OptionCode.BROADCAST_ADDRESS: IP,
    OptionCode.REQUESTED_IP_ADDRESS: IP,
    OptionCode.SUBNET_MASK: IPMask,
    OptionCode.DHCP_MESSAGE_TYPE: MessageType,
    OptionCode.PARAMETER_REQUEST_LIST: OptionCodeList,
    OptionCode.HOST_NAME: _Text,
    OptionCode.DOMAIN_NAME: _Text,
    OptionCode.ROOT_PATH: _Text,
    OptionCode.CLASS_IDENTIFIER: _Text,
    OptionCode.TFTP_SERVER_NAME: _Text,
    OptionCode.BOOTFILE_NAME: _Text,
    OptionCode.RELAY_AGENT_INFORMATION: RelayOptions,
    OptionCode.IP_ADDRESS_LEASE_TIME: Duration,
    OptionCode.MAXIMUM_DHCP_MESSAGE_SIZE: Uint16,
    OptionCode.VENDOR_IDENTIFYING_VENDOR_CLASS: VIVCIdentifiers,
    OptionCode.CLASSLESS_STATIC_ROUTE: Routes,
}


def _try_decode(decoder, data: bytes):
    try:
        return decoder.from_bytes(data)
    except ValueError:
        return None


def get_option(code, data: bytes, vendor_decoder) -> object:
    """Decode ``data`` by option ``code``, falling back to raw data.

    ``vendor_decoder`` decodes Vendor Specific Information; it is any object
    with a ``from_bytes`` method, or None.
    """
    data = bytes(data)
    number = int(code)
    if number == OptionCode.USER_CLASS_INFORMATION:
        decoder = Strings if _try_decode(Strings, data) is not None else _Text
    elif number == OptionCode.VENDOR_SPECIFIC_INFORMATION:
        decoder = vendor_decoder
    else:
        decoder = _DECODERS.get(number)
    if decoder is not None:
        value = _try_decode(decoder, data)
        if value is not None:
            return value
    return OptionGeneric(data)


def parser_for(vendor_decoder) -> Callable[[Any, bytes], object]:
    """Return an option parser that uses ``vendor_decoder`` for vendor data."""

    def parse(code, data: bytes) -> object:
        return get_option(code, data, vendor_decoder)

    return parse


def parse_option(code, data: bytes) -> object:
    """Decode option data without a vendor-specific decoder."""
    return parser_for(None)(code, data)