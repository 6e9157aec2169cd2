"""Relay Agent Information option (RFC 3046) and its sub-option codes."""

from __future__ import annotations

from .options import Option, OptionHumanizer, Options, options_from_list
from .types import NamedByteEnum, OptionCode

__all__ = [
    "RelaySubOptionCode",
    "RelayOptions",
    "opt_relay_agent_info",
]


class RelaySubOptionCode(NamedByteEnum):
    """Sub-option codes of the Relay Agent Information option."""

    AGENT_CIRCUIT_ID = 1, "Agent Circuit ID Sub-option"  # RFC 3046
    AGENT_REMOTE_ID = 2, "Agent Remote ID Sub-option"  # RFC 3046
    DOCSIS_DEVICE_CLASS = 4, "DOCSIS Device Class Sub-option"  # RFC 3256
    LINK_SELECTION = 5, "Link Selection Sub-option"  # RFC 3527
    SUBSCRIBER_ID = 6, "Subscriber ID Sub-option"  # RFC 3993
    RADIUS_ATTRIBUTES = 7, "RADIUS Attributes Sub-option"  # RFC 4014
    AUTHENTICATION = 8, "Authentication Sub-option"  # RFC 4030
    VENDOR_SPECIFIC_INFORMATION = 9, "Vendor Specific Sub-option"  # RFC 4243
    RELAY_AGENT_FLAGS = 10, "Relay Agent Flags Sub-option"  # RFC 5010
    SERVER_IDENTIFIER_OVERRIDE = 11, "Server Identifier Override Sub-option"  # RFC 5107
    RELAY_SOURCE_PORT = 19, "Relay Source Port Sub-option"  # RFC 8357
    VIRTUAL_SUBNET_SELECTION = 151, "Virtual Subnet Selection Sub-option"  # RFC 6607
    VIRTUAL_SUBNET_SELECTION_CONTROL = (
        152,
        "Virtual Subnet Selection Control Sub-option",
    )  # RFC 6607


class _SubOptionValue:
    """Renders a sub-option value as text followed by its bytes."""

    def __init__(self, data: bytes) -> None:
        self.data = bytes(data)

    def __str__(self) -> str:
        listing = "[" + " ".join(str(b) for b in self.data) + "]"
        return f"{self.data.decode('utf-8', 'replace')} ({listing})"


_RELAY_HUMANIZER = OptionHumanizer(
    value_humanizer=lambda code, data: _SubOptionValue(data),
    code_humanizer=RelaySubOptionCode,
)


class RelayOptions(Options):
    """Options rendered in the Relay Agent Information sub-option space."""

    def to_bytes(self) -> bytes:
        """Serialize the sub-options."""
        return super().to_bytes()

    @classmethod
    def from_bytes(cls, data: bytes) -> "RelayOptions":
        """Parse relay agent sub-options from ``data``."""
        return cls(Options.from_bytes(data, False))

    def __str__(self) -> str:
        return "\n" + self.to_string(_RELAY_HUMANIZER)

    def __repr__(self) -> str:
        return f"RelayOptions({dict.__repr__(self)})"


def opt_relay_agent_info(*args: Option) -> Option:
    """Relay Agent Information option (RFC 3046) holding the given sub-options."""
    return Option(
        OptionCode.RELAY_AGENT_INFORMATION, RelayOptions(options_from_list(*args))
    )