"""Zero-touch provisioning helpers: circuit IDs and vendor identification."""

from __future__ import annotations

import re
from dataclasses import dataclass

from .options import DecodeError, Options
from .relay import RelayOptions, RelaySubOptionCode
from .types import OptionCode
from .values import VIVCIdentifiers

__all__ = [
    "CircuitID",
    "match_circuit_id",
    "parse_circuit_id",
    "VendorData",
    "parse_vendor_data",
]

_ENTERPRISE_CISCO = 9
_ENTERPRISE_CISCO_NAME = "Cisco Systems"
_ENTERPRISE_CIENA = 1271
_ENTERPRISE_CIENA_NAME = "Ciena Corporation"

_CIRCUIT_PATTERNS = [
    # Juniper QFX et-0/0/0:0.0 and xe-0/0/0:0.0
    re.compile(r"^(et|xe)-(?P<slot>[0-9]+)/(?P<mod>[0-9]+)/(?P<port>[0-9]+):(?P<subport>[0-9]+).*\Z"),
    # Juniper PTX et-0/0/0.0
    re.compile(r"^et-(?P<slot>[0-9]+)/(?P<mod>[0-9]+)/(?P<port>[0-9]+).(?P<subport>[0-9]+)\Z"),
    # Juniper EX ge-0/0/0.0
    re.compile(r"^ge-(?P<slot>[0-9]+)/(?P<mod>[0-9]+)/(?P<port>[0-9]+).(?P<subport>[0-9]+).*"),
    # Arista Ethernet3/17/1, possibly prefixed by circuit id type and length
    re.compile(r"Ethernet(?P<slot>[0-9]+)/(?P<mod>[0-9]+)/(?P<port>[0-9]+)\Z"),
    # Juniper QFX et-1/0/61
    re.compile(r"^et-(?P<slot>[0-9]+)/(?P<mod>[0-9]+)/(?P<port>[0-9]+)\Z"),
    # Arista Ethernet14:Vlan2001 and Ethernet10:2020
    re.compile(r"Ethernet(?P<port>[0-9]+):(?P<vlan>.*)\Z"),
    # Cisco Gi1/10:2020
    re.compile(r"^Gi(?P<slot>[0-9]+)/(?P<port>[0-9]+):(?P<vlan>.*)\Z"),
    # Nexus Ethernet1/3
    re.compile(r"^Ethernet(?P<slot>[0-9]+)/(?P<port>[0-9]+)\Z"),
    # Juniper bundle interface ae52.0
    re.compile(r"^ae(?P<port>[0-9]+).(?P<subport>[0-9])\Z"),
    # Ciena
    re.compile(r"\.OSC(-[0-9]+)?-(?P<slot>[0-9]+)-(?P<port>[0-9]+)\Z"),
]

_GROUP_FIELDS = {
    "slot": "slot",
    "mod": "module",
    "port": "port",
    "subport": "sub_port",
    "vlan": "vlan",
}


@dataclass
class CircuitID:
    """The interface location described by a network vendor's circuit ID."""

    slot: str = ""
    module: str = ""
    port: str = ""
    sub_port: str = ""
    vlan: str = ""

    def format_circuit_id(self) -> str:
        """Return the comma-separated form used in ZTP bootfile URLs."""
        return f"{self.slot},{self.module},{self.port},{self.sub_port},{self.vlan}"


def match_circuit_id(circuit_id: str) -> CircuitID:
    """Match ``circuit_id`` against the known interface formats."""
    for pattern in _CIRCUIT_PATTERNS:
        match = pattern.search(circuit_id)
        if match is None:
            continue
        fields = {
            _GROUP_FIELDS[name]: value or ""
            for name, value in match.groupdict().items()
            if name in _GROUP_FIELDS
        }
        return CircuitID(**fields)
    raise ValueError(
        f"Unable to match circuit id : {circuit_id} with listed regexes of interface types"
    )


def parse_circuit_id(options: Options) -> CircuitID:
    """Return the circuit ID carried in the relay agent information option."""
    data = options.get(OptionCode.RELAY_AGENT_INFORMATION)
    relay = None
    if data is not None:
        try:
            relay = RelayOptions.from_bytes(data)
        except DecodeError:
            relay = None
    if relay is None:
        raise ValueError("No relay agent information option found in the dhcpv4 pkt")
    circuit = (relay.get(RelaySubOptionCode.AGENT_CIRCUIT_ID) or b"").decode(
        "utf-8", "replace"
    )
    if not circuit:
        raise ValueError("no circuit-id suboption found in dhcpv4 packet")
    return match_circuit_id(circuit)


@dataclass
class VendorData:
    """Vendor name, model and serial number of a provisioning device."""

    vendor_name: str = ""
    model: str = ""
    serial: str = ""


def _get_string(options: Options, code) -> str:
    data = options.get(code)
    return "" if data is None else data.decode("utf-8", "replace")


def _malformed(detail: str = "") -> ValueError:
    return ValueError("malformed vendor option" + (f" got '{detail}'" if detail else ""))


def _parse_class_identifier(options: Options) -> VendorData | None:
    vc = _get_string(options, OptionCode.CLASS_IDENTIFIER)

    if vc.startswith("Arista;"):
        parts = vc.split(";")
        if len(parts) < 4:
            raise _malformed()
        return VendorData(parts[0], parts[1], parts[3])

    if vc.startswith("ZPESystems:"):
        parts = vc.split(":")
        if len(parts) < 3:
            raise _malformed()
        return VendorData(parts[0], parts[1], parts[2])

    # Juniper-<model>-<serial>, where the model may contain dashes, or
    # Juniper-<model> with the serial in the host name option.
    if vc.startswith("Juniper-"):
        parts = vc.split("-")
        if len(parts) < 3:
            serial = _get_string(options, OptionCode.HOST_NAME)
            if not serial:
                raise ValueError("host name option is missing")
            return VendorData(parts[0], parts[1], serial)
        return VendorData(parts[0], "-".join(parts[1:-1]), parts[-1])

    if vc.startswith("Juniper:"):
        parts = vc.split(":")
        if len(parts) == 3:
            return VendorData(parts[0], parts[1], parts[2])
        raise _malformed(vc)

    # Ciena: {vendor iana code}-{product}-{type}
    if vc.startswith(str(_ENTERPRISE_CIENA)):
        parts = vc.split("-")
        if len(parts) != 3:
            raise _malformed(vc)
        serial = _get_string(options, OptionCode.CLIENT_IDENTIFIER)
        if not serial:
            raise ValueError("client identifier option is missing")
        return VendorData(_ENTERPRISE_CIENA_NAME, f"{parts[1]}-{parts[2]}", serial)

    # Cisco Firepower: model in option 60, serial in option 61.
    if vc in ("FPR4100", "FPR9300"):
        serial = _get_string(options, OptionCode.CLIENT_IDENTIFIER)
        if not serial:
            raise ValueError("client identifier option is missing")
        return VendorData(_ENTERPRISE_CISCO_NAME, vc, serial)

    return None


def _parse_vivc(options: Options) -> VendorData | None:
    data = options.get(OptionCode.VENDOR_IDENTIFYING_VENDOR_CLASS)
    if data is None:
        return None
    try:
        identifiers = VIVCIdentifiers.from_bytes(data)
    except DecodeError:
        return None
    for ident in identifiers:
        if ident.ent_id != _ENTERPRISE_CISCO:
            continue
        vendor = VendorData(vendor_name=_ENTERPRISE_CISCO_NAME)
        # SN:0;PID:R-IOSXRV9000-CC
        for field_data in ident.data.split(b";"):
            parts = field_data.split(b":")
            if len(parts) != 2:
                raise _malformed()
            key, value = parts
            if key == b"SN":
                vendor.serial = value.decode("utf-8", "replace")
            elif key == b"PID":
                vendor.model = value.decode("utf-8", "replace")
        return vendor
    return None


def parse_vendor_data(options: Options) -> VendorData:
    """Identify the vendor, model and serial number from DHCPv4 options."""
    vendor = _parse_class_identifier(options)
    if vendor is not None:
        return vendor
    vendor = _parse_vivc(options)
    if vendor is not None:
        return vendor
    raise ValueError("no known ZTP vendor found")