# dhcp4opts

A pure-Python library for DHCPv4 options: building them, serialising them to
the wire format, parsing them back, and rendering them as readable text. It
also has zero-touch provisioning (ZTP) helpers that pull vendor and circuit
information out of a client's options. It has no dependencies outside the
standard library.

## Modules

- `dhcp4opts.types` – `OptionCode` (every registered option code, with its
  name), `MessageType`, `OpcodeType`, `GenericOptionCode` for unnamed codes,
  and `TransactionID`.
- `dhcp4opts.options` – the `Options` container, `Option`, `OptionGeneric`,
  `OptionHumanizer`, `opt_generic`, `options_from_list`, and the errors
  `DecodeError` and `InvalidOptionsError`.
- `dhcp4opts.values` – typed option values (`IP`, `IPs`, `Duration`,
  `Uint16`, `IPMask`, `Strings`, `OptionCodeList`, `VIVCIdentifier`,
  `VIVCIdentifiers`, `Route`, `Routes`), the `opt_*` constructors and the
  `get_ip`, `get_ips` and `get_uint16` accessors.
- `dhcp4opts.relay` – the Relay Agent Information option (RFC 3046):
  `RelayOptions`, `RelaySubOptionCode` and `opt_relay_agent_info`.
- `dhcp4opts.decode` – `parse_option`, `parser_for` and `get_option`, which
  turn raw option data into a readable value by option code.
- `dhcp4opts.ztp` – `parse_vendor_data`, `parse_circuit_id`,
  `match_circuit_id`, `VendorData` and `CircuitID`.

## Building and serialising options

```python
from datetime import timedelta
from ipaddress import IPv4Address

from dhcp4opts.options import options_from_list
from dhcp4opts.types import MessageType
from dhcp4opts.values import (
    opt_dns,
    opt_ip_address_lease_time,
    opt_message_type,
    opt_router,
)

opts = options_from_list(
    opt_message_type(MessageType.DISCOVER),
    opt_router(IPv4Address("192.168.0.1")),
    opt_dns(IPv4Address("192.168.0.1"), IPv4Address("192.168.0.10")),
    opt_ip_address_lease_time(timedelta(hours=12)),
)
wire = opts.to_bytes()
```

`Options` maps the one-byte option code to the raw option data.
`Options.update` sets an option from an `Option`, replacing any option with
the same code. `to_bytes` writes options in ascending code order, never
writes Pad (0) or End (255), and splits data longer than 255 bytes into
several instances of the same option (RFC 3396).

Each `Option` renders as `<name>: <value>`, for example
`str(opt_ip_address_lease_time(timedelta(hours=12)))` is
`"IP Addresses Lease Time: 12h0m0s"`.

## Parsing

```python
from dhcp4opts.options import Options
from dhcp4opts.types import OptionCode
from dhcp4opts.values import get_ips, get_uint16

opts = Options.from_bytes(wire, check_end=False)
routers = get_ips(OptionCode.ROUTER, opts)
```

`Options.from_bytes` reads options until the End option or the end of the
data and joins repeated instances of one option into a single value. With
`check_end=True` a missing End option is an error. Bytes after End must be
padding, otherwise `InvalidOptionsError` is raised; truncated options raise
`DecodeError`. Both are subclasses of `ValueError`.

`get_ip` and `get_ips` return `None` when the option is absent or malformed.
`get_uint16` raises `KeyError` when the option is absent and `DecodeError`
when it is malformed. Every value type also has a `from_bytes` class method
that raises `DecodeError` on bad data.

## Readable output

`str(opts)` lists every option, in code order, by name with a decoded value.
`Options.summary(vendor_decoder)` does the same but decodes Vendor Specific
Information (option 43) with `vendor_decoder`, any object with a `from_bytes`
class method. `dhcp4opts.decode.parse_option(code, data)` decodes one value;
data it cannot decode is shown as a list of byte values.

## Zero-touch provisioning

```python
from dhcp4opts.ztp import parse_circuit_id, parse_vendor_data

vendor = parse_vendor_data(opts)
circuit = parse_circuit_id(opts)
print(vendor.vendor_name, vendor.model, vendor.serial)
print(circuit.format_circuit_id())
```

`parse_vendor_data` recognises the class identifier (option 60) formats used
by Arista, Juniper, ZPE Systems, Ciena and Cisco Firepower, and Cisco's
entry in the vendor-identifying vendor class option (option 124).
`parse_circuit_id` reads the circuit ID sub-option of the relay agent
information option (option 82) and matches it with `match_circuit_id`
against the interface naming schemes of common switch and router vendors.
Both raise `ValueError` when nothing can be identified.

## What this package does not do

It works on the options part of a DHCPv4 message only. It does not encode or
decode the fixed message header (opcode, addresses, hardware address, magic
cookie), and it has no client, server, relay or socket handling: sending and
receiving packets is left to the caller.

## Running the tests

```
pip install -e ".[test]"
pytest
```