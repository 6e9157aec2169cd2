import pytest

from dhcp4opts.options import DecodeError, opt_generic
from dhcp4opts.relay import RelayOptions, RelaySubOptionCode, opt_relay_agent_info
from dhcp4opts.types import GenericOptionCode, OptionCode

RAW = bytes([1, 5]) + b"linux" + bytes([2, 4]) + b"boot"


def test_relay_options_from_bytes():
    opts = RelayOptions.from_bytes(RAW)
    assert len(opts) == 2
    assert opts.get(GenericOptionCode(1)) == b"linux"
    assert opts.get(RelaySubOptionCode.AGENT_REMOTE_ID) == b"boot"


def test_relay_options_invalid_contents():
    with pytest.raises(DecodeError):
        RelayOptions.from_bytes(bytes([1, 7]) + b"linux")


def test_relay_options_empty():
    assert RelayOptions.from_bytes(b"") == {}


def test_opt_relay_agent_info():
    opt = opt_relay_agent_info(
        opt_generic(GenericOptionCode(1), b"linux"),
        opt_generic(GenericOptionCode(2), b"boot"),
    )
    want = (
        "Relay Agent Information:\n\n"
        "    Agent Circuit ID Sub-option: linux ([108 105 110 117 120])\n"
        "    Agent Remote ID Sub-option: boot ([98 111 111 116])\n"
    )
    assert opt.value.to_bytes() == RAW
    assert opt.code == OptionCode.RELAY_AGENT_INFORMATION
    assert str(opt) == want


def test_round_trip():
    opts = RelayOptions.from_bytes(RAW)
    assert RelayOptions.from_bytes(opts.to_bytes()) == opts


def test_sub_option_code_names():
    assert str(RelaySubOptionCode(1)) == "Agent Circuit ID Sub-option"
    assert str(RelaySubOptionCode(152)) == "Virtual Subnet Selection Control Sub-option"
    assert str(RelaySubOptionCode(3)) == "unknown (3)"


def test_unknown_sub_option_rendering():
    opts = RelayOptions.from_bytes(bytes([3, 2]) + b"ab")
    assert str(opts) == "\n    unknown (3): ab ([97 98])\n"