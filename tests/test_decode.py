import pytest

from dhcp4opts.decode import get_option, parse_option, parser_for
from dhcp4opts.options import OptionGeneric, opt_generic, options_from_list
from dhcp4opts.types import OptionCode
from dhcp4opts.values import IPs


@pytest.mark.parametrize(
    "code, value, want",
    [
        (OptionCode.NAME_SERVER, bytes([192, 168, 1, 254]), "[192 168 1 254]"),
        (OptionCode.SUBNET_MASK, bytes([255, 255, 255, 0]), "ffffff00"),
        (OptionCode.ROUTER, bytes([192, 168, 1, 1, 192, 168, 2, 1]), "192.168.1.1, 192.168.2.1"),
        (
            OptionCode.DOMAIN_NAME_SERVER,
            bytes([192, 168, 1, 1, 192, 168, 2, 1]),
            "192.168.1.1, 192.168.2.1",
        ),
        (OptionCode.NTP_SERVERS, bytes([192, 168, 1, 1, 192, 168, 2, 1]), "192.168.1.1, 192.168.2.1"),
        (
            OptionCode.SERVER_IDENTIFIER,
            bytes([192, 168, 1, 1, 192, 168, 2, 1]),
            "192.168.1.1, 192.168.2.1",
        ),
        (OptionCode.HOST_NAME, b"test", "test"),
        (OptionCode.DOMAIN_NAME, b"test", "test"),
        (OptionCode.ROOT_PATH, b"test", "test"),
        (OptionCode.CLASS_IDENTIFIER, b"test", "test"),
        (OptionCode.TFTP_SERVER_NAME, b"test", "test"),
        (OptionCode.BOOTFILE_NAME, b"test", "test"),
        (OptionCode.BROADCAST_ADDRESS, bytes([192, 168, 1, 1]), "192.168.1.1"),
        (OptionCode.REQUESTED_IP_ADDRESS, bytes([192, 168, 1, 1]), "192.168.1.1"),
        (OptionCode.IP_ADDRESS_LEASE_TIME, bytes([0, 0, 0, 12]), "12s"),
        (OptionCode.DHCP_MESSAGE_TYPE, bytes([1]), "DISCOVER"),
        (OptionCode.PARAMETER_REQUEST_LIST, bytes([3, 4, 5]), "Router, Time Server, Name Server"),
        (OptionCode.MAXIMUM_DHCP_MESSAGE_SIZE, bytes([1, 2]), "258"),
        (
            OptionCode.USER_CLASS_INFORMATION,
            bytes([4]) + b"test" + bytes([3]) + b"foo",
            "test, foo",
        ),
        (
            OptionCode.RELAY_AGENT_INFORMATION,
            bytes([1, 12, 99, 105, 114, 99, 117, 105, 116, 45, 105, 100, 45, 49]),
            "\n    Agent Circuit ID Sub-option: circuit-id-1 "
            "([99 105 114 99 117 105 116 45 105 100 45 49])\n",
        ),
    ],
)
def test_parse_option(code, value, want):
    assert str(parse_option(code, value)) == want


def test_malformed_falls_back_to_generic():
    value = parse_option(OptionCode.BROADCAST_ADDRESS, bytes([1, 2, 3]))
    assert value == OptionGeneric(bytes([1, 2, 3]))
    assert str(value) == "[1 2 3]"


def test_user_class_falls_back_to_text():
    assert str(parse_option(OptionCode.USER_CLASS_INFORMATION, b"\x05ab")) == "\x05ab"


def test_vendor_specific_without_decoder_is_generic():
    assert str(parse_option(OptionCode.VENDOR_SPECIFIC_INFORMATION, bytes([1, 2, 3, 4]))) == "[1 2 3 4]"


def test_vendor_specific_with_decoder():
    parse = parser_for(IPs)
    assert str(parse(OptionCode.VENDOR_SPECIFIC_INFORMATION, bytes([1, 2, 3, 4]))) == "1.2.3.4"
    assert str(get_option(43, bytes([9, 9]), IPs)) == "[9 9]"


def test_options_summary_uses_vendor_decoder():
    opts = options_from_list(
        opt_generic(OptionCode.VENDOR_SPECIFIC_INFORMATION, bytes([10, 0, 0, 1]))
    )
    assert opts.summary(IPs) == "    Vendor Specific Information: 10.0.0.1\n"
    assert str(opts) == "    Vendor Specific Information: [10 0 0 1]\n"