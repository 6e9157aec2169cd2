import pytest

from dhcp4opts.options import (
    DecodeError,
    InvalidOptionsError,
    Option,
    OptionGeneric,
    OptionHumanizer,
    Options,
    opt_generic,
    options_from_list,
)
from dhcp4opts.types import GenericOptionCode, MessageType, OptionCode


class _MultiLine:
    def to_bytes(self):
        return b"ab"

    def __str__(self):
        return "a\nb"


def test_option_generic_code():
    o = opt_generic(OptionCode.DHCP_MESSAGE_TYPE, bytes([MessageType.DISCOVER]))
    assert o.code == OptionCode.DHCP_MESSAGE_TYPE
    assert o.value.to_bytes() == b"\x01"
    assert str(o) == "DHCP Message Type: [1]"


def test_option_generic_string_unknown():
    o = opt_generic(OptionCode(102), bytes([MessageType.DISCOVER]))
    assert str(o) == "unknown (102): [1]"


def test_option_generic_from_bytes_round_trip():
    value = OptionGeneric.from_bytes(bytearray([1, 2, 3]))
    assert value.to_bytes() == b"\x01\x02\x03"
    assert str(value) == "[1 2 3]"


def test_option_to_bytes():
    o = Option(OptionCode.DHCP_MESSAGE_TYPE, OptionGeneric(bytes([1])))
    assert o.value.to_bytes() == b"\x01"


def test_option_string():
    o = Option(OptionCode.DHCP_MESSAGE_TYPE, MessageType.DISCOVER)
    assert str(o) == "DHCP Message Type: DISCOVER"


def test_option_string_unknown():
    o = Option(GenericOptionCode(102), OptionGeneric(bytes([1])))
    assert str(o) == "unknown (102): [1]"


def test_option_string_multiline():
    o = Option(OptionCode.ROUTER, _MultiLine())
    assert str(o) == "Router:\na\nb"


@pytest.mark.parametrize(
    "opts, want",
    [
        (Options(), b""),
        (Options({5: bytes([1, 2, 3, 4])}), bytes([5, 4, 1, 2, 3, 4])),
        (
            Options({5: bytes([1, 2, 3]), 100: bytes([101, 102, 103]), 255: b""}),
            bytes([5, 3, 1, 2, 3, 100, 3, 101, 102, 103]),
        ),
        (
            Options({5: bytes([10]) * 256}),
            bytes([5, 255]) + bytes([10]) * 255 + bytes([5, 1, 10]),
        ),
        (Options({80: b""}), bytes([80, 0])),
        (Options({0: b"", 255: b""}), b""),
    ],
)
def test_options_marshal(opts, want):
    assert opts.to_bytes() == want


@pytest.mark.parametrize(
    "data",
    [
        bytes([3, 3, 1]),
        bytes([3, 3, 0, 0, 0, 0, 0, 0, 0]),
        bytes([3]),
        bytes([255, 3]),
    ],
)
def test_options_unmarshal_errors(data):
    with pytest.raises(DecodeError):
        Options.from_bytes(data, check_end=True)


@pytest.mark.parametrize(
    "data, want",
    [
        (bytes([255]), {}),
        (bytes([3, 2, 5, 6, 255]), {3: bytes([5, 6])}),
        (
            bytes([3, 255]) + bytes([10]) * 255 + bytes([3, 5, 10, 10, 10, 10, 10, 255]),
            {3: bytes([10]) * 260},
        ),
        (
            bytes([10, 2, 255, 254, 11, 3, 5, 5, 5, 255]),
            {10: bytes([255, 254]), 11: bytes([5, 5, 5])},
        ),
        (
            bytes([10, 2, 255, 254]) + bytes(255) + bytes([255]),
            {10: bytes([255, 254])},
        ),
    ],
)
def test_options_unmarshal(data, want):
    assert Options.from_bytes(data, check_end=True) == want


def test_trailing_data_after_end_is_invalid():
    with pytest.raises(InvalidOptionsError):
        Options.from_bytes(bytes([255, 3]))


def test_missing_end_allowed_without_check():
    assert Options.from_bytes(bytes([3, 2, 5, 6])) == {3: bytes([5, 6])}


def test_empty_data_is_empty_options():
    assert Options.from_bytes(b"", check_end=True) == {}


def test_get_has_delete_update():
    opts = options_from_list(opt_generic(OptionCode.ROUTER, b"\x01\x02\x03\x04"))
    assert opts.get(OptionCode.ROUTER) == b"\x01\x02\x03\x04"
    assert opts.has(OptionCode.ROUTER)
    assert opts.get(OptionCode.NAME_SERVER) is None
    opts.update(opt_generic(OptionCode.ROUTER, b"\x09"))
    assert opts.get(3) == b"\x09"
    opts.delete(OptionCode.ROUTER)
    assert not opts.has(OptionCode.ROUTER)


def test_marshal_round_trip():
    opts = Options({3: bytes(range(300 % 256)) * 2, 7: b"x"})
    assert Options.from_bytes(opts.to_bytes()) == opts


def test_to_string_with_humanizer():
    opts = Options({5: bytes([9]), 3: bytes([1, 2])})
    humanizer = OptionHumanizer(lambda code, data: OptionGeneric(data), GenericOptionCode)
    assert opts.to_string(humanizer) == "    unknown (3): [1 2]\n    unknown (5): [9]\n"


def test_to_string_indents_substructures():
    opts = Options({3: b"x"})
    humanizer = OptionHumanizer(lambda code, data: "\n  sub", GenericOptionCode)
    assert opts.to_string(humanizer) == "    unknown (3): \n      sub\n"


def test_stringify():
    humanizer = OptionHumanizer(lambda code, data: OptionGeneric(data))
    assert humanizer.stringify(1, b"\xff") == "Subnet Mask: [255]"