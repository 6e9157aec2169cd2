import pytest

from dhcp4opts.types import (
    GenericOptionCode,
    MessageType,
    OpcodeType,
    OptionCode,
    TransactionID,
)


def test_option_code_names():
    assert str(OptionCode(53)) == "DHCP Message Type"
    assert str(OptionCode(51)) == "IP Addresses Lease Time"
    assert str(OptionCode(78)) == "SLP DIrectory Agent"
    assert str(OptionCode(255)) == "End"


def test_option_code_lookup_by_value():
    assert OptionCode(53) is OptionCode.DHCP_MESSAGE_TYPE
    assert OptionCode(3) is OptionCode.ROUTER
    assert int(OptionCode.BOOTFILE_NAME) == 67
    assert OptionCode.NAME_SERVER == 5


def test_option_code_unknown():
    unknown = OptionCode(102)
    assert str(unknown) == "unknown (102)"
    assert int(unknown) == 102
    assert f"{unknown}: x" == "unknown (102): x"


def test_option_code_out_of_range():
    with pytest.raises(ValueError):
        OptionCode(256)
    with pytest.raises(ValueError):
        OptionCode(-1)


def test_option_code_format():
    assert f"{OptionCode(1)}" == "Subnet Mask"


def test_generic_option_code():
    generic = GenericOptionCode(102)
    assert str(generic) == "unknown (102)"
    assert int(generic) == 102
    assert str(GenericOptionCode(1)) == "unknown (1)"
    assert GenericOptionCode(1) == OptionCode.SUBNET_MASK


def test_generic_option_code_out_of_range():
    with pytest.raises(ValueError):
        GenericOptionCode(300)


def test_message_type_strings():
    assert str(MessageType.DISCOVER) == "DISCOVER"
    assert str(MessageType.INFORM) == "INFORM"
    assert str(MessageType(99)) == "unknown (99)"


def test_message_type_to_bytes():
    assert MessageType.DISCOVER.to_bytes() == bytes([1])


def test_message_type_from_bytes():
    assert MessageType.from_bytes(bytes([1])) is MessageType.DISCOVER


@pytest.mark.parametrize("member", list(MessageType))
def test_message_type_round_trip(member):
    assert MessageType.from_bytes(member.to_bytes()) == member


@pytest.mark.parametrize("data", [b"", bytes([1, 2])])
def test_message_type_from_bytes_bad_length(data):
    with pytest.raises(ValueError):
        MessageType.from_bytes(data)


def test_message_type_unknown_round_trip():
    mt = MessageType.from_bytes(bytes([99]))
    assert mt == 99
    assert mt.to_bytes() == bytes([99])


def test_opcode_strings():
    assert str(OpcodeType.BOOT_REQUEST) == "BootRequest"
    assert str(OpcodeType.BOOT_REPLY) == "BootReply"
    assert str(OpcodeType(7)) == "unknown (7)"


def test_transaction_id_string():
    xid = TransactionID(bytes([0xAA, 0xBB, 0xCC, 0xDD]))
    assert str(xid) == "0xaabbccdd"


def test_transaction_id_default_is_zero():
    assert TransactionID() == bytes(4)


def test_transaction_id_keeps_bytes():
    raw = bytes([1, 2, 3, 4])
    assert bytes(TransactionID(raw)) == raw
    assert TransactionID(raw) == TransactionID(raw)


@pytest.mark.parametrize("raw", [b"", bytes(3), bytes(5)])
def test_transaction_id_wrong_length(raw):
    with pytest.raises(ValueError):
        TransactionID(raw)