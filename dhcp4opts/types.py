"""Core DHCPv4 value types: transaction IDs, message types, opcodes and option codes."""

from __future__ import annotations

from enum import IntEnum

__all__ = [
    "NamedByteEnum",
    "TransactionID",
    "MessageType",
    "OpcodeType",
    "OptionCode",
    "GenericOptionCode",
]


def _check_byte(value: int) -> int:
    if not 0 <= value <= 0xFF:
        raise ValueError(f"value {value} does not fit in one byte")
    return value


class NamedByteEnum(IntEnum):
    """A one-byte enumeration whose members carry a human-readable label.

    Values without a named member are still accepted and are labelled
    ``unknown (<value>)``.
    """

    def __new__(cls, value: int, label: str):
        member = int.__new__(cls, value)
        member._value_ = value
        member.label = label
        return member

    @classmethod
    def _missing_(cls, value):
        if isinstance(value, int) and not isinstance(value, bool) and 0 <= value <= 0xFF:
            member = int.__new__(cls, value)
            member._name_ = f"UNKNOWN_{value}"
            member._value_ = value
            member.label = f"unknown ({value})"
            return member
        return None

    @property
    def code(self) -> int:
        """The one-byte wire value."""
        return int(self)

    def __str__(self) -> str:
        return self.label

    def __format__(self, format_spec: str) -> str:
        return format(str(self), format_spec)


class TransactionID(bytes):
    """A 4-byte DHCP transaction ID (RFC 951, Section 3)."""

    SIZE = 4

    def __new__(cls, value: bytes = bytes(4)):
        data = bytes(value)
        if len(data) != cls.SIZE:
            raise ValueError(f"transaction ID must be {cls.SIZE} bytes, got {len(data)}")
        return super().__new__(cls, data)

    def __str__(self) -> str:
        return "0x" + self.hex()

    def __repr__(self) -> str:
        return f"TransactionID({bytes(self)!r})"


class MessageType(NamedByteEnum):
    """DHCP message types as carried in option 53 (RFC 2132, Section 9.6)."""

    # Not a real message type: signals that no explicit type is requested.
    NONE = 0, "unknown (0)"
    DISCOVER = 1, "DISCOVER"
    OFFER = 2, "OFFER"
    REQUEST = 3, "REQUEST"
    DECLINE = 4, "DECLINE"
    ACK = 5, "ACK"
    NAK = 6, "NAK"
    RELEASE = 7, "RELEASE"
    INFORM = 8, "INFORM"

    def to_bytes(self) -> bytes:
        """Serialize as described by RFC 2132, Section 9.6."""
        return bytes([int(self)])

    @classmethod
    def from_bytes(cls, data: bytes) -> "MessageType":
        """Parse a message type; the data must be exactly one byte."""
        if len(data) < 1:
            raise ValueError("short byte stream: message type needs 1 byte")
        if len(data) > 1:
            raise ValueError(f"{len(data) - 1} trailing bytes after message type")
        return cls(data[0])


class OpcodeType(NamedByteEnum):
    """DHCPv4 opcodes."""

    BOOT_REQUEST = 1, "BootRequest"
    BOOT_REPLY = 2, "BootReply"


class OptionCode(NamedByteEnum):
    """A DHCPv4 option code with its registered name."""

    PAD = 0, "Pad"
    SUBNET_MASK = 1, "Subnet Mask"
    TIME_OFFSET = 2, "Time Offset"
    ROUTER = 3, "Router"
    TIME_SERVER = 4, "Time Server"
    NAME_SERVER = 5, "Name Server"
    DOMAIN_NAME_SERVER = 6, "Domain Name Server"
    LOG_SERVER = 7, "Log Server"
    QUOTE_SERVER = 8, "Quote Server"
    LPR_SERVER = 9, "LPR Server"
    IMPRESS_SERVER = 10, "Impress Server"
    RESOURCE_LOCATION_SERVER = 11, "Resource Location Server"
    HOST_NAME = 12, "Host Name"
    BOOT_FILE_SIZE = 13, "Boot File Size"
    MERIT_DUMP_FILE = 14, "Merit Dump File"
    DOMAIN_NAME = 15, "Domain Name"
    SWAP_SERVER = 16, "Swap Server"
    ROOT_PATH = 17, "Root Path"
    EXTENSIONS_PATH = 18, "Extensions Path"
    IP_FORWARDING = 19, "IP Forwarding enable/disable"
    NON_LOCAL_SOURCE_ROUTING = 20, "Non-local Source Routing enable/disable"
    POLICY_FILTER = 21, "Policy Filter"
    MAXIMUM_DATAGRAM_ASSEMBLY_SIZE = 22, "Maximum Datagram Reassembly Size"
    DEFAULT_IP_TTL = 23, "Default IP Time-to-live"
    PATH_MTU_AGING_TIMEOUT = 24, "Path MTU Aging Timeout"
    PATH_MTU_PLATEAU_TABLE = 25, "Path MTU Plateau Table"
    INTERFACE_MTU = 26, "Interface MTU"
    ALL_SUBNETS_ARE_LOCAL = 27, "All Subnets Are Local"
    BROADCAST_ADDRESS = 28, "Broadcast Address"
    PERFORM_MASK_DISCOVERY = 29, "Perform Mask Discovery"
    MASK_SUPPLIER = 30, "Mask Supplier"
    PERFORM_ROUTER_DISCOVERY = 31, "Perform Router Discovery"
    ROUTER_SOLICITATION_ADDRESS = 32, "Router Solicitation Address"
    STATIC_ROUTING_TABLE = 33, "Static Routing Table"
    TRAILER_ENCAPSULATION = 34, "Trailer Encapsulation"
    ARP_CACHE_TIMEOUT = 35, "ARP Cache Timeout"
    ETHERNET_ENCAPSULATION = 36, "Ethernet Encapsulation"
    DEFAULT_TCP_TTL = 37, "Default TCP TTL"
    TCP_KEEPALIVE_INTERVAL = 38, "TCP Keepalive Interval"
    TCP_KEEPALIVE_GARBAGE = 39, "TCP Keepalive Garbage"
    NETWORK_INFORMATION_SERVICE_DOMAIN = 40, "Network Information Service Domain"
    NETWORK_INFORMATION_SERVERS = 41, "Network Information Servers"
    NTP_SERVERS = 42, "NTP Servers"
    VENDOR_SPECIFIC_INFORMATION = 43, "Vendor Specific Information"
    NETBIOS_OVER_TCPIP_NAME_SERVER = 44, "NetBIOS over TCP/IP Name Server"
    NETBIOS_OVER_TCPIP_DATAGRAM_DISTRIBUTION_SERVER = (
        45,
        "NetBIOS over TCP/IP Datagram Distribution Server",
    )
    NETBIOS_OVER_TCPIP_NODE_TYPE = 46, "NetBIOS over TCP/IP Node Type"
    NETBIOS_OVER_TCPIP_SCOPE = 47, "NetBIOS over TCP/IP Scope"
    X_WINDOW_SYSTEM_FONT_SERVER = 48, "X Window System Font Server"
    X_WINDOW_SYSTEM_DISPLAY_MANAGER = 49, "X Window System Display Manager"
    REQUESTED_IP_ADDRESS = 50, "Requested IP Address"
    IP_ADDRESS_LEASE_TIME = 51, "IP Addresses Lease Time"
    OPTION_OVERLOAD = 52, "Option Overload"
    DHCP_MESSAGE_TYPE = 53, "DHCP Message Type"
    SERVER_IDENTIFIER = 54, "Server Identifier"
    PARAMETER_REQUEST_LIST = 55, "Parameter Request List"
    MESSAGE = 56, "Message"
    MAXIMUM_DHCP_MESSAGE_SIZE = 57, "Maximum DHCP Message Size"
    RENEW_TIME_VALUE = 58, "Renew Time Value"
    REBINDING_TIME_VALUE = 59, "Rebinding Time Value"
    CLASS_IDENTIFIER = 60, "Class Identifier"
    CLIENT_IDENTIFIER = 61, "Client identifier"
    NETWARE_IP_DOMAIN_NAME = 62, "NetWare/IP Domain Name"
    NETWARE_IP_INFORMATION = 63, "NetWare/IP Information"
    NETWORK_INFORMATION_SERVICE_PLUS_DOMAIN = 64, "Network Information Service+ Domain"
    NETWORK_INFORMATION_SERVICE_PLUS_SERVERS = 65, "Network Information Service+ Servers"
    TFTP_SERVER_NAME = 66, "TFTP Server Name"
    BOOTFILE_NAME = 67, "Bootfile Name"
    MOBILE_IP_HOME_AGENT = 68, "Mobile IP Home Agent"
    SMTP_SERVER = 69, "SMTP Server"
    POP_SERVER = 70, "POP Server"
    NNTP_SERVER = 71, "NNTP Server"
    DEFAULT_WWW_SERVER = 72, "Default WWW Server"
    DEFAULT_FINGER_SERVER = 73, "Default Finger Server"
    DEFAULT_IRC_SERVER = 74, "Default IRC Server"
    STREETTALK_SERVER = 75, "StreetTalk Server"
    STREETTALK_DIRECTORY_ASSISTANCE_SERVER = 76, "StreetTalk Directory Assistance Server"
    USER_CLASS_INFORMATION = 77, "User Class Information"
    SLP_DIRECTORY_AGENT = 78, "SLP DIrectory Agent"
    SLP_SERVICE_SCOPE = 79, "SLP Service Scope"
    RAPID_COMMIT = 80, "Rapid Commit"
    FQDN = 81, "FQDN"
    RELAY_AGENT_INFORMATION = 82, "Relay Agent Information"
    INTERNET_STORAGE_NAME_SERVICE = 83, "Internet Storage Name Service"
    # Option 84 returned in RFC 3679
    NDS_SERVERS = 85, "NDS Servers"
    NDS_TREE_NAME = 86, "NDS Tree Name"
    NDS_CONTEXT = 87, "NDS Context"
    BCMCS_CONTROLLER_DOMAIN_NAME_LIST = 88, "BCMCS Controller Domain Name List"
    BCMCS_CONTROLLER_IPV4_ADDRESS_LIST = 89, "BCMCS Controller IPv4 Address List"
    AUTHENTICATION = 90, "Authentication"
    CLIENT_LAST_TRANSACTION_TIME = 91, "Client Last Transaction Time"
    ASSOCIATED_IP = 92, "Associated IP"
    CLIENT_SYSTEM_ARCHITECTURE_TYPE = 93, "Client System Architecture Type"
    CLIENT_NETWORK_INTERFACE_IDENTIFIER = 94, "Client Network Interface Identifier"
    LDAP = 95, "LDAP"
    # Option 96 returned in RFC 3679
    CLIENT_MACHINE_IDENTIFIER = 97, "Client Machine Identifier"
    OPEN_GROUP_USER_AUTHENTICATION = 98, "OpenGroup's User Authentication"
    GEOCONF_CIVIC = 99, "GEOCONF_CIVIC"
    IEEE_1003_1_TZ_STRING = 100, "IEEE 1003.1 TZ String"
    REFERENCE_TO_TZ_DATABASE = 101, "Reference to the TZ Database"
    # Options 102-111 returned in RFC 3679
    NETINFO_PARENT_SERVER_ADDRESS = 112, "NetInfo Parent Server Address"
    NETINFO_PARENT_SERVER_TAG = 113, "NetInfo Parent Server Tag"
    URL = 114, "URL"
    # Option 115 returned in RFC 3679
    AUTO_CONFIGURE = 116, "Auto-Configure"
    NAME_SERVICE_SEARCH = 117, "Name Service Search"
    SUBNET_SELECTION = 118, "Subnet Selection"
    DNS_DOMAIN_SEARCH_LIST = 119, "DNS Domain Search List"
    SIP_SERVERS = 120, "SIP Servers"
    CLASSLESS_STATIC_ROUTE = 121, "Classless Static Route"
    CCC = 122, "CCC, CableLabs Client Configuration"
    GEOCONF = 123, "GeoConf"
    VENDOR_IDENTIFYING_VENDOR_CLASS = 124, "Vendor-Identifying Vendor Class"
    VENDOR_IDENTIFYING_VENDOR_SPECIFIC = 125, "Vendor-Identifying Vendor-Specific"
    # Options 126-127 returned in RFC 3679
    TFTP_SERVER_IP_ADDRESS = 128, "TFTP Server IP Address"
    CALL_SERVER_IP_ADDRESS = 129, "Call Server IP Address"
    DISCRIMINATION_STRING = 130, "Discrimination String"
    REMOTE_STATISTICS_SERVER_IP_ADDRESS = 131, "RemoteStatistics Server IP Address"
    IEEE_8021P_VLAN_ID = 132, "802.1P VLAN ID"
    IEEE_8021Q_L2_PRIORITY = 133, "802.1Q L2 Priority"
    DIFFSERV_CODE_POINT = 134, "Diffserv Code Point"
    HTTP_PROXY_FOR_PHONE_SPECIFIC_APPLICATIONS = (
        135,
        "HTTP Proxy for phone-specific applications",
    )
    PANA_AUTHENTICATION_AGENT = 136, "PANA Authentication Agent"
    LOST_SERVER = 137, "LoST Server"
    CAPWAP_ACCESS_CONTROLLER_ADDRESSES = 138, "CAPWAP Access Controller Addresses"
    IPV4_ADDRESS_MOS = 139, "OPTION-IPv4_Address-MoS"
    IPV4_FQDN_MOS = 140, "OPTION-IPv4_FQDN-MoS"
    SIP_UA_CONFIGURATION_SERVICE_DOMAINS = 141, "SIP UA Configuration Service Domains"
    IPV4_ADDRESS_ANDSF = 142, "OPTION-IPv4_Address-ANDSF"
    IPV6_ADDRESS_ANDSF = 143, "OPTION-IPv6_Address-ANDSF"
    # Options 144-149 returned in RFC 3679
    TFTP_SERVER_ADDRESS = 150, "TFTP Server Address"
    STATUS_CODE = 151, "Status Code"
    BASE_TIME = 152, "Base Time"
    START_TIME_OF_STATE = 153, "Start Time of State"
    QUERY_START_TIME = 154, "Query Start Time"
    QUERY_END_TIME = 155, "Query End Time"
    DHCP_STATE = 156, "DHCP Staet"
    DATA_SOURCE = 157, "Data Source"
    # Options 158-174 returned in RFC 3679
    ETHERBOOT = 175, "Etherboot"
    IP_TELEPHONE = 176, "IP Telephone"
    ETHERBOOT_PACKETCABLE_AND_CABLEHOME = 177, "Etherboot / PacketCable and CableHome"
    # Options 178-207 returned in RFC 3679
    PXELINUX_MAGIC_STRING = 208, "PXELinux Magic String"
    PXELINUX_CONFIG_FILE = 209, "PXELinux Config File"
    PXELINUX_PATH_PREFIX = 210, "PXELinux Path Prefix"
    PXELINUX_REBOOT_TIME = 211, "PXELinux Reboot Time"
    OPTION_6RD = 212, "OPTION_6RD"
    V4_ACCESS_DOMAIN = 213, "OPTION_V4_ACCESS_DOMAIN"
    # Options 214-219 returned in RFC 3679
    SUBNET_ALLOCATION = 220, "Subnet Allocation"
    VIRTUAL_SUBNET_ALLOCATION = 221, "Virtual Subnet Selection"
    # Options 222-223 returned in RFC 3679; 224-254 reserved for private use
    END = 255, "End"


class GenericOptionCode(int):
    """An option code without a registered name."""

    __slots__ = ()

    def __new__(cls, value: int):
        return super().__new__(cls, _check_byte(int(value)))

    @property
    def code(self) -> int:
        """The one-byte wire value."""
        return int(self)

    def __str__(self) -> str:
        return f"unknown ({int(self)})"

    def __format__(self, format_spec: str) -> str:
        return format(str(self), format_spec)

    def __repr__(self) -> str:
        return f"GenericOptionCode({int(self)})"