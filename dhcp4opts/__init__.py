"""DHCPv4 option encoding, decoding and rendering, with zero-touch provisioning helpers."""

__version__ = "0.1.0"