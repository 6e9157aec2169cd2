"""The DHCPv4 option container, generic option values and option humanizers."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Iterable

from .types import OptionCode

__all__ = [
    "DecodeError",
    "InvalidOptionsError",
    "OptionGeneric",
    "Option",
    "Options",
    "OptionHumanizer",
    "opt_generic",
    "options_from_list",
]

_PAD = 0
_END = 255
_MAX_CHUNK = 255


class DecodeError(ValueError):
    """Raised when option data cannot be decoded."""


class InvalidOptionsError(DecodeError):
    """Raised when options data carries bytes that belong to no option."""


def _format_bytes(data: bytes) -> str:
    return "[" + " ".join(str(b) for b in data) + "]"


@dataclass(frozen=True)
class OptionGeneric:
    """An option value that is only raw data.

    Every option without a specific value type falls back to this one.
    """

    data: bytes = b""

    def __post_init__(self) -> None:
        object.__setattr__(self, "data", bytes(self.data))

    def to_bytes(self) -> bytes:
        """Return the raw option data."""
        return self.data

    @classmethod
    def from_bytes(cls, data: bytes) -> "OptionGeneric":
        """Wrap raw data; never fails."""
        return cls(bytes(data))

    def __str__(self) -> str:
        return _format_bytes(self.data)


@dataclass(frozen=True)
class Option:
    """A DHCPv4 option: a one-byte code and a value to interpret by that code."""

    code: Any
    value: Any

    def __str__(self) -> str:
        text = str(self.value)
        if "\n" in text:
            return f"{self.code}:\n{text}"
        return f"{self.code}: {text}"


@dataclass(frozen=True)
class OptionHumanizer:
    """Interprets raw options for their code names and values.

    Each option space (DHCP, relay agent information, ...) has its own.
    """

    value_humanizer: Callable[[Any, bytes], object]
    code_humanizer: Callable[[int], Any] = field(default=OptionCode)

    def stringify(self, code: int, data: bytes) -> str:
        """Return a readable rendering of one option code and its data."""
        name = self.code_humanizer(code)
        value = self.value_humanizer(name, data)
        return f"{name}: {value}"


class Options(dict):
    """Raw DHCPv4 options, mapping the one-byte code to the option data."""

    def get(self, code) -> bytes | None:  # type: ignore[override]
        """Return the data for ``code``, or None when it is absent."""
        return dict.get(self, int(code))

    def has(self, code) -> bool:
        """Return whether an option with ``code`` is present."""
        return int(code) in self

    def delete(self, code) -> None:
        """Remove the option with ``code`` if present."""
        self.pop(int(code), None)

    def update(self, option: Option) -> None:  # type: ignore[override]
        """Set an option, replacing any existing option with the same code."""
        self[int(option.code)] = bytes(option.value.to_bytes())

    def _sorted_codes(self) -> list[int]:
        return sorted(int(code) for code in self.keys())

    def to_bytes(self) -> bytes:
        """Serialize options in code order, splitting long data per RFC 3396.

        Pad and End are never written here.
        """
        out = bytearray()
        for code in self._sorted_codes():
            if code in (_PAD, _END):
                continue
            data = dict.__getitem__(self, code)
            if not data:
                out += bytes([code, 0])
                continue
            for start in range(0, len(data), _MAX_CHUNK):
                chunk = data[start : start + _MAX_CHUNK]
                out.append(code)
                out.append(len(chunk))
                out += chunk
        return bytes(out)

    @classmethod
    def from_bytes(cls, data: bytes, check_end: bool = False) -> "Options":
        """Parse options up to the End option or the end of data.

        Repeated options are concatenated (RFC 3396). With ``check_end`` a
        missing End option is an error. Bytes after End must be padding.
        """
        options = cls()
        data = bytes(data)
        if not data:
            return options
        size = len(data)
        pos = 0
        ended = False
        while pos < size:
            code = data[pos]
            pos += 1
            if code == _PAD:
                continue
            if code == _END:
                ended = True
                break
            if pos >= size:
                raise DecodeError(f"short byte stream: option {code} has no length")
            length = data[pos]
            pos += 1
            if pos + length > size:
                raise DecodeError(
                    f"short byte stream: option {code} needs {length} bytes, "
                    f"got {size - pos}"
                )
            chunk = data[pos : pos + length]
            pos += length
            options[code] = dict.get(options, code, b"") + chunk
        if not ended and check_end:
            raise DecodeError("unexpected end of options: no End option")
        for byte in data[pos:]:
            if byte not in (_PAD, _END):
                raise InvalidOptionsError("invalid options data: trailing bytes")
        return options

    def to_string(self, humanizer: OptionHumanizer) -> str:
        """Render every option, in code order, with ``humanizer``."""
        lines = []
        for code in self._sorted_codes():
            text = humanizer.stringify(code, dict.__getitem__(self, code))
            if "\n" in text:
                text = text.replace("\n  ", "\n      ")
            lines.append(f"    {text}\n")
        return "".join(lines)

    def summary(self, vendor_decoder) -> str:
        """Render options, decoding vendor-specific information with ``vendor_decoder``."""
        # Imported here: the decoders depend on this module.
        from .decode import parser_for

        return self.to_string(OptionHumanizer(parser_for(vendor_decoder), OptionCode))

    def __str__(self) -> str:
        from .decode import parse_option

        return self.to_string(OptionHumanizer(parse_option, OptionCode))

    def __repr__(self) -> str:
        return f"Options({dict.__repr__(self)})"


def opt_generic(code, value: bytes) -> Option:
    """Return an option holding raw ``value`` under ``code``."""
    return Option(code, OptionGeneric(value))


def options_from_list(*args: Option) -> Options:
    """Build an Options mapping from the given options."""
    options = Options()
    for option in args:
        options.update(option)
    return options