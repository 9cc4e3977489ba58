"""Viewer settings and the XML parameter file that can supply them."""

from __future__ import annotations

import xml.sax
from dataclasses import dataclass
from os import PathLike
from xml.sax.handler import ContentHandler
from xml.sax.xmlreader import AttributesImpl

_USHORT_MAX = 0xFFFF


class ParameterFileError(ValueError):
    """Raised when a parameter file cannot be read or is not a Viewer document."""


@dataclass
class ViewerParameters:
    """Settings of the viewer: colours, server address and start-up behaviour.

    Lower walls are those not higher than the beacon; higher walls are taller.
    """

    lower_color: str = "blue"
    higher_color: str = "green"
    image: str = ""
    port: int = 6000
    server_addr: str = "127.0.0.1"
    auto_start: bool = False
    auto_connect: bool = False
    control: bool = True
    reset_on_connect: bool = True


def _to_ushort(text: str) -> int:
    text = text.strip()
    if "_" in text:
        return 0
    try:
        value = int(text)
    except ValueError:
        return 0
    return value if 0 <= value <= _USHORT_MAX else 0


def _flag(text: str) -> bool:
    # Only the first character of a flag attribute is significant.
    return text[:1] == "y"


class _ParameterHandler(ContentHandler):
    def __init__(self) -> None:
        super().__init__()
        self.parameters: ViewerParameters | None = None

    def startElement(self, name: str, attrs: AttributesImpl) -> None:
        if name != "Viewer":
            raise ParameterFileError(f"invalid tag {name!r} in parameter file")
        params = ViewerParameters()
        if "Host" in attrs:
            params.server_addr = attrs["Host"]
        if "Port" in attrs:
            params.port = _to_ushort(attrs["Port"])
        if "Lowercolor" in attrs:
            params.lower_color = attrs["Lowercolor"]
        if "Highercolor" in attrs:
            params.higher_color = attrs["Highercolor"]
        if "Control" in attrs:
            params.control = _flag(attrs["Control"])
        if "AutoConnect" in attrs:
            params.auto_connect = _flag(attrs["AutoConnect"])
        if "AutoStart" in attrs:
            params.auto_start = _flag(attrs["AutoStart"])
        self.parameters = params


def parse_parameters(data: bytes | str) -> ViewerParameters:
    """Parse a parameter document whose root element is ``Viewer``."""
    if isinstance(data, str):
        data = data.encode("utf-8")
    handler = _ParameterHandler()
    try:
        xml.sax.parseString(data, handler)
    except xml.sax.SAXException as exc:
        raise ParameterFileError(f"invalid parameter file: {exc}") from exc
    if handler.parameters is None:
        raise ParameterFileError("no Viewer element in parameter file")
    return handler.parameters


def load_parameters(path: str | PathLike[str]) -> ViewerParameters:
    """Read and parse the parameter file at ``path``."""
    try:
        with open(path, "rb") as stream:
            data = stream.read()
    except OSError as exc:
        raise ParameterFileError(f"could not open {path}: {exc}") from exc
    return parse_parameters(data)