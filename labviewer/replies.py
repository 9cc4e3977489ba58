"""Parsing of the simulator's reply to a viewer registration."""

from __future__ import annotations

import xml.sax
from dataclasses import dataclass
from xml.sax.handler import ContentHandler
from xml.sax.xmlreader import AttributesImpl

_UINT_MAX = 0xFFFFFFFF


class ReplyError(ValueError):
    """Raised when a reply message is malformed or holds an unexpected tag."""


@dataclass
class SimParameters:
    """Simulation parameters: cycle and run times and noise levels."""

    cycle_time: int = 0
    sim_time: int = 0
    compass_time: int = 0
    beacon_noise: float = 0.0
    obstacle_noise: float = 0.0
    motors_noise: float = 0.0


@dataclass
class Reply:
    """A registration reply: whether it was accepted, and the parameters."""

    status: bool = False
    parameters: SimParameters | None = None


def _to_uint(text: str) -> int:
    text = text.strip()
    if "_" in text:
        return 0
    try:
        value = int(text)
    except ValueError:
        return 0
    return value if 0 <= value <= _UINT_MAX else 0


def _to_float(text: str) -> float:
    text = text.strip()
    if "_" in text:
        return 0.0
    try:
        return float(text)
    except ValueError:
        return 0.0


def _decode(data: bytes | str) -> str:
    if isinstance(data, bytes):
        data = data.split(b"\0", 1)[0].decode("utf-8", errors="replace")
    return data.split("\0", 1)[0]


class _ReplyHandler(ContentHandler):
    def __init__(self) -> None:
        super().__init__()
        self.reply: Reply | None = None

    def startElement(self, name: str, attrs: AttributesImpl) -> None:
        if name == "Reply":
            self.reply = Reply()
            if "Status" in attrs:
                self.reply.status = attrs["Status"] == "Ok"
        elif name == "Parameters":
            if self.reply is None:
                raise ReplyError("Parameters outside a Reply")
            params = SimParameters()
            if "CycleTime" in attrs:
                params.cycle_time = _to_uint(attrs["CycleTime"])
            if "SimTime" in attrs:
                params.sim_time = _to_uint(attrs["SimTime"])
            if "CompassTime" in attrs:
                params.compass_time = _to_uint(attrs["CompassTime"])
            if "ObstacleNoise" in attrs:
                params.obstacle_noise = _to_float(attrs["ObstacleNoise"])
            if "MotorsNoise" in attrs:
                params.motors_noise = _to_float(attrs["MotorsNoise"])
            self.reply.parameters = params
        else:
            raise ReplyError(f"invalid tag {name!r} in reply")


def parse_reply(data: bytes | str) -> Reply:
    """Parse a reply message; text after a NUL character is ignored."""
    handler = _ReplyHandler()
    try:
        xml.sax.parseString(_decode(data).encode("utf-8"), handler)
    except xml.sax.SAXException as exc:
        raise ReplyError(f"invalid reply: {exc}") from exc
    if handler.reply is None:
        raise ReplyError("no Reply element")
    return handler.reply