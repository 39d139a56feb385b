"""Brain regions and their plain-text ``.rgn`` file format."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from os import PathLike
from pathlib import Path

from orion.neuron import (
    Connection,
    Neuron,
    Neurotransmitter,
    parse_neurotransmitter,
    parse_receptor,
)

__all__ = ["Region"]

_SECTION = "[Neurona]"
_INT = re.compile(r"\s*([+-]?\d+)")
_FLOAT = re.compile(r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")
_CONNECTION = re.compile(r"\s*([+-]?\d+):\s*(\S*)")


def _split_items(text: str) -> list[str]:
    """Split on commas, dropping the empty piece after a trailing comma."""
    items = text.split(",")
    if items and items[-1] == "":
        items.pop()
    return items


def _parse_id(text: str) -> int:
    match = _INT.match(text)
    if match is None:
        raise ValueError(f"invalid neuron id: {text!r}")
    return int(match.group(1))


def _parse_position(text: str, neuron: Neuron) -> None:
    """Read up to three comma-separated coordinates; stop at the first bad one."""
    values: list[float] = []
    rest = text
    while len(values) < 3:
        match = _FLOAT.match(rest)
        if match is None:
            break
        values.append(float(match.group(1)))
        rest = rest[match.end():]
        if len(values) < 3:
            if not rest.startswith(","):
                break
            rest = rest[1:]
    for axis, value in zip(("x", "y", "z"), values):
        setattr(neuron, axis, value)


def _parse_connection(item: str) -> Connection:
    match = _CONNECTION.match(item)
    if match is None:
        raise ValueError(f"invalid connection: {item!r}")
    target, kind = match.groups()
    neurotransmitter = (
        parse_neurotransmitter(kind) if kind else Neurotransmitter.UNKNOWN
    )
    return Connection(int(target), neurotransmitter)


def _format_float(value: float) -> str:
    return format(value, "g")


@dataclass
class Region:
    """A named set of neurons stored in one ``.rgn`` file."""

    name: str = ""
    neurons: list[Neuron] = field(default_factory=list)

    @classmethod
    def parse(cls, name: str, text: str) -> Region:
        """Build a region from the contents of an ``.rgn`` file."""
        neurons: list[Neuron] = []
        current = Neuron()
        for line in text.splitlines():
            if not line or line.startswith("#"):
                continue
            if line == _SECTION:
                if current.id != 0:
                    neurons.append(current)
                current = Neuron()
            elif line.startswith("id="):
                current.id = _parse_id(line[3:])
            elif line.startswith("pos="):
                _parse_position(line[4:], current)
            elif line.startswith("nt="):
                current.neurotransmitter = parse_neurotransmitter(line[3:])
            elif line.startswith("receptores="):
                current.receptors = [
                    parse_receptor(item) for item in _split_items(line[11:])
                ]
            elif line.startswith("conexiones="):
                current.connections = [
                    _parse_connection(item) for item in _split_items(line[11:])
                ]
        if current.id != 0:
            neurons.append(current)
        return cls(name=name, neurons=neurons)

    def dumps(self) -> str:
        """Render the region in ``.rgn`` format."""
        blocks = []
        for neuron in self.neurons:
            position = ",".join(
                _format_float(v) for v in (neuron.x, neuron.y, neuron.z)
            )
            receptors = ",".join(str(r) for r in neuron.receptors)
            connections = ",".join(
                f"{c.target_id}:{c.neurotransmitter}" for c in neuron.connections
            )
            blocks.append(
                f"{_SECTION}\n"
                f"id={neuron.id}\n"
                f"pos={position}\n"
                f"nt={neuron.neurotransmitter}\n"
                f"receptores={receptors}\n"
                f"conexiones={connections}\n\n"
            )
        return "".join(blocks)

    @classmethod
    def load(cls, path: str | PathLike[str]) -> Region:
        """Read a region from ``path``; its name is the file's stem."""
        path = Path(path)
        return cls.parse(path.stem, path.read_text(encoding="utf-8"))

    def save(self, path: str | PathLike[str]) -> None:
        """Write the region to ``path``."""
        Path(path).write_text(self.dumps(), encoding="utf-8")