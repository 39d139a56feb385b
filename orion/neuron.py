"""Neurons, their neurotransmitters, receptors and outgoing connections."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

__all__ = [
    "Neurotransmitter",
    "Receptor",
    "Connection",
    "Neuron",
    "parse_neurotransmitter",
    "parse_receptor",
]


class Neurotransmitter(Enum):
    """Chemical messenger released by a neuron; values are the file tokens."""

    DOPAMINE = "DOPAMINA"
    SEROTONIN = "SEROTONINA"
    GABA = "GABA"
    GLUTAMATE = "GLUTAMATO"
    ACETYLCHOLINE = "ACETILCOLINA"
    UNKNOWN = "DESCONOCIDO"

    def __str__(self) -> str:
        return self.value


class Receptor(Enum):
    """Receptor type present on a neuron; values are the file tokens."""

    D1 = "D1"
    D2 = "D2"
    NMDA = "NMDA"
    AMPA = "AMPA"
    GABA_A = "GABA_A"
    UNKNOWN = "DESCONOCIDO"

    def __str__(self) -> str:
        return self.value


def parse_neurotransmitter(text: str) -> Neurotransmitter:
    """Return the neurotransmitter named by ``text``, or UNKNOWN."""
    try:
        return Neurotransmitter(text)
    except ValueError:
        return Neurotransmitter.UNKNOWN


def parse_receptor(text: str) -> Receptor:
    """Return the receptor named by ``text``, or UNKNOWN."""
    try:
        return Receptor(text)
    except ValueError:
        return Receptor.UNKNOWN


@dataclass
class Connection:
    """A synapse towards another neuron, carrying one neurotransmitter."""

    target_id: int
    neurotransmitter: Neurotransmitter


@dataclass
class Neuron:
    """A single neuron placed in 3D space."""

    id: int = 0
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    neurotransmitter: Neurotransmitter = Neurotransmitter.UNKNOWN
    receptors: list[Receptor] = field(default_factory=list)
    connections: list[Connection] = field(default_factory=list)
    state: bool = False

    def divergent_form(self) -> str:
        """Classify the neuron's functional form from its chemistry."""
        if (
            self.neurotransmitter is Neurotransmitter.GABA
            and self.receptors == [Receptor.GABA_A]
        ):
            return "INTERNEURONA_INHIBIDORA"
        if (
            self.neurotransmitter is Neurotransmitter.DOPAMINE
            and Receptor.D1 in self.receptors
        ):
            return "MODULADORA_D1"
        return "INDEFINIDA"