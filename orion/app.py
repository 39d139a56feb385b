"""Interactive runtime: loads regions, feeds sensor data and takes commands."""

from __future__ import annotations

import argparse
import subprocess
import sys
import threading
from collections.abc import Iterator
from dataclasses import dataclass, field
from os import PathLike
from pathlib import Path

from orion.neuron import Connection, Neuron, Neurotransmitter, Receptor
from orion.region import Region

__all__ = ["Brain", "load_regions", "default_region", "record_audio", "main"]

_NETWORK_PERIOD = 1.0
_MICROPHONE_PERIOD = 6.0
_SPEAKER_PERIOD = 10.0


def load_regions(directory: str | PathLike[str]) -> list[Region]:
    """Load every readable ``.rgn`` file in ``directory``."""
    root = Path(directory)
    if not root.is_dir():
        return []
    regions = []
    for path in sorted(root.iterdir()):
        if path.suffix != ".rgn":
            continue
        try:
            regions.append(Region.load(path))
        except OSError:
            continue
    return regions


def default_region() -> Region:
    """The two-neuron visual cortex used when no structure exists."""
    return Region(
        name="corteza_visual",
        neurons=[
            Neuron(
                id=1,
                x=0.1,
                y=0.2,
                z=0.3,
                neurotransmitter=Neurotransmitter.DOPAMINE,
                receptors=[Receptor.D1],
                connections=[Connection(2, Neurotransmitter.GABA)],
            ),
            Neuron(
                id=2,
                x=0.4,
                y=0.5,
                z=0.6,
                neurotransmitter=Neurotransmitter.GABA,
                receptors=[Receptor.GABA_A],
                connections=[Connection(1, Neurotransmitter.DOPAMINE)],
            ),
        ],
    )


def record_audio(path: str | PathLike[str]) -> bytes:
    """Record two seconds of CD-quality audio to ``path`` and return its bytes."""
    target = Path(path)
    command = ["arecord", "-f", "cd", "-t", "wav", "-d", "2", "-q", str(target)]
    try:
        result = subprocess.run(command, check=False)
    except OSError as exc:
        raise RuntimeError("audio capture failed") from exc
    if result.returncode != 0:
        raise RuntimeError("audio capture failed")
    return target.read_bytes()


@dataclass
class Brain:
    """The loaded regions plus the shared state of the running system."""

    regions: list[Region] = field(default_factory=list)
    console: threading.Lock = field(default_factory=threading.Lock, repr=False)
    stopped: threading.Event = field(default_factory=threading.Event, repr=False)

    @property
    def active(self) -> bool:
        return not self.stopped.is_set()

    def neurons(self) -> Iterator[Neuron]:
        """Iterate over every neuron of every region, in order."""
        for region in self.regions:
            yield from region.neurons

    def imprint_bits(self, data: bytes) -> int:
        """Set neuron states from the bits of ``data``, least significant first.

        Returns how many neurons were set.
        """
        bits = (
            bool((byte >> shift) & 1) for byte in data for shift in range(8)
        )
        count = 0
        for neuron, bit in zip(self.neurons(), bits):
            neuron.state = bit
            count += 1
        return count

    def stats(self) -> str:
        """Report every neuron's neurotransmitter and state."""
        lines = ["[STATS]", "Neurotransmisores activos:"]
        lines.extend(
            f" - Neurona {n.id}: {n.neurotransmitter} estado={int(n.state)}"
            for n in self.neurons()
        )
        return "\n".join(lines) + "\n"

    def save(self, directory: str | PathLike[str]) -> None:
        """Write each region to ``<directory>/<name>.rgn``."""
        root = Path(directory)
        for region in self.regions:
            region.save(root / f"{region.name}.rgn")

    def run_command(self, command: str, directory: str | PathLike[str]) -> str:
        """Execute one terminal command and return the text to show."""
        if command == "exit":
            self.stopped.set()
            return ""
        if command == "stats":
            return self.stats()
        if command == "save":
            self.save(directory)
            return "[SISTEMA] Regiones guardadas.\n"
        return "[ERROR] Comando no reconocido.\n"

    def say(self, text: str, stream=None) -> None:
        with self.console:
            print(text, file=stream or sys.stdout, flush=True)


def _network_loop(brain: Brain) -> None:
    while not brain.stopped.wait(_NETWORK_PERIOD):
        brain.say("[RED] Procesando señales neuronales...")


def _microphone_loop(brain: Brain, audio_path: Path) -> None:
    while brain.active:
        brain.say("[MICRÓFONO] Capturando audio...")
        try:
            data = record_audio(audio_path)
        except (RuntimeError, OSError):
            brain.say("[MICRÓFONO] Error al capturar audio", sys.stderr)
        else:
            brain.imprint_bits(data)
            brain.say("[MICRÓFONO] Audio procesado en neuronas")
        if brain.stopped.wait(_MICROPHONE_PERIOD):
            break


def _speaker_loop(brain: Brain) -> None:
    while not brain.stopped.wait(_SPEAKER_PERIOD):
        brain.say("[ALTAVOZ] (Simulado) Emisión de respuesta auditiva...")


def _terminal_loop(brain: Brain, directory: Path) -> None:
    while brain.active:
        try:
            command = input("> ")
        except EOFError:
            brain.stopped.set()
            break
        output = brain.run_command(command, directory)
        if output:
            with brain.console:
                sys.stdout.write(output)
                sys.stdout.flush()


def main(argv: list[str] | None = None) -> int:
    """Load the structure, start the sensor threads and run the terminal."""
    parser = argparse.ArgumentParser(description="Run the neural system.")
    parser.add_argument("--directory", default="structure")
    parser.add_argument("--audio-file", default="audio.wav")
    parser.add_argument("--no-microphone", action="store_true")
    args = parser.parse_args(argv)

    root = Path(args.directory)
    regions = load_regions(root)
    if not regions:
        region = default_region()
        regions = [region]
        root.mkdir(parents=True, exist_ok=True)
        region.save(root / f"{region.name}.rgn")

    brain = Brain(regions=regions)
    workers = [
        threading.Thread(target=_network_loop, args=(brain,), daemon=True),
        threading.Thread(target=_speaker_loop, args=(brain,), daemon=True),
    ]
    if not args.no_microphone:
        workers.append(
            threading.Thread(
                target=_microphone_loop,
                args=(brain, Path(args.audio_file)),
                daemon=True,
            )
        )
    for worker in workers:
        worker.start()

    _terminal_loop(brain, root)

    for worker in workers:
        worker.join()
    print("[SISTEMA] Apagado.")
    return 0


if __name__ == "__main__":
    sys.exit(main())