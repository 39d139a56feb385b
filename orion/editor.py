"""Command that lays out a fresh brain structure of grid-shaped chunks."""

from __future__ import annotations

import argparse
import random
import sys
from os import PathLike
from pathlib import Path

from orion.neuron import Connection, Neuron, Neurotransmitter, Receptor
from orion.region import Region

__all__ = ["structure_is_empty", "generate_region", "build_structure", "main"]

_MAX_CONNECTIONS = 5
_NEUROTRANSMITTERS = [nt for nt in Neurotransmitter if nt is not Neurotransmitter.UNKNOWN]
_RECEPTORS = [r for r in Receptor if r is not Receptor.UNKNOWN]


def structure_is_empty(directory: str | PathLike[str]) -> bool:
    """Return True when ``directory`` holds no ``.rgn`` file."""
    path = Path(directory)
    if not path.is_dir():
        return True
    return not any(entry.suffix == ".rgn" for entry in path.iterdir())


def _grid_side(count: int) -> int:
    """Smallest cube side whose volume holds ``count`` points."""
    side = 0
    while side**3 < count:
        side += 1
    return side


def generate_region(
    index: int,
    neurons_per_chunk: int,
    spacing: float,
    rng: random.Random,
    first_id: int,
) -> Region:
    """Create chunk number ``index`` with neurons numbered from ``first_id``.

    Neurons sit on a cubic grid; each one connects to a random number of
    neurons created before it in the same chunk.
    """
    region = Region(name=f"chunk{index}")
    side = _grid_side(neurons_per_chunk)
    max_connections = min(_MAX_CONNECTIONS, neurons_per_chunk - 1)
    cells = (
        (x, y, z) for x in range(side) for y in range(side) for z in range(side)
    )
    next_id = first_id
    for x, y, z in cells:
        if len(region.neurons) >= neurons_per_chunk:
            break
        neuron = Neuron(
            id=next_id,
            x=x * spacing,
            y=y * spacing,
            z=z * spacing,
            neurotransmitter=rng.choice(_NEUROTRANSMITTERS),
            receptors=[rng.choice(_RECEPTORS)],
        )
        next_id += 1
        if max_connections > 0:
            for _ in range(rng.randint(1, max_connections)):
                if not region.neurons:
                    break
                target = rng.choice(region.neurons)
                neuron.connections.append(
                    Connection(target.id, rng.choice(_NEUROTRANSMITTERS))
                )
        region.neurons.append(neuron)
    return region


def build_structure(
    directory: str | PathLike[str],
    chunks: int,
    neurons_per_chunk: int,
    spacing: float,
    rng: random.Random,
) -> list[Region]:
    """Generate ``chunks`` regions and save each as ``chunk<N>.rgn``."""
    root = Path(directory)
    root.mkdir(parents=True, exist_ok=True)
    regions = []
    next_id = 1
    for index in range(1, chunks + 1):
        region = generate_region(index, neurons_per_chunk, spacing, rng, next_id)
        next_id += len(region.neurons)
        region.save(root / f"{region.name}.rgn")
        regions.append(region)
    return regions


def _describe_connections(neuron: Neuron) -> str:
    if not neuron.connections:
        return "(sin conexiones)"
    return ", ".join(str(c.target_id) for c in neuron.connections)


def main(argv: list[str] | None = None) -> int:
    """Ask for the layout on stdin and create the structure if none exists."""
    parser = argparse.ArgumentParser(description="Create a brain structure.")
    parser.add_argument("--directory", default="structure")
    parser.add_argument("--seed", type=int, default=None)
    args = parser.parse_args(argv)

    root = Path(args.directory)
    root.mkdir(parents=True, exist_ok=True)

    if not structure_is_empty(root):
        print("Estructura ya existente. No se realizaron cambios.")
        return 0

    try:
        chunks = int(input("Numero de chunks: "))
        neurons_per_chunk = int(input("Neuronas por chunk: "))
        spacing = float(input("Distancia entre neuronas: "))
    except (ValueError, EOFError):
        print("Entrada no valida", file=sys.stderr)
        return 1

    rng = random.Random(args.seed)
    for region in build_structure(root, chunks, neurons_per_chunk, spacing, rng):
        print(f"[CREADO] {root / (region.name + '.rgn')}")
        for neuron in region.neurons:
            print(f"  Neurona {neuron.id} conexiones: {_describe_connections(neuron)}")

    print(f"Estructura creada con {chunks} chunks.")
    return 0


if __name__ == "__main__":
    sys.exit(main())