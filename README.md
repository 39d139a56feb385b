# orion

A small neural-structure toy. A brain is made of *regions*, each stored as a
plain-text `.rgn` file in a `structure/` directory. Every neuron in a region has
an id, a position, a neurotransmitter, a list of receptors, outgoing
connections to other neurons and an on/off state.

## Installing

```
pip install .
```

## Creating a structure

```
orion-editor [--directory DIR] [--seed N]
```

The editor creates the directory if needed (default `structure`). If it holds
no `.rgn` files yet, it asks for the number of chunks, the neurons per chunk
and the spacing between neurons. It lays out each chunk as a cube grid, gives
every neuron a random neurotransmitter and receptor, and links it to between
one and five neurons created earlier in the same chunk. Neuron ids run on
across chunks. Each chunk is written as `chunk<N>.rgn` and its connections are
printed. `--seed` makes the random choices repeatable. Invalid input exits with
status 1. If a structure already exists, nothing is changed.

## Running the brain

```
orion [--directory DIR] [--audio-file PATH] [--no-microphone]
```

The console loads every `.rgn` file from the directory (default `structure`).
If there are none, it creates a two-neuron region named `corteza_visual` and
saves it there. Background workers print a network message every second and a
simulated speaker message every ten seconds. Unless `--no-microphone` is given,
another worker records two seconds of audio with the `arecord` command into
`--audio-file` (default `audio.wav`) every six seconds; the recorded bytes set
the neurons' states bit by bit, least significant bit first.

Commands at the `>` prompt:

- `stats` – list each neuron with its neurotransmitter and state (0 or 1)
- `save` – write all regions back to the directory
- `exit` – stop the system (end of input does the same)

## What it does not do

There is no camera input: neuron states are set only from recorded audio. The
speaker only prints a message; no sound is produced. Nothing propagates
signals between neurons; connections are stored but not simulated.

## Region file format

```
[Neurona]
id=1
pos=0.1,0.2,0.3
nt=DOPAMINA
receptores=D1
conexiones=2:GABA
```

Empty lines and lines starting with `#` are ignored. Unknown neurotransmitter
or receptor names read as `DESCONOCIDO`. A block whose id is 0 is dropped.

## Using the library

```python
from orion.region import Region

region = Region.load("structure/chunk1.rgn")
for neuron in region.neurons:
    print(neuron.id, neuron.neurotransmitter, neuron.divergent_form())
region.save("copy.rgn")
```

`orion.neuron` provides the `Neurotransmitter` and `Receptor` enums, the
`Connection` and `Neuron` dataclasses, and `parse_neurotransmitter` and
`parse_receptor` for reading names from text. `Neuron.divergent_form()`
returns `INTERNEURONA_INHIBIDORA`, `MODULADORA_D1` or `INDEFINIDA`.

`orion.region.Region` reads and writes region files with `parse`, `dumps`,
`load` and `save`.

`orion.editor` offers `structure_is_empty`, `generate_region` and
`build_structure`; `orion.app` offers `load_regions`, `default_region`,
`record_audio` and the `Brain` class with `neurons`, `imprint_bits`, `stats`,
`save` and `run_command`.