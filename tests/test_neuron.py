import pytest

from orion.neuron import (
    Connection,
    Neuron,
    Neurotransmitter,
    Receptor,
    parse_neurotransmitter,
    parse_receptor,
)


@pytest.mark.parametrize(
    "text, expected",
    [
        ("DOPAMINA", Neurotransmitter.DOPAMINE),
        ("SEROTONINA", Neurotransmitter.SEROTONIN),
        ("GABA", Neurotransmitter.GABA),
        ("GLUTAMATO", Neurotransmitter.GLUTAMATE),
        ("ACETILCOLINA", Neurotransmitter.ACETYLCHOLINE),
        ("DESCONOCIDO", Neurotransmitter.UNKNOWN),
        ("dopamina", Neurotransmitter.UNKNOWN),
        ("", Neurotransmitter.UNKNOWN),
    ],
)
def test_parse_neurotransmitter(text, expected):
    assert parse_neurotransmitter(text) is expected


@pytest.mark.parametrize(
    "text, expected",
    [
        ("D1", Receptor.D1),
        ("D2", Receptor.D2),
        ("NMDA", Receptor.NMDA),
        ("AMPA", Receptor.AMPA),
        ("GABA_A", Receptor.GABA_A),
        ("GABA", Receptor.UNKNOWN),
        ("", Receptor.UNKNOWN),
    ],
)
def test_parse_receptor(text, expected):
    assert parse_receptor(text) is expected


def test_string_round_trip():
    for nt in Neurotransmitter:
        assert parse_neurotransmitter(str(nt)) is nt
    for receptor in Receptor:
        assert parse_receptor(str(receptor)) is receptor


def test_unknown_strings():
    assert str(parse_neurotransmitter("NORADRENALINA")) == "DESCONOCIDO"
    assert str(parse_receptor("NICOTINICO")) == "DESCONOCIDO"


def test_default_neuron():
    neuron = Neuron()
    assert neuron.id == 0
    assert (neuron.x, neuron.y, neuron.z) == (0.0, 0.0, 0.0)
    assert neuron.neurotransmitter is Neurotransmitter.UNKNOWN
    assert neuron.receptors == []
    assert neuron.connections == []
    assert neuron.state is False


def test_default_lists_are_independent():
    a, b = Neuron(), Neuron()
    a.receptors.append(Receptor.D1)
    assert b.receptors == []


def test_inhibitory_interneuron():
    neuron = Neuron(neurotransmitter=Neurotransmitter.GABA, receptors=[Receptor.GABA_A])
    assert neuron.divergent_form() == "INTERNEURONA_INHIBIDORA"


def test_gaba_with_extra_receptor_is_undefined():
    neuron = Neuron(
        neurotransmitter=Neurotransmitter.GABA,
        receptors=[Receptor.GABA_A, Receptor.NMDA],
    )
    assert neuron.divergent_form() == "INDEFINIDA"


def test_dopamine_modulator():
    neuron = Neuron(
        neurotransmitter=Neurotransmitter.DOPAMINE,
        receptors=[Receptor.D2, Receptor.D1],
    )
    assert neuron.divergent_form() == "MODULADORA_D1"


def test_dopamine_without_d1_is_undefined():
    neuron = Neuron(neurotransmitter=Neurotransmitter.DOPAMINE, receptors=[Receptor.D2])
    assert neuron.divergent_form() == "INDEFINIDA"


def test_connection_fields():
    connection = Connection(7, Neurotransmitter.GLUTAMATE)
    assert connection.target_id == 7
    assert connection.neurotransmitter is Neurotransmitter.GLUTAMATE