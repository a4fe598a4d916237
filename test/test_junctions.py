from pytest import raises

from wiringdiagrams import config
from wiringdiagrams.algebraic import *
from wiringdiagrams.core import Box, Junction, WiringDiagram, singleton_diagram
from wiringdiagrams.ports import Ports, Theory
from wiringdiagrams.utils import AxiomError

X = Ports(['x'], Theory.BIDIAGONAL)


def test_junction_diagram():
    d = junction_diagram(Ports(['x', 'y']), 1, 3)
    assert d.boxes() == [Junction('x', 1, 3), Junction('y', 1, 3)]
    assert d.dom == Ports(['x', 'y']) and d.cod == Ports(['x', 'y']) ** 3
    assert d.nwires == 8
    assert junction_diagram(X, 0, 0).boxes() == [Junction('x', 0, 0)]


def test_add_junctions():
    A = Ports(['x'])
    d = add_junctions(mcopy(A, 3))
    assert d.boxes() == [Junction('x', 1, 3)] and d.nwires == 4
    d = add_junctions(delete(A))
    assert d.boxes() == [Junction('x', 1, 0)] and d.nwires == 1
    d = add_junctions(id(A))
    assert d == id(A)


def test_add_junctions_box_ports():
    A = Ports(['x'])
    f = singleton_diagram(Box('f', A, A))
    d = compose(compose(mcopy(A), mmerge(A)), f)
    e = add_junctions(d)
    assert e.boxes() == [Box('f', A, A), Junction('x', 1, 2),
                         Junction('x', 2, 1)]
    assert rem_junctions(e) == d


def test_add_junctions_inplace():
    d = mcopy(Ports(['x']))
    assert add_junctions_inplace(d) is d
    assert d.boxes() == [Junction('x', 1, 2)]


def test_add_junctions_leaves_input_untouched():
    d = mcopy(Ports(['x']))
    add_junctions(d)
    assert d.nboxes == 0 and d.nwires == 2


def test_rem_junctions():
    assert rem_junctions(mcopy(X, 3)) == implicit_mcopy(X, 3)
    d = rem_junctions(compose(mcopy(X), mmerge(X)))
    assert d.nboxes == 0 and d.nwires == 2


def test_rem_junctions_after_add_junctions():
    A = Ports(['x', 'y'])
    for d in [mcopy(A, 3), mmerge(A), delete(A), create(A), braid(A, A)]:
        assert rem_junctions(add_junctions(d)) == d


def test_complete_layer():
    d = complete_layer(('x', ), ('x', 'x'), Theory.BIDIAGONAL)
    assert d.theory == Theory.BIDIAGONAL and d.nboxes == 0
    assert [(w.source.port, w.target.port) for w in d.wires()]\
        == [(0, 0), (0, 1)]
    assert complete_layer((), ('x', )).nwires == 0


def test_merge_junctions():
    d = compose(mcopy(X), otimes(mcopy(X), id(X)))
    assert d.boxes() == [Junction('x', 1, 2), Junction('x', 1, 2)]
    e = merge_junctions(d)
    assert e.boxes() == [Junction('x', 1, 3)] and e.nwires == 4
    assert rem_junctions(e) == rem_junctions(d) == implicit_mcopy(X, 3)


def test_merge_junctions_chain():
    d = compose(compose(mcopy(X), mmerge(X)), mcopy(X))
    assert d.nboxes == 3
    e = merge_junctions(d)
    assert e.boxes() == [Junction('x', 1, 2)]
    assert e.nwires == 3


def test_merge_junctions_idempotent():
    d = merge_junctions(compose(mmerge(X), mcopy(X)))
    assert d.boxes() == [Junction('x', 2, 2)]
    assert merge_junctions(d) == d


def test_merge_junctions_separate_components():
    f = singleton_diagram(Box('f', X, X), theory=Theory.BIDIAGONAL)
    d = compose(compose(compose(mcopy(X), mmerge(X)), f),
                compose(mcopy(X), mmerge(X)))
    e = merge_junctions(d)
    assert e.boxes() == [Junction('x', 1, 1), Box('f', X, X),
                         Junction('x', 1, 1)]


def test_merge_junctions_heterogeneous(monkeypatch):
    monkeypatch.setattr(config, "VALIDATE_PORT_VALUES", False)
    d = WiringDiagram([], [])
    u, v = d.add_boxes([Junction('x', 0, 1), Junction('y', 1, 0)])
    d.add_wire((u, 0), (v, 0))
    with raises(AxiomError):
        merge_junctions(d)
