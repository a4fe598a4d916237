from pytest import raises

from wiringdiagrams import config
from wiringdiagrams.core import *
from wiringdiagrams.ports import Ports, Theory
from wiringdiagrams.utils import AxiomError


def f_then_g():
    d = WiringDiagram(['x'], ['z'])
    f, g = d.add_boxes([Box('f', ['x'], ['y']), Box('g', ['y'], ['z'])])
    d.add_wires([((d.input_id, 0), (f, 0)), ((f, 0), (g, 0)),
                 ((g, 0), (d.output_id, 0))])
    return d, f, g


def test_WiringDiagram_init():
    d = WiringDiagram(Ports(['x'], Theory.CARTESIAN), ['y'])
    assert d.theory == Theory.CARTESIAN
    assert d.dom == Ports(['x'], Theory.CARTESIAN)
    assert d.cod == Ports(['y'], Theory.CARTESIAN)
    assert d.nboxes == d.nwires == 0
    with raises(AxiomError):
        WiringDiagram(Ports(['x']), Ports(['y']), theory=Theory.BIPRODUCT)


def test_WiringDiagram_add_box():
    d = WiringDiagram([], [])
    ids = d.add_boxes([Box('f', [], []), Junction('x', 0, 0), d.copy()])
    assert ids == [2, 3, 4] and d.box_ids() == ids
    assert d.box(3) == Junction('x', 0, 0)
    d.rem_box(3)
    assert d.box_ids() == [2, 4]
    assert d.add_box(Box('g', [], [])) == 5
    with raises(TypeError):
        d.add_box('f')
    with raises(KeyError):
        d.box(d.input_id)
    with raises(KeyError):
        d.rem_box(3)


def test_WiringDiagram_rem_box():
    d, f, g = f_then_g()
    d.rem_box(f)
    assert d.box_ids() == [g] and d.nwires == 1
    assert d.wires() == [Wire.make((g, 0), (d.output_id, 0))]
    d.rem_boxes([g])
    assert d.nboxes == d.nwires == 0


def test_WiringDiagram_wires():
    d, f, g = f_then_g()
    assert d.in_wires(g) == [Wire.make((f, 0), (g, 0))]
    assert d.out_wires(d.input_id) == [Wire.make((d.input_id, 0), (f, 0))]
    assert d.wires(f) == [Wire.make((d.input_id, 0), (f, 0)),
                          Wire.make((f, 0), (g, 0))]
    assert d.has_wire(Wire.make((f, 0), (g, 0)))
    assert not d.has_wire(Wire.make((g, 0), (f, 0)))
    d.rem_wire(Wire.make((f, 0), (g, 0)))
    assert d.nwires == 2
    with raises(ValueError):
        d.rem_wire(Wire.make((f, 0), (g, 0)))


def test_WiringDiagram_multiple_wires():
    d = WiringDiagram(['x'], ['x'])
    d.add_wires(2 * [((d.input_id, 0), (d.output_id, 0))])
    assert d.nwires == 2 and len(d.in_wires(d.output_id, 0)) == 2
    d.rem_wires(d.wires()[:1])
    assert d.nwires == 1


def test_WiringDiagram_self_loop():
    d = WiringDiagram([], [])
    v = d.add_box(Box('f', ['x'], ['x']))
    d.add_wire((v, 0), (v, 0))
    assert d.wires(v) == [Wire.make((v, 0), (v, 0))]


def test_WiringDiagram_add_wire_errors():
    d, f, g = f_then_g()
    with raises(AxiomError):
        d.add_wire((d.input_id, 0), (g, 0))
    with raises(IndexError):
        d.add_wire((f, 1), (g, 0))
    with raises(IndexError):
        d.add_wire((d.input_id, 0), (d.input_id, 0))
    with raises(ValueError):
        d.add_wire(Wire(Port(f, PortKind.INPUT, 0), Port(g, PortKind.INPUT, 0)))


def test_WiringDiagram_add_wire_no_validation(monkeypatch):
    monkeypatch.setattr(config, "VALIDATE_PORT_VALUES", False)
    d, f, g = f_then_g()
    d.add_wire((d.input_id, 0), (g, 0))
    assert len(d.in_wires(g)) == 2


def test_WiringDiagram_eq():
    d, _, _ = f_then_g()
    e, _, _ = f_then_g()
    assert d == e and d != 'd'
    e.add_box(Box('h', [], []))
    assert d != e
    e, _, _ = f_then_g()
    e.rem_wires(e.wires())
    assert d != e
    x = WiringDiagram(['x'], ['x'])
    assert x != WiringDiagram(['x'], ['x'], value='x')
    assert x != WiringDiagram(['x'], ['x'], theory=Theory.CARTESIAN)


def test_WiringDiagram_eq_renumbering():
    d, f, g = f_then_g()
    e = WiringDiagram(['x'], ['z'])
    e.add_box(Box('h', [], []))
    f2, g2 = e.add_boxes([Box('f', ['x'], ['y']), Box('g', ['y'], ['z'])])
    e.rem_box(2)
    e.add_wires([((e.input_id, 0), (f2, 0)), ((f2, 0), (g2, 0)),
                 ((g2, 0), (e.output_id, 0))])
    assert e.box_ids() == [3, 4] and d == e


def test_WiringDiagram_copy():
    d, f, g = f_then_g()
    e = d.copy()
    e.rem_box(f)
    assert d.box_ids() == [f, g] and e.box_ids() == [g]


def test_WiringDiagram_graph():
    d, f, g = f_then_g()
    graph = d.graph()
    assert graph.nodes[f]["box"] == Box('f', ['x'], ['y'])
    assert graph.number_of_edges() == 3
    assert graph.nodes[d.input_id]["box"] is None


def test_WiringDiagram_repr_str():
    d = WiringDiagram(['x'], ['x'], value='d')
    d.add_wire((d.input_id, 0), (d.output_id, 0))
    assert repr(d) == "core.WiringDiagram(ports.Ports(('x',)), "\
        "ports.Ports(('x',)), value='d', boxes=[], wires=[(0, 0, 1, 0)])"
    assert str(d) == "d: x -> x"


def test_WiringDiagram_substitute():
    d, f, g = f_then_g()
    inner = WiringDiagram(['y'], ['z'])
    h, k = inner.add_boxes([Box('h', ['y'], ['y']), Box('k', ['y'], ['z'])])
    inner.add_wires([((inner.input_id, 0), (h, 0)), ((h, 0), (k, 0)),
                     ((k, 0), (inner.output_id, 0))])
    result = d.substitute(g, inner)
    assert result.boxes() == [Box('f', ['x'], ['y']),
                              Box('h', ['y'], ['y']),
                              Box('k', ['y'], ['z'])]
    assert result.nwires == 4
    assert d.boxes()[1] == Box('g', ['y'], ['z'])


def test_WiringDiagram_substitute_keeps_order():
    d = WiringDiagram([], [])
    d.add_boxes([Box('a', [], []), WiringDiagram([], []), Box('c', [], [])])
    inner = d.box(3)
    inner.add_box(Box('b', [], []))
    assert [box.value for box in d.substitute().boxes()] == ['a', 'b', 'c']


def test_WiringDiagram_substitute_fan_out_fan_in():
    d = WiringDiagram(['x'], ['x'])
    v = d.add_box(Box('f', ['x'], ['x']))
    d.add_wires(2 * [((d.input_id, 0), (v, 0))]
                + 3 * [((v, 0), (d.output_id, 0))])
    sub = WiringDiagram(['x'], ['x'])
    sub.add_wire((sub.input_id, 0), (sub.output_id, 0))
    assert d.substitute(v, sub).nwires == 6


def test_WiringDiagram_substitute_errors():
    d, f, g = f_then_g()
    with raises(AxiomError):
        d.substitute(f, WiringDiagram(['x'], []))
    with raises(ValueError):
        d.substitute([f, g], [WiringDiagram(['x'], ['y'])])
    with raises(TypeError):
        d.substitute(f, Box('f', ['x'], ['y']))


def test_WiringDiagram_substitute_closed_loop():
    d = WiringDiagram([], [])
    v = d.add_box(Box('f', ['x'], ['x']))
    d.add_wire((v, 0), (v, 0))
    sub = WiringDiagram(['x'], ['x'])
    sub.add_wire((sub.input_id, 0), (sub.output_id, 0))
    assert d.substitute(v, sub) == WiringDiagram([], [])


def test_WiringDiagram_substitute_pass_through_cycle():
    d = WiringDiagram(['x'], [])
    v = d.add_box(Box('f', ['x', 'x'], ['x']))
    d.add_wires([((d.input_id, 0), (v, 0)), ((v, 0), (v, 1))])
    sub = WiringDiagram(['x', 'x'], ['x'])
    sub.add_wires([((sub.input_id, 0), (sub.output_id, 0)),
                   ((sub.input_id, 1), (sub.output_id, 0))])
    with raises(AxiomError):
        d.substitute(v, sub)


def test_WiringDiagram_encapsulate():
    d, f, g = f_then_g()
    e = d.encapsulate([[f, g]], values=['fg'])
    box, = e.boxes()
    assert box.value == 'fg'
    assert box.input_ports == ('x', ) and box.output_ports == ('z', )
    assert e.nwires == 2 and e.substitute() == d


def test_WiringDiagram_encapsulate_discard_boxes():
    d = WiringDiagram(['x'], ['x', 'x'])
    f, g = d.add_boxes([Box('f', ['x'], ['x']), Box('g', ['x'], ['x'])])
    d.add_wires([((d.input_id, 0), (f, 0)), ((d.input_id, 0), (g, 0)),
                 ((f, 0), (d.output_id, 0)), ((g, 0), (d.output_id, 1))])
    e = d.encapsulate([[g, f]], discard_boxes=True, values=['h'])
    assert e.boxes() == [Box('h', ['x'], ['x', 'x'])]
    assert e.nwires == 3
    e = d.encapsulate([[f, g]], discard_boxes=True, make_box=lambda
                      value, inputs, outputs: Junction('x', 1, 2))
    assert e.boxes() == [Junction('x', 1, 2)]


def test_WiringDiagram_encapsulate_errors():
    d, f, g = f_then_g()
    with raises(ValueError):
        d.encapsulate([[f], [f, g]])
    with raises(ValueError):
        d.encapsulate([[d.input_id]])


def test_WiringDiagram_sugar():
    A = Ports(['x'])
    f = singleton_diagram(Box('f', A, A))
    assert f >> WiringDiagram.id(A) == f == WiringDiagram.id(A) >> f
    assert (f @ f).dom == A @ A and (f @ f).nboxes == 2
    assert f.then() == f and f.tensor() == f


def test_singleton_diagram():
    inner = WiringDiagram(Ports(['x'], Theory.CARTESIAN),
                          Ports([], Theory.CARTESIAN))
    d = singleton_diagram(inner)
    assert d.theory == Theory.CARTESIAN and d.boxes() == [inner]
    assert d.substitute() == inner
