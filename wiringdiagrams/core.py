# -*- coding: utf-8 -*-

"""
The low-level, imperative interface to wiring diagrams.

A wiring diagram is a graph of boxes and wires bounded by two sentinel nodes
for its own input and output interface. The algebraic interface of
:mod:`wiringdiagrams.algebraic` is built on top of it.

Summary
-------

.. autosummary::
    :template: class.rst
    :nosignatures:
    :toctree:

    PortKind
    Port
    Wire
    Box
    Junction
    WiringDiagram

.. admonition:: Functions

    .. autosummary::
        :template: function.rst
        :nosignatures:
        :toctree:

        singleton_diagram

Example
-------
>>> d = WiringDiagram(['x'], ['y'])
>>> f = d.add_box(Box('f', ['x'], ['y']))
>>> d.add_wires([((d.input_id, 0), (f, 0)), ((f, 0), (d.output_id, 0))])
>>> assert d.nboxes == 1 and d.nwires == 2
>>> assert d == singleton_diagram(Box('f', ['x'], ['y']))
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from enum import Enum
from typing import Any, Union

from networkx import MultiDiGraph

from wiringdiagrams import config, messages
from wiringdiagrams.ports import Ports, Theory
from wiringdiagrams.utils import (
    AxiomError,
    Composable,
    Whiskerable,
    assert_isinstance,
    factory_name,
    unbiased,
)

logger = logging.getLogger(__name__)


class PortKind(Enum):
    """ Whether a port is an input or an output of its node. """
    INPUT = "input"
    OUTPUT = "output"

    def __repr__(self):
        return f"{type(self).__name__}.{self.name}"


@dataclass(frozen=True)
class Port:
    """
    A reference to a port of a node in a wiring diagram.

    Parameters:
        box : The id of the node.
        kind : Whether it is an input or an output port.
        port : The index of the port.
    """
    box: int
    kind: PortKind
    port: int


@dataclass(frozen=True)
class Wire:
    """
    A wire from an output port to an input port.

    Parameters:
        source : The output port the wire starts at.
        target : The input port the wire ends at.

    Example
    -------
    >>> Wire(Port(0, PortKind.INPUT, 0), Port(1, PortKind.INPUT, 0))
    Traceback (most recent call last):
    ...
    ValueError: Expected a wire from an output to an input, \
got Port(box=0, kind=PortKind.INPUT, port=0) => \
Port(box=1, kind=PortKind.INPUT, port=0).
    """
    source: Port
    target: Port

    def __post_init__(self):
        assert_isinstance(self.source, Port)
        assert_isinstance(self.target, Port)
        if self.source.kind != PortKind.OUTPUT\
                or self.target.kind != PortKind.INPUT:
            raise ValueError(messages.WRONG_DIRECTION.format(
                self.source, self.target))

    @classmethod
    def make(cls, source: Port | tuple[int, int],
             target: Port | tuple[int, int]) -> Wire:
        """
        Make a wire from ``(box, port)`` pairs.

        Example
        -------
        >>> Wire.make((2, 0), (3, 1))  # doctest: +NORMALIZE_WHITESPACE
        Wire(source=Port(box=2, kind=PortKind.OUTPUT, port=0),
             target=Port(box=3, kind=PortKind.INPUT, port=1))
        """
        if not isinstance(source, Port):
            source = Port(source[0], PortKind.OUTPUT, source[1])
        if not isinstance(target, Port):
            target = Port(target[0], PortKind.INPUT, target[1])
        return cls(source, target)

    def sort_key(self) -> tuple[int, int, int, int]:
        """ The key by which wires are listed. """
        return (self.source.box, self.source.port,
                self.target.box, self.target.port)


@dataclass(frozen=True)
class Box:
    """
    A generic box, holding an opaque value and lists of port values.

    Parameters:
        value : The value of the box, e.g. its name.
        input_ports : The values of its input ports.
        output_ports : The values of its output ports.

    Example
    -------
    >>> from wiringdiagrams.ports import Ports
    >>> assert Box('f', Ports(['x']), ['y']) == Box('f', ('x', ), ('y', ))
    """
    value: Any
    input_ports: tuple
    output_ports: tuple

    def __post_init__(self):
        object.__setattr__(self, "input_ports", tuple(self.input_ports))
        object.__setattr__(self, "output_ports", tuple(self.output_ports))


@dataclass(frozen=True)
class Junction:
    """
    Junction node in a wiring diagram.

    Junction nodes are used to explicitly represent copies, merges, deletions,
    creations, caps, and cups. All their ports hold the same value.

    Parameters:
        value : The value of every port of the junction.
        ninputs : The number of input ports.
        noutputs : The number of output ports.

    Example
    -------
    >>> junction = Junction('x', 1, 3)
    >>> assert junction.input_ports == ('x', )
    >>> assert junction.output_ports == ('x', 'x', 'x')
    """
    value: Any
    ninputs: int
    noutputs: int

    @property
    def input_ports(self) -> tuple:
        return self.ninputs * (self.value, )

    @property
    def output_ports(self) -> tuple:
        return self.noutputs * (self.value, )


AbstractBox = Union[Box, Junction, "WiringDiagram"]
""" The nodes of a wiring diagram: generic boxes, junctions or diagrams. """


class WiringDiagram(Composable, Whiskerable):
    """
    A wiring diagram, i.e. boxes and wires between their ports bounded by an
    input and an output sentinel node.

    The outputs of the input sentinel are the input ports of the diagram,
    the inputs of the output sentinel are its output ports.

    Parameters:
        inputs : The values of the input ports, a :class:`Ports` or iterable.
        outputs : The values of the output ports, a :class:`Ports` or iterable.
        value : The value of the diagram, used when it is nested as a box.
        theory : The theory of the diagram, taken from the ports by default.

    Note
    ----
    The boxes and wires are stored in a :class:`networkx.MultiDiGraph` with
    one edge per wire. Node ``0`` is the input sentinel, node ``1`` the output
    sentinel and boxes get fresh increasing ids starting from ``2``.

    Example
    -------
    >>> from wiringdiagrams.ports import Ports, Theory
    >>> d = WiringDiagram(Ports(['x'], Theory.CARTESIAN), Ports())
    Traceback (most recent call last):
    ...
    wiringdiagrams.utils.AxiomError: Cannot mix ports of theories \
Theory.CARTESIAN and Theory.UNTYPED.
    """
    input_id, output_id = 0, 1

    def __init__(self, inputs: Iterable, outputs: Iterable,
                 value: Any = None, theory: Theory = None):
        theories = [A.theory for A in (inputs, outputs)
                    if isinstance(A, Ports)]
        theories += [theory] if theory is not None else []
        for other in theories[1:]:
            if other != theories[0]:
                raise AxiomError(messages.THEORY_MISMATCH.format(
                    repr(theories[0]), repr(other)))
        self.theory = theories[0] if theories else Theory.UNTYPED
        self.input_ports, self.output_ports = tuple(inputs), tuple(outputs)
        self.value = value
        self._graph = MultiDiGraph()
        self._graph.add_node(self.input_id, box=None)
        self._graph.add_node(self.output_id, box=None)
        self._next_id = 2

    @property
    def dom(self) -> Ports:
        """ The input ports of the diagram, as :class:`Ports`. """
        return Ports(self.input_ports, self.theory)

    @property
    def cod(self) -> Ports:
        """ The output ports of the diagram, as :class:`Ports`. """
        return Ports(self.output_ports, self.theory)

    # Boxes
    #######

    def is_box(self, v: int) -> bool:
        """ Whether ``v`` is the id of an interior box. """
        return v not in (self.input_id, self.output_id) and v in self._graph

    def box(self, v: int) -> AbstractBox:
        """
        The box with id ``v``.

        Raises
        ------
            KeyError : If ``v`` is a sentinel or not a node of the diagram.
        """
        if not self.is_box(v):
            raise KeyError(messages.NOT_A_BOX.format(v))
        return self._graph.nodes[v]["box"]

    def box_ids(self) -> list[int]:
        """ The ids of the interior boxes, in increasing order. """
        return sorted(v for v in self._graph if self.is_box(v))

    def boxes(self) -> list[AbstractBox]:
        """ The interior boxes, in the order of their ids. """
        return [self.box(v) for v in self.box_ids()]

    @property
    def nboxes(self) -> int:
        """ The number of interior boxes. """
        return len(self._graph) - 2

    def add_box(self, box: AbstractBox) -> int:
        """
        Add a box to the diagram and return its id.

        Parameters:
            box : A :class:`Box`, :class:`Junction` or :class:`WiringDiagram`.
        """
        assert_isinstance(box, (Box, Junction, WiringDiagram))
        v, self._next_id = self._next_id, self._next_id + 1
        self._graph.add_node(v, box=box)
        return v

    def add_boxes(self, boxes: Iterable[AbstractBox]) -> list[int]:
        """ Add boxes to the diagram and return their ids. """
        return [self.add_box(box) for box in boxes]

    def rem_box(self, v: int) -> None:
        """ Remove a box together with its incident wires. """
        if not self.is_box(v):
            raise KeyError(messages.NOT_A_BOX.format(v))
        self._graph.remove_node(v)

    def rem_boxes(self, vs: Iterable[int]) -> None:
        """ Remove boxes together with their incident wires. """
        for v in list(vs):
            self.rem_box(v)

    # Ports
    #######

    def node_input_ports(self, v: int) -> tuple:
        """ The values of the input ports of any node, sentinels included. """
        if v == self.input_id:
            return ()
        if v == self.output_id:
            return self.output_ports
        return tuple(self.box(v).input_ports)

    def node_output_ports(self, v: int) -> tuple:
        """ The values of the output ports of any node, sentinels included. """
        if v == self.input_id:
            return self.input_ports
        if v == self.output_id:
            return ()
        return tuple(self.box(v).output_ports)

    def port_value(self, port: Port) -> Any:
        """ The value held by a port reference. """
        ports = self.node_input_ports(port.box)\
            if port.kind == PortKind.INPUT\
            else self.node_output_ports(port.box)
        if not 0 <= port.port < len(ports):
            raise IndexError(messages.PORT_OUT_OF_RANGE.format(
                port.box, port.kind.value, port.port, len(ports)))
        return ports[port.port]

    # Wires
    #######

    @property
    def nwires(self) -> int:
        """ The number of wires, counted with multiplicity. """
        return self._graph.number_of_edges()

    def wires(self, v: int = None) -> list[Wire]:
        """
        The wires of the diagram, or only those incident to node ``v``.
        """
        if v is None:
            edges = self._graph.edges(data="wire")
            return sorted((w for _, _, w in edges), key=Wire.sort_key)
        return sorted(self.in_wires(v) + [
            w for w in self.out_wires(v) if w.target.box != v],
            key=Wire.sort_key)

    def in_wires(self, v: int, port: int = None) -> list[Wire]:
        """
        The wires into node ``v``, or only into its input port ``port``.
        """
        wires = (w for _, _, w in self._graph.in_edges(v, data="wire"))
        return sorted((w for w in wires if port is None
                       or w.target.port == port), key=Wire.sort_key)

    def out_wires(self, v: int, port: int = None) -> list[Wire]:
        """
        The wires out of node ``v``, or only out of its output port ``port``.
        """
        wires = (w for _, _, w in self._graph.out_edges(v, data="wire"))
        return sorted((w for w in wires if port is None
                       or w.source.port == port), key=Wire.sort_key)

    def has_wire(self, wire: Wire) -> bool:
        """ Whether the diagram has at least one copy of ``wire``. """
        edges = self._graph.get_edge_data(
            wire.source.box, wire.target.box, default={})
        return any(data["wire"] == wire for data in edges.values())

    def add_wire(self, source: Wire | Port | tuple[int, int],
                 target: Port | tuple[int, int] = None) -> None:
        """
        Add a wire, given either as a :class:`Wire` or as a source and target.

        Parameters:
            source : The wire, or its source as a port or ``(box, port)``.
            target : The target as a port or ``(box, port)``.

        Raises
        ------
            IndexError : If a port index is out of range.
            AxiomError : If the port values differ, unless
                :data:`config.VALIDATE_PORT_VALUES` is false.

        Example
        -------
        >>> d = WiringDiagram(['x'], ['y'])
        >>> d.add_wire((d.input_id, 0), (d.output_id, 0))
        Traceback (most recent call last):
        ...
        wiringdiagrams.utils.AxiomError: Cannot wire output 0 of node 0 of \
value 'x' to input 0 of node 1 of value 'y'.
        """
        wire = source if isinstance(source, Wire)\
            else Wire.make(source, target)
        source_value = self.port_value(wire.source)
        target_value = self.port_value(wire.target)
        if config.VALIDATE_PORT_VALUES and source_value != target_value:
            raise AxiomError(messages.PORT_VALUE_MISMATCH.format(
                f"output {wire.source.port} of node {wire.source.box}",
                source_value,
                f"input {wire.target.port} of node {wire.target.box}",
                target_value))
        self._graph.add_edge(wire.source.box, wire.target.box, wire=wire)

    def add_wires(self, wires: Iterable) -> None:
        """
        Add wires, each given as a :class:`Wire` or a ``(source, target)``
        pair of ``(box, port)`` pairs.
        """
        for wire in wires:
            if isinstance(wire, Wire):
                self.add_wire(wire)
            else:
                self.add_wire(*wire)

    def rem_wire(self, wire: Wire) -> None:
        """ Remove one copy of a wire, raise ``ValueError`` if absent. """
        edges = self._graph.get_edge_data(
            wire.source.box, wire.target.box, default={})
        for key, data in edges.items():
            if data["wire"] == wire:
                self._graph.remove_edge(
                    wire.source.box, wire.target.box, key=key)
                return
        raise ValueError(messages.NO_SUCH_WIRE.format(wire))

    def rem_wires(self, wires: Iterable[Wire]) -> None:
        """ Remove one copy of each wire. """
        for wire in list(wires):
            self.rem_wire(wire)

    # Whole diagrams
    ################

    def graph(self) -> MultiDiGraph:
        """
        A read-only view of the underlying graph, for use with networkx
        algorithms. Nodes hold their box in the ``box`` attribute (``None``
        for the sentinels) and edges hold their wire in the ``wire``
        attribute.
        """
        return self._graph.copy(as_view=True)

    def copy(self) -> WiringDiagram:
        """ A copy of the diagram, sharing its (immutable) boxes. """
        result = type(self)(
            self.input_ports, self.output_ports, self.value, self.theory)
        result._graph = self._graph.copy()
        result._next_id = self._next_id
        return result

    def _renumbering(self) -> dict[int, int]:
        boxes = {v: i + 2 for i, v in enumerate(self.box_ids())}
        return {self.input_id: self.input_id,
                self.output_id: self.output_id, **boxes}

    def _canonical_wires(self) -> list[tuple[int, int, int, int]]:
        relabel = self._renumbering()
        return sorted(
            (relabel[w.source.box], w.source.port,
             relabel[w.target.box], w.target.port) for w in self.wires())

    def __eq__(self, other):
        if not isinstance(other, WiringDiagram):
            return False
        return (self.value, self.theory, self.input_ports, self.output_ports)\
            == (other.value, other.theory,
                other.input_ports, other.output_ports)\
            and self.boxes() == other.boxes()\
            and self._canonical_wires() == other._canonical_wires()

    __hash__ = None

    def __repr__(self):
        value = "" if self.value is None else f", value={repr(self.value)}"
        return factory_name(type(self))\
            + f"({repr(self.dom)}, {repr(self.cod)}{value}, " \
              f"boxes={repr(self.boxes())}, " \
              f"wires={repr(self._canonical_wires())})"

    def __str__(self):
        name = "WiringDiagram" if self.value is None else str(self.value)
        return f"{name}: {self.dom} -> {self.cod}"

    # Substitution and encapsulation
    ################################

    def substitute(self, ids: int | Iterable[int] = None,
                   subs: WiringDiagram | Iterable[WiringDiagram] = None
                   ) -> WiringDiagram:
        """
        Substitute boxes by wiring diagrams, splicing their wires.

        Parameters:
            ids : The id or list of ids of the boxes to substitute,
                by default all the boxes that are themselves diagrams.
            subs : The diagram or list of diagrams to substitute,
                by default the boxes themselves.

        Returns
        -------
            A new diagram, where the boxes of each substitute take the place
            of the box it replaces and the other boxes keep their order.

        Note
        ----
        A wire into a substituted box is connected to every target of the
        corresponding input port inside the substitute, and dually for
        outputs. Wires that pass straight through a substitute are followed
        until they reach boxes that are not substituted, so that fan-in and
        fan-out multiply.

        Example
        -------
        >>> inner = singleton_diagram(Box('f', ['x'], ['x']))
        >>> outer = WiringDiagram(['x'], ['x'])
        >>> v = outer.add_box(inner)
        >>> outer.add_wires([((outer.input_id, 0), (v, 0)),
        ...                  ((v, 0), (outer.output_id, 0))])
        >>> assert outer.substitute() == inner
        """
        if ids is None:
            ids = [v for v in self.box_ids()
                   if isinstance(self.box(v), WiringDiagram)]
        elif isinstance(ids, int):
            ids, subs = [ids], None if subs is None else [subs]
        ids = list(ids)
        subs = [self.box(v) for v in ids] if subs is None else list(subs)
        if len(ids) != len(subs):
            raise ValueError(messages.SUBSTITUTE_LENGTHS.format(
                len(ids), len(subs)))
        for v, sub in zip(ids, subs):
            assert_isinstance(sub, WiringDiagram)
            box = self.box(v)
            if (len(sub.input_ports), len(sub.output_ports))\
                    != (len(box.input_ports), len(box.output_ports)):
                raise AxiomError(messages.WRONG_SUBSTITUTE.format(
                    repr(sub), v,
                    len(box.input_ports), len(box.output_ports)))
        logger.debug("Substituting boxes %s.", ids)
        substitutes = dict(zip(ids, subs))

        result = type(self)(
            self.input_ports, self.output_ports, self.value, self.theory)
        outer_map, inner_map = {
            self.input_id: result.input_id,
            self.output_id: result.output_id}, {}
        for v in self.box_ids():
            if v in substitutes:
                sub = substitutes[v]
                inner_map[v] = {u: result.add_box(sub.box(u))
                                for u in sub.box_ids()}
            else:
                outer_map[v] = result.add_box(self.box(v))

        def mapped(port, node_map):
            return Port(node_map[port.box], port.kind, port.port)

        def outer_targets(port, visiting):
            if port.box not in substitutes:
                return [mapped(port, outer_map)]
            if port in visiting:
                raise AxiomError(messages.PASS_THROUGH_CYCLE.format(ids))
            sub = substitutes[port.box]
            return [target for wire in sub.out_wires(sub.input_id, port.port)
                    for target in inner_targets(
                        port.box, wire.target, visiting | {port})]

        def inner_targets(v, port, visiting):
            sub = substitutes[v]
            if port.box != sub.output_id:
                return [mapped(port, inner_map[v])]
            return [target for wire in self.out_wires(v, port.port)
                    for target in outer_targets(wire.target, visiting)]

        for wire in self.wires():
            if wire.source.box not in substitutes:
                for target in outer_targets(wire.target, frozenset()):
                    result.add_wire(
                        Wire(mapped(wire.source, outer_map), target))
        for v, sub in substitutes.items():
            for wire in sub.wires():
                if wire.source.box != sub.input_id:
                    for target in inner_targets(v, wire.target, frozenset()):
                        result.add_wire(
                            Wire(mapped(wire.source, inner_map[v]), target))
        return result

    def encapsulate(self, components: Iterable[Iterable[int]],
                    discard_boxes: bool = False, values: Iterable = None,
                    make_box: Callable[[Any, tuple, tuple], AbstractBox] = None
                    ) -> WiringDiagram:
        """
        Collapse each component, i.e. list of box ids, into a single box.

        The new box has one input port for each distinct port outside the
        component with a wire into it, and one output port for each distinct
        port outside the component with a wire out of it.

        Parameters:
            components : The disjoint lists of box ids to encapsulate.
            discard_boxes : Whether to forget the boxes inside, otherwise
                the new box is a diagram that :meth:`substitute` expands.
            values : The value of each new box, ``None`` by default.
            make_box : Called with ``value, inputs, outputs`` to make the new
                box when ``discard_boxes``, :class:`Box` by default.

        Returns
        -------
            A new diagram, where each new box takes the place of the first box
            of its component.

        Example
        -------
        >>> d = WiringDiagram(['x'], ['x'])
        >>> f, g = d.add_boxes([Box('f', ['x'], ['x']), Box('g', ['x'], ['x'])])
        >>> d.add_wires([((d.input_id, 0), (f, 0)), ((f, 0), (g, 0)),
        ...              ((g, 0), (d.output_id, 0))])
        >>> e = d.encapsulate([[f, g]], values=['h'])
        >>> assert e.boxes()[0].boxes() == d.boxes()
        >>> assert e.substitute() == d
        """
        components = [sorted(component) for component in components]
        values = [None] * len(components) if values is None else list(values)
        make_box = Box if make_box is None else make_box
        owner = {}
        for i, component in enumerate(components):
            for v in component:
                if v in owner or not self.is_box(v):
                    raise ValueError(messages.OVERLAPPING_COMPONENTS.format(v)
                                     if v in owner else
                                     messages.NOT_A_BOX.format(v))
                owner[v] = i
        logger.debug("Encapsulating components %s.", components)

        in_maps, out_maps, boxes = [], [], []
        for component, value in zip(components, values):
            in_map, out_map, inputs, outputs = {}, {}, [], []
            for v in component:
                for wire in self.in_wires(v):
                    if owner.get(wire.source.box) != owner[v]\
                            and wire.source not in in_map:
                        in_map[wire.source] = len(inputs)
                        inputs.append(self.port_value(wire.target))
                for wire in self.out_wires(v):
                    if owner.get(wire.target.box) != owner[v]\
                            and wire.target not in out_map:
                        out_map[wire.target] = len(outputs)
                        outputs.append(self.port_value(wire.source))
            in_maps.append(in_map)
            out_maps.append(out_map)
            boxes.append(
                make_box(value, tuple(inputs), tuple(outputs))
                if discard_boxes else self._subdiagram(
                    component, in_map, out_map, inputs, outputs, value))

        result = type(self)(
            self.input_ports, self.output_ports, self.value, self.theory)
        node_map = {self.input_id: result.input_id,
                    self.output_id: result.output_id}
        new_ids = [None] * len(components)
        for v in self.box_ids():
            if v not in owner:
                node_map[v] = result.add_box(self.box(v))
            elif v == components[owner[v]][0]:
                new_ids[owner[v]] = result.add_box(boxes[owner[v]])
        added = set()
        for wire in self.wires():
            i, j = owner.get(wire.source.box), owner.get(wire.target.box)
            if i is not None and i == j:
                continue
            source = Port(node_map[wire.source.box], PortKind.OUTPUT,
                          wire.source.port) if i is None else Port(
                new_ids[i], PortKind.OUTPUT, out_maps[i][wire.target])
            target = Port(node_map[wire.target.box], PortKind.INPUT,
                          wire.target.port) if j is None else Port(
                new_ids[j], PortKind.INPUT, in_maps[j][wire.source])
            new_wire = Wire(source, target)
            if i is None and j is None:
                result.add_wire(new_wire)
            elif new_wire not in added:
                added.add(new_wire)
                result.add_wire(new_wire)
        return result

    def _subdiagram(self, component, in_map, out_map, inputs, outputs, value):
        sub = type(self)(inputs, outputs, value, self.theory)
        node_map = {v: sub.add_box(self.box(v)) for v in component}
        added = set()
        for v in component:
            for wire in self.in_wires(v):
                source = Port(node_map[wire.source.box], PortKind.OUTPUT,
                              wire.source.port)\
                    if wire.source.box in node_map else Port(
                        sub.input_id, PortKind.OUTPUT, in_map[wire.source])
                target = Port(node_map[v], PortKind.INPUT, wire.target.port)
                if wire.source.box in node_map:
                    sub.add_wire(Wire(source, target))
                elif Wire(source, target) not in added:
                    added.add(Wire(source, target))
                    sub.add_wire(Wire(source, target))
            for wire in self.out_wires(v):
                if wire.target.box in node_map:
                    continue
                source = Port(node_map[v], PortKind.OUTPUT, wire.source.port)
                target = Port(
                    sub.output_id, PortKind.INPUT, out_map[wire.target])
                if Wire(source, target) not in added:
                    added.add(Wire(source, target))
                    sub.add_wire(Wire(source, target))
        return sub

    # Syntactic sugar
    #################

    @classmethod
    def id(cls, dom: Ports) -> WiringDiagram:
        from wiringdiagrams.algebraic import id as identity
        return identity(dom)

    @unbiased
    def then(self, other: WiringDiagram) -> WiringDiagram:
        """ Sequential composition, called with :code:`>>`. """
        from wiringdiagrams.algebraic import compose
        return compose(self, other)

    @unbiased
    def tensor(self, other: WiringDiagram) -> WiringDiagram:
        """ Parallel composition, called with :code:`@`. """
        from wiringdiagrams.algebraic import otimes
        return otimes(self, other)

    def draw(self, **params):
        """ Draw the diagram, see :func:`wiringdiagrams.drawing.draw`. """
        from wiringdiagrams.drawing import draw
        return draw(self, **params)


def singleton_diagram(box: AbstractBox, theory: Theory = None
                      ) -> WiringDiagram:
    """
    The wiring diagram with a single box, wired to its whole boundary.

    Parameters:
        box : The box.
        theory : The theory of the diagram, taken from the box if it is a
            diagram, untyped otherwise.

    Example
    -------
    >>> d = singleton_diagram(Junction('x', 2, 1))
    >>> assert d.input_ports == ('x', 'x') and d.output_ports == ('x', )
    >>> assert d.nwires == 3
    """
    if theory is None:
        theory = getattr(box, "theory", Theory.UNTYPED)
    d = WiringDiagram(box.input_ports, box.output_ports, theory=theory)
    v = d.add_box(box)
    d.add_wires(((d.input_id, i), (v, i))
                for i in range(len(box.input_ports)))
    d.add_wires(((v, i), (d.output_id, i))
                for i in range(len(box.output_ports)))
    return d
