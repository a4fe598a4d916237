# -*- coding: utf-8 -*-

"""
Wiring diagrams as a symmetric monoidal category and as an operad.

This module provides a high-level functional and algebraic interface to wiring
diagrams, building on the low-level imperative interface of
:mod:`wiringdiagrams.core`. It also represents diagonals, codiagonals, units
and counits in wiring diagrams, either implicitly as wires that fan out and
fan in, or explicitly as :class:`Junction` nodes.

Summary
-------

.. admonition:: Functions

    .. autosummary::
        :template: function.rst
        :nosignatures:
        :toctree:

        dom
        codom
        id
        compose
        otimes
        munit
        braid
        permute
        mcopy
        mmerge
        delete
        create
        dunit
        dcounit
        ocompose
        junction_diagram
        add_junctions
        add_junctions_inplace
        rem_junctions
        merge_junctions

Axioms
------

>>> A, B = Ports(['x']), Ports(['y', 'z'])
>>> f = singleton_diagram(Box('f', A, B))
>>> g = singleton_diagram(Box('g', B, A))

* Identity and associativity:

>>> assert compose(id(A), f) == f == compose(f, id(B))
>>> assert compose(compose(f, g), f) == compose(f, compose(g, f))

* Symmetry:

>>> assert compose(braid(A, B), braid(B, A)) == id(A @ B)
>>> assert compose(otimes(f, id(A)), braid(B, A))\\
...     == compose(braid(A, A), otimes(id(A), f))
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from networkx import weakly_connected_components

from wiringdiagrams import config, messages
from wiringdiagrams.core import (
    Box,
    Junction,
    Port,
    PortKind,
    WiringDiagram,
    singleton_diagram,
)
from wiringdiagrams.ports import Ports, Theory
from wiringdiagrams.utils import (
    AxiomError,
    IncompatibleDomainError,
    assert_isinstance,
    unique,
)

logger = logging.getLogger(__name__)


# Symmetric monoidal category
#############################

def dom(f: WiringDiagram) -> Ports:
    """ The domain of a diagram, i.e. its input ports. """
    return f.dom


def codom(f: WiringDiagram) -> Ports:
    """ The codomain of a diagram, i.e. its output ports. """
    return f.cod


def id(A: Ports) -> WiringDiagram:
    """
    The identity diagram on some ports, wiring each input straight to the
    output with the same index.

    Parameters:
        A : The ports.

    Example
    -------
    >>> d = id(Ports(['x', 'y']))
    >>> assert d.nboxes == 0 and d.nwires == 2
    """
    f = WiringDiagram(A, A)
    f.add_wires(((f.input_id, i), (f.output_id, i)) for i in range(len(A)))
    return f


def compose(f: WiringDiagram, g: WiringDiagram,
            unsubstituted: bool = False) -> WiringDiagram:
    """
    The sequential composition of two diagrams, called with :code:`>>`.

    Parameters:
        f : The first diagram.
        g : The second diagram, with as many inputs as ``f`` has outputs.
        unsubstituted : Whether to keep ``f`` and ``g`` as nested boxes
            rather than flattening them.

    Raises
    ------
        IncompatibleDomainError : If the number of ports do not match.

    Note
    ----
    Only the number of ports is checked beforehand, the values of the ports
    are checked when the wires are added.

    Example
    -------
    >>> f = id(Ports(['x', 'y']))
    >>> compose(f, id(Ports(['x', 'y', 'z'])))
    Traceback (most recent call last):
    ...
    wiringdiagrams.utils.IncompatibleDomainError: Incompatible domains \
x @ y and x @ y @ z.
    >>> h = compose(f, f, unsubstituted=True)
    >>> assert h.boxes() == [f, f] and h.substitute() == f
    """
    if len(codom(f)) != len(dom(g)):
        raise IncompatibleDomainError(messages.INCOMPATIBLE_DOMAINS.format(
            codom(f), dom(g)))
    h = WiringDiagram(dom(f), codom(g))
    fv, gv = h.add_box(f), h.add_box(g)
    h.add_wires(((h.input_id, i), (fv, i)) for i in range(len(dom(f))))
    h.add_wires(((fv, i), (gv, i)) for i in range(len(codom(f))))
    h.add_wires(((gv, i), (h.output_id, i)) for i in range(len(codom(g))))
    return h if unsubstituted else h.substitute([fv, gv])


def otimes(f: WiringDiagram | Ports, g: WiringDiagram | Ports,
           unsubstituted: bool = False) -> WiringDiagram | Ports:
    """
    The parallel composition of two diagrams, or the concatenation of two
    lists of ports, called with :code:`@`.

    Parameters:
        f : The diagram on top, with ports listed first.
        g : The diagram below, with ports listed last.
        unsubstituted : Whether to keep ``f`` and ``g`` as nested boxes
            rather than flattening them.

    Example
    -------
    >>> A, B = Ports(['x']), Ports(['y'])
    >>> assert otimes(A, B) == Ports(['x', 'y'])
    >>> assert otimes(id(A), id(B)) == id(otimes(A, B))
    """
    if isinstance(f, Ports):
        return f.tensor(g)
    h = WiringDiagram(
        otimes(dom(f), dom(g)), otimes(codom(f), codom(g)))
    m, n = len(dom(f)), len(codom(f))
    fv, gv = h.add_box(f), h.add_box(g)
    h.add_wires(((h.input_id, i), (fv, i)) for i in range(len(dom(f))))
    h.add_wires(((h.input_id, i + m), (gv, i)) for i in range(len(dom(g))))
    h.add_wires(((fv, i), (h.output_id, i)) for i in range(len(codom(f))))
    h.add_wires(
        ((gv, i), (h.output_id, i + n)) for i in range(len(codom(g))))
    return h if unsubstituted else h.substitute([fv, gv])


def munit(A: Ports | Theory = None) -> Ports:
    """
    The monoidal unit, i.e. the empty list of ports.

    Parameters:
        A : Some ports or a theory, the unit is of the same theory.

    Example
    -------
    >>> assert munit() == Ports()
    >>> assert munit(Ports(['x'], Theory.BIPRODUCT)).theory\\
    ...     == munit(Theory.BIPRODUCT).theory == Theory.BIPRODUCT
    """
    theory = A.theory if isinstance(A, Ports)\
        else Theory.UNTYPED if A is None else A
    return Ports.unit(theory)


def braid(A: Ports, B: Ports) -> WiringDiagram:
    """
    The symmetry from ``A @ B`` to ``B @ A``.

    Example
    -------
    >>> d = braid(Ports(['x']), Ports(['y', 'z']))
    >>> assert [(w.source.port, w.target.port) for w in d.wires()]\\
    ...     == [(0, 2), (1, 0), (2, 1)]
    """
    h = WiringDiagram(otimes(A, B), otimes(B, A))
    m, n = len(A), len(B)
    h.add_wires(((h.input_id, i), (h.output_id, i + n)) for i in range(m))
    h.add_wires(((h.input_id, i + m), (h.output_id, i)) for i in range(n))
    return h


def permute(A: Ports, sigma: list[int], inverse: bool = False
            ) -> WiringDiagram:
    """
    The unbiased version of braiding, for an arbitrary permutation.

    Parameters:
        A : The ports to permute.
        sigma : A permutation of ``range(len(A))``.
        inverse : Whether ``A`` is the codomain rather than the domain.

    Note
    ----
    In the forward direction, input ``i`` is wired to output ``sigma[i]``.
    In the inverse direction, input ``sigma[i]`` is wired to output ``i``.
    The other side of the diagram holds the permuted ports ``P`` with
    ``P[sigma[i]] == A[i]``.

    Example
    -------
    >>> A = Ports(['x', 'y', 'z'])
    >>> assert permute(A, [1, 2, 0]).cod == Ports(['z', 'x', 'y'])
    >>> assert permute(A, [1, 2, 0], inverse=True).dom\\
    ...     == Ports(['z', 'x', 'y'])
    >>> assert permute(A, [0, 1, 2]) == id(A)
    """
    sigma = list(sigma)
    if sorted(sigma) != list(range(len(A))):
        raise ValueError(messages.WRONG_PERMUTATION.format(len(A), sigma))
    inside = [None] * len(A)
    for i, j in enumerate(sigma):
        inside[j] = A[i]
    B = Ports(inside, A.theory)
    if inverse:
        f = WiringDiagram(B, A)
        f.add_wires(((f.input_id, j), (f.output_id, i))
                    for i, j in enumerate(sigma))
    else:
        f = WiringDiagram(A, B)
        f.add_wires(((f.input_id, i), (f.output_id, j))
                    for i, j in enumerate(sigma))
    return f


# Diagonals and codiagonals
###########################

def _check_arity(*arities: int) -> None:
    for n in arities:
        if n < 0:
            raise ValueError(messages.NEGATIVE_ARITY.format(n))


def implicit_mcopy(A: Ports, n: int) -> WiringDiagram:
    """ Copying as wires fanning out of each input, with no boxes. """
    _check_arity(n)
    f = WiringDiagram(A, A ** n)
    m = len(A)
    f.add_wires(((f.input_id, i), (f.output_id, i + m * j))
                for i in range(m) for j in range(n))
    return f


def implicit_mmerge(A: Ports, n: int) -> WiringDiagram:
    """ Merging as wires fanning into each output, with no boxes. """
    _check_arity(n)
    f = WiringDiagram(A ** n, A)
    m = len(A)
    f.add_wires(((f.input_id, i + m * j), (f.output_id, i))
                for i in range(m) for j in range(n))
    return f


def implicit_delete(A: Ports) -> WiringDiagram:
    """ Deleting as inputs with no wires. """
    return WiringDiagram(A, munit(A))


def implicit_create(A: Ports) -> WiringDiagram:
    """ Creating as outputs with no wires. """
    return WiringDiagram(munit(A), A)


def junctioned_mcopy(A: Ports, n: int) -> WiringDiagram:
    """ Copying with one junction node per port. """
    return junction_diagram(A, 1, n)


def junctioned_mmerge(A: Ports, n: int) -> WiringDiagram:
    """ Merging with one junction node per port. """
    return junction_diagram(A, n, 1)


def junctioned_delete(A: Ports) -> WiringDiagram:
    """ Deleting with one junction node per port. """
    return junction_diagram(A, 1, 0)


def junctioned_create(A: Ports) -> WiringDiagram:
    """ Creating with one junction node per port. """
    return junction_diagram(A, 0, 1)


IMPLICIT = dict(
    mcopy=implicit_mcopy, mmerge=implicit_mmerge,
    delete=implicit_delete, create=implicit_create)

JUNCTIONED = dict(
    mcopy=junctioned_mcopy, mmerge=junctioned_mmerge,
    delete=junctioned_delete, create=junctioned_create)

DIAGONALS: dict[Theory, dict[str, Callable]] = {
    # Implicit diagonals and codiagonals are the default when untyped.
    Theory.UNTYPED: IMPLICIT,
    Theory.SYMMETRIC_MONOIDAL: {},
    Theory.DIAGONAL: dict(mcopy=implicit_mcopy, delete=implicit_delete),
    Theory.CARTESIAN: dict(mcopy=implicit_mcopy, delete=implicit_delete),
    Theory.CODIAGONAL: dict(mmerge=implicit_mmerge, create=implicit_create),
    Theory.COCARTESIAN: dict(mmerge=implicit_mmerge, create=implicit_create),
    # The coherence laws relating diagonal to codiagonal do not hold for
    # general bidiagonals, so an explicit representation is needed.
    Theory.BIDIAGONAL: JUNCTIONED,
    Theory.BIPRODUCT: IMPLICIT,
    Theory.COMPACT_CLOSED: {},
}
"""
How each theory represents diagonals and codiagonals: a mapping from theory
to a mapping from operation name to implementation.
"""


def _diagonal(name: str, A: Ports) -> Callable:
    assert_isinstance(A, Ports)
    try:
        return DIAGONALS[A.theory][name]
    except KeyError:
        raise AxiomError(messages.UNDEFINED_OPERATION.format(
            name, repr(A.theory))) from None


def mcopy(A: Ports, n: int = None) -> WiringDiagram:
    """
    The diagonal, copying ``A`` into ``n`` copies of itself.

    Parameters:
        A : The ports to copy.
        n : The number of copies, :data:`config.DEFAULT_ARITY` by default.

    Raises
    ------
        AxiomError : If the theory of ``A`` has no diagonals.

    Example
    -------
    >>> A = Ports(['x'])
    >>> d = mcopy(A, 3)
    >>> assert d.cod == A ** 3 and d.nboxes == 0 and d.nwires == 3
    >>> d = mcopy(Ports(['x'], Theory.BIDIAGONAL), 3)
    >>> assert d.boxes() == [Junction('x', 1, 3)] and d.nwires == 4
    >>> mcopy(Ports(['x'], Theory.COCARTESIAN))
    Traceback (most recent call last):
    ...
    wiringdiagrams.utils.AxiomError: Operation mcopy is not defined for \
theory Theory.COCARTESIAN.
    """
    n = config.DEFAULT_ARITY if n is None else n
    return _diagonal("mcopy", A)(A, n)


def mmerge(A: Ports, n: int = None) -> WiringDiagram:
    """
    The codiagonal, merging ``n`` copies of ``A`` into one.

    Parameters:
        A : The ports to merge.
        n : The number of copies, :data:`config.DEFAULT_ARITY` by default.

    Raises
    ------
        AxiomError : If the theory of ``A`` has no codiagonals.
    """
    n = config.DEFAULT_ARITY if n is None else n
    return _diagonal("mmerge", A)(A, n)


def delete(A: Ports) -> WiringDiagram:
    """ The counit of the diagonal, from ``A`` to the unit. """
    return _diagonal("delete", A)(A)


def create(A: Ports) -> WiringDiagram:
    """ The unit of the codiagonal, from the unit to ``A``. """
    return _diagonal("create", A)(A)


# Compact closed category
#########################

def dunit(A: Ports) -> WiringDiagram:
    """
    The unit of the self-dual compact structure, a cup for each port.

    Example
    -------
    >>> d = dunit(Ports(['x', 'y']))
    >>> assert d.boxes() == [Junction('x', 0, 2), Junction('y', 0, 2)]
    >>> assert d.cod == Ports(['x', 'y', 'x', 'y'])
    """
    return junction_diagram(A, 0, 2)


def dcounit(A: Ports) -> WiringDiagram:
    """ The counit of the self-dual compact structure, a cap per port. """
    return junction_diagram(A, 2, 0)


# Operadic interface
####################

def ocompose(f: WiringDiagram, *args) -> WiringDiagram:
    """
    Operadic composition of wiring diagrams, a wrapper around substitution.

    This function has two different signatures, corresponding to the two
    standard definitions of an operad (Yau, 2018, *Operads of Wiring
    Diagrams*, Definitions 2.3 and 2.10):

    * ``ocompose(f, gs)`` substitutes the ``i``-th box of ``f`` by ``gs[i]``
      for every ``i``,
    * ``ocompose(f, i, g)`` substitutes the ``i``-th box of ``f`` by ``g``.

    Raises
    ------
        ValueError : If ``len(gs)`` is not the number of boxes of ``f``.
        IndexError : If ``i`` is not the index of a box of ``f``.

    Example
    -------
    >>> A = Ports(['x'])
    >>> f = compose(singleton_diagram(Box('f', A, A)),
    ...             singleton_diagram(Box('g', A, A)))
    >>> h = ocompose(f, 1, compose(id(A), id(A)))
    >>> assert h.boxes() == [Box('f', A, A)]
    >>> ocompose(f, [id(A)])
    Traceback (most recent call last):
    ...
    ValueError: Expected 2 diagrams to substitute, got 1 instead.
    """
    if len(args) == 1:
        gs, = args
        gs = list(gs)
        if len(gs) != f.nboxes:
            raise ValueError(messages.OCOMPOSE_LENGTHS.format(
                f.nboxes, len(gs)))
        return f.substitute(f.box_ids(), gs)
    if len(args) == 2:
        i, g = args
        if not 0 <= i < f.nboxes:
            raise IndexError(messages.OCOMPOSE_INDEX.format(f.nboxes, i))
        return f.substitute(f.box_ids()[i], g)
    raise TypeError(messages.OCOMPOSE_ARGS.format(1 + len(args)))


# Junctions
###########

def junction_diagram(A: Ports, nin: int, nout: int) -> WiringDiagram:
    """
    The diagram from ``A ** nin`` to ``A ** nout`` with a junction node for
    each port of ``A``.

    Parameters:
        A : The ports.
        nin : The number of inputs of each junction.
        nout : The number of outputs of each junction.

    Example
    -------
    >>> d = junction_diagram(Ports(['x', 'y']), 2, 1)
    >>> assert d.boxes() == [Junction('x', 2, 1), Junction('y', 2, 1)]
    >>> assert [(w.source.port, w.target.box) for w in d.out_wires(0)]\\
    ...     == [(0, 2), (1, 3), (2, 2), (3, 3)]
    """
    _check_arity(nin, nout)
    f = WiringDiagram(A ** nin, A ** nout)
    m = len(A)
    for i, value in enumerate(A):
        v = f.add_box(Junction(value, nin, nout))
        f.add_wires(((f.input_id, i + m * j), (v, j)) for j in range(nin))
        f.add_wires(((v, j), (f.output_id, i + m * j)) for j in range(nout))
    return f


def add_junctions(d: WiringDiagram) -> WiringDiagram:
    """
    Add junction nodes to a wiring diagram, leaving it untouched.

    Transforms from the implicit to the explicit representation of diagonals
    and codiagonals. This operation is inverse to :func:`rem_junctions`.

    Example
    -------
    >>> d = add_junctions(mcopy(Ports(['x'])))
    >>> assert d.boxes() == [Junction('x', 1, 2)]
    >>> assert rem_junctions(d) == mcopy(Ports(['x']))
    """
    return add_junctions_inplace(d.copy())


def add_junctions_inplace(d: WiringDiagram) -> WiringDiagram:
    """
    Add junction nodes to a wiring diagram in place, and return it.

    Every port, of the boundary or of a box, that does not have exactly one
    wire gets a junction node collecting its wires.
    """
    box_ids = d.box_ids()
    _add_output_junctions(d, d.input_id)
    _add_input_junctions(d, d.output_id)
    for v in box_ids:
        _add_input_junctions(d, v)
        _add_output_junctions(d, v)
    return d


def _add_input_junctions(d: WiringDiagram, v: int) -> None:
    for port, port_value in enumerate(d.node_input_ports(v)):
        wires = d.in_wires(v, port)
        nwires = len(wires)
        if nwires != 1:
            d.rem_wires(wires)
            jv = d.add_box(Junction(port_value, nwires, 1))
            logger.debug(
                "Adding junction %d with %d inputs before input %d of %d.",
                jv, nwires, port, v)
            d.add_wire(Port(jv, PortKind.OUTPUT, 0),
                       Port(v, PortKind.INPUT, port))
            d.add_wires((wire.source, Port(jv, PortKind.INPUT, i))
                        for i, wire in enumerate(wires))


def _add_output_junctions(d: WiringDiagram, v: int) -> None:
    for port, port_value in enumerate(d.node_output_ports(v)):
        wires = d.out_wires(v, port)
        nwires = len(wires)
        if nwires != 1:
            d.rem_wires(wires)
            jv = d.add_box(Junction(port_value, 1, nwires))
            logger.debug(
                "Adding junction %d with %d outputs after output %d of %d.",
                jv, nwires, port, v)
            d.add_wire(Port(v, PortKind.OUTPUT, port),
                       Port(jv, PortKind.INPUT, 0))
            d.add_wires((Port(jv, PortKind.OUTPUT, i), wire.target)
                        for i, wire in enumerate(wires))


def complete_layer(inputs: tuple, outputs: tuple,
                   theory: Theory = Theory.UNTYPED) -> WiringDiagram:
    """
    The diagram with no boxes and a wire from each input to each output.

    Example
    -------
    >>> d = complete_layer(('x', 'x'), ('x', 'x', 'x'))
    >>> assert d.nboxes == 0 and d.nwires == 6
    """
    f = WiringDiagram(inputs, outputs, theory=theory)
    f.add_wires(((f.input_id, i), (f.output_id, j))
                for i in range(len(inputs)) for j in range(len(outputs)))
    return f


def rem_junctions(d: WiringDiagram) -> WiringDiagram:
    """
    Remove junction nodes from a wiring diagram.

    Transforms from the explicit to the implicit representation of diagonals
    and codiagonals, each junction being replaced by a complete layer of wires
    from each of its inputs to each of its outputs. This operation is inverse
    to :func:`add_junctions`.
    """
    junction_ids = [v for v in d.box_ids() if isinstance(d.box(v), Junction)]
    layers = [complete_layer(
        d.box(v).input_ports, d.box(v).output_ports, d.theory)
        for v in junction_ids]
    return d.substitute(junction_ids, layers)


def merge_junctions(d: WiringDiagram) -> WiringDiagram:
    """
    Merge adjacent junction nodes into single junctions.

    Raises
    ------
        AxiomError : If adjacent junctions hold distinct values.

    Example
    -------
    >>> A = Ports(['x'], Theory.BIDIAGONAL)
    >>> d = merge_junctions(compose(mcopy(A), otimes(id(A), mcopy(A))))
    >>> assert d.boxes() == [Junction('x', 1, 3)]
    >>> assert merge_junctions(d) == d
    """
    junction_ids = [v for v in d.box_ids() if isinstance(d.box(v), Junction)]
    junction_graph = d.graph().subgraph(junction_ids)
    components = sorted(
        sorted(component)
        for component in weakly_connected_components(junction_graph)
        if len(component) > 1)
    values = []
    for component in components:
        component_values = unique(d.box(v).value for v in component)
        if len(component_values) != 1:
            raise AxiomError(messages.HETEROGENEOUS_JUNCTIONS.format(
                component, component_values))
        values.append(component_values[0])
    logger.debug("Merging junctions %s.", components)
    return d.encapsulate(
        components, discard_boxes=True, values=values,
        make_box=lambda value, inputs, outputs: Junction(
            value, len(inputs), len(outputs)))
