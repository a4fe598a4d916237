# -*- coding: utf-8 -*-

"""
Drawing wiring diagrams with a force-based layout.

The ports of the input and output sentinels are pinned to the top and bottom
rows while boxes and junctions float in between, see
:func:`networkx.spring_layout`.

Summary
-------

.. autosummary::
    :template: function.rst
    :nosignatures:
    :toctree:

    to_graph
    spring_layout
    draw
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from typing import Any

import matplotlib.pyplot as plt
import numpy as np
from networkx import Graph, draw_networkx, spring_layout as nx_spring_layout

from wiringdiagrams import config
from wiringdiagrams.core import Junction, WiringDiagram

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Node:
    """
    A node in the graph of a drawing.

    Parameters:
        kind : Either ``"input"``, ``"output"``, ``"box"`` or ``"junction"``.
        i : The index of the port for sentinels, the box id otherwise.
    """
    kind: str
    i: int


def _node(diagram: WiringDiagram, box: int, port: int) -> Node:
    if box == diagram.input_id:
        return Node("input", port)
    if box == diagram.output_id:
        return Node("output", port)
    kind = "junction" if isinstance(diagram.box(box), Junction) else "box"
    return Node(kind, box)


def to_graph(diagram: WiringDiagram) -> Graph:
    """
    The undirected graph with a node for each box and each boundary port, and
    an edge for each wire.

    Example
    -------
    >>> from wiringdiagrams.algebraic import mcopy
    >>> from wiringdiagrams.ports import Ports, Theory
    >>> graph = to_graph(mcopy(Ports(['x'], Theory.BIDIAGONAL)))
    >>> assert Node("junction", 2) in graph and graph.number_of_edges() == 3
    """
    graph = Graph()
    graph.add_nodes_from(Node("input", i) for i in range(len(diagram.dom)))
    graph.add_nodes_from(
        _node(diagram, v, None) for v in diagram.box_ids())
    graph.add_nodes_from(Node("output", i) for i in range(len(diagram.cod)))
    for wire in diagram.wires():
        graph.add_edge(
            _node(diagram, wire.source.box, wire.source.port),
            _node(diagram, wire.target.box, wire.target.port))
    return graph


def spring_layout(diagram: WiringDiagram, seed: int = None, k: float = None
                  ) -> tuple[Graph, dict[Node, Any]]:
    """
    Compute a layout using a force-directed algorithm, with the inputs
    pinned on top and the outputs at the bottom.

    Parameters:
        diagram : The diagram to lay out.
        seed : The random seed, for reproducible drawings.
        k : The optimal distance between nodes.
    """
    if seed is not None:
        random.seed(seed)
    graph, pos = to_graph(diagram), {}
    height = diagram.nboxes + 1
    width = max(len(diagram.dom), len(diagram.cod), 1)
    for kind, ports, y in [("input", diagram.dom, height),
                           ("output", diagram.cod, 0)]:
        for i, x in enumerate(np.linspace(0, width - 1, len(ports))):
            pos[Node(kind, i)] = (x, y)
    for node in graph.nodes:
        if node.kind in ("box", "junction"):
            pos[node] = (random.uniform(0, width - 1),
                         random.uniform(0, height))
    fixed = [node for node in graph.nodes
             if node.kind in ("input", "output")] or None
    pos = nx_spring_layout(graph, pos=pos, fixed=fixed, k=k, seed=seed)
    return graph, pos


def draw(diagram: WiringDiagram, seed: int = None, k: float = None,
         path: str = None, show: bool = True, **params) -> None:
    """
    Draw a wiring diagram with matplotlib.

    Boxes are drawn as labeled nodes, junctions as small black dots and the
    ports of the boundary as labeled endpoints.

    Parameters:
        diagram : The diagram to draw.
        seed : The random seed, for reproducible drawings.
        k : The optimal distance between nodes,
            :code:`config.DRAWING_DEFAULT["k"]` by default.
        path : Where to save the drawing, if given.
        show : Whether to show the drawing when it is not saved, the figure
            is closed otherwise.
        params : Overrides of :data:`config.DRAWING_DEFAULT`.
    """
    params = dict(config.DRAWING_DEFAULT, **params)
    k = params["k"] if k is None else k
    graph, pos = spring_layout(diagram, seed=seed, k=k)
    ports = {"input": diagram.dom, "output": diagram.cod}

    def label(node):
        if node.kind == "box":
            return str(diagram.box(node.i).value)
        if node.kind == "junction":
            return ""
        return str(ports[node.kind][node.i])

    def size(node):
        return params["box_size"] if node.kind == "box"\
            else params["junction_size"] if node.kind == "junction"\
            else params["sentinel_size"]

    nodelist = list(graph.nodes)
    draw_networkx(
        graph, pos=pos, labels={node: label(node) for node in nodelist},
        nodelist=nodelist, node_size=[size(node) for node in nodelist],
        node_color=[params["junction_color"] if node.kind == "junction"
                    else params["facecolor"] for node in nodelist],
        edgecolors=params["edgecolor"], font_size=params["fontsize"])
    if path is not None:
        logger.debug("Saving drawing of %s to %s.", diagram, path)
        plt.savefig(path)
        plt.close()
    elif show:
        plt.show()
    else:
        plt.close()
