import matplotlib
import matplotlib.pyplot as plt
from pytest import approx

from wiringdiagrams.algebraic import compose, mcopy, otimes, id
from wiringdiagrams.core import Box, singleton_diagram
from wiringdiagrams.drawing import *
from wiringdiagrams.ports import Ports, Theory

matplotlib.use("Agg")

X = Ports(['x'], Theory.BIDIAGONAL)
f = singleton_diagram(Box('f', X, X @ X), theory=Theory.BIDIAGONAL)


def test_to_graph():
    graph = to_graph(compose(f, otimes(mcopy(X), id(X))))
    assert set(graph.nodes) == {
        Node("input", 0), Node("box", 2), Node("junction", 3),
        Node("output", 0), Node("output", 1), Node("output", 2)}
    assert graph.number_of_edges() == 5


def test_spring_layout_pins_boundary():
    d = compose(f, otimes(mcopy(X), id(X)))
    _, pos = spring_layout(d, seed=42)
    assert tuple(pos[Node("input", 0)]) == approx((0, 3))
    assert [tuple(pos[Node("output", i)]) for i in range(3)]\
        == [approx((0, 0)), approx((1, 0)), approx((2, 0))]


def test_spring_layout_seed():
    d = compose(f, otimes(mcopy(X), id(X)))
    _, pos0 = spring_layout(d, seed=42)
    _, pos1 = spring_layout(d, seed=42)
    assert all(tuple(pos0[node]) == approx(tuple(pos1[node]))
               for node in pos0)


def test_draw(tmp_path):
    path = tmp_path / "diagram.png"
    compose(f, otimes(mcopy(X), id(X))).draw(path=str(path), seed=42)
    assert path.exists()


def test_draw_empty(tmp_path):
    path = tmp_path / "empty.png"
    draw(id(Ports()), path=str(path), fontsize=8)
    assert path.exists()


def test_draw_without_showing_closes_figure():
    plt.close("all")
    draw(compose(f, otimes(mcopy(X), id(X))), seed=42, show=False)
    assert not plt.get_fignums()
