import networkx as nx
import pytest
from hypothesis import given, settings, strategies as st
from edgecon.backends import PySatBackend, Z3Backend
from edgecon.core.config import EdgeConConfig
from edgecon.core.errors import NameEncodingError, PreconditionError, ResourceExhaustedError
from edgecon.graph import EdgeConGraph, path_graph
from edgecon.reduction import build_reduction
from edgecon.reduction.variables import translator_var_name, parent_var_name, level_var_name, parent_var
from edgecon.tests.strategies import edgecon_graphs

def two_vertex_graph():
    return EdgeConGraph.from_types(2, [(0, 1)], [0, 1])

@pytest.mark.parametrize("backend_cls", [PySatBackend, Z3Backend])
def test_two_vertex_depth_zero(backend_cls):
    backend = backend_cls()
    result = backend.solve(build_reduction(two_vertex_graph(), 0, backend))
    assert result.is_sat
    assert result.model[parent_var_name(1, 0)] is True
    assert result.model[level_var_name(1, 0)] is True
    assert result.model[translator_var_name(0, 1, 0)] is True

@pytest.mark.parametrize("backend_cls", [PySatBackend, Z3Backend])
def test_two_vertex_depth_one_is_unsat(backend_cls):
    backend = backend_cls()
    result = backend.solve(build_reduction(two_vertex_graph(), 1, backend))
    assert not result.is_sat
    assert result.model is None

def test_path_depths():
    # Four single-vertex components in a row: levels 0..2 are available
    for k, expected in [(0, True), (1, True), (2, True), (3, False)]:
        backend = PySatBackend()
        result = backend.solve(build_reduction(path_graph([0, 1, 0, 1]), k, backend))
        assert result.is_sat == expected, f"k={k}"

def test_single_component_is_unsat():
    g = EdgeConGraph.from_types(3, [(0, 1), (1, 2)], [0, 0, 0])
    backend = PySatBackend()
    assert not backend.solve(build_reduction(g, 0, backend)).is_sat

def test_reduction_does_not_touch_graph():
    g = path_graph([0, 1, 0])
    before = (g.membership, g.edges(), g.translators)
    build_reduction(g, 1, PySatBackend())
    assert (g.membership, g.edges(), g.translators) == before
    assert g.hierarchy is None

@pytest.mark.parametrize("k", [-1, True, 1.5, "2"])
def test_bad_cost_bound(k):
    backend = PySatBackend()
    with pytest.raises(PreconditionError):
        build_reduction(two_vertex_graph(), k, backend)
    assert backend.num_declared == 0

def test_empty_graph_has_no_components():
    g = EdgeConGraph.from_types(0, [], [])
    with pytest.raises(PreconditionError):
        build_reduction(g, 0, PySatBackend())

def test_non_contiguous_components():
    g = EdgeConGraph(nx.path_graph(3), [0, 2, 2])
    with pytest.raises(PreconditionError):
        build_reduction(g, 0, PySatBackend())

def test_non_contiguous_vertices():
    graph = nx.Graph()
    graph.add_edge(0, 5)
    g = EdgeConGraph(graph, [0, 1])
    with pytest.raises(PreconditionError):
        build_reduction(g, 0, PySatBackend())

def test_names_too_long_rejected_before_building():
    backend = PySatBackend(EdgeConConfig(max_name_length=12))
    with pytest.raises(NameEncodingError):
        build_reduction(path_graph([0, 1] * 6), 0, backend)
    assert backend.num_declared == 0

def model_value(model, name):
    return model.get(name, False)

def check_invariants(g, k, model):
    """Asserts the structural invariants of a satisfying model."""
    c_h = g.num_components()
    n_tr = c_h - 1
    edges = g.edges()
    x = lambda u, v, i: model_value(model, translator_var_name(u, v, i))

    for u, v in edges:
        assert sum(x(u, v, i) for i in range(n_tr)) <= 1
    for i in range(n_tr):
        assert sum(x(u, v, i) for u, v in edges) <= 1

    for j in range(1, c_h):
        assert sum(model_value(model, parent_var_name(j, j1)) for j1 in range(c_h) if j1 != j) == 1

    level = {}
    for c in range(c_h):
        chosen = [h for h in range(n_tr) if model_value(model, level_var_name(c, h))]
        assert len(chosen) == 1
        level[c] = chosen[0]

    assert any(h >= k for h in level.values())

    for j1 in range(c_h):
        for j2 in range(c_h):
            if j1 == j2 or not model_value(model, parent_var_name(j1, j2)):
                continue
            crossing = [
                (u, v) for u, v in edges
                if {g.component_of(u), g.component_of(v)} == {j1, j2}
            ]
            assert any(x(u, v, i) for u, v in crossing for i in range(n_tr))
            if level[j1] >= 1:
                assert level[j2] == level[j1] - 1

@settings(max_examples=40, deadline=None)
@given(g=edgecon_graphs(), k=st.integers(min_value=0, max_value=3))
def test_models_satisfy_invariants(g, k):
    backend = PySatBackend()
    result = backend.solve(build_reduction(g, k, backend))
    if k >= g.num_components() - 1:
        assert not result.is_sat
    if result.is_sat:
        check_invariants(g, k, result.model)

@settings(max_examples=20, deadline=None)
@given(g=edgecon_graphs(max_vertices=4), k=st.integers(min_value=0, max_value=2))
def test_backends_agree(g, k):
    pysat_backend, z3_backend = PySatBackend(), Z3Backend()
    pysat_result = pysat_backend.solve(build_reduction(g, k, pysat_backend))
    z3_result = z3_backend.solve(build_reduction(g, k, z3_backend))
    assert pysat_result.status == z3_result.status
    if z3_result.is_sat:
        check_invariants(g, k, z3_result.model)

def test_memory_error_becomes_resource_exhausted(monkeypatch):
    def exhausted(ctx):
        raise MemoryError()
    monkeypatch.setattr("edgecon.reduction.reduction.build_phi_8", exhausted)
    with pytest.raises(ResourceExhaustedError) as exc_info:
        build_reduction(two_vertex_graph(), 0, PySatBackend())
    assert isinstance(exc_info.value.__cause__, MemoryError)

@pytest.mark.parametrize("backend_cls", [PySatBackend, Z3Backend])
def test_parent_follows_either_edge_orientation(backend_cls):
    # Component 0 may hang below component 1 even though the edge is stored as (0, 1)
    backend = backend_cls()
    formula = build_reduction(two_vertex_graph(), 0, backend)
    forced = backend.conjoin([formula, parent_var(backend, 0, 1)])
    result = backend.solve(forced)
    assert result.is_sat
    assert result.model[translator_var_name(0, 1, 0)] is True
