import pytest
from edgecon.backends import PySatBackend
from edgecon.core.errors import DecodingError, SolverError
from edgecon.graph import EdgeConGraph, path_graph
from edgecon.reduction import build_reduction, decode_model
from edgecon.reduction.variables import translator_var_name
from edgecon.solution import SatResult, SatStatus

def sat(model):
    return SatResult(status=SatStatus.SAT, model=model)

def test_decode_places_translators_and_recomputes():
    g = path_graph([0, 1, 0])
    model = {translator_var_name(0, 1, 1): True, translator_var_name(1, 2, 0): True,
             translator_var_name(0, 1, 0): False}
    assignment = decode_model(PySatBackend(), sat(model), g)

    assert assignment.by_index == {0: (1, 2), 1: (0, 1)}
    assert assignment.by_edge == {(1, 2): 0, (0, 1): 1}
    assert assignment.edges == [(1, 2), (0, 1)]
    assert g.translator_indices == {(1, 2): 0, (0, 1): 1}
    assert g.hierarchy.level == {0: 0, 1: 1, 2: 2}
    assert g.hierarchy.parent == {0: None, 1: 0, 2: 1}

def test_decode_empty_model():
    g = path_graph([0, 1, 0])
    assignment = decode_model(PySatBackend(), sat({}), g)
    assert len(assignment) == 0
    assert g.hierarchy.unreachable == [1, 2]

def test_edge_with_two_indices_is_rejected():
    g = path_graph([0, 1, 0])
    model = {translator_var_name(0, 1, 0): True, translator_var_name(0, 1, 1): True}
    with pytest.raises(DecodingError):
        decode_model(PySatBackend(), sat(model), g)
    assert g.translators == []
    assert g.hierarchy is None

def test_index_on_two_edges_is_rejected():
    g = path_graph([0, 1, 0])
    model = {translator_var_name(0, 1, 0): True, translator_var_name(1, 2, 0): True}
    with pytest.raises(DecodingError):
        decode_model(PySatBackend(), sat(model), g)
    assert g.translators == []

def test_unsat_result_has_no_model():
    g = path_graph([0, 1])
    with pytest.raises(SolverError):
        decode_model(PySatBackend(), SatResult(status=SatStatus.UNSAT), g)

def test_round_trip_from_solver():
    g = EdgeConGraph.from_types(2, [(0, 1)], [0, 1])
    backend = PySatBackend()
    result = backend.solve(build_reduction(g, 0, backend))
    assignment = decode_model(backend, result, g)

    assert assignment.by_index == {0: (0, 1)}
    assert g.translators == [(0, 1)]
    assert g.hierarchy.level == {0: 0, 1: 1}

def test_decode_replaces_previous_translators():
    g = path_graph([0, 1, 0])
    decode_model(PySatBackend(), sat({translator_var_name(0, 1, 0): True}), g)
    assignment = decode_model(PySatBackend(), sat({translator_var_name(1, 2, 0): True}), g)

    assert assignment.by_index == {0: (1, 2)}
    assert g.translator_indices == {(1, 2): 0}
    assert g.hierarchy.unreachable == [2]
