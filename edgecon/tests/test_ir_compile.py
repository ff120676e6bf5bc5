import itertools
import pytest
from pysat.solvers import Solver
from edgecon.core.vars import VarManager
from edgecon.ir import VarRef, Const, Lit, Not, And, Or, Imp, compile_ir, evaluate, collect_vars

def check_equivalence(expr, var_names):
    """Every assignment of the base variables extends to a CNF model iff expr holds."""
    cnf, varmap = compile_ir(expr)
    for values in itertools.product([False, True], repeat=len(var_names)):
        assignment = dict(zip(var_names, values))
        expected = evaluate(expr, assignment)
        with Solver(name="glucose4", bootstrap_with=cnf) as solver:
            assumptions = [varmap[n] if val else -varmap[n] for n, val in assignment.items()]
            actual = solver.solve(assumptions=assumptions)
        assert actual == expected, f"Failed at {assignment} for {expr}"

def lit(name, neg=False):
    return Lit(var=VarRef(name=name), neg=neg)

def test_clause_and_nested():
    # (a OR b) AND (NOT a OR (b AND c))
    expr = And(terms=[
        Or(terms=[lit("a"), lit("b")]),
        Or(terms=[lit("a", neg=True), And(terms=[lit("b"), lit("c")])])
    ])
    check_equivalence(expr, ["a", "b", "c"])

def test_negated_conjunction():
    expr = Not(term=And(terms=[lit("a"), lit("b")]))
    check_equivalence(expr, ["a", "b"])

def test_implication():
    expr = Imp(a=lit("a"), b=Or(terms=[lit("b"), lit("c")]))
    check_equivalence(expr, ["a", "b", "c"])

def test_constants_inside_expression():
    expr = And(terms=[
        Or(terms=[lit("a"), Const(value=False)]),
        Or(terms=[lit("b"), Const(value=True)])
    ])
    check_equivalence(expr, ["a", "b"])

def test_false_root_is_unsat_without_empty_clause():
    cnf, _ = compile_ir(Const(value=False))
    assert cnf
    assert all(clause for clause in cnf)
    with Solver(name="glucose4", bootstrap_with=cnf) as solver:
        assert solver.solve() is False

def test_true_root_emits_nothing():
    cnf, varmap = compile_ir(Const(value=True))
    assert cnf == []
    assert varmap == {}

def test_shared_var_manager_keeps_declared_ids():
    vm = VarManager()
    x = vm.declare("x_[(0,1),0]")
    cnf, varmap = compile_ir(Or(terms=[lit("p_[1,0]"), lit("x_[(0,1),0]")]), vm)
    assert varmap["x_[(0,1),0]"] == x
    assert cnf == [[varmap["p_[1,0]"], x]]

def test_var_name_validation():
    with pytest.raises(ValueError):
        VarRef(name="")
    with pytest.raises(ValueError):
        VarRef(name="a" * 65)
    with pytest.raises(ValueError):
        VarRef(name="x y")
    assert VarRef(name="x_[(0,1),0]").name == "x_[(0,1),0]"

def test_and_or_need_two_terms():
    with pytest.raises(ValueError):
        And(terms=[lit("a")])
    with pytest.raises(ValueError):
        Or(terms=[])

def test_collect_vars_order():
    expr = And(terms=[Or(terms=[lit("b"), lit("a")]), Not(term=lit("b")), lit("c")])
    assert collect_vars(expr) == ["b", "a", "c"]

def test_evaluate_defaults_to_false():
    assert evaluate(lit("missing"), {}) is False
    assert evaluate(lit("missing", neg=True), {}) is True
