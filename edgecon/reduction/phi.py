"""
Constraint builders of the EdgeCon reduction.

Each builder encodes one structural invariant over the variables of
`edgecon.reduction.variables`:

    phi_2   each translator index labels at most one edge, and each edge
            carries at most one index
    phi_3   every non-root component has exactly one parent
    phi_4   every component has exactly one level
    phi_5   some component sits at level k or deeper
    phi_6   an edge between two components carries a translator
    phi_7   a child at level h has its parent at level h - 1
    phi_8   parent relations satisfy phi_6 and phi_7
"""
import logging
from itertools import combinations
from typing import Any, List

from edgecon.reduction.context import ReductionContext
from edgecon.reduction.variables import translator_var, parent_var, level_var

logger = logging.getLogger(__name__)

def _at_most_one(ctx: ReductionContext, variables: List[Any]) -> List[Any]:
    """Pairwise clauses (not a \\/ not b) for every two of `variables`."""
    b = ctx.backend
    return [b.disjoin([b.negate(x), b.negate(y)]) for x, y in combinations(variables, 2)]

# --- phi_2 ---

def build_phi_2_1(ctx: ReductionContext) -> Any:
    """Each translator can only be associated with at most one edge."""
    b = ctx.backend
    clauses = []
    for i in range(ctx.num_translators):
        for (e1, e2), (f1, f2) in combinations(ctx.edges, 2):
            clauses.append(b.disjoin([
                b.negate(translator_var(b, e1, e2, i)),
                b.negate(translator_var(b, f1, f2, i)),
            ]))
    logger.debug(f"phi_2_1: {len(clauses)} clauses")
    return b.conjoin(clauses)

def build_phi_2_2(ctx: ReductionContext) -> Any:
    """Each edge can only receive at most one translator."""
    b = ctx.backend
    clauses = []
    for u, v in ctx.edges:
        clauses.extend(_at_most_one(ctx, [translator_var(b, u, v, i) for i in range(ctx.num_translators)]))
    logger.debug(f"phi_2_2: {len(clauses)} clauses")
    return b.conjoin(clauses)

def build_phi_2(ctx: ReductionContext) -> Any:
    return ctx.backend.conjoin([build_phi_2_1(ctx), build_phi_2_2(ctx)])

# --- phi_3 ---

def build_phi_3_1(ctx: ReductionContext) -> Any:
    """Each component except the root has at least one parent."""
    b = ctx.backend
    clauses = []
    for j in range(1, ctx.num_components):
        clauses.append(b.disjoin([
            parent_var(b, j, j1) for j1 in range(ctx.num_components) if j1 != j
        ]))
    return b.conjoin(clauses)

def build_phi_3_2(ctx: ReductionContext) -> Any:
    """Each component except the root has at most one parent."""
    b = ctx.backend
    clauses = []
    for j in range(1, ctx.num_components):
        candidates = [parent_var(b, j, j1) for j1 in range(ctx.num_components) if j1 != j]
        clauses.extend(_at_most_one(ctx, candidates))
    logger.debug(f"phi_3_2: {len(clauses)} clauses")
    return b.conjoin(clauses)

def build_phi_3(ctx: ReductionContext) -> Any:
    return ctx.backend.conjoin([build_phi_3_1(ctx), build_phi_3_2(ctx)])

# --- phi_4 ---

def build_phi_4_1(ctx: ReductionContext) -> Any:
    """Each component has at least one level."""
    b = ctx.backend
    return b.conjoin([
        b.disjoin([level_var(b, c, h) for h in range(ctx.num_translators)])
        for c in range(ctx.num_components)
    ])

def build_phi_4_2(ctx: ReductionContext) -> Any:
    """Each component has at most one level."""
    b = ctx.backend
    clauses = []
    for c in range(ctx.num_components):
        clauses.extend(_at_most_one(ctx, [level_var(b, c, h) for h in range(ctx.num_translators)]))
    logger.debug(f"phi_4_2: {len(clauses)} clauses")
    return b.conjoin(clauses)

def build_phi_4(ctx: ReductionContext) -> Any:
    return ctx.backend.conjoin([build_phi_4_1(ctx), build_phi_4_2(ctx)])

# --- phi_5 ---

def build_phi_5(ctx: ReductionContext) -> Any:
    """The tree has a depth strictly greater than k."""
    b = ctx.backend
    if ctx.k >= ctx.num_translators:
        logger.debug(f"phi_5: no level in {ctx.k}..{ctx.num_translators - 1}, formula is false")
        return b.literal_false()
    return b.disjoin([
        level_var(b, c, h)
        for c in range(ctx.num_components)
        for h in range(ctx.k, ctx.num_translators)
    ])

# --- phi_6, phi_7, phi_8 ---

def build_phi_6(ctx: ReductionContext, j1: int, j2: int) -> Any:
    """Some edge {u, v} with u in j2 and v in j1 carries a translator."""
    b = ctx.backend
    g = ctx.graph
    terms = []
    for a, c in ctx.edges:
        # Edges are undirected, so the u-in-j2 endpoint may be either end
        for u, v in ((a, c), (c, a)):
            if g.is_vertex_in_component(u, j2) and g.is_vertex_in_component(v, j1):
                terms.extend(translator_var(b, u, v, i) for i in range(ctx.num_translators))
    if not terms:
        return b.literal_false()
    return b.disjoin(terms)

def build_phi_7(ctx: ReductionContext, j1: int, j2: int) -> Any:
    """If j1 is at level h then j2 is at level h - 1."""
    b = ctx.backend
    return b.conjoin([
        b.disjoin([b.negate(level_var(b, j1, h)), level_var(b, j2, h - 1)])
        for h in range(1, ctx.num_translators)
    ])

def build_phi_8(ctx: ReductionContext) -> Any:
    """If j2 is the parent of j1, phi_6 and phi_7 hold for (j1, j2)."""
    b = ctx.backend
    clauses = []
    for j1 in range(ctx.num_components):
        for j2 in range(ctx.num_components):
            if j1 == j2:
                continue
            clauses.append(b.disjoin([
                b.negate(parent_var(b, j1, j2)),
                b.conjoin([build_phi_6(ctx, j1, j2), build_phi_7(ctx, j1, j2)]),
            ]))
    logger.debug(f"phi_8: {len(clauses)} parent implications")
    return b.conjoin(clauses)
