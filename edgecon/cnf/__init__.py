from edgecon.cnf.cnf_types import CnfDocument, CNFEncoding, canonicalize_clause, canonicalize_cnf

__all__ = ["CnfDocument", "CNFEncoding", "canonicalize_clause", "canonicalize_cnf"]
