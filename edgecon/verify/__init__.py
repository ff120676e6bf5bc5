from edgecon.verify.witness import WitnessReport, check_witness, check_translator_assignment

__all__ = ["WitnessReport", "check_witness", "check_translator_assignment"]
