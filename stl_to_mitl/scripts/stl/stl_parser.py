import re


class STLParser:
    def __init__(self, formula: str):
        """
        Extracts the real-valued atomic propositions of an STL formula.
        An atomic proposition is assumed to be of the form:
            Variable Operator Value
        where Operator is one of <, >, <= or >= and Value is a non-negative number.

        Args:
            formula (str): STL formula to be decomposed.

        Example:
            formula = "G [0,20] ((y < 2) U (z > 1))"
        """
        self.formula = formula
        self.atomic_propositions = self._extract()

    def _extract(self, formula=None):
        """
        Extracts atomic propositions from the STL formula, in order of appearance.
        Repeated propositions are kept as they appear.

        Args:
            formula (str): STL formula to be decomposed.

        Returns:
            list: List of atomic propositions. Example: ["y < 2", "z > 1"]
        """
        if formula is None:
            formula = self.formula

        pattern = r'\w+\s*[<>]=?\s*[\d.]+'
        return [match.group(0) for match in re.finditer(pattern, formula)]

    def get_atomic_propositions(self):
        """
        Returns the extracted atomic propositions.

        Returns:
            list: List of atomic propositions.
        """
        return self.atomic_propositions
