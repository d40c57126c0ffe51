import re


class STLAtomicPropositionsToBoolean:
    def __init__(self, atomic_propositions, prefix="p"):
        """
        Map real-valued STL atomic propositions to Boolean MITL variables.

        Each proposition receives the name prefix + (index + 1), where index is its position in the
        extraction order. A proposition that appears several times keeps the name of its last
        occurrence. The mapping is ordered by proposition text, not by appearance in the formula.

        Args:
            atomic_propositions (list): Atomic propositions as returned by STLParser.
                Example: ["y < 2", "z > 1", "x >= 0.3"]
            prefix (str): Prefix of the Boolean variable names.
        """
        self.atomic_propositions = list(atomic_propositions)
        self.prefix = prefix

        # Map from proposition text to Boolean variable name
        self.proposition_map = self._build_map()

    def _build_map(self):
        """
        Builds the proposition map.

        Returns:
            dict: Proposition text -> Boolean variable name, sorted by proposition text.
        """
        proposition_map = {}
        for i, proposition in enumerate(self.atomic_propositions):
            proposition_map[proposition] = f"{self.prefix}{i + 1}"

        return dict(sorted(proposition_map.items()))

    def get_map(self):
        """
        Returns the proposition map.

        Returns:
            dict: Proposition text -> Boolean variable name.
        """
        return self.proposition_map

    def to_mitl(self, stl_formula):
        """
        Replaces every mapped proposition of the STL formula with its Boolean variable.

        Args:
            stl_formula (str): STL formula.

        Returns:
            str: MITL formula over Boolean variables.
        """
        return replace_atomic_propositions(stl_formula, self.proposition_map)


def replace_atomic_propositions(stl_formula, proposition_map):
    """
    Whole-word substitution of each proposition with its Boolean variable, in map order.

    The proposition text is escaped before being used as a pattern, so a bound such as 0.3 only
    matches a literal period.

    Args:
        stl_formula (str): STL formula.
        proposition_map (dict): Proposition text -> Boolean variable name.

    Returns:
        str: Formula with the propositions replaced.
    """
    mitl_formula = stl_formula
    for proposition, name in proposition_map.items():
        pattern = r'\b' + re.escape(proposition) + r'\b'
        mitl_formula = re.sub(pattern, lambda _: name, mitl_formula)

    return mitl_formula
