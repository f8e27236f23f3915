from aprioriminer.Exceptions import InvalidArgumentError


def _check_ratio(name, value):
    if value < 0.0 or value > 1.0:
        raise InvalidArgumentError("%s must be between 0.0 and 1.0, got %r" % (name, value))
    return value


# ############################# Class Rule #############################
class Rule:
    """IF antecedent THEN consequent.

    :param
    @antecedent - items on the IF side
    @consequent - items on the THEN side, disjoint from antecedent
    @confidence - share of the baskets holding the antecedent that also hold the consequent
    @support - support ratio of the itemset the rule was split from
    @lift - support / consequent support, may be attached after construction
    """
    def __init__(self, antecedent, consequent, confidence, support, lift=0.0):
        self._antecedent = frozenset(antecedent) if antecedent is not None else frozenset()
        self._consequent = frozenset(consequent) if consequent is not None else frozenset()
        self._confidence = _check_ratio("Confidence", confidence)
        self._support = _check_ratio("Support", support)
        self.lift = lift

    @property
    def antecedent(self):
        return self._antecedent

    @property
    def consequent(self):
        return self._consequent

    @property
    def confidence(self):
        return self._confidence

    @property
    def support(self):
        return self._support

    @property
    def antecedent_size(self):
        return len(self._antecedent)

    @property
    def consequent_size(self):
        return len(self._consequent)

    @property
    def total_size(self):
        return len(self._antecedent) + len(self._consequent)

    def antecedent_names(self):
        return sorted(item.name for item in self._antecedent)

    def consequent_names(self):
        return sorted(item.name for item in self._consequent)

    def rule_as_string(self):
        return "IF {%s} THEN {%s}" % (", ".join(self.antecedent_names()), ", ".join(self.consequent_names()))

    def detailed_rule_string(self):
        return "%s (Confidence: %.2f%%, Support: %.2f%%, Lift: %.2f)" % (self.rule_as_string(),
                                                                       self._confidence * 100,
                                                                       self._support * 100,
                                                                       self.lift)

    def is_valid(self):
        return bool(self._antecedent) and bool(self._consequent) and \
            self._antecedent.isdisjoint(self._consequent) and \
            0.0 <= self._confidence <= 1.0 and \
            0.0 <= self._support <= 1.0

    def copy(self):
        return Rule(self._antecedent, self._consequent, self._confidence, self._support, self.lift)

    def contains_item(self, item):
        return item in self._antecedent or item in self._consequent

    def has_in_antecedent(self, item):
        return item in self._antecedent

    def has_in_consequent(self, item):
        return item in self._consequent

    # the thresholds are read against support / consequent support, see AprioriMiner.calculate_lift
    def lift_interpretation(self):
        if self.lift > 1.0:
            return "Positive (mutually reinforcing)"
        elif self.lift < 1.0:
            return "Negative (mutually inhibiting)"
        else:
            return "Neutral (independent)"

    def confidence_level(self):
        if self._confidence >= 0.8:
            return "Very Strong"
        elif self._confidence >= 0.6:
            return "Strong"
        elif self._confidence >= 0.4:
            return "Moderate"
        elif self._confidence >= 0.2:
            return "Weak"
        else:
            return "Very Weak"

    def __eq__(self, other):
        if not isinstance(other, Rule):
            return NotImplemented
        return self._antecedent == other._antecedent and self._consequent == other._consequent

    def __hash__(self):
        return hash((self._antecedent, self._consequent))

    def __repr__(self):
        return self.detailed_rule_string()


# ############################# Class Associations #############################
class Associations:
    """Everything one run produced."""

    def __init__(self, levels=None, rules=None, statistics=""):
        # one list of frequent itemsets per itemset size, starting at 1
        self.levels = [list(level) for level in levels] if levels else []

        # association rules, confidence descending
        self.rules = list(rules) if rules else []

        self.statistics = statistics

    @property
    def itemsets(self):
        return [itemset for level in self.levels for itemset in level]
