import logging
import math
from fractions import Fraction

from aprioriminer.Associations import Associations, Rule
from aprioriminer.Exceptions import InvalidArgumentError, InvalidStateError
from aprioriminer.ItemsetRec import ItemsetRec
from aprioriminer.RuleQClass import RuleQClass

logger = logging.getLogger(__name__)

DEFAULT_MIN_SUPPORT = 0.3
DEFAULT_MIN_CONFIDENCE = 0.6


class AprioriMiner:
    """Level-wise Apriori search for frequent itemsets and the association rules they imply.

    The miner is not reentrant: transactions and thresholds must not be changed while run()
    is executing, and concurrent analyses need separate instances.

    Every accessor hands out copies, so nothing a caller does to a returned list or record
    reaches the results kept here. Each run() replaces the levels and the rules wholesale.
    """

    """
    :param
    @transactions - the baskets to analyse, a non-empty sequence of Transaction
    @min_support - minimum support ratio in [0, 1] an itemset needs to be frequent
    @min_confidence - minimum confidence in [0, 1] a rule needs to be reported
    """
    def __init__(self,
                 transactions=None,
                 min_support=None,
                 min_confidence=None
                 ):
        self._transactions = None
        self._min_support = None
        self._min_confidence = None

        # frequent itemsets, one list per itemset size
        self._levels = []
        # association rules, confidence descending
        self._rules = []

        if transactions is not None:
            self.transactions = transactions
        if min_support is not None:
            self.min_support = min_support
        if min_confidence is not None:
            self.min_confidence = min_confidence

    @property
    def transactions(self):
        return list(self._transactions) if self._transactions is not None else []

    @transactions.setter
    def transactions(self, transactions):
        if transactions is None:
            raise InvalidArgumentError("Transaction list must not be None")
        transactions = list(transactions)
        if not transactions:
            raise InvalidArgumentError("Transaction list must not be empty")
        if any(transaction is None for transaction in transactions):
            raise InvalidArgumentError("Transaction list must not contain None")
        self._transactions = transactions

    @property
    def min_support(self):
        return self._min_support

    @min_support.setter
    def min_support(self, min_support):
        self._min_support = check_threshold("Minimum support", min_support)

    @property
    def min_confidence(self):
        return self._min_confidence

    @min_confidence.setter
    def min_confidence(self, min_confidence):
        self._min_confidence = check_threshold("Minimum confidence", min_confidence)

    def run(self):
        self.validate_parameters()

        self._levels = []
        self._rules = []

        logger.info("Running Apriori over %d transactions (min support %.4f, min confidence %.4f)",
                    len(self._transactions), self._min_support, self._min_confidence)

        levels = find_itemsets(self._transactions, self._min_support)
        rules = generate_rules(levels, self._transactions, self._min_confidence)

        self._levels = levels
        self._rules = rules

        logger.info("Found %d frequent itemsets in %d levels and %d rules",
                    sum(len(level) for level in levels), len(levels), len(rules))

        return self.rules

    def validate_parameters(self):
        if not self._transactions:
            raise InvalidStateError("Transactions have not been set")
        if self._min_support is None:
            raise InvalidStateError("Minimum support has not been set")
        if self._min_confidence is None:
            raise InvalidStateError("Minimum confidence has not been set")

    @property
    def rules(self):
        return [rule.copy() for rule in self._rules]

    def frequent_itemsets(self):
        return [[itemset.copy() for itemset in level] for level in self._levels]

    def frequent_itemsets_by_size(self, size):
        if size <= 0 or size > len(self._levels):
            return []
        return [itemset.copy() for itemset in self._levels[size - 1]]

    # rules built from frequent itemsets of the given size
    def rules_by_size(self, size):
        return [rule.copy() for rule in self._rules if rule.total_size == size]

    def rules_containing(self, item):
        return [rule.copy() for rule in self._rules if rule.contains_item(item)]

    def statistics(self):
        total_itemsets = sum(len(level) for level in self._levels)
        no_of_transactions = len(self._transactions) if self._transactions is not None else 0
        min_support = self._min_support if self._min_support is not None else 0.0
        min_confidence = self._min_confidence if self._min_confidence is not None else 0.0

        return ("Apriori Analysis Statistics:\n"
                "Total Transactions: %d\n"
                "Minimum Support: %.2f%%\n"
                "Minimum Confidence: %.2f%%\n"
                "Total Frequent Itemsets: %d\n"
                "Total Association Rules: %d\n"
                "Itemset Levels: %d") % (no_of_transactions,
                                          min_support * 100,
                                          min_confidence * 100,
                                          total_itemsets,
                                          len(self._rules),
                                          len(self._levels))

    def associations(self):
        return Associations(self.frequent_itemsets(), self.rules, self.statistics())


def check_threshold(name, value):
    if value is None or isinstance(value, bool):
        raise InvalidArgumentError("%s must be a number between 0.0 and 1.0, got %r" % (name, value))
    try:
        value = float(value)
    except (TypeError, ValueError):
        raise InvalidArgumentError("%s must be a number between 0.0 and 1.0, got %r" % (name, value))
    # also rejects NaN
    if not 0.0 <= value <= 1.0:
        raise InvalidArgumentError("%s must be between 0.0 and 1.0, got %r" % (name, value))
    return value


# ################## functions for finding frequent itemsets ###################
# the smallest support count that reaches min_support, always rounding up.
# min_support is taken at its shortest decimal form so 0.07 of 100 is exactly 7
def min_support_count(min_support, no_of_transactions):
    return int(math.ceil(Fraction(repr(float(min_support))) * no_of_transactions))


def find_itemsets(transactions, min_support):
    """Frequent itemsets of every size, one list per size starting at 1.

    The search stops at the first size with no frequent itemset. Each level is ordered on
    its sorted items so repeated runs give identical output.
    """
    no_of_transactions = len(transactions)
    min_count = min_support_count(min_support, no_of_transactions)

    levels = []

    current = generate_frequent_1_itemsets(transactions, min_count)
    logger.debug("Level 1: %d frequent itemsets (min count %d)", len(current), min_count)

    k = 2
    while current:
        levels.append(current)

        candidates = generate_candidate_itemsets(current, k)
        current = prune_infrequent_itemsets(candidates, transactions, min_count)
        logger.debug("Level %d: %d candidates, %d frequent", k, len(candidates), len(current))
        k += 1

    return levels


def generate_frequent_1_itemsets(transactions, min_count):
    item_counts = dict()

    # each transaction adds at most one to an item, however often it lists it
    for transaction in transactions:
        for item in transaction.item_set:
            item_counts[item] = item_counts.get(item, 0) + 1

    frequent = [ItemsetRec([item], count, len(transactions))
                for item, count in item_counts.items() if count >= min_count]

    return sort_level(frequent)


def generate_candidate_itemsets(frequent_itemsets, k):
    """Join every pair of frequent (k-1)-itemsets that differ in one item, dropping any
    candidate with a (k-1)-subset that is not frequent.

    The same candidate can come out of several pairs; it is kept once.
    """
    known = set(frequent_itemsets)
    candidates = []
    seen = set()

    for i in range(len(frequent_itemsets)):
        for j in range(i + 1, len(frequent_itemsets)):
            candidate = frequent_itemsets[i].join_with(frequent_itemsets[j])

            if candidate is None or len(candidate) != k or candidate in seen:
                continue
            seen.add(candidate)

            # Apriori property, checked before any transaction is scanned
            if has_infrequent_subset(candidate, known):
                continue

            candidates.append(candidate)

    return candidates


def has_infrequent_subset(candidate, frequent_itemsets):
    for subset in candidate.subsets(len(candidate) - 1):
        if subset not in frequent_itemsets:
            return True
    return False


def prune_infrequent_itemsets(candidates, transactions, min_count):
    frequent = []

    for candidate in candidates:
        count = calculate_support(candidate.items, transactions)
        if count >= min_count:
            # ratio is taken over the whole transaction list, not the level
            candidate.set_support(count, len(transactions))
            frequent.append(candidate)

    return sort_level(frequent)


def calculate_support(items, transactions):
    return sum(1 for transaction in transactions if transaction.contains_all(items))


def sort_level(itemsets):
    return sorted(itemsets, key=lambda itemset: itemset.sorted_items())


# ################## functions for generating association rules ###################
def generate_rules(levels, transactions, min_confidence):
    queue = RuleQClass()

    # a rule needs at least two items, so level 1 is skipped
    for level in levels[1:]:
        for itemset in level:
            generate_rules_from_itemset(itemset, transactions, min_confidence, queue)

    return queue.rules()


def generate_rules_from_itemset(itemset, transactions, min_confidence, queue):
    items = itemset.items
    before = len(queue)

    for subset_size in range(1, len(items)):
        for subset in itemset.subsets(subset_size):
            antecedent = subset.items
            consequent = items - antecedent

            if not consequent:
                continue

            confidence = calculate_confidence(antecedent, consequent, transactions)

            if confidence >= min_confidence:
                support = itemset.support
                lift = calculate_lift(consequent, support, transactions)
                queue.append(Rule(antecedent, consequent, confidence, support, lift))

    logger.debug("%d rules from %r", len(queue) - before, itemset)


# counts are taken afresh from the transactions, not from the mined itemsets
def calculate_confidence(antecedent, consequent, transactions):
    antecedent_count = 0
    rule_count = 0

    for transaction in transactions:
        if transaction.contains_all(antecedent):
            antecedent_count += 1

            if transaction.contains_all(consequent):
                rule_count += 1

    return rule_count / antecedent_count if antecedent_count > 0 else 0.0


def calculate_lift(consequent, rule_support, transactions):
    """Lift as support(rule) / support(consequent).

    The support of the antecedent is not divided out, so this is not the textbook lift;
    Rule.lift_interpretation reads its thresholds against this value.
    """
    consequent_support = calculate_support(consequent, transactions) / len(transactions)

    return rule_support / consequent_support if consequent_support > 0 else 0.0
