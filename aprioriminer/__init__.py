"""aprioriminer: level-wise Apriori mining of frequent itemsets and association rules."""

from .Exceptions import AprioriError, InvalidArgumentError, InvalidStateError
from .Transaction import Item, Transaction, sales_statistics
from .ItemsetRec import ItemsetRec
from .Associations import Associations, Rule
from .AprioriMiner import AprioriMiner, find_itemsets, generate_rules
from .DataLoader import default_catalog, itemsets_to_frame, load_transactions, rules_to_frame

__all__ = [
    "AprioriError",
    "InvalidArgumentError",
    "InvalidStateError",
    "Item",
    "Transaction",
    "sales_statistics",
    "ItemsetRec",
    "Associations",
    "Rule",
    "AprioriMiner",
    "find_itemsets",
    "generate_rules",
    "default_catalog",
    "itemsets_to_frame",
    "load_transactions",
    "rules_to_frame",
]
