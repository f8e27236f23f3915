"""Conversion between pandas DataFrames and the miner's transactions, itemsets and rules."""

import logging

import numpy as np
import pandas as pd

from aprioriminer.Exceptions import InvalidArgumentError
from aprioriminer.Transaction import Item, Transaction

logger = logging.getLogger(__name__)

DEFAULT_CATEGORY = "General"
DEFAULT_PRICE = 1.0

RULE_COLUMNS = ["antecedents", "consequents", "confidence", "support", "lift"]
ITEMSET_COLUMNS = ["itemsets", "size", "count", "support"]


def default_catalog():
    """The grocery products the sales application ships with, keyed by name."""
    products = [
        Item(1, "White Bread", "Food", 15000),
        Item(2, "UHT Milk", "Beverage", 8000),
        Item(3, "Chicken Eggs", "Protein", 25000),
        Item(4, "Cooking Oil", "Condiment", 18000),
        Item(5, "Premium Rice", "Staple Food", 45000),
        Item(6, "Granulated Sugar", "Condiment", 12000),
        Item(7, "Instant Coffee", "Beverage", 22000),
        Item(8, "Tea Bags", "Beverage", 15000),
        Item(9, "Bath Soap", "Hygiene", 8500),
        Item(10, "Toothpaste", "Hygiene", 12500),
    ]
    return {product.name: product for product in products}


def _is_blank(value):
    if value is None or (np.ndim(value) == 0 and pd.isna(value)):
        return True
    return str(value).strip() == ""


def _lookup(catalog, name):
    try:
        return catalog[name]
    except KeyError:
        raise InvalidArgumentError("Item %r is not in the catalog" % (name,))


"""
:param
@input_data - the data frame to read
@market_basket - True: every row is one basket and every non-empty cell an item name;
    False: one row per item with a transaction_id and an item column
@catalog - dictionary from item name to Item; items are built from the data when omitted
"""
def load_transactions(input_data, market_basket=True, catalog=None):
    if input_data is None:
        raise InvalidArgumentError("Input data must not be None")

    if market_basket:
        transactions = _load_market_basket(input_data, catalog)
    else:
        transactions = _load_long(input_data, catalog)

    if not transactions:
        raise InvalidArgumentError("Input data holds no transaction with an item")

    logger.info("Loaded %d transactions", len(transactions))
    return transactions


def _load_market_basket(input_data, catalog):
    if catalog is None:
        # each variable in the tuple is treated as an item at the same level
        all_items = sorted(str(item).strip() for item in pd.unique(input_data.values.ravel()) if not _is_blank(item))
        all_items = list(dict.fromkeys(all_items))
        catalog = {name: Item(idx + 1, name, DEFAULT_CATEGORY, DEFAULT_PRICE) for idx, name in enumerate(all_items)}

    transactions = []
    for row_no, row in enumerate(input_data.itertuples(index=False)):
        items = [_lookup(catalog, str(value).strip()) for value in row if not _is_blank(value)]
        if not items:
            logger.warning("Skipping row %d: no items", row_no)
            continue
        transactions.append(Transaction(items))

    return transactions


def _load_long(input_data, catalog):
    for column in ("transaction_id", "item"):
        if column not in input_data.columns:
            raise InvalidArgumentError("Data frame needs to contain a '%s' column" % column)

    names = [str(name).strip() for name in input_data["item"] if not _is_blank(name)]
    name_ids = {name: idx + 1 for idx, name in enumerate(sorted(set(names)))}

    transactions = []
    for transaction_id, group in input_data.groupby("transaction_id", sort=False):
        items = []
        for _, row in group.iterrows():
            if _is_blank(row["item"]):
                logger.warning("Skipping row of transaction %s: no item", transaction_id)
                continue
            name = str(row["item"]).strip()
            if catalog is not None:
                items.append(_lookup(catalog, name))
            else:
                items.append(_build_item(row, name, name_ids[name]))

        if not items:
            logger.warning("Skipping transaction %s: no items", transaction_id)
            continue

        timestamp = None
        if "timestamp" in group.columns and not pd.isna(group["timestamp"].iloc[0]):
            timestamp = pd.to_datetime(group["timestamp"].iloc[0]).to_pydatetime()

        transactions.append(Transaction(items, transaction_id=str(transaction_id), timestamp=timestamp))

    return transactions


def _build_item(row, name, default_id):
    item_id = row["item_id"] if "item_id" in row.index and not _is_blank(row["item_id"]) else default_id
    category = row["category"] if "category" in row.index and not _is_blank(row["category"]) else DEFAULT_CATEGORY
    price = row["price"] if "price" in row.index and not _is_blank(row["price"]) else DEFAULT_PRICE
    return Item(item_id, name, str(category), price)


def itemsets_to_frame(levels):
    rows = [{"itemsets": frozenset(itemset.item_names()),
             "size": len(itemset),
             "count": itemset.count,
             "support": itemset.support}
            for level in levels for itemset in level]
    return pd.DataFrame(rows, columns=ITEMSET_COLUMNS)


def rules_to_frame(rules):
    rows = [{"antecedents": frozenset(rule.antecedent_names()),
             "consequents": frozenset(rule.consequent_names()),
             "confidence": rule.confidence,
             "support": rule.support,
             "lift": rule.lift}
            for rule in rules]
    return pd.DataFrame(rows, columns=RULE_COLUMNS)
