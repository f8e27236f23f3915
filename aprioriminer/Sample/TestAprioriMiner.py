import logging
import os

import pandas as pd

from aprioriminer.AprioriMiner import AprioriMiner, DEFAULT_MIN_CONFIDENCE, DEFAULT_MIN_SUPPORT
from aprioriminer.DataLoader import default_catalog, load_transactions, rules_to_frame
from aprioriminer.Transaction import sales_statistics

DATA_FILE = os.path.join(os.path.dirname(os.path.abspath(__file__)), "Data", "demo.csv")


def main():
    logging.basicConfig(level=logging.INFO, format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s")

    # baskets have different lengths, so split the lines ourselves and pad with ''
    with open(DATA_FILE, 'r') as f:
        data = pd.DataFrame([line.strip().split(',') for line in f if line.strip()]).fillna('')

    transactions = load_transactions(data, market_basket=True, catalog=default_catalog())
    print(sales_statistics(transactions) + "\n")

    apriori = AprioriMiner(transactions=transactions,
                           min_support=DEFAULT_MIN_SUPPORT / 2,
                           min_confidence=DEFAULT_MIN_CONFIDENCE)

    rules = apriori.run()

    for size, level in enumerate(apriori.frequent_itemsets(), start=1):
        print("Frequent %d-itemsets:" % size)
        for itemset in level:
            print("  {" + itemset.items_as_string() + "}, count: " + str(itemset.count) +
                  ", support: %.2f%%" % (itemset.support * 100))

    print("\nAssociation rules:")
    for rule in rules:
        print("  " + rule.detailed_rule_string() + " - " + rule.confidence_level() + ", " +
              rule.lift_interpretation())

    print("\n" + apriori.statistics())

    print(rules_to_frame(rules).to_string(index=False))


if __name__ == "__main__":
    main()
