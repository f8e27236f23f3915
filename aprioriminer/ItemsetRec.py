import itertools


# ############################# Class ItemsetRec #############################
class ItemsetRec:
    """A set of items with its support.

    Equality and hashing look at the items only, so a subset built with count 0 matches
    the frequent itemset of the same items found earlier.
    :param
    @items - the items in the itemset
    @count - number of transactions that contain every item
    @total - number of transactions count was taken over
    """
    def __init__(self, items=(), count=0, total=0):
        self.items = frozenset(items)
        self.count = 0
        self.support = 0.0
        self.set_support(count, total)

    # count and ratio always change together
    def set_support(self, count, total):
        self.count = count
        self.support = count / total if total > 0 else 0.0

    def __len__(self):
        return len(self.items)

    def __iter__(self):
        return iter(self.sorted_items())

    def __contains__(self, item):
        return item in self.items

    def __eq__(self, other):
        if not isinstance(other, ItemsetRec):
            return NotImplemented
        return self.items == other.items

    def __hash__(self):
        return hash(self.items)

    def __repr__(self):
        return "ItemsetRec(items=[%s], count=%d, support=%.2f%%)" % (self.items_as_string(), self.count,
                                                                    self.support * 100)

    def size(self):
        return len(self.items)

    def is_empty(self):
        return not self.items

    def sorted_items(self):
        return sorted(self.items)

    def contains(self, item):
        return item in self.items

    def contains_all(self, other):
        return other is not None and self.items.issuperset(other.items)

    def with_item(self, item):
        if item is None:
            return ItemsetRec(self.items)
        return ItemsetRec(self.items | {item})

    def without_item(self, item):
        return ItemsetRec(self.items - {item})

    def union(self, other):
        if other is None:
            return self.copy()
        return ItemsetRec(self.items | other.items)

    def intersection(self, other):
        if other is None:
            return ItemsetRec()
        return ItemsetRec(self.items & other.items)

    # two itemsets of equal size join when each holds exactly one item the other lacks
    def can_join_with(self, other):
        if other is None or len(self.items) != len(other.items):
            return False
        return len(self.items - other.items) == 1 and len(other.items - self.items) == 1

    def join_with(self, other):
        if not self.can_join_with(other):
            return None
        return ItemsetRec(self.items | other.items)

    def subsets(self, subset_size):
        """All subsets of subset_size items, 0 < subset_size < len(self), in sorted item order."""
        if subset_size <= 0 or subset_size >= len(self.items):
            return []
        return [ItemsetRec(combination) for combination in itertools.combinations(self.sorted_items(), subset_size)]

    def item_names(self):
        return sorted(item.name for item in self.items)

    def items_as_string(self):
        return ", ".join(self.item_names())

    def copy(self):
        itemset = ItemsetRec(self.items)
        itemset.count = self.count
        itemset.support = self.support
        return itemset
