import datetime
import functools
import uuid

from aprioriminer.Exceptions import InvalidArgumentError

DATE_FORMAT = "%d/%m/%Y %H:%M:%S"


def _is_text(value):
    return isinstance(value, str) and bool(value.strip())


# ############################# Class Item #############################
@functools.total_ordering
class Item:
    """A purchasable product.

    Two items are the same item only when id, name, category and price are all equal,
    so an item whose price changed no longer matches itemsets built on the old price.
    """

    __slots__ = ('_id', '_name', '_category', '_price')

    def __init__(self, item_id, name, category, price):
        if not _is_text(name):
            raise InvalidArgumentError("Item name must not be empty, got %r" % (name,))
        if not _is_text(category):
            raise InvalidArgumentError("Item category must not be empty, got %r" % (category,))
        try:
            item_id = int(item_id)
            price = float(price)
        except (TypeError, ValueError):
            raise InvalidArgumentError("Item id and price must be numbers, got %r and %r" % (item_id, price))
        # also rejects NaN
        if not price > 0:
            raise InvalidArgumentError("Item price must be greater than 0, got %r" % (price,))
        object.__setattr__(self, '_id', item_id)
        object.__setattr__(self, '_name', name)
        object.__setattr__(self, '_category', category)
        object.__setattr__(self, '_price', price)

    def __setattr__(self, key, value):
        raise AttributeError("Item is immutable")

    @property
    def id(self):
        return self._id

    @property
    def name(self):
        return self._name

    @property
    def category(self):
        return self._category

    @property
    def price(self):
        return self._price

    def is_valid(self):
        return _is_text(self._name) and _is_text(self._category) and self._price > 0

    def sort_key(self):
        return self._id, self._name, self._category, self._price

    def __eq__(self, other):
        if not isinstance(other, Item):
            return NotImplemented
        return self.sort_key() == other.sort_key()

    def __lt__(self, other):
        if not isinstance(other, Item):
            return NotImplemented
        return self.sort_key() < other.sort_key()

    def __hash__(self):
        return hash(self.sort_key())

    def __repr__(self):
        return "Item(id=%d, name=%r, category=%r, price=%.2f)" % (self._id, self._name, self._category, self._price)


# ############################# Class Transaction #############################
def generate_transaction_id():
    return "TRX" + uuid.uuid4().hex[:12].upper()


def check_item(item):
    if item is None:
        raise InvalidArgumentError("Item must not be None")
    if not isinstance(item, Item) or not item.is_valid():
        raise InvalidArgumentError("Item is not valid: %r" % (item,))
    return item


class Transaction:
    """One basket.

    The raw item list keeps entry order and may hold the same item twice; every
    membership test goes through item_set, so a repeated item counts once.
    """

    def __init__(self, items=None, transaction_id=None, timestamp=None):
        self.transaction_id = transaction_id if transaction_id is not None else generate_transaction_id()
        self.timestamp = timestamp if timestamp is not None else datetime.datetime.now()
        self._items = [check_item(item) for item in items] if items is not None else []
        self._refresh()

    def _refresh(self):
        self._item_set = frozenset(self._items)
        self._total = sum(item.price for item in self._items)

    @property
    def items(self):
        return list(self._items)

    @property
    def item_set(self):
        return self._item_set

    @property
    def total(self):
        return self._total

    @property
    def item_count(self):
        return len(self._items)

    @property
    def formatted_date(self):
        if self.timestamp is None:
            return ""
        return self.timestamp.strftime(DATE_FORMAT)

    def add_item(self, item):
        self._items.append(check_item(item))
        self._refresh()

    # removes the first occurrence only
    def remove_item(self, item):
        try:
            self._items.remove(item)
        except ValueError:
            return False
        self._refresh()
        return True

    def contains_all(self, items):
        return self._item_set.issuperset(items)

    def is_valid(self):
        return bool(self.transaction_id and self.transaction_id.strip()) and \
            self.timestamp is not None and \
            len(self._items) > 0 and \
            all(item.is_valid() for item in self._items)

    def __eq__(self, other):
        if not isinstance(other, Transaction):
            return NotImplemented
        return self.transaction_id == other.transaction_id

    def __hash__(self):
        return hash(self.transaction_id)

    def __repr__(self):
        return "Transaction(id=%r, date=%s, items=%d, total=%.2f)" % (self.transaction_id, self.formatted_date,
                                                                     self.item_count, self._total)


def sales_statistics(transactions):
    total_transactions = len(transactions)
    total_revenue = sum(transaction.total for transaction in transactions)
    total_items = sum(transaction.item_count for transaction in transactions)
    average = total_revenue / total_transactions if total_transactions > 0 else 0.0

    return ("Sales Statistics:\n"
            "Total Transactions: %d\n"
            "Total Revenue: %.2f\n"
            "Total Items Sold: %d\n"
            "Average per Transaction: %.2f") % (total_transactions, total_revenue, total_items, average)
