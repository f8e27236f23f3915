"""pytest configuration and shared fixtures."""

from __future__ import annotations

import os
import sys

import pytest

# Ensure tests/ dir is on path so test modules can import make_transactions
sys.path.insert(0, os.path.dirname(__file__))

from aprioriminer import Item, Transaction


@pytest.fixture
def items() -> dict[str, Item]:
    return {
        "A": Item(1, "A", "Food", 1000),
        "B": Item(2, "B", "Food", 2000),
        "C": Item(3, "C", "Beverage", 3000),
        "D": Item(4, "D", "Beverage", 4000),
    }


def make_transactions(items: dict[str, Item], baskets: list[str]) -> list[Transaction]:
    return [
        Transaction([items[name] for name in basket], transaction_id="T%d" % no)
        for no, basket in enumerate(baskets, start=1)
    ]


@pytest.fixture
def classic_transactions(items: dict[str, Item]) -> list[Transaction]:
    """{A,B,C}, {A,B}, {A,C}, {B,C}, {A,B,C}"""
    return make_transactions(items, ["ABC", "AB", "AC", "BC", "ABC"])
