import pytest
from sqlalchemy import text

from inventory_app.models.supplier import Supplier, is_valid_supplier
from inventory_app.services.editor_service import EditorSession
from inventory_app.services.inventory_service import InventoryService


@pytest.mark.parametrize("value", [0, 1, 2, Supplier.AMERICAN_BOOK])
def test_enumerated_values_are_valid(value):
    assert is_valid_supplier(value)


@pytest.mark.parametrize("value", [-1, 3, 99, None, "0", True])
def test_other_values_are_invalid(value):
    assert not is_valid_supplier(value)


@pytest.mark.parametrize(
    "selection, expected",
    [
        (None, Supplier.PEARSON),
        (7, Supplier.PEARSON),
        ("nonsense", Supplier.PEARSON),
        (1, Supplier.BROOK_TAYLOR),
        ("2", Supplier.AMERICAN_BOOK),
        ("Brook & Taylor", Supplier.BROOK_TAYLOR),
        ("american_book", Supplier.AMERICAN_BOOK),
    ],
)
def test_selection_defaults_to_pearson(selection, expected):
    assert Supplier.from_selection(selection) is expected


@pytest.mark.parametrize(
    "stored, expected",
    [(0, Supplier.PEARSON), (1, Supplier.BROOK_TAYLOR), (2, Supplier.AMERICAN_BOOK), (9, Supplier.AMERICAN_BOOK), (-1, Supplier.AMERICAN_BOOK)],
)
def test_display_defaults_to_american_book(stored, expected):
    assert Supplier.for_display(stored) is expected


def test_display_names():
    assert [s.display_name for s in Supplier] == ["Pearson", "Brook & Taylor", "American Book"]


def test_stray_stored_supplier_reads_differently_in_list_and_editor(repo, engine):
    # a row written outside the store, e.g. by an older version of the app
    with engine.begin() as conn:
        conn.execute(
            text(
                "INSERT INTO inventory (name, price, quantity, supplier, supplier_phone) "
                "VALUES ('Legacy', 100, 1, 9, '')"
            )
        )
    pid = repo.list()[0].id

    rows = InventoryService(repo).list_rows()
    assert rows[0].supplier_name == "American Book"

    session = EditorSession.open(repo, pid)
    assert session.supplier is Supplier.PEARSON


@pytest.mark.parametrize("value", [True, False, 2.7, 1.0, " 7 ", "²", b"1", [1]])
def test_selection_accepts_only_whole_supplier_numbers(value):
    assert Supplier.from_selection(value) is Supplier.PEARSON


@pytest.mark.parametrize("value, expected", [(" 1 ", Supplier.BROOK_TAYLOR), ("0", Supplier.PEARSON)])
def test_selection_parses_digit_strings(value, expected):
    assert Supplier.from_selection(value) is expected


def test_floats_are_not_valid_suppliers():
    assert not is_valid_supplier(2.0)
    assert not is_valid_supplier(1.5)
