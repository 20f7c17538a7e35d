import pytest
from pydantic import ValidationError

from dfm.backend import HtmlLabel
from dfm.models import Fact


def test_html_label_layout():
    fact = Fact(name="Sales", attributes=("qty", "price"))
    assert isinstance(fact.html_label(), HtmlLabel)
    assert fact.html_label() == (
        '<<table border="0" cellborder="1" cellspacing="0" cellpadding="20"> '
        '<tr> <td bgcolor="lightblue">Sales</td> </tr>'
        "<tr> <td>qty</td> </tr>"
        "<tr> <td>price</td> </tr>"
        "</table>>"
    )


def test_fact_is_frozen():
    fact = Fact(name="Sales")
    with pytest.raises(ValidationError):
        fact.name = "Orders"


def test_blank_fact_name_rejected():
    with pytest.raises(ValidationError):
        Fact(name="  ")
