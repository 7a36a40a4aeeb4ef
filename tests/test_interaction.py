from airport_map.cleaning import AirportRecord
from airport_map.interaction import DisplayText, on_hover


def test_on_hover_text():
    record = AirportRecord("PMC", -41.438, -73.093, 12345.0, 6789.0, 45.04)
    text = on_hover(record)

    assert text.title == "PMC"
    assert text.lines == (
        "Se redujo de 12,345 a 6,789 operaciones",
        "Reducción de: 45.0%",
    )
    assert text.plain().splitlines()[0] == "PMC"


def test_on_hover_html_emphasizes_reduction():
    record = AirportRecord("SCL", -33.669, -70.645, 100.0, 40.0, 60.0)
    markup = on_hover(record).html()
    assert markup == (
        "<strong>SCL</strong><br/>"
        "Se redujo de 100 a 40 operaciones<br/>"
        "<strong>Reducción de: 60.0%</strong>"
    )


def test_missing_counts_and_escaping():
    record = AirportRecord("A&B", -33.0, -70.0, float("nan"), 12.5, 0.0)
    text = on_hover(record)
    assert text.lines[0] == "Se redujo de s/d a 12.5 operaciones"
    assert text.html().startswith("<strong>A&amp;B</strong>")


def test_display_text_plain():
    assert DisplayText("T", ("a", "b")).plain() == "T\na\nb"
