import pytest
from appbuilder.component_library import library
from appbuilder.properties import property_fields, update_layout, update_property

@pytest.fixture
def button():
    return library.create_component("button", "b1")

def test_update_property_merges(button):
    updated = update_property(button, "text", "Submit")

    assert updated.props == {"text": "Submit", "variant": "default", "size": "default"}
    # Immutable update
    assert button.props["text"] == "Button"

@pytest.mark.parametrize("component_type,name,value,expected", [
    ("container", "padding", "24", 24),
    ("container", "padding", "abc", 0),
    ("grid", "columns", "", 2),
    ("grid", "columns", "4 cols", 4),
    ("grid", "gap", 8, 8),
])
def test_number_fields_parse(component_type, name, value, expected):
    component = library.create_component(component_type, "c1")
    assert update_property(component, name, value).props[name] == expected

def test_checkbox_field():
    card = library.create_component("card", "c1")
    assert update_property(card, "shadow", 0).props["shadow"] is False

@pytest.mark.parametrize("field,value,expected", [
    ("x", "42", 42),
    ("x", "-5", 0),
    ("y", "abc", 0),
    ("width", "3", 10),
    ("height", 250, 250),
])
def test_update_layout(button, field, value, expected):
    assert getattr(update_layout(button, field, value), field) == expected

def test_update_layout_unknown_field(button):
    with pytest.raises(ValueError):
        update_layout(button, "rotation", 90)

def test_property_fields(button):
    fields = {f.name: f for f in property_fields(button)}

    assert list(fields) == ["text", "variant", "size"]
    assert fields["variant"].kind == "select"
    assert "destructive" in fields["variant"].options
    assert fields["text"].value == "Button"

def test_no_fields_for_table():
    assert property_fields(library.create_component("table", "t1")) == []

@pytest.mark.parametrize("value,expected", [
    ("  12px", 12),
    ("+7", 7),
    ("-3", -3),
    ("1.9", 1),
    ("- 3", 2),
])
def test_number_parse_leading_integer(value, expected):
    grid = library.create_component("grid", "g1")
    assert update_property(grid, "columns", value).props["columns"] == expected
