import pytest

from backend.ui_components import (
    Button,
    InputField,
    NavigationRegion,
    UIComponent,
    child_components,
)
from backend.utils.errors import ChildContractError


def test_ui_component_cannot_be_instantiated_directly():
    with pytest.raises(TypeError):
        UIComponent("id1", "label", "button")


@pytest.mark.parametrize(
    "node_id, label, match",
    [
        ("", "My Button", "non-empty id"),
        (None, "My Button", "non-empty id"),
        ("id1", "", "non-empty label"),
        ("id1", None, "non-empty label"),
    ],
)
def test_constructor_rejects_missing_fields(node_id, label, match):
    with pytest.raises(ValueError, match=match):
        Button(node_id, label)


def test_subclass_may_not_override_audit_serialisation():
    with pytest.raises(TypeError, match="to_audit_object"):

        class Rogue(UIComponent):
            def describe(self):
                return "rogue"

            def navigate(self):
                return "rogue"

            def to_audit_object(self):
                return {}


def test_subclass_missing_navigate_is_still_abstract():
    class Partial(UIComponent):
        def describe(self):
            return "partial"

    with pytest.raises(TypeError):
        Partial("p1", "Partial", "button")


def test_id_and_role_are_read_only():
    btn = Button("btn-1", "Submit")
    with pytest.raises(AttributeError):
        btn.id = "other"
    with pytest.raises(AttributeError):
        btn.role = "link"


def test_label_setter_rejects_empty_but_accepts_whitespace():
    btn = Button("btn-1", "Submit")
    with pytest.raises(ValueError, match="Label cannot be empty"):
        btn.label = ""
    btn.label = "   "
    assert btn.label == "   "


def test_button_defaults_and_text():
    btn = Button("btn-1", "Submit")
    assert btn.role == "button"
    assert btn.get_state("focusable") is True
    assert btn.get_state("disabled") is False
    assert btn.describe() == 'Button: "Submit". Press Enter or Space to activate.'
    assert "Submit" in btn.navigate()


def test_disabled_button_is_announced():
    btn = Button("btn-1", "Submit")
    btn.set_disabled(True)
    assert ", disabled" in btn.describe()


def test_button_audit_object_shape():
    obj = Button("btn-1", "Submit").to_audit_object()
    assert obj == {
        "id": "btn-1",
        "label": "Submit",
        "role": "button",
        "state": {"focusable": True, "disabled": False},
        "children": [],
    }


def test_input_field_type_and_required():
    field = InputField("inp-1", "Email", "email")
    assert field.role == "textbox"
    assert field.input_type == "email"
    assert InputField("inp-2", "Name").input_type == "text"
    assert "required" not in field.describe()

    field.set_required(1)
    assert field.get_state("required") is True
    assert field.describe() == 'Input field: "Email" (email), required. Type to enter a value.'


def test_navigation_region_counts_children():
    nav = NavigationRegion("nav-1", "Main Nav")
    assert nav.role == "navigation"
    assert nav.get_state("expanded") is True
    assert nav.get_state("focusable") is None
    assert nav.describe().endswith("with 0 items.")

    nav.add_child(Button("btn-1", "Home"))
    assert "with 1 item." in nav.describe()

    nav.add_child(Button("btn-2", "About"))
    assert "2 items" in nav.describe()


def test_add_child_rejects_non_components():
    nav = NavigationRegion("nav-1", "Nav")
    with pytest.raises(ChildContractError, match="UIComponent instance"):
        nav.add_child({"id": "fake"})
    assert nav.get_children() == []


def test_get_children_returns_a_copy():
    nav = NavigationRegion("nav-1", "Nav")
    nav.add_child(Button("btn-1", "Home"))
    children = nav.get_children()
    children.pop()
    assert len(nav.get_children()) == 1


def test_state_property_is_a_copy():
    btn = Button("btn-1", "Home")
    btn.state["focusable"] = False
    assert btn.get_state("focusable") is True


def test_audit_object_recurses_into_children():
    nav = NavigationRegion("nav-1", "Nav")
    nav.add_child(Button("btn-1", "Home"))
    obj = nav.to_audit_object()
    assert [child["id"] for child in obj["children"]] == ["btn-1"]
    assert obj["children"][0]["role"] == "button"


def test_child_components_ignores_non_components():
    assert child_components(None) == []
    nav = NavigationRegion("nav-1", "Nav")
    nav.add_child(Button("btn-1", "Home"))
    assert [c.id for c in child_components(nav)] == ["btn-1"]
