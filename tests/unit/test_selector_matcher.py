import pytest

from treewright.selectors.matcher import find, find_first
from treewright.selectors.parser import parse
from treewright.selectors.roles import ROLE_ALIASES, resolve_role
from treewright.tree.memory import MemoryElement as El


def _find(selector, root):
    return find(parse(selector), root)


# ---------- role aliases ----------


@pytest.mark.parametrize(
    "alias, canonical",
    [
        ("button", "AXButton"),
        ("input", "AXTextField"),
        ("textfield", "AXTextField"),
        ("dialog", "AXSheet"),
        ("sheet", "AXSheet"),
        ("window", "AXWindow"),
        ("text", "AXStaticText"),
        ("disclosure", "AXDisclosureTriangle"),
    ],
)
def test_resolve_role_aliases(alias, canonical):
    assert resolve_role(alias) == canonical


def test_every_alias_maps_to_a_canonical_tag():
    assert len(ROLE_ALIASES) >= 50
    for alias, canonical in ROLE_ALIASES.items():
        assert alias == alias.lower()
        assert resolve_role(alias) == canonical


@pytest.mark.parametrize("name", ["AXButton", "custom-role", "widget", ""])
def test_unmapped_names_pass_through(name):
    assert resolve_role(name) == name


def test_alias_table_is_read_only():
    with pytest.raises(TypeError):
        ROLE_ALIASES["button"] = "AXLink"


# ---------- single step ----------


def test_match_by_role():
    root = El(role="AXApplication", children=[El(role="AXButton"), El(role="AXTextField")])
    results = _find("button", root)
    assert [r.role for r in results] == ["AXButton"]


def test_match_by_role_alias():
    root = El(role="AXApplication", children=[El(role="AXTextField")])
    assert len(_find("input", root)) == 1


def test_role_match_ignores_case():
    button = El(role="AXButton")
    custom = El(role="MyWidget")
    root = El(role="AXApplication", children=[button, custom])
    assert _find("AXButton", root) == [button]
    assert _find("axbutton", root) == [button]
    assert _find("mywidget", root) == [custom]
    assert _find("MyWidget", root) == [custom]


def test_match_by_identifier():
    root = El(role="AXApplication", children=[
        El(role="AXButton", identifier="login"),
        El(role="AXButton", identifier="cancel"),
    ])
    results = _find("#login", root)
    assert [r.identifier for r in results] == ["login"]


def test_match_by_role_and_identifier():
    root = El(role="AXApplication", children=[
        El(role="AXButton", identifier="login"),
        El(role="AXTextField", identifier="login"),
    ])
    results = _find("button#login", root)
    assert [r.role for r in results] == ["AXButton"]


def test_equals_is_case_sensitive():
    root = El(role="AXApplication", children=[El(role="AXButton", title="Settings")])
    assert len(_find("button[title=Settings]", root)) == 1
    assert _find("button[title=settings]", root) == []


def test_contains_is_case_insensitive():
    root = El(role="AXApplication", children=[
        El(role="AXButton", title="SAVE FILE"),
        El(role="AXButton", title="Cancel"),
    ])
    results = _find("button[title~=save]", root)
    assert [r.title for r in results] == ["SAVE FILE"]


def test_attribute_keys_resolve_to_element_fields():
    field = El(role="AXTextField", identifier="email", label="E-mail", string_value="a@b.c")
    root = El(role="AXApplication", children=[field])
    for sel in ("[label=E-mail]", "[description=E-mail]", "[identifier=email]",
                "[value~=@B.C]", "[role=AXTextField]", "[TITLE~=x][value=a@b.c]"):
        expected = [] if "TITLE" in sel else [field]
        assert _find(sel, root) == expected, sel


def test_unknown_attribute_key_never_matches():
    root = El(role="AXApplication", children=[El(role="AXButton", title="OK")])
    assert _find("[colour=OK]", root) == []
    assert _find("[colour~=O]", root) == []


def test_missing_attribute_never_matches():
    root = El(role="AXApplication", children=[El(role="AXButton")])
    assert _find("[title~=a]", root) == []
    assert _find('[title=""]', root) == []


# ---------- descendant chaining ----------


def test_root_never_matches_itself():
    root = El(role="AXApplication")
    assert _find("application", root) == []
    assert _find("button", El(role="AXButton")) == []


def test_descendant_chain():
    button = El(role="AXButton", identifier="confirm")
    root = El(role="AXApplication", children=[
        El(role="AXWindow", children=[El(role="AXSheet", children=[button])]),
    ])
    results = _find("window dialog button#confirm", root)
    assert results == [button]


def test_descendant_chaining_is_transitive():
    d = El(role="D", identifier="leaf")
    root = El(role="Root", children=[
        El(role="A", children=[El(role="B", children=[El(role="C", children=[d])])]),
    ])
    assert _find("A D", root) == [d]
    assert _find("B D", root) == [d]
    assert _find("D A", root) == []


def test_chain_stops_when_a_step_matches_nothing():
    root = El(role="AXApplication", children=[El(role="AXButton")])
    assert _find("window button", root) == []


def test_depth_first_order():
    root = El(role="AXApplication", children=[
        El(role="AXGroup", children=[El(role="AXButton", identifier="inner")]),
        El(role="AXButton", identifier="outer"),
    ])
    assert [r.identifier for r in _find("button", root)] == ["inner", "outer"]
    assert find_first(parse("button"), root).identifier == "inner"


def test_nested_parents_are_not_deduplicated():
    button = El(role="AXButton")
    root = El(role="AXApplication", children=[
        El(role="AXGroup", children=[El(role="AXGroup", children=[button])]),
    ])
    assert _find("group button", root) == [button, button]


def test_find_first_none_when_empty():
    assert find_first(parse("button"), El(role="AXApplication")) is None
