import pytest

from netconf_rpc.methods import (
    Method,
    RawMethod,
    method_edit_config,
    method_get,
    method_get_config,
    method_lock,
    method_unlock,
)


@pytest.mark.parametrize(
    "method,expected",
    [
        (method_lock("candidate"), "<lock><target><candidate/></target></lock>"),
        (method_unlock("candidate"), "<unlock><target><candidate/></target></unlock>"),
        (
            method_get_config("running"),
            "<get-config><source><running/></source></get-config>",
        ),
        (
            method_get("subtree", "<interfaces/>"),
            '<get><filter type="subtree"><interfaces/></filter></get>',
        ),
        (RawMethod("<close-session/>"), "<close-session/>"),
    ],
    ids=["lock", "unlock", "get-config", "get", "raw"],
)
def test_when_rendering_method_then_fragment_is_returned(method, expected):
    # WHEN rendering method
    result = method.render()

    # THEN expect xml fragment
    assert result == expected


def test_when_rendering_edit_config_then_merge_and_rollback_are_fixed():
    # GIVEN edit-config method
    method = method_edit_config("candidate", "<system><hostname>r1</hostname></system>")

    # WHEN rendering method
    result = method.render()

    # THEN expect fixed default operation and error option
    assert result == (
        "<edit-config>\n"
        "<target><candidate/></target>\n"
        "<default-operation>merge</default-operation>\n"
        "<error-option>rollback-on-error</error-option>\n"
        "<config><system><hostname>r1</hostname></system></config>\n"
        "</edit-config>"
    )


def test_when_method_argument_is_not_xml_safe_then_it_is_not_escaped():
    # GIVEN method argument containing markup characters
    method = method_get("xpath", "/a[b<1]")

    # WHEN rendering method
    result = method.render()

    # THEN expect argument to be inserted as-is
    assert result == '<get><filter type="xpath">/a[b<1]</filter></get>'


def test_when_checking_methods_then_they_satisfy_method_protocol():
    # THEN expect built-in methods and custom render objects to be methods
    class CloseSession:
        def render(self) -> str:
            return "<close-session/>"

    assert isinstance(method_lock("running"), Method)
    assert isinstance(CloseSession(), Method)
    assert not isinstance("<lock/>", Method)


def test_when_modifying_raw_method_then_error_is_raised():
    # GIVEN raw method
    method = RawMethod("<get/>")

    # WHEN modifying method
    with pytest.raises(AttributeError):
        method.xml = "<lock/>"
