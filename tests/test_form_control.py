# -*- coding: utf-8 -*-
"""Tests for the in-process form control host."""

from freepicker.host.control import FormControl


def test_parsers_chain_left_to_right_and_stop_at_none() -> None:
    control = FormControl("x")
    calls = []
    control.parsers.extend([
        lambda v: calls.append("first") or v.strip(),
        lambda v: calls.append("second") or (v or None),
        lambda v: calls.append("third") or v.upper(),
    ])

    control.set_view_value("  ")

    assert control.model_value is None
    assert calls == ["first", "second"]


def test_formatters_run_last_to_first() -> None:
    control = FormControl("x")
    control.formatters.extend([lambda v: f"a({v})", lambda v: f"b({v})"])

    control.set_model_value("v")

    assert control.view_value == "a(b(v))"


def test_validity_mapping_and_errors() -> None:
    control = FormControl("x")
    control.validators["nonEmpty"] = lambda model, view: bool(model)
    control.validators["short"] = lambda model, view: len(model or "") < 3

    control.set_view_value("abcd")

    assert control.validity == {"nonEmpty": True, "short": False}
    assert control.errors == {"short": True}
    assert not control.valid


def test_dirty_handler_interception() -> None:
    control = FormControl("x")
    seen = []
    previous = control.intercept_dirty(lambda: seen.append("intercepted"))

    control.set_view_value("a")

    assert seen == ["intercepted"]
    assert control.pristine
    assert previous == control.set_dirty


def test_render_and_listeners() -> None:
    control = FormControl("x")
    events = []
    control.render = lambda: events.append("render")
    control.view_change_listeners.append(lambda: events.append("changed"))

    control.set_model_value("a")
    control.set_view_value("b")

    assert events == ["render", "changed"]
    assert control.dirty


# The End
