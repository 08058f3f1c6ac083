"""Test view style construction, composition and application."""
import pytest
from salon.style import Condition, StyleEntry, ViewStyle
from salon.views import Label, SizeClass, TraitCollection, View


def always(_):
    return True


def never(_):
    return False


def set_tag(value):
    def styler(view):
        view.tag = value
    return styler


# ---------------------------------------------------------------------------
# Construction
# ---------------------------------------------------------------------------

def test_init_with_styler():
    style = ViewStyle(lambda view: None)
    assert len(style) == 1
    assert style.entries[0].conditions is None
    assert callable(style.entries[0].styler)


def test_init_with_conditions():
    style = ViewStyle(lambda view: None, when=[Condition(always)])
    assert len(style) == 1
    assert len(style.entries[0].conditions) == 1


def test_init_with_multiple_conditions():
    style = ViewStyle(lambda view: None, when=[Condition(always), Condition(never)])
    assert len(style.entries[0].conditions) == 2


def test_conditions_are_copied_to_tuple():
    conditions = [Condition(always)]
    style = ViewStyle(lambda view: None, when=conditions)
    conditions.append(Condition(never))
    assert style.entries[0].conditions == (conditions[0],)


def test_empty_style_has_no_entries():
    view = View(tag=3)
    style = ViewStyle.empty()
    assert len(style) == 0
    style.apply(view)
    assert view.tag == 3


# ---------------------------------------------------------------------------
# Composition
# ---------------------------------------------------------------------------

def test_compose_concatenates_in_order():
    a = ViewStyle(set_tag(1))
    b = ViewStyle(set_tag(2), when=[Condition(always)])
    c = ViewStyle(set_tag(3))
    composed = ViewStyle.compose([a, b, c])
    assert composed.entries == a.entries + b.entries + c.entries


def test_compose_nothing_applies_nothing():
    view = View(tag=5, is_hidden=True)
    ViewStyle.compose([]).apply(view)
    assert view.tag == 5
    assert view.is_hidden


def test_compose_is_associative():
    a, b, c = ViewStyle(set_tag(1)), ViewStyle(set_tag(2)), ViewStyle(set_tag(3))
    assert ((a + b) + c).entries == (a + (b + c)).entries


def test_empty_style_is_identity():
    a = ViewStyle(set_tag(1))
    empty = ViewStyle.empty()
    assert (empty + a).entries == a.entries
    assert (a + empty).entries == a.entries


def test_compose_does_not_mutate_operands():
    a = ViewStyle(set_tag(1))
    b = ViewStyle(set_tag(2))
    a + b
    assert len(a) == 1
    assert len(b) == 1


def test_add_non_style_raises():
    with pytest.raises(TypeError):
        ViewStyle(set_tag(1)) + "not a style"


def test_later_entry_wins():
    view = View()
    (ViewStyle(set_tag(1)) + ViewStyle(set_tag(2))).apply(view)
    assert view.tag == 2


# ---------------------------------------------------------------------------
# Applying
# ---------------------------------------------------------------------------

def test_unconditional_styler_runs_once():
    calls = []
    style = ViewStyle(calls.append)
    view = View()
    style.apply(view)
    assert calls == [view]


def test_apply_style():
    view = View(is_hidden=True)
    ViewStyle(lambda v: setattr(v, "is_hidden", False)).apply(view)
    assert not view.is_hidden


def test_conditionally_apply_style():
    view = View(is_hidden=True)
    style = ViewStyle(lambda v: setattr(v, "is_hidden", False), when=[Condition(always)])
    style.apply(view)
    assert not view.is_hidden


def test_not_conditionally_apply_style():
    view = View(is_hidden=True)
    style = ViewStyle(lambda v: setattr(v, "is_hidden", False), when=[Condition(never)])
    style.apply(view)
    assert view.is_hidden


def test_empty_conditions_always_apply():
    view = View(is_hidden=True)
    ViewStyle(lambda v: setattr(v, "is_hidden", False), when=[]).apply(view)
    assert not view.is_hidden


def test_any_matching_condition_activates_entry():
    view = View()
    style = ViewStyle(set_tag(7), when=[Condition(never), Condition(always)])
    style.apply(view)
    assert view.tag == 7


def test_no_matching_condition_skips_entry():
    view = View()
    style = ViewStyle(set_tag(7), when=[Condition(never), Condition(never)])
    style.apply(view)
    assert view.tag == 0


def test_conditions_see_earlier_mutations():
    view = View(is_hidden=False)
    hide = ViewStyle(lambda v: setattr(v, "is_hidden", True))
    tag_hidden = ViewStyle(set_tag(42), when=[Condition(lambda v: v.is_hidden)])
    (hide + tag_hidden).apply(view)
    assert view.tag == 42


def test_regular_view_keeps_compact_only_style_off():
    view = View(
        is_hidden=True,
        trait_collection=TraitCollection(horizontal_size_class=SizeClass.REGULAR),
    )
    compact = Condition(lambda v: v.trait_collection.horizontal_size_class == SizeClass.COMPACT)
    ViewStyle(lambda v: setattr(v, "is_hidden", False), when=[compact]).apply(view)
    assert view.is_hidden


def test_regular_view_gets_regular_style():
    view = View(
        is_hidden=True,
        trait_collection=TraitCollection(horizontal_size_class=SizeClass.REGULAR),
    )
    regular = Condition(lambda v: v.trait_collection.horizontal_size_class == SizeClass.REGULAR)
    ViewStyle(lambda v: setattr(v, "is_hidden", False), when=[regular]).apply(view)
    assert not view.is_hidden


def test_style_is_reusable_across_items():
    style = ViewStyle(set_tag(9))
    first, second = View(), Label()
    style.apply(first)
    style.apply(second)
    assert first.tag == second.tag == 9


def test_style_is_callable_and_nestable():
    inner = ViewStyle(set_tag(4))
    outer = ViewStyle(inner, when=[Condition(always)])
    view = View()
    outer(view)
    assert view.tag == 4


# ---------------------------------------------------------------------------
# Failures
# ---------------------------------------------------------------------------

def test_styler_error_propagates_and_keeps_earlier_mutations():
    def boom(view):
        raise RuntimeError("styler failed")

    view = View()
    style = ViewStyle(set_tag(1)) + ViewStyle(boom) + ViewStyle(lambda v: setattr(v, "alpha", 0.5))
    with pytest.raises(RuntimeError, match="styler failed"):
        style.apply(view)
    assert view.tag == 1
    assert view.alpha == 1.0


def test_condition_error_propagates():
    def broken(view):
        raise KeyError("missing trait")

    view = View()
    style = ViewStyle(set_tag(1)) + ViewStyle(set_tag(2), when=[Condition(broken)])
    with pytest.raises(KeyError):
        style.apply(view)
    assert view.tag == 1


def test_entry_is_active_short_circuits():
    seen = []

    def record(result):
        def matcher(item):
            seen.append(result)
            return result
        return matcher

    entry = StyleEntry(lambda v: None, (Condition(record(True)), Condition(record(False))))
    assert entry.is_active(View())
    assert seen == [True]
