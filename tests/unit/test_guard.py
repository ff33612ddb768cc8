"""Tests for the method overwrite guard."""

from __future__ import annotations

import pytest

from app.LocaleDating import MethodOverwriteError, ensure_no_overwrite


class Parent:
    def greeting(self) -> str:
        return 'howdy'


class Child(Parent):
    label = 'child'

    @property
    def title(self) -> str:
        return 'Dr'


class TestEnsureNoOverwrite:

    def test_free_names_pass(self) -> None:
        ensure_no_overwrite(Child, 'born_on', ('born_on_as_text', 'set_born_on_as_text'))

    def test_own_method_collides(self) -> None:
        with pytest.raises(MethodOverwriteError) as exc_info:
            ensure_no_overwrite(Child, 'some_time', ('title', 'set_title'))
        assert exc_info.value.method_name == 'title'
        assert exc_info.value.attribute == 'some_time'

    def test_inherited_method_collides(self) -> None:
        with pytest.raises(MethodOverwriteError, match="'greeting'"):
            ensure_no_overwrite(Child, 'x', ('greeting', 'set_greeting'))

    def test_class_attribute_collides(self) -> None:
        with pytest.raises(MethodOverwriteError, match="'label'"):
            ensure_no_overwrite(Child, 'x', ('label', 'set_label'))

    def test_setter_collision_is_reported(self) -> None:
        class WithSetter:
            def set_born_on_as_text(self, value: str) -> None:
                pass

        with pytest.raises(MethodOverwriteError) as exc_info:
            ensure_no_overwrite(WithSetter, 'born_on', ('born_on_as_text', 'set_born_on_as_text'))
        assert exc_info.value.method_name == 'set_born_on_as_text'

    def test_message_names_attribute_and_method(self) -> None:
        with pytest.raises(MethodOverwriteError) as exc_info:
            ensure_no_overwrite(Parent, 'some_time_1', ('greeting', 'set_greeting'))
        assert str(exc_info.value) == (
            "locale_dating setting would overwrite method 'greeting' "
            "for attribute 'some_time_1'"
        )

    def test_guard_does_not_modify_class(self) -> None:
        before = dict(vars(Child))
        with pytest.raises(MethodOverwriteError):
            ensure_no_overwrite(Child, 'x', ('title', 'set_title'))
        assert dict(vars(Child)) == before
