"""userモジュールのテスト。"""

import pytest

from pytoolkit_optional.user import User


class TestUser:
    """Userクラスのテストクラス。"""

    def test_user_creation(self) -> None:
        """Userインスタンスが正しい属性で作成される。"""
        user = User(22, "walker")

        assert user.age == 22
        assert user.name == "walker"
        assert user.email.is_absent()

    def test_user_setters(self) -> None:
        """属性を書き換えられる。"""
        user = User(22, "walker")

        user.age = 30
        user.name = "runner"

        assert user.age == 30
        assert user.name == "runner"

    def test_email_roundtrip(self) -> None:
        """emailを設定・解除できる。"""
        user = User(22, "walker")

        user.email = "walker@example.com"
        assert user.email.get() == "walker@example.com"

        user.email = None
        assert user.email.or_else("unknown") == "unknown"

    def test_user_repr(self) -> None:
        """表示形式にemailは含まれない。"""
        user = User(22, "walker", email="walker@example.com")

        assert repr(user) == "User(age=22, name='walker')"

    def test_user_equality(self) -> None:
        """同じ属性を持つUserインスタンスが等価と判定される。"""
        assert User(22, "walker") == User(22, "walker")
        assert User(22, "walker") != User(19, "walker2")
        assert User(22, "walker", email="a@example.com") != User(22, "walker")

    def test_user_unhashable(self) -> None:
        """書き換え可能なUserはハッシュ化できない。"""
        user = User(22, "walker")

        with pytest.raises(TypeError):
            hash(user)

        with pytest.raises(TypeError):
            _ = {user}

    def test_default_user(self) -> None:
        """defaultは毎回新しいプレースホルダーのUserを返す。"""
        first = User.default()
        second = User.default()

        assert first == User(23, "zccc")
        assert first is not second
