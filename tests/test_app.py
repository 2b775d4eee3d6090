"""Tests for ageboard.app — one full render through the App."""

from pathlib import Path

import pytest

from ageboard.app import App
from ageboard.config import PageConfig
from ageboard.errors import ClassNotFound, ConfigurationError


class TestRender:
    def test_default_page(self) -> None:
        html = App().render()
        assert "Cat's age: 22" in html
        assert "Fridge's age: 2" in html
        assert "<title>Cat and Fridge Age</title>" in html

    def test_ages_override(self) -> None:
        html = App().render([("Fridge", 15), ("Cat", -1)])
        assert "Fridge's age: 15" in html
        assert "Cat's age: -1" in html
        assert html.index("Fridge's age") < html.index("Cat's age")

    def test_configured_ages(self) -> None:
        html = App(PageConfig(ages=(("Cat", 7),))).render()
        assert "Cat's age: 7" in html
        assert "Fridge's age" not in html

    def test_debug_shows_trace(self) -> None:
        html = App(PageConfig(debug=True)).render()
        assert "<li>Cat.py</li>" in html
        assert "<li>Fridge.py</li>" in html

    def test_renders_are_independent(self) -> None:
        app = App(PageConfig(debug=True))
        first = app.render()
        second = app.render()
        assert first == second
        assert second.count("<li>Cat.py</li>") == 1

    def test_missing_class_is_fatal(self, tmp_path: Path) -> None:
        app = App(PageConfig(classes_dir=tmp_path))
        with pytest.raises(ClassNotFound) as exc_info:
            app.render()
        assert exc_info.value.class_name == "Cat"

    def test_custom_classes_dir(self, tmp_path: Path) -> None:
        (tmp_path / "Kettle.py").write_text(
            "from ageboard.aged import Aged\n\n\nclass Kettle(Aged):\n    pass\n",
            encoding="utf-8",
        )
        html = App(PageConfig(classes_dir=tmp_path, ages=(("Kettle", 3),))).render()
        assert "Kettle's age: 3" in html


class TestCheck:
    def test_missing_classes_dir(self, tmp_path: Path) -> None:
        app = App(PageConfig(classes_dir=tmp_path / "nope"))
        with pytest.raises(ConfigurationError, match="Classes directory not found"):
            app.render()

    @pytest.mark.parametrize("suffix", ["py", ".", ""])
    def test_bad_suffix(self, suffix: str) -> None:
        with pytest.raises(ConfigurationError, match="Class suffix"):
            App(PageConfig(class_suffix=suffix)).check()

    def test_default_config_is_valid(self) -> None:
        App().check()

    @pytest.mark.parametrize("name", ["Kitchen..Fridge", "\\", "Kitchen\\"])
    def test_malformed_class_name(self, name: str) -> None:
        with pytest.raises(ConfigurationError, match="empty namespace segment"):
            App(PageConfig(ages=((name, 3),))).render()

    def test_malformed_override_checked_before_loading(self) -> None:
        with pytest.raises(ConfigurationError):
            App().render([("Cat", 1), ("Kitchen..Fridge", 3)])

    def test_empty_ages_renders_empty_page(self) -> None:
        html = App(PageConfig(ages=())).render()
        assert "'s age:" not in html
        assert "<h1>Cat and Fridge Age</h1>" in html
