"""Tests for the ordered transform pipeline."""

from __future__ import annotations

from pathlib import Path

import pytest

from resinline.models import InlineConfig
from resinline.transform import (
    DEFAULT_STEPS,
    build_steps,
    directory_resolver,
    inline_template,
    remove_module_id,
    transform,
)


def _write(path: Path, text: str) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    return path


def _no_resolve(url: str) -> Path:
    raise AssertionError(f"unexpected resolve of {url!r}")


class TestTransformIdentity:
    """Text without either marker passes through unchanged."""

    @pytest.mark.parametrize(
        "source",
        [
            "",
            "export const x = 1;\n",
            "@Component({\n  selector: 'a',\n  template: '<p>inline</p>'\n})\n",
            "const url = require('./data.json');\n",
            "\t  \r\n  trailing whitespace   \n\n",
        ],
    )
    def test_identity(self, source: str) -> None:
        assert transform(source, _no_resolve) == source


class TestTransformOrder:
    """Steps run left to right, each feeding the next."""

    def test_default_steps(self) -> None:
        assert DEFAULT_STEPS == (inline_template, remove_module_id)

    def test_full_component(self, tmp_path: Path) -> None:
        _write(tmp_path / "x.html", '<p class="a">\n  hi\n</p>\n')
        source = (
            "@Component({\n"
            "  moduleId: module.id,\n"
            "  selector: 'app-x',\n"
            "  template: require('./x.html')\n"
            "})\n"
        )
        result = transform(source, directory_resolver(tmp_path))
        assert result == (
            "@Component({selector: 'app-x',\n"
            "  template: \"<p class=\\\"a\\\"> hi </p> \"\n"
            "})\n"
        )

    def test_custom_steps_fold_in_order(self) -> None:
        calls: list[str] = []

        def first(content: str, resolver) -> str:
            calls.append("first")
            return content + "1"

        def second(content: str, resolver) -> str:
            calls.append("second")
            return content + "2"

        assert transform("x", _no_resolve, [first, second]) == "x12"
        assert calls == ["first", "second"]

    def test_empty_step_list_is_identity(self) -> None:
        assert transform("moduleId: module.id,", _no_resolve, []) == "moduleId: module.id,"

    def test_step_errors_propagate(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            transform("template: require('./gone.html')", directory_resolver(tmp_path))


class TestBuildSteps:
    """Selecting steps from configuration."""

    def test_all_enabled(self, tmp_path: Path) -> None:
        _write(tmp_path / "x.html", "t")
        steps = build_steps(InlineConfig())
        assert len(steps) == 2
        result = transform(
            "{ moduleId: module.id, template: require('x.html') }",
            directory_resolver(tmp_path),
            steps,
        )
        assert result == '{template: "t" }'

    def test_templates_disabled(self) -> None:
        steps = build_steps(InlineConfig(inline_templates=False))
        assert steps == [remove_module_id]
        source = "{ moduleId: module.id, template: require('x.html') }"
        assert transform(source, _no_resolve, steps) == "{template: require('x.html') }"

    def test_module_id_disabled(self, tmp_path: Path) -> None:
        _write(tmp_path / "x.html", "t")
        steps = build_steps(InlineConfig(remove_module_id=False))
        assert len(steps) == 1
        source = "{ moduleId: module.id, template: require('x.html') }"
        result = transform(source, directory_resolver(tmp_path), steps)
        assert result == '{ moduleId: module.id, template: "t" }'

    def test_both_disabled(self) -> None:
        assert build_steps(InlineConfig(inline_templates=False, remove_module_id=False)) == []

    def test_encoding_passed_to_inliner(self, tmp_path: Path) -> None:
        (tmp_path / "x.html").write_bytes("\xfc".encode("latin-1"))
        steps = build_steps(InlineConfig(encoding="latin-1"))
        result = transform("template: require('x.html')", directory_resolver(tmp_path), steps)
        assert result == 'template: "\xfc"'


class TestDirectoryResolver:
    def test_joins_onto_directory(self, tmp_path: Path) -> None:
        resolve = directory_resolver(tmp_path / "src")
        assert resolve("./a.html") == tmp_path / "src" / "a.html"
        assert resolve("views/b.html") == tmp_path / "src" / "views" / "b.html"

    def test_leading_slash_stays_under_directory(self, tmp_path: Path) -> None:
        resolve = directory_resolver(tmp_path / "src")
        assert resolve("/a.html") == tmp_path / "src" / "a.html"

    def test_leading_slash_template_inlined_from_directory(self, tmp_path: Path) -> None:
        _write(tmp_path / "x.html", "<x></x>")
        result = transform("template: require('/x.html')", directory_resolver(tmp_path))
        assert result == 'template: "<x></x>"'
