"""Tests for trellis.scaffold.rendering.TemplateRenderer."""

from __future__ import annotations

from pathlib import Path

import pytest
from jinja2 import UndefinedError

from trellis.scaffold.rendering import TemplateRenderer, camel_case, pascal_case


class TestCaseFilters:
    """Tests for the pascal_case and camel_case template filters."""

    @pytest.mark.parametrize(
        "value, expected",
        [("shop-api", "ShopApi"), ("my_app", "MyApp"), ("web app", "WebApp"), ("", "")],
    )
    def test_pascal_case(self, value: str, expected: str) -> None:
        """Hyphens, underscores and spaces all split words."""
        assert pascal_case(value) == expected

    def test_camel_case(self) -> None:
        """camel_case lowers only the first letter."""
        assert camel_case("shop-api") == "shopApi"
        assert camel_case("") == ""


class TestTemplateRenderer:
    """Tests against a throwaway template directory."""

    @pytest.fixture
    def renderer(self, tmp_path: Path) -> TemplateRenderer:
        root = tmp_path / "templates"
        (root / "demo" / "src").mkdir(parents=True)
        (root / "demo" / "src" / "index.js.j2").write_text("// {{ project_name | pascal_case }}\n")
        (root / "demo" / "src" / "app.js.j2").write_text("const {{ project_name | camel_case }} = 1;\n")
        (root / "demo" / "gitignore.j2").write_text("node_modules/\n")
        return TemplateRenderer(root)

    @pytest.mark.asyncio
    async def test_render_tree_mirrors_layout(
        self, renderer: TemplateRenderer, tmp_path: Path
    ) -> None:
        """Every listed template lands at its relative path without .j2."""
        out = tmp_path / "out"
        written = await renderer.render_tree("demo", out, {"project_name": "shop-api"})

        assert written == [out / ".gitignore", out / "src" / "app.js", out / "src" / "index.js"]
        assert (out / "src" / "index.js").read_text() == "// ShopApi\n"
        assert (out / "src" / "app.js").read_text() == "const shopApi = 1;\n"

    @pytest.mark.asyncio
    async def test_unknown_prefix_renders_nothing(
        self, renderer: TemplateRenderer, tmp_path: Path
    ) -> None:
        """A prefix with no templates writes no files."""
        assert await renderer.render_tree("missing", tmp_path / "out", {}) == []

    def test_missing_context_key_fails(self, renderer: TemplateRenderer) -> None:
        """A variable passed through a case filter is still strict."""
        with pytest.raises(UndefinedError):
            renderer.render("demo/src/index.js.j2", {})

    def test_missing_key_in_camel_case_fails(self, renderer: TemplateRenderer) -> None:
        """camel_case does not turn an undefined variable into text."""
        with pytest.raises(UndefinedError):
            renderer.render("demo/src/app.js.j2", {})

    def test_list_templates(self, renderer: TemplateRenderer) -> None:
        """Templates under a prefix are listed in sorted order."""
        assert renderer.list_templates("demo") == [
            "demo/gitignore.j2",
            "demo/src/app.js.j2",
            "demo/src/index.js.j2",
        ]


class TestBundledTemplates:
    """The shipped templates cover every generator."""

    @pytest.mark.parametrize(
        "prefix", ["common", "mvc", "clean", "hexagonal", "react", "vue", "angular", "tailwind"]
    )
    def test_prefix_has_templates(self, prefix: str) -> None:
        """Each generator prefix ships at least one template."""
        assert TemplateRenderer().list_templates(prefix)
