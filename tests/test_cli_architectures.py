"""Tests for the trellis architectures CLI command."""

from typer.testing import CliRunner

from trellis.cli.main import app

runner = CliRunner()


class TestArchitecturesCommand:
    """Tests for listing the registered architectures."""

    def test_lists_every_architecture(self) -> None:
        """Every name and alias appears in the listing."""
        result = runner.invoke(app, ["architectures"])

        assert result.exit_code == 0
        for name in ("mvc", "clean", "hexagonal", "hexa"):
            assert name in result.output

    def test_verbose_lists_features(self) -> None:
        """--verbose adds each architecture's feature list."""
        result = runner.invoke(app, ["architectures", "--verbose"])

        assert result.exit_code == 0
        assert "Dependency inversion" in result.output
