"""Tests for the admin CLI commands."""


def test_save_and_show_variants(app):
    runner = app.test_cli_runner()

    result = runner.invoke(args=["save-option", "Color", "Black", "White"])
    assert result.exit_code == 0
    assert "Saved Color: Black, White (2 variants)" in result.output

    runner.invoke(args=["save-option", "Size", "S", "M"])
    result = runner.invoke(args=["show-variants", "--group-by", "Color"])
    assert result.exit_code == 0
    assert "Black (2 variants)" in result.output
    assert "White / M" in result.output
    assert "Total inventory: 0 available" in result.output


def test_save_option_replaces_existing(app):
    runner = app.test_cli_runner()
    runner.invoke(args=["save-option", "Size", "S"])
    result = runner.invoke(args=["save-option", "Size", "S", "M", "L"])
    assert "(3 variants)" in result.output


def test_save_option_reports_errors(app):
    runner = app.test_cli_runner()
    result = runner.invoke(args=["save-option", "Size", "S", " S"])
    assert result.exit_code == 1
    assert "values: Values must be unique" in result.output


def test_show_variants_empty(app):
    result = app.test_cli_runner().invoke(args=["show-variants"])
    assert "No variants" in result.output


def test_clear_variants(app):
    runner = app.test_cli_runner()
    runner.invoke(args=["save-option", "Size", "S"])
    result = runner.invoke(args=["clear-variants", "--yes"])
    assert result.exit_code == 0
    assert "No variants" in runner.invoke(args=["show-variants"]).output
