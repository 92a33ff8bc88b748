"""Flask CLI commands for admin operations."""
import click
from flask import current_app


def _editor(group_by="none"):
    from variant_builder import extensions
    from variant_builder.services.variant_editor import VariantEditor

    config = current_app.config
    return VariantEditor.load(
        extensions.record_store,
        group_by=group_by,
        max_options=config["MAX_OPTIONS"],
        separator=config["VARIANT_TITLE_SEPARATOR"],
        keys=(
            config["OPTIONS_RECORD_KEY"],
            config["PRICES_RECORD_KEY"],
            config["AVAILABILITY_RECORD_KEY"],
        ),
    )


def register_cli(app):
    @app.cli.command("init-db")
    def init_db():
        """Create the record table."""
        from variant_builder.extensions import db

        db.create_all()
        click.echo("Database initialized.")

    @app.cli.command("show-variants")
    @click.option("--group-by", default="none", help="Option name to group by")
    def show_variants(group_by):
        """Print every variant with its price and availability."""
        editor = _editor(group_by)
        if not editor.variants:
            click.echo("No variants. Add an option first.")
            return

        groups = editor.group_rows()
        if groups is None:
            for row in editor.variant_rows():
                click.echo(
                    f"{row['id']:<12} {row['title']:<30} "
                    f"{row['price'] or '-':>10} {row['availability']:>6}"
                )
        else:
            for group in groups:
                click.echo(
                    f"{group['key']} ({group['count']} variants) "
                    f"{group['price_display'] or '-'}"
                )
                for row in group["variants"]:
                    click.echo(
                        f"  {row['id']:<12} {row['title']:<28} "
                        f"{row['price'] or '-':>10} {row['availability']:>6}"
                    )
        click.echo(f"Total inventory: {editor.total_inventory()} available")

    @app.cli.command("save-option")
    @click.argument("name")
    @click.argument("values", nargs=-1, required=True)
    def save_option(name, values):
        """Create or replace the option called NAME with VALUES."""
        from variant_builder.errors import ValidationError

        editor = _editor()
        existing = editor.option_store.get_by_name(name)
        try:
            option = editor.save_option(
                existing.id if existing else None, name, list(values)
            )
        except ValidationError as e:
            for field, message in e.errors.items():
                click.echo(f"{field}: {message}", err=True)
            raise SystemExit(1)
        if option is None:
            click.echo("Option limit reached.", err=True)
            raise SystemExit(1)
        click.echo(
            f"Saved {option.name}: {', '.join(option.values)} "
            f"({len(editor.variants)} variants)"
        )

    @app.cli.command("clear-variants")
    @click.confirmation_option(prompt="Delete all options, prices and availability?")
    def clear_variants():
        """Remove the three persisted variant records."""
        from variant_builder import extensions

        config = current_app.config
        for key in (
            config["OPTIONS_RECORD_KEY"],
            config["PRICES_RECORD_KEY"],
            config["AVAILABILITY_RECORD_KEY"],
        ):
            extensions.record_store.delete(key)
        click.echo("Variant records cleared.")
