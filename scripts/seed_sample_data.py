#!/usr/bin/env python3
"""Seed a sample option set with prices for local development."""
import sys
import os

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from variant_builder import create_app
from variant_builder import extensions
from variant_builder.extensions import db
from variant_builder.services.variant_editor import VariantEditor

app = create_app()

SAMPLE_OPTIONS = [
    ("Color", ["Black", "White", "Navy"]),
    ("Size", ["S", "M", "L", "XL"]),
]

SAMPLE_GROUP_PRICES = {
    "Black": "1250.00",
    "White": "1150.00",
    "Navy": "1350.00",
}


def seed():
    with app.app_context():
        db.create_all()

        editor = VariantEditor.load(
            extensions.record_store,
            keys=(
                app.config["OPTIONS_RECORD_KEY"],
                app.config["PRICES_RECORD_KEY"],
                app.config["AVAILABILITY_RECORD_KEY"],
            ),
        )
        if editor.options:
            print("Options already exist, skipping seed.")
            return

        for name, values in SAMPLE_OPTIONS:
            editor.save_option(None, name, values)

        editor.set_group_by("Color")
        for color, price in SAMPLE_GROUP_PRICES.items():
            editor.set_group_price(color, price)

        for i, variant in enumerate(editor.variants):
            editor.set_availability(variant.id, 5 + i)

        print(f"Seeded {len(editor.variants)} variants:")
        for row in editor.variant_rows():
            print(f"  {row['title']:<16} {row['price']:>8}  x{row['availability']}")


if __name__ == "__main__":
    seed()
