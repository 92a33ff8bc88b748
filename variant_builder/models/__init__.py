from variant_builder.models.option import Option
from variant_builder.models.variant import Variant, VariantState
from variant_builder.models.record import StoredRecord

__all__ = ["Option", "Variant", "VariantState", "StoredRecord"]
