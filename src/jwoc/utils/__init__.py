from jwoc.utils.output import OutputFormat, emit
from jwoc.utils.serialization import to_plain_data

__all__ = ["OutputFormat", "emit", "to_plain_data"]
