"""Output sinks for exporting plan results."""

from debt_planner.sinks.json_file import JsonFileSink
from debt_planner.sinks.serialization import serialize_value, to_dict, to_dict_fast

__all__ = ["JsonFileSink", "serialize_value", "to_dict", "to_dict_fast"]
