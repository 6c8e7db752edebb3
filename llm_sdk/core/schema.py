from typing import Any, Dict

from pydantic import TypeAdapter


def to_schema(tp: Any) -> Dict[str, Any]:
    """
    Derive the JSON-Schema document of an argument type.

    Put all the parameters of a function you want the model to call into one
    pydantic model (or dataclass / TypedDict) and pass that type here; the
    result is what goes under ``function.parameters`` of a tool definition.
    """
    return TypeAdapter(tp).json_schema()
