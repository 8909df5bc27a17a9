from typing import Any, Callable, Dict

from epcsaft.common.exceptions import UnknownModel

MODELS: Dict[str, Callable[[Dict[str, Any]], Any]] = {}  # name -> factory(params: dict)
PERMITTIVITY_MODELS: Dict[str, Callable[[Dict[str, Any]], Any]] = {}  # json tag -> factory


def register(name: str, table: Dict[str, Callable] = MODELS):
    def deco(fn):
        table[name] = fn
        return fn
    return deco


def build(name: str, params: dict, table: Dict[str, Callable] = MODELS) -> Any:
    if name not in table:
        raise UnknownModel(f"Model '{name}' not registered")
    return table[name](params)
