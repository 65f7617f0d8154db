from pathlib import Path

import ruamel.yaml


def _yaml() -> ruamel.yaml.YAML:
    yaml = ruamel.yaml.YAML(typ="safe")
    yaml.default_flow_style = False
    return yaml


def load_yaml(path: str | Path) -> dict:
    """Load a YAML file into plain Python containers. Empty files load as {}."""
    with open(path, "r") as f:
        data = _yaml().load(f)
    return data if data is not None else {}


def write_yaml(data: dict, path: str | Path) -> None:
    with open(path, "w") as f:
        _yaml().dump(data, f)
