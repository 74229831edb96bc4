from __future__ import annotations
from pathlib import Path
from typing import Any, Dict

import yaml

from scenario_runner.exceptions import StepValidationError

def read_yaml(path: Path) -> Dict[str, Any]:
    path = Path(path)
    with path.open("r", encoding="utf-8") as fh:
        try:
            data = yaml.safe_load(fh)
        except yaml.YAMLError as e:
            raise StepValidationError(f"{path}: invalid YAML: {e}") from e
    if data is None:
        raise StepValidationError(f"{path}: file is empty")
    if not isinstance(data, dict):
        raise StepValidationError(f"{path}: top level must be a mapping")
    return data
