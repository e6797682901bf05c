# Copyright 2025 Hathor Labs
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#    http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

import os
from copy import deepcopy
from pathlib import Path
from typing import Any, Optional, TypeVar, Union

import yaml
from pydantic import BaseModel

T = TypeVar('T', bound=BaseModel)

_EXTENDS_KEY = 'extends'


def deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """
    Return a new dict with `override` recursively merged over `base`, neither input is modified.

    >>> deep_merge(dict(a=1, b=dict(c=2, d=3)), dict(b=dict(d=5), e=6)) == dict(a=1, b=dict(c=2, d=5), e=6)
    True
    """
    merged = deepcopy(base)
    for key, value in override.items():
        if isinstance(merged.get(key), dict) and isinstance(value, dict):
            merged[key] = deep_merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def dict_from_yaml(filepath: Union[Path, str]) -> dict[str, Any]:
    """Read a yaml file that must contain a mapping, an empty file is an empty mapping."""
    if not os.path.isfile(filepath):
        raise ValueError(f"'{filepath}' is not a file")

    with open(filepath, 'r') as file:
        contents = yaml.safe_load(file)

    if contents is None:
        return {}
    if not isinstance(contents, dict):
        raise ValueError(f"'{filepath}' cannot be parsed as a dictionary")
    return contents


def dict_from_extended_yaml(filepath: Union[Path, str], *, custom_root: Optional[Path] = None) -> dict[str, Any]:
    """
    Read a yaml file that may extend another one through the 'extends' key.

    The extended file is looked up relative to the extending file first and then relative to `custom_root`. Values
    of the extending file take precedence, nested mappings are merged.
    """
    contents = dict_from_yaml(filepath)
    file_to_extend = contents.pop(_EXTENDS_KEY, None)
    if not file_to_extend:
        return contents

    filepath_to_extend = Path(filepath).parent / str(file_to_extend)
    if not os.path.isfile(filepath_to_extend) and custom_root:
        filepath_to_extend = custom_root / str(file_to_extend)

    try:
        base = dict_from_extended_yaml(filepath_to_extend, custom_root=custom_root)
    except RecursionError as e:
        raise ValueError('Cannot parse yaml with recursive extensions.') from e

    return deep_merge(base, contents)


def load_yaml_settings(model: type[T], filepath: Union[Path, str]) -> T:
    """Load and validate a settings model from a (possibly extended) yaml file."""
    settings_dict = dict_from_extended_yaml(filepath, custom_root=Path(__file__).parent)
    return model.model_validate(settings_dict)
