"""YAML configuration for the tgf command."""

import logging
from abc import ABC, abstractmethod
from io import StringIO
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, TextIO, Tuple, Type, TypeVar

import yaml

C = TypeVar("C", bound="Config")


class Config(ABC):

    """Settings read from a YAML mapping.

    Subclasses describe their keys with the "schema" property, which maps each
    key to its default value and expected type. After loading, call validate()
    to fill in defaults and check types:

        cfg = MyConfig.load(Path("settings.yml"))
        cfg.validate()
        cfg["some_key"]

    Problems are logged as errors instead of raised. A value with the wrong type
    is replaced by its default.
    """

    def __init__(self, path: Optional[Path], data: Mapping[str, Any]):
        self.path = path
        self.data = dict(data)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(path={self.path!r}, data={self.data!r})"

    @property
    @abstractmethod
    def schema(self) -> Dict[str, Tuple[Any, type]]:
        """Known keys, each mapped to (default, expected type)."""

    def validate(self, **defaults: Any):
        """Fill in defaults and type-check every known key.

        Keyword arguments override the schema defaults for this call.
        """
        where = self.path or "config"
        for key in self.data:
            if key not in self.schema:
                logging.warning("%s: unknown key %r", where, key)
        checked = {}
        for key, (default, kind) in self.schema.items():
            default = defaults.get(key, default)
            value = self.data.get(key, default)
            # bool is a subclass of int, but "root: yes" is not a node id.
            if not isinstance(value, kind) or (
                isinstance(value, bool) and kind is not bool
            ):
                logging.error(
                    "%s: %s should be %s, not %r", where, key, kind.__name__, value
                )
                value = default
            checked[key] = value
        self.data = checked

    @classmethod
    def load(cls: Type[C], path: Path) -> C:
        """Load configuration from a file."""
        with open(path, encoding="utf-8") as f:
            return cls.parse(path, f)

    @classmethod
    def loads(cls: Type[C], path: Path, content: str) -> C:
        """Load configuration from a string, using path in messages."""
        return cls.parse(path, StringIO(content))

    @classmethod
    def parse(cls: Type[C], path: Path, stream: TextIO) -> C:
        try:
            data = yaml.safe_load(stream)
        except yaml.YAMLError as ex:
            logging.error("cannot parse %s: %s", path, ex)
            return cls(path, {})
        if data is None:
            return cls(path, {})
        if not isinstance(data, dict):
            logging.error("invalid YAML in %s: expected a mapping", path)
            return cls(path, {})
        return cls(path, data)

    def __getitem__(self, key: str) -> Any:
        return self.data[key]

    def get(self, key: str) -> Optional[Any]:
        """Get a configuration value, or None if it does not exist."""
        return self.data.get(key)


class DemoConfig(Config):

    """Settings for the tgf command, read from tgf.yml."""

    FILENAME = "tgf.yml"

    schema = {
        "graph_file": ("gr.txt", str),
        "root": (0, int),
    }

    @classmethod
    def find(cls, directory: Optional[Path] = None) -> "DemoConfig":
        """Load tgf.yml from directory (default: cwd), or use the defaults."""
        path = (directory or Path.cwd()) / cls.FILENAME
        if path.is_file():
            logging.info("loading config %s", path)
            cfg = cls.load(path)
        else:
            cfg = cls(None, {})
        cfg.validate()
        logging.debug("config: %r", cfg)
        return cfg
