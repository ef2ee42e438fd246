"""
YAML metadata reader.

Two document shapes are understood:

    # contains: fields describing the directory holding the file
    title: Greatest Hits
    artist: [A, B]

    # siblings: one record per item next to the file
    01.flac:
      title: Intro
    disc2/../02.flac:
      title: Outro

Item keys are normalized, so the second sibling above is keyed "02.flac".
"""

import datetime
import logging
from typing import Any, Optional

import yaml

from ..core.components import ComponentKind, split_components
from ..core.models import Config, Metadata, MetaTarget, MetaValue, PathMetaListing
from ..core.normalizer import PathNormalizer
from ..exceptions import MetaParseError
from .reader import MetaReader

logger = logging.getLogger(__name__)

SELF_KEY = '.'

MERGE_TAG = 'tag:yaml.org,2002:merge'


class UniqueKeyLoader(yaml.SafeLoader):
    """SafeLoader that refuses mappings with a repeated key."""

    def construct_mapping(self, node, deep=False):
        if isinstance(node, yaml.MappingNode):
            seen = set()
            for key_node, _ in node.value:
                if key_node.tag == MERGE_TAG:
                    continue
                key = self.construct_object(key_node, deep=True)
                try:
                    repeated = key in seen
                except TypeError:
                    # unhashable keys are reported by the base constructor
                    continue
                if repeated:
                    raise yaml.constructor.ConstructorError(
                        "while constructing a mapping", node.start_mark,
                        f"found duplicate key {key!r}", key_node.start_mark,
                    )
                seen.add(key)
        return super().construct_mapping(node, deep=deep)


class YamlMetaReader(MetaReader):
    """Reads metadata documents written in YAML."""

    def __init__(self, config: Optional[Config] = None):
        super().__init__(config)
        self.normalizer = PathNormalizer(self.config.flavour)

    def from_str(self, text: str, target: MetaTarget) -> PathMetaListing:
        try:
            document = yaml.load(text, Loader=UniqueKeyLoader)
        except yaml.YAMLError as e:
            raise MetaParseError(f"invalid YAML: {e}") from e

        target = MetaTarget(target)
        if target is MetaTarget.CONTAINS:
            return {SELF_KEY: self._to_metadata(document, "document")}
        return self._to_listing(document)

    def _to_listing(self, document: Any) -> PathMetaListing:
        if document is None:
            return {}
        if not isinstance(document, dict):
            raise MetaParseError(f"expected a mapping of item paths, got {_type_name(document)}")

        listing: PathMetaListing = {}
        for key, value in document.items():
            if not isinstance(key, str):
                raise MetaParseError(f"item key {key!r} is not a string")

            item_path = self.normalize_item_path(key)
            if item_path in listing:
                raise MetaParseError(f"duplicate item {key!r} (normalizes to {item_path!r})")

            listing[item_path] = self._to_metadata(value, f"item {key!r}")

        logger.debug(f"Parsed {len(listing)} sibling records")
        return listing

    def normalize_item_path(self, key: str) -> str:
        """
        Normalize a sibling key and check it names an item below the directory.

        Raises:
            MetaParseError: For keys that are empty, absolute or escape upwards.
        """
        item_path = self.normalizer.normalize(key)
        components = split_components(item_path, self.config.flavour)
        first = components[0].kind

        if first is ComponentKind.CUR_DIR:
            raise MetaParseError(f"item key {key!r} does not name an item")
        if first in (ComponentKind.PREFIX, ComponentKind.ROOT_DIR):
            raise MetaParseError(f"item key {key!r} is an absolute path")
        if first is ComponentKind.PARENT_DIR:
            raise MetaParseError(f"item key {key!r} points outside the directory")
        return item_path

    def _to_metadata(self, value: Any, where: str) -> Metadata:
        if value is None:
            return {}
        if not isinstance(value, dict):
            raise MetaParseError(f"{where}: expected a mapping of fields, got {_type_name(value)}")
        return {
            self._field_name(name, where): to_meta_value(field_value, f"{where}, field {name!r}")
            for name, field_value in value.items()
        }

    @staticmethod
    def _field_name(name: Any, where: str) -> str:
        if not isinstance(name, str):
            raise MetaParseError(f"{where}: field name {name!r} is not a string")
        return name


def to_meta_value(value: Any, where: str = "value") -> MetaValue:
    """
    Convert a parsed YAML node to a MetaValue.

    Scalars are kept as text: booleans become "true"/"false" and dates use
    ISO format.
    """
    if value is None or isinstance(value, str):
        return value
    if isinstance(value, bool):
        return 'true' if value else 'false'
    if isinstance(value, (int, float)):
        return str(value)
    if isinstance(value, (datetime.date, datetime.datetime)):
        return value.isoformat()
    if isinstance(value, list):
        return [to_meta_value(item, where) for item in value]
    if isinstance(value, dict):
        result = {}
        for key, item in value.items():
            if not isinstance(key, str):
                raise MetaParseError(f"{where}: key {key!r} is not a string")
            result[key] = to_meta_value(item, f"{where}.{key}")
        return result
    raise MetaParseError(f"{where}: unsupported value of type {_type_name(value)}")


def _type_name(value: Any) -> str:
    return type(value).__name__
