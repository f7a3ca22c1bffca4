"""
Data structures parsed from gallery query responses.

The gallery speaks camelCase JSON; each dataclass here exposes snake_case
attributes and a ``from_dict`` classmethod that parses the raw shape. All
instances are frozen, and sequences are stored as tuples, so parsed results
cannot be mutated by the resolvers that hand them out.
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional, Tuple, Union

Number = Union[int, float]


def _as_str(value: Any) -> str:
    if value is None:
        return ""
    return str(value)


def _parse_statistics(raw: Any) -> Mapping[str, Number]:
    """
    Normalize extension statistics into a read-only mapping.

    The gallery returns a list of ``{"statisticName": ..., "value": ...}``
    records; an already-shaped mapping is accepted as well.
    """
    stats: Dict[str, Number] = {}
    if isinstance(raw, Mapping):
        stats.update(raw)
    elif isinstance(raw, list):
        for item in raw:
            if not isinstance(item, Mapping):
                continue
            name = item.get("statisticName")
            if name is None:
                continue
            stats[str(name)] = item.get("value", 0)
    return MappingProxyType(stats)


@dataclass(frozen=True)
class PublisherInfo:
    """Identity of an extension's publisher."""

    publisher_id: str = ""
    publisher_name: str = ""
    display_name: str = ""
    flags: str = ""
    domain: Optional[str] = None
    is_domain_verified: bool = False

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "PublisherInfo":
        return cls(
            publisher_id=_as_str(data.get("publisherId")),
            publisher_name=_as_str(data.get("publisherName")),
            display_name=_as_str(data.get("displayName")),
            flags=_as_str(data.get("flags")),
            domain=data.get("domain"),
            is_domain_verified=bool(data.get("isDomainVerified", False)),
        )


@dataclass(frozen=True)
class ExtensionFile:
    """One downloadable asset of an extension version."""

    asset_type: str
    """Asset kind tag, e.g. 'Microsoft.VisualStudio.Services.VSIXPackage'"""

    source: str
    """URL the asset is served from"""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "ExtensionFile":
        return cls(
            asset_type=_as_str(data.get("assetType")),
            source=_as_str(data.get("source")),
        )


@dataclass(frozen=True)
class ExtensionVersion:
    """One published release of an extension."""

    version: str
    """Version string, compared by exact equality only"""

    flags: str = ""
    last_updated: str = ""
    files: Tuple[ExtensionFile, ...] = ()
    asset_uri: str = ""
    fallback_asset_uri: str = ""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "ExtensionVersion":
        return cls(
            version=_as_str(data.get("version")),
            flags=_as_str(data.get("flags")),
            last_updated=_as_str(data.get("lastUpdated")),
            files=tuple(
                ExtensionFile.from_dict(item)
                for item in data.get("files") or ()
                if isinstance(item, Mapping)
            ),
            asset_uri=_as_str(data.get("assetUri")),
            fallback_asset_uri=_as_str(data.get("fallbackAssetUri")),
        )


@dataclass(frozen=True)
class ExtensionInfo:
    """
    One marketplace extension.

    ``versions`` keeps the gallery's order, which is newest first, so
    ``versions[0]`` is the latest release.
    """

    publisher: PublisherInfo
    extension_id: str
    extension_name: str
    display_name: str = ""
    flags: str = ""
    last_updated: str = ""
    published_date: str = ""
    release_date: str = ""
    present_in_conflict_list: str = ""
    short_description: str = ""
    versions: Tuple[ExtensionVersion, ...] = ()
    categories: Tuple[str, ...] = ()
    tags: Tuple[str, ...] = ()
    statistics: Mapping[str, Number] = field(
        default_factory=lambda: MappingProxyType({})
    )
    deployment_type: int = 0

    @property
    def extension_identifier(self) -> str:
        """The "<publisher>.<extension>" identifier of this extension."""
        return f"{self.publisher.publisher_name}.{self.extension_name}"

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "ExtensionInfo":
        publisher_data = data.get("publisher")
        if not isinstance(publisher_data, Mapping):
            publisher_data = {}
        return cls(
            publisher=PublisherInfo.from_dict(publisher_data),
            extension_id=_as_str(data.get("extensionId")),
            extension_name=_as_str(data.get("extensionName")),
            display_name=_as_str(data.get("displayName")),
            flags=_as_str(data.get("flags")),
            last_updated=_as_str(data.get("lastUpdated")),
            published_date=_as_str(data.get("publishedDate")),
            release_date=_as_str(data.get("releaseDate")),
            present_in_conflict_list=_as_str(data.get("presentInConflictList")),
            short_description=_as_str(data.get("shortDescription")),
            versions=tuple(
                ExtensionVersion.from_dict(item)
                for item in data.get("versions") or ()
                if isinstance(item, Mapping)
            ),
            categories=tuple(str(c) for c in data.get("categories") or ()),
            tags=tuple(str(t) for t in data.get("tags") or ()),
            statistics=_parse_statistics(data.get("statistics")),
            deployment_type=int(data.get("deploymentType") or 0),
        )


@dataclass(frozen=True)
class SearchResults:
    """One result group of a gallery query."""

    extensions: Tuple[ExtensionInfo, ...] = ()

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "SearchResults":
        return cls(
            extensions=tuple(
                ExtensionInfo.from_dict(item)
                for item in data.get("extensions") or ()
                if isinstance(item, Mapping)
            )
        )
