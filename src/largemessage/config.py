"""LargeMessageConfig: settings shared by the storing and retrieving sides."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Final

from largemessage.blobs import BlobStorageClientFactory
from largemessage.errors import ConfigurationError, UnknownSchemeError
from largemessage.ids import IdGenerator, RandomUUIDGenerator, id_generator_from_name
from largemessage.retrieving import RetrievingClient
from largemessage.serde import as_str_object_dict, optional_int, optional_string
from largemessage.storing import StoringClient
from largemessage.uri import BlobStorageURI

DEFAULT_MAX_SIZE: Final = 1000 * 1000


@dataclass(frozen=True, slots=True)
class LargeMessageConfig:
    """Threshold, storage location, naming and client wiring for large messages.

    ``base_path`` and ``id_generator`` are only required once a payload has to
    be offloaded; a config without them still frames small payloads inline.
    """

    max_size: int = DEFAULT_MAX_SIZE
    base_path: BlobStorageURI | None = None
    id_generator: IdGenerator | None = field(default_factory=RandomUUIDGenerator)
    client_factories: Mapping[str, BlobStorageClientFactory] = field(
        default_factory=lambda: MappingProxyType({}),
        hash=False,
    )

    def __post_init__(self) -> None:
        """Validate the threshold and freeze the factory mapping."""
        if not isinstance(self.max_size, int) or isinstance(self.max_size, bool) or self.max_size < 0:
            msg = "LargeMessageConfig.max_size must be a non-negative int."
            raise ConfigurationError(msg)
        object.__setattr__(self, "client_factories", MappingProxyType(dict(self.client_factories)))

    @classmethod
    def from_dict(
        cls,
        value: Mapping[str, object],
        *,
        client_factories: Mapping[str, BlobStorageClientFactory] | None = None,
    ) -> "LargeMessageConfig":
        """Build a config from plain settings.

        Recognized keys: ``max_byte_size``, ``base_path`` and ``id_generator``
        (``"uuid"`` or ``"sha256"``). Client factories are code, not settings,
        and are passed separately.
        """
        data = as_str_object_dict(value, field_name="LargeMessageConfig")
        max_size = optional_int(data.get("max_byte_size"), field_name="LargeMessageConfig.max_byte_size")
        raw_base_path = optional_string(data.get("base_path"), field_name="LargeMessageConfig.base_path")
        generator_name = optional_string(data.get("id_generator"), field_name="LargeMessageConfig.id_generator")
        id_generator = id_generator_from_name(generator_name) if generator_name is not None else RandomUUIDGenerator()
        return cls(
            max_size=DEFAULT_MAX_SIZE if max_size is None else max_size,
            base_path=BlobStorageURI.create(raw_base_path) if raw_base_path is not None else None,
            id_generator=id_generator,
            client_factories=client_factories or {},
        )

    def create_storer(self) -> StoringClient:
        """Build a StoringClient writing to the base path's blob storage."""
        client = None
        if self.base_path is not None:
            factory = self.client_factories.get(self.base_path.scheme)
            if factory is None:
                raise UnknownSchemeError(self.base_path.scheme)
            client = factory()
        return StoringClient(
            client,
            self.max_size,
            base_path=self.base_path,
            id_generator=self.id_generator,
        )

    def create_retriever(self) -> RetrievingClient:
        """Build a RetrievingClient over the configured client factories."""
        return RetrievingClient(self.client_factories)
