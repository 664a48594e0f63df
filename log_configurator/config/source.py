"""
Configuration source

Opaque holder of configuration bytes and where they came from.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, Union
from urllib.error import URLError
from urllib.request import urlopen

from log_configurator.config.location import resolve_location
from log_configurator.errors import ConfigurationError


@dataclass(frozen=True)
class ConfigurationSource:
    """
    Configuration bytes plus their location.

    ``location`` is a URI string, or None for in-memory sources.
    """

    data: bytes = field(repr=False)
    location: Optional[str] = None

    @classmethod
    def from_string(cls, text: str, location: Optional[str] = None) -> "ConfigurationSource":
        """Create a source from text."""
        return cls(text.encode("utf-8"), location)

    @classmethod
    def from_file(cls, path: Union[str, Path]) -> "ConfigurationSource":
        """
        Read a source from a local file.

        Raises:
            InvalidLocationError: If the path cannot be resolved
            ConfigurationError: If the file cannot be read
        """
        path = Path(path)
        uri = resolve_location(path)
        try:
            return cls(path.read_bytes(), uri)
        except OSError as e:
            raise ConfigurationError(f"Cannot read configuration file {path}", e) from e

    @classmethod
    def from_uri(cls, uri: str, timeout: Optional[float] = 10.0) -> "ConfigurationSource":
        """
        Read a source from a URI (file:, http:, https:).

        Args:
            uri: Resolved URI
            timeout: Network timeout in seconds

        Raises:
            ConfigurationError: If the URI cannot be read
        """
        try:
            with urlopen(uri, timeout=timeout) as response:
                return cls(response.read(), uri)
        except (OSError, URLError, ValueError) as e:
            raise ConfigurationError(f"Cannot read configuration at {uri}", e) from e

    def text(self, encoding: str = "utf-8") -> str:
        """Decode the configuration bytes."""
        try:
            return self.data.decode(encoding)
        except UnicodeDecodeError as e:
            raise ConfigurationError(
                f"Configuration at {self.location or '<memory>'} is not valid {encoding}", e
            ) from e

    def __str__(self) -> str:
        return self.location or "<memory>"
