"""Encoding conversion between native path text and encoded bytes.

Native path text is a ``str``. Byte-oriented sources and byte-oriented
observers go through a Converter. Which converter is used is decided in
this order:

1. A converter passed explicitly to the operation
2. The context-scoped converter installed with ``using_converter()``
3. The process default, created lazily from settings on first use and
   replaceable with ``imbue()``

The context-scoped converter is backed by a ContextVar and is safe to use
from threads and asyncio tasks. The process default is shared mutable
state: configure it before starting concurrent work and do not call
``imbue()`` while other threads may be converting.
"""

import codecs
import logging
from abc import ABC, abstractmethod
from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar

from nativepath.core.errors import ConfigurationError, EncodingError
from nativepath.encoding.settings import load_settings

logger = logging.getLogger(__name__)


class Converter(ABC):
    """Abstract base class for encoding converters.

    A converter translates between the native text form of a path and an
    encoded byte form.

    Example:
        >>> conv = CodecConverter("utf-8")
        >>> conv.decode(b"caf\\xc3\\xa9")
        'café'
    """

    @property
    @abstractmethod
    def encoding(self) -> str:
        """Return the codec name this converter uses."""

    @abstractmethod
    def decode(self, data: bytes) -> str:
        """Convert encoded bytes to native text.

        Raises:
            EncodingError: If the bytes are malformed for this encoding.
        """

    @abstractmethod
    def encode(self, text: str) -> bytes:
        """Convert native text to encoded bytes.

        Raises:
            EncodingError: If the text is not representable in this encoding.
        """


class CodecConverter(Converter):
    """Converter backed by a registered Python codec.

    Attributes:
        errors: Codec error handler ("strict", "surrogateescape", ...).
    """

    def __init__(self, encoding: str, errors: str = "strict") -> None:
        """Initialize CodecConverter.

        Args:
            encoding: Codec name, e.g. "utf-8".
            errors: Codec error handler name.

        Raises:
            ConfigurationError: If the codec or error handler is unknown.
        """
        try:
            info = codecs.lookup(encoding)
        except LookupError as e:
            raise ConfigurationError(f"Unknown encoding: {encoding}") from e
        try:
            codecs.lookup_error(errors)
        except LookupError as e:
            raise ConfigurationError(f"Unknown error handler: {errors}") from e
        self._encoding = info.name
        self.errors = errors

    @property
    def encoding(self) -> str:
        """Return the normalized codec name."""
        return self._encoding

    def decode(self, data: bytes) -> str:
        try:
            return bytes(data).decode(self._encoding, self.errors)
        except UnicodeDecodeError as e:
            raise EncodingError(f"Cannot decode path bytes as {self._encoding}: {e}") from e

    def encode(self, text: str) -> bytes:
        try:
            return text.encode(self._encoding, self.errors)
        except UnicodeEncodeError as e:
            raise EncodingError(f"Cannot encode path text as {self._encoding}: {e}") from e

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CodecConverter):
            return NotImplemented
        return self._encoding == other._encoding and self.errors == other.errors

    def __hash__(self) -> int:
        return hash((self._encoding, self.errors))

    def __repr__(self) -> str:
        return f"CodecConverter({self._encoding!r}, errors={self.errors!r})"


# Module-level process default (created on first use)
_default_converter: Converter | None = None

# Context-scoped override installed by using_converter()
_scoped_converter: ContextVar[Converter | None] = ContextVar(
    "nativepath_scoped_converter", default=None
)


def _build_default_converter() -> Converter:
    """Build the default converter from settings.

    Raises:
        ConfigurationError: If settings are invalid or name an unusable codec.
    """
    settings = load_settings()
    converter = CodecConverter(settings.effective_encoding, settings.effective_errors)
    logger.debug("Created default converter %r", converter)
    return converter


def get_default_converter() -> Converter:
    """Get the process default converter, creating and caching it if necessary.

    Returns:
        The process default Converter.

    Raises:
        ConfigurationError: If the default converter cannot be created.
    """
    global _default_converter
    if _default_converter is None:
        _default_converter = _build_default_converter()
    return _default_converter


def reload_converter() -> Converter:
    """Force rebuild of the process default converter from settings.

    Useful when the settings file or environment has changed at runtime.

    Returns:
        Newly created default Converter.
    """
    global _default_converter
    _default_converter = _build_default_converter()
    return _default_converter


def imbue(converter: Converter | None) -> Converter | None:
    """Replace the process default converter.

    Passing None drops the current default so the next use rebuilds it
    from settings. The previous default is returned so callers can restore
    it with another ``imbue()`` call.

    Args:
        converter: New process default, or None to reset.

    Returns:
        The previous default, or None if it had not been created yet.
    """
    global _default_converter
    previous = _default_converter
    _default_converter = converter
    logger.debug("Imbued default converter %r (previous %r)", converter, previous)
    return previous


def get_converter(converter: Converter | None = None) -> Converter:
    """Resolve the converter for a conversion.

    Args:
        converter: Explicit converter; returned unchanged when given.

    Returns:
        The explicit converter, else the context-scoped one, else the
        process default.

    Raises:
        ConfigurationError: If the process default is needed and cannot be created.
    """
    if converter is not None:
        return converter
    scoped = _scoped_converter.get()
    if scoped is not None:
        return scoped
    return get_default_converter()


@contextmanager
def using_converter(converter: Converter) -> Iterator[Converter]:
    """Install a converter for the current context.

    Example:
        >>> with using_converter(CodecConverter("latin-1")):
        ...     p = Path(b"caf\\xe9")

    Args:
        converter: Converter to use inside the block.

    Yields:
        The installed converter.
    """
    token = _scoped_converter.set(converter)
    try:
        yield converter
    finally:
        _scoped_converter.reset(token)
