"""Factory for creating atlas image decoders."""

from __future__ import annotations

from .base import ImageDecoder


class DecoderNotAvailableError(LookupError):
    """Exception raised when no decoder is registered under a name."""

    pass


class DecoderFactory:
    """Registry of image decoder implementations keyed by name."""

    DEFAULT_DECODER = "pillow"

    _decoders: dict[str, type[ImageDecoder]] = {}

    @classmethod
    def register_decoder(
        cls, decoder_name: str, decoder_class: type[ImageDecoder]
    ) -> None:
        """Register a decoder implementation.

        Args:
            decoder_name: Name used to select the decoder ('pillow', 'memory')
            decoder_class: Decoder class to register
        """
        cls._decoders[decoder_name] = decoder_class

    @classmethod
    def get_available_decoders(cls) -> list[str]:
        """Get list of registered decoder names.

        Returns:
            List of decoder names
        """
        return list(cls._decoders.keys())

    @classmethod
    def create_decoder(cls, decoder_name: str | None = None) -> ImageDecoder:
        """Create a decoder by name.

        Args:
            decoder_name: Registered decoder name (defaults to 'pillow')

        Returns:
            New decoder instance

        Raises:
            ValueError: If the name is empty
            DecoderNotAvailableError: If no decoder is registered under the name
        """
        if decoder_name is None:
            decoder_name = cls.DEFAULT_DECODER

        if not decoder_name or not isinstance(decoder_name, str):
            raise ValueError(f"Invalid decoder name: {decoder_name!r}")

        if decoder_name not in cls._decoders:
            available = list(cls._decoders.keys())
            raise DecoderNotAvailableError(
                f"Decoder '{decoder_name}' is not available. Available decoders: {available}"
            )

        return cls._decoders[decoder_name]()


def _register_decoders() -> None:
    """Register the decoders shipped with the package."""
    from .memory import MemoryDecoder

    DecoderFactory.register_decoder("memory", MemoryDecoder)

    try:
        from .pillow import PillowDecoder

        DecoderFactory.register_decoder("pillow", PillowDecoder)
    except ImportError:
        pass  # Pillow not installed


# Auto-register decoders
_register_decoders()
