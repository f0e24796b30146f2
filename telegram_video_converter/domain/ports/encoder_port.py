from __future__ import annotations

from abc import ABC, abstractmethod

from ..entities.conversion import ConversionRequest


class EncoderPort(ABC):
    @property
    @abstractmethod
    def binary(self) -> str:
        raise NotImplementedError

    @abstractmethod
    def is_available(self) -> bool:
        raise NotImplementedError

    @abstractmethod
    def build_command(self, request: ConversionRequest) -> list[str]:
        raise NotImplementedError

    @abstractmethod
    def encode(self, request: ConversionRequest) -> int:
        """Run the encoder to completion and return its exit status."""
        raise NotImplementedError
