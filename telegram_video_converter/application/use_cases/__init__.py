from .convert_video import ConvertVideoUseCase

__all__ = ["ConvertVideoUseCase"]
