from .use_cases import ConvertVideoUseCase

__all__ = ["ConvertVideoUseCase"]
