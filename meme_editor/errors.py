class MemeRenderError(Exception):
    """Base class for every failure the renderer reports to its caller."""


class MissingImageError(MemeRenderError):
    def __init__(self, message: str = "Please choose a photo first.") -> None:
        super().__init__(message)


class InvalidCanvasError(MemeRenderError):
    pass


class FontResolutionError(MemeRenderError):
    def __init__(self, family: str, fallback: str) -> None:
        super().__init__(f"Font {family!r} is not available; use {fallback!r} instead")
        self.family = family
        self.fallback = fallback
