"""Errors raised while cleaning up duplicated notifications."""


class DuplicateCleanupError(RuntimeError):
    """Base error for failures of the duplicate cleanup engine."""


class StoreQueryError(DuplicateCleanupError):
    """Error lanzado cuando no se pudo agrupar los registros de un almacén."""


class StoreDeleteError(DuplicateCleanupError):
    """Error lanzado cuando falla la eliminación masiva de un grupo duplicado."""

    def __init__(self, message: str, *, ids: list[int] | None = None) -> None:
        super().__init__(message)
        self.ids = list(ids or [])


__all__ = ["DuplicateCleanupError", "StoreDeleteError", "StoreQueryError"]
