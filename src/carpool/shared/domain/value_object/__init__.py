from .pagination import Page, Paginated, PaginationMeta, PaginationParams

__all__ = ["Page", "Paginated", "PaginationMeta", "PaginationParams"]
