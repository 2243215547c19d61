from .navigation_interfaces import IFragmentProvider, IHistoryAdapter, IPageSurface

__all__ = ["IFragmentProvider", "IHistoryAdapter", "IPageSurface"]
