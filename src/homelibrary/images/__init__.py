# ABOUTME: Cover image caching and loading.
# ABOUTME: Exports the bounded in-memory ImageCache and the CoverImageLoader built on it.

from homelibrary.images.cache import ImageCache
from homelibrary.images.loader import CoverImageLoader

__all__ = ["CoverImageLoader", "ImageCache"]
